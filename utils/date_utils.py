import pandas as pd
from datetime import datetime, timedelta, date as dt_date
from typing import Any, List


def normalise_datetime(value: Any) -> datetime:
    """
    Convert input to a naive datetime.datetime object.
    Supports date/datetime objects, pandas Timestamps and strings like
    '2024-06-02', '2024-06-02T08:00:00Z', '2024/06/02'.

    Timezone-aware values keep their wall-clock time and drop the offset, so the
    calendar day stays the one written in the record.
    """
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    elif isinstance(value, str):
        try:
            # pandas handles all common formats using dateutil.parser under the hood
            value = pd.to_datetime(value.strip(), errors="raise").to_pydatetime()
        except Exception as e:
            raise ValueError(f"Could not parse date string '{value}': {e}")
    elif isinstance(value, dt_date) and not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())

    if not isinstance(value, datetime):
        raise ValueError(f"Unsupported date type: {type(value)}")
    return value.replace(tzinfo=None)


def normalise_date(value: Any) -> dt_date:
    """Convert input to a datetime.date object (calendar day only)."""
    if isinstance(value, dt_date) and not isinstance(value, datetime):
        return value
    return normalise_datetime(value).date()


def today() -> dt_date:
    return dt_date.today()


def add_days(start: Any, days: int) -> datetime:
    """Start of the day `days` after `start`."""
    return datetime.combine(normalise_date(start), datetime.min.time()) + timedelta(days=days)


def day_range(start: Any, num_days: int) -> List[dt_date]:
    """Calendar days [start, start + num_days)."""
    first = normalise_date(start)
    return [first + timedelta(days=i) for i in range(num_days)]
