import pandas as pd
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Tuple
from schemas.records import Reminder, WorkforceRequirements
from schemas.reports import DayForecast, TaskBreakdown
from core.catalog import ProtocolCatalog
from core.workforce import calculate_workforce, use_defaults
from scheduler.grouping import group_by_task
from utils.constants import FORECAST_WINDOW_DAYS
from utils.date_utils import day_range, normalise_date, today
from utils.logger import get_logger

if TYPE_CHECKING:
    from core.state import ReminderStore

logger = get_logger(__name__)

FORECAST_COLUMNS = ["workers", "technicians", "doctors", "total", "tasks"]


def resolve_requirements(
    task_type: str, members: Sequence[Reminder], catalog: ProtocolCatalog
) -> Tuple[WorkforceRequirements, str]:
    """
    Staffing ratios for a group of same-task reminders.

    The first reminder (in order) that traces back to a protocol step carrying
    workforce requirements supplies the ratios; otherwise the task-type
    defaults apply. Returns the ratios and their source ('step' or 'default').
    """
    for r in members:
        if not (r.syncMethodId and r.syncStepId) or r.syncMethodId not in catalog:
            continue
        step = catalog.get(r.syncMethodId).get_step(r.syncStepId)
        if step is not None and step.workforceRequirements is not None and not step.workforceRequirements.is_empty():
            return step.workforceRequirements, "step"
    return use_defaults(task_type), "default"


def forecast_day(store: "ReminderStore", day: Any) -> DayForecast:
    """Staffing needed on one calendar day for the incomplete reminders due then."""
    entry = DayForecast(date=normalise_date(day))
    day_reminders = [r for r in store.for_date(day) if not r.completed]

    for group, members in group_by_task(day_reminders):
        requirements, source = resolve_requirements(group.type, members, store.catalog)
        needed = calculate_workforce(group.cowCount, requirements)

        entry.workers += needed.workers
        entry.technicians += needed.technicians
        entry.doctors += needed.doctors
        entry.taskBreakdown.append(
            TaskBreakdown(
                task=group.task,
                type=group.type,
                cowCount=group.cowCount,
                workforceNeeded=needed,
                source=source,
            )
        )
    return entry


# == Generate Forecast ==
def generate_forecast(
    store: "ReminderStore",
    window_days: int = FORECAST_WINDOW_DAYS,
    reference_date: Any = None,
) -> List[DayForecast]:
    """
    Day-by-day staffing projection for [reference_date, reference_date + window_days).

    Every day of the window gets an entry; days without incomplete reminders
    are all zeros with an empty breakdown. The result depends only on the store
    snapshot and the arguments.
    """
    if window_days < 0:
        raise ValueError(f"window_days must not be negative, got {window_days}")

    ref = normalise_date(reference_date or today())
    forecast = [forecast_day(store, day) for day in day_range(ref, window_days)]

    busy = sum(1 for f in forecast if f.taskBreakdown)
    logger.info(f"📈 Forecast generated from {ref} for {window_days} days ({busy} days with tasks).")
    return forecast


def requirements_by_date(
    store: "ReminderStore",
    day: Any,
    window_days: int = FORECAST_WINDOW_DAYS,
    reference_date: Any = None,
) -> Optional[DayForecast]:
    """Forecast entry for `day`, or None when it falls outside the window."""
    target = normalise_date(day)
    for entry in generate_forecast(store, window_days, reference_date):
        if entry.date == target:
            return entry
    return None


def peak_day(forecast: Sequence[DayForecast]) -> Optional[DayForecast]:
    """Day with the most staff needed, earliest on ties."""
    if not forecast:
        return None
    return max(forecast, key=lambda f: f.total_staff)


def forecast_summary_frame(forecast: Sequence[DayForecast]) -> pd.DataFrame:
    """Forecast totals as a DataFrame indexed by date, one row per day."""
    rows = [
        {
            "date": f.date,
            "workers": f.workers,
            "technicians": f.technicians,
            "doctors": f.doctors,
            "total": f.total_staff,
            "tasks": len(f.taskBreakdown),
        }
        for f in forecast
    ]
    df = pd.DataFrame(rows, columns=["date"] + FORECAST_COLUMNS)
    return df.set_index("date")
