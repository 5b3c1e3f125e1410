"""Shared fixtures for the reminder engine tests."""

import os
import tempfile
from datetime import date, datetime, timedelta

import pytest

# Keep the test run's log file out of the project root.
os.environ.setdefault("HERDSYNC_LOG_DIR", tempfile.gettempdir())

from core.state import ReminderStore  # noqa: E402
from schemas.records import Cow, Reminder, SyncMethod  # noqa: E402

REFERENCE_DATE = date(2024, 6, 2)


@pytest.fixture()
def ref_date() -> date:
    return REFERENCE_DATE


@pytest.fixture()
def four_step_protocol() -> SyncMethod:
    """A custom Ovsynch-like protocol with steps on days 0, 7, 9 and 10."""
    return SyncMethod.model_validate(
        {
            "id": "ovs-custom",
            "name": "Ovsynch (farm)",
            "description": "Farm variant of Ovsynch",
            "duration": 10,
            "isCustom": True,
            "steps": [
                {
                    "id": "s1",
                    "day": 0,
                    "title": "GnRH Injection",
                    "description": "First GnRH",
                    "hormoneType": "GnRH",
                    "workforceRequirements": {"worker_per_cows": 20, "technician_per_cows": 15},
                },
                {
                    "id": "s2",
                    "day": 7,
                    "title": "PGF2α Injection",
                    "description": "Prostaglandin",
                    "workforceRequirements": {"worker_per_cows": 20, "technician_per_cows": 15},
                },
                {
                    "id": "s3",
                    "day": 9,
                    "title": "GnRH Injection",
                    "description": "Second GnRH",
                },
                {
                    "id": "s4",
                    "day": 10,
                    "title": "Artificial Insemination",
                    "description": "Timed AI",
                    "workforceRequirements": {"technician_per_cows": 10},
                },
            ],
        }
    )


@pytest.fixture()
def cows() -> list[Cow]:
    return [
        Cow(id="X", name="Bella", status="active"),
        Cow(id="Y", name="Daisy", status="active"),
        Cow(id="S", name="Rosie", status="sick"),
        Cow(id="P", name="Molly", status="pregnant"),
        Cow(id="R", name="Old Bess", status="retired"),
    ]


@pytest.fixture()
def make_reminder():
    """Factory for reminders; `offset` is days from the reference date."""
    counter = {"n": 0}

    def _make(offset: int = 0, **overrides) -> Reminder:
        counter["n"] += 1
        fields = {
            "id": f"r{counter['n']}",
            "cowId": "X",
            "title": "Checkup",
            "description": "Routine checkup",
            "dueDate": datetime.combine(REFERENCE_DATE, datetime.min.time()) + timedelta(days=offset),
            "type": "checkup",
        }
        fields.update(overrides)
        return Reminder(**fields)

    return _make


@pytest.fixture()
def store(cows, four_step_protocol) -> ReminderStore:
    """Store seeded with the test cows, no reminders, and the custom protocol."""
    return ReminderStore(reminders=[], cows=cows, protocols=[four_step_protocol])
