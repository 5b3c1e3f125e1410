from typing import TYPE_CHECKING
from schemas.reports import Analytics

if TYPE_CHECKING:
    from core.state import ReminderStore


def _rate(part: int, whole: int) -> int:
    """Percentage rounded half up (12.5 -> 13)."""
    if not whole:
        return 0
    return (part * 200 + whole) // (2 * whole)


def analytics_snapshot(store: "ReminderStore") -> Analytics:
    """Herd counters computed from the store snapshot."""
    reminders = store.all()
    cows = list(store.cows.values())

    completed = sum(1 for r in reminders if r.completed)
    pregnant = sum(1 for c in cows if c.status == "pregnant")

    return Analytics(
        totalCows=len(cows),
        activeReminders=len(reminders) - completed,
        completedSyncs=sum(1 for r in reminders if r.completed and r.type == "ai"),
        pregnancyRate=_rate(pregnant, len(cows)),
        complianceRate=_rate(completed, len(reminders)),
    )
