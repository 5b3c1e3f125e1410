from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Union
from schemas.records import Cow, Reminder, SyncMethod
from core.catalog import ProtocolCatalog
from exceptions.custom_errors import FutureCompletionError, NotFoundError
from scheduler.protocol_scheduler import apply_protocol
from utils.constants import DEFAULT_PRIORITY, FORECAST_WINDOW_DAYS
from utils.date_utils import normalise_date, today
from utils.loader import parse_records
from utils.logger import get_logger

logger = get_logger(__name__)


class ReminderStore:
    """
    In-memory snapshot of reminders, cows and protocols for one request or session.

    The store is the only stateful piece of the engine: `complete`,
    `complete_many`, `apply_protocol`, `add` and `replace_all` mutate it, every
    other method reads. It performs no locking; callers serialise access to a
    given instance.
    """

    def __init__(
        self,
        reminders: Optional[Iterable[Union[Reminder, dict]]] = None,
        cows: Optional[Iterable[Union[Cow, dict]]] = None,
        protocols: Optional[Iterable[Union[SyncMethod, dict]]] = None,
        include_predefined: bool = False,
    ):
        self.reminders: List[Reminder]
        """Canonical reminder list, in the order the caller supplied them."""
        self.cows: Dict[str, Cow]
        """Cows by id."""
        self.catalog: ProtocolCatalog
        """Protocols referenced by the reminders."""
        self.version: int = 0
        """Bumped on every mutation; callers can key cached forecasts on it."""
        self.initialize(reminders, cows, protocols, include_predefined)

    def initialize(
        self,
        reminders: Optional[Iterable[Union[Reminder, dict]]] = None,
        cows: Optional[Iterable[Union[Cow, dict]]] = None,
        protocols: Optional[Iterable[Union[SyncMethod, dict]]] = None,
        include_predefined: bool = False,
    ) -> None:
        """Replace the whole snapshot."""
        self.reminders = parse_records(Reminder, reminders)
        self.cows = {c.id: c for c in parse_records(Cow, cows)}
        self.catalog = ProtocolCatalog(protocols, include_predefined=include_predefined)
        self.version += 1
        logger.info(
            f"🐄 Store initialised: {len(self.reminders)} reminders, {len(self.cows)} cows, {len(self.catalog)} protocols."
        )

    # == Lookups ==
    def all(self) -> List[Reminder]:
        return list(self.reminders)

    def get(self, reminder_id: str) -> Reminder:
        for r in self.reminders:
            if r.id == reminder_id:
                return r
        raise NotFoundError(f"Reminder '{reminder_id}' not found.")

    def get_cow(self, cow_id: str) -> Cow:
        try:
            return self.cows[cow_id]
        except KeyError:
            raise NotFoundError(f"Cow '{cow_id}' not found.") from None

    def get_protocol(self, protocol_id: str) -> SyncMethod:
        return self.catalog.get(protocol_id)

    def for_date(self, day: Any) -> List[Reminder]:
        """Reminders due on the same calendar day as `day`."""
        d = normalise_date(day)
        return [r for r in self.reminders if r.due_day == d]

    def todays(self, reference_date: Any = None) -> List[Reminder]:
        return self.for_date(reference_date or today())

    def upcoming(self, days: int = FORECAST_WINDOW_DAYS, reference_date: Any = None) -> List[Reminder]:
        """Reminders due from the reference day through `days` days later, both ends included."""
        start = normalise_date(reference_date or today())
        return [r for r in self.reminders if 0 <= (r.due_day - start).days <= days]

    def for_cow(self, cow_id: str) -> List[Reminder]:
        return [r for r in self.reminders if r.cowId == cow_id]

    def pending(self) -> List[Reminder]:
        return [r for r in self.reminders if not r.completed]

    # == Mutations ==
    def complete(self, reminder_id: str, reference_date: Any = None) -> Reminder:
        """
        Mark a reminder as completed.

        Raises:
            NotFoundError: unknown id.
            FutureCompletionError: the reminder is due after the reference day.
        Completing an already completed reminder is a no-op.
        """
        ref = normalise_date(reference_date or today())
        reminder = self.get(reminder_id)
        self._check_due(reminder, ref)

        if reminder.completed:
            logger.debug(f"Reminder {reminder_id} already completed.")
            return reminder

        reminder.completed = True
        self.version += 1
        logger.info(f"✅ Reminder {reminder_id} completed for cow {reminder.cowId}.")
        return reminder

    def complete_many(self, reminder_ids: Iterable[str], reference_date: Any = None) -> List[Reminder]:
        """Complete every id, e.g. a whole group. Nothing changes unless all of them can be completed."""
        ref = normalise_date(reference_date or today())
        targets = [self.get(rid) for rid in reminder_ids]
        for reminder in targets:
            self._check_due(reminder, ref)

        newly_done = 0
        for reminder in targets:
            if not reminder.completed:
                reminder.completed = True
                newly_done += 1
        if newly_done:
            self.version += 1
        logger.info(f"✅ Completed {newly_done} of {len(targets)} reminders.")
        return targets

    def _check_due(self, reminder: Reminder, ref: date) -> None:
        if reminder.due_day > ref:
            logger.warning(
                f"⚠️ Refused to complete reminder {reminder.id}: due {reminder.due_day}, reference {ref}."
            )
            raise FutureCompletionError(
                f"Reminder '{reminder.id}' is due on {reminder.due_day} and cannot be completed on {ref}."
            )

    def add(self, reminders: Iterable[Union[Reminder, dict]]) -> List[Reminder]:
        new = parse_records(Reminder, reminders)
        self.reminders.extend(new)
        self.version += 1
        return new

    def replace_all(self, reminders: Iterable[Union[Reminder, dict]]) -> None:
        """Bulk overwrite, used when the caller's upstream data changes."""
        self.reminders = parse_records(Reminder, reminders)
        self.version += 1

    def apply_protocol(
        self,
        cow_id: str,
        protocol_id: str,
        start_date: Any,
        reference_date: Any = None,
        priority: str = DEFAULT_PRIORITY,
    ) -> List[Reminder]:
        """Resolve ids, schedule the protocol for the cow and keep the new reminders on success."""
        cow = self.get_cow(cow_id)
        protocol = self.get_protocol(protocol_id)
        new = apply_protocol(
            cow,
            protocol,
            start_date,
            self.reminders,
            reference_date=reference_date,
            priority=priority,
        )
        self.reminders.extend(new)
        self.version += 1
        return new
