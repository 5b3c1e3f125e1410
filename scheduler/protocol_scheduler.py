from datetime import date
from typing import Any, Iterable, List, Optional
from schemas.records import Cow, Reminder, SyncMethod
from core.catalog import ProtocolCatalog
from core.workforce import calculate_workforce
from exceptions.custom_errors import DuplicateActiveProtocolError, IneligibleSubjectError
from utils.constants import DEFAULT_PRIORITY, INELIGIBLE_STATUSES, PROTOCOL_TASK_TYPE
from utils.date_utils import add_days, normalise_date, today
from utils.logger import get_logger

logger = get_logger(__name__)


def is_eligible(cow: Cow) -> bool:
    """Protocols can only be applied to cows that are not sick, retired or pregnant."""
    return cow.status not in INELIGIBLE_STATUSES


def active_protocol_reminders(
    cow_id: str, reminders: Iterable[Reminder], reference_date: Any = None
) -> List[Reminder]:
    """Incomplete protocol reminders of a cow due on the reference day or later."""
    ref = normalise_date(reference_date or today())
    return [
        r
        for r in reminders
        if r.cowId == cow_id and r.from_protocol and not r.completed and r.due_day >= ref
    ]


def has_active_protocol(cow_id: str, reminders: Iterable[Reminder], reference_date: Any = None) -> bool:
    return bool(active_protocol_reminders(cow_id, reminders, reference_date))


def make_reminder_id(cow: Cow, protocol: SyncMethod, step_id: str, start: date) -> str:
    return f"{cow.id}-{protocol.id}-{step_id}-{start:%Y%m%d}"


# == Apply Protocol ==
def apply_protocol(
    cow: Cow,
    protocol: SyncMethod,
    start_date: Any,
    existing_reminders: Iterable[Reminder],
    reference_date: Any = None,
    catalog: Optional[ProtocolCatalog] = None,
    priority: str = DEFAULT_PRIORITY,
) -> List[Reminder]:
    """
    Expand a protocol applied to one cow at `start_date` into one reminder per step.

    Guards are checked in order and the first failure is raised:
        1. IneligibleSubjectError if the cow is sick, retired or pregnant.
        2. DuplicateActiveProtocolError if the cow already has an active protocol
           among `existing_reminders` (relative to `reference_date`, default today).
        3. ValidationError if the protocol fails `ProtocolCatalog.validate`.

    Each reminder is due on `start_date + step.day`, copies the step title and
    description, is typed 'custom', and carries a workforce snapshot for a single
    cow against the step ratios. Nothing is mutated; the caller stores the
    returned list, which always holds exactly one reminder per step.
    """
    if not is_eligible(cow):
        logger.warning(f"⚠️ Cow {cow.id} is {cow.status}; protocol {protocol.id} not applied.")
        raise IneligibleSubjectError(
            f"Cow '{cow.id}' has status '{cow.status}' and cannot start protocol '{protocol.id}'."
        )

    active = active_protocol_reminders(cow.id, existing_reminders, reference_date)
    if active:
        logger.warning(f"⚠️ Cow {cow.id} already has {len(active)} pending protocol reminders.")
        raise DuplicateActiveProtocolError(
            f"Cow '{cow.id}' already has an active protocol ('{active[0].syncMethodId}')."
        )

    validate = catalog.validate if catalog is not None else ProtocolCatalog.validate
    validate(protocol)

    start = normalise_date(start_date)
    reminders = []
    for step in protocol.steps:
        reminders.append(
            Reminder(
                id=make_reminder_id(cow, protocol, step.id, start),
                cowId=cow.id,
                title=step.title,
                description=step.description,
                dueDate=add_days(start, step.day),
                completed=False,
                priority=priority,
                type=PROTOCOL_TASK_TYPE,
                syncMethodId=protocol.id,
                syncStepId=step.id,
                estimatedCowCount=1,
                workforceSnapshot=calculate_workforce(1, step.workforceRequirements),
            )
        )

    logger.info(
        f"📋 Applied {protocol.name} to cow {cow.id} from {start}: {len(reminders)} reminders scheduled."
    )
    return reminders
