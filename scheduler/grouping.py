from typing import Dict, Iterable, List, Tuple
from schemas.records import Reminder
from schemas.reports import ReminderGroup, TaskGroup


def group_by_task_and_date(reminders: Iterable[Reminder]) -> List[ReminderGroup]:
    """
    Group incomplete reminders sharing (title, type, priority, dueDate).

    Completed reminders are skipped; every other reminder lands in exactly one
    group. Reminder ids keep their input order inside a group and groups are
    sorted by due date, ties in first-seen order.
    """
    groups: Dict[Tuple, ReminderGroup] = {}
    for r in reminders:
        if r.completed:
            continue
        key = (r.title, r.type, r.priority, r.dueDate)
        group = groups.get(key)
        if group is None:
            group = ReminderGroup(
                task=r.title, type=r.type, priority=r.priority, dueDate=r.dueDate
            )
            groups[key] = group
        group.reminderIds.append(r.id)
        group.cowCount += 1

    return sorted(groups.values(), key=lambda g: g.dueDate)


def group_by_task(reminders: Iterable[Reminder]) -> List[Tuple[TaskGroup, List[Reminder]]]:
    """
    Group incomplete reminders by (title, type) only, for a single day's staffing.

    Returns (group, members) pairs in first-seen order.
    """
    groups: Dict[Tuple[str, str], Tuple[TaskGroup, List[Reminder]]] = {}
    for r in reminders:
        if r.completed:
            continue
        key = (r.title, r.type)
        if key not in groups:
            groups[key] = (TaskGroup(task=r.title, type=r.type), [])
        group, members = groups[key]
        group.reminderIds.append(r.id)
        group.cowCount += 1
        members.append(r)
    return list(groups.values())
