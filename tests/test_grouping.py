"""Tests for reminder grouping."""

from datetime import datetime

from scheduler.grouping import group_by_task, group_by_task_and_date


class TestGroupByTaskAndDate:
    def test_groups_share_title_type_priority_and_date(self, make_reminder) -> None:
        reminders = [
            make_reminder(offset=0, title="GnRH Injection", type="injection", cowId="A"),
            make_reminder(offset=0, title="GnRH Injection", type="injection", cowId="B"),
            make_reminder(offset=0, title="GnRH Injection", type="injection", priority="high"),
            make_reminder(offset=1, title="GnRH Injection", type="injection"),
        ]
        groups = group_by_task_and_date(reminders)
        assert [g.cowCount for g in groups] == [2, 1, 1]
        assert groups[0].reminderIds == [reminders[0].id, reminders[1].id]
        assert groups[1].priority == "high"

    def test_sorted_by_due_date(self, make_reminder) -> None:
        reminders = [
            make_reminder(offset=5, title="AI", type="ai"),
            make_reminder(offset=1, title="Checkup"),
            make_reminder(offset=3, title="AI", type="ai"),
        ]
        groups = group_by_task_and_date(reminders)
        assert [g.dueDate for g in groups] == sorted(r.dueDate for r in reminders)

    def test_completed_reminders_are_left_out(self, make_reminder) -> None:
        reminders = [make_reminder(completed=True), make_reminder(completed=True)]
        assert group_by_task_and_date(reminders) == []

    def test_partitions_incomplete_reminders(self, make_reminder) -> None:
        titles = ["GnRH Injection", "PGF2α Injection", "Checkup"]
        reminders = [
            make_reminder(
                offset=i % 4,
                title=titles[i % 3],
                priority=["low", "medium", "high"][i % 2],
                completed=(i % 5 == 0),
            )
            for i in range(30)
        ]
        groups = group_by_task_and_date(reminders)
        grouped_ids = [rid for g in groups for rid in g.reminderIds]
        incomplete_ids = {r.id for r in reminders if not r.completed}

        assert len(grouped_ids) == len(set(grouped_ids))
        assert set(grouped_ids) == incomplete_ids
        assert all(g.cowCount == len(g.reminderIds) for g in groups)

    def test_exact_due_time_is_part_of_the_key(self, make_reminder) -> None:
        reminders = [
            make_reminder(dueDate=datetime(2024, 6, 2, 8, 0)),
            make_reminder(dueDate=datetime(2024, 6, 2, 16, 0)),
        ]
        assert len(group_by_task_and_date(reminders)) == 2


class TestGroupByTask:
    def test_priority_and_time_collapse(self, make_reminder) -> None:
        reminders = [
            make_reminder(title="AI", type="ai", priority="low"),
            make_reminder(title="AI", type="ai", priority="high", dueDate=datetime(2024, 6, 2, 17, 0)),
            make_reminder(title="AI", type="custom"),
            make_reminder(title="AI", type="ai", completed=True),
        ]
        groups = group_by_task(reminders)
        assert [(g.task, g.type, g.cowCount) for g, _ in groups] == [("AI", "ai", 2), ("AI", "custom", 1)]
        assert [len(members) for _, members in groups] == [2, 1]
