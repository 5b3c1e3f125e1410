from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal
from datetime import date, datetime
from schemas.records import Priority, TaskType, WorkforceSnapshot


class ReminderGroup(BaseModel):
    """Incomplete reminders sharing title, type, priority and due date."""

    model_config = ConfigDict(extra="allow")

    task: str
    type: TaskType
    priority: Priority
    dueDate: datetime
    reminderIds: List[str] = Field(default_factory=list)
    cowCount: int = 0


class TaskGroup(BaseModel):
    """Reminders of one day collapsed to (title, type) for staffing."""

    task: str
    type: TaskType
    reminderIds: List[str] = Field(default_factory=list)
    cowCount: int = 0


class TaskBreakdown(BaseModel):
    task: str
    type: TaskType
    cowCount: int
    workforceNeeded: WorkforceSnapshot
    source: Literal["step", "default"]


class DayForecast(BaseModel):
    date: date
    workers: int = 0
    technicians: int = 0
    doctors: int = 0
    taskBreakdown: List[TaskBreakdown] = Field(default_factory=list)

    @property
    def total_staff(self) -> int:
        return self.workers + self.technicians + self.doctors


class Analytics(BaseModel):
    totalCows: int
    activeReminders: int
    completedSyncs: int
    pregnancyRate: int
    complianceRate: int
