from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Literal, Optional
from datetime import date, datetime
from utils.date_utils import normalise_datetime

Priority = Literal["low", "medium", "high"]
TaskType = Literal["injection", "checkup", "ai", "custom"]
CowStatus = Literal["active", "pregnant", "sick", "retired"]

# role name in snapshots -> ratio key in step requirements
ROLE_RATIO_KEYS = {
    "workers": "worker_per_cows",
    "technicians": "technician_per_cows",
    "doctors": "doctor_per_cows",
}


# Define data models
class WorkforceRequirements(BaseModel):
    """Capacity ratios: how many cows one staff member of each role covers for a task."""

    model_config = ConfigDict(extra="allow")

    worker_per_cows: Optional[float] = None
    technician_per_cows: Optional[float] = None
    doctor_per_cows: Optional[float] = None

    def by_role(self) -> Dict[str, Optional[float]]:
        return {role: getattr(self, key) for role, key in ROLE_RATIO_KEYS.items()}

    def is_empty(self) -> bool:
        return all(v is None for v in self.by_role().values())


class WorkforceSnapshot(BaseModel):
    model_config = ConfigDict(extra="allow")

    workers: Optional[int] = Field(default=None, ge=0)
    technicians: Optional[int] = Field(default=None, ge=0)
    doctors: Optional[int] = Field(default=None, ge=0)

    def total(self) -> int:
        return (self.workers or 0) + (self.technicians or 0) + (self.doctors or 0)


class SyncStep(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    day: int = Field(ge=0)
    title: str
    description: str = ""
    hormoneType: Optional[str] = None
    notes: Optional[str] = None
    workforceRequirements: Optional[WorkforceRequirements] = None


class SyncMethod(BaseModel):
    """A reusable protocol: a named, ordered list of steps offset in days from the start date."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: str = ""
    duration: int
    isCustom: bool = True
    hasWorkforceSettings: Optional[bool] = None
    steps: List[SyncStep] = Field(default_factory=list)

    def get_step(self, step_id: Optional[str]) -> Optional[SyncStep]:
        for step in self.steps:
            if step.id == step_id:
                return step
        return None


class Cow(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = None
    breed: Optional[str] = None
    age: Optional[int] = None
    lastSyncDate: Optional[datetime] = None
    healthNotes: Optional[str] = None
    status: CowStatus = "active"

    @field_validator("lastSyncDate", mode="before")
    @classmethod
    def parse_last_sync(cls, value):
        if value is None or value == "":
            return None
        return normalise_datetime(value)


class Reminder(BaseModel):
    model_config = ConfigDict(extra="allow", validate_assignment=True)

    id: str
    cowId: str
    title: str
    description: str = ""
    dueDate: datetime
    completed: bool = False
    priority: Priority = "medium"
    type: TaskType
    syncMethodId: Optional[str] = None
    syncStepId: Optional[str] = None
    estimatedCowCount: Optional[int] = Field(default=None, ge=0)
    workforceSnapshot: Optional[WorkforceSnapshot] = None

    @field_validator("dueDate", mode="before")
    @classmethod
    def parse_due_date(cls, value):
        """
        Accept ISO-8601 strings (with or without offset), dates and datetimes.
        The stored value is naive; see `normalise_datetime`.
        """
        return normalise_datetime(value)

    @field_validator("syncMethodId", "syncStepId", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def due_day(self) -> date:
        return self.dueDate.date()

    @property
    def from_protocol(self) -> bool:
        return self.syncMethodId is not None
