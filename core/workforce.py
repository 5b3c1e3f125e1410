import math
from typing import Optional, Union
from schemas.records import WorkforceRequirements, WorkforceSnapshot
from utils.constants import DEFAULT_WORKFORCE_REQUIREMENTS

Number = Union[int, float]


def required(count: int, ratio: Optional[Number]) -> int:
    """
    Staff needed of one role to cover `count` cows when one person handles `ratio` cows.

    Roles without a positive ratio are not involved in the task (0). Any
    non-zero load on an involved role needs at least one person.
    """
    if ratio is None or ratio <= 0:
        return 0
    if count <= 0:
        return 0
    return max(1, math.ceil(count / ratio))


def use_defaults(task_type: str) -> WorkforceRequirements:
    """Default ratios for a task type; unknown types fall back to 'custom'."""
    table = DEFAULT_WORKFORCE_REQUIREMENTS.get(task_type) or DEFAULT_WORKFORCE_REQUIREMENTS["custom"]
    return WorkforceRequirements.model_validate(table)


def calculate_workforce(
    count: int, requirements: Optional[WorkforceRequirements]
) -> WorkforceSnapshot:
    """Apply `required` to every role; missing requirements mean nobody is needed."""
    ratios = requirements.by_role() if requirements is not None else {}
    return WorkforceSnapshot(
        workers=required(count, ratios.get("workers")),
        technicians=required(count, ratios.get("technicians")),
        doctors=required(count, ratios.get("doctors")),
    )


def calculate_workforce_for_task(
    task_type: str,
    count: int,
    custom_requirements: Optional[WorkforceRequirements] = None,
) -> WorkforceSnapshot:
    """Workforce for `count` cows of a task, using custom ratios when given, else the type defaults."""
    requirements = custom_requirements or use_defaults(task_type)
    return calculate_workforce(count, requirements)
