from typing import List
from schemas.records import SyncMethod
from exceptions.custom_errors import ValidationError
from utils.constants import (
    MIN_PROTOCOL_STEPS,
    MIN_PROTOCOL_DURATION,
    MAX_PROTOCOL_DURATION,
)


def protocol_errors(protocol: SyncMethod) -> List[str]:
    """
    Collect every structural problem of a protocol.

    Checks that name and description are non-empty, that the duration lies in
    [MIN_PROTOCOL_DURATION, MAX_PROTOCOL_DURATION], that there are at least
    MIN_PROTOCOL_STEPS steps with unique ids and that each step has a title, a
    description and a non-negative day offset.

    Returns:
        list[str]: One message per failure, empty when the protocol is valid.
    """
    errors = []

    if not (protocol.name or "").strip():
        errors.append("Protocol name is required.")

    if not (protocol.description or "").strip():
        errors.append("Protocol description is required.")

    if not (MIN_PROTOCOL_DURATION <= protocol.duration <= MAX_PROTOCOL_DURATION):
        errors.append(
            f"Duration ({protocol.duration}) must be between {MIN_PROTOCOL_DURATION} and {MAX_PROTOCOL_DURATION} days."
        )

    if len(protocol.steps) < MIN_PROTOCOL_STEPS:
        errors.append(
            f"Protocol must have at least {MIN_PROTOCOL_STEPS} steps, found {len(protocol.steps)}."
        )

    seen_ids = set()
    for i, step in enumerate(protocol.steps, start=1):
        if step.id in seen_ids:
            errors.append(f"Step {i} id '{step.id}' is already used; step ids must be unique.")
        seen_ids.add(step.id)
        if not (step.title or "").strip():
            errors.append(f"Step {i} title is required.")
        if not (step.description or "").strip():
            errors.append(f"Step {i} description is required.")
        # records built with model_construct() skip the ge=0 field check
        if step.day < 0:
            errors.append(f"Step {i} day ({step.day}) must not be negative.")

    return errors


def validate_protocol(protocol: SyncMethod) -> None:
    """Raise ValidationError listing every failure found by `protocol_errors`."""
    errors = protocol_errors(protocol)
    if errors:
        raise ValidationError(errors)
