import json
from pathlib import Path
from typing import Iterable, List, Optional, Type, TypeVar, Union
from pydantic import BaseModel, ValidationError as PydanticValidationError
from config.paths import PROTOCOLS_PATH
from schemas.records import SyncMethod
from exceptions.custom_errors import FileContentError, FileReadingError

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_predefined_protocols(path: Union[str, Path, None] = None) -> List[SyncMethod]:
    """
    Load the built-in protocol templates from a JSON file.

    Parameters:
        path: Path to the JSON file. Defaults to 'config/protocols.json'.

    Returns:
        List of SyncMethod models flagged as predefined (isCustom=False).
    """
    if path is None:
        path = PROTOCOLS_PATH

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FileReadingError(f"Error loading predefined protocols: {e}")

    if not isinstance(raw, list):
        raise FileContentError("Predefined protocols file must contain a list of protocols.")

    try:
        protocols = [SyncMethod.model_validate(p) for p in raw]
    except PydanticValidationError as e:
        raise FileContentError(f"Invalid protocol record in {path}: {e}")

    for p in protocols:
        p.isCustom = False
    return protocols


def parse_records(
    model: Type[ModelT], records: Optional[Iterable[Union[ModelT, dict]]]
) -> List[ModelT]:
    """Coerce plain dicts from the persistence/API layer into `model` instances; models pass through."""
    if records is None:
        return []
    return [r if isinstance(r, model) else model.model_validate(r) for r in records]
