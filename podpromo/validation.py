import json
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from .llm import ConstraintError, EmptyModelOutput, InvalidModelJSON, ParseError, ShapeError

M = TypeVar("M", bound=BaseModel)

_SHAPE_ERROR_TYPES = {"missing", "model_type", "model_attributes_type"}


def _classify(raw: str, exc: ValidationError) -> InvalidModelJSON:
    error_types = {err["type"] for err in exc.errors()}
    if error_types & _SHAPE_ERROR_TYPES:
        return ShapeError(raw_text=raw, error=str(exc))
    return ConstraintError(raw_text=raw, error=str(exc))


def parse_and_validate(raw: str, model_cls: Type[M]) -> M:
    """Decode raw model text as JSON and validate it against model_cls.

    Raises ParseError for non-JSON text, ShapeError for missing or unexpected
    keys and ConstraintError for type, count or length violations.
    """
    if not raw.strip():
        raise EmptyModelOutput()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(raw_text=raw, error=str(e)) from e

    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        raise _classify(raw, e) from e
