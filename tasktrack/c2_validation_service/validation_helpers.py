"""Decode untrusted input into typed models or a field-error list."""

from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from tasktrack.core.errors import ValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)

# locations FastAPI prefixes onto request errors
_REQUEST_PARTS = {"body", "query", "path", "header"}


def format_errors(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``[{field, message}]``."""
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_PARTS and len(loc) > 1:
            loc = loc[1:]
        formatted.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


def validate_input(schema: Type[ModelT], raw: Any) -> ModelT:
    """
    Validate raw input against a schema.

    Args:
        schema: Pydantic model describing the expected shape
        raw: Untrusted input (decoded JSON body or query mapping)

    Returns:
        The typed model instance

    Raises:
        ValidationFailed: With one descriptor per offending field
    """
    try:
        return schema.model_validate(raw)
    except ValidationError as e:
        raise ValidationFailed(format_errors(e.errors())) from e
