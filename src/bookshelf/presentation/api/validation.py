"""Request validation helpers.

Turns pydantic errors into an ordered list of ``FieldError`` items so that
FastAPI's request validation and direct calls share one error format.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

_VALUE_ERROR_PREFIX = "Value error, "
_LOCATION_ROOTS = {"body", "query", "path", "header", "cookie"}
_MALFORMED_JSON = "Malformed JSON body"


@dataclass(frozen=True)
class FieldError:
    """A single failed field: where and why."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _message(field: str, error: Mapping[str, Any]) -> str:
    if error.get("type") == "missing":
        return f"{field} is required"
    msg = str(error.get("msg", "Invalid value"))
    if msg.startswith(_VALUE_ERROR_PREFIX):
        return msg[len(_VALUE_ERROR_PREFIX) :]
    return f"{field}: {msg}"


def field_errors_from(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """Convert pydantic/FastAPI error dicts to ``FieldError`` items, in order."""
    result = []
    for error in errors:
        # Location of a JSON decode error is a character offset
        if error.get("type") == "json_invalid":
            result.append(FieldError(field="body", message=_MALFORMED_JSON))
            continue
        field = _field_name(error.get("loc", ()))
        result.append(FieldError(field=field, message=_message(field, error)))
    return result


def validate_payload(
    schema: type[ModelT],
    payload: Any,
) -> tuple[Optional[ModelT], list[FieldError]]:
    """Validate ``payload`` against ``schema``.

    Returns
    -------
    ``(model, [])`` when the payload is valid, ``(None, errors)`` otherwise.
    """
    try:
        return schema.model_validate(payload), []
    except PydanticValidationError as e:
        return None, field_errors_from(e.errors())
