"""Declarative payload validation shared by create and update paths.

Each collection declares one pydantic schema; JSON and multipart routes both
run it, and the first failure is flattened into a single 400 message.
"""

import re
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, StringConstraints, ValidationError
from pydantic.alias_generators import to_camel

from ..exceptions import PayloadInvalid


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def split_list(value: object) -> list[str]:
    """Normalize an array or a comma/newline-delimited string into trimmed, non-empty entries."""
    if value is None:
        return []
    if isinstance(value, str):
        value = re.split(r"[,\n]", value)
    elif not isinstance(value, list | tuple):
        value = [value]
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def _blank_to_empty(value: object) -> object:
    return "" if value is None else value


RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalText = Annotated[str, BeforeValidator(_blank_to_empty), StringConstraints(strip_whitespace=True)]
StringList = Annotated[list[str], BeforeValidator(split_list)]


def _field_name(loc: tuple) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts)


def first_error_message(exc: ValidationError | list[dict]) -> str:
    """Human-readable message for the first validation failure."""
    errors = exc.errors() if isinstance(exc, ValidationError) else exc
    if not errors:
        return "Invalid request"
    err = errors[0]
    name = _field_name(tuple(err.get("loc", ())))
    kind = err.get("type", "")
    if kind == "json_invalid":
        return "Invalid JSON body"
    if not name:
        return "Request body is required" if kind == "missing" else "Invalid request body"
    if kind in ("missing", "string_too_short"):
        return f"{name} is required"
    if kind == "string_type" and err.get("input") is None:
        return f"{name} is required"
    if kind == "value_error":
        ctx_error = (err.get("ctx") or {}).get("error")
        if ctx_error is not None:
            return str(ctx_error)
    return f"Invalid {name}"


def validate_payload(schema: type[BaseModel], data: dict) -> BaseModel:
    """Run `schema` over `data`, raising PayloadInvalid with the first error."""
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise PayloadInvalid(first_error_message(exc)) from None


def to_wire(schema: type[BaseModel], obj: object) -> dict:
    """Serialize an ORM object through its response schema, camelCase keys."""
    return schema.model_validate(obj).model_dump(by_alias=True, mode="json")


class DocumentOut(WireModel):
    """Fields every stored document carries."""

    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
