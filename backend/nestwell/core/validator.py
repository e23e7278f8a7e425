"""Validator — parse raw input against a schema into Valid(normalized) or Invalid(errors).

Invariants:
    - validate() never raises for malformed input values: it returns Invalid
    - Every error across the whole input is collected; nothing fails fast
    - Error paths are dot-and-index qualified ("ingredients.0.amount"), using wire names
    - Normalized output: defaults applied, absent optional fields omitted (never None
      placeholders), enums as plain strings, snake_case keys
    - The only exception raised is SchemaNotFoundError, from the registry lookup

Design Decisions:
    - Pydantic does the walk; this module only translates its error list into the
      domain's message vocabulary ("<Label> is required", "<Label> must be a number")
    - Outcome as two frozen dataclasses over a Result library: callers branch with
      isinstance / outcome.is_valid, no extra dependency
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticUndefined

from nestwell.core.domain_types import EntityKind, Operation
from nestwell.core.errors import RequestValidationFailedError
from nestwell.core.field_rules import required_message
from nestwell.core.schema_registry import SchemaRegistry


# ─── Outcome ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class FieldError:
    path: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


@dataclass(frozen=True)
class Valid:
    value: dict[str, Any]

    @property
    def is_valid(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    errors: tuple[FieldError, ...]

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def paths(self) -> list[str]:
        return [e.path for e in self.errors]

    def to_http_error(self, prefix: str = "Validation failed") -> RequestValidationFailedError:
        return RequestValidationFailedError(
            [e.to_dict() for e in self.errors], prefix=prefix,
        )


Outcome = Valid | Invalid


# ─── Message translation ─────────────────────────────────────────

_KIND_BY_ERROR_TYPE = {
    "string_type": "a string",
    "float_type": "a number",
    "float_parsing": "a number",
    "number_type": "a number",
    "int_type": "an integer",
    "int_parsing": "an integer",
    "int_from_float": "an integer",
    "bool_type": "a boolean",
    "bool_parsing": "a boolean",
    "list_type": "an array",
    "dict_type": "an object",
    "model_type": "an object",
    "model_attributes_type": "an object",
    "finite_number": "a finite number",
    "datetime_type": "an ISO-8601 datetime",
    "datetime_parsing": "an ISO-8601 datetime",
    "datetime_from_date_parsing": "an ISO-8601 datetime",
    "uuid_type": "a valid UUID",
    "uuid_parsing": "a valid UUID",
}

_WORD_OVERRIDES = {"id": "ID", "url": "URL", "ai": "AI"}


def humanize(name: str) -> str:
    """coupleId -> "Couple ID", total_budget -> "Total budget"."""
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", name).replace("_", " ")
    words = [_WORD_OVERRIDES.get(w.lower(), w.lower()) for w in spaced.split()]
    if not words:
        return "Value"
    words[0] = words[0][0].upper() + words[0][1:]
    return " ".join(words)


def _label(loc: tuple) -> str:
    if not loc:
        return "Request body"
    last = loc[-1]
    if isinstance(last, int):
        parent = next((p for p in reversed(loc) if isinstance(p, str)), "")
        return f"{humanize(parent) if parent else 'Value'} entry"
    return humanize(str(last))


def _strip_union_branches(loc: tuple) -> tuple:
    # Pydantic tags union members in locs ("function-after[check(), str]");
    # they are not part of the data path.
    return tuple(p for p in loc if not (isinstance(p, str) and "[" in p))


def _choices(error: dict) -> str:
    # pydantic renders choices as "'a', 'b' or 'c'"
    expected = error.get("ctx", {}).get("expected", "")
    return expected.replace("'", "").replace(" or ", ", ")


def _translate(error: dict) -> FieldError:
    loc = _strip_union_branches(tuple(error["loc"]))
    path = ".".join(str(p) for p in loc)
    etype = error["type"]
    label = _label(loc)
    if etype == "missing":
        message = required_message(label)
    elif etype in ("enum", "literal_error"):
        message = f"{label} must be one of: {_choices(error)}"
    elif etype in _KIND_BY_ERROR_TYPE:
        message = f"{label} must be {_KIND_BY_ERROR_TYPE[etype]}"
    else:
        message = error["msg"]
    return FieldError(path, message)


def translate_errors(errors: Iterable[dict]) -> tuple[FieldError, ...]:
    """Pydantic error dicts -> FieldErrors in the domain's message vocabulary."""
    return tuple(_translate(e) for e in errors)


def _collect(exc: ValidationError) -> tuple[FieldError, ...]:
    return translate_errors(exc.errors(include_url=False))


# ─── Normalization ───────────────────────────────────────────────

def _has_default(info) -> bool:
    if info.default_factory is not None:
        return True
    return info.default is not PydanticUndefined and info.default is not None


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return normalize(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def normalize(model: BaseModel) -> dict[str, Any]:
    """Dump a validated model, omitting absent fields that carry no real default."""
    out: dict[str, Any] = {}
    for name, info in type(model).model_fields.items():
        if name not in model.model_fields_set and not _has_default(info):
            continue
        out[name] = _plain(getattr(model, name))
    return out


# ─── Entry points ────────────────────────────────────────────────

def validate(schema: type[BaseModel], raw: Any) -> Outcome:
    """Validate raw input (parsed body or coerced query map) against a schema."""
    try:
        model = schema.model_validate(raw)
    except ValidationError as exc:
        return Invalid(_collect(exc))
    return Valid(normalize(model))


class Validator:
    """Registry-bound validator used by the HTTP layer."""

    def __init__(self, registry: SchemaRegistry):
        self.registry = registry

    def validate(
        self, entity: EntityKind | str, operation: Operation | str, raw: Any,
    ) -> Outcome:
        return validate(self.registry.get(entity, operation), raw)

    def parse(
        self, entity: EntityKind | str, operation: Operation | str, raw: Any,
    ) -> dict[str, Any]:
        """Validate or raise RequestValidationFailedError (400) with every field error."""
        outcome = self.validate(entity, operation, raw)
        if isinstance(outcome, Invalid):
            prefix = (
                "Query validation failed"
                if Operation(operation) is Operation.QUERY
                else "Validation failed"
            )
            raise outcome.to_http_error(prefix)
        return outcome.value
