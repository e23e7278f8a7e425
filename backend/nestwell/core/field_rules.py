"""Field Rules — the complete set of reusable field constraints for request schemas.

Invariants:
    - Every rule is an Annotated type: primitive kind + constraint + human-readable message
    - Constraint messages name the field ("Budget must be positive"), never Pydantic jargon
    - Type coercion (numeric strings, ISO strings) happens before constraint checks
    - No rule accepts None unless it is explicitly nullable

Design Decisions:
    - Factories over a DSL: rules compose with plain Pydantic models and stay declarative
    - PydanticCustomError over ValueError: keeps the message verbatim (no "Value error," prefix)
    - Booleans are strict (JSON true/false only); numbers are lax (coerced, then checked)
"""

from datetime import date, datetime, time
from typing import Annotated, Any, Literal
from enum import Enum

from pydantic import AfterValidator, BeforeValidator, Field, Strict, TypeAdapter
from pydantic import AnyUrl, ValidationError
from pydantic_core import PydanticCustomError

from nestwell.core.domain_types import QUERY_SENTINEL

TAG_MAX_LENGTH = 50

_URL_ADAPTER = TypeAdapter(AnyUrl)

# Labels that read as plurals take "are".
PLURAL_LABELS = frozenset({"Instructions"})


def required_message(label: str) -> str:
    verb = "are" if label in PLURAL_LABELS else "is"
    return f"{label} {verb} required"


# ─── Text ────────────────────────────────────────────────────────

def _check_text(label: str, required: bool, max_length: int | None):
    def check(value: str) -> str:
        if required and not value:
            raise PydanticCustomError("text_required", required_message(label))
        if max_length is not None and len(value) > max_length:
            raise PydanticCustomError(
                "text_too_long",
                f"{label} must be less than {max_length} characters",
            )
        return value
    return check


def required_text(label: str, max_length: int | None = None) -> Any:
    """Non-empty string, optionally bounded."""
    return Annotated[str, AfterValidator(_check_text(label, True, max_length))]


def optional_text(label: str, max_length: int | None = None) -> Any:
    """String that may be empty; absence is handled by the field default."""
    return Annotated[str, AfterValidator(_check_text(label, False, max_length))]


def optional_url(label: str) -> Any:
    def check(value: str) -> str:
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("url_invalid", "Invalid URL") from None
        return value
    return Annotated[str, AfterValidator(check)]


# ─── Numbers ─────────────────────────────────────────────────────

def _reject_bool(label: str):
    def check(value: Any) -> Any:
        if isinstance(value, bool):
            raise PydanticCustomError("number_type", f"{label} must be a number")
        return value
    return check


def positive_number(label: str) -> Any:
    def check(value: float) -> float:
        if value <= 0:
            raise PydanticCustomError("not_positive", f"{label} must be positive")
        return value
    return Annotated[
        float, Field(allow_inf_nan=False),
        BeforeValidator(_reject_bool(label)), AfterValidator(check),
    ]


def non_negative_number(label: str) -> Any:
    def check(value: float) -> float:
        if value < 0:
            raise PydanticCustomError("negative", f"{label} cannot be negative")
        return value
    return Annotated[
        float, Field(allow_inf_nan=False),
        BeforeValidator(_reject_bool(label)), AfterValidator(check),
    ]


def bounded_int(label: str, minimum: int, maximum: int | None = None) -> Any:
    """Integer within [minimum, maximum]; used for pagination query params."""
    def check(value: int) -> int:
        if value < minimum:
            raise PydanticCustomError("too_small", f"{label} must be at least {minimum}")
        if maximum is not None and value > maximum:
            raise PydanticCustomError("too_large", f"{label} must be at most {maximum}")
        return value
    return Annotated[int, BeforeValidator(_reject_bool(label)), AfterValidator(check)]


# ─── Booleans & Dates ────────────────────────────────────────────

def flag() -> Any:
    """Strict boolean. Callers give it a default of False."""
    return Annotated[bool, Strict()]


def _coerce_datetime(label: str):
    def coerce(value: Any) -> Any:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value)
            except ValueError:
                pass
        raise PydanticCustomError(
            "datetime_invalid", f"{label} must be an ISO-8601 datetime",
        )
    return coerce


def required_datetime(label: str) -> Any:
    return Annotated[datetime, BeforeValidator(_coerce_datetime(label))]


def optional_datetime(label: str) -> Any:
    """ISO-8601 string or date value; explicit null allowed."""
    return Annotated[datetime | None, BeforeValidator(_coerce_datetime(label))]


# ─── Collections ─────────────────────────────────────────────────

def non_empty_list(item_type: Any, message: str) -> Any:
    """Array with at least one element. One error on the array path when empty."""
    def check(value: list) -> list:
        if not value:
            raise PydanticCustomError("too_few_items", message)
        return value
    return Annotated[list[item_type], AfterValidator(check)]


def tag_list() -> Any:
    """Free-form tags, each at most TAG_MAX_LENGTH chars, no minimum count."""
    return list[optional_text("Tag", TAG_MAX_LENGTH)]


def sentinel_choice(enum_cls: type[Enum]) -> Any:
    """Enum filter that also accepts the "all" sentinel."""
    return Literal[tuple(m.value for m in enum_cls) + (QUERY_SENTINEL,)]
