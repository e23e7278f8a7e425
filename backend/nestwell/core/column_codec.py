"""Serialized-Column Codec — JSON text <-> structured values for composite columns.

Invariants:
    - decode_column(k, encode_column(k, v)) == v for every schema-accepted v
      (array order preserved; object key order not significant)
    - Malformed text, a wrong shape or a wrong entry type raises CodecError,
      never a bare json.JSONDecodeError and never a silent default
    - A column never written (None) decodes to [] (array columns) or None (object
      columns); "[]" decodes to [], not to absence

Design Decisions:
    - Canonical encoding: sorted keys, compact separators, non-ASCII kept, so equal
      values always store identical text
    - Shape is checked on both directions, down to array items and object values:
      a tags column holding an object, or nutrition holding a string, is schema
      drift, not data
"""

import json
from dataclasses import dataclass
from typing import Any

from nestwell.core.domain_types import ColumnKind
from nestwell.core.errors import CodecError


@dataclass(frozen=True)
class ColumnSpec:
    kind: ColumnKind
    shape: type  # list or dict
    element: type | tuple[type, ...] | None = None  # array items, or object values
    element_name: str = ""


_NUMBER = (int, float)

COLUMN_SPECS: dict[ColumnKind, ColumnSpec] = {
    ColumnKind.ITEMS: ColumnSpec(ColumnKind.ITEMS, list, dict, "object"),
    ColumnKind.TAGS: ColumnSpec(ColumnKind.TAGS, list, str, "string"),
    ColumnKind.INGREDIENTS: ColumnSpec(ColumnKind.INGREDIENTS, list, dict, "object"),
    ColumnKind.PARTNERS: ColumnSpec(ColumnKind.PARTNERS, list, str, "string"),
    ColumnKind.NUTRITION: ColumnSpec(ColumnKind.NUTRITION, dict, _NUMBER, "number"),
    ColumnKind.MEALS: ColumnSpec(ColumnKind.MEALS, dict),
    ColumnKind.AI_REASONING: ColumnSpec(ColumnKind.AI_REASONING, dict),
}


def _spec(kind: ColumnKind | str) -> ColumnSpec:
    try:
        return COLUMN_SPECS[ColumnKind(kind)]
    except ValueError:
        raise CodecError(str(kind), "unknown column kind") from None


def _shape_name(shape: type) -> str:
    return "array" if shape is list else "object"


def _check_shape(spec: ColumnSpec, value: Any) -> None:
    if not isinstance(value, spec.shape):
        raise CodecError(
            spec.kind.value,
            f"expected {_shape_name(spec.shape)}, got {type(value).__name__}",
        )
    if spec.element is None:
        return
    entries = value.items() if isinstance(value, dict) else enumerate(value)
    for key, entry in entries:
        if isinstance(entry, bool) or not isinstance(entry, spec.element):
            raise CodecError(
                spec.kind.value,
                f"entry {key!s} expected {spec.element_name}, got {type(entry).__name__}",
            )


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant {token}")


def encode_column(kind: ColumnKind | str, value: Any) -> str:
    """Encode a structured value into its canonical JSON text."""
    spec = _spec(kind)
    _check_shape(spec, value)
    try:
        return json.dumps(
            value, sort_keys=True, separators=(",", ":"),
            ensure_ascii=False, allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise CodecError(spec.kind.value, f"not serializable: {e}") from e


def decode_column(kind: ColumnKind | str, text: str | None) -> Any:
    """Decode stored JSON text back into a structured value."""
    spec = _spec(kind)
    if text is None:
        return [] if spec.shape is list else None
    if not isinstance(text, str):
        raise CodecError(spec.kind.value, f"expected text, got {type(text).__name__}")
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise CodecError(spec.kind.value, f"invalid JSON ({e})") from e
    _check_shape(spec, value)
    return value


def encode_optional(kind: ColumnKind | str, value: Any) -> str | None:
    """Encode, passing None through (object columns that were never set)."""
    return None if value is None else encode_column(kind, value)

