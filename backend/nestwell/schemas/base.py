"""Schema Base — shared model config and the shallow-partial derivation for updates.

Invariants:
    - Every request schema inherits NestwellSchema (camelCase aliases, frozen, extra ignored)
    - make_partial() keeps every field rule but drops defaults: absent stays absent
    - make_partial(include=...) limits an update to its editable fields; the rest are
      unknown keys and therefore ignored

Design Decisions:
    - Unknown keys ignored rather than rejected: mirrors the web client, which posts
      whole form state
    - use_enum_values: normalized output carries plain strings, ready for String columns
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.alias_generators import to_camel


class NestwellSchema(BaseModel):
    """Base class for all request/query schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        use_enum_values=True,
    )


def make_partial(
    schema: type[NestwellSchema], name: str,
    include: tuple[str, ...] | None = None, **extra_fields: Any,
) -> type[NestwellSchema]:
    """Derive an update schema: every field optional, no default re-applied.

    Shallow, like a PATCH body: nested objects keep their own required fields.
    Explicit null is still rejected for fields whose rule is not nullable.
    """
    fields: dict[str, Any] = {}
    for field_name, info in schema.model_fields.items():
        if include is not None and field_name not in include:
            continue
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(info.annotation, *info.metadata)]
        fields[field_name] = (annotation, Field(default=None))
    fields.update(extra_fields)
    return create_model(name, __base__=NestwellSchema, **fields)
