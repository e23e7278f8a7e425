"""Serialized-Column Codec — canonical JSON text for composite columns.

Tests cover:
    - Ingredients and nutrition survive encode/decode unchanged
    - Canonical text (sorted keys, compact, non-ASCII kept)
    - Malformed text, wrong shapes, drifted entries and NaN raise CodecError
    - Never-written columns decode to [] or None
"""

import pytest

from nestwell.core.column_codec import decode_column, encode_column, encode_optional
from nestwell.core.domain_types import ColumnKind
from nestwell.core.errors import CodecError


def test_ingredients_round_trip():
    value = [
        {"name": "Spaghetti", "amount": "200", "unit": "g"},
        {"name": "Basil", "amount": "a handful", "notes": "fresh"},
    ]
    assert decode_column("ingredients", encode_column("ingredients", value)) == value


def test_nutrition_round_trip_ignores_key_order():
    value = {"calories": 300, "protein": 10, "carbs": 20, "fats": 5}
    decoded = decode_column(ColumnKind.NUTRITION, encode_column(ColumnKind.NUTRITION, value))
    assert decoded == {"fats": 5, "carbs": 20, "protein": 10, "calories": 300}


def test_encoding_is_canonical():
    assert encode_column("nutrition", {"b": 1, "a": 2}) == '{"a":2,"b":1}'
    assert encode_column("tags", ["café"]) == '["café"]'


def test_malformed_text_raises_codec_error():
    with pytest.raises(CodecError) as exc_info:
        decode_column("tags", "not json")
    assert exc_info.value.column == "tags"
    assert exc_info.value.http_status == 500


def test_wrong_shape_on_decode_raises():
    with pytest.raises(CodecError):
        decode_column("tags", '{"a": 1}')
    with pytest.raises(CodecError):
        decode_column("nutrition", "[1, 2]")


def test_wrong_shape_on_encode_raises():
    with pytest.raises(CodecError):
        encode_column("items", {"name": "Milk"})


def test_drifted_entries_raise_on_decode():
    with pytest.raises(CodecError) as exc_info:
        decode_column("tags", '[{"a": 1}]')
    assert "entry 0 expected string" in exc_info.value.reason
    with pytest.raises(CodecError):
        decode_column("partners", "[1]")
    with pytest.raises(CodecError):
        decode_column("items", '["Milk"]')
    with pytest.raises(CodecError):
        decode_column("ingredients", "[null]")


def test_nutrition_values_must_be_numbers():
    with pytest.raises(CodecError) as exc_info:
        decode_column("nutrition", '{"calories": "x"}')
    assert "entry calories expected number" in exc_info.value.reason
    with pytest.raises(CodecError):
        decode_column("nutrition", '{"calories": true}')
    with pytest.raises(CodecError):
        encode_column("nutrition", {"calories": "300"})
    assert decode_column("nutrition", '{"calories": 1.5, "fats": 0}') == {
        "calories": 1.5, "fats": 0,
    }


def test_nan_is_rejected_both_ways():
    with pytest.raises(CodecError):
        encode_column("nutrition", {"calories": float("nan")})
    with pytest.raises(CodecError):
        decode_column("nutrition", '{"calories": NaN}')


def test_unserializable_value_raises():
    with pytest.raises(CodecError):
        encode_column("items", [{"added": object()}])


def test_never_written_columns():
    assert decode_column("tags", None) == []
    assert decode_column("ai_reasoning", None) is None
    assert decode_column("partners", "[]") == []


def test_non_text_input_raises():
    with pytest.raises(CodecError):
        decode_column("tags", b"[]")


def test_unknown_column_kind_raises():
    with pytest.raises(CodecError):
        encode_column("toppings", [])


def test_encode_optional_passes_none_through():
    assert encode_optional("ai_reasoning", None) is None
    assert encode_optional("ai_reasoning", {"why": "overdue"}) == '{"why":"overdue"}'
