import pydantic
import pytest

from psdb.cast import _CASTERS, cast
from psdb.errors import DataError
from psdb.fields import BINARY_CHARSET, BINARY_TYPES, INTEGRAL_TYPES, FieldType
from psdb.schemas import Field


def field(type_, charset=None, name="test"):
    return Field(name=name, type=type_, charset=charset)


def test_every_type_has_a_caster():
    assert set(_CASTERS) == set(FieldType)


def test_unknown_type_tag_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        Field(name="v", type="VECTOR")


def test_missing_type_is_null():
    assert Field.model_validate({"name": "null"}).type is FieldType.NULL
    assert Field.model_validate({"name": "null", "type": None}).type is FieldType.NULL


@pytest.mark.parametrize("type_", list(FieldType))
def test_casts_null_values(type_):
    assert cast(field(type_), None) is None


@pytest.mark.parametrize("type_", [FieldType.INT64, FieldType.UINT64])
def test_leaves_64_bit_integers_as_text(type_):
    assert cast(field(type_), b"1") == "1"
    assert cast(field(type_), b"18446744073709551615") == "18446744073709551615"


@pytest.mark.parametrize("type_, value", [
    (FieldType.DATETIME, "2024-01-01 00:00:00"),
    (FieldType.DATE, "2024-01-01"),
    (FieldType.TIMESTAMP, "1970-01-01 00:01:01"),
    (FieldType.TIME, "01:01:01"),
])
def test_leaves_dates_and_times_as_text(type_, value):
    assert cast(field(type_), value.encode()) == value


def test_leaves_decimals_as_text():
    assert cast(field(FieldType.DECIMAL), b"5.4") == "5.4"


def test_parses_json():
    assert cast(field(FieldType.JSON), b'{ "color": "blue" }') == {"color": "blue"}
    assert cast(field(FieldType.JSON, BINARY_CHARSET), '{"foo": "ü"}'.encode()) == {"foo": "ü"}


def test_invalid_json_is_a_data_error():
    with pytest.raises(DataError):
        cast(field(FieldType.JSON), b"{not json")


@pytest.mark.parametrize("type_", sorted(INTEGRAL_TYPES))
def test_casts_integral_types_to_int(type_):
    assert cast(field(type_), b"123") == 123


def test_casts_negative_and_year_values():
    assert cast(field(FieldType.INT32), b"-21") == -21
    assert cast(field(FieldType.YEAR), b"2006") == 2006


def test_casts_floats():
    assert cast(field(FieldType.FLOAT32), b"20.4") == 20.4
    assert cast(field(FieldType.FLOAT64), b"101.4") == 101.4


def test_invalid_integer_is_a_data_error():
    with pytest.raises(DataError):
        cast(field(FieldType.INT8), b"abc")


@pytest.mark.parametrize("type_", sorted(BINARY_TYPES))
def test_binary_charset_returns_bytes(type_):
    data = bytes(range(256))
    assert cast(field(type_, BINARY_CHARSET), data) == data


def test_binary_types_with_text_charset_are_decoded():
    assert cast(field(FieldType.VARBINARY, 255), b"table") == "table"
    assert cast(field(FieldType.BLOB, 255), b"xd") == "xd"


def test_text_with_binary_charset_is_still_text():
    assert cast(field(FieldType.VARCHAR, BINARY_CHARSET), b"abc") == "abc"


def test_casts_text_types():
    assert cast(field(FieldType.VARCHAR), b"user@example.com") == "user@example.com"
    assert cast(field(FieldType.VARCHAR, 8), "ÿ".encode()) == "ÿ"
    assert cast(field(FieldType.SET), b"foo,bar") == "foo,bar"


def test_empty_values():
    assert cast(field(FieldType.BLOB, BINARY_CHARSET), b"") == b""
    assert cast(field(FieldType.VARBINARY, 255), b"") == ""
    assert cast(field(FieldType.VARCHAR), b"") == ""
    assert cast(field(FieldType.INT32), b"") == ""
    assert cast(field(FieldType.JSON), b"") == ""


def test_cast_is_pure():
    f = field(FieldType.JSON)
    assert cast(f, b"[1, 2]") == cast(f, b"[1, 2]")
