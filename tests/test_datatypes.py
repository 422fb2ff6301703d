import math

import pytest

from typedblob.bufferstream import BufferUnderflowError, ByteReader, pack_u64
from typedblob.datatypes import (
    Any,
    FloatType,
    IntegerType,
    StringType,
    TypeId,
    UnknownTypeError,
    VectorType,
)

DESCRIPTION = bytes([
    0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x03, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x02, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x02, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x06, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x71, 0x77, 0x65, 0x72, 0x74, 0x79, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x94, 0x88,
    0x01, 0x00, 0x00, 0x00, 0x00, 0x00,
])


def _round_trip(value):
    reader = ByteReader(Any(value).serialize())
    result = Any.deserialize(reader)
    assert reader.remaining() == 0
    return result


def test_description_vector_deserializes():
    result = Any.deserialize(ByteReader(DESCRIPTION[8:]))
    expected = VectorType(StringType("qwerty"), IntegerType(100500))
    assert result.get_value(VectorType) == expected


def test_description_vector_serializes():
    vec = VectorType(StringType("qwerty"), IntegerType(100500))
    assert vec.serialize() == DESCRIPTION[8:]


def test_string_serialization_matches_description():
    assert StringType("qwerty").serialize() == DESCRIPTION[24:46]


def test_integer_serialization_matches_description():
    assert IntegerType(100500).serialize() == DESCRIPTION[46:62]


def test_string_from_text_equals_bytes():
    assert StringType("qwerty") == StringType(b"qwerty")


def test_string_rejects_other_types():
    with pytest.raises(TypeError):
        StringType(5)


@pytest.mark.parametrize("value", [0, 42, 2**64 - 1])
def test_integer_round_trip(value):
    assert _round_trip(IntegerType(value)) == Any(IntegerType(value))


@pytest.mark.parametrize("value", [-1, 2**64])
def test_integer_out_of_range(value):
    with pytest.raises(ValueError):
        IntegerType(value)


@pytest.mark.parametrize("value", [0.0, -2.5, 1e300, math.inf])
def test_float_round_trip(value):
    assert _round_trip(FloatType(value)).get_value(FloatType).value == value


def test_binary_string_round_trip():
    blob = bytes(range(256))
    assert _round_trip(StringType(blob)).get_value(StringType).value == blob


def test_nested_vector_round_trip():
    vec = VectorType(
        IntegerType(1),
        VectorType(FloatType(0.5), StringType("")),
        VectorType(),
    )
    assert _round_trip(vec).get_value(VectorType) == vec


def test_vector_push_back_accepts_any_and_values():
    vec = VectorType()
    vec.push_back(IntegerType(7))
    vec.push_back(Any(StringType("x")))
    assert len(vec) == 2
    assert [item.payload_type_id() for item in vec] == [TypeId.UINT, TypeId.STRING]


def test_vector_rejects_plain_values():
    with pytest.raises(TypeError):
        VectorType(1)


def test_any_rejects_plain_values():
    with pytest.raises(TypeError):
        Any("text")


def test_any_copy_equals_original():
    original = Any(FloatType(2.0))
    assert Any(original) == original


def test_any_equality_distinguishes_types():
    assert (Any(IntegerType(1)) == Any(FloatType(1.0))) is False


def test_get_value_by_type_id():
    held = Any(StringType("abc"))
    assert held.get_value(TypeId.STRING) == StringType("abc")
    assert held.payload_type_id() is TypeId.STRING


def test_get_value_wrong_type():
    with pytest.raises(TypeError):
        Any(IntegerType(1)).get_value(FloatType)


def test_unknown_type_id():
    with pytest.raises(UnknownTypeError) as info:
        Any.deserialize(ByteReader(pack_u64(7)))
    assert info.value.raw_id == 7


def test_truncated_string_raises_underflow():
    data = StringType("qwerty").serialize()[:-1]
    with pytest.raises(BufferUnderflowError):
        Any.deserialize(ByteReader(data))