"""Typed values of the wire format and the tagged ``Any`` holder."""

from __future__ import annotations

import operator
from enum import IntEnum
from typing import ClassVar, Iterator, Union

from .bufferstream import U64_MAX, ByteReader, pack_f64, pack_u64


class TypeId(IntEnum):
    """Numeric tag written in front of every serialized value."""

    UINT = 0
    FLOAT = 1
    STRING = 2
    VECTOR = 3


class UnknownTypeError(ValueError):
    """Raised when a buffer carries a type tag that is not a known TypeId."""

    def __init__(self, raw_id: int) -> None:
        super().__init__(f"unknown type id {raw_id}")
        self.raw_id = raw_id


class _BaseType:
    """Common behaviour of all typed values: tag, equality, tagging."""

    type_id: ClassVar[TypeId]
    __slots__ = ("value",)
    __hash__ = None  # type: ignore[assignment]

    def _tagged(self, payload: bytes) -> bytes:
        """Prefix an encoded payload with this value's type tag."""
        return pack_u64(self.type_id) + payload

    def serialize(self) -> bytes:  # pragma: no cover - overridden everywhere
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class IntegerType(_BaseType):
    """Unsigned 64-bit integer."""

    type_id = TypeId.UINT
    __slots__ = ()

    def __init__(self, value: int = 0) -> None:
        value = operator.index(value)
        if not 0 <= value <= U64_MAX:
            raise ValueError(f"{value} does not fit in an unsigned 64-bit integer")
        self.value = value

    def serialize(self) -> bytes:
        """Encode as type tag followed by the integer."""
        return self._tagged(pack_u64(self.value))

    @classmethod
    def deserialize(cls, reader: ByteReader) -> IntegerType:
        """Read the payload (the tag already consumed)."""
        return cls(reader.read_u64())


class FloatType(_BaseType):
    """IEEE-754 double."""

    type_id = TypeId.FLOAT
    __slots__ = ()

    def __init__(self, value: float = 0.0) -> None:
        self.value = float(value)

    def serialize(self) -> bytes:
        """Encode as type tag followed by the double."""
        return self._tagged(pack_f64(self.value))

    @classmethod
    def deserialize(cls, reader: ByteReader) -> FloatType:
        """Read the payload (the tag already consumed)."""
        return cls(reader.read_f64())


class StringType(_BaseType):
    """Length-prefixed byte string; text is stored UTF-8 encoded."""

    type_id = TypeId.STRING
    __slots__ = ()

    def __init__(self, value: str | bytes | bytearray | memoryview = b"") -> None:
        if isinstance(value, str):
            self.value = value.encode("utf-8")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            self.value = bytes(value)
        else:
            raise TypeError(f"cannot build StringType from {type(value).__name__}")

    def serialize(self) -> bytes:
        """Encode as type tag, length and raw bytes."""
        return self._tagged(pack_u64(len(self.value)) + self.value)

    @classmethod
    def deserialize(cls, reader: ByteReader) -> StringType:
        """Read the payload (the tag already consumed)."""
        length = reader.read_u64()
        return cls(reader.read_bytes(length))


Element = Union[IntegerType, FloatType, StringType, "VectorType", "Any"]


class VectorType(_BaseType):
    """Ordered sequence of values of any supported type."""

    type_id = TypeId.VECTOR
    __slots__ = ()

    def __init__(self, *args: Element) -> None:
        self.value: list[Any] = []
        for item in args:
            self.push_back(item)

    def push_back(self, value: Element) -> None:
        """Append a value, wrapping it in ``Any``."""
        self.value.append(Any(value))

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.value)

    def serialize(self) -> bytes:
        """Encode as type tag, element count and each element in order."""
        return self._tagged(
            pack_u64(len(self.value)) + b"".join(item.serialize() for item in self.value)
        )

    @classmethod
    def deserialize(cls, reader: ByteReader) -> VectorType:
        """Read the payload (the tag already consumed)."""
        count = reader.read_u64()
        result = cls()
        for _ in range(count):
            result.push_back(Any.deserialize(reader))
        return result


class Any:
    """Holder of exactly one value of a supported type."""

    __slots__ = ("payload",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Element) -> None:
        if isinstance(value, Any):
            value = value.payload
        elif not isinstance(value, _BaseType):
            raise TypeError(f"cannot hold a value of type {type(value).__name__}")
        self.payload: _BaseType = value

    def serialize(self) -> bytes:
        """Encode the held value with its type tag."""
        return self.payload.serialize()

    @classmethod
    def deserialize(cls, reader: ByteReader) -> Any:
        """Read a tagged value."""
        raw_id = reader.read_u64()
        try:
            kind = TypeId(raw_id)
        except ValueError:
            raise UnknownTypeError(raw_id) from None
        return cls(_TYPES[kind].deserialize(reader))

    def payload_type_id(self) -> TypeId:
        """Type tag of the held value."""
        return self.payload.type_id

    def get_value(self, kind: type | TypeId):
        """Return the held value, checked against a class or a TypeId."""
        expected = kind if isinstance(kind, type) else _TYPES[TypeId(kind)]
        if type(self.payload) is not expected:
            raise TypeError(
                f"holds {type(self.payload).__name__}, not {expected.__name__}"
            )
        return self.payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Any):
            return NotImplemented
        return self.payload == other.payload

    def __repr__(self) -> str:
        return f"Any({self.payload!r})"


_TYPES: dict[TypeId, type] = {
    TypeId.UINT: IntegerType,
    TypeId.FLOAT: FloatType,
    TypeId.STRING: StringType,
    TypeId.VECTOR: VectorType,
}