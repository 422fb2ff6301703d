"""Little-endian primitives and a bounds-checked byte reader."""

from __future__ import annotations

import operator
import struct

_U64 = struct.Struct("<Q")
_F64 = struct.Struct("<d")

U64_MAX = 2**64 - 1


class BufferUnderflowError(IndexError):
    """Raised when a read needs more bytes than the buffer still holds."""

    def __init__(self, needed: int, remaining: int) -> None:
        super().__init__(
            f"Buffer underflow: need {needed} bytes, but only {remaining} remain"
        )
        self.needed = needed
        self.remaining = remaining


def pack_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer in little-endian order."""
    value = operator.index(value)
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{value} does not fit in an unsigned 64-bit integer")
    return _U64.pack(value)


def pack_f64(value: float) -> bytes:
    """Encode a double in little-endian order."""
    return _F64.pack(float(value))


class ByteReader:
    """Sequential reader over an immutable byte buffer."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(bytes(data))
        self.position = 0

    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._data) - self.position

    def ensure_available(self, length: int) -> None:
        """Raise BufferUnderflowError unless ``length`` more bytes can be read."""
        if length < 0:
            raise ValueError("length must not be negative")
        remaining = self.remaining()
        if remaining < length:
            raise BufferUnderflowError(length, remaining)

    def read_bytes(self, length: int) -> bytes:
        """Consume and return exactly ``length`` bytes."""
        self.ensure_available(length)
        start = self.position
        self.position += length
        return bytes(self._data[start:self.position])

    def read_u64(self) -> int:
        """Consume an unsigned little-endian 64-bit integer."""
        return _U64.unpack(self.read_bytes(_U64.size))[0]

    def read_f64(self) -> float:
        """Consume a little-endian double."""
        return _F64.unpack(self.read_bytes(_F64.size))[0]