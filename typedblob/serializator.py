"""Packet-level serialization: a count followed by tagged values."""

from __future__ import annotations

import argparse
from pathlib import Path

from .bufferstream import ByteReader, pack_u64
from .datatypes import Any, Element


class Serializator:
    """Collects values and encodes them as one packet."""

    def __init__(self) -> None:
        self._storage: list[Any] = []

    def push(self, value: Element) -> None:
        """Append a value of any supported type."""
        self._storage.append(Any(value))

    def serialize(self) -> bytes:
        """Encode the collected values as a packet."""
        return pack_u64(len(self._storage)) + b"".join(
            item.serialize() for item in self._storage
        )

    @property
    def storage(self) -> tuple[Any, ...]:
        """The collected values in push order."""
        return tuple(self._storage)

    @staticmethod
    def deserialize(data: bytes | bytearray | memoryview) -> list[Any]:
        """Decode a packet into its values."""
        reader = ByteReader(data)
        count = reader.read_u64()
        return [Any.deserialize(reader) for _ in range(count)]


def main(argv: list[str] | None = None) -> int:
    """Decode a packet file, re-encode it and print 1 if the bytes match, else 0."""
    parser = argparse.ArgumentParser(
        prog="typedblob",
        description="Check that a packet file re-encodes to the same bytes.",
    )
    parser.add_argument("path", nargs="?", default="raw.bin")
    args = parser.parse_args(argv)

    try:
        data = Path(args.path).read_bytes()
    except OSError:
        return 1

    serializator = Serializator()
    for item in Serializator.deserialize(data):
        serializator.push(item)

    print(int(data == serializator.serialize()))
    return 0