"""Reading and writing binary relation files of fixed-size records."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable

from graphdata.graph import Message

ID_SIZE = 12
_WEIGHT = struct.Struct("<f")
RECORD_SIZE = 2 * ID_SIZE + _WEIGHT.size


def _to_float32(value: float) -> float:
    return _WEIGHT.unpack(_WEIGHT.pack(value))[0]


def _decode_id(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("latin-1")


def _encode_id(identifier: str) -> bytes:
    raw = identifier.encode("latin-1")
    if len(raw) > ID_SIZE:
        raise ValueError(f"id {identifier!r} is longer than {ID_SIZE} bytes")
    return raw.ljust(ID_SIZE, b"\0")


def read_relations(path: str | os.PathLike[str], threshold: float) -> list[Message]:
    """Read relations whose weight is at most ``threshold``.

    The threshold is compared at single precision, as the weights are stored.
    A trailing incomplete record is ignored.
    """
    limit = _to_float32(threshold)
    with open(path, "rb") as stream:
        data = stream.read()
    relations = []
    for offset in range(0, len(data) - RECORD_SIZE + 1, RECORD_SIZE):
        record = data[offset:offset + RECORD_SIZE]
        (weight,) = _WEIGHT.unpack_from(record, 2 * ID_SIZE)
        if weight <= limit:
            relations.append(
                Message(
                    _decode_id(record[:ID_SIZE]),
                    _decode_id(record[ID_SIZE:2 * ID_SIZE]),
                    weight,
                )
            )
    return relations


def write_relations(path: str | os.PathLike[str], messages: Iterable[Message]) -> None:
    """Write relations as fixed-size records readable by :func:`read_relations`."""
    chunks = [
        _encode_id(message.id1) + _encode_id(message.id2) + _WEIGHT.pack(message.weight)
        for message in messages
    ]
    with open(path, "wb") as stream:
        stream.write(b"".join(chunks))