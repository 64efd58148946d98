"""Fixed-size binary records for treasures stored in a hunt."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator

FIELD_SIZE = 1000
_LAYOUT = struct.Struct(f"<{FIELD_SIZE}s{FIELD_SIZE}sdd{FIELD_SIZE}si4x")
RECORD_SIZE = _LAYOUT.size

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="surrogateescape")


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="surrogateescape")


@dataclass(frozen=True)
class Treasure:
    """One treasure: identifier, owner, position, clue and value."""

    id: str
    name: str
    lat: float
    lng: float
    clue: str
    val: int

    def __post_init__(self) -> None:
        for field_name in ("id", "name", "clue"):
            value = getattr(self, field_name)
            if "\0" in value:
                raise ValueError(f"{field_name} must not contain NUL characters")
            if len(_encode(value)) >= FIELD_SIZE:
                raise ValueError(
                    f"{field_name} is longer than {FIELD_SIZE - 1} bytes"
                )
        if not _INT_MIN <= self.val <= _INT_MAX:
            raise ValueError("val does not fit in a 32-bit integer")


def pack_treasure(treasure: Treasure) -> bytes:
    """Encode a treasure as one fixed-size record."""
    return _LAYOUT.pack(
        _encode(treasure.id),
        _encode(treasure.name),
        float(treasure.lat),
        float(treasure.lng),
        _encode(treasure.clue),
        treasure.val,
    )


def unpack_treasure(data: bytes) -> Treasure:
    """Decode one fixed-size record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"record must be {RECORD_SIZE} bytes, got {len(data)}")
    raw_id, raw_name, lat, lng, raw_clue, val = _LAYOUT.unpack(data)
    return Treasure(
        id=_decode(raw_id),
        name=_decode(raw_name),
        lat=lat,
        lng=lng,
        clue=_decode(raw_clue),
        val=val,
    )


def iter_treasures(stream: BinaryIO) -> Iterator[Treasure]:
    """Yield every complete record in a binary stream; a trailing fragment is ignored."""
    while True:
        chunk = stream.read(RECORD_SIZE)
        if len(chunk) != RECORD_SIZE:
            return
        yield unpack_treasure(chunk)


def format_treasure(treasure: Treasure) -> str:
    """Render a treasure the way listings and views show it."""
    return (
        f"ID: {treasure.id}\n"
        f"Name: {treasure.name}\n"
        f"Coordinates: ({treasure.lat:.2f}, {treasure.lng:.2f})\n"
        f"Clue: {treasure.clue}\n"
        f"Value: {treasure.val}\n\n"
    )