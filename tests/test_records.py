import io

import pytest

from treasurehunt.records import (
    FIELD_SIZE,
    RECORD_SIZE,
    Treasure,
    format_treasure,
    iter_treasures,
    pack_treasure,
    unpack_treasure,
)


def _sample(tid="t01"):
    return Treasure(id=tid, name="alice", lat=45.5, lng=21.25, clue="under the oak", val=100)


def test_record_size_matches_layout():
    data = pack_treasure(_sample())
    assert len(data) == 3024
    assert RECORD_SIZE == len(data)


def test_pack_has_fixed_size_and_null_padding():
    data = pack_treasure(_sample())
    assert len(data) == RECORD_SIZE
    assert data[:3] == b"t01"
    assert data[3] == 0
    assert data[FIELD_SIZE:FIELD_SIZE + 5] == b"alice"


def test_round_trip():
    treasure = _sample()
    assert unpack_treasure(pack_treasure(treasure)) == treasure


def test_round_trip_unicode():
    treasure = Treasure(id="ţ", name="Ştefan", lat=-1.0, lng=2.0, clue="sub pod", val=-5)
    assert unpack_treasure(pack_treasure(treasure)) == treasure


def test_unpack_wrong_length():
    with pytest.raises(ValueError):
        unpack_treasure(b"\0" * (RECORD_SIZE - 1))


def test_field_too_long():
    with pytest.raises(ValueError):
        Treasure(id="x" * FIELD_SIZE, name="a", lat=0.0, lng=0.0, clue="c", val=1)


def test_field_at_limit_is_accepted():
    treasure = Treasure(id="x" * (FIELD_SIZE - 1), name="a", lat=0.0, lng=0.0, clue="c", val=1)
    assert unpack_treasure(pack_treasure(treasure)).id == "x" * (FIELD_SIZE - 1)


def test_value_out_of_range():
    with pytest.raises(ValueError):
        Treasure(id="a", name="a", lat=0.0, lng=0.0, clue="c", val=2**31)


def test_iter_treasures_ignores_trailing_fragment():
    first, second = _sample("a"), _sample("b")
    stream = io.BytesIO(pack_treasure(first) + pack_treasure(second) + b"\1\2\3")
    assert list(iter_treasures(stream)) == [first, second]


def test_iter_treasures_empty():
    assert list(iter_treasures(io.BytesIO(b""))) == []


def test_format_treasure():
    text = format_treasure(_sample())
    assert text == (
        "ID: t01\nName: alice\nCoordinates: (45.50, 21.25)\n"
        "Clue: under the oak\nValue: 100\n\n"
    )