from __future__ import annotations

from pathlib import Path

import pytest

from tfrdump.config import RECORD_SIZE
from tfrdump.tfr.layout import LAYOUT


def _put(buf: bytearray, name: str, value, index: int = 0) -> None:
    """Store a value at a layout entry (low byte first)."""
    f = LAYOUT[name]
    offset = f.offset + index * f.width
    buf[offset:offset + f.width] = value.to_bytes(f.width, "little")


@pytest.fixture
def put():
    return _put


@pytest.fixture
def blank() -> bytearray:
    return bytearray(RECORD_SIZE)


@pytest.fixture
def veteran() -> bytearray:
    """A pilot part-way through the campaign."""
    buf = bytearray(RECORD_SIZE)
    buf[0:2] = b"\x07\x09"
    _put(buf, "navy_rank", 3)
    _put(buf, "difficulty", 2)
    _put(buf, "points", 123456)
    _put(buf, "level", 5)
    _put(buf, "secret_rank", 2)
    _put(buf, "certificate_tie_fighter", 4)
    _put(buf, "certificate_tie_interceptor", 4)
    _put(buf, "certificate_tie_bomber", 2)
    for i in range(4):
        _put(buf, "simulator_tie_fighter", 1, index=i)
    for i in range(3):
        _put(buf, "simulator_tie_bomber", 1, index=i)
    _put(buf, "active_battle", 1)
    _put(buf, "battle_status", 3, index=0)
    _put(buf, "mission_progress", 6, index=0)
    _put(buf, "battle_status", 1, index=1)
    _put(buf, "mission_progress", 2, index=1)
    _put(buf, "kills", 12, index=0)
    _put(buf, "kills", 300, index=1)
    _put(buf, "lasers_fired", 200)
    _put(buf, "laser_hits", 100)
    _put(buf, "warheads_fired", 0)
    _put(buf, "training_points", 5, index=2)
    _put(buf, "training_points", 9, index=4)
    _put(buf, "battle_points", 70000, index=0)
    _put(buf, "total_kills", 312)
    _put(buf, "total_captured", 1)
    _put(buf, "total_lost", 2)
    return buf


@pytest.fixture
def pilot_file(tmp_path: Path, veteran: bytearray) -> Path:
    path = tmp_path / "VADER.TFR"
    path.write_bytes(bytes(veteran))
    return path
