"""Byte layout of the 3855-byte TFR pilot record.

Every offset the decoder uses lives in LAYOUT. Offsets not listed here
(including bytes 0-1) have unknown purpose and are only kept in the raw
buffer. Multi-byte values are stored low byte first.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tfrdump.config import RECORD_SIZE
from tfrdump.tfr.errors import OffsetOutOfRange

BYTE = 1
WORD = 2
DWORD = 4


@dataclass(frozen=True, slots=True)
class Field:
    """A named value or array at a fixed offset."""
    name: str
    offset: int
    width: int                      # Element width in bytes (1, 2 or 4)
    count: Optional[int] = None     # None for scalars, else number of elements
    description: str = ""

    @property
    def is_array(self) -> bool:
        return self.count is not None

    @property
    def size(self) -> int:
        return self.width * (self.count or 1)

    @property
    def end(self) -> int:
        """First offset past this field."""
        return self.offset + self.size


_FIELDS = (
    Field("navy_rank", 2, BYTE, description="0-5, Cadet to General"),
    Field("difficulty", 3, BYTE, description="0 easy, 1 medium, 2 hard"),
    Field("points", 4, DWORD),
    Field("level", 8, WORD),
    Field("secret_rank", 10, BYTE, description="0-9, None to Emperor's Reach"),

    # Training certificates: default 2, value 4 once all three missions are flown
    Field("certificate_tie_fighter", 90, BYTE),
    Field("certificate_tie_interceptor", 91, BYTE),
    Field("certificate_tie_bomber", 92, BYTE),
    Field("certificate_tie_advanced", 93, BYTE),
    Field("certificate_assault_gunboat", 94, BYTE),
    Field("certificate_tie_defender", 95, BYTE),
    Field("certificate_missile_boat", 96, BYTE),
    Field("certificate_reserved", 97, BYTE, 5, "unused slots, usually 2"),

    # Combat simulator: one byte per mission, 1 when flown. 4 unused bytes follow each ship.
    Field("simulator_tie_fighter", 520, BYTE, 4),
    Field("simulator_tie_interceptor", 528, BYTE, 4),
    Field("simulator_tie_bomber", 536, BYTE, 4),
    Field("simulator_tie_advanced", 544, BYTE, 4),
    Field("simulator_assault_gunboat", 552, BYTE, 4),
    Field("simulator_tie_defender", 560, BYTE, 4),
    Field("simulator_missile_boat", 568, BYTE, 4),

    Field("active_battle", 616, BYTE, description="0-based; 9 unlocks every battle"),
    Field("battle_status", 617, BYTE, 13, "per battle: 1 active, 3 completed, 2/4 captured or killed"),
    Field("mission_progress", 637, BYTE, 13, "per battle: highest mission reached"),

    Field("kills", 1632, WORD, 68, "per craft type, see KILL_SHIP_NAMES"),
    Field("lasers_fired", 1908, DWORD),
    Field("laser_hits", 1912, DWORD),
    Field("warheads_fired", 1920, WORD),
    Field("warhead_hits", 1922, WORD),

    Field("training_points", 2064, DWORD, 28, "7 ships x 4 missions, 0 if not flown"),
    Field("battle_points", 2914, DWORD, 104, "13 battles x 8 mission slots, 0 if not flown"),

    Field("total_kills", 3554, WORD),
    Field("total_captured", 3556, WORD, description="width uncertain, low byte confirmed"),
    # A word here would end one byte past the record; only the low byte exists.
    Field("total_lost", 3854, BYTE, description="low byte of a word truncated by end of file"),
)

LAYOUT: dict[str, Field] = {f.name: f for f in _FIELDS}


def fields_in_offset_order() -> list[Field]:
    return sorted(LAYOUT.values(), key=lambda f: f.offset)


def validate_layout(layout: dict[str, Field], record_size: int = RECORD_SIZE) -> None:
    """Check that every field fits the record and no two fields overlap."""
    previous: Field | None = None
    for f in sorted(layout.values(), key=lambda f: f.offset):
        if f.offset < 0 or f.end > record_size:
            raise OffsetOutOfRange(f.offset, f.size, record_size)
        if previous is not None and f.offset < previous.end:
            raise ValueError(f"{f.name} at {f.offset} overlaps {previous.name} ending at {previous.end}")
        previous = f
