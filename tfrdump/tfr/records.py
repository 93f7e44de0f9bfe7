"""PilotRecord dataclasses and the one-pass decoder."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tfrdump.config import RECORD_SIZE
from tfrdump.tfr.enums import (
    BattleStatus,
    Difficulty,
    NavyRank,
    SecretRank,
    TrainingShip,
    coerce_enum,
)
from tfrdump.tfr.layout import LAYOUT, Field
from tfrdump.tfr.reader import Buffer, read_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Certificates:
    """Training certificate bytes, one per ship, plus the unused slots after them."""
    tie_fighter: int
    tie_interceptor: int
    tie_bomber: int
    tie_advanced: int
    assault_gunboat: int
    tie_defender: int
    missile_boat: int
    reserved: tuple[int, ...] = ()

    def for_ship(self, ship: TrainingShip) -> int:
        return getattr(self, ship.value)


@dataclass(frozen=True, slots=True)
class SimulatorScores:
    """Combat simulator results, four missions per ship."""
    tie_fighter: tuple[int, ...]
    tie_interceptor: tuple[int, ...]
    tie_bomber: tuple[int, ...]
    tie_advanced: tuple[int, ...]
    assault_gunboat: tuple[int, ...]
    tie_defender: tuple[int, ...]
    missile_boat: tuple[int, ...]

    def for_ship(self, ship: TrainingShip) -> tuple[int, ...]:
        return getattr(self, ship.value)


@dataclass(frozen=True, slots=True)
class PilotRecord:
    """A decoded pilot career file."""
    navy_rank: NavyRank
    difficulty: Difficulty
    points: int
    level: int
    secret_rank: SecretRank
    certificates: Certificates
    simulator_scores: SimulatorScores
    active_battle: int
    battle_status: tuple[BattleStatus, ...]
    mission_progress: tuple[int, ...]
    kills: tuple[int, ...]
    lasers_fired: int
    laser_hits: int
    warheads_fired: int
    warhead_hits: int
    training_points: tuple[int, ...]
    battle_points: tuple[int, ...]
    total_kills: int
    total_captured: int
    total_lost: int
    # Normalized source buffer; unknown ranges survive here untouched
    raw: bytes = field(default=b"", repr=False)

    @property
    def active_battle_number(self) -> int:
        """Active battle as shown to the player (1-based)."""
        return self.active_battle + 1


def normalize_buffer(data: Buffer) -> bytes:
    """Zero-pad or truncate input to exactly RECORD_SIZE bytes."""
    data = bytes(data)
    if len(data) < RECORD_SIZE:
        logger.warning("Pilot data is %d bytes, padding to %d with zeros", len(data), RECORD_SIZE)
        return data + bytes(RECORD_SIZE - len(data))
    if len(data) > RECORD_SIZE:
        logger.warning("Pilot data is %d bytes, ignoring everything past %d", len(data), RECORD_SIZE)
        return data[:RECORD_SIZE]
    return data


def decode_pilot(data: Buffer) -> PilotRecord:
    """Decode a pilot record from raw file contents.

    Raises EnumOutOfRange if a rank, difficulty or battle status byte holds
    an unknown value, and OffsetOutOfRange if a layout entry does not fit
    the buffer. No partial record is ever returned.
    """
    buf = normalize_buffer(data)

    def get(name: str):
        return read_field(buf, LAYOUT[name])

    record = PilotRecord(
        navy_rank=coerce_enum(NavyRank, "navy_rank", get("navy_rank")),
        difficulty=coerce_enum(Difficulty, "difficulty", get("difficulty")),
        points=get("points"),
        level=get("level"),
        secret_rank=coerce_enum(SecretRank, "secret_rank", get("secret_rank")),
        certificates=Certificates(
            **{ship.value: get(f"certificate_{ship.value}") for ship in TrainingShip},
            reserved=get("certificate_reserved"),
        ),
        simulator_scores=SimulatorScores(
            **{ship.value: get(f"simulator_{ship.value}") for ship in TrainingShip},
        ),
        active_battle=get("active_battle"),
        battle_status=tuple(
            coerce_enum(BattleStatus, "battle_status", value, index=i)
            for i, value in enumerate(get("battle_status"))
        ),
        mission_progress=get("mission_progress"),
        kills=get("kills"),
        lasers_fired=get("lasers_fired"),
        laser_hits=get("laser_hits"),
        warheads_fired=get("warheads_fired"),
        warhead_hits=get("warhead_hits"),
        training_points=get("training_points"),
        battle_points=get("battle_points"),
        total_kills=get("total_kills"),
        total_captured=get("total_captured"),
        total_lost=get("total_lost"),
        raw=buf,
    )
    logger.debug("Decoded pilot: %s, %d points", record.navy_rank.label, record.points)
    return record


def field_values(record: PilotRecord, fields: list[Field] | None = None) -> dict[str, int | tuple[int, ...]]:
    """Raw integer values of every layout entry, read from the record's buffer."""
    if fields is None:
        fields = list(LAYOUT.values())
    return {f.name: read_field(record.raw, f) for f in fields}
