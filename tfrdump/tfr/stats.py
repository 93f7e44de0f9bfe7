"""Derived statistics computed from a PilotRecord."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional

from tfrdump.config import CERTIFIED_VALUE
from tfrdump.tfr.enums import KILL_SHIP_NAMES, BattleStatus, Medal, TrainingShip
from tfrdump.tfr.errors import UnexpectedValue
from tfrdump.tfr.records import PilotRecord

# Completed simulator missions -> medal. Fewer than two earns nothing.
_MEDAL_BY_SUM: dict[int, Medal] = {
    0: Medal.NONE,
    1: Medal.NONE,
    2: Medal.BRONZE,
    3: Medal.SILVER,
    4: Medal.GOLD,
}


class BattleStateKind(Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"
    COMPLETED = "completed"
    CAPTURED_OR_KILLED = "captured or killed"


_STATE_BY_STATUS: dict[int, BattleStateKind] = {
    BattleStatus.UNKNOWN: BattleStateKind.INACTIVE,
    BattleStatus.ACTIVE: BattleStateKind.ACTIVE,
    BattleStatus.CAPTURED_OR_KILLED: BattleStateKind.CAPTURED_OR_KILLED,
    BattleStatus.COMPLETED: BattleStateKind.COMPLETED,
    BattleStatus.CAPTURED_OR_KILLED_ALT: BattleStateKind.CAPTURED_OR_KILLED,
}


@dataclass(frozen=True, slots=True)
class BattleState:
    """Progress of one battle. mission is None for inactive battles."""
    kind: BattleStateKind
    mission: Optional[int] = None


def is_certified(value: int) -> bool:
    return value == CERTIFIED_VALUE


def medal_tier(scores: Iterable[int]) -> Medal:
    """Map the four simulator mission results of one ship to a medal."""
    total = sum(scores)
    medal = _MEDAL_BY_SUM.get(total)
    if medal is None:
        raise UnexpectedValue("simulator score sum", total)
    return medal


def battle_state(status: int, mission: int) -> BattleState:
    kind = _STATE_BY_STATUS.get(int(status))
    if kind is None:
        raise UnexpectedValue("battle status", int(status))
    if kind is BattleStateKind.INACTIVE:
        return BattleState(kind)
    return BattleState(kind, mission)


def accuracy(fired: int, hits: int) -> Optional[int]:
    """Hit percentage, truncated. None when nothing was fired."""
    if fired == 0:
        return None
    return (100 * hits) // fired


class AttemptedEntries:
    """Non-zero entries of a points table, numbered from 1 in order of appearance.

    Iterating yields ``(number, value)`` pairs and can be repeated.
    """

    def __init__(self, values: Iterable[int]):
        self._values = tuple(values)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        number = 0
        for value in self._values:
            if value:
                number += 1
                yield number, value

    def __repr__(self) -> str:
        return f"AttemptedEntries({list(self)!r})"


def attempted_entries(values: Iterable[int]) -> AttemptedEntries:
    return AttemptedEntries(values)


# -- Record-level helpers --

def certified_ships(record: PilotRecord) -> list[TrainingShip]:
    return [ship for ship in TrainingShip if is_certified(record.certificates.for_ship(ship))]


def ship_medals(record: PilotRecord) -> dict[TrainingShip, Medal]:
    return {ship: medal_tier(record.simulator_scores.for_ship(ship)) for ship in TrainingShip}


def battle_states(record: PilotRecord) -> list[BattleState]:
    """One state per battle, in battle order."""
    return [
        battle_state(status, mission)
        for status, mission in zip(record.battle_status, record.mission_progress)
    ]


def laser_accuracy(record: PilotRecord) -> Optional[int]:
    return accuracy(record.lasers_fired, record.laser_hits)


def warhead_accuracy(record: PilotRecord) -> Optional[int]:
    return accuracy(record.warheads_fired, record.warhead_hits)


def kill_details(record: PilotRecord) -> list[tuple[str, int]]:
    """(craft name, kills) for every kill counter slot, in file order."""
    return list(zip(KILL_SHIP_NAMES, record.kills))
