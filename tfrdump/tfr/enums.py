"""Enumerations and static name tables for integer-coded pilot fields."""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import TypeVar

from tfrdump.tfr.errors import EnumOutOfRange

E = TypeVar("E", bound=IntEnum)


def coerce_enum(enum_cls: type[E], field: str, value: int, index: int | None = None) -> E:
    """Return the enum member for a raw byte, or raise EnumOutOfRange for unknowns."""
    try:
        return enum_cls(value)
    except ValueError:
        raise EnumOutOfRange(field, value, index) from None


class NavyRank(IntEnum):
    CADET = 0
    OFFICER = 1
    LIEUTENANT = 2
    CAPTAIN = 3
    COMMANDER = 4
    GENERAL = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Difficulty(IntEnum):
    EASY = 0
    MEDIUM = 1
    HARD = 2

    @property
    def label(self) -> str:
        return self.name.lower()


class SecretRank(IntEnum):
    """Rank within the Emperor's secret order."""
    NONE = 0
    FIRST_INITIATE = 1
    SECOND_CIRCLE = 2
    THIRD_CIRCLE = 3
    FOURTH_CIRCLE = 4
    INNER_CIRCLE = 5
    EMPERORS_HAND = 6
    EMPERORS_EYES = 7
    EMPERORS_VOICE = 8
    EMPERORS_REACH = 9

    @property
    def label(self) -> str:
        return SECRET_RANK_LABELS[self]


SECRET_RANK_LABELS: dict[SecretRank, str] = {
    SecretRank.NONE: "None",
    SecretRank.FIRST_INITIATE: "First Initiate",
    SecretRank.SECOND_CIRCLE: "Second Circle",
    SecretRank.THIRD_CIRCLE: "Third Circle",
    SecretRank.FOURTH_CIRCLE: "Fourth Circle",
    SecretRank.INNER_CIRCLE: "Inner Circle",
    SecretRank.EMPERORS_HAND: "Emperor's Hand",
    SecretRank.EMPERORS_EYES: "Emperor's Eyes",
    SecretRank.EMPERORS_VOICE: "Emperor's Voice",
    SecretRank.EMPERORS_REACH: "Emperor's Reach",
}


class BattleStatus(IntEnum):
    """Per-battle progress byte. Codes 2 and 4 both mean captured or killed."""
    UNKNOWN = 0
    ACTIVE = 1
    CAPTURED_OR_KILLED = 2
    COMPLETED = 3
    CAPTURED_OR_KILLED_ALT = 4


class Medal(IntEnum):
    """Simulator medal, ordered by tier."""
    NONE = 0
    BRONZE = 1
    SILVER = 2
    GOLD = 3

    @property
    def label(self) -> str:
        return "(none)" if self is Medal.NONE else self.name.lower()


class TrainingShip(Enum):
    """Ship types with a training certificate and simulator medals, in file order."""
    TIE_FIGHTER = "tie_fighter"
    TIE_INTERCEPTOR = "tie_interceptor"
    TIE_BOMBER = "tie_bomber"
    TIE_ADVANCED = "tie_advanced"
    ASSAULT_GUNBOAT = "assault_gunboat"
    TIE_DEFENDER = "tie_defender"
    MISSILE_BOAT = "missile_boat"

    @property
    def label(self) -> str:
        return TRAINING_SHIP_LABELS[self]


TRAINING_SHIP_LABELS: dict[TrainingShip, str] = {
    TrainingShip.TIE_FIGHTER: "T/F",
    TrainingShip.TIE_INTERCEPTOR: "T/I",
    TrainingShip.TIE_BOMBER: "T/B",
    TrainingShip.TIE_ADVANCED: "T/A",
    TrainingShip.ASSAULT_GUNBOAT: "Gunboat",
    TrainingShip.TIE_DEFENDER: "T/D",
    TrainingShip.MISSILE_BOAT: "Missile Boat",
}


# Kill counter index -> craft name. Several slots belong to craft that were
# cut from the released game and always read zero.
KILL_SHIP_NAMES: tuple[str, ...] = (
    "X-W",              # 0  X-wing
    "Y-W",
    "A-W",
    "B-W",
    "T/F",              # TIE Fighter
    "T/I",              # 5  TIE Interceptor
    "T/B",
    "T/A",
    "T/D",              # TIE Defender
    "TIE New 1",        # cut
    "TIE New 2",        # 10 cut
    "MIS",              # Missile Boat
    "T-W",              # T-wing
    "Z-95",
    "R-41",
    "GUN",              # 15 Assault Gunboat
    "SHU",              # Lambda shuttle
    "E/S",              # Escort Shuttle
    "SPC",              # System Patrol Craft
    "SCT",              # Scout craft
    "TRN",              # 20 Stormtrooper Transport
    "ATR",              # Assault Transport
    "ETR",              # Escort Transport
    "TUG",
    "CUV",              # Combat Utility Vehicle
    "CN/A",             # 25 Containers A-D
    "CN/B",
    "CN/C",
    "CN/D",
    "HLF",              # Heavy Lifter
    "Heavy Freighter",  # 30
    "FRT",              # Freighter
    "CARGO",            # Cargo Ferry
    "MTRN",             # Modular Transport
    "CTRN",             # Container Transport
    "New Freighter 3",  # 35 cut
    "MUTR",             # Muurian Transport
    "CORT",             # Corellian Transport
    "Millennium",       # cut
    "CRV",              # Corvette
    "M/CRV",            # 40 Modified Corvette
    "FRG",              # Nebulon-B Frigate
    "M/FRG",            # Modified Frigate
    "LINER",            # C-3 Passenger Liner
    "CRCK",             # Carrack Cruiser
    "STRKC",            # 45 Strike Cruiser
    "ESC",              # Escort Carrier
    "DREAD",            # Dreadnaught
    "CRS",              # Calamari Cruiser
    "INT",              # Interdictor
    "VSD",              # 50 Victory Star Destroyer
    "ISD",              # Imperial Star Destroyer
    "Super Star Destroyer",  # cut
    "CN/E",
    "CN/F",
    "CN/G",             # 55
    "CN/H",
    "CN/I",
    "PLT/1",            # platforms and stations
    "PLT/2",
    "PLT/3",            # 60
    "PLT/4",
    "PLT/5",
    "PLT/6",
    "Space Station 7",
    "Space Station 8",  # 65
    "Space Station 9",
    "FAC/1",            # X/7 factory
)
