"""Render a decoded pilot as the classic plain-text dump."""
from __future__ import annotations

from tfrdump.tfr.records import PilotRecord
from tfrdump.tfr.stats import (
    BattleStateKind,
    attempted_entries,
    battle_states,
    certified_ships,
    kill_details,
    laser_accuracy,
    ship_medals,
    warhead_accuracy,
)


def _shots_line(fired: int, hits: int, what: str, pct: int | None) -> str:
    line = f"{fired} {what} fired, {hits} {what} hit"
    if pct is not None:
        line += f" ({pct}%)"
    return line


def format_pilot(record: PilotRecord, show_zero_kills: bool = True) -> str:
    """Format a pilot record and its derived stats as text."""
    lines = [
        f"Navy rank:\t{record.navy_rank.label}",
        f"Secret order:\t{record.secret_rank.label}",
        f"Difficulty:\t{record.difficulty.label}",
        f"Points:\t\t{record.points}",
        f"Level:\t\t{record.level}",
    ]

    certs = certified_ships(record)
    lines.append("Training certificates: " + (" ".join(s.label for s in certs) if certs else "(none)"))

    lines.append("Ship medals:")
    for ship, medal in ship_medals(record).items():
        lines.append(f"\t{ship.label}: {medal.label}")

    lines.append(f"Active battle:\t{record.active_battle_number}")
    for number, state in enumerate(battle_states(record), start=1):
        if state.kind is BattleStateKind.INACTIVE:
            status = "unknown"
        else:
            status = f"{state.kind.value}. Last mission: {state.mission}"
        lines.append(f"Battle {number} status:\t{status}")

    lines.append(_shots_line(record.lasers_fired, record.laser_hits, "lasers", laser_accuracy(record)))
    lines.append(_shots_line(record.warheads_fired, record.warhead_hits, "warheads", warhead_accuracy(record)))
    lines.append(f"Total kills:\t{record.total_kills}")
    lines.append(f"Ships captured:\t{record.total_captured}")
    lines.append(f"Ships lost:\t{record.total_lost}")

    lines.append("Kill details:")
    for name, count in kill_details(record):
        if count or show_zero_kills:
            lines.append(f"\t{name}:\t{count}")

    for number, points in attempted_entries(record.training_points):
        lines.append(f"Training {number}:\t{points} points")
    for number, points in attempted_entries(record.battle_points):
        lines.append(f"Battle mission {number}:\t{points} points")

    return "\n".join(lines)


def format_summary(record: PilotRecord) -> str:
    """One-line summary used when listing several pilots."""
    return (
        f"{record.navy_rank.label:<11} {record.difficulty.label:<7} "
        f"{record.points:>10,} pts  battle {record.active_battle_number:>2}  "
        f"kills {record.total_kills:>5}"
    )
