"""Export a decoded pilot as JSON."""
from __future__ import annotations

import json

from tfrdump.tfr.enums import TrainingShip
from tfrdump.tfr.records import PilotRecord
from tfrdump.tfr.stats import (
    attempted_entries,
    battle_states,
    is_certified,
    kill_details,
    laser_accuracy,
    medal_tier,
    warhead_accuracy,
)


def pilot_to_dict(record: PilotRecord) -> dict:
    """Build a JSON-ready dict of stored fields plus derived stats."""
    ships = {}
    for ship in TrainingShip:
        cert = record.certificates.for_ship(ship)
        scores = record.simulator_scores.for_ship(ship)
        ships[ship.value] = {
            "certificate": cert,
            "certified": is_certified(cert),
            "simulator_scores": list(scores),
            "medal": medal_tier(scores).name.lower(),
        }

    battles = []
    for number, (status, state) in enumerate(zip(record.battle_status, battle_states(record)), start=1):
        battles.append({
            "battle": number,
            "status": int(status),
            "state": state.kind.name.lower(),
            "mission": state.mission,
        })

    return {
        "navy_rank": record.navy_rank.name.lower(),
        "difficulty": record.difficulty.name.lower(),
        "points": record.points,
        "level": record.level,
        "secret_rank": record.secret_rank.name.lower(),
        "ships": ships,
        "certificate_reserved": list(record.certificates.reserved),
        "active_battle": record.active_battle_number,
        "battles": battles,
        "lasers": {
            "fired": record.lasers_fired,
            "hits": record.laser_hits,
            "accuracy": laser_accuracy(record),
        },
        "warheads": {
            "fired": record.warheads_fired,
            "hits": record.warhead_hits,
            "accuracy": warhead_accuracy(record),
        },
        "total_kills": record.total_kills,
        "total_captured": record.total_captured,
        "total_lost": record.total_lost,
        "kills": {name: count for name, count in kill_details(record) if count},
        "training_points": [points for _, points in attempted_entries(record.training_points)],
        "battle_points": [points for _, points in attempted_entries(record.battle_points)],
    }


def export_json(record: PilotRecord) -> str:
    """Export a pilot record as JSON string."""
    return json.dumps(pilot_to_dict(record), indent=2)
