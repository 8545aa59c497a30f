"""Utility modules for dota_scout."""

from dota_scout.utils.building_keys import parse_building_key
from dota_scout.utils.sides import side_for_slot, side_for_team_index

__all__ = [
    "parse_building_key",
    "side_for_slot",
    "side_for_team_index",
]
