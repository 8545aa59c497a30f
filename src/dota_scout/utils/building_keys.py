"""Parsing of destroyed-structure keys from the objective log.

Keys look like ``npc_dota_goodguys_tower2_bot``,
``npc_dota_badguys_melee_rax_top`` or ``npc_dota_goodguys_fort``.
"""

import re

from dota_scout.models.match import BuildingInfo, BuildingKind, BuildingLane

_TOWER_PATTERN = re.compile(r"tower(\d+)(?:_(top|mid|bot|bottom))?")
_RAX_PATTERN = re.compile(r"rax(?:_(top|mid|bot|bottom))?")

_LANES = {
    "top": BuildingLane.TOP,
    "mid": BuildingLane.MID,
    "bot": BuildingLane.BOTTOM,
    "bottom": BuildingLane.BOTTOM,
}

DEFAULT_TIER = 1
DEFAULT_LANE = BuildingLane.MID


def _lane(token: str | None) -> BuildingLane:
    return _LANES.get(token, DEFAULT_LANE) if token else DEFAULT_LANE


def parse_building_key(key: str) -> BuildingInfo:
    """Parse a structure key into kind, tier and lane.

    Args:
        key: Structure key from a ``building_kill`` objective

    Returns:
        BuildingInfo. Anything unparsable falls back to a tier 1 mid tower.

    Examples:
        >>> parse_building_key("npc_dota_goodguys_tower3_bot")
        BuildingInfo(kind=<BuildingKind.TOWER: 'tower'>, tier=3, lane=<BuildingLane.BOTTOM: 'bottom'>)
    """
    key = key.lower()

    tower = _TOWER_PATTERN.search(key)
    if tower:
        tier = int(tower.group(1)) or DEFAULT_TIER
        return BuildingInfo(kind=BuildingKind.TOWER, tier=tier, lane=_lane(tower.group(2)))

    rax = _RAX_PATTERN.search(key)
    if rax:
        return BuildingInfo(kind=BuildingKind.BARRACKS, tier=DEFAULT_TIER, lane=_lane(rax.group(1)))

    # The ancient is reported as a tier 4 structure
    if "fort" in key:
        return BuildingInfo(kind=BuildingKind.TOWER, tier=4, lane=BuildingLane.MID)

    return BuildingInfo(kind=BuildingKind.TOWER, tier=DEFAULT_TIER, lane=DEFAULT_LANE)
