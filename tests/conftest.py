"""Shared fixtures: synthetic provider payloads and reference data."""

import copy

import pytest

from dota_scout.models.reference import HeroDescriptor, ItemDescriptor
from dota_scout.services.reference_data import ReferenceData


HEROES = {
    1: ("npc_dota_hero_antimage", "Anti-Mage"),
    2: ("npc_dota_hero_crystal_maiden", "Crystal Maiden"),
    3: ("npc_dota_hero_invoker", "Invoker"),
    4: ("npc_dota_hero_axe", "Axe"),
    5: ("npc_dota_hero_lion", "Lion"),
    6: ("npc_dota_hero_phantom_assassin", "Phantom Assassin"),
    7: ("npc_dota_hero_witch_doctor", "Witch Doctor"),
    8: ("npc_dota_hero_storm_spirit", "Storm Spirit"),
    9: ("npc_dota_hero_mars", "Mars"),
    10: ("npc_dota_hero_earth_spirit", "Earth Spirit"),
    20: ("npc_dota_hero_pudge", "Pudge"),
    21: ("npc_dota_hero_tinker", "Tinker"),
    22: ("npc_dota_hero_meepo", "Meepo"),
    23: ("npc_dota_hero_io", "Io"),
}

ITEMS = {
    1: ("blink", "Blink Dagger"),
    50: ("phase_boots", "Phase Boots"),
}


def build_player(player_slot, hero_id, lane_role=None, **overrides):
    """Build a raw participant dict with zeroed counters."""
    player = {
        "player_slot": player_slot,
        "account_id": 1000 + player_slot,
        "personaname": f"player{player_slot}",
        "hero_id": hero_id,
        "lane_role": lane_role,
        "is_roaming": False,
        "kills": 0,
        "deaths": 0,
        "assists": 0,
        "gold_per_min": 0,
        "xp_per_min": 0,
        "observer_uses": 0,
        "sentry_uses": 0,
    }
    player.update(overrides)
    return player


_RAW_MATCH = {
    "match_id": 7900000001,
    "start_time": 1700000000,
    "duration": 2400,
    "radiant_win": True,
    "radiant_team_id": 15,
    "dire_team_id": 39,
    "radiant_name": "Team Radiant",
    "dire_name": "Team Dire",
    "radiant_score": 31,
    "dire_score": 18,
    "players": [
        build_player(0, 1, 1, gold_per_min=700, xp_per_min=750, kills=10, assists=5,
                     item_0=50, item_1=1, item_2=999),
        build_player(1, 2, 1, gold_per_min=250, xp_per_min=300, assists=15,
                     observer_uses=10, sentry_uses=5),
        build_player(2, 3, 2, gold_per_min=600, xp_per_min=700, kills=8, assists=9),
        build_player(3, 4, 3, gold_per_min=450, xp_per_min=550, kills=6, assists=12,
                     kills_log=[{"time": 95, "key": "npc_dota_hero_phantom_assassin"}]),
        build_player(4, 5, 3, gold_per_min=230, xp_per_min=280, kills=2, assists=14,
                     observer_uses=12, sentry_uses=8),
        build_player(128, 6, 1, gold_per_min=650, xp_per_min=700, kills=7, assists=3),
        build_player(129, 7, 1, gold_per_min=240, xp_per_min=290, assists=10,
                     observer_uses=8, sentry_uses=4),
        build_player(130, 8, 2, gold_per_min=580, xp_per_min=650, kills=5, assists=6),
        build_player(131, 9, 3, gold_per_min=420, xp_per_min=500, kills=3, assists=8),
        build_player(132, 10, 4, gold_per_min=300, xp_per_min=350, kills=2, assists=11,
                     is_roaming=True),
    ],
    "picks_bans": [
        {"hero_id": 20, "is_pick": False, "team": 0, "order": 0},
        {"hero_id": 21, "is_pick": False, "team": 1, "order": 1},
        {"hero_id": 22, "is_pick": False, "team": 0, "order": 2},
        {"hero_id": 23, "is_pick": False, "team": 1, "order": 3},
        {"hero_id": 1, "is_pick": True, "team": 0, "order": 4},
        {"hero_id": 6, "is_pick": True, "team": 1, "order": 5},
        {"hero_id": 7, "is_pick": True, "team": 1, "order": 6},
        {"hero_id": 2, "is_pick": True, "team": 0, "order": 7},
        {"hero_id": 3, "is_pick": True, "team": 0, "order": 8},
        {"hero_id": 8, "is_pick": True, "team": 1, "order": 9},
        {"hero_id": 9, "is_pick": True, "team": 1, "order": 10},
        {"hero_id": 4, "is_pick": True, "team": 0, "order": 11},
        {"hero_id": 5, "is_pick": True, "team": 0, "order": 12},
        {"hero_id": 10, "is_pick": True, "team": 1, "order": 13},
    ],
    "objectives": [
        {"type": "building_kill", "time": 600, "player_slot": 3,
         "key": "npc_dota_badguys_tower1_top"},
        {"type": "CHAT_MESSAGE_FIRSTBLOOD", "time": 95, "player_slot": 3},
        {"type": "CHAT_MESSAGE_COURIER_LOST", "time": 700, "team": 3},
        {"type": "CHAT_MESSAGE_AEGIS", "time": 1205, "player_slot": 128},
        {"type": "CHAT_MESSAGE_ROSHAN_KILL", "time": 1200, "player_slot": 130},
        {"type": "building_kill", "time": 1800, "player_slot": 130,
         "key": "npc_dota_goodguys_melee_rax_bot"},
    ],
    "radiant_gold_adv": [0, 150, -200, 800, 1200],
    "radiant_xp_adv": [0, 100, -50, 400, 900],
}


@pytest.fixture
def raw_match():
    """A complete, well-formed provider payload (fresh copy per test)."""
    return copy.deepcopy(_RAW_MATCH)


@pytest.fixture
def make_player():
    """Factory for raw participant dicts."""
    return build_player


@pytest.fixture
def reference_data():
    """Reference data covering every hero in raw_match and two items."""
    return ReferenceData(
        heroes={
            hero_id: HeroDescriptor(id=hero_id, name=name, localized_name=localized)
            for hero_id, (name, localized) in HEROES.items()
        },
        items={
            item_id: ItemDescriptor(id=item_id, name=name, localized_name=localized)
            for item_id, (name, localized) in ITEMS.items()
        },
    )


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"
