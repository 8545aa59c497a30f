"""Data models for match normalization."""

from dota_scout.models.match import (
    AdvantageSeries,
    BuildingInfo,
    BuildingKind,
    BuildingLane,
    Draft,
    DraftTimelineEntry,
    EventKind,
    HeroPick,
    Match,
    MatchEvent,
    PickOrder,
    PlayerHeroStats,
    PlayerMatchData,
    PlayerStats,
    Role,
    Side,
    TeamRef,
)
from dota_scout.models.raw import (
    RADIANT_SLOT_THRESHOLD,
    LaneCode,
    RawDraftEntry,
    RawMatchRecord,
    RawObjectiveEntry,
    RawParticipant,
    parse_raw_match,
)
from dota_scout.models.reference import HeroDescriptor, ItemDescriptor

__all__ = [
    "AdvantageSeries",
    "BuildingInfo",
    "BuildingKind",
    "BuildingLane",
    "Draft",
    "DraftTimelineEntry",
    "EventKind",
    "HeroPick",
    "Match",
    "MatchEvent",
    "PickOrder",
    "PlayerHeroStats",
    "PlayerMatchData",
    "PlayerStats",
    "Role",
    "Side",
    "TeamRef",
    "RADIANT_SLOT_THRESHOLD",
    "LaneCode",
    "RawDraftEntry",
    "RawMatchRecord",
    "RawObjectiveEntry",
    "RawParticipant",
    "parse_raw_match",
    "HeroDescriptor",
    "ItemDescriptor",
]
