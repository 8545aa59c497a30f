"""Normalized match models.

A Match is built once from one raw record and never mutated afterwards, so
every model here is a frozen dataclass holding tuples rather than lists.
"""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from dota_scout.models.reference import HeroDescriptor, ItemDescriptor


class Side(str, Enum):
    """The two teams contesting a match."""

    RADIANT = "radiant"
    DIRE = "dire"


class Role(str, Enum):
    """Role inferred for a participant."""

    CARRY = "carry"
    MID = "mid"
    OFFLANE = "offlane"
    SUPPORT = "support"
    HARD_SUPPORT = "hard_support"
    ROAMING = "roaming"
    JUNGLE = "jungle"
    UNKNOWN = "unknown"


class EventKind(str, Enum):
    """Kinds of timeline events extracted from the objective log."""

    FIRST_BLOOD = "first_blood"
    ROSHAN_KILL = "roshan_kill"
    AEGIS_PICKUP = "aegis_pickup"
    TOWER_KILL = "tower_kill"
    BARRACKS_KILL = "barracks_kill"


class BuildingKind(str, Enum):
    TOWER = "tower"
    BARRACKS = "barracks"


class BuildingLane(str, Enum):
    TOP = "top"
    MID = "mid"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class TeamRef:
    """Team identity for one side of a match."""

    id: Optional[int]
    name: Optional[str] = None


@dataclass(frozen=True)
class HeroPick:
    """A hero picked during the draft."""

    hero: HeroDescriptor
    order: int  # 1-based position among this side's picks
    account_id: Optional[int] = None  # player who ended up on the hero
    role: Optional[Role] = None


@dataclass(frozen=True)
class Draft:
    """Picks and bans per side."""

    radiant_picks: tuple[HeroPick, ...] = ()
    dire_picks: tuple[HeroPick, ...] = ()
    radiant_bans: tuple[HeroDescriptor, ...] = ()
    dire_bans: tuple[HeroDescriptor, ...] = ()

    @property
    def action_count(self) -> int:
        return (
            len(self.radiant_picks)
            + len(self.dire_picks)
            + len(self.radiant_bans)
            + len(self.dire_bans)
        )


@dataclass(frozen=True)
class DraftTimelineEntry:
    """One pick or ban in draft order."""

    sequence: int  # 1-based
    action_type: str  # "pick" or "ban"
    side: Side
    hero: HeroDescriptor


@dataclass(frozen=True)
class PickOrder:
    """Which side made the first pick."""

    first: Side

    @property
    def second(self) -> Side:
        return Side.DIRE if self.first == Side.RADIANT else Side.RADIANT


@dataclass(frozen=True)
class PlayerStats:
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    last_hits: int = 0
    denies: int = 0
    gpm: float = 0
    xpm: float = 0
    net_worth: int = 0
    level: int = 0


@dataclass(frozen=True)
class PlayerHeroStats:
    damage_dealt: int = 0
    healing_done: int = 0
    tower_damage: int = 0


@dataclass(frozen=True)
class PlayerMatchData:
    """One participant's normalized match data."""

    player_slot: int
    account_id: Optional[int]
    player_name: str
    hero: HeroDescriptor
    role: Role
    lane_role: Optional[int] = None
    items: tuple[ItemDescriptor, ...] = ()
    stats: PlayerStats = field(default_factory=PlayerStats)
    hero_stats: PlayerHeroStats = field(default_factory=PlayerHeroStats)


@dataclass(frozen=True)
class BuildingInfo:
    """Structure destroyed by a tower/barracks kill."""

    kind: BuildingKind
    tier: int
    lane: BuildingLane


@dataclass(frozen=True)
class MatchEvent:
    """A typed timeline event."""

    timestamp: float
    kind: EventKind
    side: Side
    actor_slot: Optional[int] = None
    building: Optional[BuildingInfo] = None
    actor_hero: Optional[HeroDescriptor] = None  # killer or aegis holder
    victim_hero: Optional[HeroDescriptor] = None  # first blood only


@dataclass(frozen=True)
class AdvantageSeries:
    """Radiant lead over time and its mirror for dire."""

    times: tuple[int, ...] = ()
    radiant: tuple[float, ...] = ()
    dire: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.times)


@dataclass(frozen=True)
class Match:
    """A fully normalized match."""

    id: int
    date: datetime
    duration: int
    radiant_team: TeamRef
    dire_team: TeamRef
    radiant_score: int
    dire_score: int
    draft: Draft
    radiant_players: tuple[PlayerMatchData, ...]
    dire_players: tuple[PlayerMatchData, ...]
    events: tuple[MatchEvent, ...]
    gold_advantage: AdvantageSeries
    experience_advantage: AdvantageSeries
    winner: Optional[Side]
    pick_order: Optional[PickOrder] = None
    draft_timeline: tuple[DraftTimelineEntry, ...] = ()

    def players_for(self, side: Side) -> tuple[PlayerMatchData, ...]:
        return self.radiant_players if side == Side.RADIANT else self.dire_players

    @property
    def roles(self) -> dict[int, Role]:
        """Role per player slot across both sides."""
        return {
            player.player_slot: player.role
            for player in self.radiant_players + self.dire_players
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        data = asdict(self, dict_factory=_json_dict)
        if self.pick_order is not None:
            data["pick_order"]["second"] = self.pick_order.second.value
        return data


def _json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_json_value(v) for v in value]
    return value


def _json_dict(items: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: _json_value(value) for key, value in items}
