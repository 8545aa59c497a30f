"""Raw match payload models.

The provider delivers loosely typed JSON where most fields may be missing or
null. These models validate the payload once at the boundary so the
transformation code never deals with ad hoc null handling.
"""

import logging
from enum import IntEnum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dota_scout.errors import MalformedInputError

logger = logging.getLogger(__name__)

# Player slots below this value belong to radiant, the rest to dire
RADIANT_SLOT_THRESHOLD = 128


class LaneCode(IntEnum):
    """Lane assignment reported by the provider (``lane_role``)."""

    SAFE = 1
    MID = 2
    OFF = 3
    JUNGLE = 4


class _RawModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class RawLogEntry(_RawModel):
    """A timestamped ``{time, key}`` entry from a purchase or kill log."""

    time: float = 0
    key: str = ""


class RawParticipant(_RawModel):
    """Per-player record as delivered by the provider."""

    player_slot: int
    account_id: Optional[int] = None
    personaname: Optional[str] = None
    name: Optional[str] = None
    hero_id: int = 0

    lane_role: Optional[int] = None
    is_roaming: bool = False

    kills: int = 0
    deaths: int = 0
    assists: int = 0
    last_hits: int = 0
    denies: int = 0
    gold_per_min: float = 0
    xp_per_min: float = 0
    net_worth: Optional[int] = None
    total_gold: int = 0
    level: int = 0

    hero_damage: int = 0
    hero_healing: int = 0
    tower_damage: int = 0

    observer_uses: int = 0
    sentry_uses: int = 0
    purchase_log: list[RawLogEntry] = Field(default_factory=list)
    purchase_time: dict[str, float] = Field(default_factory=dict)
    kills_log: list[RawLogEntry] = Field(default_factory=list)

    item_0: int = 0
    item_1: int = 0
    item_2: int = 0
    item_3: int = 0
    item_4: int = 0
    item_5: int = 0

    @field_validator(
        "hero_id", "kills", "deaths", "assists", "last_hits", "denies",
        "gold_per_min", "xp_per_min", "total_gold", "level",
        "hero_damage", "hero_healing", "tower_damage",
        "observer_uses", "sentry_uses",
        "item_0", "item_1", "item_2", "item_3", "item_4", "item_5",
        mode="before",
    )
    @classmethod
    def _null_counter_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("is_roaming", mode="before")
    @classmethod
    def _null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("purchase_log", "kills_log", mode="before")
    @classmethod
    def _null_log_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("purchase_time", mode="before")
    @classmethod
    def _null_purchase_time_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def is_radiant(self) -> bool:
        return self.player_slot < RADIANT_SLOT_THRESHOLD

    @property
    def lane_code(self) -> Optional[LaneCode]:
        """Lane code, or None when the provider value is missing or unknown."""
        if self.lane_role is None:
            return None
        try:
            return LaneCode(self.lane_role)
        except ValueError:
            return None

    @property
    def item_ids(self) -> list[int]:
        """Item ids in slot order, empty slots skipped."""
        slots = [self.item_0, self.item_1, self.item_2, self.item_3, self.item_4, self.item_5]
        return [item_id for item_id in slots if item_id > 0]

    @property
    def resolved_net_worth(self) -> int:
        return self.net_worth if self.net_worth is not None else self.total_gold


class RawDraftEntry(_RawModel):
    """One pick or ban from the draft log."""

    hero_id: int
    is_pick: bool = False
    team: int = 0
    order: Optional[int] = None

    @field_validator("is_pick", mode="before")
    @classmethod
    def _null_pick_flag_is_ban(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("team")
    @classmethod
    def _team_is_side_index(cls, value: int) -> int:
        if value not in (0, 1):
            raise ValueError(f"draft team must be 0 or 1, got {value}")
        return value


class RawObjectiveEntry(_RawModel):
    """One objective/event log entry."""

    type: Optional[str] = None
    time: float = 0
    player_slot: Optional[int] = None
    slot: Optional[int] = None
    key: Optional[str] = None

    @field_validator("time", mode="before")
    @classmethod
    def _null_time_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("key", mode="before")
    @classmethod
    def _key_as_string(cls, value: Any) -> Any:
        # Some objective types carry a numeric key
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @property
    def acting_slot(self) -> Optional[int]:
        return self.player_slot if self.player_slot is not None else self.slot


class RawMatchRecord(_RawModel):
    """A provider match payload, validated."""

    match_id: int
    start_time: int
    duration: int = 0
    radiant_win: Optional[bool] = None

    radiant_team_id: Optional[int] = None
    dire_team_id: Optional[int] = None
    radiant_name: Optional[str] = None
    dire_name: Optional[str] = None
    radiant_score: int = 0
    dire_score: int = 0

    players: list[RawParticipant]
    picks_bans: list[RawDraftEntry] = Field(default_factory=list)
    objectives: list[RawObjectiveEntry] = Field(default_factory=list)
    radiant_gold_adv: list[float] = Field(default_factory=list)
    radiant_xp_adv: list[float] = Field(default_factory=list)

    @field_validator("duration", "radiant_score", "dire_score", mode="before")
    @classmethod
    def _null_scalar_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator(
        "picks_bans", "objectives", "radiant_gold_adv", "radiant_xp_adv", mode="before"
    )
    @classmethod
    def _null_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("picks_bans", mode="before")
    @classmethod
    def _drop_unusable_draft_entries(cls, value: Any) -> Any:
        return _valid_entries(value, RawDraftEntry, "draft")

    @field_validator("objectives", mode="before")
    @classmethod
    def _drop_unusable_objectives(cls, value: Any) -> Any:
        return _valid_entries(value, RawObjectiveEntry, "objective")


def _valid_entries(entries: Any, model: type[_RawModel], label: str) -> Any:
    """Validate log entries one by one, dropping the ones that cannot be used.

    A bad sub-entry degrades the record instead of rejecting it. Anything that
    is not a list is left for the field validation to reject.
    """
    if not isinstance(entries, list):
        return entries
    valid = []
    for index, entry in enumerate(entries):
        try:
            valid.append(model.model_validate(entry))
        except ValidationError as e:
            logger.warning(f"Dropping {label} entry {index}: {e.error_count()} error(s)")
    return valid


def parse_raw_match(payload: Any) -> RawMatchRecord:
    """Validate a provider payload into a RawMatchRecord.

    Args:
        payload: Decoded JSON match payload (or an already validated record)

    Returns:
        The validated record

    Raises:
        MalformedInputError: If mandatory fields are missing or have the wrong shape
    """
    if isinstance(payload, RawMatchRecord):
        return payload
    if not isinstance(payload, Mapping):
        raise MalformedInputError(f"expected a match object, got {type(payload).__name__}")

    match_id = payload.get("match_id")
    try:
        return RawMatchRecord.model_validate(dict(payload))
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise MalformedInputError(
            f"invalid raw match record ({problems})",
            match_id=match_id if isinstance(match_id, int) else None,
        ) from e
