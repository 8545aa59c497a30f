"""Composition of a raw match record into a Match."""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from dota_scout.errors import MalformedInputError
from dota_scout.models.match import (
    Match,
    PlayerHeroStats,
    PlayerMatchData,
    PlayerStats,
    Role,
    Side,
    TeamRef,
)
from dota_scout.models.raw import RawMatchRecord, RawParticipant, parse_raw_match
from dota_scout.services.advantage_series_builder import (
    DEFAULT_INTERVAL,
    AdvantageSeriesBuilder,
)
from dota_scout.services.draft_reconstructor import DraftReconstructor
from dota_scout.services.event_timeline_builder import EventTimelineBuilder
from dota_scout.services.reference_data import ReferenceData
from dota_scout.services.role_classifier import SIDE_SIZE, PlayerRoleClassifier

logger = logging.getLogger(__name__)


class MatchAssembler:
    """Builds an immutable Match from one raw record.

    Holds no per-match state; the same assembler can normalize any number of
    records, from any number of threads.
    """

    def __init__(
        self,
        reference_data: Optional[ReferenceData] = None,
        classifier: Optional[PlayerRoleClassifier] = None,
        advantage_interval: int = DEFAULT_INTERVAL,
    ):
        self.reference_data = reference_data or ReferenceData()
        self.classifier = classifier or PlayerRoleClassifier()
        self.draft_reconstructor = DraftReconstructor(self.reference_data)
        self.event_builder = EventTimelineBuilder(self.reference_data)
        self.advantage_builder = AdvantageSeriesBuilder(advantage_interval)

    def assemble(self, raw: RawMatchRecord | Mapping[str, Any]) -> Match:
        """Normalize one raw match.

        Args:
            raw: Validated record, or the decoded provider payload

        Returns:
            The assembled Match

        Raises:
            MalformedInputError: If mandatory fields are missing or unusable, or a
                                 side does not have exactly five players
        """
        record = parse_raw_match(raw)

        radiant, dire = self.partition_players(record)
        try:
            radiant_roles = self.classifier.classify(radiant)
            dire_roles = self.classifier.classify(dire)
        except MalformedInputError as e:
            raise MalformedInputError(str(e), match_id=record.match_id) from e
        roles = {**radiant_roles, **dire_roles}

        reconstructed = self.draft_reconstructor.reconstruct(
            record.picks_bans, players=record.players, roles=roles
        )
        events = self.event_builder.build(record.objectives, players=record.players)
        gold, experience = self.advantage_builder.build_pair(
            record.radiant_gold_adv, record.radiant_xp_adv
        )

        if record.radiant_win is None:
            winner = None
        else:
            winner = Side.RADIANT if record.radiant_win else Side.DIRE

        try:
            date = datetime.fromtimestamp(record.start_time, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise MalformedInputError(
                f"start_time {record.start_time} is not a valid timestamp", match_id=record.match_id
            ) from e

        match = Match(
            id=record.match_id,
            date=date,
            duration=record.duration,
            radiant_team=TeamRef(id=record.radiant_team_id, name=record.radiant_name),
            dire_team=TeamRef(id=record.dire_team_id, name=record.dire_name),
            radiant_score=record.radiant_score,
            dire_score=record.dire_score,
            draft=reconstructed.draft,
            radiant_players=tuple(self._player_data(p, radiant_roles) for p in radiant),
            dire_players=tuple(self._player_data(p, dire_roles) for p in dire),
            events=events,
            gold_advantage=gold,
            experience_advantage=experience,
            winner=winner,
            pick_order=reconstructed.pick_order,
            draft_timeline=reconstructed.timeline,
        )
        logger.debug(
            f"Assembled match {match.id}: {match.draft.action_count} draft actions, "
            f"{len(match.events)} events"
        )
        return match

    @staticmethod
    def partition_players(
        record: RawMatchRecord,
    ) -> tuple[list[RawParticipant], list[RawParticipant]]:
        """Split participants into (radiant, dire) by slot, keeping input order.

        Raises:
            MalformedInputError: If either side does not have exactly five players
        """
        radiant = [p for p in record.players if p.is_radiant]
        dire = [p for p in record.players if not p.is_radiant]
        if len(radiant) != SIDE_SIZE or len(dire) != SIDE_SIZE:
            raise MalformedInputError(
                f"expected {SIDE_SIZE} players per side, got "
                f"{len(radiant)} radiant and {len(dire)} dire",
                match_id=record.match_id,
            )
        return radiant, dire

    def _player_data(self, player: RawParticipant, roles: Mapping[int, Role]) -> PlayerMatchData:
        return PlayerMatchData(
            player_slot=player.player_slot,
            account_id=player.account_id,
            player_name=self._player_name(player),
            hero=self.reference_data.resolve_hero(player.hero_id),
            role=roles[player.player_slot],
            lane_role=player.lane_role,
            items=tuple(self.reference_data.resolve_item(i) for i in player.item_ids),
            stats=PlayerStats(
                kills=player.kills,
                deaths=player.deaths,
                assists=player.assists,
                last_hits=player.last_hits,
                denies=player.denies,
                gpm=player.gold_per_min,
                xpm=player.xp_per_min,
                net_worth=player.resolved_net_worth,
                level=player.level,
            ),
            hero_stats=PlayerHeroStats(
                damage_dealt=player.hero_damage,
                healing_done=player.hero_healing,
                tower_damage=player.tower_damage,
            ),
        )

    @staticmethod
    def _player_name(player: RawParticipant) -> str:
        return player.personaname or player.name or f"Player {player.account_id or 'Unknown'}"

