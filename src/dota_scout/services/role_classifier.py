"""Role inference for the five participants of one side."""

import logging
from typing import Iterable, Optional, Sequence

from dota_scout.errors import MalformedInputError
from dota_scout.models.match import Role
from dota_scout.models.raw import LaneCode, RawParticipant
from dota_scout.services.scorers.support_scoring import (
    PlayerScores,
    SupportScoringStrategy,
    WardUsageScoring,
    score_player,
)

logger = logging.getLogger(__name__)

SIDE_SIZE = 5


class PlayerRoleClassifier:
    """Assigns one Role to each participant of a side.

    Players are bucketed by lane code and ranked inside each bucket:

    - mid lane: best farm -> mid
    - safe lane: best farm -> carry, then best support score -> support
    - off lane: best total score -> offlane, then best support score -> hard_support

    Whoever is left falls through roaming -> jungle -> support -> carry -> unknown.
    Every ranking breaks ties on player slot (lowest first), so the result is
    deterministic for a given input.
    """

    def __init__(self, strategy: Optional[SupportScoringStrategy] = None):
        self.strategy = strategy or WardUsageScoring()

    def classify(self, participants: Sequence[RawParticipant]) -> dict[int, Role]:
        """Classify one side.

        Args:
            participants: The five raw participants of one side

        Returns:
            Mapping of player slot to Role, one entry per participant

        Raises:
            MalformedInputError: If the side does not hold exactly five distinct slots
        """
        if len(participants) != SIDE_SIZE:
            raise MalformedInputError(
                f"a side needs exactly {SIDE_SIZE} participants, got {len(participants)}"
            )
        slots = {p.player_slot for p in participants}
        if len(slots) != SIDE_SIZE:
            raise MalformedInputError(
                f"duplicate player slots on one side: {sorted(p.player_slot for p in participants)}"
            )

        scores = {p.player_slot: score_player(p, self.strategy) for p in participants}
        buckets: dict[LaneCode, list[PlayerScores]] = {}
        for participant in participants:
            lane = participant.lane_code
            if lane is not None:
                buckets.setdefault(lane, []).append(scores[participant.player_slot])

        roles: dict[int, Role] = {}
        self._assign_mid(buckets.get(LaneCode.MID, []), roles)
        self._assign_pair(
            buckets.get(LaneCode.SAFE, []),
            roles,
            lead_role=Role.CARRY,
            lead_score=lambda s: s.farm_score,
            partner_role=Role.SUPPORT,
        )
        self._assign_pair(
            buckets.get(LaneCode.OFF, []),
            roles,
            lead_role=Role.OFFLANE,
            lead_score=lambda s: s.total_score,
            partner_role=Role.HARD_SUPPORT,
        )

        for participant in participants:
            if participant.player_slot not in roles:
                roles[participant.player_slot] = self._fallback_role(
                    participant, scores[participant.player_slot]
                )

        logger.debug(f"Classified roles ({self.strategy.name}): {roles}")
        return roles

    @staticmethod
    def _best(candidates: Iterable[PlayerScores], key) -> PlayerScores:
        """Highest-scoring candidate; ties go to the lowest slot."""
        return min(candidates, key=lambda s: (-key(s), s.player_slot))

    def _assign_mid(self, bucket: list[PlayerScores], roles: dict[int, Role]) -> None:
        if bucket:
            roles[self._best(bucket, lambda s: s.farm_score).player_slot] = Role.MID

    def _assign_pair(
        self,
        bucket: list[PlayerScores],
        roles: dict[int, Role],
        lead_role: Role,
        lead_score,
        partner_role: Role,
    ) -> None:
        """Assign the lane's core, then one partner from the rest of the bucket."""
        if not bucket:
            return
        lead = self._best(bucket, lead_score)
        roles[lead.player_slot] = lead_role

        rest = [s for s in bucket if s.player_slot != lead.player_slot]
        if rest:
            partner = self._best(rest, lambda s: s.support_score)
            roles[partner.player_slot] = partner_role

    @staticmethod
    def _fallback_role(participant: RawParticipant, scores: PlayerScores) -> Role:
        if participant.is_roaming:
            return Role.ROAMING
        if participant.lane_code == LaneCode.JUNGLE:
            return Role.JUNGLE
        if scores.support_score > scores.farm_score:
            return Role.SUPPORT
        if scores.farm_score > scores.kill_score:
            return Role.CARRY
        return Role.UNKNOWN
