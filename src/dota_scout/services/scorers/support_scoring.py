"""Heuristic scores used to rank participants inside a lane bucket.

Two sources exist for how much a player supported: the ward usage counters
on every match, and the item purchase log on parsed matches. Each is a
strategy; the farm and kill scores are shared.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from dota_scout.models.raw import RawParticipant


@dataclass(frozen=True)
class PlayerScores:
    """Scores for one participant."""

    player_slot: int
    support_score: float
    farm_score: float
    kill_score: float

    @property
    def total_score(self) -> float:
        return self.support_score + self.farm_score + self.kill_score


class SupportScoringStrategy(ABC):
    """Computes how support-oriented a participant played."""

    name: str = ""

    @abstractmethod
    def support_score(self, participant: RawParticipant) -> float:
        """Support score for one participant."""


class WardUsageScoring(SupportScoringStrategy):
    """Observer uses count once, sentry uses twice."""

    name = "ward_usage"

    SENTRY_WEIGHT = 2

    def support_score(self, participant: RawParticipant) -> float:
        return participant.observer_uses + self.SENTRY_WEIGHT * participant.sentry_uses


class PurchaseLogScoring(SupportScoringStrategy):
    """Counts purchases of vision and utility consumables.

    Uses the timed purchase log when present, otherwise the keys of the
    purchase-time map (one entry per distinct item).
    """

    name = "purchase_log"

    SUPPORT_ITEMS = frozenset({"ward_observer", "ward_sentry", "smoke_of_deceit", "dust"})

    def support_score(self, participant: RawParticipant) -> float:
        if participant.purchase_log:
            return sum(1 for entry in participant.purchase_log if entry.key in self.SUPPORT_ITEMS)
        return sum(1 for item in participant.purchase_time if item in self.SUPPORT_ITEMS)


_STRATEGIES: dict[str, type[SupportScoringStrategy]] = {
    WardUsageScoring.name: WardUsageScoring,
    PurchaseLogScoring.name: PurchaseLogScoring,
}


def get_scoring_strategy(name: str) -> SupportScoringStrategy:
    """Instantiate a strategy by name.

    Raises:
        ValueError: If the name is not a known strategy
    """
    try:
        return _STRATEGIES[name]()
    except KeyError:
        raise ValueError(
            f"Unknown role strategy: {name} (expected one of {sorted(_STRATEGIES)})"
        ) from None


def score_player(participant: RawParticipant, strategy: SupportScoringStrategy) -> PlayerScores:
    """Compute all scores for one participant."""
    return PlayerScores(
        player_slot=participant.player_slot,
        support_score=strategy.support_score(participant),
        farm_score=participant.gold_per_min + participant.xp_per_min,
        kill_score=participant.kills + 0.5 * participant.assists,
    )
