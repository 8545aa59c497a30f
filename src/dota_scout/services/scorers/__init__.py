"""Support-scoring strategies for role classification."""
from dota_scout.services.scorers.support_scoring import (
    PlayerScores,
    PurchaseLogScoring,
    SupportScoringStrategy,
    WardUsageScoring,
    get_scoring_strategy,
    score_player,
)

__all__ = [
    "PlayerScores",
    "PurchaseLogScoring",
    "SupportScoringStrategy",
    "WardUsageScoring",
    "get_scoring_strategy",
    "score_player",
]
