"""Match normalization services."""

from dota_scout.services.advantage_series_builder import AdvantageSeriesBuilder
from dota_scout.services.draft_reconstructor import DraftReconstructor, ReconstructedDraft
from dota_scout.services.event_timeline_builder import EventTimelineBuilder
from dota_scout.services.match_assembler import MatchAssembler
from dota_scout.services.match_cache import MatchCache
from dota_scout.services.match_service import BatchResult, MatchService, NormalizationFailure
from dota_scout.services.reference_data import ReferenceData
from dota_scout.services.role_classifier import PlayerRoleClassifier

__all__ = [
    "AdvantageSeriesBuilder",
    "DraftReconstructor",
    "ReconstructedDraft",
    "EventTimelineBuilder",
    "MatchAssembler",
    "MatchCache",
    "BatchResult",
    "MatchService",
    "NormalizationFailure",
    "ReferenceData",
    "PlayerRoleClassifier",
]
