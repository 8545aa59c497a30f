"""Match normalization service."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from dota_scout.config import Settings
from dota_scout.errors import MalformedInputError
from dota_scout.models.match import Match
from dota_scout.models.raw import parse_raw_match
from dota_scout.services.advantage_series_builder import DEFAULT_INTERVAL
from dota_scout.services.match_assembler import MatchAssembler
from dota_scout.services.match_cache import MatchCache
from dota_scout.services.reference_data import ReferenceData
from dota_scout.services.role_classifier import PlayerRoleClassifier
from dota_scout.services.scorers.support_scoring import get_scoring_strategy

logger = logging.getLogger(__name__)


@dataclass
class NormalizationFailure:
    """A record from a batch that could not be normalized."""

    index: int
    match_id: Optional[int]
    error: str


@dataclass
class BatchResult:
    """Outcome of normalizing several records."""

    matches: list[Match] = field(default_factory=list)
    failures: list[NormalizationFailure] = field(default_factory=list)


class MatchService:
    """Normalizes raw provider matches, caching the results."""

    def __init__(
        self,
        reference_data: Optional[ReferenceData] = None,
        cache: Optional[MatchCache] = None,
        role_strategy: str = "ward_usage",
        advantage_interval: int = DEFAULT_INTERVAL,
    ):
        """Initialize the match service.

        Args:
            reference_data: Hero/item lookup; placeholders only when omitted
            cache: Cache for normalized matches; an unbounded one when omitted
            role_strategy: Support-scoring strategy name ("ward_usage" or "purchase_log")
            advantage_interval: Seconds between advantage samples
        """
        self.reference_data = reference_data or ReferenceData()
        self.cache = cache if cache is not None else MatchCache()
        self.assembler = MatchAssembler(
            reference_data=self.reference_data,
            classifier=PlayerRoleClassifier(get_scoring_strategy(role_strategy)),
            advantage_interval=advantage_interval,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "MatchService":
        """Build a service from application settings."""
        reference_dir = Path(settings.reference_data_dir) if settings.reference_data_dir else None
        service = cls(
            reference_data=ReferenceData.from_directory(reference_dir),
            cache=MatchCache(
                max_entries=settings.match_cache_size,
                ttl_seconds=settings.match_cache_ttl_seconds,
            ),
            role_strategy=settings.role_strategy,
            advantage_interval=settings.advantage_interval,
        )
        logger.info(
            f"MatchService ready (strategy={settings.role_strategy}, "
            f"cache_size={settings.match_cache_size})"
        )
        return service

    def normalize(self, payload: Any, force: bool = False) -> Match:
        """Normalize one raw match, reusing a cached result unless forced.

        Args:
            payload: Decoded provider payload
            force: Skip the cache lookup and rebuild the match

        Returns:
            The normalized Match

        Raises:
            MalformedInputError: If the payload cannot be normalized
        """
        record = parse_raw_match(payload)
        if not force:
            cached = self.cache.get(record.match_id)
            if cached is not None:
                return cached

        match = self.assembler.assemble(record)
        self.cache.put(match)
        return match

    def normalize_batch(self, payloads: Sequence[Any], force: bool = False) -> BatchResult:
        """Normalize several matches; a malformed one does not affect the rest."""
        result = BatchResult()
        for index, payload in enumerate(payloads):
            try:
                result.matches.append(self.normalize(payload, force=force))
            except MalformedInputError as e:
                logger.warning(f"Skipping record {index}: {e}")
                result.failures.append(
                    NormalizationFailure(index=index, match_id=e.match_id, error=str(e))
                )
        return result

    def get_match(self, match_id: int) -> Optional[Match]:
        """Previously normalized match, if still cached."""
        return self.cache.get(match_id)

    def invalidate(self, match_id: Optional[int] = None) -> int:
        """Drop one cached match, or all of them."""
        removed = self.cache.invalidate(match_id)
        logger.info(f"Invalidated {removed} cached match(es)")
        return removed
