"""Gold/experience advantage series."""

from typing import Sequence

from dota_scout.models.match import AdvantageSeries

DEFAULT_INTERVAL = 60


class AdvantageSeriesBuilder:
    """Mirrors radiant's lead samples into a two-sided series.

    The provider only reports radiant's lead. The game is zero-sum for this
    measure, so dire's value at each sample is the negation.
    """

    def __init__(self, interval: int = DEFAULT_INTERVAL):
        if interval <= 0:
            raise ValueError(f"Sampling interval must be positive, got {interval}")
        self.interval = interval

    def build(self, radiant_samples: Sequence[float]) -> AdvantageSeries:
        return AdvantageSeries(
            times=tuple(i * self.interval for i in range(len(radiant_samples))),
            radiant=tuple(radiant_samples),
            dire=tuple(-value for value in radiant_samples),
        )

    def build_pair(
        self,
        gold_samples: Sequence[float],
        xp_samples: Sequence[float],
    ) -> tuple[AdvantageSeries, AdvantageSeries]:
        """Build (gold, experience) series; each keeps its own sample count."""
        return self.build(gold_samples), self.build(xp_samples)
