"""Tests for AdvantageSeriesBuilder."""

import pytest

from dota_scout.services.advantage_series_builder import AdvantageSeriesBuilder


@pytest.fixture
def builder():
    return AdvantageSeriesBuilder()


def test_times_follow_interval(builder):
    series = builder.build([0, 150, -200, 800])

    assert series.times == (0, 60, 120, 180)


def test_dire_is_negated_radiant(builder):
    samples = [0, 150, -200, 800, 1200.5]

    series = builder.build(samples)

    assert series.radiant == tuple(samples)
    assert all(d == -r for r, d in zip(series.radiant, series.dire))


@pytest.mark.parametrize("count", [0, 1, 7, 90])
def test_arrays_share_input_length(builder, count):
    series = builder.build([i * 10 - 35 for i in range(count)])

    assert len(series.times) == len(series.radiant) == len(series.dire) == count
    assert len(series) == count


def test_custom_interval():
    series = AdvantageSeriesBuilder(interval=30).build([1, 2, 3])

    assert series.times == (0, 30, 60)


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        AdvantageSeriesBuilder(interval=0)


def test_pair_keeps_separate_lengths(builder):
    gold, experience = builder.build_pair([0, 100, 200], [0, 50])

    assert len(gold) == 3
    assert len(experience) == 2
    assert experience.dire == (0, -50)
