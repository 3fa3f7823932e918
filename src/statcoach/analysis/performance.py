"""Benchmark band classification for individual stats."""

from statcoach.analysis.models import RawStats
from statcoach.core.constants import METRICS, METRICS_BY_KEY, PerformanceLevel


def get_performance_level(value: float, metric: str) -> PerformanceLevel:
    """
    Classify a raw value against the winning and losing team averages.

    Meeting the winning average counts as excellent; meeting the losing
    average counts as good. Direction follows the metric (fewer errors and
    attempts are better).

    Raises:
        KeyError: If the metric is unknown
    """
    definition = METRICS_BY_KEY[metric]
    win_bench = definition.win_benchmark
    loss_bench = definition.loss_benchmark

    if definition.lower_is_better:
        if value <= win_bench:
            return PerformanceLevel.EXCELLENT
        if value <= loss_bench:
            return PerformanceLevel.GOOD
        return PerformanceLevel.NEEDS_IMPROVEMENT

    if value >= win_bench:
        return PerformanceLevel.EXCELLENT
    if value >= loss_bench:
        return PerformanceLevel.GOOD
    return PerformanceLevel.NEEDS_IMPROVEMENT


def classify_stats(stats: RawStats) -> dict[str, PerformanceLevel]:
    """Performance level of every tracked raw count, in metric order."""
    return {
        m.key.value: get_performance_level(getattr(stats, m.raw_field), m.key.value)
        for m in METRICS
        if m.raw_field is not None
    }
