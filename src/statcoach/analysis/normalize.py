"""
Stat Normalization

Research benchmarks are per full match (about 3.5 sets on average), so raw
counts are rescaled to that match length before they are compared.
"""

import logging

from statcoach.analysis.models import NormalizedStats, RawStats
from statcoach.core.constants import DEFAULT_SETS_PLAYED, METRICS, REFERENCE_SETS_PER_MATCH

logger = logging.getLogger(__name__)


def resolve_sets_played(stats: RawStats) -> int:
    """Set count used for normalization: the recorded count, or 3 when unknown."""
    if stats.total_sets and stats.total_sets > 0:
        return stats.total_sets
    return DEFAULT_SETS_PLAYED


def normalize_stats(stats: RawStats, sets: float | None = None) -> NormalizedStats:
    """
    Rescale every tracked count to the reference match length.

    Each value is multiplied by ``REFERENCE_SETS_PER_MATCH / sets``. No clamping
    is applied, so a 3.5-set match normalizes to itself.

    Args:
        stats: Raw box-score counts
        sets: Sets played; defaults to the recorded count (3 if unknown)

    Returns:
        Metric key -> normalized value, in metric definition order

    Raises:
        ValueError: If an explicit set count is not positive
    """
    if sets is None:
        sets = resolve_sets_played(stats)
    elif sets <= 0:
        raise ValueError(f"sets must be positive, got {sets}")

    factor = REFERENCE_SETS_PER_MATCH / sets
    logger.debug("Normalizing stats over %s sets (factor %.4f)", sets, factor)

    return {
        m.key.value: getattr(stats, m.raw_field) * factor
        for m in METRICS
        if m.raw_field is not None
    }
