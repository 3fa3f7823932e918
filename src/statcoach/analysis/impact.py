"""
Win-Probability Impact

Converts each normalized stat into a signed impact estimate using the research
odds ratios, with the winning-team average as the baseline:

    deviation      = value - win_benchmark
    log_odds       = deviation * ln(odds_ratio)
    impact (pp)    = log_odds * 100 / ln(2)

The last step is a readability rescaling of log-odds into a "percentage point"
unit. It is a linear approximation, not a calibrated probability, and should
not be presented as one.
"""

import math
from collections.abc import Mapping

from statcoach.analysis.models import MetricImpact
from statcoach.core.constants import METRICS


def calculate_metric_impact(metric: str, value: float, benchmark: float, odds_ratio: float) -> MetricImpact:
    """Impact of a single metric's deviation from its benchmark."""
    deviation = value - benchmark
    log_odds_change = deviation * math.log(odds_ratio)
    return MetricImpact(
        metric=metric,
        value=value,
        benchmark=benchmark,
        deviation=deviation,
        impact=log_odds_change * 100 / math.log(2),
        odds_ratio=odds_ratio,
    )


def calculate_impacts(normalized: Mapping[str, float]) -> dict[str, MetricImpact]:
    """
    Calculate the impact of every metric present in the normalized stats.

    Metrics without a normalized value (e.g. block errors, which the box score
    does not track) are skipped. The result keeps metric definition order.

    Args:
        normalized: Output of normalize_stats

    Returns:
        Metric key -> MetricImpact
    """
    impacts: dict[str, MetricImpact] = {}
    for m in METRICS:
        key = m.key.value
        if key not in normalized:
            continue
        impacts[key] = calculate_metric_impact(key, normalized[key], m.win_benchmark, m.odds_ratio)
    return impacts
