"""
Practice Recommendation Ranking

Ranks metrics by the size of their impact and picks the biggest problems and
the biggest strengths. Ties keep metric definition order, so identical input
always ranks identically.
"""

from collections.abc import Mapping

from statcoach.analysis.models import MetricImpact, Recommendation, RecommendationSet
from statcoach.core.constants import MAX_STRENGTHS, MAX_WEAKNESSES, SIGNIFICANCE_THRESHOLD


def rank_impacts(impacts: Mapping[str, MetricImpact]) -> list[MetricImpact]:
    """All impacts sorted by descending magnitude (stable)."""
    return sorted(impacts.values(), key=lambda i: abs(i.impact), reverse=True)


def generate_recommendations(impacts: Mapping[str, MetricImpact]) -> RecommendationSet:
    """
    Select the top weaknesses and strengths.

    Weaknesses are impacts below -1 percentage point (at most 3), strengths
    are impacts above +1 (at most 2), both in ranked order.

    Args:
        impacts: Output of calculate_impacts

    Returns:
        RecommendationSet with weaknesses, strengths and the full ranking
    """
    ranked = rank_impacts(impacts)

    weaknesses = [i for i in ranked if i.impact < -SIGNIFICANCE_THRESHOLD][:MAX_WEAKNESSES]
    strengths = [i for i in ranked if i.impact > SIGNIFICANCE_THRESHOLD][:MAX_STRENGTHS]

    return RecommendationSet(
        weaknesses=[
            Recommendation(
                metric=i.metric,
                impact=i.impact,
                value=i.value,
                benchmark=i.benchmark,
                priority=abs(i.impact),
            )
            for i in weaknesses
        ],
        strengths=[
            Recommendation(
                metric=i.metric,
                impact=i.impact,
                value=i.value,
                benchmark=i.benchmark,
            )
            for i in strengths
        ],
        all_impacts=ranked,
    )
