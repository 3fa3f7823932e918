"""
Coaching Narrative

Renders an analysis into the fixed-template insights text shown to coaches.
Output is fully deterministic: the same impacts and recommendations always
produce the same text, character for character.
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, localcontext

from statcoach.analysis.models import MetricImpact, RecommendationSet
from statcoach.core.constants import (
    KEY_RESEARCH_FINDINGS,
    METRIC_DISPLAY_NAMES,
    METRICS_BY_KEY,
    PRACTICE_PLANS,
    SUMMARY_NEGATIVE_THRESHOLD,
    SUMMARY_POSITIVE_THRESHOLD,
)

HEADER = "**Performance Analysis Based on NCAA Research**\n"

SUMMARY_POSITIVE = (
    "Your statistics profile suggests strong performance aligned with winning "
    "teams from NCAA Division I research.\n"
)
SUMMARY_NEGATIVE = (
    "Your statistics profile shows several areas below winning benchmarks. "
    "Focus on the priorities below for maximum improvement.\n"
)
SUMMARY_MIXED = "Your statistics show a mixed profile with both strengths and areas for improvement.\n"

PRIORITIES_HEADING = "**🎯 Top Practice Priorities**\n"
STRENGTHS_HEADING = "**✅ Areas of Strength**\n"
FINDINGS_HEADING = "**📊 Key Research Findings**\n"
PRACTICE_FOCUS_HEADING = "**🏐 Recommended Practice Focus**\n"

BULLET = "• "


def format_metric_name(metric: str) -> str:
    """Display name for a metric key, or the key itself if unknown."""
    return METRIC_DISPLAY_NAMES.get(metric, metric)


def format_decimal(value: float, digits: int = 1) -> str:
    """Fixed-point formatting with halves rounded away from zero."""
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # Room for every integer digit plus the fraction, however large the count
        ctx.prec = max(ctx.prec, len(str(int(abs(exact)))) + digits + 1)
        return str(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def summary_sentence(total_impact: float) -> str:
    if total_impact > SUMMARY_POSITIVE_THRESHOLD:
        return SUMMARY_POSITIVE
    if total_impact < SUMMARY_NEGATIVE_THRESHOLD:
        return SUMMARY_NEGATIVE
    return SUMMARY_MIXED


def _priority_lines(recommendations: RecommendationSet) -> list[str]:
    lines = [PRIORITIES_HEADING]
    for index, weakness in enumerate(recommendations.weaknesses, start=1):
        metric_name = format_metric_name(weakness.metric)
        odds_ratio = METRICS_BY_KEY[weakness.metric].odds_ratio
        or_percent = format_decimal(abs((1 - odds_ratio) * 100))

        lines.append(f"**Priority {index}: {metric_name}**")
        lines.append(
            f"Your {format_decimal(weakness.value)} vs winning average of "
            f"{format_decimal(weakness.benchmark)}"
        )
        lines.append(f"Impact: {format_decimal(abs(weakness.impact))}% reduction in win probability")
        lines.append(f"Research shows each {metric_name.lower()} changes win odds by {or_percent}%\n")
    return lines


def _strength_lines(recommendations: RecommendationSet) -> list[str]:
    lines = [STRENGTHS_HEADING]
    for strength in recommendations.strengths:
        metric_name = format_metric_name(strength.metric)
        lines.append(
            f"**{metric_name}:** {format_decimal(strength.value)} "
            f"(winning avg: {format_decimal(strength.benchmark)})"
        )
        lines.append(f"Contributing +{format_decimal(strength.impact)}% to win probability\n")
    return lines


def _findings_lines() -> list[str]:
    lines = [FINDINGS_HEADING]
    lines.extend(BULLET + finding for finding in KEY_RESEARCH_FINDINGS)
    # Blank line after the list
    lines[-1] += "\n"
    return lines


def _practice_focus_lines(recommendations: RecommendationSet) -> list[str]:
    if not recommendations.weaknesses:
        return []

    lines = [PRACTICE_FOCUS_HEADING]
    top_metric = recommendations.weaknesses[0].metric
    focus = METRICS_BY_KEY[top_metric].practice_focus
    if focus is not None:
        lines.extend(BULLET + drill for drill in PRACTICE_PLANS[focus])
    return lines


def generate_insights_text(
    impacts: Mapping[str, MetricImpact],
    recommendations: RecommendationSet,
) -> str:
    """
    Render the coaching narrative.

    Sections, in order: header, overall summary (by total impact), top practice
    priorities, areas of strength, key research findings, and a practice focus
    chosen by the single biggest weakness. Sections with nothing to show are
    left out.

    Args:
        impacts: Output of calculate_impacts
        recommendations: Output of generate_recommendations

    Returns:
        Newline-joined narrative text
    """
    total_impact = sum(i.impact for i in impacts.values())

    insights = [HEADER, summary_sentence(total_impact)]

    if recommendations.weaknesses:
        insights.extend(_priority_lines(recommendations))

    if recommendations.strengths:
        insights.extend(_strength_lines(recommendations))

    insights.extend(_findings_lines())
    insights.extend(_practice_focus_lines(recommendations))

    return "\n".join(insights)
