"""
Game Analysis Orchestrator

Runs the full pipeline for one match:

    raw stats -> normalized stats -> impacts -> recommendations -> narrative

and adds a small set of display metrics computed straight from the raw counts.
Every call is independent and side-effect free.
"""

import logging
from collections.abc import Mapping
from typing import Any

from statcoach.analysis.impact import calculate_impacts
from statcoach.analysis.models import AnalysisResult, DisplayMetrics, RawStats
from statcoach.analysis.narrative import generate_insights_text
from statcoach.analysis.normalize import normalize_stats, resolve_sets_played
from statcoach.analysis.recommendations import generate_recommendations

logger = logging.getLogger(__name__)


def compute_display_metrics(stats: RawStats) -> DisplayMetrics:
    """
    Per-set and per-attempt rates for display.

    Uses the recorded set count as-is; any rate whose denominator is zero
    is reported as 0.
    """
    sets = stats.total_sets
    attempts = stats.kill_attempts

    return DisplayMetrics(
        kill_efficiency=(stats.total_kills / attempts * 100) if attempts > 0 else 0.0,
        aces_per_set=(stats.service_aces / sets) if sets > 0 else 0.0,
        blocks_per_set=(stats.total_blocks / sets) if sets > 0 else 0.0,
        digs_per_set=(stats.digs / sets) if sets > 0 else 0.0,
        reception_error_rate=(stats.reception_errors / sets) if sets > 0 else 0.0,
        attack_error_rate=(stats.attack_errors / sets) if sets > 0 else 0.0,
    )


def analyze_game(stats: RawStats | Mapping[str, Any]) -> AnalysisResult:
    """
    Analyze one match's box score against the research benchmarks.

    Args:
        stats: RawStats, or a wire-shaped mapping (camelCase keys) that is
            validated first

    Returns:
        AnalysisResult with normalized stats, impacts, recommendations,
        insights text and display metrics

    Raises:
        pydantic.ValidationError: If a mapping has wrong types or negative counts
    """
    if not isinstance(stats, RawStats):
        stats = RawStats.from_dict(stats)

    normalized = normalize_stats(stats, resolve_sets_played(stats))
    impacts = calculate_impacts(normalized)
    recommendations = generate_recommendations(impacts)
    insights_text = generate_insights_text(impacts, recommendations)
    metrics = compute_display_metrics(stats)

    logger.debug(
        "Analyzed game vs %s: sets=%d weaknesses=%d strengths=%d",
        stats.opponent or "unknown",
        resolve_sets_played(stats),
        len(recommendations.weaknesses),
        len(recommendations.strengths),
    )

    return AnalysisResult(
        normalized=normalized,
        impacts=impacts,
        recommendations=recommendations,
        insights_text=insights_text,
        metrics=metrics,
    )
