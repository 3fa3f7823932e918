"""
StatCoach Analysis - Scoring and recommendation pipeline.

This module contains:
- normalize: Rescaling raw counts to the reference match length
- impact: Odds-ratio based win-probability impact
- performance: Win/loss benchmark band classification
- recommendations: Weakness and strength ranking
- narrative: Fixed-template coaching text
- analyzer: The analyze_game orchestrator
"""

from statcoach.analysis.analyzer import analyze_game, compute_display_metrics
from statcoach.analysis.impact import calculate_impacts, calculate_metric_impact
from statcoach.analysis.models import (
    AnalysisResult,
    DisplayMetrics,
    MetricImpact,
    NormalizedStats,
    RawStats,
    Recommendation,
    RecommendationSet,
)
from statcoach.analysis.narrative import format_metric_name, generate_insights_text
from statcoach.analysis.normalize import normalize_stats, resolve_sets_played
from statcoach.analysis.performance import classify_stats, get_performance_level
from statcoach.analysis.recommendations import generate_recommendations, rank_impacts

__all__: list[str] = [
    # Orchestrator
    "analyze_game",
    "compute_display_metrics",
    # Pipeline stages
    "normalize_stats",
    "resolve_sets_played",
    "calculate_impacts",
    "calculate_metric_impact",
    "get_performance_level",
    "classify_stats",
    "generate_recommendations",
    "rank_impacts",
    "generate_insights_text",
    "format_metric_name",
    # Models
    "AnalysisResult",
    "DisplayMetrics",
    "MetricImpact",
    "NormalizedStats",
    "RawStats",
    "Recommendation",
    "RecommendationSet",
]
