"""
StatCoach Core - Foundation modules shared by the analysis pipeline.

This module contains:
- constants: Research benchmarks, odds ratios and metric definitions
- schemas: Input data contract for raw game stats
- config: Application configuration management
"""

from statcoach.core.constants import (
    DEFAULT_SETS_PLAYED,
    LOSS_BENCHMARKS,
    LOWER_IS_BETTER,
    METRIC_DISPLAY_NAMES,
    METRICS,
    METRICS_BY_KEY,
    ODDS_RATIOS,
    REFERENCE_SETS_PER_MATCH,
    SIGNIFICANCE_THRESHOLD,
    WIN_BENCHMARKS,
    Metric,
    MetricCategory,
    MetricDefinition,
    PerformanceLevel,
    PracticeFocus,
)
from statcoach.core.schemas import GameStatsPayload

__all__: list[str] = [
    "DEFAULT_SETS_PLAYED",
    "LOSS_BENCHMARKS",
    "LOWER_IS_BETTER",
    "METRIC_DISPLAY_NAMES",
    "METRICS",
    "METRICS_BY_KEY",
    "ODDS_RATIOS",
    "REFERENCE_SETS_PER_MATCH",
    "SIGNIFICANCE_THRESHOLD",
    "WIN_BENCHMARKS",
    "Metric",
    "MetricCategory",
    "MetricDefinition",
    "PerformanceLevel",
    "PracticeFocus",
    "GameStatsPayload",
]
