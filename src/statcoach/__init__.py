"""
StatCoach Volleyball - Research-Based Game Analysis

Scores a volleyball team's box score against NCAA Division I research
benchmarks and turns it into prioritized coaching recommendations.

Usage:
    from statcoach import analyze_game

    result = analyze_game({
        "totalKills": 50,
        "killAttempts": 100,
        "serviceAces": 8,
        "receptionErrors": 2,
        "totalSets": 3,
    })

    print(result.insights_text)
    for weakness in result.recommendations.weaknesses:
        print(f"{weakness.metric}: {weakness.impact:+.1f}")
"""

__version__ = "0.1.0"
__author__ = "StatCoach Contributors"


def __getattr__(name):
    """Lazy import so the CLI and config load without the full pipeline."""
    if name == "analyze_game":
        from statcoach.analysis.analyzer import analyze_game
        return analyze_game
    elif name == "RawStats":
        from statcoach.analysis.models import RawStats
        return RawStats
    elif name == "AnalysisResult":
        from statcoach.analysis.models import AnalysisResult
        return AnalysisResult
    elif name == "get_performance_level":
        from statcoach.analysis.performance import get_performance_level
        return get_performance_level
    elif name == "PerformanceLevel":
        from statcoach.core.constants import PerformanceLevel
        return PerformanceLevel
    elif name == "WIN_BENCHMARKS":
        from statcoach.core.constants import WIN_BENCHMARKS
        return WIN_BENCHMARKS
    elif name == "LOSS_BENCHMARKS":
        from statcoach.core.constants import LOSS_BENCHMARKS
        return LOSS_BENCHMARKS
    elif name == "ODDS_RATIOS":
        from statcoach.core.constants import ODDS_RATIOS
        return ODDS_RATIOS
    raise AttributeError(f"module 'statcoach' has no attribute '{name}'")


__all__ = [
    # Version
    "__version__",
    # Analysis
    "analyze_game",
    "RawStats",
    "AnalysisResult",
    "get_performance_level",
    "PerformanceLevel",
    # Research constants
    "WIN_BENCHMARKS",
    "LOSS_BENCHMARKS",
    "ODDS_RATIOS",
]
