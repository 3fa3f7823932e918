"""
StatCoach Volleyball - Research Constants

Benchmarks and odds ratios from NCAA Division I men's volleyball research (2025).
Every metric is defined once, as an ordered record. The benchmark and odds-ratio
lookups below are read-only views derived from that single table, so the numeric
core and any prose that quotes the research read the same numbers.
"""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class Metric(StrEnum):
    """Metric keys used across benchmarks, odds ratios and results."""

    KILLS = "kills"
    ERRORS = "errors"  # Attack errors
    ATTEMPTS = "attempts"  # Attack attempts
    SERVICE_ACES = "serviceAces"
    SERVICE_ERRORS = "serviceErrors"
    RECEPTION_ERRORS = "receptionErrors"
    DIGS = "digs"
    SOLO_BLOCKS = "soloBlocks"
    BLOCK_ASSISTS = "blockAssists"
    BLOCK_ERRORS = "blockErrors"


class MetricCategory(StrEnum):
    """Skill phase a metric belongs to."""

    ATTACK = "attack"
    SERVE = "serve"
    RECEPTION = "reception"
    DEFENSE = "defense"
    BLOCK = "block"


class PracticeFocus(StrEnum):
    """Practice plan selected when a metric is the top weakness."""

    RECEPTION = "reception"
    SERVING = "serving"
    SHOT_SELECTION = "shot_selection"
    BALL_CONTROL = "ball_control"
    DEFENSE = "defense"
    BLOCKING = "blocking"


class PerformanceLevel(StrEnum):
    """Benchmark band for a single stat, best to worst."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"


@dataclass(frozen=True)
class MetricDefinition:
    """One research metric and everything derived from it."""

    key: Metric
    display_name: str
    raw_field: str | None  # RawStats attribute, None when not tracked per match
    win_benchmark: float
    loss_benchmark: float
    odds_ratio: float
    lower_is_better: bool
    category: MetricCategory
    practice_focus: PracticeFocus | None = None


# Research dataset average match length
REFERENCE_SETS_PER_MATCH = 3.5

# Used when a match record has no set count
DEFAULT_SETS_PLAYED = 3

# Impacts within +/- this many percentage points are not significant
SIGNIFICANCE_THRESHOLD = 1.0
MAX_WEAKNESSES = 3
MAX_STRENGTHS = 2

# Total-impact cutoffs for the overall summary sentence
SUMMARY_POSITIVE_THRESHOLD = 5.0
SUMMARY_NEGATIVE_THRESHOLD = -5.0

# Ordered: this is also the ranking tie-break order.
METRICS: tuple[MetricDefinition, ...] = (
    MetricDefinition(
        key=Metric.KILLS,
        display_name="Kills",
        raw_field="total_kills",
        win_benchmark=46.9,
        loss_benchmark=42.8,
        odds_ratio=1.255,  # +25.5% per kill
        lower_is_better=False,
        category=MetricCategory.ATTACK,
    ),
    MetricDefinition(
        key=Metric.ERRORS,
        display_name="Attack Errors",
        raw_field="attack_errors",
        win_benchmark=14.3,
        loss_benchmark=19.3,
        odds_ratio=0.921,  # -7.9% per error
        lower_is_better=True,
        category=MetricCategory.ATTACK,
        practice_focus=PracticeFocus.BALL_CONTROL,
    ),
    MetricDefinition(
        key=Metric.ATTEMPTS,
        display_name="Attack Attempts",
        raw_field="kill_attempts",
        win_benchmark=96.2,
        loss_benchmark=103.0,
        odds_ratio=0.881,  # -11.9% per attempt, efficiency over volume
        lower_is_better=True,
        category=MetricCategory.ATTACK,
        practice_focus=PracticeFocus.SHOT_SELECTION,
    ),
    MetricDefinition(
        key=Metric.SERVICE_ACES,
        display_name="Service Aces",
        raw_field="service_aces",
        win_benchmark=6.45,
        loss_benchmark=3.93,
        odds_ratio=1.338,  # +33.8% per ace, strongest positive predictor
        lower_is_better=False,
        category=MetricCategory.SERVE,
        practice_focus=PracticeFocus.SERVING,
    ),
    MetricDefinition(
        key=Metric.SERVICE_ERRORS,
        display_name="Service Errors",
        raw_field="service_errors",
        win_benchmark=16.0,
        loss_benchmark=15.5,
        odds_ratio=0.992,  # Not significant in research
        lower_is_better=True,
        category=MetricCategory.SERVE,
    ),
    MetricDefinition(
        key=Metric.RECEPTION_ERRORS,
        display_name="Reception Errors",
        raw_field="reception_errors",
        win_benchmark=3.71,
        loss_benchmark=6.17,
        odds_ratio=0.757,  # -24.3% per error, strongest negative predictor
        lower_is_better=True,
        category=MetricCategory.RECEPTION,
        practice_focus=PracticeFocus.RECEPTION,
    ),
    MetricDefinition(
        key=Metric.DIGS,
        display_name="Digs",
        raw_field="digs",
        win_benchmark=31.1,
        loss_benchmark=29.5,
        odds_ratio=1.152,  # +15.2% per dig
        lower_is_better=False,
        category=MetricCategory.DEFENSE,
        practice_focus=PracticeFocus.DEFENSE,
    ),
    MetricDefinition(
        key=Metric.SOLO_BLOCKS,
        display_name="Solo Blocks",
        raw_field="solo_blocks",
        win_benchmark=1.94,
        loss_benchmark=1.58,
        odds_ratio=1.257,  # +25.7% per solo block
        lower_is_better=False,
        category=MetricCategory.BLOCK,
        practice_focus=PracticeFocus.BLOCKING,
    ),
    MetricDefinition(
        key=Metric.BLOCK_ASSISTS,
        display_name="Block Assists",
        raw_field="block_assists",
        win_benchmark=13.9,
        loss_benchmark=10.4,
        odds_ratio=1.126,  # +12.6% per block assist
        lower_is_better=False,
        category=MetricCategory.BLOCK,
        practice_focus=PracticeFocus.BLOCKING,
    ),
    MetricDefinition(
        key=Metric.BLOCK_ERRORS,
        display_name="Block Errors",
        raw_field=None,
        win_benchmark=1.24,
        loss_benchmark=1.44,
        odds_ratio=0.867,  # Not significant in research
        lower_is_better=True,
        category=MetricCategory.BLOCK,
        practice_focus=PracticeFocus.BLOCKING,
    ),
)

METRICS_BY_KEY: MappingProxyType[str, MetricDefinition] = MappingProxyType(
    {m.key.value: m for m in METRICS}
)

WIN_BENCHMARKS: MappingProxyType[str, float] = MappingProxyType(
    {m.key.value: m.win_benchmark for m in METRICS}
)

LOSS_BENCHMARKS: MappingProxyType[str, float] = MappingProxyType(
    {m.key.value: m.loss_benchmark for m in METRICS}
)

ODDS_RATIOS: MappingProxyType[str, float] = MappingProxyType(
    {m.key.value: m.odds_ratio for m in METRICS}
)

LOWER_IS_BETTER: frozenset[str] = frozenset(m.key.value for m in METRICS if m.lower_is_better)

METRIC_DISPLAY_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {m.key.value: m.display_name for m in METRICS}
)

# Fixed research findings quoted in every narrative
KEY_RESEARCH_FINDINGS: tuple[str, ...] = (
    "Service aces have the strongest positive impact (+33.8% per ace)",
    "Reception errors have the strongest negative impact (-24.3% per error)",
    "More attack attempts actually hurt performance - efficiency over volume",
    "Both solo blocks and block assists significantly improve win probability",
)

PRACTICE_PLANS: MappingProxyType[PracticeFocus, tuple[str, ...]] = MappingProxyType(
    {
        PracticeFocus.RECEPTION: (
            "Serve-receive drills with pressure situations",
            "Individual passing technique work",
            "Communication and coverage patterns",
        ),
        PracticeFocus.SERVING: (
            "Aggressive serving practice with target zones",
            "Risk/reward analysis for different serve types",
            "Situational serving strategy",
        ),
        PracticeFocus.SHOT_SELECTION: (
            "Shot selection and decision-making drills",
            "High-percentage attack patterns",
            "Reading defense and picking spots",
        ),
        PracticeFocus.BALL_CONTROL: (
            "Ball control and technique refinement",
            "Reduce unforced errors through focused repetition",
            "Mental approach to minimize mistakes",
        ),
        PracticeFocus.DEFENSE: (
            "Defensive positioning and reading hitters",
            "Platform control and emergency digs",
            "Transition from defense to offense",
        ),
        PracticeFocus.BLOCKING: (
            "Blocking footwork and timing",
            "Reading opponent tendencies",
            "Team blocking coordination",
        ),
    }
)
