"""
Data Models for Volleyball Game Analysis

Dataclasses for every structure the analysis pipeline produces. All of them are
created per call and discarded; nothing here is cached or persisted.

Each model has a ``to_dict`` that renders the camelCase wire shape consumed by
the HTTP layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from statcoach.core.schemas import GameStatsPayload

# Ordered metric key -> value rescaled to the reference match length
NormalizedStats = dict[str, float]


@dataclass(frozen=True)
class RawStats:
    """Box-score counts for one team across one match."""

    total_kills: int = 0
    kill_attempts: int = 0
    attack_errors: int = 0
    service_aces: int = 0
    service_errors: int = 0
    reception_errors: int = 0
    digs: int = 0
    solo_blocks: int = 0
    block_assists: int = 0
    total_sets: int = 0  # 0 when unknown
    opponent: str | None = None
    game_date: str | None = None

    @property
    def total_blocks(self) -> int:
        return self.solo_blocks + self.block_assists

    @classmethod
    def from_payload(cls, payload: GameStatsPayload) -> RawStats:
        return cls(
            total_kills=payload.total_kills,
            kill_attempts=payload.kill_attempts,
            attack_errors=payload.attack_errors,
            service_aces=payload.service_aces,
            service_errors=payload.service_errors,
            reception_errors=payload.reception_errors,
            digs=payload.digs,
            solo_blocks=payload.solo_blocks,
            block_assists=payload.block_assists,
            total_sets=payload.total_sets or 0,
            opponent=payload.opponent,
            game_date=payload.game_date,
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RawStats:
        """
        Validate a wire-shaped record and build RawStats from it.

        Missing counts default to 0. Raises pydantic.ValidationError on
        wrong types or negative counts.
        """
        return cls.from_payload(GameStatsPayload.model_validate(dict(data)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalKills": self.total_kills,
            "killAttempts": self.kill_attempts,
            "attackErrors": self.attack_errors,
            "serviceAces": self.service_aces,
            "serviceErrors": self.service_errors,
            "receptionErrors": self.reception_errors,
            "digs": self.digs,
            "soloBlocks": self.solo_blocks,
            "blockAssists": self.block_assists,
            "totalSets": self.total_sets,
            "opponent": self.opponent,
            "gameDate": self.game_date,
        }


@dataclass(frozen=True)
class MetricImpact:
    """Estimated win-probability contribution of one metric."""

    metric: str
    value: float  # Normalized value
    benchmark: float  # Winning-team average
    deviation: float
    impact: float  # Approximate percentage points, see calculate_impacts
    odds_ratio: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "benchmark": self.benchmark,
            "deviation": self.deviation,
            "impact": self.impact,
            "oddsRatio": self.odds_ratio,
        }


@dataclass(frozen=True)
class Recommendation:
    """A ranked weakness or strength."""

    metric: str
    impact: float
    value: float
    benchmark: float
    priority: float | None = None  # |impact|, weaknesses only

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "metric": self.metric,
            "impact": self.impact,
            "value": self.value,
            "benchmark": self.benchmark,
        }
        if self.priority is not None:
            data["priority"] = self.priority
        return data


@dataclass
class RecommendationSet:
    """Top weaknesses and strengths plus every impact in ranked order."""

    weaknesses: list[Recommendation] = field(default_factory=list)
    strengths: list[Recommendation] = field(default_factory=list)
    all_impacts: list[MetricImpact] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "weaknesses": [w.to_dict() for w in self.weaknesses],
            "strengths": [s.to_dict() for s in self.strengths],
            "allImpacts": [[i.metric, i.to_dict()] for i in self.all_impacts],
        }


@dataclass(frozen=True)
class DisplayMetrics:
    """Per-set and per-attempt rates computed straight from raw counts."""

    kill_efficiency: float = 0.0  # Percent
    aces_per_set: float = 0.0
    blocks_per_set: float = 0.0
    digs_per_set: float = 0.0
    reception_error_rate: float = 0.0
    attack_error_rate: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "killEfficiency": self.kill_efficiency,
            "acesPerSet": self.aces_per_set,
            "blocksPerSet": self.blocks_per_set,
            "digsPerSet": self.digs_per_set,
            "receptionErrorRate": self.reception_error_rate,
            "attackErrorRate": self.attack_error_rate,
        }


@dataclass
class AnalysisResult:
    """Complete analysis of one match."""

    normalized: NormalizedStats
    impacts: dict[str, MetricImpact]
    recommendations: RecommendationSet
    insights_text: str
    metrics: DisplayMetrics

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape for JSON serialization."""
        return {
            "normalized": dict(self.normalized),
            "impacts": {k: v.to_dict() for k, v in self.impacts.items()},
            "recommendations": self.recommendations.to_dict(),
            "insightsText": self.insights_text,
            "metrics": self.metrics.to_dict(),
        }
