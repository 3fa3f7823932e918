"""End-to-end tests for analyze_game."""

import pytest
from pydantic import ValidationError

from statcoach import analyze_game
from statcoach.analysis.analyzer import compute_display_metrics
from statcoach.analysis.models import AnalysisResult, RawStats
from statcoach.analysis.narrative import PRACTICE_FOCUS_HEADING, format_decimal


class TestAnalyzeGame:
    """Tests for the orchestrator."""

    def test_sample_match(self, sample_payload):
        """The reference example from the research write-up."""
        result = analyze_game(sample_payload)

        assert isinstance(result, AnalysisResult)
        assert result.metrics.kill_efficiency == 50.0
        assert result.normalized["serviceAces"] == pytest.approx(8 * 3.5 / 3)
        assert result.impacts["serviceAces"].impact > 1
        assert result.impacts["serviceAces"].benchmark == 6.45

    def test_accepts_raw_stats(self, sample_stats, sample_payload):
        """RawStats and the wire mapping give the same result."""
        assert analyze_game(sample_stats).to_dict() == analyze_game(sample_payload).to_dict()

    def test_idempotent(self, sample_stats):
        first = analyze_game(sample_stats)
        second = analyze_game(sample_stats)
        assert first.insights_text == second.insights_text
        assert [i.metric for i in first.recommendations.all_impacts] == [
            i.metric for i in second.recommendations.all_impacts
        ]

    def test_missing_sets_defaults_to_three(self, sample_payload):
        """No set count: normalize as three sets, report per-set rates as 0."""
        payload = dict(sample_payload)
        del payload["totalSets"]
        result = analyze_game(payload)

        assert result.normalized["kills"] == pytest.approx(50 * 3.5 / 3)
        assert result.metrics.aces_per_set == 0
        assert result.metrics.kill_efficiency == 50.0

    def test_missing_counts_are_zero(self):
        result = analyze_game({"totalSets": 3})
        assert result.normalized["kills"] == 0
        assert result.metrics.kill_efficiency == 0
        # Zero kills, aces and digs are well below the winning averages
        assert len(result.recommendations.weaknesses) == 3

    def test_weak_match_gets_practice_focus(self):
        """A poor reception game is flagged as a weakness."""
        result = analyze_game(
            {
                "totalKills": 40,
                "killAttempts": 90,
                "attackErrors": 14,
                "serviceAces": 5,
                "serviceErrors": 15,
                "receptionErrors": 15,
                "digs": 27,
                "soloBlocks": 2,
                "blockAssists": 12,
                "totalSets": 4,
            }
        )
        weaknesses = [w.metric for w in result.recommendations.weaknesses]
        assert "receptionErrors" in weaknesses
        assert PRACTICE_FOCUS_HEADING in result.insights_text

    def test_invalid_input_fails_loudly(self, sample_payload):
        payload = dict(sample_payload, totalKills="50")
        with pytest.raises(ValidationError):
            analyze_game(payload)

    def test_huge_counts_still_render(self):
        """Counts far beyond any real match validate and produce a narrative."""
        result = analyze_game({"totalKills": 10**27, "killAttempts": 10**27, "totalSets": 3})
        kills = result.normalized["kills"]
        assert kills == pytest.approx(10**27 * 3.5 / 3)
        assert f"**Kills:** {format_decimal(kills)}" in result.insights_text
        assert result.recommendations.weaknesses[0].metric == "attempts"

    def test_wire_shape(self, sample_payload):
        data = analyze_game(sample_payload).to_dict()
        assert set(data) == {"normalized", "impacts", "recommendations", "insightsText", "metrics"}
        assert set(data["metrics"]) == {
            "killEfficiency",
            "acesPerSet",
            "blocksPerSet",
            "digsPerSet",
            "receptionErrorRate",
            "attackErrorRate",
        }
        assert data["impacts"]["kills"]["oddsRatio"] == 1.255


class TestComputeDisplayMetrics:
    """Tests for display metric rates."""

    def test_sample_rates(self, sample_stats):
        metrics = compute_display_metrics(sample_stats)
        assert metrics.kill_efficiency == 50.0
        assert metrics.aces_per_set == pytest.approx(8 / 3)
        assert metrics.blocks_per_set == pytest.approx(18 / 3)
        assert metrics.digs_per_set == pytest.approx(35 / 3)
        assert metrics.reception_error_rate == pytest.approx(2 / 3)
        assert metrics.attack_error_rate == pytest.approx(10 / 3)

    def test_zero_denominators(self):
        """Zero sets and zero attempts give 0, never an error."""
        metrics = compute_display_metrics(RawStats(total_kills=10, digs=5))
        assert metrics.kill_efficiency == 0
        assert metrics.aces_per_set == 0
        assert metrics.blocks_per_set == 0
        assert metrics.digs_per_set == 0
        assert metrics.reception_error_rate == 0
        assert metrics.attack_error_rate == 0
