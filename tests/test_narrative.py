"""Tests for the fixed-template coaching narrative."""

import pytest

from statcoach.analysis.impact import calculate_impacts
from statcoach.analysis.models import MetricImpact, Recommendation, RecommendationSet
from statcoach.analysis.narrative import (
    PRACTICE_FOCUS_HEADING,
    PRIORITIES_HEADING,
    STRENGTHS_HEADING,
    format_decimal,
    format_metric_name,
    generate_insights_text,
    summary_sentence,
)
from statcoach.analysis.normalize import normalize_stats
from statcoach.analysis.recommendations import generate_recommendations
from statcoach.core.constants import WIN_BENCHMARKS

FINDINGS_BLOCK = (
    "**📊 Key Research Findings**\n\n"
    "• Service aces have the strongest positive impact (+33.8% per ace)\n"
    "• Reception errors have the strongest negative impact (-24.3% per error)\n"
    "• More attack attempts actually hurt performance - efficiency over volume\n"
    "• Both solo blocks and block assists significantly improve win probability\n"
)


def _single_weakness(metric: str, impact: float = -3.0) -> RecommendationSet:
    rec = Recommendation(metric=metric, impact=impact, value=5.0, benchmark=6.0, priority=abs(impact))
    return RecommendationSet(weaknesses=[rec])


def _impacts_for(recs: RecommendationSet) -> dict[str, MetricImpact]:
    return {
        r.metric: MetricImpact(r.metric, r.value, r.benchmark, r.value - r.benchmark, r.impact, 1.0)
        for r in recs.weaknesses + recs.strengths
    }


class TestFormatting:
    """Tests for name and number formatting."""

    def test_display_names(self):
        assert format_metric_name("errors") == "Attack Errors"
        assert format_metric_name("receptionErrors") == "Reception Errors"

    def test_unknown_name_falls_back_to_key(self):
        assert format_metric_name("pancakes") == "pancakes"

    @pytest.mark.parametrize(
        "value,expected",
        [
            (46.9, "46.9"),
            (9.333333, "9.3"),
            (0.25, "0.3"),
            (-0.25, "-0.3"),
            (11.899999999999995, "11.9"),
            (3, "3.0"),
        ],
    )
    def test_format_decimal(self, value, expected):
        """One decimal, halves rounded away from zero."""
        assert format_decimal(value) == expected

    def test_format_decimal_digits(self):
        assert format_decimal(6.45, 2) == "6.45"

    def test_format_decimal_beyond_context_precision(self):
        """Values with more digits than the default decimal context keep every digit."""
        assert format_decimal(1e30) == f"{int(1e30)}.0"
        assert format_decimal(-1.5e28) == f"{int(-1.5e28)}.0"


class TestSummarySentence:
    """Tests for the overall summary choice."""

    def test_positive(self):
        assert summary_sentence(5.1).startswith("Your statistics profile suggests strong performance")

    def test_negative(self):
        assert summary_sentence(-5.1).startswith("Your statistics profile shows several areas")

    @pytest.mark.parametrize("total", [5.0, -5.0, 0.0])
    def test_mixed_includes_boundaries(self, total):
        assert summary_sentence(total).startswith("Your statistics show a mixed profile")


class TestGenerateInsightsText:
    """Tests for generate_insights_text."""

    def test_neutral_game_golden(self):
        """All metrics at the winning average: header, mixed summary, findings only."""
        normalized = {k: v for k, v in WIN_BENCHMARKS.items() if k != "blockErrors"}
        impacts = calculate_impacts(normalized)
        text = generate_insights_text(impacts, generate_recommendations(impacts))

        assert text == (
            "**Performance Analysis Based on NCAA Research**\n\n"
            "Your statistics show a mixed profile with both strengths and areas for improvement.\n\n"
            + FINDINGS_BLOCK
        )

    def test_no_weakness_omits_practice_focus(self):
        """Without weaknesses, neither priorities nor practice focus appear."""
        impacts = {"kills": MetricImpact("kills", 47.0, 46.9, 0.1, 0.5, 1.255)}
        text = generate_insights_text(impacts, generate_recommendations(impacts))
        assert PRACTICE_FOCUS_HEADING not in text
        assert PRIORITIES_HEADING not in text
        assert STRENGTHS_HEADING not in text

    def test_sample_match_golden_sections(self, sample_stats):
        """Sample match renders the expected priority and strength lines."""
        impacts = calculate_impacts(normalize_stats(sample_stats))
        recs = generate_recommendations(impacts)
        text = generate_insights_text(impacts, recs)
        lines = text.split("\n")

        assert lines[0] == "**Performance Analysis Based on NCAA Research**"
        assert lines[2].startswith("Your statistics profile suggests strong performance")
        assert "**Priority 1: Attack Attempts**" in lines
        assert "Your 116.7 vs winning average of 96.2" in lines
        assert "Research shows each attack attempts changes win odds by 11.9%" in lines
        assert "**Kills:** 58.3 (winning avg: 46.9)" in lines
        assert "**Digs:** 40.8 (winning avg: 31.1)" in lines
        impact_line = f"Impact: {format_decimal(abs(impacts['attempts'].impact))}% reduction in win probability"
        assert impact_line in lines

        # Attempts is the top weakness: shot selection drills
        assert text.endswith(
            PRACTICE_FOCUS_HEADING
            + "\n• Shot selection and decision-making drills"
            + "\n• High-percentage attack patterns"
            + "\n• Reading defense and picking spots"
        )

    def test_section_order(self, sample_stats):
        impacts = calculate_impacts(normalize_stats(sample_stats))
        text = generate_insights_text(impacts, generate_recommendations(impacts))
        positions = [
            text.index(PRIORITIES_HEADING),
            text.index(STRENGTHS_HEADING),
            text.index("**📊 Key Research Findings**"),
            text.index(PRACTICE_FOCUS_HEADING),
        ]
        assert positions == sorted(positions)

    @pytest.mark.parametrize(
        "metric,first_drill",
        [
            ("receptionErrors", "• Serve-receive drills with pressure situations"),
            ("serviceAces", "• Aggressive serving practice with target zones"),
            ("attempts", "• Shot selection and decision-making drills"),
            ("errors", "• Ball control and technique refinement"),
            ("digs", "• Defensive positioning and reading hitters"),
            ("soloBlocks", "• Blocking footwork and timing"),
            ("blockAssists", "• Blocking footwork and timing"),
        ],
    )
    def test_practice_focus_by_top_weakness(self, metric, first_drill):
        recs = _single_weakness(metric)
        text = generate_insights_text(_impacts_for(recs), recs)
        focus = text.split(PRACTICE_FOCUS_HEADING)[1]
        assert focus.split("\n")[1] == first_drill

    def test_weakness_without_plan_keeps_heading_only(self):
        """Kills have no dedicated drill list; the heading closes the text."""
        recs = _single_weakness("kills")
        text = generate_insights_text(_impacts_for(recs), recs)
        assert text.endswith(PRACTICE_FOCUS_HEADING)

    def test_priority_lines(self):
        recs = _single_weakness("receptionErrors", impact=-12.34)
        text = generate_insights_text(_impacts_for(recs), recs)
        assert (
            "**Priority 1: Reception Errors**\n"
            "Your 5.0 vs winning average of 6.0\n"
            "Impact: 12.3% reduction in win probability\n"
            "Research shows each reception errors changes win odds by 24.3%\n"
        ) in text

    def test_strength_lines(self):
        rec = Recommendation(metric="serviceAces", impact=42.06, value=9.3333, benchmark=6.45)
        recs = RecommendationSet(strengths=[rec])
        text = generate_insights_text(_impacts_for(recs), recs)
        assert (
            "**✅ Areas of Strength**\n\n"
            "**Service Aces:** 9.3 (winning avg: 6.5)\n"
            "Contributing +42.1% to win probability\n"
        ) in text

    def test_deterministic(self, sample_stats):
        impacts = calculate_impacts(normalize_stats(sample_stats))
        recs = generate_recommendations(impacts)
        assert generate_insights_text(impacts, recs) == generate_insights_text(impacts, recs)
