"""Tests for the individual gap rules."""

from ux_gap_finder.benchmarks.registry import BenchmarkRegistry
from ux_gap_finder.catalog.store import CardCatalog
from ux_gap_finder.models.catalog import Stage
from ux_gap_finder.models.config import DetectorConfig
from ux_gap_finder.models.gap import GapType, Severity
from ux_gap_finder.models.journey import Journey
from ux_gap_finder.rules.gap_rules import (
    MISSING_SOCIAL_PROOF_MESSAGE,
    SEQUENCE_VIOLATION_MESSAGE,
    BenchmarkCoverageRule,
    SocialProofDensityRule,
    TrustSequencingRule,
    build_default_rules,
)

CATALOG = CardCatalog()


def _make_journey(**stages) -> Journey:
    """Build a journey from ecommerce card ids, e.g. decision=["cart"]."""
    return Journey(**{
        stage: [CATALOG.find_card("ecommerce", card_id) for card_id in ids]
        for stage, ids in stages.items()
    })


def _evaluate(rule, journey: Journey, industry: str = "ecommerce"):
    return rule.evaluate(
        journey,
        industry,
        CATALOG.get_cards(industry),
        BenchmarkRegistry().get_benchmarks(industry),
    )


class TestBenchmarkCoverageRule:
    def test_all_missing(self):
        gaps = _evaluate(BenchmarkCoverageRule(), Journey())
        assert [g.stage for g in gaps] == [Stage.CONSIDERATION, Stage.DECISION]
        assert all(g.type == GapType.INDUSTRY_STANDARD for g in gaps)
        assert all(g.severity == Severity.HIGH for g in gaps)
        assert gaps[0].message == "95% of successful eCommerce sites show customer reviews"

    def test_satisfied(self):
        journey = _make_journey(consideration=["reviews"], decision=["security-badges"])
        assert _evaluate(BenchmarkCoverageRule(), journey) == []

    def test_card_in_wrong_stage_does_not_count(self):
        journey = _make_journey(awareness=["reviews"], decision=["security-badges"])
        gaps = _evaluate(BenchmarkCoverageRule(), journey)
        assert len(gaps) == 1
        assert gaps[0].stage == Stage.CONSIDERATION

    def test_no_benchmarks_for_unknown_industry(self):
        assert _evaluate(BenchmarkCoverageRule(), Journey(), "fintech") == []


class TestTrustSequencingRule:
    def test_direct_conversion_without_trust(self):
        journey = _make_journey(decision=["checkout"], consideration=["size-guide"])
        gaps = _evaluate(TrustSequencingRule(), journey)
        assert len(gaps) == 1
        assert gaps[0].type == GapType.SEQUENCE_VIOLATION
        assert gaps[0].stage == Stage.CONSIDERATION
        assert gaps[0].severity == Severity.MEDIUM
        assert gaps[0].message == SEQUENCE_VIOLATION_MESSAGE

    def test_high_trust_present(self):
        journey = _make_journey(decision=["checkout"], consideration=["reviews"])
        assert _evaluate(TrustSequencingRule(), journey) == []

    def test_no_direct_conversion(self):
        journey = _make_journey(decision=["payment-options"])
        assert _evaluate(TrustSequencingRule(), journey) == []

    def test_high_trust_in_decision_does_not_count(self):
        journey = _make_journey(decision=["cart", "return-policy"])
        assert len(_evaluate(TrustSequencingRule(), journey)) == 1

    def test_position_within_stage_is_ignored(self):
        journey = _make_journey(
            decision=["cart"],
            consideration=["product-pages", "comparison", "reviews"],
        )
        assert _evaluate(TrustSequencingRule(), journey) == []


class TestSocialProofDensityRule:
    def test_at_threshold(self):
        journey = _make_journey(consideration=["product-pages", "comparison"])
        assert _evaluate(SocialProofDensityRule(), journey) == []

    def test_above_threshold(self):
        journey = _make_journey(consideration=["product-pages", "comparison", "live-chat"])
        gaps = _evaluate(SocialProofDensityRule(), journey)
        assert len(gaps) == 1
        assert gaps[0].type == GapType.MISSING_SOCIAL_PROOF
        assert gaps[0].stage == Stage.CONSIDERATION
        assert gaps[0].message == MISSING_SOCIAL_PROOF_MESSAGE

    def test_social_proof_present(self):
        journey = _make_journey(consideration=["product-pages", "comparison", "influencer"])
        assert _evaluate(SocialProofDensityRule(), journey) == []

    def test_duplicates_count_toward_threshold(self):
        journey = _make_journey(consideration=["live-chat", "live-chat", "live-chat"])
        assert len(_evaluate(SocialProofDensityRule(), journey)) == 1

    def test_custom_stage_and_threshold(self):
        rule = SocialProofDensityRule(stage=Stage.AWARENESS, threshold=0)
        journey = _make_journey(awareness=["google-ads"])
        gaps = _evaluate(rule, journey)
        assert len(gaps) == 1
        assert gaps[0].stage == Stage.AWARENESS


class TestDefaultRules:
    def test_fixed_order(self):
        assert [r.name for r in build_default_rules()] == [
            "benchmark_coverage", "trust_sequencing", "social_proof_density",
        ]

    def test_config_flows_into_rules(self):
        rules = build_default_rules(DetectorConfig(social_proof_threshold=4))
        assert rules[2].threshold == 4
        assert rules[1].trust_stage == Stage.CONSIDERATION
