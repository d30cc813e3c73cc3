"""
Gap Rule Set: independent heuristics evaluated over a journey.

Rule Contract:
- Accepts the journey, the industry id, that industry's catalog and benchmarks
- Returns zero or more Gaps; never mutates any of its inputs
- Total over any well-formed Journey, including one with every stage empty
- Rules are evaluated in a fixed order and their output concatenated, so new
  rules are appended after the built-in ones
"""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol

from ux_gap_finder.models.catalog import (
    CommunicationType,
    ConversionProximity,
    Stage,
    TouchpointCard,
    TrustLevel,
)
from ux_gap_finder.models.config import DetectorConfig
from ux_gap_finder.models.gap import BenchmarkRule, Gap, GapType, Severity
from ux_gap_finder.models.journey import Journey


SEQUENCE_VIOLATION_MESSAGE = "You're asking customers to convert before building enough trust"
MISSING_SOCIAL_PROOF_MESSAGE = "Customers need validation from others before making decisions"


class GapRule(Protocol):
    """Protocol for gap rules: pluggable heuristics."""

    name: str

    def evaluate(
        self,
        journey: Journey,
        industry: str,
        catalog: Dict[Stage, List[TouchpointCard]],
        benchmarks: List[BenchmarkRule],
    ) -> List[Gap]: ...


class BenchmarkCoverageRule:
    """One high-severity gap per industry benchmark missing from its stage."""

    name = "benchmark_coverage"

    def evaluate(
        self,
        journey: Journey,
        industry: str,
        catalog: Dict[Stage, List[TouchpointCard]],
        benchmarks: List[BenchmarkRule],
    ) -> List[Gap]:
        gaps = []
        for benchmark in benchmarks:
            stage_cards = journey.cards_at(benchmark.stage)
            if any(card.id == benchmark.touchpoint_id for card in stage_cards):
                continue
            gaps.append(Gap(
                type=GapType.INDUSTRY_STANDARD.value,
                stage=benchmark.stage,
                severity=Severity.HIGH,
                message=benchmark.message,
            ))
        return gaps


class TrustSequencingRule:
    """
    Flags a direct-conversion ask without high-trust signals earlier on.

    Presence-based: only whether such cards exist in each stage matters,
    not where they sit within it.
    """

    name = "trust_sequencing"

    def __init__(
        self,
        trust_stage: Stage = Stage.CONSIDERATION,
        conversion_stage: Stage = Stage.DECISION,
    ):
        self.trust_stage = trust_stage
        self.conversion_stage = conversion_stage

    def evaluate(
        self,
        journey: Journey,
        industry: str,
        catalog: Dict[Stage, List[TouchpointCard]],
        benchmarks: List[BenchmarkRule],
    ) -> List[Gap]:
        has_direct_conversion = any(
            card.tags.conversion_proximity == ConversionProximity.DIRECT_CONVERSION
            for card in journey.cards_at(self.conversion_stage)
        )
        has_high_trust = any(
            card.tags.trust_level == TrustLevel.HIGH
            for card in journey.cards_at(self.trust_stage)
        )
        if has_direct_conversion and not has_high_trust:
            return [Gap(
                type=GapType.SEQUENCE_VIOLATION.value,
                stage=self.trust_stage,
                severity=Severity.MEDIUM,
                message=SEQUENCE_VIOLATION_MESSAGE,
            )]
        return []


class SocialProofDensityRule:
    """Flags a crowded stage that carries no social proof."""

    name = "social_proof_density"

    def __init__(self, stage: Stage = Stage.CONSIDERATION, threshold: int = 2):
        self.stage = stage
        self.threshold = threshold

    def evaluate(
        self,
        journey: Journey,
        industry: str,
        catalog: Dict[Stage, List[TouchpointCard]],
        benchmarks: List[BenchmarkRule],
    ) -> List[Gap]:
        stage_cards = journey.cards_at(self.stage)
        has_social_proof = any(
            card.tags.communication_type == CommunicationType.SOCIAL_PROOF
            for card in stage_cards
        )
        # Strictly more than the threshold
        if len(stage_cards) > self.threshold and not has_social_proof:
            return [Gap(
                type=GapType.MISSING_SOCIAL_PROOF.value,
                stage=self.stage,
                severity=Severity.MEDIUM,
                message=MISSING_SOCIAL_PROOF_MESSAGE,
            )]
        return []


def build_default_rules(config: Optional[DetectorConfig] = None) -> List[GapRule]:
    """The built-in rules, in their fixed evaluation order."""
    config = config or DetectorConfig()
    return [
        BenchmarkCoverageRule(),
        TrustSequencingRule(
            trust_stage=config.trust_stage,
            conversion_stage=config.conversion_stage,
        ),
        SocialProofDensityRule(
            stage=config.social_proof_stage,
            threshold=config.social_proof_threshold,
        ),
    ]
