"""
Gap Detection Engine: runs the ordered rule set over a journey.

Behavioral Contract:
- Accepts a Journey (or a plain stage mapping) and an industry identifier
- Unknown industries resolve to empty catalogs and benchmarks, not errors
- Stages missing from the input are treated as empty
- Every rule sees the same snapshot; outputs are concatenated in rule order
- Never mutates its inputs and keeps no state between calls
"""

import logging
from typing import Any, List, Mapping, Optional, Union

from ux_gap_finder.benchmarks.registry import BenchmarkRegistry
from ux_gap_finder.catalog.store import CardCatalog
from ux_gap_finder.models.config import DetectorConfig
from ux_gap_finder.models.gap import Gap
from ux_gap_finder.models.journey import Journey
from ux_gap_finder.rules.gap_rules import GapRule, build_default_rules

logger = logging.getLogger(__name__)


def _as_journey(journey: Union[Journey, Mapping[str, Any]]) -> Journey:
    if isinstance(journey, Journey):
        return journey
    return Journey.model_validate(dict(journey))


class GapDetectionEngine:
    """
    Evaluates journeys against the built-in rules plus any registered ones.
    """

    def __init__(
        self,
        catalog: Optional[CardCatalog] = None,
        benchmark_registry: Optional[BenchmarkRegistry] = None,
        config: Optional[DetectorConfig] = None,
        rules: Optional[List[GapRule]] = None,
    ):
        self.catalog = catalog or CardCatalog()
        self.benchmark_registry = benchmark_registry or BenchmarkRegistry()
        self.config = config or DetectorConfig()
        self._rules: List[GapRule] = (
            list(rules) if rules is not None else build_default_rules(self.config)
        )

    @property
    def rules(self) -> List[str]:
        """Active rule names, in evaluation order."""
        return [rule.name for rule in self._rules]

    def register_rule(self, rule: GapRule) -> None:
        """Append a rule. It runs after every rule already registered."""
        self._rules.append(rule)

    def detect_gaps(
        self,
        journey: Union[Journey, Mapping[str, Any]],
        industry: str,
    ) -> List[Gap]:
        """Run every rule in order and return the concatenated findings."""
        snapshot = _as_journey(journey)
        benchmarks = self.benchmark_registry.get_benchmarks(industry)
        catalog = self.catalog.get_cards(industry)

        gaps: List[Gap] = []
        for rule in self._rules:
            found = rule.evaluate(snapshot, industry, catalog, benchmarks)
            if found:
                logger.debug(
                    "Rule %s found %d gap(s) for industry %s",
                    rule.name, len(found), industry,
                )
            gaps.extend(found)

        logger.debug(
            "Detected %d gap(s) across %d card(s) for industry %s",
            len(gaps), snapshot.total_cards(), industry,
        )
        return gaps


_default_engine = GapDetectionEngine()


def detect_gaps(
    journey: Union[Journey, Mapping[str, Any]],
    industry: str,
) -> List[Gap]:
    """Detect gaps with the built-in catalog, benchmarks and rules."""
    return _default_engine.detect_gaps(journey, industry)
