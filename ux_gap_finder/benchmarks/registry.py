"""Benchmark Registry: per-industry touchpoints a journey is expected to include."""

from typing import Dict, List, Optional

from ux_gap_finder.models.catalog import Stage
from ux_gap_finder.models.gap import BenchmarkRule


ECOMMERCE_BENCHMARKS: List[BenchmarkRule] = [
    BenchmarkRule(
        stage=Stage.CONSIDERATION,
        touchpoint_id="reviews",
        message="95% of successful eCommerce sites show customer reviews",
    ),
    BenchmarkRule(
        stage=Stage.DECISION,
        touchpoint_id="security-badges",
        message="Security signals are crucial for online purchasing confidence",
    ),
]


class BenchmarkRegistry:
    """Static, read-only benchmark lookup."""

    def __init__(self, benchmarks: Optional[Dict[str, List[BenchmarkRule]]] = None):
        if benchmarks is None:
            benchmarks = {"ecommerce": ECOMMERCE_BENCHMARKS}
        self._benchmarks = {k: list(v) for k, v in benchmarks.items()}

    def get_benchmarks(self, industry: str) -> List[BenchmarkRule]:
        """Benchmarks in registry order; empty for industries with none defined."""
        return list(self._benchmarks.get(industry, []))
