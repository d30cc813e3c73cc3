"""UX Gap Finder data models."""

from ux_gap_finder.models.catalog import (
    STAGE_ORDER,
    CommunicationType,
    ConversionProximity,
    Industry,
    Stage,
    TouchpointCard,
    TouchpointTags,
    TrustLevel,
)
from ux_gap_finder.models.config import DetectorConfig
from ux_gap_finder.models.gap import BenchmarkRule, Gap, GapType, Severity
from ux_gap_finder.models.journey import Journey
from ux_gap_finder.models.session import JourneySession

__all__ = [
    "BenchmarkRule",
    "CommunicationType",
    "ConversionProximity",
    "DetectorConfig",
    "Gap",
    "GapType",
    "Industry",
    "Journey",
    "JourneySession",
    "STAGE_ORDER",
    "Severity",
    "Stage",
    "TouchpointCard",
    "TouchpointTags",
    "TrustLevel",
]
