"""Gap models: benchmark expectations and detected findings."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from ux_gap_finder.models.catalog import Stage


class GapType(str, Enum):
    INDUSTRY_STANDARD = "industry_standard"
    SEQUENCE_VIOLATION = "sequence_violation"
    MISSING_SOCIAL_PROOF = "missing_social_proof"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class BenchmarkRule(BaseModel):
    """Industry expectation that a touchpoint appears in a given stage."""

    model_config = ConfigDict(frozen=True)

    stage: Stage
    touchpoint_id: str
    message: str


class Gap(BaseModel):
    """
    A detected deficiency or risk in an assembled journey.

    `type` is a plain string rather than a GapType so that rules added later
    can emit their own types; the built-in rules use GapType values.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    stage: Stage
    severity: Severity
    message: str
