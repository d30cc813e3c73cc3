"""Detector configuration: parameters of the built-in structural rules."""

from pydantic import BaseModel, Field

from ux_gap_finder.models.catalog import Stage


class DetectorConfig(BaseModel):
    """Configuration for the Gap Detection Engine's default rule set."""

    trust_stage: Stage = Stage.CONSIDERATION
    conversion_stage: Stage = Stage.DECISION
    social_proof_stage: Stage = Stage.CONSIDERATION
    social_proof_threshold: int = Field(ge=0, default=2)
