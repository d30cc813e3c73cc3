"""
Presentation mapping: how findings are shown, kept out of the rules.

Gap types map to a banner color, icon and title. Types without an entry
(rules added later) fall back to a neutral lightbulb treatment.
"""

from typing import Dict, List

from pydantic import BaseModel

from ux_gap_finder.models.catalog import STAGE_ORDER, Stage
from ux_gap_finder.models.gap import Gap, GapType, Severity
from ux_gap_finder.models.journey import Journey


class GapDisplay(BaseModel):
    color: str
    icon: str
    title: str


DEFAULT_GAP_DISPLAY = GapDisplay(color="gray", icon="lightbulb", title="Suggestion")

GAP_TYPE_DISPLAY: Dict[str, GapDisplay] = {
    GapType.INDUSTRY_STANDARD.value: GapDisplay(
        color="red", icon="bar-chart", title="Missing Industry Standard"
    ),
    GapType.SEQUENCE_VIOLATION.value: GapDisplay(
        color="yellow", icon="alert-triangle", title="Flow Issue"
    ),
    GapType.MISSING_SOCIAL_PROOF.value: GapDisplay(
        color="orange", icon="message-square", title="Missing Social Proof"
    ),
}

SEVERITY_COLORS: Dict[str, str] = {
    Severity.HIGH.value: "red",
    Severity.MEDIUM.value: "yellow",
    Severity.LOW.value: "blue",
}
DEFAULT_SEVERITY_COLOR = "gray"


class GapView(BaseModel):
    """A finding plus the attributes needed to render it."""

    type: str
    stage: Stage
    severity: Severity
    message: str
    title: str
    icon: str
    banner_color: str
    severity_color: str


class JourneyInsights(BaseModel):
    """Headline counts shown beneath the journey."""

    critical_issues: int = 0
    opportunities: int = 0
    strong_touchpoints: int = 0


def display_for(gap_type: str) -> GapDisplay:
    return GAP_TYPE_DISPLAY.get(gap_type, DEFAULT_GAP_DISPLAY)


def describe_gap(gap: Gap) -> GapView:
    display = display_for(gap.type)
    return GapView(
        type=gap.type,
        stage=gap.stage,
        severity=gap.severity,
        message=gap.message,
        title=display.title,
        icon=display.icon,
        banner_color=display.color,
        severity_color=SEVERITY_COLORS.get(gap.severity.value, DEFAULT_SEVERITY_COLOR),
    )


def gaps_for_stage(gaps: List[Gap], stage: Stage) -> List[Gap]:
    """Findings attached to one stage, keeping detection order."""
    return [gap for gap in gaps if gap.stage == stage]


def stage_issue_counts(gaps: List[Gap]) -> Dict[str, int]:
    return {stage.value: len(gaps_for_stage(gaps, stage)) for stage in STAGE_ORDER}


def summarize(journey: Journey, gaps: List[Gap]) -> JourneyInsights:
    """
    Count critical issues (high severity) and opportunities (medium).

    Strong touchpoints is a rough figure: cards placed minus findings,
    floored at zero.
    """
    return JourneyInsights(
        critical_issues=sum(1 for g in gaps if g.severity == Severity.HIGH),
        opportunities=sum(1 for g in gaps if g.severity == Severity.MEDIUM),
        strong_touchpoints=max(0, journey.total_cards() - len(gaps)),
    )
