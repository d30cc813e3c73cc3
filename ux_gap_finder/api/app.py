"""
UX Gap Finder API: FastAPI endpoints.

Exposes the gap finder via a REST API for:
- Industry, catalog and benchmark lookup
- Stateless gap detection over a submitted journey
- Journey sessions (add/remove cards, re-evaluate on every edit)
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from ux_gap_finder.benchmarks.registry import BenchmarkRegistry
from ux_gap_finder.catalog.store import CardCatalog
from ux_gap_finder.detection.engine import GapDetectionEngine
from ux_gap_finder.models.catalog import Stage
from ux_gap_finder.models.config import DetectorConfig
from ux_gap_finder.models.gap import Gap
from ux_gap_finder.models.journey import Journey
from ux_gap_finder.presentation.display import (
    describe_gap,
    stage_issue_counts,
    summarize,
)
from ux_gap_finder.session.store import (
    CardNotFoundError,
    JourneySessionStore,
    SessionNotFoundError,
)


# --- Request/Response Models ---

class DetectRequest(BaseModel):
    industry: str = "ecommerce"
    journey: Journey = Journey()


class SessionCreateRequest(BaseModel):
    industry: str = "ecommerce"


class IndustryUpdateRequest(BaseModel):
    industry: str


class CardAddRequest(BaseModel):
    card_id: str


def _findings(journey: Journey, gaps: List[Gap]) -> dict:
    return {
        "gaps": [describe_gap(g).model_dump(mode="json") for g in gaps],
        "stage_issue_counts": stage_issue_counts(gaps),
        "insights": summarize(journey, gaps).model_dump(mode="json"),
    }


# --- Application Factory ---

def create_app(
    catalog: Optional[CardCatalog] = None,
    benchmark_registry: Optional[BenchmarkRegistry] = None,
    config: Optional[DetectorConfig] = None,
    session_store: Optional[JourneySessionStore] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="UX Gap Finder API",
        description="Customer journey gap detection",
        version="0.1.0-alpha",
    )

    # Initialize components
    cc = catalog or CardCatalog()
    br = benchmark_registry or BenchmarkRegistry()
    engine = GapDetectionEngine(catalog=cc, benchmark_registry=br, config=config)
    sessions = session_store or JourneySessionStore(catalog=cc)

    # Store components on app state for access in endpoints
    app.state.catalog = cc
    app.state.benchmark_registry = br
    app.state.engine = engine
    app.state.session_store = sessions

    def _get_session(session_id: str):
        try:
            return sessions.get(session_id)
        except SessionNotFoundError:
            raise HTTPException(404, "Journey session not found")

    # === REFERENCE DATA ===

    @app.get("/industries")
    def list_industries():
        """Selectable industries and whether each has a catalog yet."""
        return [i.model_dump(mode="json") for i in cc.industries()]

    @app.get("/catalog/{industry}")
    def get_catalog(industry: str):
        """Touchpoint cards by stage. Unpopulated industries return empty stages."""
        return {
            stage.value: [c.model_dump(mode="json") for c in cards]
            for stage, cards in cc.get_cards(industry).items()
        }

    @app.get("/benchmarks/{industry}")
    def get_benchmarks(industry: str):
        """Industry benchmarks in registry order."""
        return [b.model_dump(mode="json") for b in br.get_benchmarks(industry)]

    @app.get("/rules")
    def get_rules():
        """Active gap rules in evaluation order."""
        return engine.rules

    # === DETECTION ===

    @app.post("/gaps/detect")
    def detect(req: DetectRequest):
        """Evaluate a submitted journey."""
        gaps = engine.detect_gaps(req.journey, req.industry)
        return {"industry": req.industry, **_findings(req.journey, gaps)}

    # === JOURNEY SESSIONS ===

    @app.post("/journeys")
    def create_journey(req: SessionCreateRequest):
        """Start a journey session with empty stages."""
        session = sessions.create(req.industry)
        return session.model_dump(mode="json")

    @app.get("/journeys/{session_id}")
    def get_journey(session_id: str):
        return _get_session(session_id).model_dump(mode="json")

    @app.put("/journeys/{session_id}/industry")
    def update_industry(session_id: str, req: IndustryUpdateRequest):
        """Switch the selected industry."""
        _get_session(session_id)
        return sessions.set_industry(session_id, req.industry).model_dump(mode="json")

    @app.post("/journeys/{session_id}/stages/{stage}/cards")
    def add_card(session_id: str, stage: Stage, req: CardAddRequest):
        """Drop a catalog card into a stage."""
        _get_session(session_id)
        try:
            session = sessions.add_card(session_id, stage, req.card_id)
        except CardNotFoundError as e:
            raise HTTPException(404, str(e))
        return session.model_dump(mode="json")

    @app.delete("/journeys/{session_id}/stages/{stage}/cards/{card_id}")
    def remove_card(session_id: str, stage: Stage, card_id: str):
        """Remove every instance of a card from a stage."""
        _get_session(session_id)
        return sessions.remove_card(session_id, stage, card_id).model_dump(mode="json")

    @app.get("/journeys/{session_id}/gaps")
    def get_journey_gaps(session_id: str):
        """Re-evaluate the session's current journey."""
        session = _get_session(session_id)
        gaps = engine.detect_gaps(session.journey, session.industry)
        return {
            "session_id": session.id,
            "industry": session.industry,
            **_findings(session.journey, gaps),
        }

    @app.delete("/journeys/{session_id}")
    def delete_journey(session_id: str):
        """End a journey session."""
        if not sessions.delete(session_id):
            raise HTTPException(404, "Journey session not found")
        return {"status": "ended", "session_id": session_id}

    return app


# Default application instance
app = create_app()
