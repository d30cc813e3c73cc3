"""
Journey Session Store: the editing state behind the journey builder.

Each session owns one selected industry and one journey. Mutations replace
the journey with a new value, so a journey handed to the detection engine
is never changed underneath it. In-memory only; sessions end with the
process.
"""

import logging
from datetime import datetime
from typing import Dict, Optional
from uuid import uuid4

from ux_gap_finder.catalog.store import CardCatalog
from ux_gap_finder.models.catalog import Stage
from ux_gap_finder.models.journey import Journey
from ux_gap_finder.models.session import JourneySession

logger = logging.getLogger(__name__)


class JourneyError(Exception):
    """Base class for journey editing failures."""
    pass


class SessionNotFoundError(JourneyError):
    """Raised when a session id is unknown or already ended."""
    pass


class CardNotFoundError(JourneyError):
    """Raised when a card id is not in the session industry's catalog."""
    pass


class JourneySessionStore:
    """In-memory session store."""

    def __init__(self, catalog: Optional[CardCatalog] = None):
        self.catalog = catalog or CardCatalog()
        self._sessions: Dict[str, JourneySession] = {}

    def create(self, industry: str = "ecommerce") -> JourneySession:
        """Start a session with an empty journey."""
        session = JourneySession(
            id=f"journey_{uuid4().hex[:12]}",
            industry=industry,
            journey=Journey(),
            created_at=datetime.utcnow(),
        )
        self._sessions[session.id] = session
        logger.info("Created journey session %s for industry %s", session.id, industry)
        return session

    def get(self, session_id: str) -> JourneySession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Journey session {session_id} not found")
        return session

    def count(self) -> int:
        return len(self._sessions)

    def set_industry(self, session_id: str, industry: str) -> JourneySession:
        """Switch the selected industry. Placed cards are kept."""
        session = self.get(session_id)
        updated = session.model_copy(update={"industry": industry})
        self._sessions[session_id] = updated
        return updated

    def add_card(self, session_id: str, stage: Stage, card_id: str) -> JourneySession:
        """
        Append a catalog card to a stage.

        The card may come from any stage of the catalog and may already be
        present; duplicates are kept.
        """
        session = self.get(session_id)
        card = self.catalog.find_card(session.industry, card_id)
        if card is None:
            raise CardNotFoundError(
                f"Card {card_id} not in the {session.industry} catalog"
            )
        journey = session.journey
        cards = journey.cards_at(stage) + [card]
        return self._replace_journey(session, journey.with_cards(stage, cards))

    def remove_card(self, session_id: str, stage: Stage, card_id: str) -> JourneySession:
        """Remove every instance of a card id from a stage. Absent ids are a no-op."""
        session = self.get(session_id)
        journey = session.journey
        cards = [card for card in journey.cards_at(stage) if card.id != card_id]
        return self._replace_journey(session, journey.with_cards(stage, cards))

    def delete(self, session_id: str) -> bool:
        """End a session."""
        if session_id in self._sessions:
            del self._sessions[session_id]
            logger.info("Ended journey session %s", session_id)
            return True
        return False

    def _replace_journey(self, session: JourneySession, journey: Journey) -> JourneySession:
        updated = session.model_copy(update={"journey": journey})
        self._sessions[session.id] = updated
        return updated
