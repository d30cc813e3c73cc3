"""Tests for journey sessions."""

import pytest

from ux_gap_finder.detection.engine import detect_gaps
from ux_gap_finder.models.catalog import Stage
from ux_gap_finder.models.gap import GapType
from ux_gap_finder.session.store import (
    CardNotFoundError,
    JourneyError,
    JourneySessionStore,
    SessionNotFoundError,
)


class TestJourneySessionStore:
    def setup_method(self):
        self.store = JourneySessionStore()
        self.session = self.store.create("ecommerce")

    def test_create(self):
        assert self.session.id.startswith("journey_")
        assert self.session.industry == "ecommerce"
        assert self.session.journey.total_cards() == 0
        assert self.store.count() == 1

    def test_add_card(self):
        session = self.store.add_card(self.session.id, Stage.DECISION, "cart")
        assert [c.id for c in session.journey.cards_at(Stage.DECISION)] == ["cart"]
        assert self.store.get(self.session.id).journey.total_cards() == 1

    def test_card_from_another_stage(self):
        session = self.store.add_card(self.session.id, Stage.CONSIDERATION, "return-policy")
        assert session.journey.cards_at(Stage.CONSIDERATION)[0].id == "return-policy"

    def test_duplicates_kept(self):
        self.store.add_card(self.session.id, Stage.CONSIDERATION, "live-chat")
        session = self.store.add_card(self.session.id, Stage.CONSIDERATION, "live-chat")
        assert len(session.journey.cards_at(Stage.CONSIDERATION)) == 2

    def test_remove_removes_every_instance(self):
        for card_id in ["live-chat", "reviews", "live-chat"]:
            self.store.add_card(self.session.id, Stage.CONSIDERATION, card_id)
        session = self.store.remove_card(self.session.id, Stage.CONSIDERATION, "live-chat")
        assert [c.id for c in session.journey.cards_at(Stage.CONSIDERATION)] == ["reviews"]

    def test_remove_absent_card_is_noop(self):
        session = self.store.remove_card(self.session.id, Stage.AWARENESS, "social-ads")
        assert session.journey.total_cards() == 0

    def test_earlier_journey_value_unchanged(self):
        before = self.store.get(self.session.id).journey
        self.store.add_card(self.session.id, Stage.DECISION, "cart")
        assert before.total_cards() == 0

    def test_unknown_card(self):
        with pytest.raises(CardNotFoundError):
            self.store.add_card(self.session.id, Stage.DECISION, "billboard")

    def test_unpopulated_industry_has_no_cards(self):
        self.store.set_industry(self.session.id, "nonprofit")
        with pytest.raises(JourneyError):
            self.store.add_card(self.session.id, Stage.DECISION, "cart")

    def test_set_industry_keeps_cards(self):
        self.store.add_card(self.session.id, Stage.DECISION, "cart")
        session = self.store.set_industry(self.session.id, "service")
        assert session.industry == "service"
        assert session.journey.total_cards() == 1

    def test_unknown_session(self):
        with pytest.raises(SessionNotFoundError):
            self.store.get("journey_missing")
        with pytest.raises(SessionNotFoundError):
            self.store.add_card("journey_missing", Stage.DECISION, "cart")

    def test_delete(self):
        assert self.store.delete(self.session.id) is True
        assert self.store.delete(self.session.id) is False
        assert self.store.count() == 0

    def test_edit_then_detect(self):
        self.store.add_card(self.session.id, Stage.DECISION, "cart")
        session = self.store.get(self.session.id)
        gaps = detect_gaps(session.journey, session.industry)
        assert GapType.SEQUENCE_VIOLATION in [g.type for g in gaps]

        self.store.add_card(self.session.id, Stage.CONSIDERATION, "reviews")
        session = self.store.get(self.session.id)
        gaps = detect_gaps(session.journey, session.industry)
        assert [g.type for g in gaps] == [GapType.INDUSTRY_STANDARD]
