"""Journey: the user's arrangement of touchpoint cards across the funnel."""

from typing import List

from pydantic import BaseModel

from ux_gap_finder.models.catalog import Stage, TouchpointCard


class Journey(BaseModel):
    """
    One ordered list of cards per canonical stage.

    A card may appear more than once. Stages left out of the input validate
    to empty lists, so a partially-initialized mapping is still a journey.
    """

    awareness: List[TouchpointCard] = []
    consideration: List[TouchpointCard] = []
    decision: List[TouchpointCard] = []
    retention: List[TouchpointCard] = []

    def cards_at(self, stage: Stage) -> List[TouchpointCard]:
        """Cards placed in a stage, in placement order."""
        return getattr(self, Stage(stage).value)

    def total_cards(self) -> int:
        return sum(len(self.cards_at(stage)) for stage in Stage)

    def with_cards(self, stage: Stage, cards: List[TouchpointCard]) -> "Journey":
        """Return a copy of this journey with one stage replaced."""
        return self.model_copy(update={Stage(stage).value: list(cards)})
