"""
Card Catalog: static touchpoint reference data, keyed by industry.

Loaded once per process and treated as immutable afterwards. Industries
offered for selection but not yet populated resolve to an empty catalog
rather than an error.
"""

from typing import Dict, List, Optional

from ux_gap_finder.models.catalog import (
    CommunicationType as C,
    ConversionProximity as P,
    Industry,
    Stage,
    TouchpointCard,
    TouchpointTags,
    TrustLevel as T,
)


def _card(card_id: str, name: str, comm: C, trust: T, proximity: P) -> TouchpointCard:
    return TouchpointCard(
        id=card_id,
        name=name,
        tags=TouchpointTags(
            communication_type=comm,
            trust_level=trust,
            conversion_proximity=proximity,
        ),
    )


ECOMMERCE_CARDS: Dict[Stage, List[TouchpointCard]] = {
    Stage.AWARENESS: [
        _card("social-ads", "Social Media Ads", C.PERSUASIVE, T.LOW, P.DISCOVERY),
        _card("google-ads", "Google Search Ads", C.INFORMATIONAL, T.LOW, P.DISCOVERY),
        _card("content-blog", "SEO Content/Blog", C.INFORMATIONAL, T.MEDIUM, P.DISCOVERY),
        _card("influencer", "Influencer Partnerships", C.SOCIAL_PROOF, T.MEDIUM, P.DISCOVERY),
    ],
    Stage.CONSIDERATION: [
        _card("product-pages", "Product Detail Pages", C.INFORMATIONAL, T.MEDIUM, P.CONVERSION_PREP),
        _card("reviews", "Customer Reviews", C.SOCIAL_PROOF, T.HIGH, P.CONVERSION_PREP),
        _card("comparison", "Product Comparison Tools", C.INFORMATIONAL, T.MEDIUM, P.CONVERSION_PREP),
        _card("live-chat", "Live Chat Support", C.INFORMATIONAL, T.MEDIUM, P.CONVERSION_PREP),
        _card("size-guide", "Size Guides/Product Info", C.INFORMATIONAL, T.LOW, P.CONVERSION_PREP),
    ],
    Stage.DECISION: [
        _card("cart", "Shopping Cart Page", C.TRANSACTIONAL, T.LOW, P.DIRECT_CONVERSION),
        _card("checkout", "Checkout Process", C.TRANSACTIONAL, T.LOW, P.DIRECT_CONVERSION),
        _card("security-badges", "Security Badges/Trust Signals", C.INFORMATIONAL, T.HIGH, P.CONVERSION_PREP),
        _card("payment-options", "Payment Options Display", C.INFORMATIONAL, T.MEDIUM, P.CONVERSION_PREP),
        _card("return-policy", "Return Policy Clear Display", C.INFORMATIONAL, T.HIGH, P.CONVERSION_PREP),
    ],
    Stage.RETENTION: [
        _card("order-confirm", "Order Confirmation Email", C.TRANSACTIONAL, T.LOW, P.NURTURE),
        _card("shipping-notify", "Shipping Notification", C.INFORMATIONAL, T.LOW, P.NURTURE),
        _card("review-request", "Review Request Email", C.RELATIONAL, T.LOW, P.NURTURE),
        _card("loyalty-program", "Loyalty Program Invitation", C.PERSUASIVE, T.MEDIUM, P.NURTURE),
    ],
}

# Industries offered for selection, in display order.
INDUSTRY_LABELS: Dict[str, str] = {
    "ecommerce": "eCommerce",
    "nonprofit": "Nonprofit",
    "service": "Service-Based",
}


class CardCatalog:
    """
    Read-only touchpoint catalog.

    Accessors hand out fresh lists so callers cannot alter the loaded data;
    the cards themselves are frozen models.
    """

    def __init__(self, cards: Optional[Dict[str, Dict[Stage, List[TouchpointCard]]]] = None):
        if cards is None:
            cards = {"ecommerce": ECOMMERCE_CARDS}
        self._cards = {
            industry: {Stage(stage): list(stage_cards) for stage, stage_cards in by_stage.items()}
            for industry, by_stage in cards.items()
        }

    def has_catalog(self, industry: str) -> bool:
        """Whether any cards are registered for an industry."""
        by_stage = self._cards.get(industry, {})
        return any(by_stage.values())

    def get_cards(self, industry: str) -> Dict[Stage, List[TouchpointCard]]:
        """Cards for an industry, by stage. Unknown industries get empty stages."""
        by_stage = self._cards.get(industry, {})
        return {stage: list(by_stage.get(stage, [])) for stage in Stage}

    def find_card(self, industry: str, card_id: str) -> Optional[TouchpointCard]:
        """Look up a card by id anywhere in an industry's catalog."""
        for stage_cards in self._cards.get(industry, {}).values():
            for card in stage_cards:
                if card.id == card_id:
                    return card
        return None

    def industries(self) -> List[Industry]:
        """Selectable industries, including any registered beyond the defaults."""
        ids = list(INDUSTRY_LABELS) + [i for i in self._cards if i not in INDUSTRY_LABELS]
        return [
            Industry(
                id=industry_id,
                label=INDUSTRY_LABELS.get(industry_id, industry_id),
                has_catalog=self.has_catalog(industry_id),
            )
            for industry_id in ids
        ]
