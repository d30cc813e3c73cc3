"""Card Catalog models: funnel stages and touchpoint cards."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class Stage(str, Enum):
    """Funnel position. Declaration order is the funnel order."""
    AWARENESS = "awareness"
    CONSIDERATION = "consideration"
    DECISION = "decision"
    RETENTION = "retention"


STAGE_ORDER: List[Stage] = list(Stage)


class CommunicationType(str, Enum):
    PERSUASIVE = "persuasive"
    INFORMATIONAL = "informational"
    SOCIAL_PROOF = "social-proof"
    TRANSACTIONAL = "transactional"
    RELATIONAL = "relational"


class TrustLevel(str, Enum):
    LOW = "low-trust"
    MEDIUM = "medium-trust"
    HIGH = "high-trust"


class ConversionProximity(str, Enum):
    DISCOVERY = "discovery"
    CONVERSION_PREP = "conversion-prep"
    DIRECT_CONVERSION = "direct-conversion"
    NURTURE = "nurture"


class TouchpointTags(BaseModel):
    """Fixed attributes the gap rules classify on."""

    model_config = ConfigDict(frozen=True)

    communication_type: CommunicationType
    trust_level: TrustLevel
    conversion_proximity: ConversionProximity


class TouchpointCard(BaseModel):
    """A discrete interaction point between a customer and the business."""

    model_config = ConfigDict(frozen=True)

    id: str                                 # Unique within an industry catalog
    name: str
    tags: TouchpointTags


class Industry(BaseModel):
    """An industry the user can select, populated or not."""

    id: str                                 # e.g., "ecommerce"
    label: str                              # e.g., "eCommerce"
    has_catalog: bool = False
