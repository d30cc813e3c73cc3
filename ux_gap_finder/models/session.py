"""Journey Session: presentation-owned editing state for one user."""

from datetime import datetime

from pydantic import BaseModel

from ux_gap_finder.models.journey import Journey


class JourneySession(BaseModel):
    """Selected industry plus the journey being built. Never persisted."""

    id: str
    industry: str
    journey: Journey = Journey()
    created_at: datetime
