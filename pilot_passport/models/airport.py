"""
Visited-airport Pydantic model for the pilot passport application.

AirportModel is the entity handed to and returned by the airport manager
and every store implementation. It is frozen so snapshots taken from a
store stay comparable after later mutations.
"""

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class AirportModel(BaseModel):
    """One visited airport."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str = Field(..., description="4-character airport identifier")
    city: str = Field(..., description="City the airport serves")
    date_visited: datetime = Field(..., description="When the airport was visited")
    rating: int = Field(..., description="Rating from 1 to 5")

    def with_changes(self, city: str, date_visited: datetime, rating: int) -> "AirportModel":
        """Return a copy with every mutable field replaced; the identifier is kept."""
        return self.model_copy(update={
            "city": city,
            "date_visited": date_visited,
            "rating": rating,
        })
