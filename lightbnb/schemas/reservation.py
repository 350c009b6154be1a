"""
Pydantic schema for reservation listing rows.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date


class ReservationListing(BaseModel):
    """Reservation row joined with its property's title, cost and average rating."""

    id: int
    start_date: date
    end_date: date
    property_id: int
    guest_id: int
    title: str
    cost_per_night: int = Field(..., description="Nightly cost in cents")
    average_rating: Optional[float] = None

    class Config:
        from_attributes = True
