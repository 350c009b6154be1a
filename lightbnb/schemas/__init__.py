"""
Pydantic schemas for query layer inputs and listing rows.
"""

# User schemas
from .user import UserCreate

# Property schemas
from .property import (
    PropertyCreate,
    PropertySearchOptions,
    PropertyListing,
    to_cents
)

# Reservation schemas
from .reservation import ReservationListing

__all__ = [
    # User
    "UserCreate",

    # Property
    "PropertyCreate",
    "PropertySearchOptions",
    "PropertyListing",
    "to_cents",

    # Reservation
    "ReservationListing",
]
