"""
Pydantic schemas for property inserts, listing filters and listing rows.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, Dict, Any
from decimal import Decimal, ROUND_HALF_UP


def to_cents(amount: Decimal) -> int:
    """Convert a currency amount to integer cents, rounding half up."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class PropertyCreate(BaseModel):
    """Schema for inserting a property. cost_per_night is in currency units."""

    owner_id: int = Field(..., description="ID of the owning user")
    title: str = Field(..., max_length=255)
    description: Optional[str] = None
    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)
    cost_per_night: Decimal = Field(
        ...,
        ge=0,
        description="Nightly cost in currency units, stored as cents"
    )
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=255)
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255)
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    def to_row(self) -> Dict[str, Any]:
        """Column values for the insert, with cost_per_night in cents."""
        row = self.model_dump()
        row["cost_per_night"] = to_cents(self.cost_per_night)
        return row

    class Config:
        json_schema_extra = {
            "example": {
                "owner_id": 1,
                "title": "Speed lamp",
                "description": "description",
                "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cost_per_night": 930.61,
                "street": "536 Namsub Highway",
                "city": "Sotboske",
                "province": "Quebec",
                "post_code": "28142",
                "country": "Canada",
                "parking_spaces": 6,
                "number_of_bathrooms": 4,
                "number_of_bedrooms": 8
            }
        }


class PropertySearchOptions(BaseModel):
    """
    Options bag for listing properties.
    Every field is optional; unrecognized keys are ignored.
    """

    city: Optional[str] = Field(
        None,
        description="Case-insensitive substring of the city"
    )

    owner_id: Optional[int] = Field(
        None,
        description="Only properties owned by this user"
    )

    minimum_price_per_night: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Lower nightly price bound in currency units"
    )

    maximum_price_per_night: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Upper nightly price bound in currency units"
    )

    minimum_rating: Optional[float] = Field(
        None,
        ge=0,
        description="Minimum average review rating"
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat blank form values as absent."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("city")
    @classmethod
    def validate_city(cls, v):
        """Clean city search term."""
        if v is not None:
            return v.strip()
        return v

    @model_validator(mode="after")
    def validate_price_range(self):
        """Validate that the price bounds are ordered."""
        if self.minimum_price_per_night is not None and self.maximum_price_per_night is not None:
            if self.minimum_price_per_night > self.maximum_price_per_night:
                raise ValueError("minimum_price_per_night cannot exceed maximum_price_per_night")
        return self

    class Config:
        extra = "ignore"


class PropertyListing(BaseModel):
    """Property row with its average review rating."""

    id: int
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int = Field(..., description="Nightly cost in cents")
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str
    street: str
    city: str
    province: str
    post_code: str
    active: bool
    average_rating: Optional[float] = Field(
        None,
        description="Average review rating, None when the property has no reviews"
    )

    class Config:
        from_attributes = True
