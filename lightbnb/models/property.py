"""
Property model for rental listings.
Nightly cost is stored as integer cents.
"""

from sqlalchemy import String, Text, Integer, Boolean, Index, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from lightbnb.database import Base
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from lightbnb.models.user import User
    from lightbnb.models.reservation import Reservation
    from lightbnb.models.review import PropertyReview


class Property(Base):
    """
    Property listing owned by a user.
    """

    __tablename__ = "properties"

    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )

    # Listing details
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Property listing title"
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Detailed property description"
    )

    thumbnail_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)

    cover_photo_url: Mapped[str] = mapped_column(String(255), nullable=False)

    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly cost in cents"
    )

    # Room counts
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)

    street: Mapped[str] = mapped_column(String(255), nullable=False)

    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    province: Mapped[str] = mapped_column(String(255), nullable=False)

    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Whether the listing is active"
    )

    # Relationships
    owner: Mapped["User"] = relationship(
        "User",
        back_populates="properties"
    )

    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation",
        back_populates="property_rel",
        cascade="all, delete-orphan"
    )

    reviews: Mapped[List["PropertyReview"]] = relationship(
        "PropertyReview",
        back_populates="property_rel",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, cost_per_night={self.cost_per_night})>"

    def to_dict(self) -> dict:
        """Convert property to a row dictionary with the stored cents value."""
        return {column.name: getattr(self, column.key) for column in self.__table__.columns}


# Listing queries filter by city and sort by price
city_cost_index = Index(
    "idx_properties_city_cost",
    Property.city,
    Property.cost_per_night
)
