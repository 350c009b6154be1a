"""
Reservation repository for listing a guest's reservations.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, desc
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.reservation import Reservation
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.reservation import ReservationListing
from typing import List
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for reservation listings."""

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    async def get_all_reservations(self, guest_id: int, limit: int = 10) -> List[ReservationListing]:
        """
        Get a guest's reservations with property title, cost and average rating.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations to return

        Returns:
            Reservations ordered by start date, newest first
        """
        average_rating = func.avg(PropertyReview.rating).label("average_rating")

        query = (
            select(
                *Reservation.__table__.columns,
                Property.title,
                Property.cost_per_night,
                average_rating
            )
            .join(Property, Reservation.property_id == Property.id)
            .outerjoin(PropertyReview, PropertyReview.property_id == Reservation.property_id)
            .where(Reservation.guest_id == guest_id)
            .group_by(Property.id, Reservation.id)
            .order_by(desc(Reservation.start_date), desc(Reservation.id))
            .limit(limit)
        )

        result = await self.execute(query, "get_all_reservations")
        reservations = [ReservationListing.model_validate(dict(row)) for row in result.mappings().all()]

        logger.debug(f"Retrieved {len(reservations)} reservations for guest {guest_id}")
        return reservations
