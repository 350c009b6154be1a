"""
Property repository for property listings with dynamic filtering.
Builds the listing query from whichever search options are present.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_, func, asc
from sqlalchemy.sql import Select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertyListing, to_cents
from typing import Optional, List, Dict, Any
from decimal import Decimal
import logging

logger = logging.getLogger(__name__)


class PropertySearchFilters:
    """Data class for property search filters."""

    def __init__(
        self,
        city: Optional[str] = None,
        owner_id: Optional[int] = None,
        minimum_price_per_night: Optional[Decimal] = None,
        maximum_price_per_night: Optional[Decimal] = None,
        minimum_rating: Optional[float] = None
    ):
        self.city = city
        self.owner_id = owner_id
        self.minimum_price_per_night = minimum_price_per_night
        self.maximum_price_per_night = maximum_price_per_night
        self.minimum_rating = minimum_rating

    @property
    def has_price_range(self) -> bool:
        """The price filter applies only when both bounds are given."""
        return self.minimum_price_per_night is not None and self.maximum_price_per_night is not None


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property listings and inserts.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def add_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Insert a property.

        Args:
            property_data: Column values with cost_per_night already in cents

        Returns:
            Created property; cost_per_night holds the stored cents

        Raises:
            IntegrityViolationError: If owner_id does not reference a user
            QueryFailedError: If the insert fails
        """
        created_property = await self.create(property_data, "add_property")
        logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
        return created_property

    async def get_all_properties(
        self,
        filters: Optional[PropertySearchFilters] = None,
        limit: int = 10
    ) -> List[PropertyListing]:
        """
        List properties with their average rating, cheapest first.

        Args:
            filters: PropertySearchFilters instance with search criteria
            limit: Maximum number of properties to return

        Returns:
            Matching properties, empty if none match
        """
        query = self.build_listing_query(filters or PropertySearchFilters(), limit)

        result = await self.execute(query, "get_all_properties")
        properties = [PropertyListing.model_validate(dict(row)) for row in result.mappings().all()]

        logger.debug(f"Property listing returned {len(properties)} results")
        return properties

    def build_listing_query(self, filters: PropertySearchFilters, limit: int) -> Select:
        """
        Build the listing statement.

        Row predicates go into a single WHERE joined with AND; the rating
        threshold filters the aggregate and goes into HAVING.

        Args:
            filters: PropertySearchFilters instance
            limit: Bound for the LIMIT clause

        Returns:
            SQLAlchemy select statement
        """
        average_rating = func.avg(PropertyReview.rating).label("average_rating")

        query = (
            select(*Property.__table__.columns, average_rating)
            .outerjoin(PropertyReview, Property.id == PropertyReview.property_id)
        )

        conditions = self._build_filter_conditions(filters)
        if conditions:
            query = query.where(and_(*conditions))

        query = query.group_by(Property.id)

        # A zero threshold means no rating filter, so unreviewed properties stay listed
        if filters.minimum_rating:
            query = query.having(func.avg(PropertyReview.rating) >= filters.minimum_rating)

        return query.order_by(asc(Property.cost_per_night), asc(Property.id)).limit(limit)

    def _build_filter_conditions(self, filters: PropertySearchFilters) -> List:
        """
        Build SQLAlchemy row conditions from search filters, in application order.

        Args:
            filters: PropertySearchFilters instance

        Returns:
            List of SQLAlchemy conditions
        """
        conditions = []

        # City filter (case-insensitive partial match, wildcards in the term are literal)
        if filters.city:
            conditions.append(Property.city.icontains(filters.city, autoescape=True))

        # Owner filter
        if filters.owner_id is not None:
            conditions.append(Property.owner_id == filters.owner_id)

        # Price range, given in currency units and compared against stored cents
        if filters.has_price_range:
            conditions.append(
                Property.cost_per_night.between(
                    to_cents(filters.minimum_price_per_night),
                    to_cents(filters.maximum_price_per_night)
                )
            )

        return conditions
