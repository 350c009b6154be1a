"""
Query layer facade used by the HTTP layer.
Validates plain-data inputs and delegates each operation to its repository.
"""

from typing import Optional, List, Mapping, Any, Union
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from lightbnb.config import Settings, get_settings
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.property import PropertyRepository, PropertySearchFilters
from lightbnb.schemas.user import UserCreate
from lightbnb.schemas.property import PropertyCreate, PropertySearchOptions, PropertyListing
from lightbnb.schemas.reservation import ReservationListing
from lightbnb.utils.exceptions import InvalidQueryOptionsError
import logging

logger = logging.getLogger(__name__)


class QueryLayer:
    """
    Stateless set of data-access operations bound to one database session.

    Lookups return None or an empty list when nothing matches. Database
    failures raise QueryFailedError and never look like an empty result.
    """

    def __init__(self, db_session: AsyncSession, settings: Optional[Settings] = None):
        self.db = db_session
        self.settings = settings or get_settings()
        self.user_repo = UserRepository(db_session)
        self.reservation_repo = ReservationRepository(db_session)
        self.property_repo = PropertyRepository(db_session)

    # Users

    async def get_user_with_email(self, email: str) -> Optional[User]:
        """Get a single user by email, or None."""
        return await self.user_repo.get_user_with_email(email)

    async def get_user_with_id(self, user_id: int) -> List[User]:
        """Get all users with the given id (a list, see UserRepository)."""
        return await self.user_repo.get_user_with_id(user_id)

    async def add_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> User:
        """
        Add a new user.

        Args:
            user: UserCreate or mapping with name, email and password

        Returns:
            Created user including its generated id

        Raises:
            InvalidQueryOptionsError: If required fields are missing
            IntegrityViolationError: If the email is already registered
        """
        user_in = self._validate(UserCreate, user, "user")
        return await self.user_repo.add_user(user_in.model_dump())

    # Reservations

    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> List[ReservationListing]:
        """Get all reservations for a guest, newest first, up to limit."""
        return await self.reservation_repo.get_all_reservations(guest_id, self._resolve_limit(limit))

    # Properties

    async def get_all_properties(
        self,
        options: Union[PropertySearchOptions, Mapping[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyListing]:
        """
        Get properties matching the options bag, cheapest first.

        Args:
            options: Any of city, owner_id, minimum_price_per_night,
                maximum_price_per_night, minimum_rating
            limit: Number of results to return

        Returns:
            Matching properties with average_rating

        Raises:
            InvalidQueryOptionsError: If options or limit cannot be used
        """
        search = self._validate(PropertySearchOptions, options or {}, "property search options")
        filters = PropertySearchFilters(**search.model_dump())
        return await self.property_repo.get_all_properties(filters, self._resolve_limit(limit))

    async def add_property(self, property_in: Union[PropertyCreate, Mapping[str, Any]]) -> Property:
        """
        Add a property. cost_per_night is given in currency units and stored as cents.

        Raises:
            InvalidQueryOptionsError: If required fields are missing
            IntegrityViolationError: If owner_id does not reference a user
        """
        property_data = self._validate(PropertyCreate, property_in, "property")
        return await self.property_repo.add_property(property_data.to_row())

    # Helpers

    def _resolve_limit(self, limit: Optional[int]) -> int:
        """Apply the default limit and reject values outside 1..max_result_limit."""
        if limit is None:
            return self.settings.default_result_limit

        if isinstance(limit, bool) or not isinstance(limit, int):
            raise InvalidQueryOptionsError(f"limit must be an integer, got {limit!r}")

        if not 1 <= limit <= self.settings.max_result_limit:
            raise InvalidQueryOptionsError(
                f"limit must be between 1 and {self.settings.max_result_limit}, got {limit}"
            )
        return limit

    @staticmethod
    def _validate(schema, data, label: str):
        """Coerce plain data into a schema instance."""
        if isinstance(data, schema):
            return data

        try:
            return schema.model_validate(dict(data))
        except (PydanticValidationError, TypeError, ValueError) as e:
            logger.warning(f"Invalid {label}: {e}")
            raise InvalidQueryOptionsError(f"Invalid {label}: {e}") from e
