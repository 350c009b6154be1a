"""
User repository for account lookups and registration.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from typing import Optional, List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user lookups by email or id and for inserting users.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Get a single user by exact email match.

        Args:
            email: Email address to search for

        Returns:
            User instance if found, None otherwise
        """
        query = select(User).where(User.email == email)

        result = await self.execute(query, "get_user_with_email")
        user = result.scalars().first()

        if user:
            logger.debug(f"Retrieved user by email: {email}")
        else:
            logger.debug(f"User with email {email} not found")

        return user

    async def get_user_with_id(self, user_id: int) -> List[User]:
        """
        Get users matching an id.

        Returns every matching row as a list, unlike get_user_with_email which
        returns a single row. Callers expecting one user take the first element.

        Args:
            user_id: Primary key to search for

        Returns:
            List of matching users, empty if none
        """
        query = select(User).where(User.id == user_id)

        result = await self.execute(query, "get_user_with_id")
        users = list(result.scalars().all())

        logger.debug(f"Retrieved {len(users)} users with id {user_id}")
        return users

    async def add_user(self, user_data: Dict[str, Any]) -> User:
        """
        Insert a new user.

        Args:
            user_data: Dictionary with name, email and password

        Returns:
            Created user including its generated id

        Raises:
            IntegrityViolationError: If the email is already registered
            QueryFailedError: If the insert fails
        """
        create_data = {
            "name": user_data["name"],
            "email": user_data["email"],
            "password": user_data["password"],
        }

        created_user = await self.create(create_data, "add_user")
        logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
        return created_user
