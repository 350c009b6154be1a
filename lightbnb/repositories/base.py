"""
Base repository class with common operations using async SQLAlchemy.
Holds the injected session and turns driver failures into data-access errors.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.engine import Result
from sqlalchemy.sql import Executable
from lightbnb.database import Base
from lightbnb.utils.exceptions import QueryFailedError, IntegrityViolationError
from typing import TypeVar, Generic, Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing shared query execution and inserts.
    The session is supplied by the caller and never opened or closed here.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def execute(self, statement: Executable, operation: str) -> Result:
        """
        Run a read statement.

        Args:
            statement: SQLAlchemy statement to execute
            operation: Name of the calling operation, used in logs and errors

        Returns:
            The buffered result

        Raises:
            QueryFailedError: If the database fails to run the statement
        """
        try:
            return await self.db.execute(statement)
        except SQLAlchemyError as e:
            logger.error(f"{operation} failed: {e}")
            raise QueryFailedError(operation, e) from e

    async def create(self, obj_in: Dict[str, Any], operation: str) -> ModelType:
        """
        Insert a new row and return it with its generated id.

        Args:
            obj_in: Dictionary of column values for the new row
            operation: Name of the calling operation, used in logs and errors

        Returns:
            Created model instance

        Raises:
            IntegrityViolationError: If a constraint rejects the row
            QueryFailedError: If the insert fails for any other reason
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"{operation} violated a constraint: {e}")
            raise IntegrityViolationError(operation, e) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"{operation} failed: {e}")
            raise QueryFailedError(operation, e) from e
