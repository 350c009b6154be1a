"""
Test configuration and fixtures for the LightBnB data-access layer.
Provides database fixtures, test data factories, and common test utilities.
"""

import pytest
import uuid
import os
from datetime import date
from decimal import Decimal
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from lightbnb.config import Settings
from lightbnb.database import Database
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.schemas.property import PropertyCreate
from lightbnb.services.query_layer import QueryLayer


# Test database configuration; set TEST_DATABASE_URL to run against PostgreSQL
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    "sqlite+aiosqlite:///:memory:"
)

PASSWORD_HASH = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the test database."""
    return Settings(database_url=TEST_DATABASE_URL, environment="testing")


@pytest.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    """Create a fresh schema for each test."""
    database = Database(test_settings)
    await database.create_tables()
    yield database
    await database.drop_tables()
    await database.close()


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with database.session() as session:
        yield session


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


@pytest.fixture
def query_layer(db_session: AsyncSession, test_settings: Settings) -> QueryLayer:
    """Create a query layer bound to the test session."""
    return QueryLayer(db_session, test_settings)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        email: Optional[str] = None,
        name: str = "Test User",
        password: str = PASSWORD_HASH
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
        }

    @staticmethod
    async def create_user(
        user_repo: UserRepository,
        email: Optional[str] = None,
        name: str = "Test User"
    ) -> User:
        """Create a test user in the database."""
        return await user_repo.add_user(UserFactory.create_user_data(email=email, name=name))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        city: str = "Test City",
        cost_per_night: Decimal = Decimal("100.00"),
        number_of_bedrooms: int = 2
    ) -> dict:
        """Create property data dictionary with cost in currency units."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": "A cozy test property",
            "thumbnail_photo_url": "https://example.com/thumb.jpg",
            "cover_photo_url": "https://example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "street": "123 Test Street",
            "city": city,
            "province": "British Columbia",
            "post_code": "V5K 0A1",
            "country": "Canada",
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": number_of_bedrooms,
        }

    @staticmethod
    async def create_property(
        property_repo: PropertyRepository,
        owner_id: int,
        title: str = "Test Property",
        city: str = "Test City",
        cost_per_night: Decimal = Decimal("100.00")
    ) -> Property:
        """Create a test property in the database."""
        property_data = PropertyFactory.create_property_data(
            owner_id=owner_id,
            title=title,
            city=city,
            cost_per_night=cost_per_night
        )
        return await property_repo.add_property(PropertyCreate(**property_data).to_row())


class ReservationFactory:
    """Factory for creating test reservations."""

    @staticmethod
    async def create_reservation(
        session: AsyncSession,
        property_id: int,
        guest_id: int,
        start_date: date,
        end_date: date
    ) -> Reservation:
        """Create a test reservation in the database."""
        reservation = Reservation(
            property_id=property_id,
            guest_id=guest_id,
            start_date=start_date,
            end_date=end_date
        )
        session.add(reservation)
        await session.commit()
        return reservation


class ReviewFactory:
    """Factory for creating test property reviews."""

    @staticmethod
    async def create_review(
        session: AsyncSession,
        property_id: int,
        guest_id: int,
        rating: int,
        reservation_id: Optional[int] = None
    ) -> PropertyReview:
        """Create a test review in the database."""
        review = PropertyReview(
            property_id=property_id,
            guest_id=guest_id,
            reservation_id=reservation_id,
            rating=rating,
            message="Test review"
        )
        session.add(review)
        await session.commit()
        return review


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a property owner."""
    return await UserFactory.create_user(user_repository, email="owner@test.com", name="Test Owner")


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a guest."""
    return await UserFactory.create_user(user_repository, email="guest@test.com", name="Test Guest")


@pytest.fixture
async def listed_properties(
    db_session: AsyncSession,
    property_repository: PropertyRepository,
    user_repository: UserRepository,
    test_owner: User,
    test_guest: User
) -> dict:
    """
    Create a small catalogue of reviewed properties.

    Vancouver $120 (avg 4.5), Savannah $50 (avg 3), Toronto $200 (avg 4),
    North Vancouver $80 (second owner, avg 5), Calgary $150 (no reviews).
    """
    other_owner = await UserFactory.create_user(user_repository, email="other@test.com", name="Other Owner")

    vancouver = await PropertyFactory.create_property(
        property_repository, test_owner.id, title="Downtown loft", city="Vancouver", cost_per_night=Decimal("120.00")
    )
    savannah = await PropertyFactory.create_property(
        property_repository, test_owner.id, title="Garden house", city="Savannah", cost_per_night=Decimal("50.00")
    )
    toronto = await PropertyFactory.create_property(
        property_repository, test_owner.id, title="Lake view", city="Toronto", cost_per_night=Decimal("200.00")
    )
    north_vancouver = await PropertyFactory.create_property(
        property_repository, other_owner.id, title="Mountain cabin", city="North Vancouver", cost_per_night=Decimal("80.00")
    )
    calgary = await PropertyFactory.create_property(
        property_repository, other_owner.id, title="Prairie flat", city="Calgary", cost_per_night=Decimal("150.00")
    )

    for property_obj, ratings in (
        (vancouver, [5, 4]),
        (savannah, [3]),
        (toronto, [4]),
        (north_vancouver, [5]),
    ):
        for rating in ratings:
            await ReviewFactory.create_review(db_session, property_obj.id, test_guest.id, rating)

    return {
        "owner": test_owner,
        "other_owner": other_owner,
        "vancouver": vancouver,
        "savannah": savannah,
        "toronto": toronto,
        "north_vancouver": north_vancouver,
        "calgary": calgary,
    }


# Utility functions for tests
def assert_user_equal(user1: User, user2: User):
    """Assert that two users are equal."""
    assert user1.id == user2.id
    assert user1.name == user2.name
    assert user1.email == user2.email
    assert user1.password == user2.password
