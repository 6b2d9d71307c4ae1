"""Shared test configuration and fixtures.

Each test gets its own SQLite database file (via aiosqlite) with the full
schema created, wrapped in a ``Store`` exactly as production code uses it.
"""

import uuid
from collections.abc import AsyncGenerator
from datetime import date, timedelta

import pytest
import pytest_asyncio

from lightbnb.auth.passwords import hash_password
from lightbnb.config import Settings
from lightbnb.database import Store
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.models.user import User


@pytest_asyncio.fixture
async def store(tmp_path) -> AsyncGenerator[Store, None]:
    """Yield a store over a fresh, empty database."""
    settings = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'lightbnb_test.db'}")
    store = Store.from_settings(settings)
    await store.create_all()
    try:
        yield store
    finally:
        await store.dispose()


# ---------------------------------------------------------------------------
# Convenience fixtures: users, properties, reservations, reviews
# ---------------------------------------------------------------------------


async def create_user(store: Store, name: str = "Test User") -> User:
    """Insert a user directly through the ORM."""
    unique = uuid.uuid4().hex[:8]
    async with store.session() as session:
        user = User(name=name, email=f"user-{unique}@test.com", password=hash_password("password"))
        session.add(user)
        await session.flush()
    return user


async def create_property(store: Store, owner_id: int, **fields) -> Property:
    """Insert a property directly through the ORM."""
    values = {
        "title": "Test Property",
        "cost_per_night": 10000,
        "city": "Vancouver",
        "country": "Canada",
        "province": "British Columbia",
    }
    values.update(fields)
    async with store.session() as session:
        prop = Property(owner_id=owner_id, **values)
        session.add(prop)
        await session.flush()
    return prop


async def create_stay(
    store: Store,
    guest_id: int,
    property_id: int,
    start_date: date,
    nights: int = 3,
    rating: int | None = None,
) -> Reservation:
    """Insert a reservation and, when ``rating`` is given, a review for it."""
    async with store.session() as session:
        reservation = Reservation(
            guest_id=guest_id,
            property_id=property_id,
            start_date=start_date,
            end_date=start_date + timedelta(days=nights),
        )
        session.add(reservation)
        await session.flush()
        if rating is not None:
            session.add(
                PropertyReview(
                    guest_id=guest_id,
                    property_id=property_id,
                    reservation_id=reservation.id,
                    rating=rating,
                    message="review",
                )
            )
    return reservation


@pytest_asyncio.fixture
async def owner(store: Store) -> User:
    return await create_user(store, name="Owner")


@pytest_asyncio.fixture
async def guest(store: Store) -> User:
    return await create_user(store, name="Guest")


@pytest.fixture
def make_property(store: Store):
    """Return ``async (owner_id, **fields) -> Property`` bound to the test store."""

    async def _make(owner_id: int, **fields) -> Property:
        return await create_property(store, owner_id, **fields)

    return _make


@pytest.fixture
def make_stay(store: Store):
    """Return ``async (guest_id, property_id, start_date, nights=3, rating=None)`` bound to the test store."""

    async def _make(guest_id: int, property_id: int, start_date: date, nights: int = 3, rating: int | None = None):
        return await create_stay(store, guest_id, property_id, start_date, nights, rating)

    return _make
