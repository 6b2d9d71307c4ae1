"""Create the schema and seed the database with sample LightBnB data.

Run from the repository root:
    python -m scripts.seed_data

The target database is taken from DATABASE_URL (see ``lightbnb.config``).
"""

import asyncio
import logging
import sys
from datetime import date, timedelta
from pathlib import Path

# Add repository root to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import delete, select

from lightbnb.config import get_settings
from lightbnb.database import Store
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.models.user import User
from lightbnb.schemas.property import PropertyCreate
from lightbnb.services.property_service import add_property
from lightbnb.services.user_service import register_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

DEMO_PASSWORD = "password"

USERS = [
    {"name": "Eva Stanley", "email": "sebastianguerra@ymail.com"},
    {"name": "Louisa Meyer", "email": "jacksonrose@hotmail.com"},
    {"name": "Dominic Parks", "email": "victoriablackwell@outlook.com"},
    {"name": "Sue Luna", "email": "jasonvincent@gmx.com"},
]

# cost_per_night is in cents
PROPERTIES = [
    {
        "owner": 0,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?auto=compress&cs=tinysrgb&h=350",
        "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
        "cost_per_night": 93061,
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
        "country": "Canada",
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
    },
    {
        "owner": 0,
        "title": "Blank corner",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2121121/pexels-photo-2121121.jpeg?auto=compress&cs=tinysrgb&h=350",
        "cover_photo_url": "https://images.pexels.com/photos/2121121/pexels-photo-2121121.jpeg",
        "cost_per_night": 85234,
        "parking_spaces": 6,
        "number_of_bathrooms": 6,
        "number_of_bedrooms": 7,
        "country": "Canada",
        "street": "651 Nami Road",
        "city": "Bohbatev",
        "province": "Alberta",
        "post_code": "83680",
    },
    {
        "owner": 1,
        "title": "Habit mix",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2080018/pexels-photo-2080018.jpeg?auto=compress&cs=tinysrgb&h=350",
        "cover_photo_url": "https://images.pexels.com/photos/2080018/pexels-photo-2080018.jpeg",
        "cost_per_night": 46058,
        "parking_spaces": 0,
        "number_of_bathrooms": 5,
        "number_of_bedrooms": 6,
        "country": "Canada",
        "street": "1650 Hejto Center",
        "city": "North Vancouver",
        "province": "British Columbia",
        "post_code": "4488",
    },
    {
        "owner": 2,
        "title": "Headed know",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/1029599/pexels-photo-1029599.jpeg?auto=compress&cs=tinysrgb&h=350",
        "cover_photo_url": "https://images.pexels.com/photos/1029599/pexels-photo-1029599.jpeg",
        "cost_per_night": 8260,
        "parking_spaces": 0,
        "number_of_bathrooms": 5,
        "number_of_bedrooms": 5,
        "country": "Canada",
        "street": "513 Powov Grove",
        "city": "Vancouver",
        "province": "British Columbia",
        "post_code": "38051",
    },
]

# (guest index, property index, start offset in days from today, nights, rating)
RESERVATIONS = [
    (3, 0, -400, 7, 3),
    (3, 1, -200, 3, 4),
    (1, 3, -60, 5, 5),
    (3, 3, -30, 2, 4),
    (0, 2, 30, 4, None),
]


# ---------------------------------------------------------------------------
# Main seed function
# ---------------------------------------------------------------------------


async def _clear(store: Store) -> None:
    """Delete any rows left by a previous seed run."""
    emails = [u["email"] for u in USERS]
    async with store.session() as session:
        result = await session.execute(select(User.id).where(User.email.in_(emails)))
        user_ids = list(result.scalars().all())
        if not user_ids:
            return

        print(f"⚠️  Found {len(user_ids)} seeded users. Deleting and re-seeding...")
        property_ids = select(Property.id).where(Property.owner_id.in_(user_ids))
        await session.execute(delete(PropertyReview).where(PropertyReview.property_id.in_(property_ids)))
        await session.execute(delete(Reservation).where(Reservation.property_id.in_(property_ids)))
        await session.execute(delete(PropertyReview).where(PropertyReview.guest_id.in_(user_ids)))
        await session.execute(delete(Reservation).where(Reservation.guest_id.in_(user_ids)))
        await session.execute(delete(Property).where(Property.owner_id.in_(user_ids)))
        await session.execute(delete(User).where(User.id.in_(user_ids)))


async def seed(store: Store) -> None:
    """Populate the database with sample users, listings, reservations, and reviews.

    Idempotent: previously seeded users and everything hanging off them are
    deleted first.
    """
    await store.create_all()
    await _clear(store)

    # ------------------------------------------------------------------
    # 1. Users
    # ------------------------------------------------------------------
    users = [await register_user(store, u["name"], u["email"], DEMO_PASSWORD) for u in USERS]
    print(f"✅ Created {len(users)} users (password: {DEMO_PASSWORD!r})")

    # ------------------------------------------------------------------
    # 2. Properties
    # ------------------------------------------------------------------
    properties = []
    for prop_data in PROPERTIES:
        data = dict(prop_data)
        owner = users[data.pop("owner")]
        prop = await add_property(store, PropertyCreate(owner_id=owner.id, **data))
        properties.append(prop)
        print(f"   🏠 {prop.title} — {prop.city} (${prop.cost_per_night / 100:.2f}/night)")

    # ------------------------------------------------------------------
    # 3. Reservations and reviews
    # ------------------------------------------------------------------
    today = date.today()
    review_count = 0
    async with store.session() as session:
        for guest_idx, prop_idx, offset, nights, rating in RESERVATIONS:
            start = today + timedelta(days=offset)
            reservation = Reservation(
                start_date=start,
                end_date=start + timedelta(days=nights),
                property_id=properties[prop_idx].id,
                guest_id=users[guest_idx].id,
            )
            session.add(reservation)
            await session.flush()

            if rating is not None:
                session.add(
                    PropertyReview(
                        guest_id=reservation.guest_id,
                        property_id=reservation.property_id,
                        reservation_id=reservation.id,
                        rating=rating,
                        message="messages",
                    )
                )
                review_count += 1

    print(f"✅ Created {len(RESERVATIONS)} reservations and {review_count} reviews")


async def main() -> None:
    settings = get_settings()
    store = Store.from_settings(settings)
    try:
        print(f"Seeding {settings.app_name} database...")
        await seed(store)
        print("🎉 Done!")
    finally:
        await store.dispose()


if __name__ == "__main__":
    asyncio.run(main())
