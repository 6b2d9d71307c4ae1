"""Reservation service — a guest's past stays."""

from sqlalchemy import func, select

from lightbnb.database import Store
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertyRecord
from lightbnb.schemas.reservation import ReservationListing, ReservationRecord
from lightbnb.services.property_search import DEFAULT_LIMIT, check_limit


async def get_all_reservations(store: Store, guest_id: int, limit: int = DEFAULT_LIMIT) -> list[ReservationListing]:
    """Return the guest's reservations that have already ended, earliest first.

    Each row carries the reserved property and its average review rating.
    """
    check_limit(limit)

    average_rating = func.avg(PropertyReview.rating).label("average_rating")
    query = (
        select(Reservation, Property, average_rating)
        .join(Property, Reservation.property_id == Property.id)
        .outerjoin(PropertyReview, PropertyReview.property_id == Property.id)
        .where(
            Reservation.guest_id == guest_id,
            Reservation.end_date < func.current_date(),
        )
        .group_by(Property.id, Reservation.id)
        .order_by(Reservation.start_date)
        .limit(limit)
    )

    async with store.session() as session:
        result = await session.execute(query)
        rows = result.all()

    return [
        ReservationListing(
            reservation=ReservationRecord.model_validate(reservation),
            property=PropertyRecord.model_validate(prop),
            average_rating=avg,
        )
        for reservation, prop, avg in rows
    ]
