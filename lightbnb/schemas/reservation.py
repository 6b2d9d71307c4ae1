"""Pydantic v2 schemas for reservation records."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from lightbnb.schemas.property import PropertyRecord


class ReservationRecord(BaseModel):
    """A stored reservation row."""

    id: int
    start_date: date
    end_date: date
    property_id: int
    guest_id: int

    model_config = ConfigDict(from_attributes=True)


class ReservationListing(BaseModel):
    """A past reservation joined with its property and the property's mean rating."""

    reservation: ReservationRecord
    property: PropertyRecord
    average_rating: float | None = None
