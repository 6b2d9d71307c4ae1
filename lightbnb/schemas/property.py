"""Pydantic v2 schemas for property records and search options."""

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Input schemas
# ---------------------------------------------------------------------------


class PropertyCreate(BaseModel):
    """Schema for inserting a new property."""

    owner_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    thumbnail_photo_url: str | None = Field(None, max_length=255)
    cover_photo_url: str | None = Field(None, max_length=255)
    cost_per_night: int = Field(0, ge=0)
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)
    country: str | None = Field(None, max_length=255)
    street: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=255)
    province: str | None = Field(None, max_length=255)
    post_code: str | None = Field(None, max_length=255)
    active: bool = True


class PropertySearchOptions(BaseModel):
    """Optional filters for the property search. Unset or falsy fields are ignored.

    Prices are in the same unit as ``cost_per_night`` (cents) and may be fractional.
    """

    city: str | None = None
    owner_id: int | None = None
    minimum_price_per_night: int | float | None = None
    maximum_price_per_night: int | float | None = None
    minimum_rating: float | None = None


# ---------------------------------------------------------------------------
# Output schemas
# ---------------------------------------------------------------------------


class PropertyRecord(BaseModel):
    """A stored property row."""

    id: int
    owner_id: int
    title: str
    description: str | None = None
    thumbnail_photo_url: str | None = None
    cover_photo_url: str | None = None
    cost_per_night: int
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    country: str | None = None
    street: str | None = None
    city: str | None = None
    province: str | None = None
    post_code: str | None = None
    active: bool

    model_config = ConfigDict(from_attributes=True)


class PropertyListing(PropertyRecord):
    """A property returned by the search, with its mean review rating."""

    average_rating: float | None = None
