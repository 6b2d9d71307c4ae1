"""Pydantic v2 schemas for user records."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Fields required to insert a user. ``password`` is already hashed."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)


class UserRecord(BaseModel):
    """A stored user row."""

    id: int
    name: str
    email: str
    password: str

    model_config = ConfigDict(from_attributes=True)
