"""Property model — listings offered by owners."""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lightbnb.database import Base


class Property(Base):
    """A rentable listing owned by a user."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    thumbnail_photo_url: Mapped[str | None] = mapped_column(String(255), default=None)
    cover_photo_url: Mapped[str | None] = mapped_column(String(255), default=None)
    cost_per_night: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # cents
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    country: Mapped[str | None] = mapped_column(String(255), default=None)
    street: Mapped[str | None] = mapped_column(String(255), default=None)
    city: Mapped[str | None] = mapped_column(String(255), default=None, index=True)
    province: Mapped[str | None] = mapped_column(String(255), default=None)
    post_code: Mapped[str | None] = mapped_column(String(255), default=None)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    owner: Mapped["User"] = relationship(back_populates="properties")  # type: ignore[name-defined]  # noqa: F821
    reservations: Mapped[list["Reservation"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="property", cascade="all, delete-orphan"
    )
    reviews: Mapped[list["PropertyReview"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        back_populates="property", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title={self.title!r}, city={self.city!r})>"
