"""PropertyReview model — a guest's rating of a stay."""

from sqlalchemy import CheckConstraint, ForeignKey, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lightbnb.database import Base


class PropertyReview(Base):
    """A rating (1-5) left by a guest for a property after a reservation."""

    __tablename__ = "property_reviews"

    id: Mapped[int] = mapped_column(primary_key=True)
    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    reservation_id: Mapped[int] = mapped_column(
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    message: Mapped[str | None] = mapped_column(Text, default=None)

    # Relationships
    property: Mapped["Property"] = relationship(back_populates="reviews")  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = (CheckConstraint("rating BETWEEN 0 AND 5", name="ck_property_reviews_rating"),)

    def __repr__(self) -> str:
        return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"
