"""Reservation model — a guest's stay at a property."""

from datetime import date

from sqlalchemy import Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lightbnb.database import Base


class Reservation(Base):
    """A booking linking a guest to a property for a date range."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(primary_key=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    property_id: Mapped[int] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    guest_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    property: Mapped["Property"] = relationship(back_populates="reservations")  # type: ignore[name-defined]  # noqa: F821
    guest: Mapped["User"] = relationship(back_populates="reservations")  # type: ignore[name-defined]  # noqa: F821

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, property_id={self.property_id}, guest_id={self.guest_id}, "
            f"{self.start_date}..{self.end_date})>"
        )
