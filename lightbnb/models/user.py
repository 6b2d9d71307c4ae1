"""User model — guests and property owners."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lightbnb.database import Base


class User(Base):
    """A LightBnB account. Owners and guests share this table."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)  # bcrypt hash

    # Relationships
    properties: Mapped[list["Property"]] = relationship(back_populates="owner")  # type: ignore[name-defined]  # noqa: F821
    reservations: Mapped[list["Reservation"]] = relationship(back_populates="guest")  # type: ignore[name-defined]  # noqa: F821

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
