"""
Hotel Listing Backend — Country SQLAlchemy Model
==================================================

What:  ORM model representing the `countries` table.
Who:   Used by CountryRepository, the deprecated v2 country route and Alembic.

A country owns its hotels. Deletion cascades at the database level
(ON DELETE CASCADE on hotels.country_id); the ORM side is passive so the
async session never has to lazy-load the collection just to delete it.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_listing.database import Base

if TYPE_CHECKING:
    from hotel_listing.models.hotel import Hotel


class Country(Base):
    """A country that hotels are listed under."""

    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Display name, e.g. Jamaica",
    )

    # ISO 3166-1 alpha-2 style code
    short_code: Mapped[str] = mapped_column(
        String(2),
        nullable=False,
        comment="Two-letter country code",
    )

    # ISO 3166-1 alpha-3 style code
    long_code: Mapped[Optional[str]] = mapped_column(
        String(3),
        nullable=True,
        default=None,
        comment="Three-letter country code",
    )

    # lazy="raise": collections must be loaded explicitly (selectinload)
    hotels: Mapped[List["Hotel"]] = relationship(
        back_populates="country",
        cascade="save-update, merge, delete",
        passive_deletes=True,
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Country(id={self.id}, short_code='{self.short_code}', name='{self.name}')>"
