"""
Hotel Listing Backend — Hotel SQLAlchemy Model
================================================

What:  ORM model representing the `hotels` table.
Who:   Used by HotelRepository for CRUD operations and by Alembic.

Invariant: every hotel references an existing country. The foreign key
enforces it in the database; HotelService checks it first so a bad
reference surfaces as a 400 instead of an integrity error.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_listing.database import Base

if TYPE_CHECKING:
    from hotel_listing.models.country import Country


class Hotel(Base):
    """A listed hotel."""

    __tablename__ = "hotels"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(String(150), nullable=False)

    address: Mapped[str] = mapped_column(String(250), nullable=False)

    # 1.0 - 5.0, enforced at the API boundary
    rating: Mapped[float] = mapped_column(Float, nullable=False)

    country_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("countries.id", ondelete="CASCADE"),
        nullable=False,
    )

    country: Mapped["Country"] = relationship(
        back_populates="hotels",
        lazy="raise",
    )

    __table_args__ = (
        Index("idx_hotels_country_id", "country_id"),
    )

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, name='{self.name}', country_id={self.country_id})>"
