"""Concrete repositories for the hotel catalog (hotels and countries)."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from hotel_listing.models.country import Country
from hotel_listing.models.hotel import Hotel
from hotel_listing.repositories.base import SqlAlchemyRepository


class HotelRepository(SqlAlchemyRepository[Hotel]):
    model = Hotel

    async def get_with_country(self, hotel_id: int) -> Optional[Hotel]:
        """Single hotel with its owning country eagerly loaded."""
        result = await self.session.execute(
            select(Hotel)
            .where(Hotel.id == hotel_id)
            .options(selectinload(Hotel.country))
        )
        return result.scalar_one_or_none()


class CountryRepository(SqlAlchemyRepository[Country]):
    model = Country

    async def get_with_hotels(self, country_id: int) -> Optional[Country]:
        """Single country with its hotels eagerly loaded."""
        result = await self.session.execute(
            select(Country)
            .where(Country.id == country_id)
            .options(selectinload(Country.hotels))
        )
        return result.scalar_one_or_none()

    async def exists(self, country_id: int) -> bool:
        result = await self.session.execute(
            select(Country.id).where(Country.id == country_id)
        )
        return result.scalar_one_or_none() is not None
