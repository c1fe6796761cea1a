"""Unit of Work — one session, one commit point, every repository.

Invariants:
    - All repositories of a UnitOfWork share its AsyncSession
    - Nothing reaches the database permanently until save() is awaited
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_listing.database import get_db_session
from hotel_listing.repositories.catalog import CountryRepository, HotelRepository
from hotel_listing.repositories.identity import RoleRepository, UserRepository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Aggregates the repositories and exposes a single save()."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self._hotels: HotelRepository | None = None
        self._countries: CountryRepository | None = None
        self._users: UserRepository | None = None
        self._roles: RoleRepository | None = None

    @property
    def hotels(self) -> HotelRepository:
        if self._hotels is None:
            self._hotels = HotelRepository(self.session)
        return self._hotels

    @property
    def countries(self) -> CountryRepository:
        if self._countries is None:
            self._countries = CountryRepository(self.session)
        return self._countries

    @property
    def users(self) -> UserRepository:
        if self._users is None:
            self._users = UserRepository(self.session)
        return self._users

    @property
    def roles(self) -> RoleRepository:
        if self._roles is None:
            self._roles = RoleRepository(self.session)
        return self._roles

    async def save(self) -> None:
        """Commits every pending change made through the repositories."""
        await self.session.commit()
        logger.debug("Unit of work committed")

    async def rollback(self) -> None:
        await self.session.rollback()


async def get_unit_of_work(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UnitOfWork, None]:
    """FastAPI dependency: a UnitOfWork over the request's session."""
    yield UnitOfWork(session)
