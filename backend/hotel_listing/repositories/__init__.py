# Repositories package init
"""
Hotel Listing Backend — Data Access Layer
===========================================

Each repository encapsulates the queries for one entity and never commits;
UnitOfWork groups them over one AsyncSession and owns the commit.
"""

from hotel_listing.repositories.base import Repository, SqlAlchemyRepository
from hotel_listing.repositories.catalog import CountryRepository, HotelRepository
from hotel_listing.repositories.identity import RoleRepository, UserRepository
from hotel_listing.repositories.unit_of_work import UnitOfWork, get_unit_of_work

__all__ = [
    "Repository",
    "SqlAlchemyRepository",
    "HotelRepository",
    "CountryRepository",
    "UserRepository",
    "RoleRepository",
    "UnitOfWork",
    "get_unit_of_work",
]
