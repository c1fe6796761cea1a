# Models package init
"""
Hotel Listing Backend — ORM Models
====================================

Importing this package registers every table with Base.metadata, which is
what Alembic's env.py and the test suite's create_all() rely on.
"""

from hotel_listing.models.country import Country
from hotel_listing.models.hotel import Hotel
from hotel_listing.models.identity import (
    DEFAULT_ROLES,
    ROLE_ADMINISTRATOR,
    ROLE_USER,
    Role,
    User,
    user_roles,
)

__all__ = [
    "Country",
    "Hotel",
    "Role",
    "User",
    "user_roles",
    "DEFAULT_ROLES",
    "ROLE_ADMINISTRATOR",
    "ROLE_USER",
]
