"""
Hotel Listing Backend — Identity Models (users, roles)
========================================================

What:  ORM models for `users`, `roles` and the `user_roles` association.
Who:   Used by the account service (register/login) and by Alembic.

Roles are reference data: the fixed set below is inserted by migration 003
with hard-coded identifiers and is never created through the API.
"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hotel_listing.database import Base

# ── Fixed Role Set ────────────────────────────────────────────────────────
ROLE_USER = "User"
ROLE_ADMINISTRATOR = "Administrator"

# (id, name, concurrency_stamp), identical to migration 003
DEFAULT_ROLES = (
    (uuid.UUID("63a24af8-4baf-44b2-aa62-1d3ad1c40db0"), ROLE_USER,
     "727a3329-01f1-4820-b0b0-740d443e0ca6"),
    (uuid.UUID("b2ebb26f-9921-4a94-ac56-29ab2744f2d2"), ROLE_ADMINISTRATOR,
     "07d2921d-a241-45db-992a-75f1186fa3b0"),
)


user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Uuid, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class Role(Base):
    """An authorization role. Names are unique and fixed."""

    __tablename__ = "roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    normalized_name: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    concurrency_stamp: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)

    def __repr__(self) -> str:
        return f"<Role(name='{self.name}')>"


class User(Base):
    """
    A registered API user.

    The e-mail is stored twice: as entered, and upper-cased in
    normalized_email, which carries the unique constraint and is used for
    lookups so "A@x.com" and "a@X.com" are the same account.
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(String(256), nullable=False)
    normalized_email: Mapped[str] = mapped_column(String(256), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    roles: Mapped[List[Role]] = relationship(secondary=user_roles, lazy="selectin")

    @property
    def role_names(self) -> List[str]:
        return sorted(role.name for role in self.roles)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
