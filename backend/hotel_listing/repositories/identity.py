"""Concrete repositories for users and roles."""

from typing import Iterable, List, Optional

from sqlalchemy import select

from hotel_listing.models.identity import Role, User
from hotel_listing.repositories.base import SqlAlchemyRepository


def normalize(value: str) -> str:
    """Upper-cases an e-mail or role name for case-insensitive lookups."""
    return value.strip().upper()


class UserRepository(SqlAlchemyRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.normalized_email == normalize(email))
        )
        return result.scalar_one_or_none()


class RoleRepository(SqlAlchemyRepository[Role]):
    model = Role

    async def get_by_names(self, names: Iterable[str]) -> List[Role]:
        """Roles whose normalized name matches; unknown names are skipped."""
        wanted = {normalize(name) for name in names}
        if not wanted:
            return []
        result = await self.session.execute(
            select(Role).where(Role.normalized_name.in_(wanted)).order_by(Role.name)
        )
        return list(result.scalars().all())
