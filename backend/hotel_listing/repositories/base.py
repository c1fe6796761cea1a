"""Repository contract and its SQLAlchemy implementation.

Invariants:
    - Repositories never commit; UnitOfWork.save() is the only commit point
    - Relationships are loaded only when a method says so (models use lazy="raise")
    - Query shape lives in named methods on the concrete repositories, not in
      caller-supplied predicates or include callbacks

Design Decisions:
    - Protocol for the contract, generic base class for the shared CRUD
      plumbing, one subclass per entity for entity-specific queries
"""

from typing import Any, Generic, List, Optional, Protocol, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_listing.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Protocol[ModelT]):
    """Structural contract for per-entity data access."""
    async def get(self, entity_id: Any) -> Optional[ModelT]: ...
    async def get_all(self) -> List[ModelT]: ...
    async def insert(self, entity: ModelT) -> ModelT: ...
    async def update(self, entity: ModelT) -> ModelT: ...
    async def delete(self, entity_id: Any) -> bool: ...


class SqlAlchemyRepository(Generic[ModelT]):
    """
    CRUD over one mapped class through an AsyncSession.

    Subclasses set `model` and add their own query methods.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, entity_id: Any) -> Optional[ModelT]:
        """Primary-key lookup; None when the row does not exist."""
        return await self.session.get(self.model, entity_id)

    async def get_all(self) -> List[ModelT]:
        result = await self.session.execute(
            select(self.model).order_by(*self._default_order())
        )
        return list(result.scalars().all())

    async def get_page(self, offset: int, limit: int) -> List[ModelT]:
        result = await self.session.execute(
            select(self.model)
            .order_by(*self._default_order())
            .offset(offset)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(self.model))
        return result.scalar_one()

    async def insert(self, entity: ModelT) -> ModelT:
        """Adds the entity and flushes so the store-assigned id is populated."""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def insert_range(self, entities: Sequence[ModelT]) -> List[ModelT]:
        self.session.add_all(entities)
        await self.session.flush()
        return list(entities)

    async def update(self, entity: ModelT) -> ModelT:
        # Attached entities are already tracked; merge covers detached ones.
        if entity not in self.session:
            entity = await self.session.merge(entity)
        return entity

    async def delete(self, entity_id: Any) -> bool:
        """Deletes by primary key. Returns False when nothing matched."""
        entity = await self.get(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        return True

    def _default_order(self) -> tuple:
        return tuple(self.model.__mapper__.primary_key)
