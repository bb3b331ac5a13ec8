"""
Repository abstract base class and generic implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Type, Any
from sqlmodel import SQLModel, select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.exceptions.handler import NotFound, NoActiveTransaction

T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[T]):
    """Repository interface; defines standard data access API."""

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, None on miss."""
        pass

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Get all entities."""
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Stage entity for insert."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Stage entity state as the new value for its ID."""
        pass

    @abstractmethod
    async def delete(self, entity: T) -> None:
        """Stage entity for removal."""
        pass


class BaseRepository(IRepository[T]):
    """Generic repository implementation with SQLModel CRUD; subclasses can add custom queries.

    Writes only stage changes in the session and require a transaction opened by
    the unit of work. Reads outside a transaction run in a short one of their
    own and hand back detached entities.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = session
        self.model = model

    def _require_transaction(self, operation: str) -> None:
        if not self.session.in_transaction():
            raise NoActiveTransaction(f"{operation} {self.model.__name__}")

    async def _fetch(self, statement, detach: bool = True) -> List[Any]:
        """Run a read statement, inside the active transaction when there is one."""
        if self.session.in_transaction():
            result = await self.session.exec(statement)
            return list(result.all())

        async with self.session.begin():
            result = await self.session.exec(statement)
            rows = list(result.all())
        if detach:
            for row in rows:
                self.session.expunge(row)
        return rows

    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        statement = select(self.model).where(self.model.id == id)
        rows = await self._fetch(statement)
        return rows[0] if rows else None

    async def get_all(self) -> List[T]:
        """Get all entities in the storage engine's natural order."""
        return await self._fetch(select(self.model))

    async def add(self, entity: T) -> T:
        """Stage entity for insert; ID is assigned on flush."""
        self._require_transaction("add")
        self.session.add(entity)
        return entity

    async def update(self, entity: T) -> T:
        """Replace the stored row with the entity state (last write wins)."""
        self._require_transaction("update")
        current = await self.session.get(self.model, entity.id)
        if current is None:
            raise NotFound(f"{self.model.__name__} {entity.id} not found")
        return await self.session.merge(entity)

    async def delete(self, entity: T) -> None:
        """Stage removal of the row with the entity's ID."""
        self._require_transaction("delete")
        target = entity if entity in self.session else await self.session.get(self.model, entity.id)
        if target is None:
            raise NotFound(f"{self.model.__name__} {entity.id} not found")
        await self.session.delete(target)

    async def count(self) -> int:
        """Count all entities."""
        statement = select(func.count(self.model.id))
        rows = await self._fetch(statement, detach=False)
        return rows[0]
