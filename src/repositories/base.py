"""
Repository base class

Shared CRUD helpers for all repositories. Repositories only flush;
committing is the job of the session owner (DatabaseManager.session()).
"""

from abc import ABC
from typing import TypeVar, Generic, Optional, List, Any, Dict, Type

from sqlalchemy.ext.asyncio import AsyncSession

from db.models import Base


T = TypeVar("T", bound=Base)


class BaseRepository(ABC, Generic[T]):
    """
    Repository base class

    Usage:
        class ProjectRepository(BaseRepository[Project]):
            def __init__(self, session: AsyncSession):
                super().__init__(session, Project)
    """

    def __init__(self, session: AsyncSession, model_class: Type[T]):
        """
        Args:
            session: async session, injected by the caller
            model_class: ORM model handled by this repository
        """
        self._session = session
        self._model_class = model_class

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def model_class(self) -> Type[T]:
        return self._model_class

    # ========================================
    # Generic CRUD
    # ========================================

    async def get_by_id(self, id: Any) -> Optional[T]:
        """
        Fetch an entity by primary key

        Returns:
            the entity, or None when absent
        """
        return await self._session.get(self._model_class, id)

    async def add(self, entity: T) -> T:
        """
        Insert a new entity

        Returns:
            the entity with generated columns (id, defaults) loaded
        """
        self._session.add(entity)
        await self._session.flush()
        await self._session.refresh(entity)
        return entity

    async def update(self, entity: T) -> T:
        """
        Flush pending changes on an entity already in the session

        Returns:
            the refreshed entity
        """
        await self._session.flush()
        await self._session.refresh(entity)
        return entity

    async def update_by_id(self, id: Any, values: Dict[str, Any]) -> T:
        """
        Apply a set of column values to the entity with the given id

        Args:
            id: primary key
            values: column name -> new value; only these columns change

        Returns:
            the updated entity

        Raises:
            NotFoundError: no entity with that id
        """
        entity = await self.get_by_id(id)
        if entity is None:
            raise NotFoundError(self._model_class.__name__, id)

        for field, value in values.items():
            setattr(entity, field, value)

        return await self.update(entity)

    async def delete(self, entity: T) -> None:
        await self._session.delete(entity)
        await self._session.flush()

    async def delete_by_id(self, id: Any) -> bool:
        """
        Delete an entity by primary key

        Returns:
            True if a row was removed, False if it did not exist
        """
        entity = await self.get_by_id(id)
        if entity:
            await self.delete(entity)
            return True
        return False

    async def _list(self, query) -> List[T]:
        result = await self._session.execute(query)
        return list(result.scalars().all())


class NotFoundError(Exception):
    """Entity does not exist"""
    def __init__(self, entity_type: str, entity_id: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")
