"""
Tech stack repository
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.content import InsertTechStack, UpdateTechStack
from db.models import TechStack
from repositories.base import BaseRepository


class TechStackRepository(BaseRepository[TechStack]):

    def __init__(self, session: AsyncSession):
        super().__init__(session, TechStack)

    async def list_tech_stack(self, include_inactive: bool = False) -> List[TechStack]:
        """Entries by ascending sort_order, active only unless asked otherwise"""
        query = select(TechStack)
        if not include_inactive:
            query = query.where(TechStack.is_active == 1)
        query = query.order_by(TechStack.sort_order.asc(), TechStack.id.asc())
        return await self._list(query)

    async def create_tech_stack(self, payload: InsertTechStack) -> TechStack:
        return await self.add(TechStack(**payload.model_dump()))

    async def update_tech_stack(self, tech_id: int, payload: UpdateTechStack) -> TechStack:
        return await self.update_by_id(tech_id, payload.model_dump(exclude_unset=True))
