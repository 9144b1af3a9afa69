"""
Project repository

Projects are soft-deletable through is_active; the public listing only
returns active rows ordered by sort_order.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.content import InsertProject, UpdateProject
from db.models import Project
from repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):

    def __init__(self, session: AsyncSession):
        super().__init__(session, Project)

    async def list_projects(self, include_inactive: bool = False) -> List[Project]:
        """
        List projects by ascending sort_order

        Args:
            include_inactive: also return rows with is_active = 0
        """
        query = select(Project)
        if not include_inactive:
            query = query.where(Project.is_active == 1)
        query = query.order_by(Project.sort_order.asc(), Project.id.asc())
        return await self._list(query)

    async def create_project(self, payload: InsertProject) -> Project:
        return await self.add(Project(**payload.model_dump()))

    async def update_project(self, project_id: int, payload: UpdateProject) -> Project:
        """
        Apply the fields present in `payload`

        Raises:
            NotFoundError: project does not exist
        """
        return await self.update_by_id(project_id, payload.model_dump(exclude_unset=True))
