"""
Contact repository

Contact form submissions. Rows are appended and listed, never edited.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.content import InsertContact
from db.models import Contact
from repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):

    def __init__(self, session: AsyncSession):
        super().__init__(session, Contact)

    async def create_contact(self, payload: InsertContact) -> Contact:
        return await self.add(Contact(**payload.model_dump()))

    async def list_contacts(self) -> List[Contact]:
        """All submissions, oldest first"""
        return await self._list(
            select(Contact).order_by(Contact.created_at.asc(), Contact.id.asc())
        )
