"""
Blog post repository

Provides slug lookups, the published listing and partial updates that
always refresh updated_at.
"""

from datetime import datetime
from typing import Optional, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.content import InsertBlogPost, UpdateBlogPost
from db.models import BlogPost
from repositories.base import BaseRepository


class BlogPostRepository(BaseRepository[BlogPost]):

    def __init__(self, session: AsyncSession):
        super().__init__(session, BlogPost)

    async def get_by_slug(self, slug: str) -> Optional[BlogPost]:
        result = await self._session.execute(
            select(BlogPost).where(BlogPost.slug == slug)
        )
        return result.scalar_one_or_none()

    async def list_posts(self, include_unpublished: bool = False) -> List[BlogPost]:
        """
        List posts, newest publication first

        Args:
            include_unpublished: also return rows with is_published = 0

        Returns:
            posts ordered by published_at descending; posts without a
            publication date sort last
        """
        query = select(BlogPost)
        if not include_unpublished:
            query = query.where(BlogPost.is_published == 1)
        query = query.order_by(
            BlogPost.published_at.desc().nulls_last(),
            BlogPost.id.desc(),
        )
        return await self._list(query)

    async def create_post(self, payload: InsertBlogPost) -> BlogPost:
        return await self.add(BlogPost(**payload.model_dump()))

    async def update_post(self, post_id: int, payload: UpdateBlogPost) -> BlogPost:
        """
        Apply the fields present in `payload` and stamp updated_at

        Raises:
            NotFoundError: post does not exist
        """
        values = payload.model_dump(exclude_unset=True)
        values["updated_at"] = datetime.now()
        return await self.update_by_id(post_id, values)
