"""
Storage

Single entry point over every repository, bound to one AsyncSession.
Route handlers receive a Storage instance through dependency injection
(see api.dependencies.get_storage) instead of importing a shared object.
"""

from typing import Optional, List

from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.auth import InsertUser, InsertAdmin
from api.schemas.content import (
    InsertContact,
    InsertProject,
    UpdateProject,
    InsertTechStack,
    UpdateTechStack,
    InsertBlogPost,
    UpdateBlogPost,
)
from db.models import (
    User,
    Contact,
    Project,
    TechStack,
    BlogPost,
    Admin,
    AdminSession,
)
from repositories.admin_repo import AdminRepository, AdminSessionContext
from repositories.blog_post_repo import BlogPostRepository
from repositories.contact_repo import ContactRepository
from repositories.project_repo import ProjectRepository
from repositories.tech_stack_repo import TechStackRepository
from repositories.user_repo import UserRepository


class Storage:
    """
    Portfolio data access

    Reads return None (or an empty list) when nothing matches. Updates
    raise NotFoundError for unknown ids. Deletes are idempotent.

    Usage:
        async with db_manager.session() as session:
            storage = Storage(session)
            projects = await storage.get_projects()
    """

    def __init__(self, session: AsyncSession):
        self._session = session
        self.users = UserRepository(session)
        self.contacts = ContactRepository(session)
        self.projects = ProjectRepository(session)
        self.tech_stack = TechStackRepository(session)
        self.blog_posts = BlogPostRepository(session)
        self.admins = AdminRepository(session)

    @property
    def session(self) -> AsyncSession:
        return self._session

    # ========================================
    # Users
    # ========================================

    async def get_user(self, user_id: int) -> Optional[User]:
        return await self.users.get_by_id(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self.users.get_by_username(username)

    async def create_user(self, payload: InsertUser) -> User:
        return await self.users.create_user(payload)

    # ========================================
    # Contacts
    # ========================================

    async def create_contact(self, payload: InsertContact) -> Contact:
        return await self.contacts.create_contact(payload)

    async def get_contacts(self) -> List[Contact]:
        """All contact submissions, oldest first"""
        return await self.contacts.list_contacts()

    # ========================================
    # Projects
    # ========================================

    async def get_projects(self) -> List[Project]:
        """Active projects by sort_order"""
        return await self.projects.list_projects()

    async def get_all_projects(self) -> List[Project]:
        """Every project including hidden ones, by sort_order"""
        return await self.projects.list_projects(include_inactive=True)

    async def get_project(self, project_id: int) -> Optional[Project]:
        return await self.projects.get_by_id(project_id)

    async def create_project(self, payload: InsertProject) -> Project:
        return await self.projects.create_project(payload)

    async def update_project(self, project_id: int, payload: UpdateProject) -> Project:
        return await self.projects.update_project(project_id, payload)

    async def delete_project(self, project_id: int) -> None:
        await self.projects.delete_by_id(project_id)

    # ========================================
    # Tech stack
    # ========================================

    async def get_tech_stack(self) -> List[TechStack]:
        """Active tech stack entries by sort_order"""
        return await self.tech_stack.list_tech_stack()

    async def get_all_tech_stack(self) -> List[TechStack]:
        return await self.tech_stack.list_tech_stack(include_inactive=True)

    async def create_tech_stack(self, payload: InsertTechStack) -> TechStack:
        return await self.tech_stack.create_tech_stack(payload)

    async def update_tech_stack(self, tech_id: int, payload: UpdateTechStack) -> TechStack:
        return await self.tech_stack.update_tech_stack(tech_id, payload)

    async def delete_tech_stack(self, tech_id: int) -> None:
        await self.tech_stack.delete_by_id(tech_id)

    # ========================================
    # Blog posts
    # ========================================

    async def get_blog_posts(self) -> List[BlogPost]:
        """Published posts, most recently published first"""
        return await self.blog_posts.list_posts()

    async def get_all_blog_posts(self) -> List[BlogPost]:
        return await self.blog_posts.list_posts(include_unpublished=True)

    async def get_blog_post(self, post_id: int) -> Optional[BlogPost]:
        return await self.blog_posts.get_by_id(post_id)

    async def get_blog_post_by_slug(self, slug: str) -> Optional[BlogPost]:
        return await self.blog_posts.get_by_slug(slug)

    async def create_blog_post(self, payload: InsertBlogPost) -> BlogPost:
        return await self.blog_posts.create_post(payload)

    async def update_blog_post(self, post_id: int, payload: UpdateBlogPost) -> BlogPost:
        return await self.blog_posts.update_post(post_id, payload)

    async def delete_blog_post(self, post_id: int) -> None:
        await self.blog_posts.delete_by_id(post_id)

    # ========================================
    # Admins and sessions
    # ========================================

    async def create_admin(self, payload: InsertAdmin) -> Admin:
        return await self.admins.create_admin(payload)

    async def get_admin_by_username(self, username: str) -> Optional[Admin]:
        return await self.admins.get_by_username(username)

    async def verify_admin_password(self, username: str, password: str) -> Optional[Admin]:
        return await self.admins.verify_credentials(username, password)

    async def create_admin_session(self, admin_id: int) -> AdminSession:
        return await self.admins.create_session(admin_id)

    async def get_admin_session(self, session_id: str) -> Optional[AdminSessionContext]:
        return await self.admins.get_session(session_id)

    async def delete_admin_session(self, session_id: str) -> None:
        await self.admins.delete_session(session_id)

    async def delete_expired_admin_sessions(self) -> int:
        return await self.admins.delete_expired_sessions()
