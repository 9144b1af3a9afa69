"""
Repository layer

Data access for the portfolio site. All queries go through the
SQLAlchemy ORM with bound parameters.
"""

from repositories.base import BaseRepository, NotFoundError
from repositories.user_repo import UserRepository
from repositories.contact_repo import ContactRepository
from repositories.project_repo import ProjectRepository
from repositories.tech_stack_repo import TechStackRepository
from repositories.blog_post_repo import BlogPostRepository
from repositories.admin_repo import AdminRepository, AdminSessionContext
from repositories.storage import Storage

__all__ = [
    "BaseRepository",
    "NotFoundError",
    "UserRepository",
    "ContactRepository",
    "ProjectRepository",
    "TechStackRepository",
    "BlogPostRepository",
    "AdminRepository",
    "AdminSessionContext",
    "Storage",
]
