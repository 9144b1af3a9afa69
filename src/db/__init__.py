"""
Database layer

Connection management and ORM model definitions.
"""

from db.database import DatabaseManager, create_test_database_manager
from db.models import (
    Base,
    User,
    Contact,
    Project,
    TechStack,
    BlogPost,
    Admin,
    AdminSession,
)

__all__ = [
    # Database Manager
    "DatabaseManager",
    "create_test_database_manager",
    # ORM Models
    "Base",
    "User",
    "Contact",
    "Project",
    "TechStack",
    "BlogPost",
    "Admin",
    "AdminSession",
]
