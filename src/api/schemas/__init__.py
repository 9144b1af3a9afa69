"""
Pydantic Schemas

Insert and partial-update payloads accepted by the storage layer.
"""

from .auth import InsertUser, InsertAdmin
from .content import (
    InsertContact,
    InsertProject,
    UpdateProject,
    InsertTechStack,
    UpdateTechStack,
    InsertBlogPost,
    UpdateBlogPost,
)

__all__ = [
    # Auth schemas
    "InsertUser",
    "InsertAdmin",
    # Content schemas
    "InsertContact",
    "InsertProject",
    "UpdateProject",
    "InsertTechStack",
    "UpdateTechStack",
    "InsertBlogPost",
    "UpdateBlogPost",
]
