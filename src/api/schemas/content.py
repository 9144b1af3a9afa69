"""
Content payload schemas

Insert payloads for contacts, projects, tech stack entries and blog posts,
and the partial-update payloads used to patch them.

Update models declare every field optional. Pydantic records which fields
the caller actually supplied, and `model_dump(exclude_unset=True)` returns
only those, so an omitted field leaves the stored value alone. An explicit
None clears a nullable column and is rejected for required ones.
"""

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field, field_validator


def _reject_none(value):
    """Required columns may be omitted from a patch but never set to None"""
    if value is None:
        raise ValueError("field cannot be null")
    return value


# ============================================================
# Contacts
# ============================================================

class InsertContact(BaseModel):
    """Contact form submission"""
    name: str = Field(..., min_length=1, max_length=128, description="Sender name")
    email: str = Field(..., min_length=3, max_length=256, description="Sender email")
    subject: Optional[str] = Field(None, max_length=256, description="Subject line")
    message: str = Field(..., min_length=1, description="Message body")


# ============================================================
# Projects
# ============================================================

class InsertProject(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(...)
    image_url: Optional[str] = Field(None, max_length=512)
    technologies: List[str] = Field(default_factory=list, description="Technologies used")
    github_url: Optional[str] = Field(None, max_length=512)
    live_url: Optional[str] = Field(None, max_length=512)
    category: Optional[str] = Field(None, max_length=64)
    is_active: int = Field(1, ge=0, le=1, description="1 = shown, 0 = hidden")
    sort_order: int = Field(0, description="Ascending display order")


class UpdateProject(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=256)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=512)
    technologies: Optional[List[str]] = None
    github_url: Optional[str] = Field(None, max_length=512)
    live_url: Optional[str] = Field(None, max_length=512)
    category: Optional[str] = Field(None, max_length=64)
    is_active: Optional[int] = Field(None, ge=0, le=1)
    sort_order: Optional[int] = None

    @field_validator("title", "description", "technologies", "is_active", "sort_order", mode="before")
    @classmethod
    def reject_null(cls, value):
        return _reject_none(value)


# ============================================================
# Tech stack
# ============================================================

class InsertTechStack(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    category: str = Field(..., min_length=1, max_length=64, description="e.g. frontend, backend, tools")
    icon: Optional[str] = Field(None, max_length=256)
    proficiency: Optional[int] = Field(None, ge=0, le=100)
    is_active: int = Field(1, ge=0, le=1)
    sort_order: int = 0


class UpdateTechStack(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=128)
    category: Optional[str] = Field(None, min_length=1, max_length=64)
    icon: Optional[str] = Field(None, max_length=256)
    proficiency: Optional[int] = Field(None, ge=0, le=100)
    is_active: Optional[int] = Field(None, ge=0, le=1)
    sort_order: Optional[int] = None

    @field_validator("name", "category", "is_active", "sort_order", mode="before")
    @classmethod
    def reject_null(cls, value):
        return _reject_none(value)


# ============================================================
# Blog posts
# ============================================================

class InsertBlogPost(BaseModel):
    title: str = Field(..., min_length=1, max_length=256)
    slug: str = Field(..., min_length=1, max_length=256, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    excerpt: Optional[str] = None
    content: str = Field(...)
    cover_image: Optional[str] = Field(None, max_length=512)
    tags: List[str] = Field(default_factory=list)
    is_published: int = Field(0, ge=0, le=1)
    published_at: Optional[datetime] = None


class UpdateBlogPost(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=256)
    slug: Optional[str] = Field(None, min_length=1, max_length=256, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    excerpt: Optional[str] = None
    content: Optional[str] = None
    cover_image: Optional[str] = Field(None, max_length=512)
    tags: Optional[List[str]] = None
    is_published: Optional[int] = Field(None, ge=0, le=1)
    published_at: Optional[datetime] = None

    @field_validator("title", "slug", "content", "tags", "is_published", mode="before")
    @classmethod
    def reject_null(cls, value):
        return _reject_none(value)
