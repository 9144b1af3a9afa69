"""
Auth-related Pydantic schemas

Insert payloads for users and admin accounts. Passwords arrive in
plaintext here and are hashed by the repository before storage.
"""

from typing import Optional
from pydantic import BaseModel, Field


class InsertUser(BaseModel):
    """New site user; password is expected to be hashed already"""
    username: str = Field(..., min_length=2, max_length=64, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password hash")


class InsertAdmin(BaseModel):
    """New admin account"""
    username: str = Field(..., min_length=2, max_length=64, description="Username")
    password: str = Field(..., min_length=4, max_length=72, description="Plaintext password")
    email: Optional[str] = Field(None, max_length=256, description="Contact email")
    is_active: int = Field(1, ge=0, le=1, description="1 = may log in")
