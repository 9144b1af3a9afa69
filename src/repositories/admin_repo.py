"""
Admin Repository

Admin accounts, credential checks and admin login sessions.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.auth import InsertAdmin
from api.services.auth import (
    hash_password,
    verify_password,
    new_session_id,
    session_expiry,
)
from db.models import Admin, AdminSession
from repositories.base import BaseRepository
from utils.logger import get_logger

logger = get_logger("Portfolio")


@dataclass
class AdminSessionContext:
    """A live session together with the admin that owns it"""
    admin: Admin
    session: AdminSession


class AdminRepository(BaseRepository[Admin]):
    """
    Admin Repository

    Responsibilities:
    - Admin account creation (password hashed before insert)
    - Credential verification
    - Session issue, lookup and revocation
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Admin)

    # ========================================
    # Accounts
    # ========================================

    async def create_admin(self, payload: InsertAdmin) -> Admin:
        """
        Create an admin account

        The plaintext password in `payload` is replaced by its bcrypt hash;
        it is never written to the database.

        Raises:
            IntegrityError: username already taken
        """
        values = payload.model_dump()
        values["password"] = hash_password(payload.password)
        admin = await self.add(Admin(**values))
        logger.info(f"Admin created: {admin.username} (id={admin.id})")
        return admin

    async def get_by_username(self, username: str) -> Optional[Admin]:
        result = await self._session.execute(
            select(Admin).where(Admin.username == username)
        )
        return result.scalar_one_or_none()

    async def verify_credentials(self, username: str, password: str) -> Optional[Admin]:
        """
        Check admin credentials

        Unknown usernames, inactive accounts and wrong passwords all yield
        None so callers cannot tell them apart.

        Returns:
            the admin on success, otherwise None
        """
        admin = await self.get_by_username(username)
        if admin is None or admin.is_active != 1:
            logger.debug("Admin login rejected: unknown or inactive account")
            return None

        if not verify_password(password, admin.password):
            logger.debug(f"Admin login rejected: bad password for id={admin.id}")
            return None

        return admin

    # ========================================
    # Sessions
    # ========================================

    async def create_session(self, admin_id: int) -> AdminSession:
        """
        Issue a new session for an admin

        Args:
            admin_id: owning admin

        Returns:
            AdminSession whose expires_at is exactly one TTL after created_at
        """
        now = datetime.now()
        admin_session = AdminSession(
            id=new_session_id(),
            admin_id=admin_id,
            created_at=now,
            expires_at=session_expiry(now),
        )
        self._session.add(admin_session)
        await self._session.flush()
        await self._session.refresh(admin_session)

        logger.info(f"Admin session issued for admin_id={admin_id}, expires {admin_session.expires_at}")
        return admin_session

    async def get_session(self, session_id: str) -> Optional[AdminSessionContext]:
        """
        Resolve a session id to its admin

        Returns:
            AdminSessionContext while the session is unexpired, else None
        """
        result = await self._session.execute(
            select(AdminSession, Admin)
            .join(Admin, AdminSession.admin_id == Admin.id)
            .where(
                AdminSession.id == session_id,
                AdminSession.expires_at > datetime.now(),
            )
        )
        row = result.first()
        if row is None:
            return None
        admin_session, admin = row
        return AdminSessionContext(admin=admin, session=admin_session)

    async def delete_session(self, session_id: str) -> None:
        await self._session.execute(
            delete(AdminSession).where(AdminSession.id == session_id)
        )
        await self._session.flush()
        logger.info("Admin session revoked")

    async def delete_expired_sessions(self) -> int:
        """
        Remove every session whose expiry has passed

        Returns:
            number of rows removed
        """
        result = await self._session.execute(
            delete(AdminSession).where(AdminSession.expires_at <= datetime.now())
        )
        await self._session.flush()
        removed = result.rowcount or 0
        if removed:
            logger.info(f"Purged {removed} expired admin session(s)")
        return removed
