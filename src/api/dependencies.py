"""
FastAPI dependency providers

The DatabaseManager is created once at process start (storage_lifespan or
init_globals) and every request gets its own session and Storage.

Dependency chain:
    HTTP Request
        │
        ▼
    get_db_manager()        # process-wide DatabaseManager
        │
        ▼
    get_db_session()        # request-scoped AsyncSession
        │
        ▼
    get_storage()           # Storage bound to that session
        │
        ▼
    get_current_admin()     # admin behind the request's session token
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from api.config import config
from db.database import DatabaseManager
from repositories.admin_repo import AdminSessionContext
from repositories.storage import Storage
from utils.logger import get_logger

logger = get_logger("Portfolio")


_db_manager: Optional[DatabaseManager] = None


async def init_globals(db_manager: Optional[DatabaseManager] = None) -> DatabaseManager:
    """
    Create and initialize the process-wide DatabaseManager

    Args:
        db_manager: use this manager instead of building one from config

    Returns:
        the initialized manager
    """
    global _db_manager

    if db_manager is None:
        db_manager = DatabaseManager(config.DATABASE_URL, echo=config.DATABASE_ECHO)
    await db_manager.initialize()
    _db_manager = db_manager
    logger.info("Database manager initialized")
    return db_manager


async def close_globals() -> None:
    global _db_manager

    if _db_manager:
        await _db_manager.close()
        logger.info("Database manager closed")
    _db_manager = None


@asynccontextmanager
async def storage_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan hook for the hosting FastAPI app

    Usage:
        app = FastAPI(lifespan=storage_lifespan)
    """
    await init_globals()
    try:
        yield
    finally:
        await close_globals()


def get_db_manager() -> DatabaseManager:
    if _db_manager is None:
        raise RuntimeError("DatabaseManager not initialized. Call init_globals() first.")
    return _db_manager


# ============================================================
# Request-scoped dependencies
# ============================================================

async def get_db_session(
    db_manager: DatabaseManager = Depends(get_db_manager),
) -> AsyncGenerator[AsyncSession, None]:
    """
    One session per request

    Commits when the request succeeds, rolls back when it raises.
    """
    async with db_manager.session() as session:
        yield session


async def get_storage(
    session: AsyncSession = Depends(get_db_session),
) -> Storage:
    return Storage(session)


def extract_session_token(request: Request) -> Optional[str]:
    """Session token from the configured header, falling back to the cookie"""
    token = request.headers.get(config.SESSION_HEADER)
    if token:
        return token
    return request.cookies.get(config.SESSION_COOKIE) or None


async def get_current_admin(
    request: Request,
    storage: Storage = Depends(get_storage),
) -> AdminSessionContext:
    """
    Resolve the admin behind the request's session token

    Raises:
        HTTPException(401): no token, unknown token, expired session or
            deactivated admin
    """
    token = extract_session_token(request)
    if token is None:
        raise HTTPException(status_code=401, detail="Not authenticated")

    context = await storage.get_admin_session(token)
    if context is None:
        raise HTTPException(status_code=401, detail="Invalid or expired session")

    # deactivation cuts off sessions that were issued before it
    if context.admin.is_active != 1:
        raise HTTPException(status_code=401, detail="Admin disabled")

    return context
