"""
Database manager
Responsibilities:
- Own the async engine and session factory
- Provide a transactional session context manager
- Create the schema from ORM metadata
- Configure SQLite (WAL, foreign keys)
"""

from pathlib import Path
from typing import Optional, AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncSession,
    AsyncEngine,
    async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from utils.logger import get_logger

logger = get_logger("Portfolio")


class DatabaseManager:
    """
    Database manager

    Constructed once at process start and passed to whoever needs a
    session; there is no module-level instance.

    Usage:
        db_manager = DatabaseManager("sqlite+aiosqlite:///data/portfolio.db")
        await db_manager.initialize()

        async with db_manager.session() as session:
            storage = Storage(session)
            ...
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: bool = False,
    ):
        """
        Args:
            database_url: async SQLAlchemy URL, defaults to a local SQLite file
                          format: sqlite+aiosqlite:///path/to/db.sqlite
            echo: log emitted SQL
        """
        if database_url is None:
            data_dir = Path("data")
            data_dir.mkdir(parents=True, exist_ok=True)
            database_url = f"sqlite+aiosqlite:///{data_dir}/portfolio.db"

        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._initialized = False

        logger.info(f"DatabaseManager created with URL: {self._mask_url(database_url)}")

    def _mask_url(self, url: str) -> str:
        """Hide credentials embedded in the URL"""
        if ":///" in url:
            return url
        if "@" in url:
            parts = url.split("@")
            return f"***@{parts[-1]}"
        return url

    def _is_sqlite(self) -> bool:
        return "sqlite" in self.database_url.lower()

    async def initialize(self) -> None:
        """
        Create the engine and session factory, configure SQLite and create
        all tables. Calling it twice is a no-op.
        """
        if self._initialized:
            logger.debug("Database already initialized")
            return

        engine_kwargs = {
            "echo": self.echo,
        }

        if self._is_sqlite():
            engine_kwargs["connect_args"] = {"check_same_thread": False}

            if ":memory:" in self.database_url:
                # in-memory databases live and die with a single connection
                engine_kwargs["poolclass"] = StaticPool

        self._engine = create_async_engine(self.database_url, **engine_kwargs)

        if self._is_sqlite():
            self._install_sqlite_pragmas()
            await self._configure_sqlite_wal()

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        await self._create_tables()

        self._initialized = True
        logger.info("Database initialized successfully")

    def _install_sqlite_pragmas(self) -> None:
        """Enable foreign key enforcement on every new SQLite connection"""

        @event.listens_for(self._engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    async def _configure_sqlite_wal(self) -> None:
        """Switch file databases to WAL so readers do not block on writers"""
        if ":memory:" in self.database_url:
            return

        async with self._engine.begin() as conn:
            await conn.execute(text("PRAGMA journal_mode=WAL"))
            await conn.execute(text("PRAGMA synchronous=NORMAL"))

        logger.info("SQLite WAL mode configured")

    async def _create_tables(self) -> None:
        from db.models import Base

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database tables created")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Transactional session scope

        Commits when the block exits normally, rolls back and re-raises
        otherwise.

        Usage:
            async with db_manager.session() as session:
                result = await session.execute(select(Project))
                ...

        Yields:
            AsyncSession
        """
        if not self._initialized:
            await self.initialize()

        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def close(self) -> None:
        """Dispose of the engine"""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            self._initialized = False
            logger.info("Database connection closed")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._initialized


def create_test_database_manager() -> DatabaseManager:
    """
    DatabaseManager backed by an in-memory SQLite database, for tests

    Returns:
        DatabaseManager
    """
    return DatabaseManager(
        database_url="sqlite+aiosqlite:///:memory:",
        echo=False,
    )
