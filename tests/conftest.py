"""
Shared pytest fixtures.

Every test gets its own in-memory SQLite database, so no cleanup between
tests is needed.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from api.schemas.auth import InsertAdmin
from db.database import create_test_database_manager, DatabaseManager
from db.models import Admin
from repositories.admin_repo import AdminRepository
from repositories.blog_post_repo import BlogPostRepository
from repositories.contact_repo import ContactRepository
from repositories.project_repo import ProjectRepository
from repositories.storage import Storage
from repositories.tech_stack_repo import TechStackRepository
from repositories.user_repo import UserRepository


# ============================================================
# Database fixtures
# ============================================================


@pytest.fixture
async def db_manager() -> DatabaseManager:
    """Function-scoped in-memory SQLite database with all tables created."""
    manager = create_test_database_manager()
    await manager.initialize()
    yield manager
    await manager.close()


@pytest.fixture
async def db_session(db_manager: DatabaseManager) -> AsyncSession:
    """
    Database session for the test body.

    Tests that provoke an IntegrityError must call rollback() before
    returning, since the session commits on exit.
    """
    async with db_manager.session() as session:
        yield session


# ============================================================
# Repository fixtures
# ============================================================


@pytest.fixture
def storage(db_session: AsyncSession) -> Storage:
    return Storage(db_session)


@pytest.fixture
def user_repo(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def contact_repo(db_session: AsyncSession) -> ContactRepository:
    return ContactRepository(db_session)


@pytest.fixture
def project_repo(db_session: AsyncSession) -> ProjectRepository:
    return ProjectRepository(db_session)


@pytest.fixture
def tech_stack_repo(db_session: AsyncSession) -> TechStackRepository:
    return TechStackRepository(db_session)


@pytest.fixture
def blog_post_repo(db_session: AsyncSession) -> BlogPostRepository:
    return BlogPostRepository(db_session)


@pytest.fixture
def admin_repo(db_session: AsyncSession) -> AdminRepository:
    return AdminRepository(db_session)


# ============================================================
# Pre-created admin fixtures
# ============================================================


@pytest.fixture
async def test_admin(admin_repo: AdminRepository) -> Admin:
    """An active admin whose password is 'adminpass'."""
    return await admin_repo.create_admin(
        InsertAdmin(username="testadmin", password="adminpass", email="admin@example.com")
    )


@pytest.fixture
async def inactive_admin(admin_repo: AdminRepository) -> Admin:
    """A deactivated admin whose password is 'sleepy'."""
    return await admin_repo.create_admin(
        InsertAdmin(username="retired", password="sleepy", is_active=0)
    )
