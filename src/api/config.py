"""
Storage configuration

Database, session and password-hashing settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageConfig(BaseSettings):
    """
    Storage settings

    Every field can be overridden through a PORTFOLIO_-prefixed
    environment variable, e.g. PORTFOLIO_DATABASE_URL.
    """

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///data/portfolio.db"
    DATABASE_ECHO: bool = False

    # Admin sessions
    SESSION_TTL_HOURS: int = 24
    SESSION_HEADER: str = "X-Admin-Session"
    SESSION_COOKIE: str = "admin_session"

    # bcrypt cost factor
    BCRYPT_ROUNDS: int = 10

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        case_sensitive=False,
    )


config = StorageConfig()
