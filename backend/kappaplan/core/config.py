"""
Application configuration using Pydantic BaseSettings.
Loads environment variables and provides typed configuration.
"""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project metadata
    PROJECT_NAME: str = "Kappaplan"
    VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"

    # Database (single embedded SQLite file)
    DATABASE_PATH: str = "data/kappaplan.db"

    # JSON backups written by /data/backup
    BACKUP_DIR: str = "backups"

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:3001",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Data export
    EXPORT_VERSION: str = "2.0"
    LOG_LIST_LIMIT: int = 100

    @property
    def DATABASE_URL(self) -> str:
        """Async SQLAlchemy URL for the configured database file."""
        return f"sqlite+aiosqlite:///{self.DATABASE_PATH}"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
