"""
Configuration settings for the Blog Posts Backend
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@dataclass
class Settings:
    """Runtime configuration, read from the environment by ``from_env``"""

    database_url: Optional[str] = None
    test_database_url: Optional[str] = None
    env: str = "PROD"  # PROD or QA
    port: int = 8080
    log_level: str = "INFO"
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])

    # Connection pool
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10
    db_command_timeout: float = 60

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL"),
            test_database_url=os.getenv("TEST_DATABASE_URL"),
            env=os.getenv("ENV", "PROD"),
            port=int(os.getenv("PORT", 8080)),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            allowed_origins=_split_origins(os.getenv("ALLOWED_ORIGINS", "*")),
            db_pool_min_size=int(os.getenv("DB_POOL_MIN_SIZE", 2)),
            db_pool_max_size=int(os.getenv("DB_POOL_MAX_SIZE", 10)),
            db_command_timeout=float(os.getenv("DB_COMMAND_TIMEOUT", 60)),
        )

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.database_url:
            errors.append("DATABASE_URL environment variable is required")
        if self.db_pool_min_size < 1:
            errors.append("DB_POOL_MIN_SIZE must be at least 1")
        if self.db_pool_max_size < self.db_pool_min_size:
            errors.append("DB_POOL_MAX_SIZE must not be smaller than DB_POOL_MIN_SIZE")
        if self.db_command_timeout <= 0:
            errors.append("DB_COMMAND_TIMEOUT must be positive")

        return errors


def get_settings() -> Settings:
    """Get validated settings from the environment"""
    settings = Settings.from_env()
    errors = settings.validate()

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    logger.info(f"Environment: {settings.env}")
    return settings
