from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Shop Back-office API"
    DATABASE_URL: str = "sqlite:///./backoffice.db"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[Path] = None

    # Thumbnails
    MAX_IMAGE_SIZE: int = 5 * 1024 * 1024  # 5MB
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/png", "image/gif", "image/webp"]

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # Product listing reports the size of the whole catalogue by default,
    # even when a search filter narrows the page content.
    PRODUCT_TOTAL_COUNTS_SEARCH: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
