from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application runtime configuration."""

    database_url: str = Field(
        default=f"sqlite:///{(Path(__file__).resolve().parents[2] / 'data' / 'lms.db')}"
    )
    api_prefix: str = "/api"
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=0, ge=0)
    db_echo: bool = False
    auth_jwt_secret: str = Field(default="lms-dev-secret")
    auth_jwt_algorithms: List[str] = Field(default_factory=lambda: ["HS256"])
    auth_jwt_issuer: Optional[str] = None
    max_upload_bytes: int = Field(default=10 * 1024 * 1024)
    log_level: str = Field(default="INFO")
    server_host: str = Field(default="127.0.0.1")
    server_port: int = Field(default=8000)

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LMS_")


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
