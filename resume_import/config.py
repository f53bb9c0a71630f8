from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Resume Import Service"
    debug: bool = False
    log_level: str = "INFO"

    # Uploads larger than this are rejected with 413
    max_upload_bytes: int = 5 * 1024 * 1024

    # CORS - comma-separated list of allowed origins (the editor front end)
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    model_config = SettingsConfigDict(
        env_prefix="RESUME_IMPORT_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
