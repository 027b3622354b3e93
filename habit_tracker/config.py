"""Application configuration."""

import os
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Tracker
    load_sample_habits: bool = os.getenv("LOAD_SAMPLE_HABITS", "true").lower() in ("1", "true", "yes")
    progress_bar_width: int = int(os.getenv("PROGRESS_BAR_WIDTH", "50"))
    motivation_seed: Optional[int] = None

    # Server
    server_host: str = os.getenv("SERVER_HOST", "127.0.0.1")
    server_port: int = int(os.getenv("SERVER_PORT", "8000"))

    # Dashboard
    dashboard_output_dir: str = os.getenv("DASHBOARD_OUTPUT_DIR", "static/images")
    dashboard_keep_images: int = int(os.getenv("DASHBOARD_KEEP_IMAGES", "5"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = False


settings = Settings()
