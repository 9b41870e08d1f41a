from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "Mottu API"
    app_version: str = "1.0.0"
    storage_backend: Literal["memory", "sqlite"] = "memory"
    database_url: str = "sqlite+aiosqlite://"  # in-memory, lives as long as the process
    default_page_size: int = 10
    max_page_size: int | None = None  # None = no clamp; the documented maximum is 50
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
