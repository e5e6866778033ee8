"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    strokefourier_env: str = "development"
    strokefourier_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Pipeline defaults for requests that omit them
    default_harmonics: int = 12
    default_smoothing: int = 4
    default_samples: int = 1024
    default_tolerance: float = 1.2
    default_taper: bool = True
    canvas_width: float = 960.0
    canvas_height: float = 520.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
