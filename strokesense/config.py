"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings

from strokesense.engine.config import RecognizerConfig


class Settings(BaseSettings):
    strokesense_env: str = "development"
    strokesense_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Recognizer defaults (screen-pixel units)
    recognizer_epsilon: float = 15.0
    recognizer_area_stride: int = 10
    recognizer_perimeter_stride: int = 1
    recognizer_max_points: int = 4096

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def recognizer_config(self, **overrides: Any) -> RecognizerConfig:
        """Build an engine config from these settings; None overrides are ignored."""
        values: dict[str, Any] = {
            "epsilon": self.recognizer_epsilon,
            "area_stride": self.recognizer_area_stride,
            "perimeter_stride": self.recognizer_perimeter_stride,
            "max_points": self.recognizer_max_points,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return RecognizerConfig(**values)


settings = Settings()
