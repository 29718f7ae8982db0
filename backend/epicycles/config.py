"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from epicycles.engine.config import PipelineConfig


class Settings(BaseSettings):
    epicycles_env: str = "development"
    epicycles_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Analysis defaults
    default_num_samples: int = 500
    default_display_scale: float = 300.0
    default_num_circles: int = 50
    # Upper bound on samples per shape accepted over HTTP (the DFT is O(N²))
    max_num_samples: int = 2000
    # Upper bound on traced outline points per preview
    max_trail_points: int = 5000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def pipeline_config(self, **overrides) -> PipelineConfig:
        values = {
            "num_samples": self.default_num_samples,
            "display_scale": self.default_display_scale,
            "default_num_circles": self.default_num_circles,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return PipelineConfig(**values)


settings = Settings()
