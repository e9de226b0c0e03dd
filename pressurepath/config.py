"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from pressurepath.engine.config import SamplerConfig


class Settings(BaseSettings):
    pressurepath_env: str = "development"
    pressurepath_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Sampler defaults for API requests
    tangent_difference_max: float = 0.1
    normal_point_distance_max: float = 50.0
    max_evaluations: int = 10_000
    simplify_tolerance: float = 2.5
    zero_tangent_undefined: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def sampler_config(self, **overrides: object) -> SamplerConfig:
        values: dict[str, object] = {
            "tangent_difference_max": self.tangent_difference_max,
            "normal_point_distance_max": self.normal_point_distance_max,
            "max_evaluations": self.max_evaluations,
            "simplify_tolerance": self.simplify_tolerance,
            "zero_tangent_undefined": self.zero_tangent_undefined,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SamplerConfig(**values)  # type: ignore[arg-type]


settings = Settings()
