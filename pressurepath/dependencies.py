"""FastAPI dependency injection."""

from __future__ import annotations

from pressurepath.config import Settings, settings
from pressurepath.engine.path_math import PathMathEngine, SvgPathToolsEngine


def get_settings() -> Settings:
    return settings


def get_engine() -> PathMathEngine:
    return SvgPathToolsEngine()
