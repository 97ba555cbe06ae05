"""Pydantic schemas for engine configuration."""

from biguint.schemas.config import EngineConfig, GrowthPolicy

__all__ = ["EngineConfig", "GrowthPolicy"]
