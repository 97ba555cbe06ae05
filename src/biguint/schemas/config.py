"""Pydantic models for .biguint.yaml engine configuration."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

DEFAULT_CONFIG_PATH = ".biguint.yaml"


class GrowthPolicy(str, Enum):
    """What a digit store does when its arena has no room left."""

    REALLOCATE = "reallocate"
    RAISE = "raise"


class LimbSettings(BaseModel):
    """Positional representation settings."""

    digits_per_limb: int = Field(
        default=1, ge=1, le=18, description="Decimal digits held by one limb"
    )

    @property
    def base(self) -> int:
        """The limb base B = 10 ** digits_per_limb."""
        return 10**self.digits_per_limb


class ArenaSettings(BaseModel):
    """Backing buffer settings for each value."""

    capacity: int = Field(default=1000, ge=2, description="Limbs pre-allocated per value")
    on_exhausted: GrowthPolicy = Field(default=GrowthPolicy.REALLOCATE)
    growth_factor: int = Field(default=2, ge=2)


class EngineConfig(BaseModel):
    """Complete configuration for .biguint.yaml."""

    limbs: LimbSettings = Field(default_factory=LimbSettings)
    arena: ArenaSettings = Field(default_factory=ArenaSettings)

    @classmethod
    def load(cls, path: str | Path) -> "EngineConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(mode="json", exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )


DEFAULT_CONFIG = EngineConfig()
