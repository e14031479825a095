"""Generator configuration.

The configuration is owned by the caller and only read by the generator.
Room budget and loot count are validated strictly; the branching factor is
a probability threshold, so out-of-range values are clamped instead.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from pydantic import BaseModel, field_validator, model_validator

logger = logging.getLogger(__name__)


class GeneratorConfig(BaseModel):
    """Settings for a single generation run."""

    max_rooms: int = 15
    """Room budget, including the Start room.  Must be at least 1."""

    branching_factor: float = 0.5
    """Probability of continuing to add neighbours from the same room.
    Low values give corridors, high values give branchy layouts."""

    max_branching_factor: float = 1.0
    """Upper bound ``branching_factor`` is clamped to (0.85 matches the
    older slider range)."""

    use_metroidvania_logic: bool = True
    """Lock the boss entrance and hide a key at a dead end."""

    loot_room_count: int | None = None
    """Number of Treasure rooms.  None means ``max(2, normal_rooms // 5)``."""

    @field_validator("max_rooms")
    @classmethod
    def _validate_max_rooms(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_rooms must be >= 1, got {v}")
        return v

    @field_validator("loot_room_count")
    @classmethod
    def _validate_loot_room_count(cls, v: int | None) -> int | None:
        if v is not None and v < 0:
            raise ValueError(f"loot_room_count must be >= 0, got {v}")
        return v

    @field_validator("branching_factor", "max_branching_factor")
    @classmethod
    def _reject_nan(cls, v: float) -> float:
        # NaN compares false against every draw, so it cannot be clamped
        if math.isnan(v):
            raise ValueError("branching factors must be numbers, got NaN")
        return v

    @field_validator("max_branching_factor")
    @classmethod
    def _clamp_max_branching_factor(cls, v: float) -> float:
        return min(max(v, 0.0), 1.0)

    @model_validator(mode="after")
    def _clamp_branching_factor(self) -> GeneratorConfig:
        clamped = min(max(self.branching_factor, 0.0), self.max_branching_factor)
        if clamped != self.branching_factor:
            logger.debug(
                "Clamped branching_factor %s to %s",
                self.branching_factor, clamped,
            )
            self.branching_factor = clamped
        return self


def load_config(path: Path) -> GeneratorConfig:
    """Load a config from a JSON file."""
    return GeneratorConfig.model_validate_json(path.read_text())


def save_config(config: GeneratorConfig, path: Path) -> None:
    """Save a config to a JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2))
