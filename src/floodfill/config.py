"""Startup configuration for the flood fill visualizer.

Defaults come from ``floodfill.constants``; ``load_config`` overlays
``FLOODFILL_*`` environment variables (a ``.env`` file is honoured).
Everything here is fixed once the window starts, except the playback speed
which the scheduler moves along ``speed_levels``.
"""
from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields
from typing import Mapping

from dotenv import load_dotenv

from floodfill.constants import (
    BASE_DRAW_DELAY,
    INITIAL_SPEED,
    MAX_SPEED,
    MIN_MARGIN,
    MIN_SPEED,
    PREFERRED_SURFACE_SIZE,
    SPEED_INCREMENT,
    TILE_SIZE,
)

ENV_PREFIX = "FLOODFILL_"


class ConfigError(ValueError):
    """Raised when configuration values are inconsistent."""


@dataclass(frozen=True, slots=True)
class FloodFillConfig:
    tile_size: int = TILE_SIZE
    preferred_surface_size: int = PREFERRED_SURFACE_SIZE
    surface_margin: int = MIN_MARGIN
    base_delay: int = BASE_DRAW_DELAY
    min_speed: float = MIN_SPEED
    max_speed: float = MAX_SPEED
    speed_increment: float = SPEED_INCREMENT
    initial_speed: float = INITIAL_SPEED
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.tile_size <= 0:
            raise ConfigError(f"tile_size must be positive, got {self.tile_size}")
        if self.preferred_surface_size < self.tile_size:
            raise ConfigError("preferred_surface_size must hold at least one tile")
        if self.surface_margin < 0:
            raise ConfigError("surface_margin must not be negative")
        if self.base_delay <= 0:
            raise ConfigError("base_delay must be positive")
        if self.speed_increment <= 0:
            raise ConfigError("speed_increment must be positive")
        if not 0 < self.min_speed <= self.max_speed:
            raise ConfigError(
                f"speed bounds must satisfy 0 < min <= max, got {self.min_speed}..{self.max_speed}"
            )
        span = (self.max_speed - self.min_speed) / self.speed_increment
        if not math.isclose(span, round(span), abs_tol=1e-9):
            raise ConfigError("speed range must be a whole number of increments")
        if self._level_of(self.initial_speed) is None:
            raise ConfigError(f"initial_speed {self.initial_speed} is not on the speed scale")

    def speed_levels(self) -> tuple[float, ...]:
        """Every permitted speed multiplier, slowest first."""
        count = round((self.max_speed - self.min_speed) / self.speed_increment) + 1
        return tuple(self.min_speed + i * self.speed_increment for i in range(count))

    def initial_level(self) -> int:
        level = self._level_of(self.initial_speed)
        assert level is not None
        return level

    def interval_for(self, speed: float) -> int:
        """Tick interval in milliseconds for a speed multiplier."""
        return int(math.floor(self.base_delay / speed))

    def _level_of(self, speed: float) -> int | None:
        for index, level in enumerate(self.speed_levels()):
            if math.isclose(level, speed, abs_tol=1e-9):
                return index
        return None


def _coerce(raw: str, current):
    if isinstance(current, int):
        return int(raw)
    if isinstance(current, float):
        return float(raw)
    return raw


def load_config(env: Mapping[str, str] | None = None, *, read_dotenv: bool = True) -> FloodFillConfig:
    """Build a config from defaults plus ``FLOODFILL_<FIELD>`` overrides."""
    if env is None:
        if read_dotenv:
            load_dotenv()
        env = os.environ
    defaults = FloodFillConfig()
    overrides = {}
    for f in fields(FloodFillConfig):
        raw = env.get(ENV_PREFIX + f.name.upper())
        if raw is None or raw == "":
            continue
        try:
            overrides[f.name] = _coerce(raw, getattr(defaults, f.name))
        except ValueError as exc:
            raise ConfigError(f"invalid value for {ENV_PREFIX}{f.name.upper()}: {raw!r}") from exc
    return FloodFillConfig(**overrides)
