"""
Engine configuration.

Defaults reproduce the classic animation: a 3 second cycle that sweeps the
dimension count from 1 up to 11 and back, turning around at 85% of the
cycle.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace as dc_replace

from .errors import ConfigurationError


DEFAULT_PERIOD = 3.0
DEFAULT_MIN_DIMENSION = 1
DEFAULT_MAX_DIMENSION = 11
DEFAULT_PIVOT = 0.85
DEFAULT_EASE_POWER = 3.0
DEFAULT_ROTATION_TURNS = 1.0
DEFAULT_FADE_FRACTION = 0.05
DEFAULT_MIN_ALPHA = 0.0

# 2**12 = 4096 vertices
DIMENSION_CAP = 12


@dataclass(frozen=True)
class EngineConfig:
    period: float = DEFAULT_PERIOD              # seconds per full cycle
    min_dimension: int = DEFAULT_MIN_DIMENSION
    max_dimension: int = DEFAULT_MAX_DIMENSION
    pivot: float = DEFAULT_PIVOT                # phase where the sweep turns back
    ease_power: float = DEFAULT_EASE_POWER
    rotation_turns: float = DEFAULT_ROTATION_TURNS
    fade_fraction: float = DEFAULT_FADE_FRACTION
    min_alpha: float = DEFAULT_MIN_ALPHA
    dimension_cap: int = DIMENSION_CAP

    def validate(self) -> "EngineConfig":
        """Raise ConfigurationError for the first invalid field, else return self."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, float) and not math.isfinite(value):
                raise ConfigurationError(f"{f.name} must be finite, got {value!r}")

        if self.period <= 0:
            raise ConfigurationError(f"period must be positive, got {self.period!r}")
        if self.min_dimension < 0:
            raise ConfigurationError(
                f"min_dimension must be >= 0, got {self.min_dimension!r}")
        if self.min_dimension > self.max_dimension:
            raise ConfigurationError(
                f"min_dimension ({self.min_dimension}) exceeds "
                f"max_dimension ({self.max_dimension})")
        if self.max_dimension > self.dimension_cap:
            raise ConfigurationError(
                f"max_dimension ({self.max_dimension}) exceeds the cap of "
                f"{self.dimension_cap}")
        if not 0.0 < self.pivot < 1.0:
            raise ConfigurationError(f"pivot must lie in (0, 1), got {self.pivot!r}")
        if self.ease_power <= 0:
            raise ConfigurationError(
                f"ease_power must be positive, got {self.ease_power!r}")
        # a whole number of turns brings the rotation back to identity at the wrap
        if not float(self.rotation_turns).is_integer():
            raise ConfigurationError(
                f"rotation_turns must be a whole number, got {self.rotation_turns!r}")
        if not 0.0 < self.fade_fraction <= 0.5:
            raise ConfigurationError(
                f"fade_fraction must lie in (0, 0.5], got {self.fade_fraction!r}")
        if not 0.0 <= self.min_alpha <= 1.0:
            raise ConfigurationError(
                f"min_alpha must lie in [0, 1], got {self.min_alpha!r}")
        return self

    def replace(self, **changes) -> "EngineConfig":
        """Copy with some fields changed; the copy is validated."""
        return dc_replace(self, **changes).validate()

    def clamp_dimension(self, value: float) -> float:
        return min(max(float(value), self.min_dimension), self.max_dimension)
