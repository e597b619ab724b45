"""
Dimensional transform engine.

Owns the animation phase and everything derived from it: the fractional
dimension count, the hypercube of the current integer dimension, its
projection basis and the rotation/scale matrices of the frame.

One tick is advance(dt) followed by read-only access (or snapshot()).
Vertices, edges and basis are regenerated together, only when the integer
dimension changes.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple

import numpy as np

from .config import EngineConfig
from .errors import ConfigurationError
from .linalg import composed_rotation, scale_matrix
from .projection import project_points, projection_basis, transform_points
from .timing import divide_interval, ease_in_out, ping_pong, slurp, wrap_phase
from .topology import generate_vertices, iter_edges

logger = logging.getLogger(__name__)


def _frozen(a: np.ndarray) -> np.ndarray:
    a = np.array(a, dtype=float)
    a.flags.writeable = False
    return a


@dataclass
class AnimationState:
    phase: float = 0.0                  # cyclic, [0, 1)
    adjusted_time: float = 0.0          # eased ping-pong of phase, [0, 1]
    fractional_dimension: float = 0.0
    dimension: int = 0                  # floor(fractional_dimension)
    appear_amount: float = 0.0          # fractional part
    global_alpha: float = 1.0


@dataclass(frozen=True, eq=False)
class FrameSnapshot:
    """
    Everything a renderer needs for one frame. Arrays are read-only.

    Compared by identity: field-wise == on numpy arrays has no single truth
    value.
    """
    dimension: int
    fractional_dimension: float
    phase: float
    adjusted_time: float
    appear_amount: float
    global_alpha: float
    vertices: np.ndarray        # (2**n, n)
    edges: Tuple[Tuple[int, int], ...]
    basis: np.ndarray           # (n, 2)
    rotation: np.ndarray        # (n, n)
    scale: np.ndarray           # (n, n)

    def transformed_vertices(self) -> np.ndarray:
        return transform_points(self.vertices, self.rotation, self.scale)

    def projected_points(self) -> np.ndarray:
        """(2**n, 2) plane positions of the rotated, scaled vertices."""
        return project_points(self.transformed_vertices(), self.basis)


class DimensionalTransformEngine:
    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = (config or EngineConfig()).validate()
        self._state = AnimationState()

        self._cached_dimension: Optional[int] = None
        self._vertices = np.zeros((1, 0))
        self._edges: Tuple[Tuple[int, int], ...] = ()
        self._basis = np.zeros((0, 2))
        self._rotation = np.zeros((0, 0))
        self._scale = np.zeros((0, 0))

        logger.info(
            "Engine created: dimensions %d..%d, period %.2fs, pivot %.2f",
            self.config.min_dimension, self.config.max_dimension,
            self.config.period, self.config.pivot,
        )
        self._update_from_phase()
        self.recompute_derived()

    # ---------- Time ----------

    def advance(self, dt: float) -> None:
        """Move the animation forward by dt seconds."""
        if dt < 0 or not math.isfinite(dt):
            raise ConfigurationError(f"time step must be a finite value >= 0, got {dt!r}")
        self._state.phase = wrap_phase(self._state.phase + dt / self.config.period)
        self._update_from_phase()
        self.recompute_derived()

    def seek(self, phase: float) -> None:
        """Jump to a phase of the cycle (taken mod 1)."""
        if not math.isfinite(phase):
            raise ConfigurationError(f"phase must be finite, got {phase!r}")
        self._state.phase = wrap_phase(phase)
        self._update_from_phase()
        self.recompute_derived()

    def show_dimension(self, value: float) -> None:
        """
        Pin the fractional dimension for the current frame.

        The next advance() or seek() derives it from the phase again.
        """
        cfg = self.config
        if not cfg.min_dimension <= value <= cfg.max_dimension:
            raise ConfigurationError(
                f"dimension {value} outside [{cfg.min_dimension}, {cfg.max_dimension}]")
        self._state.fractional_dimension = float(value)
        self.recompute_derived()

    def _update_from_phase(self) -> None:
        cfg = self.config
        s = self._state

        s.adjusted_time = ease_in_out(ping_pong(s.phase, cfg.pivot), cfg.ease_power)
        # sweep one dimension past the top, clamped back: max_dimension holds
        # for the last 1/(max - min + 1) of the eased rise
        s.fractional_dimension = cfg.clamp_dimension(
            slurp(cfg.min_dimension, cfg.max_dimension + 1, s.adjusted_time))

        fade_in = divide_interval(s.phase, 0.0, cfg.fade_fraction)
        fade_out = 1.0 - divide_interval(s.phase, 1.0 - cfg.fade_fraction, 1.0)
        s.global_alpha = slurp(cfg.min_alpha, 1.0,
                               ease_in_out(min(fade_in, fade_out), cfg.ease_power))

    # ---------- Derived geometry ----------

    def recompute_derived(self) -> None:
        s = self._state
        n = int(math.floor(s.fractional_dimension))

        if n != self._cached_dimension:
            self._regenerate(n)

        s.dimension = n
        s.appear_amount = s.fractional_dimension - n
        self._scale = _frozen(scale_matrix(n, s.appear_amount))
        self._rotation = _frozen(composed_rotation(n, self.rotation_angle))

    def _regenerate(self, n: int) -> None:
        # vertices, edges and basis are swapped in together
        vertices = generate_vertices(n)
        edges = tuple(iter_edges(vertices))
        basis = projection_basis(n)

        self._vertices, self._edges, self._basis = vertices, edges, basis
        logger.debug(
            "Dimension %s -> %d: %d vertices, %d edges",
            self._cached_dimension, n, len(vertices), len(edges),
        )
        self._cached_dimension = n

    # ---------- Read access ----------

    @property
    def state(self) -> AnimationState:
        return replace(self._state)

    @property
    def phase(self) -> float:
        return self._state.phase

    @property
    def rotation_angle(self) -> float:
        """Shared plane angle of every elementary rotation."""
        return 2.0 * math.pi * self.config.rotation_turns * self._state.phase

    @property
    def dimension(self) -> int:
        return self._state.dimension

    @property
    def fractional_dimension(self) -> float:
        return self._state.fractional_dimension

    @property
    def vertices(self) -> np.ndarray:
        return self._vertices

    def edges(self) -> Iterator[Tuple[int, int]]:
        return iter(self._edges)

    @property
    def projection_basis(self) -> np.ndarray:
        return self._basis

    @property
    def rotation_matrix(self) -> np.ndarray:
        return self._rotation

    @property
    def scale_matrix(self) -> np.ndarray:
        return self._scale

    @property
    def appear_amount(self) -> float:
        return self._state.appear_amount

    @property
    def global_alpha_hint(self) -> float:
        return self._state.global_alpha

    def snapshot(self) -> FrameSnapshot:
        s = self._state
        return FrameSnapshot(
            dimension=s.dimension,
            fractional_dimension=s.fractional_dimension,
            phase=s.phase,
            adjusted_time=s.adjusted_time,
            appear_amount=s.appear_amount,
            global_alpha=s.global_alpha,
            vertices=self._vertices,
            edges=self._edges,
            basis=self._basis,
            rotation=self._rotation,
            scale=self._scale,
        )

    def frames(self, dt: float, count: int) -> Iterator[FrameSnapshot]:
        """Drive `count` ticks of dt seconds, yielding a snapshot after each."""
        for _ in range(count):
            self.advance(dt)
            yield self.snapshot()
