"""
Hypercube Playground - Core Library
===================================

Geometry and timing behind the rotating n-cube animation.

Modules:
    topology: hypercube vertices and the edge predicate
    linalg: shape-checked matrix products, plane rotations, scale matrices
    timing: easing, interval remapping, interpolation
    projection: orthographic n-space to plane projection
    engine: the animation engine and its frame snapshots
    render: matplotlib / plotly drawing and GIF export
"""

from .config import EngineConfig
from .engine import AnimationState, DimensionalTransformEngine, FrameSnapshot
from .errors import ConfigurationError, DimensionMismatch, HypercubeError
from .topology import are_adjacent, generate_vertices, iter_edges

__version__ = "0.1.0"

__all__ = [
    'EngineConfig',
    'AnimationState',
    'DimensionalTransformEngine',
    'FrameSnapshot',
    'ConfigurationError',
    'DimensionMismatch',
    'HypercubeError',
    'are_adjacent',
    'generate_vertices',
    'iter_edges',
    '__version__',
]
