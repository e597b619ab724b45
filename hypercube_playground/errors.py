"""
Error types raised by the geometry engine.

Both errors mark a broken contract (wrong sizes, bad settings) and are
meant to stop the current computation, not to be recovered from.
"""


class HypercubeError(Exception):
    """Base class for all errors raised by hypercube_playground."""


class DimensionMismatch(HypercubeError, ValueError):
    """Vector or matrix operands have incompatible sizes."""


class ConfigurationError(HypercubeError, ValueError):
    """A setting or requested value lies outside its allowed range."""
