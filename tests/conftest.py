"""
Test configuration and fixtures for the hypercube playground.
"""
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from hypercube_playground.config import EngineConfig
from hypercube_playground.engine import DimensionalTransformEngine


@pytest.fixture
def default_config():
    """Default engine settings."""
    return EngineConfig()


@pytest.fixture
def small_config():
    """Sweep 1..4 over a 1 second cycle, turning around half way."""
    return EngineConfig(period=1.0, min_dimension=1, max_dimension=4, pivot=0.5)


@pytest.fixture
def small_engine(small_config):
    return DimensionalTransformEngine(small_config)


@pytest.fixture
def rng():
    return np.random.default_rng(42)
