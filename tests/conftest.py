"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line():
    """y = 2x exactly, x = 1..5."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    y = 2.0 * x
    return x, y


@pytest.fixture
def noisy_line(rng):
    """y = 1.5 - 0.75x + noise, 40 observations."""
    n = 40
    x = rng.uniform(-3.0, 7.0, n)
    y = 1.5 - 0.75 * x + rng.standard_normal(n) * 0.3
    return x, y


@pytest.fixture
def noisy_origin_line(rng):
    """y = 0.4x + noise, no intercept, 30 observations."""
    n = 30
    x = rng.uniform(1.0, 10.0, n)
    y = 0.4 * x + rng.standard_normal(n) * 0.2
    return x, y
