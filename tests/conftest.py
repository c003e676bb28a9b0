"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from mltypes.core import config
from mltypes.linalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def restore_options():
    """Undo any config.set_options() a test performs."""
    previous = config.get_options()
    yield
    config.set_options(**{
        'check_dimensions': previous.check_dimensions,
        'default_dtype': previous.default_dtype,
        'seed': previous.seed,
    })


@pytest.fixture
def square_pair():
    """Two 2x2 integer matrices with a known product."""
    return Matrix([[1, 2], [3, 4]]), Matrix([[5, 6], [7, 8]])


@pytest.fixture
def wide_matrix():
    """2x3 integer matrix."""
    return Matrix([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def float_vectors(rng):
    """Two random float64 vectors of equal size."""
    return (
        Vector(rng.standard_normal(7)),
        Vector(rng.standard_normal(7)),
    )
