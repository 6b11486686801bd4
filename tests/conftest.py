# tests/conftest.py
"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from planeviz.common.logging_manager import LoggingManager
from planeviz.common.plane import Plane

EDGE_NORMALS = [
    (0, 0, 1),
    (0, 0, -1),
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (1, 1, 0),
    (1, -1, 0),
    (1, 1, 1),
    (1e-9, 0, 1),
    (0, 1e-9, 1),
]


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def random_planes(rng: np.random.Generator) -> list[Plane]:
    """A mix of random planes and planes whose normals sit on the awkward cases."""
    normals = [np.asarray(n, dtype=np.float64) for n in EDGE_NORMALS]
    normals += list(rng.normal(size=(200, 3)))
    offsets = rng.uniform(-10.0, 10.0, size=len(normals))
    return [Plane(n, c) for n, c in zip(normals, offsets)]


@pytest.fixture
def xy_plane() -> Plane:
    """The z = 0 plane, normal +Z."""
    return Plane((0, 0, 1), 0.0)


@pytest.fixture
def verbose_logging():
    manager = LoggingManager.instance()
    manager.set_verbosity(True)
    yield manager
    manager.set_verbosity(False)
