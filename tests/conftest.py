"""Pytest configuration for geometry kernel tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest


@pytest.fixture(scope="session")
def taichi_runtime():
    """Initialize Taichi once for the entire test session.

    Only the batch intersection tests need the runtime, so the fixture is
    requested explicitly rather than applied to every test. Using session
    scope prevents multiple ti.init() calls which can cause segmentation
    faults due to Taichi runtime conflicts.
    """
    import taichi as ti

    ti.init(arch=ti.cpu, default_fp=ti.f64, random_seed=42)
    yield ti


@pytest.fixture
def sphere():
    """A fresh unit sphere."""
    from src.python.geometry.sphere import Sphere

    return Sphere()
