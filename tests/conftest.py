"""
Pytest configuration and fixtures for cl3 tests.
"""

import pytest
import torch

from cl3.algebra.cliffor import R, V3, BV, I, PV, H, C, BPV, ODD, TPV, APS
from cl3.algebra.variants import Variant


DEFAULT_ATOL = 1e-12


def assert_close(actual, expected, atol=DEFAULT_ATOL):
    """Assert two cliffors agree component-wise over the full embedding."""
    for name, a, b in zip(
        ("a0", "a1", "a2", "a3", "a23", "a31", "a12", "a123"),
        actual.components,
        expected.components,
    ):
        assert abs(a - b) <= atol, f"{name}: {a!r} != {b!r} (actual={actual!r}, expected={expected!r})"


@pytest.fixture
def close():
    """Component-wise comparison helper."""
    return assert_close


@pytest.fixture
def generator():
    """Seeded generator for reproducible random cliffors."""
    g = torch.Generator()
    g.manual_seed(1234)
    return g


@pytest.fixture
def samples():
    """One well-conditioned cliffor per variant."""
    return {
        Variant.R: R(1.5),
        Variant.V3: V3(0.3, -0.4, 0.5),
        Variant.BV: BV(-0.2, 0.6, 0.1),
        Variant.I: I(0.7),
        Variant.PV: PV(0.9, 0.1, -0.2, 0.3),
        Variant.H: H(0.8, 0.2, -0.1, 0.4),
        Variant.C: C(-0.5, 0.6),
        Variant.BPV: BPV(0.3, 0.1, -0.2, 0.4, -0.3, 0.2),
        Variant.ODD: ODD(0.2, -0.3, 0.4, 0.5),
        Variant.TPV: TPV(0.1, 0.2, -0.3, 0.6),
        Variant.APS: APS(0.7, 0.1, -0.2, 0.3, 0.2, 0.1, -0.4, 0.3),
    }


@pytest.fixture
def colinear_bpv():
    """Vector and bivector parts along e1."""
    return BPV(1.0, 0.0, 0.0, 2.0, 0.0, 0.0)


@pytest.fixture
def nilpotent_bpv():
    """e1 + i e2: orthogonal parts of equal magnitude, squares to zero."""
    return BPV(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)


@pytest.fixture
def crossed_bpv():
    """Orthogonal parts of unequal magnitude: needs a boost."""
    return BPV(1.0, 0.0, 0.0, 0.0, 0.5, 0.0)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
