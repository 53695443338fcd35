"""
Tests for the core constants and IEEE kernels.
"""

import math

import cl3.core
from cl3.algebra.variants import Variant
from cl3.core import numerics as nm
from cl3.core.constants import CLIFFOR_NBYTES, COMPONENT_ORDER, NUM_COMPONENTS, TOL, EPS


class TestConstants:
    """Tests for the shared constants."""

    def test_exports_resolve(self):
        """Every name in cl3.core.__all__ exists."""
        for name in cl3.core.__all__:
            assert hasattr(cl3.core, name), name

    def test_component_layout(self):
        """The full embedding is the APS field order, eight float64 values."""
        assert Variant.APS.fields == COMPONENT_ORDER
        assert len(COMPONENT_ORDER) == NUM_COMPONENTS
        assert CLIFFOR_NBYTES == 8 * NUM_COMPONENTS

    def test_tolerance(self):
        """TOL is 128 unit roundoffs."""
        assert TOL == 128 * EPS


class TestKernels:
    """Tests for the NaN/Inf propagating kernels."""

    def test_no_raise_on_domain_errors(self):
        """Kernels return IEEE results where math would raise."""
        assert nm.log(0.0) == -math.inf
        assert math.isnan(nm.sqrt(-1.0))
        assert nm.exp(1000.0) == math.inf
        assert nm.div(1.0, 0.0) == math.inf
        assert math.isnan(nm.div(0.0, 0.0))
        assert nm.recip(-0.0) == -math.inf

    def test_complex_kernels(self):
        """Complex kernels take the principal branch."""
        assert nm.clog(-1.0 + 0.0j) == complex(0.0, math.pi)
        assert nm.csqrt(-4.0 + 0.0j) == 2j

    def test_kernels_return_builtin_types(self):
        """Results are plain float and complex."""
        assert type(nm.sin(1.0)) is float
        assert type(nm.cexp(1j)) is complex

