"""
Tests for random cliffor generation.
"""

import pytest
import torch

from cl3.algebra.cliffor import R, V3, bar, to_v3
from cl3.algebra.norm import magnitude
from cl3.algebra.variants import Variant
from cl3.utils.config import Config
from cl3.utils.sampling import (
    RANGE_GENERATORS,
    make_generator,
    rand_aps,
    rand_bpv,
    rand_c,
    rand_h,
    rand_i,
    rand_nilpotent,
    rand_odd,
    rand_projector,
    rand_pv,
    rand_r,
    rand_tpv,
    rand_unit_v3,
    rand_v3,
    rand_bv,
    random_cliffor,
    random_from_config,
    range_r,
    range_v3,
)


UNIT_GENERATORS = {
    Variant.R: rand_r,
    Variant.V3: rand_v3,
    Variant.BV: rand_bv,
    Variant.I: rand_i,
    Variant.PV: rand_pv,
    Variant.H: rand_h,
    Variant.C: rand_c,
    Variant.BPV: rand_bpv,
    Variant.ODD: rand_odd,
    Variant.TPV: rand_tpv,
    Variant.APS: rand_aps,
}


# =============================================================================
# Generators and reproducibility
# =============================================================================

class TestGenerators:
    """Tests for generator threading."""

    def test_same_seed_same_values(self):
        """Two generators with the same seed produce the same sequence."""
        g1 = make_generator(Config(seed=7))
        g2 = make_generator(Config(seed=7))
        for _ in range(5):
            a, g1 = rand_aps(g1)
            b, g2 = rand_aps(g2)
            assert a == b

    def test_generator_advances(self, generator):
        """Successive draws differ."""
        a, g = rand_v3(generator)
        b, g = rand_v3(g)
        assert a != b

    def test_returns_same_generator(self, generator):
        """The returned generator is the advanced input."""
        _, g = rand_r(generator)
        assert g is generator

    def test_unseeded_generator(self):
        """Without a seed a generator is still usable."""
        g = make_generator()
        x, _ = rand_r(g)
        assert x.variant is Variant.R


# =============================================================================
# Variants and ranges
# =============================================================================

class TestRanges:
    """Tests for range_* and rand_* generators."""

    def test_every_variant_has_generators(self):
        """Range and unit generators exist for all eleven variants."""
        assert set(RANGE_GENERATORS) == set(Variant)
        assert set(UNIT_GENERATORS) == set(Variant)

    def test_generators_produce_their_variant(self, generator):
        """Each generator yields values of its own variant."""
        g = generator
        for variant, gen in UNIT_GENERATORS.items():
            x, g = gen(g)
            assert x.variant is variant

    def test_single_grade_magnitude_in_range(self, generator):
        """Single-grade magnitudes fall in [lo, hi)."""
        g = generator
        for _ in range(50):
            x, g = range_v3((2.0, 3.0), g)
            assert 2.0 <= magnitude(x) < 3.0
            y, g = range_r((0.5, 1.0), g)
            assert 0.5 <= abs(y.a0) < 1.0

    def test_negative_bounds_use_magnitude(self, generator):
        """Bounds are taken by absolute value."""
        x, _ = range_r((-2.0, -3.0), generator)
        assert 2.0 <= abs(x.a0) <= 3.0

    def test_cliffor_bounds(self, generator):
        """Cliffor bounds use their largest singular value."""
        x, _ = range_v3((R(1), V3(0, 0, 2)), generator)
        assert 1.0 <= magnitude(x) < 2.0

    def test_both_signs_drawn(self, generator):
        """Scalars get a random sign."""
        g = generator
        signs = set()
        for _ in range(50):
            x, g = rand_r(g)
            signs.add(x.a0 > 0)
        assert signs == {True, False}

    def test_multigrade_parts_bounded(self, generator):
        """Each part of a multi-grade value is drawn from the range."""
        g = generator
        for _ in range(20):
            x, g = RANGE_GENERATORS[Variant.PV]((1.0, 2.0), g)
            assert 1.0 <= abs(x.a0) < 2.0
            assert 1.0 <= magnitude(to_v3(x)) < 2.0

    def test_random_cliffor(self, generator):
        """random_cliffor picks among all variants."""
        g = generator
        seen = set()
        for _ in range(200):
            x, g = random_cliffor((0.0, 1.0), g)
            seen.add(x.variant)
        assert seen == set(Variant)

    def test_random_from_config(self):
        """The configured magnitude range is honored."""
        config = Config(seed=3, random_magnitude=(4.0, 5.0))
        g = make_generator(config)
        for _ in range(20):
            x, g = random_from_config(config, g)
            assert magnitude(x) <= 4 * 5.0


# =============================================================================
# Special elements
# =============================================================================

class TestSpecialElements:
    """Tests for unit vectors, projectors and nilpotents."""

    def test_unit_vector(self, generator):
        """rand_unit_v3 has unit length."""
        u, _ = rand_unit_v3(generator)
        assert magnitude(u) == pytest.approx(1.0)

    def test_projector_idempotent(self, generator, close):
        """p*p == p and p*bar(p) == 0."""
        g = generator
        for _ in range(10):
            p, g = rand_projector(g)
            close(p * p, p, atol=1e-14)
            close(p * bar(p), R(0), atol=1e-14)

    def test_nilpotent_squares_to_zero(self, generator, close):
        """rand_nilpotent squares to zero."""
        g = generator
        for _ in range(10):
            n, g = rand_nilpotent(g)
            assert n.variant is Variant.BPV
            assert magnitude(n) > 0.5
            close(n * n, R(0), atol=1e-14)

    def test_torch_generator_type(self):
        """make_generator returns a torch.Generator."""
        assert isinstance(make_generator(Config(seed=1)), torch.Generator)
