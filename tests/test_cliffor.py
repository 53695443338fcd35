"""
Tests for the Cliffor value type.

Covers construction of the eleven variants, coefficient access over the full
embedding, projections, conjugations, structural equality and hashing.
"""

import math
import pickle

import pytest

from cl3.algebra.cliffor import (
    Cliffor,
    R, V3, BV, I, PV, H, C, BPV, ODD, TPV, APS,
    PROJECTIONS,
    as_cliffor,
    bar,
    dag,
    from_components,
    mI,
    to_aps,
    to_bpv,
    to_c,
    to_h,
    to_r,
    to_v3,
    e1, e2, e3, e23, e31, e12, e123,
)
from cl3.algebra.variants import Variant


FULL = APS(1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0)


# =============================================================================
# Construction
# =============================================================================

class TestConstruction:
    """Tests for constructors and coefficient access."""

    def test_constructors_tag_variant(self):
        """Each constructor produces its own variant."""
        cases = [
            (R(1), Variant.R),
            (V3(1, 2, 3), Variant.V3),
            (BV(1, 2, 3), Variant.BV),
            (I(1), Variant.I),
            (PV(1, 2, 3, 4), Variant.PV),
            (H(1, 2, 3, 4), Variant.H),
            (C(1, 2), Variant.C),
            (BPV(1, 2, 3, 4, 5, 6), Variant.BPV),
            (ODD(1, 2, 3, 4), Variant.ODD),
            (TPV(1, 2, 3, 4), Variant.TPV),
            (FULL, Variant.APS),
        ]
        for value, variant in cases:
            assert value.variant is variant

    def test_coefficients_are_floats(self):
        """Integer arguments are stored as floats."""
        v = V3(1, 2, 3)
        assert v.coefficients == (1.0, 2.0, 3.0)
        assert all(type(c) is float for c in v.coefficients)

    def test_missing_grades_read_as_zero(self):
        """Fields outside the variant's support read as 0.0."""
        h = H(1, 2, 3, 4)
        assert h.a0 == 1.0
        assert h.a23 == 2.0 and h.a31 == 3.0 and h.a12 == 4.0
        assert h.a1 == 0.0 and h.a2 == 0.0 and h.a3 == 0.0 and h.a123 == 0.0

    def test_components_full_embedding(self):
        """components lists all eight coefficients in canonical order."""
        assert ODD(1, 2, 3, 4).components == (0.0, 1.0, 2.0, 3.0, 0.0, 0.0, 0.0, 4.0)
        assert TPV(1, 2, 3, 4).components == (0.0, 0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0)

    def test_wrong_coefficient_count_rejected(self):
        """A variant rejects the wrong number of coefficients."""
        with pytest.raises(ValueError, match="expects 3 coefficients"):
            Cliffor(Variant.V3, (1.0, 2.0))

    def test_from_components_requires_8(self):
        """from_components REQUIRES exactly 8 components."""
        with pytest.raises(ValueError, match="Expected 8 components"):
            from_components([0.0] * 7)
        with pytest.raises(ValueError, match="Expected 8 components"):
            from_components([0.0] * 9)
        assert from_components(range(8)).variant is Variant.APS

    def test_immutable(self):
        """Cliffors cannot be mutated."""
        v = V3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.a1 = 5.0
        with pytest.raises(AttributeError):
            v._coefficients = (0.0, 0.0, 0.0)

    def test_pickle_roundtrip(self):
        """Cliffors survive pickling."""
        restored = pickle.loads(pickle.dumps(FULL))
        assert restored == FULL
        assert restored.variant is Variant.APS

    def test_basis_elements(self):
        """Named basis elements land on the right components."""
        assert e1().components[1] == 1.0
        assert e2().components[2] == 1.0
        assert e3(2.0).components[3] == 2.0
        assert e23().components[4] == 1.0
        assert e31().components[5] == 1.0
        assert e12().components[6] == 1.0
        assert e123() == I(1)

    def test_as_cliffor_promotes_numbers(self):
        """Real numbers become R; other objects are rejected."""
        assert as_cliffor(3) == R(3)
        assert as_cliffor(2.5).variant is Variant.R
        with pytest.raises(TypeError):
            as_cliffor("1.0")

    def test_repr_shows_constructor(self):
        """repr reads like the constructor call."""
        assert repr(C(1, -2)) == "C(1.0, -2.0)"


# =============================================================================
# Projections
# =============================================================================

class TestProjections:
    """Tests for the lossy to_* casts."""

    def test_projection_keeps_only_target_grades(self):
        """Projection zeros every grade outside the target."""
        assert to_r(FULL) == R(1)
        assert to_v3(FULL) == V3(2, 3, 4)
        assert to_c(FULL) == C(1, 8)
        assert to_bpv(FULL) == BPV(2, 3, 4, 5, 6, 7)
        assert to_h(FULL) == H(1, 5, 6, 7)

    def test_projection_idempotent(self):
        """to_X(to_X(v)) == to_X(v) for every projection."""
        for variant, proj in PROJECTIONS.items():
            once = proj(FULL)
            assert proj(once) == once
            assert once.variant is variant

    def test_subset_projection_lossless(self):
        """Projecting into a superset variant keeps every coefficient."""
        h = H(1, 2, 3, 4)
        assert to_aps(h) == h
        assert to_aps(h).components == h.components
        assert to_h(to_aps(h)).coefficients == h.coefficients

    def test_projection_into_disjoint_variant_is_zero(self):
        """Projecting onto grades the value lacks gives zeros."""
        assert to_v3(R(5)).coefficients == (0.0, 0.0, 0.0)


# =============================================================================
# Conjugations
# =============================================================================

class TestConjugation:
    """Tests for bar (Clifford conjugate) and dag (complex conjugate)."""

    def test_bar_negates_grades_1_and_2(self):
        """bar flips vector and bivector signs."""
        assert bar(FULL).components == (1.0, -2.0, -3.0, -4.0, -5.0, -6.0, -7.0, 8.0)

    def test_dag_negates_grades_2_and_3(self):
        """dag flips bivector and trivector signs."""
        assert dag(FULL).components == (1.0, 2.0, 3.0, 4.0, -5.0, -6.0, -7.0, -8.0)

    def test_conjugates_keep_variant(self):
        """Conjugation never changes the variant."""
        for value in (R(1), V3(1, 2, 3), TPV(1, 2, 3, 4), FULL):
            assert bar(value).variant is value.variant
            assert dag(value).variant is value.variant

    def test_involutions(self, samples):
        """bar(bar(v)) == v and dag(dag(v)) == v."""
        for value in samples.values():
            assert bar(bar(value)) == value
            assert dag(dag(value)) == value

    def test_method_forms(self):
        """Method forms delegate to the module functions."""
        assert FULL.bar() == bar(FULL)
        assert FULL.dag() == dag(FULL)

    def test_times_bar_is_complex(self, samples):
        """x * bar(x) has only scalar and pseudoscalar content."""
        for value in samples.values():
            product = value * bar(value)
            _, a1, a2, a3, a23, a31, a12, _ = product.components
            for c in (a1, a2, a3, a23, a31, a12):
                assert abs(c) < 1e-15


# =============================================================================
# Equality
# =============================================================================

class TestEquality:
    """Tests for structural equality across variants."""

    def test_zero_equal_across_variants(self):
        """R 0 == I 0 and every zero compares equal."""
        assert R(0) == I(0)
        assert V3(0, 0, 0) == APS(0, 0, 0, 0, 0, 0, 0, 0)
        assert R(0) == 0

    def test_embedding_equality(self):
        """Values equal over the full embedding are equal."""
        assert PV(1, 2, 0, 0) == APS(1, 2, 0, 0, 0, 0, 0, 0)
        assert PV(1, 2, 0, 0) != H(1, 0, 0, 0)

    def test_symmetric(self):
        """Equality is symmetric between variants."""
        a, b = C(1, 0), R(1)
        assert (a == b) and (b == a)

    def test_nan_never_equal(self):
        """NaN coefficients make equality false, even with itself."""
        x = R(math.nan)
        assert x != x
        assert not (x == x)
        assert V3(math.nan, 0, 0) != V3(math.nan, 0, 0)

    def test_signed_zero_equal(self):
        """IEEE equality treats -0.0 and 0.0 alike."""
        assert R(-0.0) == R(0.0)

    def test_hash_consistent_with_equality(self):
        """Equal values hash alike across variants."""
        assert hash(PV(1, 2, 0, 0)) == hash(APS(1, 2, 0, 0, 0, 0, 0, 0))
        assert len({R(1), C(1, 0), APS(1, 0, 0, 0, 0, 0, 0, 0)}) == 1

    def test_unsupported_comparison(self):
        """Comparing to a non-numeric object is simply unequal."""
        assert (V3(1, 2, 3) == "V3") is False

    def test_mI_turns_bivector_into_vector(self):
        """mI * BV(b) == V3(b)."""
        assert mI * BV(1, 2, 3) == V3(1, 2, 3)
