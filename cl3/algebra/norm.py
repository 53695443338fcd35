"""
Singular values, signum and grade reduction.

Under the isomorphism Cl(3,0) ~ M(2,C) every cliffor has two singular
values. ``abs_`` returns the largest and ``lsv`` the smallest; both are
computed in closed form per variant so single-grade values never square
more than they must.
"""

from ..core import numerics as nm
from ..core.constants import TOL
from .cliffor import (
    Cliffor,
    R,
    as_cliffor,
    to_bpv,
    to_bv,
    to_c,
    to_h,
    to_i,
    to_odd,
    to_pv,
    to_r,
    to_tpv,
    to_v3,
)
from .variants import Variant


def _sumsq(*values: float) -> float:
    return sum(v * v for v in values)


def _singular_value(x: Cliffor, sign: float) -> float:
    """Largest (sign=+1) or smallest (sign=-1) singular value as a float."""
    variant = x.variant
    a0, a1, a2, a3, a23, a31, a12, a123 = x.components

    if variant is Variant.R:
        return abs(a0)
    if variant is Variant.I:
        return abs(a123)
    if variant in (Variant.V3, Variant.BV, Variant.H, Variant.C, Variant.ODD):
        return nm.sqrt(_sumsq(*x.coefficients))
    if variant is Variant.PV:
        vsq = _sumsq(a1, a2, a3)
        return nm.sqrt(a0 * a0 + vsq + sign * 2 * abs(a0) * nm.sqrt(vsq))
    if variant is Variant.TPV:
        bvsq = _sumsq(a23, a31, a12)
        return nm.sqrt(bvsq + a123 * a123 + sign * 2 * abs(a123) * nm.sqrt(bvsq))
    if variant is Variant.BPV:
        cross = _sumsq(a1 * a31 - a2 * a23, a1 * a12 - a3 * a23, a2 * a12 - a3 * a31)
        return nm.sqrt(_sumsq(*x.coefficients) + sign * 2 * nm.sqrt(cross))

    # APS
    cross = _sumsq(a0 * a1 + a123 * a23, a0 * a2 + a123 * a31, a0 * a3 + a123 * a12,
                   a2 * a12 - a3 * a31, a3 * a23 - a1 * a12, a1 * a31 - a2 * a23)
    return nm.sqrt(_sumsq(*x.coefficients) + sign * 2 * nm.sqrt(cross))


def magnitude(x: Cliffor) -> float:
    """Largest singular value of ``x`` as a float."""
    return _singular_value(as_cliffor(x), 1.0)


def abs_(x: Cliffor) -> Cliffor:
    """
    Largest singular value (spectral norm) of ``x``, as an R.

    For a paravector this is |a0| + |a|, for a vector the Euclidean length.
    """
    return R(magnitude(x))


def lsv(x: Cliffor) -> Cliffor:
    """
    Littlest singular value of ``x``, as an R.

    Zero exactly when ``x`` is not invertible. Equals ``abs_`` for R, V3,
    BV, I, H, C and ODD.
    """
    return R(_singular_value(as_cliffor(x), -1.0))


def signum(x: Cliffor) -> Cliffor:
    """
    Unit cliffor in the direction of ``x``, so that ``abs(x) * signum(x) == x``.

    Only an exact zero norm maps to ``R(0)``; tiny values are still normalized.
    """
    x = as_cliffor(x)
    mag = magnitude(x)
    if mag == 0:
        return R(0.0)
    return x * R(nm.recip(mag))


def _small(x: Cliffor) -> bool:
    return magnitude(x) <= TOL


# Two-part variants: (first part, second part) projections
_PARTS = {
    Variant.PV: (to_r, to_v3),
    Variant.H: (to_r, to_bv),
    Variant.C: (to_r, to_i),
    Variant.BPV: (to_v3, to_bv),
    Variant.ODD: (to_v3, to_i),
    Variant.TPV: (to_bv, to_i),
}

# APS checks, in order: (part that may vanish, complementary remainder)
_APS_SPLITS = (
    (to_c, to_bpv),
    (to_bpv, to_c),
    (to_h, to_odd),
    (to_odd, to_h),
    (to_pv, to_tpv),
    (to_tpv, to_pv),
)


def reduce(x: Cliffor) -> Cliffor:
    """
    Drop grades whose norm is within ``TOL`` of zero.

    A value whose total norm is within tolerance becomes ``R(0)``. The result
    never spans more grades than the input, and ``reduce`` is idempotent.
    """
    x = as_cliffor(x)
    variant = x.variant

    if variant is Variant.R:
        return x
    if _small(x):
        return R(0.0)
    if variant in (Variant.V3, Variant.BV, Variant.I):
        return x

    if variant in _PARTS:
        first, second = _PARTS[variant]
        if _small(first(x)):
            return second(x)
        if _small(second(x)):
            return first(x)
        return x

    for part, remainder in _APS_SPLITS:
        if _small(part(x)):
            return reduce(remainder(x))
    return x


def is_reduced(x: Cliffor) -> bool:
    """True when ``reduce`` leaves ``x`` in the same variant."""
    x = as_cliffor(x)
    return reduce(x).variant is x.variant
