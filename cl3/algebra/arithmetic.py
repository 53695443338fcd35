"""
Arithmetic on cliffors: addition, geometric product, reciprocal, powers
and the singular value ordering.

The geometric product is evaluated block by block over the grades present in
each operand. Writing an operand as a complex scalar plus a complex vector,
x = a0 + i a123 + a + i p with a = (a1, a2, a3) and p = (a23, a31, a12),
the sixteen grade blocks are

    (0,0) s   += a0 b0          (2,0) bv  += b0 p
    (0,1) v   += a0 b           (2,1) i   += p.b,  v -= p x b
    (0,2) bv  += a0 q           (2,2) s   -= p.q,  bv -= p x q
    (0,3) i   += a0 t           (2,3) v   -= t p
    (1,0) v   += b0 a           (3,0) i   += a123 b0
    (1,1) s   += a.b, bv += a x b
    (1,2) i   += a.q, v  -= a x q
    (1,3) bv  += t a            (3,1) bv  += a123 b
                                (3,2) v   -= a123 q
                                (3,3) s   -= a123 t

Only blocks whose grades are present in both operands contribute, so the
arithmetic of every one of the 121 variant pairs matches its closed form.
The result is stored in the variant given by ``PRODUCT_TABLE``.
"""

import math
from typing import List, Optional, Tuple, Union

from ..core import numerics as nm
from .cliffor import Cliffor, R, V3, BV, I, H, C, ODD, as_cliffor, bar, to_r
from .variants import PRODUCT_TABLE, SUM_TABLE, Variant


_Accumulator = List[Optional[float]]


# =============================================================================
# Addition and negation
# =============================================================================

def add(x: Cliffor, y: Cliffor) -> Cliffor:
    """
    Component-wise sum.

    The result lives in the smallest variant spanning the grades of both
    operands. No reduction is applied, so exact zeros are kept.
    """
    target = SUM_TABLE[(x.variant, y.variant)]
    lhs = dict(zip(x.variant.indices, x.coefficients))
    rhs = dict(zip(y.variant.indices, y.coefficients))

    coefficients = []
    for idx in target.indices:
        if idx in lhs and idx in rhs:
            coefficients.append(lhs[idx] + rhs[idx])
        elif idx in lhs:
            coefficients.append(lhs[idx])
        else:
            coefficients.append(rhs.get(idx, 0.0))
    return Cliffor(target, coefficients)


def neg(x: Cliffor) -> Cliffor:
    return -x


def sub(x: Cliffor, y: Cliffor) -> Cliffor:
    return add(x, -y)


# =============================================================================
# Geometric product
# =============================================================================

def _acc(out: _Accumulator, idx: int, value: float) -> None:
    out[idx] = value if out[idx] is None else out[idx] + value


def _dot(a, b) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a, b) -> Tuple[float, float, float]:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _acc_vec(out: _Accumulator, offset: int, vec) -> None:
    for k in range(3):
        _acc(out, offset + k, vec[k])


def _acc_neg_vec(out: _Accumulator, offset: int, vec) -> None:
    for k in range(3):
        _acc(out, offset + k, -vec[k])


def geometric_product(x: Cliffor, y: Cliffor) -> Cliffor:
    """
    Geometric product x * y.

    Args:
        x: Left operand
        y: Right operand

    Returns:
        Product in the variant given by ``PRODUCT_TABLE[(x.variant, y.variant)]``
    """
    target = PRODUCT_TABLE[(x.variant, y.variant)]
    ma, mb = x.variant.mask, y.variant.mask
    A, B = x.components, y.components

    a0, a, p, s = A[0], A[1:4], A[4:7], A[7]
    b0, b, q, t = B[0], B[1:4], B[4:7], B[7]

    # Slots: 0 scalar, 1-3 vector, 4-6 bivector, 7 pseudoscalar
    out: _Accumulator = [None] * 8

    if ma & 0b0001:
        if mb & 0b0001:
            _acc(out, 0, a0 * b0)
        if mb & 0b0010:
            _acc_vec(out, 1, [a0 * bk for bk in b])
        if mb & 0b0100:
            _acc_vec(out, 4, [a0 * qk for qk in q])
        if mb & 0b1000:
            _acc(out, 7, a0 * t)

    if ma & 0b0010:
        if mb & 0b0001:
            _acc_vec(out, 1, [ak * b0 for ak in a])
        if mb & 0b0010:
            _acc(out, 0, _dot(a, b))
            _acc_vec(out, 4, _cross(a, b))
        if mb & 0b0100:
            _acc(out, 7, _dot(a, q))
            _acc_neg_vec(out, 1, _cross(a, q))
        if mb & 0b1000:
            _acc_vec(out, 4, [ak * t for ak in a])

    if ma & 0b0100:
        if mb & 0b0001:
            _acc_vec(out, 4, [pk * b0 for pk in p])
        if mb & 0b0010:
            _acc(out, 7, _dot(p, b))
            _acc_neg_vec(out, 1, _cross(p, b))
        if mb & 0b0100:
            _acc(out, 0, -_dot(p, q))
            _acc_neg_vec(out, 4, _cross(p, q))
        if mb & 0b1000:
            _acc_neg_vec(out, 1, [pk * t for pk in p])

    if ma & 0b1000:
        if mb & 0b0001:
            _acc(out, 7, s * b0)
        if mb & 0b0010:
            _acc_vec(out, 4, [s * bk for bk in b])
        if mb & 0b0100:
            _acc_neg_vec(out, 1, [s * qk for qk in q])
        if mb & 0b1000:
            _acc(out, 0, -(s * t))

    return Cliffor(target, (0.0 if out[idx] is None else out[idx] for idx in target.indices))


# =============================================================================
# Reciprocal and division
# =============================================================================

def _sq(values) -> float:
    return sum(c * c for c in values)


def recip(x: Cliffor) -> Cliffor:
    """
    Multiplicative inverse.

    R, H and C are division algebras and V3, BV, I and ODD invert through
    their squared norm. PV and TPV use ``x * bar(x)``, which is a pure scalar
    for them. BPV and APS are not guaranteed invertible and go through the
    spectral decomposition. A zero-norm input yields Inf/NaN coefficients.
    """
    x = as_cliffor(x)
    variant = x.variant

    if variant is Variant.R:
        return R(nm.recip(x.a0))
    if variant is Variant.V3:
        sqmag = _sq(x.coefficients)
        return V3(*(nm.div(c, sqmag) for c in x.coefficients))
    if variant is Variant.BV:
        sqmag = _sq(x.coefficients)
        return BV(*(-nm.div(c, sqmag) for c in x.coefficients))
    if variant is Variant.I:
        sqmag = x.a123 * x.a123
        return I(-nm.div(x.a123, sqmag))
    if variant in (Variant.PV, Variant.TPV):
        x_bar = bar(x)
        return recip(to_r(x * x_bar)) * x_bar
    if variant is Variant.H:
        sqmag = _sq(x.coefficients)
        return H(nm.div(x.a0, sqmag),
                 -nm.div(x.a23, sqmag), -nm.div(x.a31, sqmag), -nm.div(x.a12, sqmag))
    if variant is Variant.C:
        sqmag = _sq(x.coefficients)
        return C(nm.div(x.a0, sqmag), -nm.div(x.a123, sqmag))
    if variant is Variant.ODD:
        sqmag = _sq(x.coefficients)
        return ODD(nm.div(x.a1, sqmag), nm.div(x.a2, sqmag), nm.div(x.a3, sqmag),
                   -nm.div(x.a123, sqmag))

    from .norm import reduce
    from .spectral import spectraldcmp
    return reduce(spectraldcmp(recip, recip_prime, x))


def recip_prime(x: Cliffor) -> Cliffor:
    """Derivative of ``recip``: -recip(x * x). Pole at 0."""
    return -recip(x * x)


def divide(x: Cliffor, y: Cliffor) -> Cliffor:
    """Right division x * recip(y)."""
    return geometric_product(x, recip(y))


# =============================================================================
# Powers
# =============================================================================

def power(x: Cliffor, n: Union[int, Cliffor]) -> Cliffor:
    """
    Raise ``x`` to the power ``n``.

    Non-negative integers use repeated squaring, negative integers invert
    first, and any other exponent is evaluated as ``exp(log(x) * n)``.
    """
    x = as_cliffor(x)
    if isinstance(n, int) and not isinstance(n, bool):
        if n < 0:
            return power(recip(x), -n)
        result = R(1.0)
        base = x
        while n:
            if n & 1:
                result = geometric_product(result, base)
            n >>= 1
            if n:
                base = geometric_product(base, base)
        return result

    from .elementary import exp, log
    return exp(log(x) * as_cliffor(n))


# =============================================================================
# Ordering
# =============================================================================

def _cmp(a: float, b: float) -> int:
    # NaN orders after every number and equal to itself
    a_nan, b_nan = math.isnan(a), math.isnan(b)
    if a_nan or b_nan:
        return int(a_nan) - int(b_nan)
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def compare(x: Cliffor, y: Cliffor) -> int:
    """
    Total preorder on cliffors.

    Compares the largest singular value first and breaks ties on the
    smallest singular value. Returns -1, 0 or 1.

    Example:
        >>> compare(R(2), R(-3))
        -1
    """
    from .norm import lsv, magnitude
    order = _cmp(magnitude(x), magnitude(y))
    if order != 0:
        return order
    return _cmp(lsv(x).a0, lsv(y).a0)
