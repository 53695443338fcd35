"""
Elementary transcendental functions of cliffors.

R, I and C arguments have closed forms: real functions on R, the analytic
continuation on I, and principal-branch complex functions on C (numpy's
C99 branch cuts). Real arguments outside a real function's domain continue
into C (``log(R(-1)) == C(0, pi)``, ``sqrt(R(-4)) == I(2)``,
``asin(R(2))`` is complex).

Every other variant is evaluated through :func:`cl3.algebra.spectral.spectraldcmp`
and the result is reduced. The derivative of each function, needed by the
Jordan form for nilpotent content, is listed in ``DERIVATIVES``.
"""

import math
from typing import Dict, NamedTuple, Optional

from ..core import numerics as nm
from ..core.constants import HALF_PI, PI, TOL
from ..core.types import ComplexFunction, CliffordFunction
from .arithmetic import recip, recip_prime
from .cliffor import Cliffor, C, I, R, as_cliffor
from .norm import reduce
from .spectral import spectraldcmp
from .variants import Variant


pi = R(math.pi)


def _complex(kernel: ComplexFunction, z: complex) -> Cliffor:
    w = kernel(z)
    return C(w.real, w.imag)


def _as_complex(x: Cliffor) -> complex:
    return complex(x.a0, x.a123)


def _lift(fun: CliffordFunction, x: Cliffor) -> Cliffor:
    return reduce(spectraldcmp(fun, DERIVATIVES[fun.__name__].derivative, x))


# =============================================================================
# Exponential, logarithm, square root
# =============================================================================

def exp(x: Cliffor) -> Cliffor:
    """Exponential. ``exp(I(pi))`` is ``C(-1, ~0)``."""
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.exp(x.a0))
    if x.variant is Variant.I:
        return C(nm.cos(x.a123), nm.sin(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.cexp, _as_complex(x))
    return _lift(exp, x)


def log(x: Cliffor) -> Cliffor:
    """
    Principal logarithm.

    Negative reals map to ``C(log|a0|, pi)`` and pure imaginaries to
    ``C(log|a123|, +-pi/2)``.
    """
    x = as_cliffor(x)
    if x.variant is Variant.R:
        if x.a0 >= 0:
            return R(nm.log(x.a0))
        return C(nm.log(-x.a0), PI)
    if x.variant is Variant.I:
        return C(nm.log(abs(x.a123)), nm.sign(x.a123) * HALF_PI)
    if x.variant is Variant.C:
        return _complex(nm.clog, _as_complex(x))
    return _lift(log, x)


def sqrt(x: Cliffor) -> Cliffor:
    """Principal square root. ``sqrt(R(-a))`` is ``I(sqrt(a))``."""
    x = as_cliffor(x)
    if x.variant is Variant.R:
        if x.a0 >= 0:
            return R(nm.sqrt(x.a0))
        return I(nm.sqrt(-x.a0))
    if x.variant is Variant.I:
        a123 = x.a123
        u = nm.sqrt(abs(a123) / 2)
        v = 0.0 if u < TOL else nm.div(abs(a123), 2 * u)
        return C(u, -v if a123 < 0 else v)
    if x.variant is Variant.C:
        return _complex(nm.csqrt, _as_complex(x))
    return _lift(sqrt, x)


def log_base(base: Cliffor, x: Cliffor) -> Cliffor:
    """Logarithm of ``x`` in ``base``: ``log(x) / log(base)``."""
    return log(x) / log(base)


# =============================================================================
# Trigonometric functions
# =============================================================================

def sin(x: Cliffor) -> Cliffor:
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.sin(x.a0))
    if x.variant is Variant.I:
        return I(nm.sinh(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.csin, _as_complex(x))
    return _lift(sin, x)


def cos(x: Cliffor) -> Cliffor:
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.cos(x.a0))
    if x.variant is Variant.I:
        return R(nm.cosh(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.ccos, _as_complex(x))
    return _lift(cos, x)


def tan(x: Cliffor) -> Cliffor:
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.tan(x.a0))
    if x.variant is Variant.I:
        return I(nm.tanh(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.ctan, _as_complex(x))
    return _lift(tan, x)


def asin(x: Cliffor) -> Cliffor:
    """
    Principal arcsine.

    Reals outside [-1, 1] continue into C. On the cuts (-inf, -1] and
    [1, inf) of the real axis the sign of the imaginary part follows the
    sign of the input's imaginary zero, as in C99 ``casin``.
    """
    x = as_cliffor(x)
    if x.variant is Variant.R:
        if -1 <= x.a0 <= 1:
            return R(nm.asin(x.a0))
        return _complex(nm.casin, complex(x.a0, 0.0))
    if x.variant is Variant.I:
        return I(nm.asinh(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.casin, _as_complex(x))
    return _lift(asin, x)


def acos(x: Cliffor) -> Cliffor:
    """Principal arccosine; reals outside [-1, 1] continue into C."""
    x = as_cliffor(x)
    if x.variant is Variant.R:
        if -1 <= x.a0 <= 1:
            return R(nm.acos(x.a0))
        return _complex(nm.cacos, complex(x.a0, 0.0))
    if x.variant is Variant.I:
        return C(HALF_PI, -nm.asinh(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.cacos, _as_complex(x))
    return _lift(acos, x)


def atan(x: Cliffor) -> Cliffor:
    """
    Principal arctangent.

    The cuts run along the imaginary axis beyond +-i, so ``atan(I(a))`` is
    ``I(atanh(a))`` for |a| <= 1 and complex otherwise.
    """
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.atan(x.a0))
    if x.variant is Variant.I:
        if abs(x.a123) <= 1:
            return I(nm.atanh(x.a123))
        return _complex(nm.catan, complex(0.0, x.a123))
    if x.variant is Variant.C:
        return _complex(nm.catan, _as_complex(x))
    return _lift(atan, x)


# =============================================================================
# Hyperbolic functions
# =============================================================================

def sinh(x: Cliffor) -> Cliffor:
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.sinh(x.a0))
    if x.variant is Variant.I:
        return I(nm.sin(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.csinh, _as_complex(x))
    return _lift(sinh, x)


def cosh(x: Cliffor) -> Cliffor:
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.cosh(x.a0))
    if x.variant is Variant.I:
        return R(nm.cos(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.ccosh, _as_complex(x))
    return _lift(cosh, x)


def tanh(x: Cliffor) -> Cliffor:
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.tanh(x.a0))
    if x.variant is Variant.I:
        return I(nm.tan(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.ctanh, _as_complex(x))
    return _lift(tanh, x)


def asinh(x: Cliffor) -> Cliffor:
    """Principal inverse hyperbolic sine; cuts along the imaginary axis beyond +-i."""
    x = as_cliffor(x)
    if x.variant is Variant.R:
        return R(nm.asinh(x.a0))
    if x.variant is Variant.I:
        if abs(x.a123) <= 1:
            return I(nm.asin(x.a123))
        return _complex(nm.casinh, complex(0.0, x.a123))
    if x.variant is Variant.C:
        return _complex(nm.casinh, _as_complex(x))
    return _lift(asinh, x)


def acosh(x: Cliffor) -> Cliffor:
    """Principal inverse hyperbolic cosine; reals below 1 continue into C."""
    x = as_cliffor(x)
    if x.variant is Variant.R:
        if x.a0 >= 1:
            return R(nm.acosh(x.a0))
        return _complex(nm.cacosh, complex(x.a0, 0.0))
    if x.variant in (Variant.I, Variant.C):
        return _complex(nm.cacosh, _as_complex(x))
    return _lift(acosh, x)


def atanh(x: Cliffor) -> Cliffor:
    """Principal inverse hyperbolic tangent; reals outside [-1, 1] continue into C."""
    x = as_cliffor(x)
    if x.variant is Variant.R:
        if -1 <= x.a0 <= 1:
            return R(nm.atanh(x.a0))
        return _complex(nm.catanh, complex(x.a0, 0.0))
    if x.variant is Variant.I:
        return I(nm.atan(x.a123))
    if x.variant is Variant.C:
        return _complex(nm.catanh, _as_complex(x))
    return _lift(atanh, x)


# =============================================================================
# Derivatives
# =============================================================================

def exp_prime(x: Cliffor) -> Cliffor:
    return exp(x)


def log_prime(x: Cliffor) -> Cliffor:
    return recip(x)


def sqrt_prime(x: Cliffor) -> Cliffor:
    return 0.5 * recip(sqrt(x))


def sin_prime(x: Cliffor) -> Cliffor:
    return cos(x)


def cos_prime(x: Cliffor) -> Cliffor:
    return -sin(x)


def tan_prime(x: Cliffor) -> Cliffor:
    sec = recip(cos(x))
    return sec * sec


def asin_prime(x: Cliffor) -> Cliffor:
    return recip(sqrt(1 - x * x))


def acos_prime(x: Cliffor) -> Cliffor:
    return -recip(sqrt(1 - x * x))


def atan_prime(x: Cliffor) -> Cliffor:
    return recip(1 + x * x)


def sinh_prime(x: Cliffor) -> Cliffor:
    return cosh(x)


def cosh_prime(x: Cliffor) -> Cliffor:
    return sinh(x)


def tanh_prime(x: Cliffor) -> Cliffor:
    sech = recip(cosh(x))
    return sech * sech


def asinh_prime(x: Cliffor) -> Cliffor:
    return recip(sqrt(x * x + 1))


def acosh_prime(x: Cliffor) -> Cliffor:
    return recip(sqrt(x - 1) * sqrt(x + 1))


def atanh_prime(x: Cliffor) -> Cliffor:
    return recip(1 - x * x)


class Derivative(NamedTuple):
    """Companion derivative of an elementary function and where it blows up."""

    function: CliffordFunction
    derivative: CliffordFunction
    poles: Optional[str]


DERIVATIVES: Dict[str, Derivative] = {
    "recip": Derivative(recip, recip_prime, "0"),
    "exp": Derivative(exp, exp_prime, None),
    "log": Derivative(log, log_prime, "0"),
    "sqrt": Derivative(sqrt, sqrt_prime, "0"),
    "sin": Derivative(sin, sin_prime, None),
    "cos": Derivative(cos, cos_prime, None),
    "tan": Derivative(tan, tan_prime, "pi/2 + n*pi"),
    "asin": Derivative(asin, asin_prime, "+-1"),
    "acos": Derivative(acos, acos_prime, "+-1"),
    "atan": Derivative(atan, atan_prime, "+-i"),
    "sinh": Derivative(sinh, sinh_prime, None),
    "cosh": Derivative(cosh, cosh_prime, None),
    "tanh": Derivative(tanh, tanh_prime, "i*(pi/2 + n*pi)"),
    "asinh": Derivative(asinh, asinh_prime, "+-i"),
    "acosh": Derivative(acosh, acosh_prime, "+-1"),
    "atanh": Derivative(atanh, atanh_prime, "+-1"),
}
