"""
IEEE-754 scalar kernels.

Python's ``math`` and ``cmath`` modules raise on domain errors and overflow
(``math.log(0.0)``, ``math.exp(1000.0)``, ``1.0 / 0.0``). The algebra must
instead propagate NaN and Inf like plain binary64 arithmetic, so every
transcendental or division evaluated on a coefficient goes through the
kernels below. They evaluate with numpy under ``errstate(all="ignore")`` and
hand back built-in ``float`` / ``complex`` values.

Complex kernels follow numpy's (C99) principal branches and branch cuts.
"""

import numpy as np

from .types import ComplexFunction, RealFunction


def _real_kernel(ufunc: np.ufunc) -> RealFunction:
    """Wrap a numpy ufunc as a float -> float kernel."""

    def kernel(x: float) -> float:
        with np.errstate(all="ignore"):
            return float(ufunc(np.float64(x)))

    kernel.__name__ = ufunc.__name__
    kernel.__doc__ = f"IEEE {ufunc.__name__} of a float."
    return kernel


def _complex_kernel(ufunc: np.ufunc) -> ComplexFunction:
    """Wrap a numpy ufunc as a complex -> complex kernel."""

    def kernel(z: complex) -> complex:
        with np.errstate(all="ignore"):
            return complex(ufunc(np.complex128(z)))

    kernel.__name__ = "c" + ufunc.__name__
    kernel.__doc__ = f"IEEE complex {ufunc.__name__} (principal branch)."
    return kernel


# =============================================================================
# Real kernels
# =============================================================================

sqrt = _real_kernel(np.sqrt)
exp = _real_kernel(np.exp)
log = _real_kernel(np.log)
sin = _real_kernel(np.sin)
cos = _real_kernel(np.cos)
tan = _real_kernel(np.tan)
asin = _real_kernel(np.arcsin)
acos = _real_kernel(np.arccos)
atan = _real_kernel(np.arctan)
sinh = _real_kernel(np.sinh)
cosh = _real_kernel(np.cosh)
tanh = _real_kernel(np.tanh)
asinh = _real_kernel(np.arcsinh)
acosh = _real_kernel(np.arccosh)
atanh = _real_kernel(np.arctanh)
sign = _real_kernel(np.sign)


def div(a: float, b: float) -> float:
    """IEEE division: ``1/0 -> inf``, ``0/0 -> nan``."""
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(a), np.float64(b)))


def recip(a: float) -> float:
    """IEEE reciprocal."""
    return div(1.0, a)


# =============================================================================
# Complex kernels
# =============================================================================

csqrt = _complex_kernel(np.sqrt)
cexp = _complex_kernel(np.exp)
clog = _complex_kernel(np.log)
csin = _complex_kernel(np.sin)
ccos = _complex_kernel(np.cos)
ctan = _complex_kernel(np.tan)
casin = _complex_kernel(np.arcsin)
cacos = _complex_kernel(np.arccos)
catan = _complex_kernel(np.arctan)
csinh = _complex_kernel(np.sinh)
ccosh = _complex_kernel(np.cosh)
ctanh = _complex_kernel(np.tanh)
casinh = _complex_kernel(np.arcsinh)
cacosh = _complex_kernel(np.arccosh)
catanh = _complex_kernel(np.arctanh)
