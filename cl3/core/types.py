"""
Type aliases for cl3.

Cliffor values are immutable, so most signatures only need a handful of
aliases: the raw coefficient tuples and the callables handed to the
spectral engine.

Function Conventions:
=====================

CliffordFunction
----------------
Any ``Cliffor -> Cliffor`` map. The spectral engine applies such a function
to the eigenvalues of a value, which are always of variant R, I or C, so a
CliffordFunction only needs closed forms for those three sub-algebras.

ComplexFunction
---------------
A ``complex -> complex`` scalar kernel, evaluated with IEEE semantics.

Example:
    from cl3.algebra.elementary import exp, exp_prime
    from cl3.algebra.spectral import spectraldcmp

    y = spectraldcmp(exp, exp_prime, x)
"""

from typing import Callable, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..algebra.cliffor import Cliffor


# =============================================================================
# Basic Type Aliases
# =============================================================================

# Coefficients of a single variant, in field order
Coefficients = Tuple[float, ...]

# Full 8-component embedding (a0, a1, a2, a3, a23, a31, a12, a123)
Components = Tuple[float, float, float, float, float, float, float, float]

# Grade support encoded as a 4-bit mask, bit k set when grade k is present
GradeMask = int


# =============================================================================
# Function Aliases
# =============================================================================

CliffordFunction = Callable[["Cliffor"], "Cliffor"]

ComplexFunction = Callable[[complex], complex]

RealFunction = Callable[[float], float]
