"""
cl3: the Algebra of Physical Space Cl(3,0)

Double-precision arithmetic and transcendental functions over the
8-dimensional geometric algebra of three-dimensional space.

Key Features:
- Eleven grade-specialized variants (R, V3, BV, I, PV, H, C, BPV, ODD, TPV, APS)
- Geometric product with result variants precomputed per variant pair
- Largest/smallest singular values and tolerance-based grade reduction
- exp, log, sqrt, trigonometric and hyperbolic functions (and inverses) for
  every element, via spectral decomposition with a Jordan-form fallback
- 64-byte binary layout compatible with numpy and torch

API Design:
- Values are immutable; every operation returns a new Cliffor
- Python numbers are promoted to R in arithmetic
- Numerical domain errors propagate as NaN/Inf, never as exceptions

Example:
    >>> from cl3 import V3, H, exp, I, pi
    >>> V3(1, 0, 0) * V3(0, 1, 0) == H(0, 0, 0, 1)
    True
    >>> abs(V3(3, 4, 0))
    R(5.0)
"""

__version__ = "0.1.0"
__author__ = "cl3 Contributors"

from . import core
from . import algebra
from . import utils

from .algebra import *  # noqa: F401,F403
from .algebra import __all__ as _algebra_all

__all__ = [
    "core",
    "algebra",
    "utils",
] + list(_algebra_all)
