"""
Centralized constants for cl3.

This module defines the numeric constants and component layout shared by
the whole library. Using these constants keeps the tolerance used by
classification and reduction consistent everywhere.

Usage:
    from cl3.core.constants import TOL, COMPONENT_ORDER

    if magnitude(x) <= TOL:
        ...
"""

import math

# =============================================================================
# Numeric Constants
# =============================================================================

# Unit roundoff of IEEE-754 binary64 (half of sys.float_info.epsilon)
EPS: float = 1.1102230246251565e-16

# Absolute tolerance used by reduce, is_colinear and has_nilpotent
TOL: float = 128 * EPS

PI: float = math.pi

HALF_PI: float = math.pi / 2


# =============================================================================
# Component Layout
# =============================================================================

# Order of the full 8-component embedding (APS)
COMPONENT_ORDER = ("a0", "a1", "a2", "a3", "a23", "a31", "a12", "a123")

NUM_COMPONENTS: int = 8


# =============================================================================
# Binary Layout
# =============================================================================

# One cliffor is 8 consecutive float64 values
CLIFFOR_NBYTES: int = 8 * 8

CLIFFOR_ALIGNMENT: int = 8
