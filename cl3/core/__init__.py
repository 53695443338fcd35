"""
Core module for cl3.

Contains:
- Constants: Tolerance, component ordering and binary layout sizes
- Types: Type aliases for coefficients and function signatures
- Numerics: IEEE-754 scalar kernels that propagate NaN/Inf instead of raising
"""

from .constants import (
    # Numeric constants
    EPS,
    TOL,
    PI,
    HALF_PI,
    # Component layout
    COMPONENT_ORDER,
    NUM_COMPONENTS,
    # Binary layout
    CLIFFOR_NBYTES,
    CLIFFOR_ALIGNMENT,
)

from .types import (
    Coefficients,
    Components,
    GradeMask,
    CliffordFunction,
    ComplexFunction,
    RealFunction,
)

__all__ = [
    # Constants
    "EPS",
    "TOL",
    "PI",
    "HALF_PI",
    "COMPONENT_ORDER",
    "NUM_COMPONENTS",
    "CLIFFOR_NBYTES",
    "CLIFFOR_ALIGNMENT",
    # Types
    "Coefficients",
    "Components",
    "GradeMask",
    "CliffordFunction",
    "ComplexFunction",
    "RealFunction",
]
