"""
The Algebra of Physical Space, Cl(3,0).

Provides:
- Cliffor: immutable value type in one of eleven grade-specialized variants
- Arithmetic: addition, geometric product, reciprocal, powers, ordering
- Norms: largest/smallest singular value, signum, grade reduction
- Spectral engine: projectors, eigenvalues, Jordan form and boosts
- Elementary functions: exp, log, sqrt, trigonometric, hyperbolic and inverses
"""

from .variants import (
    Variant,
    minimal_variant,
    mask_of_grades,
    SUM_TABLE,
    PRODUCT_TABLE,
)
from .cliffor import (
    Cliffor,
    # Constructors
    R, V3, BV, I, PV, H, C, BPV, ODD, TPV, APS,
    from_components,
    as_cliffor,
    # Projections
    to_r, to_v3, to_bv, to_i, to_pv, to_h, to_c, to_bpv, to_odd, to_tpv, to_aps,
    # Conjugations
    bar,
    dag,
    # Basis elements
    e0, e1, e2, e3, e23, e31, e12, e123,
    mI,
)
from .arithmetic import (
    add,
    sub,
    neg,
    geometric_product,
    recip,
    recip_prime,
    divide,
    power,
    compare,
)
from .norm import (
    abs_,
    magnitude,
    lsv,
    signum,
    reduce,
    is_reduced,
)
from .spectral import (
    SpectralState,
    project,
    proj_eigs,
    eigvals,
    is_colinear,
    has_nilpotent,
    boost2colinear,
    classify,
    spectral_path,
    spectraldcmp,
    spectraldcmp_special,
    jordan,
)
from .elementary import (
    pi,
    exp, log, sqrt, log_base,
    sin, cos, tan, asin, acos, atan,
    sinh, cosh, tanh, asinh, acosh, atanh,
    DERIVATIVES,
)

__all__ = [
    # Variants
    "Variant",
    "minimal_variant",
    "mask_of_grades",
    "SUM_TABLE",
    "PRODUCT_TABLE",
    # Cliffor
    "Cliffor",
    "R", "V3", "BV", "I", "PV", "H", "C", "BPV", "ODD", "TPV", "APS",
    "from_components",
    "as_cliffor",
    "to_r", "to_v3", "to_bv", "to_i", "to_pv", "to_h", "to_c",
    "to_bpv", "to_odd", "to_tpv", "to_aps",
    "bar",
    "dag",
    "e0", "e1", "e2", "e3", "e23", "e31", "e12", "e123",
    "mI",
    # Arithmetic
    "add",
    "sub",
    "neg",
    "geometric_product",
    "recip",
    "recip_prime",
    "divide",
    "power",
    "compare",
    # Norms
    "abs_",
    "magnitude",
    "lsv",
    "signum",
    "reduce",
    "is_reduced",
    # Spectral
    "SpectralState",
    "project",
    "proj_eigs",
    "eigvals",
    "is_colinear",
    "has_nilpotent",
    "boost2colinear",
    "classify",
    "spectral_path",
    "spectraldcmp",
    "spectraldcmp_special",
    "jordan",
    # Elementary functions
    "pi",
    "exp", "log", "sqrt", "log_base",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
    "DERIVATIVES",
]
