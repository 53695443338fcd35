"""
Spectral decomposition of cliffors.

A function f of a real, imaginary or complex argument is lifted to a general
cliffor x by splitting x along a pair of complementary projectors:

    p     = (1 + signum(direction)) / 2
    p_bar = bar(p)
    f(x)  = f(eig1) * p + f(eig2) * p_bar

with eigenvalues eig1 = 2 <p x p> and eig2 = 2 <p_bar x p_bar>, where <.> keeps
the real, imaginary or complex part depending on the sub-algebra the
eigenvalues live in.

Biparavector content adds two special cases:
- vector and bivector parts orthogonal with equal magnitude (nilpotent-like):
  the projectors are singular and the Jordan form f(eig) + f'(eig) N is used;
- neither colinear nor nilpotent: a boost makes the parts colinear first,
  f(x) = boost * f(d) * bar(boost) with d = bar(boost) * x * boost.

The evaluation is a small state machine with at most two transitions:

    REDUCED -> DIRECT
    REDUCED -> COLINEAR
    REDUCED -> NILPOTENT
    REDUCED -> NEEDS_BOOST -> COLINEAR
"""

import logging
from enum import Enum
from typing import Callable, Tuple

from ..core.constants import TOL
from ..core.types import CliffordFunction
from .cliffor import (
    Cliffor,
    PV,
    R,
    as_cliffor,
    bar,
    mI,
    to_bpv,
    to_bv,
    to_c,
    to_i,
    to_r,
    to_v3,
)
from .norm import magnitude, reduce, signum
from .variants import Variant


logger = logging.getLogger(__name__)


# Projection that extracts an eigenvalue from p * x * p
Specializer = Callable[[Cliffor], Cliffor]


class SpectralState(Enum):
    """States visited by :func:`spectraldcmp`."""

    REDUCED = "reduced"
    DIRECT = "direct"
    COLINEAR = "colinear"
    NILPOTENT = "nilpotent"
    NEEDS_BOOST = "needs_boost"


# Which eigenvalue sub-algebra each reduced variant decomposes over
_SPECIALIZERS = {
    Variant.V3: to_r,
    Variant.PV: to_r,
    Variant.BV: to_i,
    Variant.TPV: to_i,
    Variant.H: to_c,
    Variant.ODD: to_c,
    Variant.BPV: to_c,
    Variant.APS: to_c,
}

# Eigenvalue part seen by the Jordan form
_JORDAN_SPECIALIZERS = {
    Variant.BPV: to_r,
    Variant.APS: to_c,
}

_DIRECT_VARIANTS = (Variant.R, Variant.I, Variant.C)
_MIXED_VARIANTS = (Variant.BPV, Variant.APS)


# =============================================================================
# Classification predicates
# =============================================================================

def _parts(x: Cliffor) -> Tuple[Cliffor, Cliffor]:
    """Vector part and bivector part turned into a vector."""
    return to_v3(x), mI * to_bv(x)


def is_colinear(x: Cliffor) -> bool:
    """
    True when the vector and bivector parts are both nonzero and parallel
    (or antiparallel) within ``TOL``.
    """
    v, w = _parts(as_cliffor(x))
    return (magnitude(v) != 0 and magnitude(w) != 0
            and magnitude(to_bv(signum(v) * signum(w))) <= TOL)


def has_nilpotent(x: Cliffor) -> bool:
    """
    True when the vector and bivector parts are both nonzero, orthogonal and
    of equal magnitude within ``TOL``: the biparavector part is nilpotent.
    """
    x = as_cliffor(x)
    v, w = _parts(x)
    return (magnitude(v) != 0 and magnitude(w) != 0
            and magnitude(to_r(signum(v) * signum(w))) <= TOL
            and abs(magnitude(v) - magnitude(to_bv(x))) <= TOL)


def classify(x: Cliffor) -> SpectralState:
    """
    Terminal or intermediate state of an already reduced cliffor.

    R, I and C are handled by the function itself (DIRECT). Single-direction
    variants always decompose over projectors (COLINEAR). BPV and APS depend
    on how their vector and bivector parts relate.
    """
    variant = x.variant
    if variant in _DIRECT_VARIANTS:
        return SpectralState.DIRECT
    if variant not in _MIXED_VARIANTS:
        return SpectralState.COLINEAR
    if has_nilpotent(x):
        return SpectralState.NILPOTENT
    if is_colinear(x):
        return SpectralState.COLINEAR
    return SpectralState.NEEDS_BOOST


def spectral_path(x: Cliffor) -> Tuple[SpectralState, ...]:
    """
    States visited after reduction when decomposing ``x``.

    The boosted form is colinear by construction, so the path holds at most
    two states.
    """
    state = classify(reduce(as_cliffor(x)))
    if state is SpectralState.NEEDS_BOOST:
        return (state, SpectralState.COLINEAR)
    return (state,)


# =============================================================================
# Projectors and eigenvalues
# =============================================================================

_E3_PROJECTOR = PV(0.5, 0.0, 0.0, 0.5)


def _projector(direction: Cliffor) -> Cliffor:
    return 0.5 * (1 + signum(direction))


def project(x: Cliffor) -> Cliffor:
    """
    Projector built from the vector content of ``x``.

    Values without a direction (R, I, C) get the e3 projector. A BPV whose
    vector and bivector directions cancel falls back to the vector direction.
    """
    x = reduce(as_cliffor(x))
    variant = x.variant

    if variant in _DIRECT_VARIANTS:
        return _E3_PROJECTOR
    if variant is Variant.V3:
        return _projector(x)
    if variant in (Variant.BV, Variant.H, Variant.TPV):
        return _projector(to_v3(mI * to_bv(x)))
    if variant in (Variant.PV, Variant.ODD):
        return _projector(to_v3(x))
    if variant is Variant.BPV:
        v, w = to_v3(x), to_v3(mI * to_bv(x))
        if magnitude(v + w) <= TOL:
            return _projector(v)
        return _projector(v + w)
    return project(to_bpv(x))


def proj_eigs(to_special: Specializer, x: Cliffor) -> Tuple[Cliffor, Cliffor, Cliffor, Cliffor]:
    """
    Complementary projectors and eigenvalues of a colinear cliffor.

    Returns:
        Tuple ``(p, p_bar, eig1, eig2)``
    """
    p = project(x)
    p_bar = bar(p)
    eig1 = 2 * to_special(p * x * p)
    eig2 = 2 * to_special(p_bar * x * p_bar)
    return p, p_bar, eig1, eig2


def spectraldcmp_special(to_special: Specializer, fun: CliffordFunction, x: Cliffor) -> Cliffor:
    """Eigen reconstruction ``fun(eig1) * p + fun(eig2) * p_bar``."""
    p, p_bar, eig1, eig2 = proj_eigs(to_special, x)
    return fun(eig1) * p + fun(eig2) * p_bar


def jordan(to_special: Specializer, fun: CliffordFunction, fun_prime: CliffordFunction,
           x: Cliffor) -> Cliffor:
    """Jordan form ``fun(eig) + fun_prime(eig) * N`` for nilpotent biparavector content N."""
    eig = to_special(x)
    return fun(eig) + fun_prime(eig) * to_bpv(x)


def boost2colinear(x: Cliffor) -> Tuple[Cliffor, Cliffor, Cliffor]:
    """
    Boost that makes the vector and bivector parts of ``x`` colinear.

    The boost is perpendicular to both parts, like the drift frame of an
    electromagnetic field. With ``d = bar(boost) * x * boost``, ``x`` is
    recovered as ``boost * d * bar(boost)``.

    Returns:
        Tuple ``(boost, d, boost_bar)``
    """
    from .elementary import atanh, exp

    v = to_v3(x)
    bv = mI * to_bv(x)
    invariant = (2 * mI * to_bv(v * bv)) / to_r(v * v + bv * bv)
    boost = spectraldcmp_special(to_r, lambda e: exp(atanh(e) / 4), invariant)
    boost_bar = bar(boost)
    d = boost_bar * x * boost
    return boost, d, boost_bar


def eigvals(x: Cliffor) -> Tuple[Cliffor, Cliffor]:
    """
    The two eigenvalues of ``x``.

    Useful to check whether ``x`` sits on a pole of a function. Nilpotent
    content does not change the eigenvalues: a nilpotent BPV has ``(0, 0)``
    and an APS with nilpotent content has its complex part twice.
    """
    x = reduce(as_cliffor(x))
    state = classify(x)

    if state is SpectralState.DIRECT:
        return x, x
    if state is SpectralState.NILPOTENT:
        if x.variant is Variant.BPV:
            return R(0.0), R(0.0)
        return to_c(x), to_c(x)
    if state is SpectralState.NEEDS_BOOST:
        _, x, _ = boost2colinear(x)
        to_special = to_c
    else:
        to_special = _SPECIALIZERS[x.variant]

    _, _, eig1, eig2 = proj_eigs(to_special, x)
    return eig1, eig2


# =============================================================================
# Decomposition
# =============================================================================

def _name(fun: CliffordFunction) -> str:
    return getattr(fun, "__name__", repr(fun))


def spectraldcmp(fun: CliffordFunction, fun_prime: CliffordFunction, x: Cliffor) -> Cliffor:
    """
    Apply ``fun`` to a cliffor through its spectral decomposition.

    Args:
        fun: Function defined on R, I and C values
        fun_prime: Derivative of ``fun``, used by the Jordan form
        x: Argument

    Returns:
        ``fun(x)``, unreduced
    """
    x = reduce(as_cliffor(x))
    state = classify(x)

    if state is SpectralState.DIRECT:
        logger.debug("spectraldcmp %s: %s", _name(fun), state.name)
        return fun(x)

    if state is SpectralState.NILPOTENT:
        logger.debug("spectraldcmp %s: %s", _name(fun), state.name)
        return jordan(_JORDAN_SPECIALIZERS[x.variant], fun, fun_prime, x)

    if state is SpectralState.NEEDS_BOOST:
        logger.debug("spectraldcmp %s: %s -> %s", _name(fun),
                     state.name, SpectralState.COLINEAR.name)
        boost, d, boost_bar = boost2colinear(x)
        return boost * spectraldcmp_special(to_c, fun, d) * boost_bar

    logger.debug("spectraldcmp %s: %s", _name(fun), state.name)
    return spectraldcmp_special(_SPECIALIZERS[x.variant], fun, x)
