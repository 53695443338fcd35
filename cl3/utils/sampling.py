"""
Random cliffors for testing and experiments.

Every generator threads a ``torch.Generator`` explicitly: it takes the
generator and returns ``(value, generator)``, with the generator advanced.
The same seed therefore reproduces the same sequence of values.

Sampling scheme:
- Magnitudes are uniform in [|lo|, |hi|); bounds may be floats or cliffors
  (their largest singular value is used).
- Scalar grades (R, I) get a random sign.
- Vector grades (V3, BV) get a random direction in spherical coordinates,
  theta in [0, pi) and phi in [0, 2 pi).
- Multi-grade variants are sums of independently drawn single-grade parts,
  APS being PV + TPV.
"""

import math
from typing import Callable, Dict, Optional, Tuple, Union

import torch

from ..algebra.cliffor import BV, Cliffor, I, R, V3, mI, to_bpv, to_bv, to_v3
from ..algebra.norm import magnitude, signum
from ..algebra.variants import Variant
from .config import Config


Bound = Union[float, Cliffor]
Range = Tuple[Bound, Bound]
Sample = Tuple[Cliffor, torch.Generator]

DEFAULT_RANGE: Range = (0.0, 1.0)


def make_generator(config: Optional[Config] = None) -> torch.Generator:
    """
    Create a CPU generator seeded from ``config.seed``.

    Without a seed the generator draws a nondeterministic one.
    """
    g = torch.Generator()
    if config is not None and config.seed is not None:
        g.manual_seed(config.seed)
    else:
        g.seed()
    return g


# =============================================================================
# Helpers
# =============================================================================

def _uniform(lo: float, hi: float, g: torch.Generator) -> float:
    u = torch.rand(1, generator=g, dtype=torch.float64).item()
    return lo + (hi - lo) * u


def _bound(value: Bound) -> float:
    if isinstance(value, Cliffor):
        return magnitude(value)
    return abs(float(value))


def _magnitude(rng: Range, g: torch.Generator) -> float:
    lo, hi = rng
    return _uniform(_bound(lo), _bound(hi), g)


def _scalar(con: Callable[[float], Cliffor], rng: Range, g: torch.Generator) -> Sample:
    mag = _magnitude(rng, g)
    positive = torch.randint(0, 2, (1,), generator=g).item() == 1
    return con(mag if positive else -mag), g


def _direction(g: torch.Generator) -> Tuple[float, float, float]:
    theta = _uniform(0.0, math.pi, g)
    phi = _uniform(0.0, 2 * math.pi, g)
    return (math.sin(theta) * math.cos(phi),
            math.sin(theta) * math.sin(phi),
            math.cos(theta))


def _vector(con: Callable[[float, float, float], Cliffor], rng: Range, g: torch.Generator) -> Sample:
    mag = _magnitude(rng, g)
    x, y, z = _direction(g)
    return con(mag * x, mag * y, mag * z), g


# =============================================================================
# Range generators
# =============================================================================

def range_r(rng: Range, g: torch.Generator) -> Sample:
    """Real scalar with magnitude in ``rng`` and a random sign."""
    return _scalar(R, rng, g)


def range_v3(rng: Range, g: torch.Generator) -> Sample:
    """Vector with magnitude in ``rng`` and a random direction."""
    return _vector(V3, rng, g)


def range_bv(rng: Range, g: torch.Generator) -> Sample:
    return _vector(BV, rng, g)


def range_i(rng: Range, g: torch.Generator) -> Sample:
    return _scalar(I, rng, g)


def _sum_of(first, second) -> Callable[[Range, torch.Generator], Sample]:
    def generate(rng: Range, g: torch.Generator) -> Sample:
        a, g = first(rng, g)
        b, g = second(rng, g)
        return a + b, g
    return generate


range_pv = _sum_of(range_r, range_v3)
range_h = _sum_of(range_r, range_bv)
range_c = _sum_of(range_r, range_i)
range_bpv = _sum_of(range_v3, range_bv)
range_odd = _sum_of(range_v3, range_i)
range_tpv = _sum_of(range_bv, range_i)
range_aps = _sum_of(range_pv, range_tpv)


RANGE_GENERATORS: Dict[Variant, Callable[[Range, torch.Generator], Sample]] = {
    Variant.R: range_r,
    Variant.V3: range_v3,
    Variant.BV: range_bv,
    Variant.I: range_i,
    Variant.PV: range_pv,
    Variant.H: range_h,
    Variant.C: range_c,
    Variant.BPV: range_bpv,
    Variant.ODD: range_odd,
    Variant.TPV: range_tpv,
    Variant.APS: range_aps,
}


# =============================================================================
# Unit-range generators
# =============================================================================

def rand_r(g: torch.Generator) -> Sample:
    return range_r(DEFAULT_RANGE, g)


def rand_v3(g: torch.Generator) -> Sample:
    return range_v3(DEFAULT_RANGE, g)


def rand_bv(g: torch.Generator) -> Sample:
    return range_bv(DEFAULT_RANGE, g)


def rand_i(g: torch.Generator) -> Sample:
    return range_i(DEFAULT_RANGE, g)


def rand_pv(g: torch.Generator) -> Sample:
    return range_pv(DEFAULT_RANGE, g)


def rand_h(g: torch.Generator) -> Sample:
    return range_h(DEFAULT_RANGE, g)


def rand_c(g: torch.Generator) -> Sample:
    return range_c(DEFAULT_RANGE, g)


def rand_bpv(g: torch.Generator) -> Sample:
    return range_bpv(DEFAULT_RANGE, g)


def rand_odd(g: torch.Generator) -> Sample:
    return range_odd(DEFAULT_RANGE, g)


def rand_tpv(g: torch.Generator) -> Sample:
    return range_tpv(DEFAULT_RANGE, g)


def rand_aps(g: torch.Generator) -> Sample:
    return range_aps(DEFAULT_RANGE, g)


# =============================================================================
# Special elements
# =============================================================================

def rand_unit_v3(g: torch.Generator) -> Sample:
    """Unit vector with a random direction."""
    x, y, z = _direction(g)
    return V3(x, y, z), g


def rand_projector(g: torch.Generator) -> Sample:
    """Projector ``(1 + u) / 2`` along a random unit vector u."""
    u, g = rand_unit_v3(g)
    return 0.5 + 0.5 * u, g


def rand_nilpotent(g: torch.Generator) -> Sample:
    """
    Nilpotent BPV with a random orientation.

    Built as ``n * p`` for a random projector p and a unit vector n normal
    to the projector's direction; the result squares to zero.
    """
    p, g = rand_projector(g)
    v, g = rand_unit_v3(g)
    normal = signum(mI * to_bv(to_v3(p) * v))
    return to_bpv(normal * p), g


def random_cliffor(rng: Range, g: torch.Generator) -> Sample:
    """
    Cliffor of a uniformly chosen variant with magnitudes drawn from ``rng``.
    """
    variants = list(Variant)
    idx = torch.randint(0, len(variants), (1,), generator=g).item()
    return RANGE_GENERATORS[variants[idx]](rng, g)


def random_from_config(config: Config, g: torch.Generator) -> Sample:
    """``random_cliffor`` over ``config.random_magnitude``."""
    return random_cliffor(config.random_magnitude, g)
