"""
Cliffor values of the Algebra of Physical Space Cl(3,0).

Cl(3,0) is an 8-dimensional real algebra organized by grade:
- Grade 0 (scalar): 1
- Grade 1 (vectors): e1, e2, e3
- Grade 2 (bivectors): e23, e31, e12
- Grade 3 (pseudoscalar): e123 = i

The metric signature is (3,0):
- e1^2 = e2^2 = e3^2 = +1
- e_i e_j = -e_j e_i for i != j
- e23, e31, e12 square to -1 and anticommute (a quaternion-like triple)
- i = e123 squares to -1 and commutes with everything

Component ordering of the full embedding:
[a0, a1, a2, a3, a23, a31, a12, a123]
 0   1   2   3   4    5    6    7

A cliffor is stored as one of eleven specialized variants (see
:mod:`cl3.algebra.variants`) holding only the coefficients of the grades it
spans. Values are immutable; every operation returns a new cliffor.
"""

from __future__ import annotations
from numbers import Real
from typing import Iterable, Optional, Union

from ..core.constants import NUM_COMPONENTS
from ..core.types import Coefficients, Components
from .variants import Variant


Operand = Union["Cliffor", Real]


class Cliffor:
    """
    An element of Cl(3,0) in one of its eleven specialized forms.

    Coefficients outside the variant's grade support read as ``0.0``, so any
    cliffor can be inspected through the full embedding regardless of how
    it is stored.

    The class supports:
    - Addition, subtraction and negation
    - Geometric product (``*``) and division (``x / y == x * recip(y)``)
    - Integer and real powers (``**``)
    - Largest singular value (``abs``)
    - Structural equality across variants and the singular value preorder
    """

    __slots__ = ("_variant", "_coefficients")

    def __init__(self, variant: Variant, coefficients: Iterable[float]):
        """
        Initialize a cliffor from its variant tag and coefficients.

        Args:
            variant: The specialized form
            coefficients: One float per field of ``variant``, in field order
        """
        coefficients = tuple(float(c) for c in coefficients)
        if len(coefficients) != variant.size:
            raise ValueError(
                f"{variant.name} expects {variant.size} coefficients, got {len(coefficients)}"
            )
        object.__setattr__(self, "_variant", variant)
        object.__setattr__(self, "_coefficients", coefficients)

    def __setattr__(self, name, value):
        raise AttributeError("Cliffor values are immutable")

    def __reduce__(self):
        return (Cliffor, (self._variant, self._coefficients))

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def coefficients(self) -> Coefficients:
        """Coefficients of this variant, in field order."""
        return self._coefficients

    @property
    def components(self) -> Components:
        """Full 8-component embedding (a0, a1, a2, a3, a23, a31, a12, a123)."""
        full = [0.0] * NUM_COMPONENTS
        for idx, c in zip(self._variant.indices, self._coefficients):
            full[idx] = c
        return tuple(full)

    # === Coefficient access ===

    def _get(self, idx: int) -> float:
        try:
            return self._coefficients[self._variant.indices.index(idx)]
        except ValueError:
            return 0.0

    @property
    def a0(self) -> float:
        """Scalar coefficient."""
        return self._get(0)

    @property
    def a1(self) -> float:
        return self._get(1)

    @property
    def a2(self) -> float:
        return self._get(2)

    @property
    def a3(self) -> float:
        return self._get(3)

    @property
    def a23(self) -> float:
        return self._get(4)

    @property
    def a31(self) -> float:
        return self._get(5)

    @property
    def a12(self) -> float:
        return self._get(6)

    @property
    def a123(self) -> float:
        """Pseudoscalar (imaginary) coefficient."""
        return self._get(7)

    # === Unary operations ===

    def bar(self) -> Cliffor:
        """Clifford conjugate: negates grades 1 and 2."""
        return bar(self)

    def dag(self) -> Cliffor:
        """Complex conjugate: negates grades 2 and 3."""
        return dag(self)

    def reduce(self) -> Cliffor:
        """Drop grades that are within tolerance of zero."""
        from .norm import reduce
        return reduce(self)

    def __neg__(self) -> Cliffor:
        return Cliffor(self._variant, (-c for c in self._coefficients))

    def __pos__(self) -> Cliffor:
        return self

    def __abs__(self) -> Cliffor:
        """Largest singular value, as an R."""
        from .norm import abs_
        return abs_(self)

    # === Binary operations ===

    def __add__(self, other: Operand) -> Cliffor:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import add
        return add(self, other)

    def __radd__(self, other: Operand) -> Cliffor:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import add
        return add(other, self)

    def __sub__(self, other: Operand) -> Cliffor:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import add
        return add(self, -other)

    def __rsub__(self, other: Operand) -> Cliffor:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import add
        return add(other, -self)

    def __mul__(self, other: Operand) -> Cliffor:
        """Geometric product."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import geometric_product
        return geometric_product(self, other)

    def __rmul__(self, other: Operand) -> Cliffor:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import geometric_product
        return geometric_product(other, self)

    def __truediv__(self, other: Operand) -> Cliffor:
        """Right division: x / y = x * recip(y)."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import divide
        return divide(self, other)

    def __rtruediv__(self, other: Operand) -> Cliffor:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import divide
        return divide(other, self)

    def __pow__(self, other: Operand) -> Cliffor:
        from .arithmetic import power
        if isinstance(other, int) and not isinstance(other, bool):
            return power(self, other)
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return power(self, other)

    def __rpow__(self, other: Operand) -> Cliffor:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import power
        return power(other, self)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        """Structural equality over the full embedding (IEEE float equality)."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        # Element-wise so NaN never compares equal to itself
        return all(a == b for a, b in zip(self.components, other.components))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.components)

    def __lt__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import compare
        return compare(self, other) < 0

    def __le__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import compare
        return compare(self, other) <= 0

    def __gt__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import compare
        return compare(self, other) > 0

    def __ge__(self, other: Operand) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from .arithmetic import compare
        return compare(self, other) >= 0

    def __repr__(self) -> str:
        args = ", ".join(repr(c) for c in self._coefficients)
        return f"{self._variant.name}({args})"


def _coerce(value: object) -> Optional[Cliffor]:
    """Promote real numbers to R; return None for unsupported operands."""
    if isinstance(value, Cliffor):
        return value
    if isinstance(value, Real):
        return R(value)
    return None


def as_cliffor(value: Operand) -> Cliffor:
    """Return ``value`` as a cliffor, promoting real numbers to R."""
    result = _coerce(value)
    if result is None:
        raise TypeError(f"Cannot interpret {type(value).__name__} as a Cliffor")
    return result


# === Constructors ===

def R(a0: float) -> Cliffor:
    """Real scalar (grade 0)."""
    return Cliffor(Variant.R, (a0,))


def V3(a1: float, a2: float, a3: float) -> Cliffor:
    """Vector (grade 1)."""
    return Cliffor(Variant.V3, (a1, a2, a3))


def BV(a23: float, a31: float, a12: float) -> Cliffor:
    """Bivector (grade 2)."""
    return Cliffor(Variant.BV, (a23, a31, a12))


def I(a123: float) -> Cliffor:
    """Imaginary pseudoscalar (grade 3)."""
    return Cliffor(Variant.I, (a123,))


def PV(a0: float, a1: float, a2: float, a3: float) -> Cliffor:
    """Paravector (grades 0 + 1)."""
    return Cliffor(Variant.PV, (a0, a1, a2, a3))


def H(a0: float, a23: float, a31: float, a12: float) -> Cliffor:
    """Quaternion, the even sub-algebra (grades 0 + 2)."""
    return Cliffor(Variant.H, (a0, a23, a31, a12))


def C(a0: float, a123: float) -> Cliffor:
    """Complex scalar sub-algebra (grades 0 + 3)."""
    return Cliffor(Variant.C, (a0, a123))


def BPV(a1: float, a2: float, a3: float, a23: float, a31: float, a12: float) -> Cliffor:
    """Biparavector (grades 1 + 2)."""
    return Cliffor(Variant.BPV, (a1, a2, a3, a23, a31, a12))


def ODD(a1: float, a2: float, a3: float, a123: float) -> Cliffor:
    """Odd part (grades 1 + 3)."""
    return Cliffor(Variant.ODD, (a1, a2, a3, a123))


def TPV(a23: float, a31: float, a12: float, a123: float) -> Cliffor:
    """Triparavector (grades 2 + 3)."""
    return Cliffor(Variant.TPV, (a23, a31, a12, a123))


def APS(a0: float, a1: float, a2: float, a3: float,
        a23: float, a31: float, a12: float, a123: float) -> Cliffor:
    """General element of the Algebra of Physical Space (all grades)."""
    return Cliffor(Variant.APS, (a0, a1, a2, a3, a23, a31, a12, a123))


def from_components(components: Iterable[float]) -> Cliffor:
    """
    Build an APS from the full 8-component embedding.

    Raises:
        ValueError: If ``components`` does not hold exactly 8 values
    """
    components = tuple(components)
    if len(components) != NUM_COMPONENTS:
        raise ValueError(f"Expected {NUM_COMPONENTS} components, got {len(components)}")
    return Cliffor(Variant.APS, components)


def from_full(variant: Variant, components: Components) -> Cliffor:
    """Keep the coefficients of ``variant`` from a full embedding, drop the rest."""
    return Cliffor(variant, (components[idx] for idx in variant.indices))


# === Projections (lossy casts between variants) ===

def project_to(cliffor: Cliffor, variant: Variant) -> Cliffor:
    """Project ``cliffor`` onto the grades of ``variant``."""
    if cliffor.variant is variant:
        return cliffor
    return from_full(variant, cliffor.components)


def to_r(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.R)


def to_v3(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.V3)


def to_bv(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.BV)


def to_i(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.I)


def to_pv(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.PV)


def to_h(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.H)


def to_c(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.C)


def to_bpv(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.BPV)


def to_odd(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.ODD)


def to_tpv(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.TPV)


def to_aps(cliffor: Cliffor) -> Cliffor:
    return project_to(cliffor, Variant.APS)


PROJECTIONS = {
    Variant.R: to_r,
    Variant.V3: to_v3,
    Variant.BV: to_bv,
    Variant.I: to_i,
    Variant.PV: to_pv,
    Variant.H: to_h,
    Variant.C: to_c,
    Variant.BPV: to_bpv,
    Variant.ODD: to_odd,
    Variant.TPV: to_tpv,
    Variant.APS: to_aps,
}


# === Conjugations ===

# Sign per component of the full embedding
_BAR_SIGNS = (1.0, -1.0, -1.0, -1.0, -1.0, -1.0, -1.0, 1.0)
_DAG_SIGNS = (1.0, 1.0, 1.0, 1.0, -1.0, -1.0, -1.0, -1.0)


def _conjugate(cliffor: Cliffor, signs) -> Cliffor:
    variant = cliffor.variant
    return Cliffor(
        variant,
        (-c if signs[idx] < 0 else c for idx, c in zip(variant.indices, cliffor.coefficients)),
    )


def bar(cliffor: Cliffor) -> Cliffor:
    """
    Clifford conjugate: vector and bivector grades are negated.

    ``x * bar(x)`` is a complex scalar (grades 0 and 3) for every x.
    """
    return _conjugate(cliffor, _BAR_SIGNS)


def dag(cliffor: Cliffor) -> Cliffor:
    """Complex conjugate: the imaginary grades (bivector, trivector) are negated."""
    return _conjugate(cliffor, _DAG_SIGNS)


# === Named elements ===

def e0(coeff: float = 1.0) -> Cliffor:
    """Scalar unit (the identity matrix in the Pauli representation)."""
    return R(coeff)


def e1(coeff: float = 1.0) -> Cliffor:
    return V3(coeff, 0.0, 0.0)


def e2(coeff: float = 1.0) -> Cliffor:
    return V3(0.0, coeff, 0.0)


def e3(coeff: float = 1.0) -> Cliffor:
    return V3(0.0, 0.0, coeff)


def e23(coeff: float = 1.0) -> Cliffor:
    return BV(coeff, 0.0, 0.0)


def e31(coeff: float = 1.0) -> Cliffor:
    return BV(0.0, coeff, 0.0)


def e12(coeff: float = 1.0) -> Cliffor:
    return BV(0.0, 0.0, coeff)


def e123(coeff: float = 1.0) -> Cliffor:
    """Pseudoscalar i."""
    return I(coeff)


# Negative pseudoscalar, turns a bivector into its dual vector: mI * BV(b) == V3(b)
mI = I(-1.0)
