"""
The eleven specialized grade combinations of Cl(3,0).

Each variant of a cliffor stores only the coefficients of the grades it
spans. Grade support is encoded as a 4-bit mask (bit k set when grade k is
present):

    R    0b0001   a0
    V3   0b0010   a1 a2 a3
    BV   0b0100   a23 a31 a12
    I    0b1000   a123
    PV   0b0011   a0 a1 a2 a3
    H    0b0101   a0 a23 a31 a12
    C    0b1001   a0 a123
    BPV  0b0110   a1 a2 a3 a23 a31 a12
    ODD  0b1010   a1 a2 a3 a123
    TPV  0b1100   a23 a31 a12 a123
    APS  0b1111   all eight

Masks with grades {0,1,2}, {0,1,3}, {0,2,3} and {1,2,3} have no dedicated
variant and are carried by APS.

The result variant of every binary operation is looked up in dense 11x11
tables built at import time from the grade masks.
"""

from enum import Enum
from typing import Dict, Tuple

from ..core.constants import COMPONENT_ORDER
from ..core.types import GradeMask


class Variant(Enum):
    """Tag of a cliffor: its grade mask and its field names."""

    R = (0b0001, ("a0",))
    V3 = (0b0010, ("a1", "a2", "a3"))
    BV = (0b0100, ("a23", "a31", "a12"))
    I = (0b1000, ("a123",))
    PV = (0b0011, ("a0", "a1", "a2", "a3"))
    H = (0b0101, ("a0", "a23", "a31", "a12"))
    C = (0b1001, ("a0", "a123"))
    BPV = (0b0110, ("a1", "a2", "a3", "a23", "a31", "a12"))
    ODD = (0b1010, ("a1", "a2", "a3", "a123"))
    TPV = (0b1100, ("a23", "a31", "a12", "a123"))
    APS = (0b1111, COMPONENT_ORDER)

    def __init__(self, mask: GradeMask, fields: Tuple[str, ...]):
        self.mask = mask
        self.fields = fields
        # Positions of the fields inside the full 8-component embedding
        self.indices = tuple(COMPONENT_ORDER.index(f) for f in fields)

    @property
    def grades(self) -> Tuple[int, ...]:
        """Grades present in this variant, ascending."""
        return tuple(k for k in range(4) if self.mask & (1 << k))

    @property
    def size(self) -> int:
        """Number of stored coefficients."""
        return len(self.fields)

    def contains(self, other: "Variant") -> bool:
        """True when every grade of ``other`` is supported by this variant."""
        return (self.mask | other.mask) == self.mask

    def __repr__(self) -> str:
        return f"Variant.{self.name}"


def _build_minimal_table() -> Dict[GradeMask, Variant]:
    table = {}
    for mask in range(16):
        candidates = [v for v in Variant if (v.mask | mask) == v.mask]
        # Fewest stored coefficients wins; declaration order breaks ties (R before I)
        table[mask] = min(candidates, key=lambda v: v.size)
    return table


_MINIMAL: Dict[GradeMask, Variant] = _build_minimal_table()


def minimal_variant(mask: GradeMask) -> Variant:
    """
    Smallest variant spanning the grades of ``mask``.

    An empty mask (the zero value) maps to R.
    """
    return _MINIMAL[mask & 0b1111]


def mask_of_grades(*grades: int) -> GradeMask:
    """Grade mask with bit k set for each grade k given."""
    mask = 0
    for k in grades:
        mask |= 1 << k
    return mask


def product_grades(a: int, b: int) -> GradeMask:
    """
    Grades produced by the geometric product of a grade-a and a grade-b blade.

    In three dimensions these are |a-b|, |a-b|+2, ... up to min(a+b, 6-a-b).
    """
    mask = 0
    for k in range(abs(a - b), min(a + b, 6 - a - b) + 1, 2):
        mask |= 1 << k
    return mask


def product_mask(mask_a: GradeMask, mask_b: GradeMask) -> GradeMask:
    mask = 0
    for a in range(4):
        if not mask_a & (1 << a):
            continue
        for b in range(4):
            if mask_b & (1 << b):
                mask |= product_grades(a, b)
    return mask


# Dense result-variant tables, one entry per ordered variant pair
SUM_TABLE: Dict[Tuple[Variant, Variant], Variant] = {
    (a, b): minimal_variant(a.mask | b.mask) for a in Variant for b in Variant
}

PRODUCT_TABLE: Dict[Tuple[Variant, Variant], Variant] = {
    (a, b): minimal_variant(product_mask(a.mask, b.mask)) for a in Variant for b in Variant
}
