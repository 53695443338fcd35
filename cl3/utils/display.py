"""
Human-readable rendering of cliffors.

Basis labels follow the Pauli matrix picture of Cl(3,0):

    a0   -> e0        a23  -> i*e1
    a1   -> e1        a31  -> i*e2
    a2   -> e2        a12  -> i*e3
    a3   -> e3        a123 -> i*e0

``show_octave`` output can be pasted into Octave after defining

    e0 = [1,0;0,1]; e1=[0,1;1,0]; e2=[0,-i;i,0]; e3=[1,0;0,-1];
"""

from typing import Optional

from ..algebra.cliffor import Cliffor
from ..core.constants import COMPONENT_ORDER
from .config import Config


BASIS_LABELS = {
    "a0": "*e0",
    "a1": "*e1",
    "a2": "*e2",
    "a3": "*e3",
    "a23": "i*e1",
    "a31": "i*e2",
    "a12": "i*e3",
    "a123": "i*e0",
}


def show_octave(x: Cliffor) -> str:
    """
    Octave expression for ``x``, one term per stored coefficient.

    Example:
        >>> show_octave(PV(1, 2, 0, 0))
        '1.0*e0 + 2.0*e1 + 0.0*e2 + 0.0*e3'
    """
    terms = [
        f"{coeff!r}{BASIS_LABELS[name]}"
        for name, coeff in zip(x.variant.fields, x.coefficients)
    ]
    return " + ".join(terms)


def format_cliffor(x: Cliffor, config: Optional[Config] = None) -> str:
    """
    Format ``x`` over the full embedding using display settings.

    Terms are listed in ``COMPONENT_ORDER``. With ``display_zero_terms``
    disabled, exact zeros are skipped; a value with no remaining term prints
    as ``0.0*e0``.
    """
    config = config or Config()
    terms = []
    for name, coeff in zip(COMPONENT_ORDER, x.components):
        if coeff == 0 and not config.display_zero_terms:
            continue
        if config.display_precision is None:
            text = repr(coeff)
        else:
            text = f"{coeff:.{config.display_precision}g}"
        terms.append(f"{text}{BASIS_LABELS[name]}")
    if not terms:
        return "0.0*e0"
    return " + ".join(terms)
