"""
Example 01: Rotations, Boosts and Electromagnetic Fields

Demonstrates:
1. Rotating a vector with the exponential of a bivector.
2. Boosting a paravector (a spacetime event) with the exponential of a vector.
3. Functions of a general field F = E + iB through spectral decomposition,
   including the nilpotent (null field) case.
4. Writing the results to a binary file and reading them back.
"""

import logging
import math

from cl3 import BV, BPV, PV, V3, bar, dag, eigvals, exp, log, spectral_path
from cl3.utils import Config, configure_logging, format_cliffor, load, save

logging.basicConfig(format="%(name)s %(levelname)s: %(message)s")
config = Config(display_precision=6, display_zero_terms=False, log_level="DEBUG")
configure_logging(config)

# =============================================================================
# 1. Rotation
# =============================================================================

# Quarter turn in the e1e2 plane: R = exp(-e12 theta / 2)
theta = math.pi / 2
rotor = exp(BV(0, 0, -theta / 2))
v = V3(1, 0, 0)
rotated = rotor * v * bar(rotor)
print("rotated e1:", format_cliffor(rotated.reduce(), config))

# =============================================================================
# 2. Boost
# =============================================================================

# Boost along e1 with rapidity 0.5: L = exp(e1 rapidity / 2), x' = L x dag(L)
rapidity = 0.5
boost = exp(V3(rapidity / 2, 0, 0))
event = PV(1, 0, 0, 0)
boosted = boost * event * dag(boost)
print("boosted event:", format_cliffor(boosted.reduce(), config))

# =============================================================================
# 3. Fields
# =============================================================================

fields = {
    "colinear": BPV(1, 0, 0, 2, 0, 0),
    "crossed": BPV(1, 0, 0, 0, 0.5, 0),
    "null": BPV(1, 0, 0, 0, 1, 0),
}

results = []
for name, field in fields.items():
    path = " -> ".join(state.name for state in spectral_path(field))
    eig1, eig2 = eigvals(field)
    print(f"{name}: path {path}, eigenvalues {eig1!r}, {eig2!r}")
    exp_field = exp(field)
    print(f"  exp(F)       = {format_cliffor(exp_field, config)}")
    print(f"  log(exp(F))  = {format_cliffor(log(exp_field), config)}")
    results.append(exp_field)

# =============================================================================
# 4. Storage
# =============================================================================

save("output/fields.bin", results)
for original, restored in zip(results, load("output/fields.bin")):
    assert original == restored
print(f"Stored and restored {len(results)} cliffors")
