"""Generate the Cayley table of Cl(3,0) from blade algebra and compare it with geometric_product."""
import itertools

from cl3.algebra.cliffor import from_components
from cl3.algebra.arithmetic import geometric_product

# Basis element definitions
# Index: 0:1, 1:e1, 2:e2, 3:e3, 4:e23, 5:e31, 6:e12, 7:e123

# Map index to blade (tuple of indices with sign)
# e.g., e31 is stored as (3,1) meaning e3∧e1
index_to_blade = {
    0: (),           # scalar
    1: (1,),         # e1
    2: (2,),         # e2
    3: (3,),         # e3
    4: (2, 3),       # e23
    5: (3, 1),       # e31 (NOT e13!)
    6: (1, 2),       # e12
    7: (1, 2, 3),    # e123
}

# Metric: e1^2 = e2^2 = e3^2 = 1
metric = {1: 1, 2: 1, 3: 1}


def canonical_blade(blade):
    """Convert blade to canonical form (sorted, with sign)."""
    blade = list(blade)
    sign = 1
    for i in range(len(blade)):
        for j in range(len(blade) - 1 - i):
            if blade[j] > blade[j + 1]:
                blade[j], blade[j + 1] = blade[j + 1], blade[j]
                sign *= -1
    return tuple(blade), sign


def multiply_blades(a, b):
    """Multiply two blades, returning (result_blade, sign).

    Bubble sorts the combined blade to canonical form, contracting pairs of
    equal indices with the metric. Each adjacent swap flips the sign.
    """
    combined = list(a) + list(b)
    sign = 1

    changed = True
    while changed:
        changed = False
        i = 0
        while i < len(combined) - 1:
            if combined[i] == combined[i + 1]:
                sign *= metric[combined[i]]
                combined.pop(i + 1)
                combined.pop(i)
                changed = True
            elif combined[i] > combined[i + 1]:
                combined[i], combined[i + 1] = combined[i + 1], combined[i]
                sign *= -1
                changed = True
                i += 1
            else:
                i += 1

    return tuple(combined), sign


def basis(idx):
    components = [0.0] * 8
    components[idx] = 1.0
    return from_components(components)


# Build reverse map: canonical blade -> index
blade_to_index = {}
for idx, blade in index_to_blade.items():
    canonical, sign = canonical_blade(blade)
    blade_to_index[canonical] = (idx, sign)

errors = []

for i, j in itertools.product(range(8), repeat=2):
    result_blade, sign = multiply_blades(index_to_blade[i], index_to_blade[j])
    result_idx, idx_sign = blade_to_index[result_blade]

    expected = [0.0] * 8
    expected[result_idx] = float(sign * idx_sign)

    actual = geometric_product(basis(i), basis(j)).components
    if list(actual) != expected:
        errors.append((i, j, expected, actual))

print(f"Found {len(errors)} discrepancies:")
for i, j, expected, actual in errors:
    print(f"  ({i}, {j}): blade{index_to_blade[i]} * blade{index_to_blade[j]}")
    print(f"    EXPECTED: {expected}")
    print(f"    ACTUAL:   {actual}")
