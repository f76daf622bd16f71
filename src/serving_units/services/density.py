"""Approximate ingredient densities for crossing weight and volume."""

_ML_PER_CUP = 236.588

# Ordered: specific phrases must precede the generic keywords they contain.
DENSITIES: tuple[tuple[str, float], ...] = (
    ("brown sugar", 220 / _ML_PER_CUP),
    ("powdered sugar", 120 / _ML_PER_CUP),
    ("confectioners", 120 / _ML_PER_CUP),
    ("bread flour", 130 / _ML_PER_CUP),
    ("cake flour", 115 / _ML_PER_CUP),
    ("flour", 120 / _ML_PER_CUP),
    ("sugar", 200 / _ML_PER_CUP),
    ("butter", 227 / _ML_PER_CUP),
    ("cocoa", 90 / _ML_PER_CUP),
    ("milk", 245 / _ML_PER_CUP),
    ("oil", 218 / _ML_PER_CUP),
    ("honey", 340 / _ML_PER_CUP),
    ("oat", 90 / _ML_PER_CUP),
    ("rice", 185 / _ML_PER_CUP),
    ("salt", 292 / _ML_PER_CUP),
    ("consumer water", 1.0),
)

_WATER_DENSITY = 1.0


def density_of(food_name: str) -> float | None:
    """Return an approximate density in g/mL for a food name.

    Matching is a first-hit substring scan over ``DENSITIES``. Plain water
    only matches on the exact name so that "watermelon" or "water chestnut"
    do not pick up a liquid density.
    """
    name = (food_name or "").strip().lower()
    if not name:
        return None
    for keyword, density in DENSITIES:
        if keyword in name:
            return density
    if name == "water":
        return _WATER_DENSITY
    return None
