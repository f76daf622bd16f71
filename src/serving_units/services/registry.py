"""Supported units and their conversion factors into base units."""

from types import MappingProxyType

from serving_units.domain.servings import UnitDefinition

# Base units: gram for weight, milliliter for volume.
_UNIT_DEFINITIONS = (
    UnitDefinition("g", "g", "weight", 1.0),
    UnitDefinition("mg", "mg", "weight", 0.001),
    UnitDefinition("kg", "kg", "weight", 1000.0),
    UnitDefinition("oz", "oz", "weight", 28.3495),
    UnitDefinition("lb", "lb", "weight", 453.592),
    UnitDefinition("ml", "mL", "volume", 1.0),
    UnitDefinition("l", "L", "volume", 1000.0),
    UnitDefinition("tsp", "tsp", "volume", 4.92892),
    UnitDefinition("tbsp", "tbsp", "volume", 14.7868),
    UnitDefinition("fl oz", "fl oz", "volume", 29.5735),
    UnitDefinition("cup", "cup", "volume", 236.588),
    UnitDefinition("pt", "pt", "volume", 473.176),
    UnitDefinition("qt", "qt", "volume", 946.353),
    UnitDefinition("gal", "gal", "volume", 3785.41),
)

UNITS = MappingProxyType({unit.key: unit for unit in _UNIT_DEFINITIONS})


def get_unit(key: str) -> UnitDefinition | None:
    """Return the unit registered under a key, if any."""
    return UNITS.get(key)
