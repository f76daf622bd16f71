"""Unit conversion options relative to a food's bridge serving."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from serving_units.domain.servings import (
    ConversionMenu,
    ConversionOption,
    MacroProfile,
    NutritionServing,
    ParsedServing,
    UnitDefinition,
)
from serving_units.services.bridge import select_bridge
from serving_units.services.density import density_of
from serving_units.services.registry import UNITS, get_unit

_logger = logging.getLogger(__name__)


def build_options(
    food_name: str,
    bridge: NutritionServing | None,
    parsed_bridge: ParsedServing | None,
) -> list[ConversionOption]:
    """Return a "1 unit" conversion factor for every derivable unit.

    Each factor multiplies the bridge serving's nutrition value to give the
    value for one of the target unit. Units in the other domain are included
    only when a density is known for the food.
    """
    if bridge is None or parsed_bridge is None:
        return []
    bridge_unit = get_unit(parsed_bridge.unit_key)
    if bridge_unit is None:
        return []

    bridge_base_amount = parsed_bridge.amount * bridge_unit.base_factor
    if not _is_positive(bridge_base_amount):
        return []
    density = density_of(food_name)
    options: list[ConversionOption] = []
    for unit in UNITS.values():
        factor = _factor_for(unit, bridge_unit, bridge_base_amount, density)
        if factor is None or not _is_positive(factor):
            continue
        options.append(
            ConversionOption(label=f"1 {unit.label}", factor=factor, unit_key=unit.key)
        )
    return options


def _factor_for(
    target: UnitDefinition,
    bridge_unit: UnitDefinition,
    bridge_base_amount: float,
    density: float | None,
) -> float | None:
    if target.domain == bridge_unit.domain:
        return target.base_factor / bridge_base_amount
    if density is None:
        return None
    # volume in mL * density = mass in g
    target_grams = (
        target.base_factor * density
        if target.domain == "volume"
        else target.base_factor
    )
    bridge_grams = (
        bridge_base_amount * density
        if bridge_unit.domain == "volume"
        else bridge_base_amount
    )
    if not _is_positive(bridge_grams):
        return None
    return target_grams / bridge_grams


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


@dataclass
class ConversionService:
    """Service producing unit conversion menus for foods."""

    debug: bool = False

    def available_conversions(
        self, food_name: str, servings: Sequence[NutritionServing]
    ) -> ConversionMenu:
        """Select a bridge serving and build the conversion options for it."""
        selection = select_bridge(food_name, servings)
        if selection.bridge is None:
            _logger.info(
                "No bridge serving for food=%s servings=%s", food_name, len(servings)
            )
            return ConversionMenu(bridge_serving_id=None, options=[])

        options = build_options(food_name, selection.bridge, selection.parsed)
        if self.debug:
            _logger.info(
                "Conversions food=%s bridge=%s (%s) options=%s",
                food_name,
                selection.bridge.serving_id,
                selection.bridge.serving_size,
                len(options),
            )
        return ConversionMenu(
            bridge_serving_id=selection.bridge.serving_id, options=options
        )

    def nutrition_for(
        self,
        food_name: str,
        servings: Sequence[NutritionServing],
        unit_key: str,
        quantity: float,
    ) -> MacroProfile | None:
        """Return macros for a quantity of a unit, if that unit is convertible."""
        selection = select_bridge(food_name, servings)
        if selection.bridge is None:
            return None
        options = build_options(food_name, selection.bridge, selection.parsed)
        option = next((opt for opt in options if opt.unit_key == unit_key), None)
        if option is None:
            return None
        return scale_nutrition(selection.bridge.nutrition, option.factor, quantity)


def scale_nutrition(
    nutrition: MacroProfile, factor: float, quantity: float
) -> MacroProfile:
    """Scale bridge-serving macros by a conversion factor and quantity."""
    if quantity <= 0:
        raise ValueError("quantity must be positive")
    multiplier = factor * quantity
    return MacroProfile(
        calories=nutrition.calories * multiplier,
        protein_g=nutrition.protein_g * multiplier,
        fat_g=nutrition.fat_g * multiplier,
        carbs_g=nutrition.carbs_g * multiplier,
    )
