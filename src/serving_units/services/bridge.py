"""Pick the serving that anchors unit conversions for a food."""

from collections.abc import Iterable

from serving_units.domain.servings import (
    BridgeSelection,
    NutritionServing,
    ParsedServing,
)
from serving_units.services.parser import parse_serving


def select_bridge(
    food_name: str, servings: Iterable[NutritionServing]
) -> BridgeSelection:
    """Select the bridge serving.

    Preference order: an exact 100 g serving, then the first weight serving,
    then the first volume serving. Within a tier the earliest serving wins.
    ``food_name`` is accepted for parity with ``build_options``; selection does
    not depend on it.
    """
    weight: BridgeSelection | None = None
    volume: BridgeSelection | None = None
    for serving in servings:
        parsed = parse_serving(serving.serving_size)
        if parsed is None:
            continue
        if _is_hundred_grams(parsed):
            return BridgeSelection(bridge=serving, parsed=parsed)
        if parsed.domain == "weight" and weight is None:
            weight = BridgeSelection(bridge=serving, parsed=parsed)
        elif parsed.domain == "volume" and volume is None:
            volume = BridgeSelection(bridge=serving, parsed=parsed)
    return weight or volume or BridgeSelection()


def _is_hundred_grams(parsed: ParsedServing) -> bool:
    return parsed.unit_key == "g" and parsed.amount == 100
