"""Parse free-text serving descriptions into structured quantities."""

import math
import re

from serving_units.domain.servings import ParsedServing
from serving_units.services.registry import get_unit

# "100 g", "1.5 cup", "1/2 tsp", "2 fl oz"
_SERVING_PATTERN = re.compile(
    r"^([\d.]+(?:/[\d.]+)?)\s*([a-z]+(?: [a-z]+)*)$", re.ASCII
)

UNIT_SYNONYMS: dict[str, str] = {
    "gram": "g",
    "grams": "g",
    "milligram": "mg",
    "milligrams": "mg",
    "kilogram": "kg",
    "kilograms": "kg",
    "ounce": "oz",
    "ounces": "oz",
    "pound": "lb",
    "pounds": "lb",
    "lbs": "lb",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "cups": "cup",
    "pint": "pt",
    "pints": "pt",
    "quart": "qt",
    "quarts": "qt",
    "gallon": "gal",
    "gallons": "gal",
}


def parse_serving(text: str | None) -> ParsedServing | None:
    """Parse an "amount unit" phrase, or return None when it is not one.

    Descriptive servings such as "1 medium apple" or "1 cup (240ml)" are not
    parsed.
    """
    if not text:
        return None
    match = _SERVING_PATTERN.match(text.strip().lower())
    if not match:
        return None

    amount = _parse_amount(match.group(1))
    if amount is None:
        return None

    unit_key = normalize_unit(match.group(2))
    if unit_key is None:
        return None
    unit = get_unit(unit_key)
    if unit is None:
        return None
    return ParsedServing(amount=amount, unit_key=unit.key, domain=unit.domain)


def normalize_unit(phrase: str) -> str | None:
    """Map a unit phrase to a registry key."""
    cleaned = phrase.strip().lower()
    if get_unit(cleaned) is not None:
        return cleaned
    return UNIT_SYNONYMS.get(cleaned)


def _parse_amount(raw: str) -> float | None:
    """Parse an integer, decimal or simple fraction into a positive amount."""
    try:
        if "/" in raw:
            numerator, denominator = raw.split("/", 1)
            divisor = float(denominator)
            if divisor == 0:
                return None
            amount = float(numerator) / divisor
        else:
            amount = float(raw)
    except ValueError:
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount
