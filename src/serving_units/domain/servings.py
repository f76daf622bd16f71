"""Serving and unit domain models."""

from dataclasses import dataclass
from typing import Literal

UnitDomain = Literal["weight", "volume"]


@dataclass(frozen=True)
class UnitDefinition:
    """A supported measurement unit and its factor into the domain base unit."""

    key: str
    label: str
    domain: UnitDomain
    base_factor: float


@dataclass(frozen=True)
class ParsedServing:
    """Structured quantity parsed from a serving description."""

    amount: float
    unit_key: str
    domain: UnitDomain


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for one serving of a food."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class NutritionServing:
    """A known serving of a food as supplied by a nutrition data source."""

    serving_id: str
    serving_size: str
    nutrition: MacroProfile


@dataclass(frozen=True)
class ConversionOption:
    """Multiplier from the bridge serving to exactly one unit of a target."""

    label: str
    factor: float
    unit_key: str


@dataclass(frozen=True)
class BridgeSelection:
    """Serving chosen as the conversion anchor, with its parsed quantity."""

    bridge: NutritionServing | None = None
    parsed: ParsedServing | None = None


@dataclass(frozen=True)
class ConversionMenu:
    """Conversion options for a food and the serving they are relative to."""

    bridge_serving_id: str | None
    options: list[ConversionOption]
