"""Shared test fixtures."""

import pytest

from serving_units.config import Settings
from serving_units.containers import AppContainer
from serving_units.domain.servings import MacroProfile, NutritionServing
from serving_units.services.conversions import ConversionService


def make_serving(
    serving_id: str, serving_size: str, calories: float = 100.0
) -> NutritionServing:
    return NutritionServing(
        serving_id=serving_id,
        serving_size=serving_size,
        nutrition=MacroProfile(
            calories=calories, protein_g=10.0, fat_g=5.0, carbs_g=20.0
        ),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=True, log_level="DEBUG", environment="test")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return AppContainer(
        settings=settings,
        conversion_service=ConversionService(debug=settings.debug),
    )
