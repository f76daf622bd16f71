"""Dependency container wiring for the application."""

from dataclasses import dataclass

from serving_units.config import Settings
from serving_units.services.conversions import ConversionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    conversion_service: ConversionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    return AppContainer(
        settings=resolved_settings,
        conversion_service=ConversionService(debug=resolved_settings.debug),
    )
