"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from serving_units.api.models import (
    ConversionOptionPayload,
    ConversionRequest,
    ConversionResponse,
    MacroPayload,
    NutritionRequest,
    ParsedServingPayload,
    ParseRequest,
)
from serving_units.app_logging import configure_logging
from serving_units.containers import AppContainer
from serving_units.services.parser import parse_serving


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/conversions")
    async def conversions(
        payload: ConversionRequest, request: Request
    ) -> ConversionResponse:
        """Return the bridge serving and unit conversion options for a food."""
        state_container: AppContainer = request.app.state.container
        menu = state_container.conversion_service.available_conversions(
            payload.food_name, [serving.to_domain() for serving in payload.servings]
        )
        return ConversionResponse(
            bridge_serving_id=menu.bridge_serving_id,
            options=[
                ConversionOptionPayload(
                    label=option.label, unit_key=option.unit_key, factor=option.factor
                )
                for option in menu.options
            ],
        )

    @app.post("/conversions/nutrition")
    async def converted_nutrition(
        payload: NutritionRequest, request: Request
    ) -> MacroPayload:
        """Return macros for a quantity of a unit of a food."""
        state_container: AppContainer = request.app.state.container
        macros = state_container.conversion_service.nutrition_for(
            payload.food_name,
            [serving.to_domain() for serving in payload.servings],
            payload.unit_key,
            payload.quantity,
        )
        if macros is None:
            logger.info(
                "Unit not convertible: food=%s unit=%s",
                payload.food_name,
                payload.unit_key,
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No conversion to {payload.unit_key!r} for this food",
            )
        return MacroPayload(
            calories=macros.calories,
            protein_g=macros.protein_g,
            fat_g=macros.fat_g,
            carbs_g=macros.carbs_g,
        )

    @app.post("/servings/parse")
    async def parse(payload: ParseRequest) -> ParsedServingPayload:
        """Parse a serving description into an amount and unit."""
        parsed = parse_serving(payload.text)
        if parsed is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="Serving is not an amount followed by a known unit",
            )
        return ParsedServingPayload(
            amount=parsed.amount, unit_key=parsed.unit_key, domain=parsed.domain
        )

    return app
