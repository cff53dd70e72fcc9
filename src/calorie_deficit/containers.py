"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_deficit.adapters.nutritionix_client import (
    HttpxNutritionixClient,
    NutritionixClient,
)
from calorie_deficit.config import Settings
from calorie_deficit.services.relay import NutritionRelayService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutritionix_client: NutritionixClient
    relay_service: NutritionRelayService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    nutritionix_client = HttpxNutritionixClient.create(
        app_id=resolved_settings.nutritionix_api_id,
        app_key=resolved_settings.nutritionix_api_key,
        base_url=resolved_settings.nutritionix_base_url,
    )
    relay_service = NutritionRelayService(nutritionix_client)

    async def close_resources() -> None:
        await nutritionix_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutritionix_client=nutritionix_client,
        relay_service=relay_service,
        close_resources=close_resources,
    )
