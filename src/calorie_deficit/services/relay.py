"""Relay service forwarding ingredient queries to Nutritionix."""

import logging
from dataclasses import dataclass

from calorie_deficit.adapters.nutritionix_client import NutritionixClient

_logger = logging.getLogger(__name__)


class RelayError(Exception):
    """Base class for relay failures reported to callers."""

    message = "Relay error"


class IngredientRequiredError(RelayError):
    """Raised when a lookup arrives without an ingredient query."""

    message = "Ingredient is required"


class UpstreamError(RelayError):
    """Raised when the nutrition API call fails for any reason."""

    message = "Failed to fetch nutrition data"


@dataclass
class NutritionRelayService:
    """Pass-through lookup against the nutrition API."""

    nutritionix_client: NutritionixClient

    async def lookup(self, ingredient_query: str | None) -> dict[str, object]:
        """Return the nutrition API response body for a query, unchanged."""
        if not ingredient_query:
            raise IngredientRequiredError(IngredientRequiredError.message)
        try:
            return await self.nutritionix_client.natural_nutrients(ingredient_query)
        except Exception as exc:
            _logger.exception(
                "Error fetching nutrition data", extra={"query": ingredient_query}
            )
            raise UpstreamError(UpstreamError.message) from exc
