"""Client form state and submission flow."""

import logging
from dataclasses import dataclass

import httpx

from calorie_deficit.adapters.relay_client import RelayClient
from calorie_deficit.domain.adjustments import (
    DEFAULT_UNIT,
    Unit,
    conditions_for,
    is_conditioned,
)
from calorie_deficit.domain.nutrition import NutritionResult
from calorie_deficit.domain.query import NutritionQuery

MISSING_INPUT_MESSAGE = "Please enter an ingredient and quantity."
NOT_FOUND_MESSAGE = "No nutrition data found for this condition."
FETCH_FAILED_MESSAGE = "Failed to fetch data. Please try again."

_logger = logging.getLogger(__name__)


@dataclass
class NutritionForm:
    """Holds the inputs and last outcome of a nutrition lookup."""

    relay_client: RelayClient
    ingredient: str = ""
    quantity: str = ""
    unit: Unit | str = DEFAULT_UNIT
    condition: str = ""
    result: NutritionResult | None = None
    loading: bool = False
    error: str | None = None

    @property
    def available_conditions(self) -> tuple[str, ...]:
        """Condition labels to offer for the current ingredient."""
        return conditions_for(self.ingredient)

    def build_query(self) -> NutritionQuery:
        """Return the query for the current inputs."""
        return NutritionQuery(
            quantity=self.quantity,
            ingredient_name=self.ingredient,
            unit=self.unit,
            condition=self.condition or None,
        )

    def query_text(self) -> str:
        """Return the text sent to the relay for the current inputs."""
        return self.build_query().text()

    async def submit(self) -> None:
        """Fetch nutrition facts for the current inputs.

        Outcomes land on ``result`` or ``error``; nothing is raised to the
        caller. ``loading`` is always cleared on exit.
        """
        if not self.ingredient or not self.quantity:
            self.error = MISSING_INPUT_MESSAGE
            return

        self.loading = True
        self.error = None
        try:
            query = self.query_text()
            _logger.info("Nutrition query: %s", query)
            payload = await self.relay_client.get_nutrition(query)
            foods = payload["foods"]
            if not isinstance(foods, list):
                raise TypeError("Relay response 'foods' is not a list")
            if not foods:
                self.error = NOT_FOUND_MESSAGE
                return

            nutrition = NutritionResult.from_api(foods[0])
            if is_conditioned(self.ingredient) and self.condition:
                nutrition = nutrition.with_adjustment(self.ingredient, self.condition)
            _logger.info("Final calories: %s", nutrition.calories)
            self.result = nutrition
        except (httpx.HTTPError, KeyError, TypeError, ValueError):
            _logger.exception("Nutrition lookup failed")
            self.error = FETCH_FAILED_MESSAGE
        finally:
            self.loading = False


def render_nutrition(result: NutritionResult) -> str:
    """Format nutrition facts for display."""
    lines = [result.food_name]
    if result.photo_url:
        lines.append(f"Image: {result.photo_url}")
    lines.extend(
        [
            f"Calories: {result.calories:.0f} kcal",
            f"Fat: {result.total_fat:g} g",
            f"Protein: {result.protein:g} g",
            f"Cholesterol: {result.cholesterol:g} mg",
            f"Carbohydrates: {result.total_carbohydrate:g} g",
        ]
    )
    return "\n".join(lines)
