"""Nutrition domain models."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from calorie_deficit.domain.adjustments import multiplier_for


class AdjustmentAlreadyAppliedError(ValueError):
    """Raised when a calorie adjustment is applied to an adjusted result."""


@dataclass(frozen=True)
class NutritionResult:
    """Nutrition facts for the first food matched by the lookup API."""

    food_name: str
    photo_url: str | None
    calories: float
    total_fat: float
    protein: float
    cholesterol: float
    total_carbohydrate: float
    serving_qty: float | None = None
    serving_unit: str | None = None
    serving_weight_grams: float | None = None
    adjusted: bool = False

    @classmethod
    def from_api(cls, food: Mapping[str, Any]) -> "NutritionResult":
        """Build a result from one entry of the API ``foods`` list."""
        if not isinstance(food, Mapping):
            raise TypeError(
                f"Food record must be a mapping, got {type(food).__name__}"
            )
        photo = food.get("photo") or {}
        if not isinstance(photo, Mapping):
            raise TypeError(
                f"Food photo must be a mapping, got {type(photo).__name__}"
            )
        return cls(
            food_name=str(food.get("food_name", "")),
            photo_url=photo.get("highres"),
            calories=_number(food.get("nf_calories")),
            total_fat=_number(food.get("nf_total_fat")),
            protein=_number(food.get("nf_protein")),
            cholesterol=_number(food.get("nf_cholesterol")),
            total_carbohydrate=_number(food.get("nf_total_carbohydrate")),
            serving_qty=_optional_number(food.get("serving_qty")),
            serving_unit=food.get("serving_unit"),
            serving_weight_grams=_optional_number(food.get("serving_weight_grams")),
        )

    def with_adjustment(
        self, ingredient_name: str, condition: str | None
    ) -> "NutritionResult":
        """Return a copy with the condition multiplier applied to calories."""
        if self.adjusted:
            raise AdjustmentAlreadyAppliedError(
                f"Calories for {self.food_name!r} were already adjusted"
            )
        factor = multiplier_for(ingredient_name, condition)
        return replace(self, calories=self.calories * factor, adjusted=True)


def _number(value: object) -> float:
    if value is None:
        return 0.0
    return float(value)


def _optional_number(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
