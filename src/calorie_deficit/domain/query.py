"""Natural-language query formatting."""

from dataclasses import dataclass

from calorie_deficit.domain.adjustments import (
    DEFAULT_UNIT,
    Unit,
    is_conditioned,
    normalize_ingredient,
)


def format_query(
    quantity: object,
    unit: Unit | str,
    ingredient_name: str,
    condition: str | None = None,
) -> str:
    """Build a query like ``"2 grams of chicken with skin"``.

    Inputs are not validated; an unrecognized quantity or unit goes out as-is.
    """
    phrase = normalize_ingredient(ingredient_name)
    if condition and is_conditioned(phrase):
        phrase = f"{phrase} {condition.lower()}"
    return f"{quantity} {unit} of {phrase}"


@dataclass(frozen=True)
class NutritionQuery:
    """A single lookup request built from the form inputs."""

    quantity: str
    ingredient_name: str
    unit: Unit | str = DEFAULT_UNIT
    condition: str | None = None

    def text(self) -> str:
        """Return the query text sent to the relay."""
        return format_query(
            self.quantity, self.unit, self.ingredient_name, self.condition
        )
