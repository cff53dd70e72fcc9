"""Calorie adjustment table for conditioned ingredients."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class Unit(str, Enum):
    """Quantity units offered by the form."""

    GRAMS = "grams"
    MILLILITERS = "ml"
    POUNDS = "lbs"
    LITERS = "l"

    @property
    def label(self) -> str:
        """Human-readable picker label."""
        return _UNIT_LABELS[self]

    def __str__(self) -> str:
        return self.value


_UNIT_LABELS = {
    Unit.GRAMS: "Grams",
    Unit.MILLILITERS: "Milliliters",
    Unit.POUNDS: "Pounds",
    Unit.LITERS: "Liters",
}

DEFAULT_UNIT = Unit.GRAMS


def _freeze(table: dict[str, dict[str, float]]) -> Mapping[str, Mapping[str, float]]:
    return MappingProxyType(
        {name: MappingProxyType(dict(factors)) for name, factors in table.items()}
    )


ADJUSTMENTS: Mapping[str, Mapping[str, float]] = _freeze(
    {
        "chicken": {
            "With Skin": 1.2,
            "Skinless": 0.85,
            "Boneless": 0.9,
            "With Bone": 0.85,
        },
        "rice": {"White Rice": 1.0, "Brown Rice": 0.9, "Basmati Rice": 1.1},
        "milk": {
            "Whole Milk": 1.0,
            "Skim Milk": 0.75,
            "Almond Milk": 0.5,
            "Soy Milk": 0.6,
        },
        "bread": {"White Bread": 1.0, "Whole Wheat": 0.9, "Multigrain": 0.95},
        "fish": {"Salmon": 1.2, "Tuna": 1.0, "Tilapia": 0.85, "Cod": 0.8},
        "beef": {"Lean": 0.9, "Fatty": 1.2, "Ground Beef": 1.1},
        "cheese": {"Cheddar": 1.1, "Mozzarella": 1.0, "Parmesan": 1.3, "Feta": 0.9},
    }
)

# Picker labels in display order. Chicken's "skinless" does not match the
# "Skinless" factor key, so selecting it leaves calories unadjusted.
CONDITION_OPTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "chicken": ("With Skin", "skinless", "Boneless", "With Bone"),
        "rice": ("White Rice", "Brown Rice", "Basmati Rice"),
        "milk": ("Whole Milk", "Skim Milk", "Almond Milk", "Soy Milk"),
        "bread": ("White Bread", "Whole Wheat", "Multigrain"),
        "fish": ("Salmon", "Tuna", "Tilapia", "Cod"),
        "beef": ("Lean", "Fatty", "Ground Beef"),
        "cheese": ("Cheddar", "Mozzarella", "Parmesan", "Feta"),
    }
)


def normalize_ingredient(name: str) -> str:
    """Normalize an ingredient name for lookups and query text."""
    return name.strip().lower()


def is_conditioned(ingredient_name: str) -> bool:
    """Return true when the ingredient offers condition choices."""
    return normalize_ingredient(ingredient_name) in CONDITION_OPTIONS


def conditions_for(ingredient_name: str) -> tuple[str, ...]:
    """Return the condition labels offered for an ingredient."""
    return CONDITION_OPTIONS.get(normalize_ingredient(ingredient_name), ())


def multiplier_for(ingredient_name: str, condition: str | None) -> float:
    """Return the calorie multiplier, 1.0 when no adjustment applies."""
    factors = ADJUSTMENTS.get(normalize_ingredient(ingredient_name))
    if factors is None or not condition:
        return 1.0
    return factors.get(condition, 1.0)


def adjust(ingredient_name: str, condition: str | None, base_calories: float) -> float:
    """Apply the condition multiplier to a calorie value.

    The ingredient lookup ignores case, the condition lookup does not. Calories
    pass through unchanged when either key is missing from the table.
    """
    factors = ADJUSTMENTS.get(normalize_ingredient(ingredient_name))
    if factors is None or not condition or condition not in factors:
        return base_calories
    return base_calories * factors[condition]
