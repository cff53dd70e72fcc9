"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from calorie_deficit.adapters.nutritionix_client import NutritionixClient
from calorie_deficit.adapters.relay_client import RelayClient
from calorie_deficit.config import Settings
from calorie_deficit.containers import AppContainer
from calorie_deficit.services.relay import NutritionRelayService


def make_food(**overrides: object) -> dict[str, object]:
    """Return a Nutritionix-shaped food record."""
    food: dict[str, object] = {
        "food_name": "chicken breast",
        "serving_qty": 200,
        "serving_unit": "g",
        "serving_weight_grams": 200,
        "nf_calories": 100,
        "nf_total_fat": 3.6,
        "nf_cholesterol": 85,
        "nf_total_carbohydrate": 0,
        "nf_protein": 31,
        "photo": {"highres": "https://nix-tag-images.s3.amazonaws.com/chicken.jpg"},
    }
    food.update(overrides)
    return food


@dataclass
class FakeNutritionixClient(NutritionixClient):
    """Fake Nutritionix client recording queries."""

    payload: dict[str, object] = field(
        default_factory=lambda: {"foods": [make_food()]}
    )
    queries: list[str] = field(default_factory=list)

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        return self.payload


@dataclass
class FailingNutritionixClient(NutritionixClient):
    """Nutritionix client whose upstream is unreachable."""

    queries: list[str] = field(default_factory=list)

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        raise httpx.ConnectError("connection refused: trackapi.nutritionix.com")


@dataclass
class FakeRelayClient(RelayClient):
    """Fake relay client returning a fixed payload or raising."""

    payload: dict[str, object] = field(
        default_factory=lambda: {"foods": [make_food()]}
    )
    error: Exception | None = None
    queries: list[str] = field(default_factory=list)

    async def get_nutrition(self, ingredient: str) -> dict[str, object]:
        self.queries.append(ingredient)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        nutritionix_api_id="app-id",
        nutritionix_api_key="app-key",
        nutritionix_base_url="https://nutritionix.test/v2",
        relay_host="127.0.0.1",
        relay_port=0,
        relay_base_url="http://relay.test",
        environment="test",
    )


@pytest.fixture
def nutritionix_client() -> FakeNutritionixClient:
    return FakeNutritionixClient()


@pytest.fixture
def relay_client() -> FakeRelayClient:
    return FakeRelayClient()


def _container(settings: Settings, client: NutritionixClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutritionix_client=client,
        relay_service=NutritionRelayService(client),
        close_resources=close_resources,
    )


@pytest.fixture
def container(
    settings: Settings, nutritionix_client: FakeNutritionixClient
) -> AppContainer:
    return _container(settings, nutritionix_client)


@pytest.fixture
def failing_container(settings: Settings) -> AppContainer:
    return _container(settings, FailingNutritionixClient())
