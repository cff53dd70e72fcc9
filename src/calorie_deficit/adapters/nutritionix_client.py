"""Nutritionix natural-language nutrients API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class NutritionixClient(Protocol):
    """Interface for Nutritionix API interactions."""

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        """Look up foods for a natural-language query and return raw API data."""


@dataclass
class HttpxNutritionixClient(NutritionixClient):
    """HTTPX-backed Nutritionix client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, app_id: str, app_key: str, base_url: str
    ) -> "HttpxNutritionixClient":
        """Create a Nutritionix client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def natural_nutrients(self, query: str) -> dict[str, object]:
        """Post the query text unmodified to the natural nutrients endpoint."""
        url = f"{self.base_url}/natural/nutrients"
        response = await self.http_client.post(
            url,
            json={"query": query},
            headers={
                "x-app-id": self.app_id,
                "x-app-key": self.app_key,
            },
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
