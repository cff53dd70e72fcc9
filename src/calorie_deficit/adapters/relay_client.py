"""Client for the nutrition relay's HTTP surface."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class RelayClient(Protocol):
    """Interface for calling the nutrition relay."""

    async def get_nutrition(self, ingredient: str) -> dict[str, object]:
        """Send a formatted ingredient query and return the relay's JSON body."""


@dataclass
class HttpxRelayClient(RelayClient):
    """Relay client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxRelayClient":
        """Create a relay client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def get_nutrition(self, ingredient: str) -> dict[str, object]:
        """Call ``POST /get-nutrition``."""
        response = await self.http_client.post(
            f"{self.base_url}/get-nutrition",
            json={"ingredient": ingredient},
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
