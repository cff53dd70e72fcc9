"""Pydantic models for relay request payloads."""

from pydantic import BaseModel


class NutritionRequest(BaseModel):
    """Body of ``POST /get-nutrition``."""

    ingredient: str | None = None
