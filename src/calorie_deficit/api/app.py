"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from calorie_deficit.api.models import NutritionRequest
from calorie_deficit.app_logging import configure_logging
from calorie_deficit.containers import AppContainer
from calorie_deficit.services.relay import IngredientRequiredError, UpstreamError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Relaying nutrition lookups to %s",
            app.state.container.settings.nutritionix_base_url,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report unreadable lookup bodies as a missing ingredient."""
        if request.url.path == "/get-nutrition":
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": IngredientRequiredError.message},
            )
        return await request_validation_exception_handler(request, exc)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness check."""
        return "Server is running!"

    @app.post("/get-nutrition")
    async def get_nutrition(body: NutritionRequest, request: Request) -> JSONResponse:
        """Forward an ingredient query to the nutrition API."""
        state_container: AppContainer = request.app.state.container
        try:
            payload = await state_container.relay_service.lookup(body.ingredient)
        except IngredientRequiredError as exc:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message}
            )
        except UpstreamError as exc:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": exc.message},
            )
        return JSONResponse(content=payload)

    return app
