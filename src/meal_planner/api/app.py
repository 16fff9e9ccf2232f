"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from meal_planner.api.auth import TokenVerificationError
from meal_planner.api.meal_plans import router as meal_plans_router
from meal_planner.app_logging import configure_logging
from meal_planner.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Meal planner starting (environment=%s)", container.settings.environment
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Meal Planner API", lifespan=lifespan)
    app.state.container = container

    app.include_router(meal_plans_router)

    @app.exception_handler(TokenVerificationError)
    async def token_verification_error(
        request: Request, exc: TokenVerificationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
