"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from market.adapter.recaptcha import RecaptchaVerifier
from market.config import Settings
from market.interface.api.routes import comments, files, health
from market.util.di.container import create_container, setup_di
from market.util.observability import instrument_fastapi, instrument_httpx


async def check_configuration(container: AsyncContainer) -> None:
    """Resolve the app-scoped dependencies that read required settings.

    Raises:
        ConfigurationError: If a required setting is missing
    """
    await container.get(RecaptchaVerifier)
    logfire.info("Configuration checked")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Fail at startup on bad configuration; close the container on shutdown."""
    container: AsyncContainer = app.state.dishka_container
    await check_configuration(container)
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, the production container if omitted
    """
    settings = Settings()

    # Outbound captcha verification goes through httpx
    instrument_httpx()

    app_instance = FastAPI(
        title="Market API",
        description="Backend API for the file marketplace: catalogue, file details and comment threads",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,
    )

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_routes(app_instance)

    return app_instance


def register_routes(app_instance: FastAPI) -> None:
    """Mount all routers on the app."""
    app_instance.include_router(health.router)
    app_instance.include_router(files.router)
    app_instance.include_router(comments.router)
