"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thanks.config import AuthSettings, Settings
from thanks.interface.api.problem import install_problem_handlers
from thanks.interface.api.routes import config, health, tags, thanks
from thanks.util.di.container import create_container, setup_di
from thanks.util.error import ConfigurationError
from thanks.util.messages import Messages
from thanks.util.observability import instrument_fastapi, instrument_httpx


def _check_settings(settings: Settings) -> None:
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == AuthSettings().jwt_secret
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; a production container is built when
            omitted (tests pass their own)

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = Settings()
    _check_settings(settings)

    instrument_httpx()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.dishka_container.close()

    app_instance = FastAPI(
        title="Thanks API",
        description="Backend API for public thank-you notes between colleagues",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    install_problem_handlers(
        app_instance, settings.thanks.problem_type_url, Messages()
    )

    app_instance.include_router(health.router)
    app_instance.include_router(thanks.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(config.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
