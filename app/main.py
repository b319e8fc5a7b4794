"""Application entrypoint for the hello service.

This module wires together the FastAPI application with its lifespan hooks,
logging, exception handlers, and CORS configuration. It is the root that
other modules depend on when the API process starts.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import hello_router
from app.core.config import Settings, settings as default_settings
from app.core.errors import register_exception_handlers
from app.core.logging import configure_logging
from app.schemas.common import Message

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log process startup and shutdown.

    The service holds no shared clients or connections, so there is nothing
    to open before the first request or release after the last one.
    """

    logger.info("%s %s starting", app.title, app.version)
    yield
    logger.info("%s shutting down", app.title)


def create_application(settings: Settings | None = None) -> FastAPI:
    """Assemble and configure the FastAPI application instance.

    - Configures the `app` logger from `settings.LOG_LEVEL`.
    - Injects the lifespan manager defined above.
    - Applies CORS settings sourced from environment-driven `settings`.
    - Registers the greeting router that exposes `GET /hello`.

    Trailing-slash redirects are disabled so only the exact registered path
    reaches a handler; everything else gets the framework's 404/405.
    """

    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)
    application.include_router(hello_router)

    @application.get("/", response_model=Message)
    async def healthcheck() -> Message:
        """Lightweight health endpoint used by uptime monitors or the launcher."""
        return Message(message=f"{settings.PROJECT_NAME} is running!")

    return application


app = create_application()
