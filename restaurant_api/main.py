"""Restaurant API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RestaurantApiError to plain-text responses
    - CORS configured from settings (not hardcoded)
    - Interactive docs and the OpenAPI schema are not served
    - Storage opened, table created and startup logged in the lifespan;
      engine disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - DatabaseSessionManager kept on app.state: the app owns its storage handle
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restaurant_api.api.error_handlers import register_error_handlers
from restaurant_api.api.routes import restaurants
from restaurant_api.config import get_settings
from restaurant_api.infrastructure.database import init_db
from restaurant_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    await app.state.db_manager.create_tables()
    logger.info(
        f"Server started on port {settings.port}",
        extra={"port": settings.port},
    )
    yield
    logger.info("Restaurant API shutting down")
    await app.state.db_manager.close()
    app.state.db_manager = None


def create_app() -> FastAPI:
    app = FastAPI(
        title="Restaurant API", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )

    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(restaurants.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "restaurant_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
