"""
FastAPI Application Entry Point - Game Service
"""
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from game_service.config import Settings, settings
from game_service.database import Database, init_db
from game_service.errors import register_exception_handlers
from game_service.logging_config import setup_logging
from game_service.api import games, health

logger = logging.getLogger(__name__)


def create_app(config: Settings = settings) -> FastAPI:
    """Build the Game Service application for the given settings"""
    app = FastAPI(
        title="Game Service",
        description="Microservice for managing the game catalog",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )
    setup_logging(config.LOG_LEVEL)
    app.state.settings = config

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health.router)
    app.include_router(games.router)

    # Prometheus metrics
    if config.ENABLE_METRICS:
        Instrumentator().instrument(app).expose(app)

    @app.on_event("startup")
    def startup_event():
        """Open the connection pool and bootstrap tables"""
        logger.info("Starting %s...", config.SERVICE_NAME)
        app.state.database = Database(config)
        try:
            init_db(app.state.database)
        except Exception:
            logger.error("Database initialization failed, releasing connection pool")
            app.state.database.dispose()
            raise
        logger.info("✓ Database initialized")

    @app.on_event("shutdown")
    def shutdown_event():
        """Release the connection pool"""
        logger.info("Shutting down %s...", config.SERVICE_NAME)
        app.state.database.dispose()

    return app


app = create_app()


def run() -> None:
    """Console entry point"""
    logger.info("✓ %s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)
    uvicorn.run(app, host=settings.SERVICE_HOST, port=settings.SERVICE_PORT)


if __name__ == "__main__":
    run()
