"""
FastAPI Application Entry Point - Order Service
"""
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from order_service.config import Settings, settings
from order_service.database import Database, init_db
from order_service.errors import register_exception_handlers
from order_service.logging_config import setup_logging
from order_service.api import orders, health

logger = logging.getLogger(__name__)


def create_app(config: Settings = settings) -> FastAPI:
    """Build the Order Service application for the given settings"""
    app = FastAPI(
        title="Order Service",
        description="Microservice for managing game orders and their line items",
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
    app.include_router(orders.router)

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
        logger.info("✓ Order status mode: %s", config.ORDER_STATUS_MODE)

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
