"""
Health check endpoint
"""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter(tags=["health"])

logger = logging.getLogger(__name__)


@router.get("/health")
def health_check(request: Request):
    """
    Health check endpoint

    Returns service health status including:
    - Service status
    - Database connectivity
    - Timestamp
    """
    config = request.app.state.settings

    try:
        request.app.state.database.ping()
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        db_status = "unhealthy"

    return {
        "service": config.SERVICE_NAME,
        "status": "healthy" if db_status == "healthy" else "unhealthy",
        "database": db_status,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/")
def root(request: Request):
    """Root endpoint"""
    return {
        "service": request.app.state.settings.SERVICE_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }
