"""
Logging configuration for Game Service

All modules log through ``logging.getLogger(__name__)``; this module only
installs the process-wide handler and format once at startup.
"""
import logging
import sys


LOG_FORMAT = "%(asctime)s - %(levelname)s - [PID:%(process)d] - %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the service process.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
    """
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce verbosity from external libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
