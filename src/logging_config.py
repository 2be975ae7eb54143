"""Logging configuration for the backend."""

import logging

from src.config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL):
    """Configure root logging for the API process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,  # uvicorn installs its own handlers first
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name for the logger, typically __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
