"""
Application lifespan management.

Connects the dependency container to MongoDB at startup and releases the
connection at shutdown.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging

from .dependencies import container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the container for the lifetime of the application."""
    logger.info(f"Starting ServiceDesk API (database={container.settings.mongodb_database})...")
    try:
        await container.initialize()
    except Exception:
        logger.critical("ServiceDesk API failed to start", exc_info=True)
        raise
    logger.info("ServiceDesk API started successfully")

    try:
        yield
    finally:
        logger.info("Shutting down ServiceDesk API...")
        await container.shutdown()
        logger.info("ServiceDesk API shutdown complete")
