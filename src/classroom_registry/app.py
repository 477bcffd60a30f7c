"""Main FastAPI application module.

This module initializes the FastAPI application and registers all route handlers.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from classroom_registry import __version__
from classroom_registry.api.routes import notification, registration, suspension
from classroom_registry.config import API_HOST, API_PORT, CORS_ALLOWED_ORIGINS
from classroom_registry.core.database import init_db
from classroom_registry.core.logging_config import setup_logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title="Classroom Registry API",
    description="Teacher/student registrations, suspensions and notification recipients.",
    version=__version__,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route handlers
app.include_router(registration.router)
app.include_router(suspension.router)
app.include_router(notification.router)


@app.on_event("startup")
def startup_tasks() -> None:
    """Create database tables if they do not exist."""
    init_db()
    logger.info("Database initialized")


@app.get("/", summary="API root", tags=["Info"])
def root() -> dict:
    """API root, returns API information and documentation links.

    Returns:
        Dictionary with API information and documentation links.
    """
    return {
        "name": "Classroom Registry API",
        "version": __version__,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc",
        },
        "health": "/api/health",
    }


@app.get("/api/health", summary="Health check", tags=["Health"])
def health() -> dict:
    """Health check endpoint.

    Returns:
        Dictionary with status "ok".
    """
    return {"status": "ok"}


def main() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    logger.info("Serving on http://%s:%s (docs at /docs)", API_HOST, API_PORT)
    uvicorn.run("classroom_registry.app:app", host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()
