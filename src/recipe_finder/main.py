"""Application entry point.

This module serves as the entry point for the FastAPI application.
It creates the application instance using the factory pattern.

Usage:
    # Development with auto-reload
    uvicorn recipe_finder.main:app --reload

    # Production
    uvicorn recipe_finder.main:app --host 0.0.0.0 --workers 4
"""

from recipe_finder.factory import create_app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    from recipe_finder.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "recipe_finder.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
