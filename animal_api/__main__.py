"""
Process entry point.

Usage:
    python -m animal_api
    animal-api

Host and port come from APP_HOST / APP_PORT (defaults 0.0.0.0:8000).
"""

import uvicorn

from animal_api.config import settings


def main() -> None:
    """Serve the application with uvicorn until interrupted."""
    uvicorn.run(
        "animal_api.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
