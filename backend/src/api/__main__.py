"""Entry point for running the dashboard server."""
import uvicorn

from core.config import get_settings


def main() -> None:
    """Run the server on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
