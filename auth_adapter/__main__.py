"""Run the adapter with uvicorn: ``python -m auth_adapter``."""
import uvicorn

from auth_adapter.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "auth_adapter.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
