"""Run the API with uvicorn: python -m solarflow."""

import uvicorn

from solarflow.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "solarflow.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
