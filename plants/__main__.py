"""Entry point — `python -m plants` serves the API with uvicorn.

Host and port come from Settings (HOST / PORT env vars, .env supported).
"""

import uvicorn

from plants.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "plants.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
