"""Run the NBA API with uvicorn: `python -m nba_api`."""

import uvicorn

from nba_api.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "nba_api.main:app", host=settings.host, port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
