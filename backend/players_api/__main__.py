import uvicorn

from players_api.config import settings


def main() -> None:
    uvicorn.run(
        "players_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
