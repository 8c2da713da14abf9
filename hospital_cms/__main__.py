import uvicorn

from hospital_cms.config.settings import settings


def main() -> None:
    uvicorn.run(
        "hospital_cms.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
