import uvicorn

from healthtrack.config import settings


def run() -> None:
    uvicorn.run("healthtrack.main:app", host=settings.app_host, port=settings.app_port, reload=settings.app_env == "dev")


if __name__ == "__main__":
    run()
