"""Run the development server: ``python -m todoolittle``."""

import uvicorn

from todoolittle.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "todoolittle.main:create_app",
        factory=True,
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
