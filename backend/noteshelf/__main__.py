"""Run the API with uvicorn on the configured host and port: `python -m noteshelf`."""

import uvicorn

from noteshelf.config import settings


def main() -> None:
    uvicorn.run(
        "noteshelf.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
