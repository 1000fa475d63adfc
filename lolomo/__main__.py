import logging

import uvicorn

from .config import Settings


def main() -> None:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("lolomo.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
