import logging

import uvicorn

from pingmon.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.PINGMON_LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "pingmon.main:app",
        host=settings.PINGMON_HOST,
        port=settings.PINGMON_PORT,
        log_level=settings.PINGMON_LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
