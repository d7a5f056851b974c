import logging

import uvicorn

from shopbench.config import settings

APPS = {
    "shopcart": "shopbench.web.main:app",
    "parser": "shopbench.web.parser:app",
}


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    target = APPS[settings.service]
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.service, settings.host, settings.port)

    uvicorn.run(target, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
