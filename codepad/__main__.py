"""
Run the API server:

  python -m codepad

Host and port come from HOST / PORT (default 0.0.0.0:5000).
"""

import logging

import uvicorn

from codepad.core.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    logging.getLogger(__name__).info("Server running on port %s", settings.PORT)
    uvicorn.run("codepad.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
