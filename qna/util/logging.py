"""Standard library logging for third-party libraries.

Our own events go through logfire; uvicorn, SQLAlchemy and alembic
still log through ``logging``, so their levels are set here.
"""

import logging
import sys

from qna.config import Settings

NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def log_level(settings: Settings) -> int:
    """Root level for an environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the root logger and quieten chatty libraries."""
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # SQL echo is controlled by DATABASE__ECHO
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database.echo else logging.WARNING
    )
