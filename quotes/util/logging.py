"""Standard library logging setup for third-party loggers."""

import logging
import sys

from quotes.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure the root logger once at process start.

    Application code logs through Logfire. This only governs what uvicorn,
    SQLAlchemy and asyncpg print on their own loggers.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # SQL echo is noisy, spans already carry the statements
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
