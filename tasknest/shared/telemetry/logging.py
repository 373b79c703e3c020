"""Process logging setup (stdout, one format for every module)."""

import logging
import sys

from tasknest.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging() -> None:
    """Send log records to stdout at DEBUG (debug mode) or INFO.

    SQL statement logging follows DATABASE_ECHO; otherwise sqlalchemy.engine
    is held at WARNING.
    """
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    engine_level = logging.INFO if settings.database_echo else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(engine_level)
