"""loguru sinks for the CLI: stderr always, plus an optional rotating file."""

import sys

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Replace loguru's default handler with vitalscore's sinks.

    Library code only calls ``logger``; sinks are installed by whoever
    runs it.  The file sink rotates at 10 MB and keeps a week of files.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
    if log_file:
        logger.add(log_file, level=level, format=FILE_FORMAT, rotation="10 MB", retention="7 days")
