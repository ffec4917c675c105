"""Loguru logging configuration for the outreach CLI.

Every record carries a ``batch`` field; message generation binds it with
``logger.contextualize`` so lines from concurrent grouping tasks can be
traced back to their batch.  Records bound with ``json_output=True`` are
additionally emitted as JSON.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_NAME = "voter-outreach.log"

_NO_BATCH = "-"
_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | batch={extra[batch]} | {name}:{function}:{line} | {message}"


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace all Loguru sinks with the CLI configuration.

    Args:
        log_level: Minimum log level to emit (case-insensitive).
        log_dir: Optional directory for ``voter-outreach.log``, rotated
            every 24 hours and retained for 7 days.
    """
    level = log_level.upper()
    logger.remove()
    logger.configure(extra={"batch": _NO_BATCH})

    logger.add(sys.stderr, level=level, format=_LOG_FORMAT)
    logger.add(
        sys.stderr,
        level=level,
        serialize=True,
        filter=lambda record: record["extra"].get("json_output", False),
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / LOG_FILE_NAME,
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
