"""Log line formatting and handler installation."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER_NAME = "repo_governance"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _RunLogHandler(logging.StreamHandler):
    """Marker type so repeated installs replace the previous handler."""


def configure_run_logging(*, debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Route project log records to stdout as timestamped `[LEVEL]` lines.

    Args:
      debug: Emit DEBUG records, which trace every remote call.
      stream: Destination stream; defaults to the current ``sys.stdout``.

    Returns:
      The configured project root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, _RunLogHandler):
            logger.removeHandler(handler)

    handler = _RunLogHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger
