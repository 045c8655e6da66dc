from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional

from config.settings import get_settings


LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "step=%(step)s status=%(status)s provider=%(provider)s "
    "duration_ms=%(duration_ms)s error=%(error)s run_id=%(run_id)s"
)

_INITIALIZED: bool = False


class RunContextFilter(logging.Filter):
    """Stamp each record with the CLI run id and fill search fields a caller left out."""

    FIELDS = ("step", "status", "provider", "duration_ms", "error")

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "run_id", None):
            record.run_id = os.getenv("RUN_ID") or "-"
        for key in self.FIELDS:
            if not hasattr(record, key):
                setattr(record, key, "-")
        return True


def build_handler(stream: Optional[IO[str]] = None, level: int = logging.INFO) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RunContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def init_logging(level: str | None = None) -> None:
    """Attach the structured stdout handler to the root logger once per process."""
    global _INITIALIZED
    if _INITIALIZED:
        return

    log_level = getattr(logging, (level or get_settings().log_level).upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # Leave handlers installed by a host (pytest, an embedding app) alone
    if not root_logger.handlers:
        root_logger.addHandler(build_handler(level=log_level))

    _INITIALIZED = True
