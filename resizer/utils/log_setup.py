"""Process-wide logging setup shared by the entry points."""
from __future__ import annotations

import logging

from resizer.config import get_settings

_NOISY_LOGGERS = ("botocore", "boto3", "urllib3", "google.auth")


def configure_logging() -> None:
    """Apply ``LOG_LEVEL`` to the root logger; safe to call more than once."""

    level = get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
