from __future__ import annotations

import logging

from tourbook.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_initialized = False


def init_logging(level: str | None = None) -> None:
    """Configure the root logger once per process."""
    global _initialized
    if _initialized:
        return
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
    _initialized = True
