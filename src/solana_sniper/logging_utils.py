import logging
import sys
import time
from typing import List, Optional

LOGGER_NAME = "solana_sniper"
LOG_FORMAT = "%(asctime)sZ %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# handlers attached by the last new_logger() call
_HANDLERS: List[logging.Handler] = []


def new_logger(log_file: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """Attach UTC-stamped stdout (and optional file) handlers to the package logger.

    Handlers installed by an earlier call are replaced rather than stacked.
    """
    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(level)
    while _HANDLERS:
        handler = _HANDLERS.pop()
        log.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    fmt.converter = time.gmtime  # UTC
    _HANDLERS.append(logging.StreamHandler(sys.stdout))
    if log_file:
        _HANDLERS.append(logging.FileHandler(log_file, encoding="utf-8"))
    for h in _HANDLERS:
        h.setFormatter(fmt)
        log.addHandler(h)
    return log
