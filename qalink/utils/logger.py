import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_file: Path | None = None, level: int = logging.INFO) -> None:
    """Configure logging for the ``qalink`` logger hierarchy.

    The library never calls this itself; host applications opt in.

    Args:
        log_file: Optional path to a rotating log file. When omitted, records go to stderr.
        level: Logging level for the ``qalink`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("qalink")
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Remove handlers installed by configure_logging (used by tests)."""
    global _CONFIGURED
    root_logger = logging.getLogger("qalink")
    for handler in list(root_logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    _CONFIGURED = False
