import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name under the ``qalink`` hierarchy."""
    return logging.getLogger(f"qalink.{name}")
