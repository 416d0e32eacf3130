import logging
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Configure the root logger for aws_manager.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to INFO if not provided.
        fmt: Record format. Defaults to DEFAULT_FORMAT.
    """
    global _handler

    log_level = level or "INFO"
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if _handler is not None:
        root_logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setLevel(numeric_level)
    _handler.setFormatter(
        logging.Formatter(fmt or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    root_logger.addHandler(_handler)

    logging.getLogger(__name__).info("Logging configured with level: %s", log_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
