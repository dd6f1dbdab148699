"""
Logging Configuration
Directs the package's log records, and the warnings it issues, to the console
and optionally to a file.
"""
import logging
import sys
from typing import List, Optional

# captureWarnings() sends warnings.warn() output to this logger
WARNINGS_LOGGER = "py.warnings"


def _make_handlers(level: int, log_file: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def _replace_handlers(logger: logging.Logger, handlers: List[logging.Handler]) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the 'landmarkcurve' logger for an application.

    Warnings issued with the warnings module (e.g. UnsupportedOrderWarning when
    a polynomial order is clamped) are captured and written to the same
    console and file outputs. Calling this again replaces the previous outputs.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    handlers = _make_handlers(level, log_file)

    logger = logging.getLogger("landmarkcurve")
    logger.setLevel(level)
    _replace_handlers(logger, handlers)

    warnings_logger = logging.getLogger(WARNINGS_LOGGER)
    warnings_logger.setLevel(min(level, logging.WARNING))
    _replace_handlers(warnings_logger, handlers)
    logging.captureWarnings(True)

    logger.info("Logging initialized.")
