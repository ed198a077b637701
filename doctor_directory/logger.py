"""Package logger for the doctor directory."""
import logging

from .config import Config

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Return the `doctor_directory` logger at `log_level`, with one console handler.

    Unknown level names fall back to INFO. The handler passes everything, so
    the logger level alone decides what is shown.
    """
    logger = logging.getLogger("doctor_directory")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)

    return logger


logger = setup_logging(Config.LOG_LEVEL)
