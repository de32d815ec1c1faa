"""
Logging configuration for the volume engine.
"""
import logging
from functools import wraps
from time import time

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO) -> None:
    """
    Send volume engine logs to the console. Called by the CLI only;
    importing the package leaves logging untouched.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()
    root_logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    root_logger.addHandler(console_handler)

    root_logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)


def log_performance(func):
    """Log how long the wrapped call took, or how long it ran before failing."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time()
        try:
            result = func(*args, **kwargs)
            logger.debug(f"{func.__name__} completed in {time() - start_time:.3f}s")
            return result
        except Exception as e:
            logger.error(f"{func.__name__} failed after {time() - start_time:.3f}s: {e}")
            raise
    return wrapper
