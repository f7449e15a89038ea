"""
Logging setup module
"""
import logging
from typing import Optional


def setup_logger(name: str = __name__, log_file: Optional[str] = None,
                 level: int = logging.INFO) -> logging.Logger:
    """Configure and return a logger"""

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (opt-in, nothing is written to disk by default)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger (alias of setup_logger)"""
    if name is None:
        return logger
    return setup_logger(name)


# Default logger
logger = setup_logger('RomanianCNP')
