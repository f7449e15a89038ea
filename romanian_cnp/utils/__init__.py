"""
Utils package
"""
from .logger import logger, setup_logger, get_logger
from .constants import *

__all__ = ['logger', 'setup_logger', 'get_logger']
