"""Utility helpers for the project.

Exports:
- get_logger: Configure and return a logger instance
- Constants: Source URLs, folder paths, filenames, model parameters
"""

from .logger_config import get_logger
from . import constants

__all__ = ["get_logger", "constants"]
