"""Structured logging module for VTO.

Provides configurable logging with JSON format support and file rotation.
"""

from vto.logging.config import configure_logging
from vto.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
