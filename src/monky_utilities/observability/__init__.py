"""Logging setup."""

from monky_utilities.observability.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
