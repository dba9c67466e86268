"""Utilities shared across the calculator packages."""

from .logging_config import LOGGER_NAME, StructuredFormatter, setup_logging

__all__ = ["LOGGER_NAME", "StructuredFormatter", "setup_logging"]
