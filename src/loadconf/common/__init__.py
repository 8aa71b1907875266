"""Common helpers shared across loadconf modules."""

from .logging import create_logger, disable_library_logging, enable_library_logging

__all__ = [
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
]
