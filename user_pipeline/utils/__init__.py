"""
Utilities package for the user pipeline.

Exports shared helpers for logging and thread synchronization.
Keep this package lightweight and free of domain-specific logic.
"""

from user_pipeline.utils.logging import configure_logging, get_logger
from user_pipeline.utils.sync import WaitGroup

__all__ = [
    "configure_logging",
    "get_logger",
    "WaitGroup",
]
