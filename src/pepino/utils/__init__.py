"""Utility modules for Pepino.

Provides:
- logger: get_logger for logging
"""

from pepino.utils.logger import get_logger

__all__ = ["get_logger"]
