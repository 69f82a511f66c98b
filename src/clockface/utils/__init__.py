"""Utility modules for clockface.

Provides:
- logger: get_logger for namespaced logging
"""

from clockface.utils.logger import get_logger

__all__ = ["get_logger"]
