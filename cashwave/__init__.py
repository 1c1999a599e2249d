"""Mini README: Core package initializer for the Cash Wave tracker.

Cash Wave records income and expense entries in memory and shows a running
balance on a single screen. Convenience imports live here so callers can
reach the logger factory without knowing the module layout.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
