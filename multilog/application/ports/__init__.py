"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that logging
adapters must implement. This enables dependency injection and testing.
"""

from .services import LoggerPort

__all__ = ["LoggerPort"]
