"""Application layer for multilog.

This layer holds the port interfaces that consumers depend on.
"""

__all__ = []
