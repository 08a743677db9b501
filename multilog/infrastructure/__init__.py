"""Infrastructure layer for multilog.

This layer contains the logger adapters and their wiring. It implements
the ports defined in the application layer.
"""

from .container import DependencyContainer, create_default_container

__all__ = ["DependencyContainer", "create_default_container"]
