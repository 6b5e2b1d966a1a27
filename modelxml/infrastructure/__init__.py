"""Infrastructure layer.

This layer contains the writer, the in-memory meta-model registry and the
logging adapters. It implements the ports defined in the application layer.
"""

from .container import DependencyContainer, create_default_container

__all__ = ["DependencyContainer", "create_default_container"]
