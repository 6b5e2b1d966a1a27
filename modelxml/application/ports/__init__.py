"""Port interfaces for external dependencies.

The writer reads the meta-model through ``TypeRegistryPort`` and reports
progress through ``LoggerPort``; both are injected so any adapter satisfying
the protocol can be used.
"""

from .repositories import TypeRegistryPort
from .services import LoggerPort

__all__ = ["LoggerPort", "TypeRegistryPort"]
