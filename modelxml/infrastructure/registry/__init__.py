from .type_registry import MetaModelRegistry

__all__ = ["MetaModelRegistry"]
