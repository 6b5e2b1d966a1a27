"""Domain layer: meta-model descriptors, instances and the abstract element tree."""

__all__ = []
