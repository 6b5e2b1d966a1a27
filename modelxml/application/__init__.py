"""Application layer: ports the writer depends on."""

__all__ = []
