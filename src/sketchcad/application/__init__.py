"""Application layer - use cases and DTOs."""

from .commands import ClusterBedsCommand
from .dtos import ClusteringInput, ClusteringOutput

__all__ = [
    "ClusterBedsCommand",
    "ClusteringInput",
    "ClusteringOutput",
]
