"""Node registration for the graph runtime."""

from .node_registry import NodeRegistry

__all__ = [
    "NodeRegistry",
]
