# tgraph/api/__init__.py
"""API routes package."""

from .routes_graph import router as graph_router
from .registry import GraphRegistry, get_registry

__all__ = [
    "graph_router",
    "GraphRegistry",
    "get_registry",
]
