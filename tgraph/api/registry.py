# tgraph/api/registry.py
"""
Process-wide holder for the graph served over HTTP.

The engine is not safe for concurrent mutation, so every request takes
the registry lock for the whole read or write.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from ..graph import TemporalGraph


class GraphRegistry:
    """Single graph instance guarded by one exclusive lock."""

    def __init__(self, graph: Optional[TemporalGraph] = None):
        self._graph = graph if graph is not None else TemporalGraph()
        self._lock = threading.Lock()

    @contextmanager
    def use(self) -> Iterator[TemporalGraph]:
        """Hold the lock while working with the current graph."""
        with self._lock:
            yield self._graph

    def replace(self, graph: TemporalGraph):
        """Swap in a new graph (loads, resets)."""
        with self._lock:
            self._graph = graph


_registry = GraphRegistry()


def get_registry() -> GraphRegistry:
    """FastAPI dependency returning the process-wide registry."""
    return _registry
