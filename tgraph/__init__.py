# tgraph/__init__.py
"""
Temporal graph query engine.

Reachability, shortest-path, centrality and connectivity queries over
graphs whose edges are only active at specific times.
"""

__version__ = "0.1.0"
