# simulation/__init__.py
"""
Simulation module for the temporal graph engine.

Builds graphs to query without hand-writing them:

1. SAMPLE GRAPHS (graph_generator.py)
   - Fixed 10-node interval graph (weighted, undirected)
   - Fixed 5-node discrete-event graph

2. RANDOM GRAPHS (graph_generator.py)
   - Seeded interval or discrete-event graphs
   - Same seed, same graph

Usage:
    from simulation import RandomGraphGenerator, load_sample_graph
    graph = load_sample_graph()
    graph = RandomGraphGenerator(seed=42).interval_graph(20, 0.2, 10)
"""

from .graph_generator import (
    RandomGraphGenerator,
    load_sample_graph,
    load_sample_event_graph,
    SAMPLE_INTERVAL_EDGES,
    SAMPLE_EVENT_NODES,
    SAMPLE_EVENT_EDGES,
)

__all__ = [
    "RandomGraphGenerator",
    "load_sample_graph",
    "load_sample_event_graph",
    "SAMPLE_INTERVAL_EDGES",
    "SAMPLE_EVENT_NODES",
    "SAMPLE_EVENT_EDGES",
]
