# tgraph/graph/aggregates.py
"""
Aggregate queries derived from the store and temporal BFS.
"""

from typing import Dict

from .models import Degree, GraphStatistics, NodeId
from .store import TemporalGraph
from .traversal import temporal_bfs


def temporal_degree(graph: TemporalGraph, node: NodeId, t: int) -> Degree:
    """In/out degree of node counting only edges active at exactly t."""
    in_degree = sum(1 for edge in graph.in_edges(node) if edge.is_active_at(t))
    out_degree = sum(1 for edge in graph.out_edges(node) if edge.is_active_at(t))
    return Degree(in_degree=in_degree, out_degree=out_degree)


def temporal_centrality(graph: TemporalGraph, t: int) -> Dict[NodeId, int]:
    """
    Reachability score per node, in node insertion order.

    Score is the number of (node, time) states temporal BFS reaches from
    the node at t, excluding the start state. A node reachable at two
    different times counts twice.
    """
    return {
        node: len(temporal_bfs(graph, node, t)) - 1
        for node in graph.nodes
    }


def is_temporally_connected(graph: TemporalGraph, src: NodeId, dst: NodeId, t: int) -> bool:
    """True if dst is reached at any time by temporal BFS from src at t."""
    return any(state.node == dst for state in temporal_bfs(graph, src, t))


def graph_statistics(graph: TemporalGraph, t: int) -> GraphStatistics:
    """Counts, density and state-space bound of graph, with activity at t."""
    n = graph.node_count
    density = graph.edge_count / (n * (n - 1)) if n > 1 else 0.0
    return GraphStatistics(
        node_count=n,
        max_nodes=graph.max_nodes,
        edge_count=graph.edge_count,
        active_node_count=len(graph.active_nodes_at(t)),
        active_edge_count=len(graph.active_edges_at(t)),
        max_time=graph.max_time,
        density=density,
        state_space_bound=graph.state_space_bound(),
    )
