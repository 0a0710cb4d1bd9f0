# tgraph/graph/resolver.py
"""
Activation resolver.

Turns "I am at node u at time t" into concrete moves:

- neighbors(): edges leaving u that exist at exactly t (snapshot queries)
- transitions(): for each edge leaving u, the single earliest departure
  at-or-after t (time-respecting queries)

Both enumerate in the store's insertion order, which is the tie-break
order for every algorithm built on top.
"""

from typing import List, Tuple

from .models import NodeId, Transition
from .store import TemporalGraph


def neighbors(graph: TemporalGraph, node: NodeId, t: int) -> List[Tuple[NodeId, int]]:
    """
    (dst, weight) for every edge leaving node that is active at exactly t.

    Unknown nodes have no neighbors.
    """
    return [
        (edge.dst, edge.weight)
        for edge in graph.out_edges(node)
        if edge.is_active_at(t)
    ]


def transitions(graph: TemporalGraph, node: NodeId, t: int) -> List[Transition]:
    """
    Earliest departure offered by each edge leaving node, not before t.

    Edges whose activation is entirely before t offer nothing and
    are omitted.
    """
    moves = []
    for edge in graph.out_edges(node):
        departure = edge.earliest_departure(t)
        if departure is not None:
            moves.append(Transition(dst=edge.dst, time=departure, weight=edge.weight, edge=edge))
    return moves


def min_active_weight(graph: TemporalGraph, t: int) -> int:
    """Smallest weight among edges active at t, 0 when none are active."""
    weights = [edge.weight for edge in graph.active_edges_at(t)]
    return min(weights) if weights else 0
