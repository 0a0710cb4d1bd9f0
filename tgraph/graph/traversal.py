# tgraph/graph/traversal.py
"""
Unweighted traversal.

Two modes:

- Snapshot traversal (bfs, dfs): ordinary BFS/DFS over the subgraph
  active at one fixed time t. Visited set keyed by node.
- Temporal BFS (temporal_bfs): explores (node, time) states, only moving
  forward in time. Visited set keyed by (node, time), so the same node
  is legitimately revisited at different times.

Unknown start nodes yield an empty result.
"""

from collections import deque
from typing import Deque, List, Set

from ..logging import get_logger
from .models import NodeId, TemporalState
from .resolver import neighbors, transitions
from .store import TemporalGraph

logger = get_logger(__name__)


def bfs(graph: TemporalGraph, start: NodeId, t: int) -> List[NodeId]:
    """
    Breadth-first order over edges active at exactly t.

    Args:
        graph: Graph to read
        start: Start node
        t: Snapshot time

    Returns:
        Nodes in visitation order, starting with start
    """
    if not graph.has_node(start):
        return []

    visited: Set[NodeId] = {start}
    queue: Deque[NodeId] = deque([start])
    order: List[NodeId] = []

    while queue:
        u = queue.popleft()
        order.append(u)
        for v, _ in neighbors(graph, u, t):
            if v not in visited:
                visited.add(v)
                queue.append(v)

    return order


def dfs(graph: TemporalGraph, start: NodeId, t: int) -> List[NodeId]:
    """
    Depth-first order over edges active at exactly t.

    Uses an explicit stack. Neighbors are pushed in reverse so they are
    expanded in enumeration order.
    """
    if not graph.has_node(start):
        return []

    visited: Set[NodeId] = set()
    stack: List[NodeId] = [start]
    order: List[NodeId] = []

    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        order.append(u)
        for v, _ in reversed(neighbors(graph, u, t)):
            if v not in visited:
                stack.append(v)

    return order


def temporal_bfs(graph: TemporalGraph, start: NodeId, start_time: int) -> List[TemporalState]:
    """
    Breadth-first search over (node, time) states.

    From state (u, time), every edge leaving u contributes (dst, departure) where
    departure is its earliest time not before that time. Times along any path are
    non-decreasing, so no returned state is earlier than start_time.

    Args:
        graph: Graph to read
        start: Start node
        start_time: Earliest time the traveller may depart

    Returns:
        States in dequeue order; the first is (start, start_time)
    """
    if not graph.has_node(start):
        return []

    visited: Set[TemporalState] = set()
    queue: Deque[TemporalState] = deque([TemporalState(start, start_time)])
    result: List[TemporalState] = []

    while queue:
        state = queue.popleft()
        if state in visited:
            continue
        visited.add(state)
        result.append(state)

        for move in transitions(graph, state.node, state.time):
            queue.append(TemporalState(move.dst, move.time))

    logger.debug("temporal_bfs", start=start, start_time=start_time, states=len(result))
    return result
