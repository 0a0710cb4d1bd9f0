# tgraph/graph/paths.py
"""
Shortest-path search.

Two cost models, never mixed:

Time-based (any activation model, departing no earlier than start_time):
- earliest_arrival_path: breadth-first over (node, time) states
- fastest_path: priority queue over (node, time) states ordered by
  elapsed time (arrival - start_time)

Weight-based (snapshot subgraph at a fixed time t):
- dijkstra: non-negative weight Dijkstra
- astar: A* with a hop-count heuristic derived from the snapshot

Every search returns a PathResult. Unknown nodes and unreachable
targets give PathResult.not_found(), never an exception.
"""

import heapq
import itertools
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from ..logging import get_logger
from .models import NodeId, PathResult, TemporalState
from .resolver import min_active_weight, neighbors, transitions
from .store import TemporalGraph

logger = get_logger(__name__)

# Larger than any feasible path sum
INFINITY = float("inf")


def _walk_parents(parents: Dict, target) -> list:
    """Follow parent pointers from target back to the root, then reverse."""
    chain = []
    current = target
    while current is not None:
        chain.append(current)
        current = parents[current]
    chain.reverse()
    return chain


# ============================================================
# TIME-BASED SEARCH
# ============================================================


def earliest_arrival_path(
    graph: TemporalGraph,
    start: NodeId,
    end: NodeId,
    start_time: int,
) -> PathResult:
    """
    Minimum-arrival-time walk from start to end.

    Expands (node, time) states in FIFO order exactly like temporal_bfs.
    FIFO order is by hop count, not by time, so a later dequeue can still
    arrive earlier: the search keeps going after the first hit and only
    prunes states that are already no earlier than the best arrival.
    Among equally early arrivals the first one dequeued (fewest hops) wins.

    Returns:
        PathResult with cost = arrival - start_time and arrival_time set
    """
    if not graph.has_node(start) or not graph.has_node(end):
        return PathResult.not_found()

    root = TemporalState(start, start_time)
    parents: Dict[TemporalState, Optional[TemporalState]] = {}
    queue: Deque[Tuple[TemporalState, Optional[TemporalState]]] = deque([(root, None)])
    best: Optional[TemporalState] = None

    while queue:
        state, parent = queue.popleft()
        if state in parents:
            continue
        if best is not None and state.time >= best.time:
            continue
        parents[state] = parent

        if state.node == end:
            best = state
            continue

        for move in transitions(graph, state.node, state.time):
            if best is None or move.time < best.time:
                queue.append((TemporalState(move.dst, move.time), state))

    if best is None:
        logger.debug("path_not_found", algorithm="earliest_arrival", start=start, end=end)
        return PathResult.not_found()

    return PathResult(
        found=True,
        path=[s.node for s in _walk_parents(parents, best)],
        cost=best.time - start_time,
        arrival_time=best.time,
    )


def fastest_path(
    graph: TemporalGraph,
    start: NodeId,
    end: NodeId,
    start_time: int,
) -> PathResult:
    """
    Minimum-elapsed-time walk from start to end.

    Frontier ordered by (arrival - start_time), ties broken by discovery
    order. A state is pushed again only when a strictly smaller elapsed
    cost is found; popped entries costlier than the recorded best are stale.
    """
    if not graph.has_node(start) or not graph.has_node(end):
        return PathResult.not_found()

    root = TemporalState(start, start_time)
    counter = itertools.count()
    best_cost: Dict[TemporalState, int] = {root: 0}
    parents: Dict[TemporalState, Optional[TemporalState]] = {root: None}
    heap: List[Tuple[int, int, int, TemporalState]] = [(0, start_time, next(counter), root)]

    while heap:
        cost, _, _, state = heapq.heappop(heap)

        if state.node == end:
            return PathResult(
                found=True,
                path=[s.node for s in _walk_parents(parents, state)],
                cost=cost,
                arrival_time=state.time,
            )

        if best_cost.get(state, INFINITY) < cost:
            continue

        for move in transitions(graph, state.node, state.time):
            next_state = TemporalState(move.dst, move.time)
            new_cost = move.time - start_time
            if new_cost < best_cost.get(next_state, INFINITY):
                best_cost[next_state] = new_cost
                parents[next_state] = state
                heapq.heappush(heap, (new_cost, move.time, next(counter), next_state))

    logger.debug("path_not_found", algorithm="fastest", start=start, end=end)
    return PathResult.not_found()


# ============================================================
# WEIGHT-BASED SEARCH (fixed snapshot time)
# ============================================================


def dijkstra(graph: TemporalGraph, start: NodeId, target: NodeId, t: int) -> PathResult:
    """
    Minimum total weight path over edges active at exactly t.

    Args:
        graph: Graph to read
        start: Start node
        target: Target node
        t: Snapshot time

    Returns:
        PathResult with cost = sum of edge weights
    """
    if not graph.has_node(start) or not graph.has_node(target):
        return PathResult.not_found()

    counter = itertools.count()
    dist: Dict[NodeId, int] = {start: 0}
    parents: Dict[NodeId, Optional[NodeId]] = {start: None}
    heap: List[Tuple[int, int, NodeId]] = [(0, next(counter), start)]

    while heap:
        d, _, u = heapq.heappop(heap)
        if d > dist.get(u, INFINITY):
            continue
        if u == target:
            break
        for v, weight in neighbors(graph, u, t):
            candidate = d + weight
            if candidate < dist.get(v, INFINITY):
                dist[v] = candidate
                parents[v] = u
                heapq.heappush(heap, (candidate, next(counter), v))

    if target not in dist:
        logger.debug("path_not_found", algorithm="dijkstra", start=start, target=target, t=t)
        return PathResult.not_found()

    return PathResult(found=True, path=_walk_parents(parents, target), cost=dist[target])


def reverse_hop_distances(graph: TemporalGraph, target: NodeId, t: int) -> Dict[NodeId, int]:
    """
    Hop count from every node to target over edges active at t.

    Breadth-first search from target along incoming edges. Nodes that
    cannot reach target are absent.
    """
    if not graph.has_node(target):
        return {}

    hops: Dict[NodeId, int] = {target: 0}
    queue: Deque[NodeId] = deque([target])
    while queue:
        v = queue.popleft()
        for edge in graph.in_edges(v):
            if edge.is_active_at(t) and edge.src not in hops:
                hops[edge.src] = hops[v] + 1
                queue.append(edge.src)
    return hops


def astar(graph: TemporalGraph, start: NodeId, target: NodeId, t: int) -> PathResult:
    """
    A* over edges active at exactly t.

    Heuristic h(u) = hops(u -> target) * (minimum weight active at t).
    No path reaches target in fewer hops and no hop costs less than the
    minimum weight, so h never overestimates. With nothing active or a
    zero minimum weight, h is 0 everywhere and this is plain Dijkstra.

    Returns:
        PathResult with the same cost dijkstra() would return
    """
    if not graph.has_node(start) or not graph.has_node(target):
        return PathResult.not_found()

    hops = reverse_hop_distances(graph, target, t)
    unit = min_active_weight(graph, t)

    def h(node: NodeId) -> int:
        return hops.get(node, 0) * unit

    counter = itertools.count()
    g: Dict[NodeId, int] = {start: 0}
    parents: Dict[NodeId, Optional[NodeId]] = {start: None}
    open_heap: List[Tuple[int, int, NodeId]] = [(h(start), next(counter), start)]

    while open_heap:
        f, _, u = heapq.heappop(open_heap)
        if f > g[u] + h(u):
            continue
        if u == target:
            break
        for v, weight in neighbors(graph, u, t):
            candidate = g[u] + weight
            if candidate < g.get(v, INFINITY):
                g[v] = candidate
                parents[v] = u
                heapq.heappush(open_heap, (candidate + h(v), next(counter), v))

    if target not in g:
        logger.debug("path_not_found", algorithm="astar", start=start, target=target, t=t)
        return PathResult.not_found()

    return PathResult(found=True, path=_walk_parents(parents, target), cost=g[target])
