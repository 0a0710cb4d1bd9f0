# tgraph/graph/store.py
"""
In-memory edge store for the temporal graph.

The store is the sole owner of nodes and edges. Algorithms only read it.
All activation checks go through the canonical descriptors in activation.py.

Mutation never raises for bad input: add_* methods return False and leave
the graph untouched.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..logging import get_logger
from ..settings import settings
from .activation import Activation, DiscreteActivation, IntervalActivation
from .models import NodeId, TemporalEdge

logger = get_logger(__name__)


class TemporalGraph:
    """
    Temporal graph with insertion-ordered nodes and edges.

    Outgoing and incoming edges are indexed per node at insertion time.
    Index lists keep insertion order, which is the tie-break order for
    every traversal.
    """

    def __init__(self, max_nodes: Optional[int] = None):
        """
        Initialize an empty graph.

        Args:
            max_nodes: Capacity enforced by add_node (defaults to settings.max_nodes)
        """
        self.max_nodes = settings.max_nodes if max_nodes is None else max_nodes
        self._reset()

    def _reset(self):
        self._nodes: List[NodeId] = []
        self._node_set: Set[NodeId] = set()
        self._edges: List[TemporalEdge] = []
        self._out: Dict[NodeId, List[TemporalEdge]] = {}
        self._in: Dict[NodeId, List[TemporalEdge]] = {}
        self._event_pairs: Set[Tuple[NodeId, NodeId]] = set()
        self._max_time = 0

    def init(self, n: int):
        """
        Reset to nodes 1..n and zero edges.

        Not subject to max_nodes: dense integer graphs are sized by the caller.
        """
        self._reset()
        for node in range(1, max(n, 0) + 1):
            self._register_node(node)
        logger.info("graph_reset", node_count=len(self._nodes))

    # ============================================================
    # NODE OPERATIONS
    # ============================================================

    def _register_node(self, node: NodeId):
        self._nodes.append(node)
        self._node_set.add(node)
        self._out[node] = []
        self._in[node] = []

    def add_node(self, node: NodeId) -> bool:
        """
        Add a node.

        Returns:
            True if newly inserted, False on duplicate or when at capacity
        """
        if self.has_node(node):
            logger.debug("node_rejected", node=node, reason="duplicate")
            return False
        if len(self._nodes) >= self.max_nodes:
            logger.debug("node_rejected", node=node, reason="capacity", max_nodes=self.max_nodes)
            return False
        self._register_node(node)
        return True

    def has_node(self, node: NodeId) -> bool:
        try:
            return node in self._node_set
        except TypeError:
            # Unhashable ids can never be nodes
            return False

    # ============================================================
    # EDGE OPERATIONS
    # ============================================================

    def _rejection_reason(self, src: NodeId, dst: NodeId, activation: Activation) -> Optional[str]:
        if not self.has_node(src) or not self.has_node(dst):
            return "unknown_endpoint"
        if not activation.is_valid():
            return "malformed_activation"
        return None

    def _insert(self, edge: TemporalEdge):
        self._edges.append(edge)
        self._out[edge.src].append(edge)
        self._in[edge.dst].append(edge)
        if edge.is_discrete:
            self._event_pairs.add((edge.src, edge.dst))
            self._max_time = max(self._max_time, edge.activation.last_time)

    def add_edge(self, src: NodeId, dst: NodeId, activation: Activation) -> bool:
        """
        Add a directed edge.

        A discrete edge for a (src, dst) pair that already has one is
        dropped silently: the first add wins and timestamps are not merged.

        Returns:
            True if the request was well-formed, False otherwise
        """
        reason = self._rejection_reason(src, dst, activation)
        if reason:
            logger.debug("edge_rejected", src=src, dst=dst, reason=reason)
            return False

        if isinstance(activation, DiscreteActivation) and (src, dst) in self._event_pairs:
            logger.debug("edge_ignored", src=src, dst=dst, reason="pair_exists")
            return True

        self._insert(TemporalEdge(src=src, dst=dst, activation=activation))
        return True

    def add_event_edge(self, src: NodeId, dst: NodeId, times: Iterable[int]) -> bool:
        """Add a discrete-event edge active at the given timestamps."""
        return self.add_edge(src, dst, DiscreteActivation.from_times(times))

    def add_interval_edge(
        self,
        src: NodeId,
        dst: NodeId,
        weight: int,
        start: int,
        end: int,
        directed: bool = True,
    ) -> bool:
        """Add a weighted edge active over [start, end]."""
        if not directed:
            return self.add_undirected_edge(src, dst, weight, start, end)
        return self.add_edge(src, dst, IntervalActivation(start=start, end=end, weight=weight))

    def add_undirected_edge(self, src: NodeId, dst: NodeId, weight: int, start: int, end: int) -> bool:
        """
        Add (src, dst) and its mirror (dst, src).

        Both halves are validated before either is written.
        """
        activation = IntervalActivation(start=start, end=end, weight=weight)
        reason = self._rejection_reason(src, dst, activation)
        if reason:
            logger.debug("edge_rejected", src=src, dst=dst, reason=reason, directed=False)
            return False
        self._insert(TemporalEdge(src=src, dst=dst, activation=activation))
        self._insert(TemporalEdge(src=dst, dst=src, activation=activation))
        return True

    # ============================================================
    # READ VIEWS
    # ============================================================

    @property
    def nodes(self) -> Tuple[NodeId, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Tuple[TemporalEdge, ...]:
        return tuple(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def max_time(self) -> int:
        """Largest timestamp across discrete edges (0 when there are none)."""
        return self._max_time

    def out_edges(self, node: NodeId) -> Tuple[TemporalEdge, ...]:
        if not self.has_node(node):
            return ()
        return tuple(self._out[node])

    def in_edges(self, node: NodeId) -> Tuple[TemporalEdge, ...]:
        if not self.has_node(node):
            return ()
        return tuple(self._in[node])

    # ============================================================
    # SNAPSHOTS
    # ============================================================

    def active_edges_at(self, t: int) -> List[TemporalEdge]:
        """Edges active at exactly t, in insertion order."""
        return [edge for edge in self._edges if edge.is_active_at(t)]

    def active_nodes_at(self, t: int) -> Set[NodeId]:
        """Endpoints of the edges active at exactly t."""
        active: Set[NodeId] = set()
        for edge in self.active_edges_at(t):
            active.add(edge.src)
            active.add(edge.dst)
        return active

    def state_space_bound(self) -> int:
        """
        Worst-case number of (node, time) states a temporal search can visit.

        Every state after the start is (edge.dst, time) where time is a discrete
        timestamp, an interval start or the query start time, so the count
        is bounded by edge_count * (distinct_times + 1), plus the start state.
        """
        distinct_times: Set[int] = set()
        for edge in self._edges:
            if edge.is_discrete:
                distinct_times.update(edge.activation.times)
            else:
                distinct_times.add(edge.activation.start)
        return len(self._edges) * (len(distinct_times) + 1) + 1

    def __repr__(self) -> str:
        return f"TemporalGraph(nodes={self.node_count}, edges={self.edge_count})"
