# tgraph/graph/models.py
"""
Graph models for the temporal query engine.

Core entities:
- TemporalEdge: Directed edge plus its activation descriptor
- TemporalState: A (node, time) pair explored by time-aware search
- Transition: One departure an edge offers from a (node, time) state
- PathResult: Outcome of every path query, including "not found"
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Union

from .activation import Activation, DiscreteActivation

# Dense integer (interval model) or arbitrary string (discrete model)
NodeId = Union[int, str]


@dataclass(frozen=True)
class TemporalEdge:
    """
    Directed temporal edge.

    An undirected edge is stored as two independent TemporalEdge
    records, one per direction.
    """
    src: NodeId
    dst: NodeId
    activation: Activation

    @property
    def weight(self) -> int:
        return self.activation.weight

    @property
    def is_discrete(self) -> bool:
        return isinstance(self.activation, DiscreteActivation)

    def is_active_at(self, t: int) -> bool:
        return self.activation.is_active_at(t)

    def earliest_departure(self, t: int) -> Optional[int]:
        return self.activation.earliest_departure(t)


class TemporalState(NamedTuple):
    """A node reached at a specific time."""
    node: NodeId
    time: int


class Transition(NamedTuple):
    """Departure offered by one outgoing edge."""
    dst: NodeId
    time: int
    weight: int
    edge: TemporalEdge


class Degree(NamedTuple):
    """Temporal in/out degree of a node at a fixed time."""
    in_degree: int
    out_degree: int


@dataclass
class PathResult:
    """
    Result of a path query.

    "Not found" is a normal outcome (found=False, cost=None),
    not an error.

    cost is the weight sum for weighted searches and the elapsed
    time (arrival - departure) for time-based searches.
    arrival_time is only set by time-based searches.
    """
    found: bool = False
    path: List[NodeId] = field(default_factory=list)
    cost: Optional[int] = None
    arrival_time: Optional[int] = None

    @classmethod
    def not_found(cls) -> "PathResult":
        return cls()


@dataclass
class GraphStatistics:
    """Summary of a graph at a point in time."""
    node_count: int
    max_nodes: int
    edge_count: int
    active_node_count: int
    active_edge_count: int
    max_time: int
    density: float
    state_space_bound: int
