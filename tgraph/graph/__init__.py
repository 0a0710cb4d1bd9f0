# Graph module - temporal edge store and time-aware query algorithms
from .activation import Activation, DiscreteActivation, IntervalActivation
from .models import NodeId, TemporalEdge, TemporalState, Transition, Degree, PathResult, GraphStatistics
from .store import TemporalGraph
from .resolver import neighbors, transitions, min_active_weight
from .traversal import bfs, dfs, temporal_bfs
from .paths import earliest_arrival_path, fastest_path, dijkstra, astar, reverse_hop_distances
from .aggregates import temporal_degree, temporal_centrality, is_temporally_connected, graph_statistics
from .serialization import (
    GraphFormatError,
    GraphSnapshot,
    EdgeRecord,
    snapshot,
    to_json,
    from_snapshot,
    from_json,
    parse_edge_list,
)

__all__ = [
    # Activation (CANONICAL)
    "Activation",
    "DiscreteActivation",
    "IntervalActivation",
    # Models
    "NodeId",
    "TemporalEdge",
    "TemporalState",
    "Transition",
    "Degree",
    "PathResult",
    "GraphStatistics",
    # Store
    "TemporalGraph",
    # Resolver
    "neighbors",
    "transitions",
    "min_active_weight",
    # Traversal
    "bfs",
    "dfs",
    "temporal_bfs",
    # Paths
    "earliest_arrival_path",
    "fastest_path",
    "dijkstra",
    "astar",
    "reverse_hop_distances",
    # Aggregates
    "temporal_degree",
    "temporal_centrality",
    "is_temporally_connected",
    "graph_statistics",
    # Serialization
    "GraphFormatError",
    "GraphSnapshot",
    "EdgeRecord",
    "snapshot",
    "to_json",
    "from_snapshot",
    "from_json",
    "parse_edge_list",
]
