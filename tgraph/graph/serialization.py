# tgraph/graph/serialization.py
"""
Graph (de)serialization.

Two formats:

1. JSON snapshot (lossless round trip):
   {"nodes": [...], "edges": [{"src", "dst", "times"} | {"src", "dst",
   "start", "end", "weight"}], "maxTime": int, "maxNodes": int}
   Node order, edge order and activation data are preserved. Undirected
   edges are exported as their two directed halves.

2. Edge list text (load only):
   line 1: n m T
   next m lines: u v weight start end
   Nodes are 1..n, every edge is loaded undirected.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..logging import get_logger
from .activation import DiscreteActivation, IntervalActivation
from .store import TemporalGraph

logger = get_logger(__name__)


class GraphFormatError(ValueError):
    """Serialized graph data is malformed or describes an invalid graph."""


class EdgeRecord(BaseModel):
    """One directed edge with either discrete times or an interval."""
    src: Union[int, str]
    dst: Union[int, str]
    times: Optional[List[int]] = None
    start: Optional[int] = None
    end: Optional[int] = None
    weight: Optional[int] = None

    @model_validator(mode="after")
    def _one_activation(self) -> "EdgeRecord":
        has_interval = self.start is not None or self.end is not None
        if self.times is not None and has_interval:
            raise ValueError("edge has both times and an interval")
        if self.times is not None and self.weight is not None:
            raise ValueError("discrete edge has no weight")
        if self.times is None and (self.start is None or self.end is None):
            raise ValueError("edge needs times or both start and end")
        return self


class GraphSnapshot(BaseModel):
    """Ordered nodes, ordered edges and the recorded maximum timestamp."""
    model_config = ConfigDict(populate_by_name=True)

    nodes: List[Union[int, str]]
    edges: List[EdgeRecord] = []
    max_time: int = Field(default=0, alias="maxTime")
    max_nodes: Optional[int] = Field(default=None, alias="maxNodes")


# ============================================================
# JSON SNAPSHOT
# ============================================================


def snapshot(graph: TemporalGraph) -> GraphSnapshot:
    """Capture graph as a GraphSnapshot."""
    records = []
    for edge in graph.edges:
        activation = edge.activation
        if edge.is_discrete:
            records.append(EdgeRecord(src=edge.src, dst=edge.dst, times=list(activation.times)))
        else:
            records.append(EdgeRecord(
                src=edge.src,
                dst=edge.dst,
                start=activation.start,
                end=activation.end,
                weight=activation.weight,
            ))
    return GraphSnapshot(
        nodes=list(graph.nodes),
        edges=records,
        max_time=graph.max_time,
        max_nodes=graph.max_nodes,
    )


def to_json(graph: TemporalGraph, indent: Optional[int] = 2) -> str:
    """Render graph as a JSON snapshot string."""
    return snapshot(graph).model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def _is_dense(nodes: List[Union[int, str]]) -> bool:
    return bool(nodes) and nodes == list(range(1, len(nodes) + 1))


def from_snapshot(data: GraphSnapshot) -> TemporalGraph:
    """
    Rebuild a graph from a snapshot.

    Dense integer node lists 1..n are restored with init(n) so they are
    not limited by max_nodes, matching how they were built.

    Raises:
        GraphFormatError: Duplicate/over-capacity node or rejected edge
    """
    graph = TemporalGraph(max_nodes=data.max_nodes)

    if _is_dense(data.nodes):
        graph.init(len(data.nodes))
    else:
        for node in data.nodes:
            if not graph.add_node(node):
                raise GraphFormatError(f"Node {node!r} is duplicated or exceeds capacity")

    for index, record in enumerate(data.edges):
        if record.times is not None:
            activation = DiscreteActivation.from_times(record.times)
        else:
            activation = IntervalActivation(
                start=record.start,
                end=record.end,
                weight=record.weight or 0,
            )
        if not graph.add_edge(record.src, record.dst, activation):
            raise GraphFormatError(f"Edge {index} ({record.src!r} -> {record.dst!r}) was rejected")

    if graph.max_time != data.max_time:
        logger.warning("snapshot_max_time_mismatch", recorded=data.max_time, computed=graph.max_time)

    return graph


def from_json(text: str) -> TemporalGraph:
    """
    Parse a JSON snapshot into a graph.

    Raises:
        GraphFormatError: Invalid JSON, schema mismatch or invalid graph
    """
    try:
        data = GraphSnapshot.model_validate_json(text)
    except ValidationError as e:
        raise GraphFormatError(f"Invalid graph snapshot: {e}") from e
    return from_snapshot(data)


# ============================================================
# EDGE LIST TEXT
# ============================================================


def _parse_ints(line: str, expected: int, line_number: int, what: str) -> List[int]:
    parts = line.split()
    if len(parts) != expected:
        raise GraphFormatError(f"Line {line_number}: expected {what}")
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise GraphFormatError(f"Line {line_number}: expected {what}") from None


def parse_edge_list(text: str) -> TemporalGraph:
    """
    Load the edge list text format as an undirected interval graph.

    Raises:
        GraphFormatError: Malformed header or edge line, or an edge the
            graph rejects (endpoint outside 1..n, start > end, negative weight)
    """
    lines = [line for line in text.strip().splitlines() if line.strip()]
    if not lines:
        raise GraphFormatError("Empty edge list")

    n, m, duration = _parse_ints(lines[0], 3, 1, "n m T")
    if len(lines) - 1 < m:
        raise GraphFormatError(f"Expected {m} edges but found only {len(lines) - 1}")

    graph = TemporalGraph()
    graph.init(n)

    for i in range(1, m + 1):
        u, v, weight, start, end = _parse_ints(lines[i], 5, i + 1, "u v weight start end")
        if not graph.add_undirected_edge(u, v, weight, start, end):
            raise GraphFormatError(f"Line {i + 1}: edge {u} - {v} rejected")

    logger.info("edge_list_loaded", nodes=n, edges=m, duration=duration)
    return graph
