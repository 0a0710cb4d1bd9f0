# tgraph/api/routes_graph.py
"""
Graph API routes.

HTTP binding layer over the temporal query engine. Mutations report
validation failure as {"added": false}; only malformed serialized input
is an HTTP error (400).
"""

from dataclasses import asdict
from typing import Any, Dict, List, Literal, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from ..graph import (
    GraphFormatError,
    GraphSnapshot,
    PathResult,
    TemporalGraph,
    astar,
    bfs,
    dfs,
    dijkstra,
    earliest_arrival_path,
    fastest_path,
    from_snapshot,
    graph_statistics,
    is_temporally_connected,
    parse_edge_list,
    snapshot,
    temporal_bfs,
    temporal_centrality,
    temporal_degree,
)
from ..graph.activation import DiscreteActivation
from ..logging import get_api_logger
from .registry import GraphRegistry, get_registry

router = APIRouter(prefix="/graph", tags=["graph"])
logger = get_api_logger()

Node = Union[int, str]


class InitRequest(BaseModel):
    """Reset to nodes 1..n."""
    n: int = Field(..., ge=0)


class NodeRequest(BaseModel):
    """Add one node."""
    node: Node


class EdgeRequest(BaseModel):
    """Add an edge: discrete when times is given, interval otherwise."""
    src: Node
    dst: Node
    times: Optional[List[int]] = None
    start: Optional[int] = None
    end: Optional[int] = None
    weight: int = 0
    directed: bool = True


class TraversalRequest(BaseModel):
    """Traversal from start at time t."""
    start: Node
    t: int = 0


class PathRequest(BaseModel):
    """Path query from start to end at time t."""
    start: Node
    end: Node
    t: int = 0


class DegreeRequest(BaseModel):
    """Temporal degree of node at time t."""
    node: Node
    t: int = 0


class RandomGraphRequest(BaseModel):
    """Seeded random graph parameters."""
    model: Literal["interval", "event"] = "interval"
    num_nodes: int = Field(default=10, ge=0)
    edge_density: float = Field(default=0.3, ge=0.0, le=1.0)
    max_time: int = Field(default=10, ge=0)
    max_events: int = Field(default=3, ge=1)
    seed: Optional[int] = None


class EdgeListRequest(BaseModel):
    """Edge list text (n m T header, then u v weight start end lines)."""
    text: str


class PathResponse(BaseModel):
    """Path query result."""
    found: bool
    path: List[Node]
    cost: Optional[int] = None
    arrival_time: Optional[int] = None


def _path_response(result: PathResult) -> PathResponse:
    return PathResponse(
        found=result.found,
        path=result.path,
        cost=result.cost,
        arrival_time=result.arrival_time,
    )


def _summary(graph: TemporalGraph) -> Dict[str, Any]:
    return {"node_count": graph.node_count, "edge_count": graph.edge_count}


# ============================================================
# MUTATION
# ============================================================


@router.post("/init")
async def init_graph(request: InitRequest, registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Reset the graph to nodes 1..n with no edges."""
    with registry.use() as graph:
        graph.init(request.n)
        return _summary(graph)


@router.post("/nodes")
async def add_node(request: NodeRequest, registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Add a node. added is false on duplicate or at capacity."""
    with registry.use() as graph:
        return {"added": graph.add_node(request.node), **_summary(graph)}


@router.post("/edges")
async def add_edge(request: EdgeRequest, registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """
    Add an edge.

    With times: discrete-event edge, always directed and unweighted, so
    directed=false or an explicit weight is rejected. Otherwise start and
    end are required and directed=false also adds the mirror edge.
    """
    with registry.use() as graph:
        if request.times is not None and (not request.directed or "weight" in request.model_fields_set):
            added = False
        elif request.times is not None:
            added = graph.add_edge(request.src, request.dst, DiscreteActivation.from_times(request.times))
        elif request.start is None or request.end is None:
            added = False
        else:
            added = graph.add_interval_edge(
                request.src,
                request.dst,
                request.weight,
                request.start,
                request.end,
                directed=request.directed,
            )
        return {"added": added, **_summary(graph)}


# ============================================================
# LOADING
# ============================================================


@router.post("/load/sample")
async def load_sample(
    model: Literal["interval", "event"] = "interval",
    registry: GraphRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Replace the graph with a built-in sample graph."""
    from simulation.graph_generator import load_sample_event_graph, load_sample_graph

    graph = load_sample_graph() if model == "interval" else load_sample_event_graph()
    registry.replace(graph)
    logger.info("graph_loaded", source="sample", model=model, **_summary(graph))
    return _summary(graph)


@router.post("/load/random")
async def load_random(
    request: RandomGraphRequest,
    registry: GraphRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Replace the graph with a seeded random graph."""
    from simulation.graph_generator import RandomGraphGenerator

    generator = RandomGraphGenerator(seed=request.seed)
    if request.model == "interval":
        graph = generator.interval_graph(request.num_nodes, request.edge_density, request.max_time)
    else:
        graph = generator.event_graph(
            request.num_nodes, request.edge_density, request.max_time, request.max_events
        )
    registry.replace(graph)
    return _summary(graph)


@router.post("/load/edge-list")
async def load_edge_list(
    request: EdgeListRequest,
    registry: GraphRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Replace the graph with one parsed from edge list text."""
    try:
        graph = parse_edge_list(request.text)
    except GraphFormatError as e:
        logger.warning("graph_load_failed", source="edge_list", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    registry.replace(graph)
    return _summary(graph)


@router.post("/load/json")
async def load_json(
    request: GraphSnapshot,
    registry: GraphRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """Replace the graph with one rebuilt from a JSON snapshot."""
    try:
        graph = from_snapshot(request)
    except GraphFormatError as e:
        logger.warning("graph_load_failed", source="json", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    registry.replace(graph)
    return _summary(graph)


# ============================================================
# SNAPSHOTS
# ============================================================


@router.get("")
async def get_graph(registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Full snapshot: ordered nodes, ordered edges, maxTime."""
    with registry.use() as graph:
        return snapshot(graph).model_dump(by_alias=True, exclude_none=True)


@router.get("/active")
async def get_active(t: int = Query(...), registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Edges and nodes active at exactly t."""
    with registry.use() as graph:
        edges = graph.active_edges_at(t)
        active_nodes = graph.active_nodes_at(t)
        return {
            "t": t,
            "nodes": [node for node in graph.nodes if node in active_nodes],
            "edges": [{"src": e.src, "dst": e.dst, "weight": e.weight} for e in edges],
        }


@router.get("/stats")
async def get_stats(t: int = Query(default=0), registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Graph statistics at t."""
    with registry.use() as graph:
        return asdict(graph_statistics(graph, t))


# ============================================================
# TRAVERSAL
# ============================================================


@router.post("/bfs")
async def run_bfs(request: TraversalRequest, registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Breadth-first order over the snapshot at t."""
    with registry.use() as graph:
        return {"order": bfs(graph, request.start, request.t)}


@router.post("/dfs")
async def run_dfs(request: TraversalRequest, registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Depth-first order over the snapshot at t."""
    with registry.use() as graph:
        return {"order": dfs(graph, request.start, request.t)}


@router.post("/temporal-bfs")
async def run_temporal_bfs(
    request: TraversalRequest,
    registry: GraphRegistry = Depends(get_registry),
) -> Dict[str, Any]:
    """(node, time) states reached departing no earlier than t."""
    with registry.use() as graph:
        states = temporal_bfs(graph, request.start, request.t)
        return {"states": [{"node": s.node, "time": s.time} for s in states]}


# ============================================================
# PATHS
# ============================================================


@router.post("/paths/earliest", response_model=PathResponse)
async def path_earliest(request: PathRequest, registry: GraphRegistry = Depends(get_registry)) -> PathResponse:
    """Earliest-arrival path (breadth-first over states)."""
    with registry.use() as graph:
        return _path_response(earliest_arrival_path(graph, request.start, request.end, request.t))


@router.post("/paths/fastest", response_model=PathResponse)
async def path_fastest(request: PathRequest, registry: GraphRegistry = Depends(get_registry)) -> PathResponse:
    """Minimum elapsed time path (priority queue over states)."""
    with registry.use() as graph:
        return _path_response(fastest_path(graph, request.start, request.end, request.t))


@router.post("/paths/dijkstra", response_model=PathResponse)
async def path_dijkstra(request: PathRequest, registry: GraphRegistry = Depends(get_registry)) -> PathResponse:
    """Minimum weight path over the snapshot at t."""
    with registry.use() as graph:
        return _path_response(dijkstra(graph, request.start, request.end, request.t))


@router.post("/paths/astar", response_model=PathResponse)
async def path_astar(request: PathRequest, registry: GraphRegistry = Depends(get_registry)) -> PathResponse:
    """Minimum weight path over the snapshot at t, heuristic guided."""
    with registry.use() as graph:
        return _path_response(astar(graph, request.start, request.end, request.t))


# ============================================================
# AGGREGATES
# ============================================================


@router.get("/centrality")
async def get_centrality(t: int = Query(default=0), registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Temporal centrality of every node at t, in node order."""
    with registry.use() as graph:
        scores = temporal_centrality(graph, t)
        return {"t": t, "scores": [{"node": node, "score": score} for node, score in scores.items()]}


@router.post("/connectivity")
async def get_connectivity(request: PathRequest, registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Whether end is temporally reachable from start departing at t."""
    with registry.use() as graph:
        connected = is_temporally_connected(graph, request.start, request.end, request.t)
        return {"connected": connected}


@router.post("/degree")
async def get_degree(request: DegreeRequest, registry: GraphRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """In/out degree of node over edges active at t."""
    with registry.use() as graph:
        degree = temporal_degree(graph, request.node, request.t)
        return {"node": request.node, "t": request.t, **degree._asdict()}
