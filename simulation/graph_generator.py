# simulation/graph_generator.py
"""
Sample and random temporal graphs.

Used to exercise the query engine without hand-building graphs:
- load_sample_graph(): fixed 10-node interval graph
- load_sample_event_graph(): fixed discrete-event graph
- RandomGraphGenerator: seeded random graphs of either model

Randomness comes from an instance RNG, never the global random state,
so a fixed seed always produces the same graph.
"""

import random
from typing import List, Optional, Tuple

from tgraph.graph import TemporalGraph
from tgraph.logging import get_logger
from tgraph.settings import settings

logger = get_logger(__name__)


# (u, v, weight, start, end), loaded undirected
SAMPLE_INTERVAL_EDGES: List[Tuple[int, int, int, int, int]] = [
    (1, 2, 1, 0, 5),
    (1, 3, 2, 0, 2),
    (2, 4, 3, 1, 4),
    (3, 4, 1, 2, 4),
    (4, 5, 2, 3, 6),
    (5, 6, 1, 5, 7),
    (6, 7, 2, 6, 8),
    (7, 8, 1, 7, 9),
    (2, 5, 2, 4, 6),
    (3, 6, 3, 5, 6),
    (1, 5, 5, 8, 9),
    (8, 9, 1, 8, 10),
    (9, 10, 1, 9, 10),
    (4, 8, 2, 6, 8),
]

SAMPLE_EVENT_NODES = ["A", "B", "C", "D", "E"]

# (src, dst, times)
SAMPLE_EVENT_EDGES: List[Tuple[str, str, List[int]]] = [
    ("A", "B", [1, 3]),
    ("B", "C", [2, 4]),
    ("A", "C", [6]),
    ("C", "D", [5]),
    ("D", "E", [7, 9]),
    ("B", "E", [10]),
]


def load_sample_graph() -> TemporalGraph:
    """Fixed interval graph on nodes 1..10 (undirected, weighted)."""
    graph = TemporalGraph()
    graph.init(10)
    for u, v, weight, start, end in SAMPLE_INTERVAL_EDGES:
        graph.add_undirected_edge(u, v, weight, start, end)
    return graph


def load_sample_event_graph() -> TemporalGraph:
    """Fixed discrete-event graph on nodes A..E."""
    graph = TemporalGraph()
    for node in SAMPLE_EVENT_NODES:
        graph.add_node(node)
    for src, dst, times in SAMPLE_EVENT_EDGES:
        graph.add_event_edge(src, dst, times)
    return graph


class RandomGraphGenerator:
    """
    Seeded generator for random temporal graphs.

    Example:
        generator = RandomGraphGenerator(seed=7)
        graph = generator.interval_graph(20, edge_density=0.2, max_time=10)
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

    def interval_graph(self, num_nodes: int, edge_density: float, max_time: int) -> TemporalGraph:
        """
        Random undirected interval graph on nodes 1..n.

        Each unordered pair gets an edge with probability edge_density,
        weight in 1..10, start in 0..max_time and end in start..max_time.
        n is capped at settings.random_graph_max_nodes.
        """
        n = min(num_nodes, settings.random_graph_max_nodes)
        max_time = max(max_time, 0)
        graph = TemporalGraph()
        graph.init(n)

        for i in range(1, n + 1):
            for j in range(i + 1, n + 1):
                if self.rng.random() < edge_density:
                    weight = self.rng.randint(1, 10)
                    start = self.rng.randint(0, max_time)
                    end = self.rng.randint(start, max_time)
                    graph.add_undirected_edge(i, j, weight, start, end)

        logger.info(
            "random_graph_generated",
            model="interval",
            seed=self.seed,
            nodes=graph.node_count,
            edges=graph.edge_count,
        )
        return graph

    def event_graph(
        self,
        num_nodes: int,
        edge_density: float,
        max_time: int,
        max_events: int = 3,
    ) -> TemporalGraph:
        """
        Random directed discrete-event graph on nodes N1..Nk.

        k is capped by the graph's node capacity. Each ordered pair gets an
        edge with probability edge_density and 1..max_events distinct
        timestamps in 0..max_time.
        """
        graph = TemporalGraph()
        k = min(num_nodes, graph.max_nodes)
        names = [f"N{i}" for i in range(1, k + 1)]
        for name in names:
            graph.add_node(name)

        time_range = range(0, max(max_time, 0) + 1)
        for src in names:
            for dst in names:
                if src == dst or self.rng.random() >= edge_density:
                    continue
                count = self.rng.randint(1, min(max(max_events, 1), len(time_range)))
                graph.add_event_edge(src, dst, self.rng.sample(time_range, count))

        logger.info(
            "random_graph_generated",
            model="event",
            seed=self.seed,
            nodes=graph.node_count,
            edges=graph.edge_count,
        )
        return graph
