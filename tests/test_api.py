# tests/test_api.py
"""
Test the HTTP API.

Each test gets a fresh graph registry through the client fixture.
"""


def _load_event_sample(client):
    response = client.post("/graph/load/sample", params={"model": "event"})
    assert response.status_code == 200
    return response.json()


def _build_triangle(client):
    client.post("/graph/init", json={"n": 3})
    for src, dst, weight in [(1, 2, 1), (2, 3, 1), (1, 3, 10)]:
        response = client.post(
            "/graph/edges",
            json={"src": src, "dst": dst, "weight": weight, "start": 0, "end": 5, "directed": False},
        )
        assert response.json()["added"] is True


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "temporal-graph-engine"}

    def test_security_headers(self, client):
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestMutation:
    """Tests for init, node and edge endpoints."""

    def test_init(self, client):
        response = client.post("/graph/init", json={"n": 4})
        assert response.json() == {"node_count": 4, "edge_count": 0}

    def test_add_node(self, client):
        assert client.post("/graph/nodes", json={"node": "A"}).json()["added"] is True
        response = client.post("/graph/nodes", json={"node": "A"})
        assert response.status_code == 200
        assert response.json() == {"added": False, "node_count": 1, "edge_count": 0}

    def test_undirected_interval_edges(self, client):
        _build_triangle(client)
        response = client.post("/graph/paths/dijkstra", json={"start": 1, "end": 3, "t": 0})
        assert response.json() == {"found": True, "path": [1, 2, 3], "cost": 2, "arrival_time": None}

    def test_discrete_edge(self, client):
        client.post("/graph/nodes", json={"node": "A"})
        client.post("/graph/nodes", json={"node": "B"})
        response = client.post("/graph/edges", json={"src": "A", "dst": "B", "times": [5, 2]})
        assert response.json() == {"added": True, "node_count": 2, "edge_count": 1}
        assert client.get("/graph").json()["edges"] == [{"src": "A", "dst": "B", "times": [2, 5]}]

    def test_rejected_edges_report_false(self, client):
        client.post("/graph/init", json={"n": 3})
        bad_edges = [
            {"src": 1, "dst": 9, "start": 0, "end": 2},
            {"src": 1, "dst": 2, "start": 3, "end": 2},
            {"src": 1, "dst": 2, "start": 0, "end": 2, "weight": -1},
            {"src": 1, "dst": 2, "times": []},
            {"src": 1, "dst": 2, "start": 0},
        ]
        for body in bad_edges:
            response = client.post("/graph/edges", json=body)
            assert response.status_code == 200
            assert response.json()["added"] is False
        assert client.get("/graph/stats").json()["edge_count"] == 0

    def test_discrete_edge_with_interval_options_rejected(self, client):
        """Discrete edges are directed and unweighted; conflicting options are not dropped silently."""
        client.post("/graph/nodes", json={"node": "A"})
        client.post("/graph/nodes", json={"node": "B"})
        for body in [
            {"src": "A", "dst": "B", "times": [1], "directed": False},
            {"src": "A", "dst": "B", "times": [1], "weight": 4},
        ]:
            response = client.post("/graph/edges", json=body)
            assert response.status_code == 200
            assert response.json()["added"] is False
        assert client.get("/graph").json()["edges"] == []

    def test_invalid_body(self, client):
        assert client.post("/graph/init", json={"n": -1}).status_code == 422


class TestLoading:
    """Tests for sample, random, edge list and JSON loads."""

    def test_load_samples(self, client):
        assert client.post("/graph/load/sample").json() == {"node_count": 10, "edge_count": 28}
        assert _load_event_sample(client) == {"node_count": 5, "edge_count": 6}

    def test_random_is_reproducible(self, client):
        body = {"model": "event", "num_nodes": 8, "edge_density": 0.4, "max_time": 9, "seed": 11}
        client.post("/graph/load/random", json=body)
        first = client.get("/graph").json()
        client.post("/graph/load/random", json=body)
        assert client.get("/graph").json() == first

    def test_random_interval(self, client):
        body = {"model": "interval", "num_nodes": 6, "edge_density": 1.0, "max_time": 5, "seed": 1}
        assert client.post("/graph/load/random", json=body).json() == {"node_count": 6, "edge_count": 30}

    def test_edge_list(self, client):
        response = client.post("/graph/load/edge-list", json={"text": "3 2 5\n1 2 4 0 3\n2 3 1 1 5\n"})
        assert response.json() == {"node_count": 3, "edge_count": 4}
        result = client.post("/graph/paths/astar", json={"start": 1, "end": 3, "t": 2}).json()
        assert result["path"] == [1, 2, 3]
        assert result["cost"] == 5

    def test_edge_list_errors(self, client):
        for text in ["", "3 2 5\n1 2 4 0 3\n", "2 1 5\n1 3 1 0 2\n"]:
            response = client.post("/graph/load/edge-list", json={"text": text})
            assert response.status_code == 400

    def test_json_round_trip(self, client):
        _load_event_sample(client)
        exported = client.get("/graph").json()
        assert exported["maxTime"] == 10

        client.post("/graph/init", json={"n": 2})
        response = client.post("/graph/load/json", json=exported)
        assert response.json() == {"node_count": 5, "edge_count": 6}
        assert client.get("/graph").json() == exported

    def test_json_invalid_graph(self, client):
        body = {"nodes": ["A"], "edges": [{"src": "A", "dst": "B", "times": [1]}]}
        assert client.post("/graph/load/json", json=body).status_code == 400


class TestQueries:
    """Tests for snapshot, traversal, path and aggregate endpoints."""

    def test_active_snapshot(self, client):
        _load_event_sample(client)
        response = client.get("/graph/active", params={"t": 5})
        assert response.json() == {
            "t": 5,
            "nodes": ["C", "D"],
            "edges": [{"src": "C", "dst": "D", "weight": 0}],
        }

    def test_stats(self, client):
        _load_event_sample(client)
        stats = client.get("/graph/stats", params={"t": 5}).json()
        assert stats["node_count"] == 5
        assert stats["edge_count"] == 6
        assert stats["active_edge_count"] == 1
        assert stats["max_time"] == 10

    def test_bfs_and_dfs(self, client):
        _build_triangle(client)
        assert client.post("/graph/bfs", json={"start": 1, "t": 0}).json() == {"order": [1, 2, 3]}
        assert client.post("/graph/dfs", json={"start": 3, "t": 0}).json() == {"order": [3, 2, 1]}
        assert client.post("/graph/bfs", json={"start": 1, "t": 9}).json() == {"order": [1]}

    def test_temporal_bfs(self, client):
        _load_event_sample(client)
        response = client.post("/graph/temporal-bfs", json={"start": "A", "t": 0})
        states = [(s["node"], s["time"]) for s in response.json()["states"]]
        assert states == [("A", 0), ("B", 1), ("C", 6), ("C", 2), ("E", 10), ("D", 5), ("E", 7)]

    def test_time_based_paths(self, client):
        _load_event_sample(client)
        for algorithm in ["earliest", "fastest"]:
            response = client.post(f"/graph/paths/{algorithm}", json={"start": "A", "end": "E", "t": 0})
            assert response.json() == {
                "found": True,
                "path": ["A", "B", "C", "D", "E"],
                "cost": 7,
                "arrival_time": 7,
            }

    def test_path_not_found(self, client):
        _load_event_sample(client)
        response = client.post("/graph/paths/earliest", json={"start": "E", "end": "A", "t": 0})
        assert response.json() == {"found": False, "path": [], "cost": None, "arrival_time": None}

    def test_centrality(self, client):
        _load_event_sample(client)
        scores = client.get("/graph/centrality", params={"t": 0}).json()["scores"]
        assert [s["node"] for s in scores] == ["A", "B", "C", "D", "E"]
        assert scores[0] == {"node": "A", "score": 6}

    def test_connectivity(self, client):
        _load_event_sample(client)
        assert client.post("/graph/connectivity", json={"start": "A", "end": "E", "t": 0}).json() == {"connected": True}
        assert client.post("/graph/connectivity", json={"start": "E", "end": "A", "t": 0}).json() == {"connected": False}

    def test_degree(self, client):
        _load_event_sample(client)
        response = client.post("/graph/degree", json={"node": "C", "t": 5})
        assert response.json() == {"node": "C", "t": 5, "in_degree": 0, "out_degree": 1}
