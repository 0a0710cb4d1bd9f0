# tests/test_resolver.py
"""
Test activation descriptors and the activation resolver.

Verifies earliest-not-before lookup, snapshot neighbors and tie-break order.
"""

from tgraph.graph import (
    DiscreteActivation,
    IntervalActivation,
    TemporalGraph,
    min_active_weight,
    neighbors,
    transitions,
)


class TestDiscreteActivation:
    """Tests for timestamp-set activation."""

    def test_earliest_departure_not_before(self):
        activation = DiscreteActivation.from_times([2, 5])
        assert activation.earliest_departure(0) == 2
        assert activation.earliest_departure(2) == 2
        assert activation.earliest_departure(3) == 5
        assert activation.earliest_departure(5) == 5
        assert activation.earliest_departure(6) is None

    def test_active_only_at_listed_times(self):
        activation = DiscreteActivation.from_times([2, 5])
        assert activation.is_active_at(2)
        assert not activation.is_active_at(3)
        assert not activation.is_active_at(6)

    def test_weight_is_zero(self):
        assert DiscreteActivation.from_times([1]).weight == 0

    def test_empty_is_invalid(self):
        assert not DiscreteActivation.from_times([]).is_valid()


class TestIntervalActivation:
    """Tests for closed-range activation."""

    def test_earliest_departure_clamps_to_start(self):
        activation = IntervalActivation(start=3, end=6, weight=2)
        assert activation.earliest_departure(0) == 3
        assert activation.earliest_departure(4) == 4
        assert activation.earliest_departure(6) == 6
        assert activation.earliest_departure(7) is None

    def test_inclusive_bounds(self):
        activation = IntervalActivation(start=3, end=6)
        assert activation.is_active_at(3)
        assert activation.is_active_at(6)
        assert not activation.is_active_at(2)
        assert not activation.is_active_at(7)

    def test_validity(self):
        assert IntervalActivation(start=3, end=3).is_valid()
        assert not IntervalActivation(start=4, end=3).is_valid()
        assert not IntervalActivation(start=0, end=3, weight=-1).is_valid()


class TestResolver:
    """Tests for neighbors() and transitions()."""

    def test_transition_uses_earliest_time_not_before(self, event_graph):
        """A -> B at [2, 5] departing from t=3 leaves at 5, not 2."""
        moves = transitions(event_graph, "A", 3)
        assert [(m.dst, m.time) for m in moves] == [("B", 5), ("C", 9)]

    def test_expired_edges_omitted(self, event_graph):
        moves = transitions(event_graph, "A", 6)
        assert [(m.dst, m.time) for m in moves] == [("C", 9)]
        assert transitions(event_graph, "A", 10) == []

    def test_transitions_of_unknown_node(self, event_graph):
        assert transitions(event_graph, "Z", 0) == []

    def test_neighbors_at_exact_time(self, triangle_graph):
        assert neighbors(triangle_graph, 1, 0) == [(2, 1), (3, 10)]
        assert neighbors(triangle_graph, 1, 6) == []
        assert neighbors(triangle_graph, 99, 0) == []

    def test_tie_break_is_insertion_order(self):
        """Equal departure times are offered in insertion order, not sorted by destination."""
        graph = TemporalGraph()
        for node in ["S", "Z", "M", "A"]:
            graph.add_node(node)
        graph.add_event_edge("S", "Z", [4])
        graph.add_event_edge("S", "M", [4])
        graph.add_event_edge("S", "A", [4])
        assert [m.dst for m in transitions(graph, "S", 0)] == ["Z", "M", "A"]

    def test_interval_transition_departs_now_or_at_start(self):
        graph = TemporalGraph()
        graph.init(3)
        graph.add_interval_edge(1, 2, 4, 0, 5)
        graph.add_interval_edge(1, 3, 1, 7, 9)
        moves = transitions(graph, 1, 2)
        assert [(m.dst, m.time, m.weight) for m in moves] == [(2, 2, 4), (3, 7, 1)]

    def test_min_active_weight(self, triangle_graph):
        assert min_active_weight(triangle_graph, 0) == 1
        assert min_active_weight(triangle_graph, 6) == 0
