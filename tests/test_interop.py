"""Tests for rustworkx interop, adjacency matrices/CSV, and generators."""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

import numpy as np
import pytest
import rustworkx

from netsgraph import (
    CapacityError,
    Edge,
    Network,
    Vertex,
    complete_network,
    from_adjacency_matrix,
    from_rustworkx,
    random_network,
    read_adjacency_csv,
    to_adjacency_matrix,
    to_rustworkx,
    write_adjacency_csv,
)

if TYPE_CHECKING:
    from pathlib import Path

# ======================================================================
# rustworkx
# ======================================================================


class TestToRustworkx:
    def test_undirected(self, road: Network) -> None:
        graph, index = to_rustworkx(road)
        assert isinstance(graph, rustworkx.PyGraph)
        assert graph.num_nodes() == 7
        assert graph.num_edges() == 11
        assert graph[index["a"]] == Vertex("a")

    def test_directed(self) -> None:
        net = Network(is_directed=True)
        net.add_edge("a", "b", weight=3)
        graph, index = to_rustworkx(net)
        assert isinstance(graph, rustworkx.PyDiGraph)
        assert graph.has_edge(index["a"], index["b"])
        assert not graph.has_edge(index["b"], index["a"])
        assert graph.get_edge_data(index["a"], index["b"]).weight == 3

    def test_undirected_view_keeps_both_directions(self) -> None:
        net = Network(is_directed=True)
        net.add_edge("a", "b")
        net.add_edge("b", "a")
        graph, _ = to_rustworkx(net, undirected=True)
        assert isinstance(graph, rustworkx.PyGraph)
        assert graph.num_edges() == 2


class TestFromRustworkx:
    def test_round_trip(self, road: Network) -> None:
        graph, _ = to_rustworkx(road)
        back = from_rustworkx(graph)
        assert list(back.vertices) == list(road.vertices)
        assert back.edges == road.edges
        assert not back.is_directed

    def test_plain_payloads(self) -> None:
        graph = rustworkx.PyDiGraph()
        a = graph.add_node("a")
        b = graph.add_node({"id": "b", "weight": 4})
        c = graph.add_node(None)
        graph.add_edge(a, b, 2.5)
        graph.add_edge(b, c, {"id": "bc", "weight": 7})
        net = from_rustworkx(graph)
        assert net.is_directed
        assert list(net.vertices) == ["a", "b", c]
        assert net.vertices["b"].weight == 4
        assert net.edge_between("a", "b").weight == 2.5
        assert net.edges["bc"].weight == 7

    def test_self_loops_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        graph = rustworkx.PyGraph()
        a, b = graph.add_nodes_from(["a", "b"])
        graph.add_edge(a, a, None)
        graph.add_edge(a, b, None)
        with caplog.at_level(logging.WARNING, logger="netsgraph"):
            net = from_rustworkx(graph)
        assert net.edge_count == 1
        assert "self-loop" in caplog.text

    def test_direction_override(self) -> None:
        graph = rustworkx.generators.path_graph(3)
        net = from_rustworkx(graph, is_directed=True)
        assert net.is_directed
        assert net.edge_count == 2

    def test_duplicate_edge_ids_regenerated(self) -> None:
        graph = rustworkx.PyGraph()
        a, b, c = graph.add_nodes_from(["a", "b", "c"])
        graph.add_edge(a, b, Edge(id=0, source="a", target="b"))
        graph.add_edge(b, c, Edge(id=0, source="b", target="c"))
        net = from_rustworkx(graph)
        assert net.edge_count == 2

    def test_zero_limits_are_kept(self) -> None:
        net = from_rustworkx(rustworkx.PyGraph(), vertex_limit=0, edge_limit=0)
        assert net.vertex_limit == 0
        assert net.edge_limit == 0
        with pytest.raises(CapacityError):
            net.add_vertex("a")

    def test_default_limits_grow_with_graph(self) -> None:
        net = from_rustworkx(rustworkx.generators.complete_graph(80))
        assert net.vertex_limit == 1500
        assert net.edge_limit == 3160
        assert net.edge_count == 3160


# ======================================================================
# Adjacency matrices
# ======================================================================


class TestAdjacencyMatrix:
    def test_undirected_is_symmetric(self, triangle: Network) -> None:
        ids, matrix = to_adjacency_matrix(triangle)
        assert ids == ["a", "b", "c"]
        assert np.array_equal(matrix, matrix.T)
        assert matrix.sum() == 6
        assert not np.diagonal(matrix).any()

    def test_directed(self) -> None:
        net = Network(is_directed=True)
        net.add_edge("a", "b", weight=4)
        _, matrix = to_adjacency_matrix(net, weighted=True)
        assert matrix.tolist() == [[0.0, 4.0], [0.0, 0.0]]

    def test_weighted_sums_parallel_edges(self) -> None:
        net = Network(is_multigraph=True)
        net.add_edge("a", "b", weight=2)
        net.add_edge("a", "b", weight=3)
        _, matrix = to_adjacency_matrix(net, weighted=True)
        assert matrix[0, 1] == 5
        _, unweighted = to_adjacency_matrix(net)
        assert unweighted[0, 1] == 1

    def test_from_matrix(self) -> None:
        net = from_adjacency_matrix(["x", "y", "z"], [[0, 2, 0], [2, 0, 1], [0, 1, 0]])
        assert net.edge_count == 2
        assert net.edge_between("x", "y").weight == 2
        assert net.has_edge("z", "y")

    def test_from_asymmetric_matrix_undirected(self) -> None:
        net = from_adjacency_matrix(["x", "y", "z"], [[0, 0, 3], [1, 0, 0], [3, 1, 0]])
        assert net.edge_count == 3
        assert net.edge_between("x", "y").weight == 1

    def test_from_matrix_directed(self) -> None:
        net = from_adjacency_matrix(["x", "y"], [[0, 1], [1, 0]], is_directed=True)
        assert net.simple_edge_list == [("x", "y"), ("y", "x")]

    def test_diagonal_ignored(self, caplog: pytest.LogCaptureFixture) -> None:
        matrix = np.array([[1.0, 1.0], [1.0, 0.0]])
        with caplog.at_level(logging.WARNING, logger="netsgraph"):
            net = from_adjacency_matrix([0, 1], matrix, is_directed=True)
        assert net.edge_count == 2
        assert "diagonal" in caplog.text
        assert matrix[0, 0] == 1.0

    def test_bad_shape(self) -> None:
        with pytest.raises(ValueError, match="square"):
            from_adjacency_matrix(["a", "b"], [[0, 1, 0], [1, 0, 0]])
        with pytest.raises(ValueError, match="ids"):
            from_adjacency_matrix(["a"], [[0, 1], [1, 0]])

    def test_complete_round_trip(self) -> None:
        net = complete_network(6)
        ids, matrix = to_adjacency_matrix(net)
        back = from_adjacency_matrix(ids, matrix)
        assert back.edge_count == 15
        assert back.density == 1.0


class TestAdjacencyCsv:
    def test_write(self, triangle: Network) -> None:
        buffer = io.StringIO()
        write_adjacency_csv(triangle, buffer)
        assert buffer.getvalue() == ",a,b,c\na,0,1,1\nb,1,0,1\nc,1,1,0\n"

    def test_write_weighted(self) -> None:
        net = Network()
        net.add_edge("a", "b", weight=2.5)
        buffer = io.StringIO()
        write_adjacency_csv(net, buffer, weighted=True)
        assert buffer.getvalue() == ",a,b\na,0,2.5\nb,2.5,0\n"

    def test_read(self) -> None:
        text = ",1,2,3\n1,0,4,0\n2,4,0,1\n3,0,1,0\n"
        net = read_adjacency_csv(io.StringIO(text))
        assert list(net.vertices) == [1, 2, 3]
        assert net.edge_count == 2
        assert net.edge_between(1, 2).weight == 4

    def test_read_directed(self) -> None:
        text = ",a,b\na,0,1\nb,0,0\n"
        net = read_adjacency_csv(io.StringIO(text), is_directed=True)
        assert net.simple_edge_list == [("a", "b")]

    def test_malformed_rows_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        text = ",a,b,c\na,0,1\nb,1,0,x\nghost,1,1,1\nc,1,0,0\n"
        with caplog.at_level(logging.WARNING, logger="netsgraph"):
            net = read_adjacency_csv(io.StringIO(text))
        assert net.simple_edge_list == [("a", "c")]
        assert caplog.text.count("Skipping CSV line") == 3

    def test_empty_source(self) -> None:
        net = read_adjacency_csv(io.StringIO(""))
        assert net.vertex_count == 0

    def test_file_round_trip(self, tmp_path: Path, road: Network) -> None:
        path = tmp_path / "road.csv"
        write_adjacency_csv(road, path, weighted=True)
        back = read_adjacency_csv(path)
        assert list(back.vertices) == list(road.vertices)
        assert back.edge_count == road.edge_count
        assert back.shortest_paths("a", "g").path == "a - b (1) - d (3) - g (6)"

    def test_integer_looking_string_ids_come_back_as_ints(self) -> None:
        net = Network()
        net.add_edge("1", "007")
        net.add_edge("007", "x")
        buffer = io.StringIO()
        write_adjacency_csv(net, buffer)
        back = read_adjacency_csv(io.StringIO(buffer.getvalue()))
        assert list(back.vertices) == [1, 7, "x"]
        assert back.simple_edge_list == [(1, 7), (7, "x")]


# ======================================================================
# Generators
# ======================================================================


class TestGenerators:
    def test_complete(self) -> None:
        net = complete_network(5)
        assert net.vertex_count == 5
        assert net.edge_count == 10
        assert net.density == 1.0

    def test_complete_directed_points_upward(self) -> None:
        net = complete_network(4, is_directed=True)
        assert all(source < target for source, target in net.simple_edge_list)

    @pytest.mark.parametrize("size", [0, 1])
    def test_complete_trivial(self, size: int) -> None:
        net = complete_network(size)
        assert net.vertex_count == size
        assert net.edge_count == 0

    def test_random_is_reproducible(self) -> None:
        first = random_network(20, 30, seed=42)
        second = random_network(20, 30, seed=42)
        assert first.simple_edge_list == second.simple_edge_list
        assert [e.weight for e in first.edge_list] == [e.weight for e in second.edge_list]

    def test_random_bounds(self) -> None:
        net = random_network(15, 40, seed=9)
        assert list(net.vertices) == list(range(15))
        assert net.edge_count <= 40
        assert all(e.source != e.target for e in net.edge_list)
        assert all(0 <= e.weight < 15 for e in net.edge_list)

    def test_random_saturates(self) -> None:
        # Only 3 pairs exist on 3 vertices; generation stops instead of looping
        net = random_network(3, 10, seed=1)
        assert net.edge_count <= 3

    def test_random_directed(self) -> None:
        net = random_network(10, 20, is_directed=True, seed=4)
        assert net.is_directed
