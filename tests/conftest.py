"""Shared fixtures for netsgraph tests."""

from __future__ import annotations

import pytest

from netsgraph import Network

ROAD_EDGES = [
    ("a", "b", 1),
    ("a", "c", 2),
    ("b", "d", 2),
    ("b", "f", 3),
    ("c", "d", 3),
    ("c", "e", 4),
    ("d", "e", 2),
    ("d", "f", 3),
    ("d", "g", 3),
    ("e", "g", 5),
    ("f", "g", 4),
]


@pytest.fixture
def road() -> Network:
    """Undirected weighted network with a unique shortest a→g path of cost 6."""
    net = Network()
    net.add_edge_list(ROAD_EDGES)
    return net


@pytest.fixture
def triangle() -> Network:
    net = Network()
    net.add_edge_list([("a", "b"), ("b", "c"), ("c", "a")])
    return net


@pytest.fixture
def square() -> Network:
    net = Network()
    net.add_edge_list([("a", "b"), ("b", "c"), ("c", "d"), ("d", "a")])
    return net


@pytest.fixture
def k4() -> Network:
    net = Network()
    net.add_edge_list(
        [("a", "b"), ("a", "c"), ("a", "d"), ("b", "c"), ("b", "d"), ("c", "d")]
    )
    return net
