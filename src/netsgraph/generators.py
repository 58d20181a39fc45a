"""Synthetic network generators."""

from __future__ import annotations

import logging
import random

import rustworkx

from netsgraph._network import Network

logger = logging.getLogger(__name__)


def random_network(
    number_vertices: int,
    number_edges: int,
    *,
    is_directed: bool = False,
    edge_tries: int = 30,
    seed: int | None = None,
) -> Network:
    """Random network on vertices ``0..number_vertices-1``.

    Draws random endpoint pairs with integer weights in
    ``[0, number_vertices)`` until *number_edges* edges exist or
    *edge_tries* consecutive draws fail to add an edge.
    """
    rng = random.Random(seed)
    network = Network(
        is_directed=is_directed,
        vertex_limit=max(number_vertices, 1),
        edge_limit=max(number_edges, 1),
    )
    for vertex_id in range(number_vertices):
        network.add_vertex(vertex_id)
    if number_vertices < 2:
        return network

    tries_left = edge_tries
    while network.edge_count < number_edges and tries_left > 0:
        source = rng.randrange(number_vertices)
        target = rng.randrange(number_vertices)
        weight = rng.randrange(number_vertices)
        if source != target and network.add_edge(source, target, weight=weight, force=False):
            tries_left = edge_tries
        else:
            tries_left -= 1

    if network.edge_count < number_edges:
        logger.debug(
            "random_network stopped at %d of %d edges after %d failed draws",
            network.edge_count,
            number_edges,
            edge_tries,
        )
    return network


def complete_network(size: int, *, is_directed: bool = False) -> Network:
    """Complete network on vertices ``0..size-1``.

    Each pair is joined once; on directed networks the edge points from
    the lower id to the higher one.
    """
    pairs = size * (size - 1) // 2
    network = Network(is_directed=is_directed, vertex_limit=size, edge_limit=pairs)
    for vertex_id in range(size):
        network.add_vertex(vertex_id)
    if size < 2:
        return network

    clique = rustworkx.generators.complete_graph(size)
    for a, b in clique.edge_list():
        network.add_edge(min(a, b), max(a, b), force=False)
    return network
