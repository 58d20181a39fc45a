"""Triangle and 4-cycle enumeration.

Every finder works on the 2-core: a vertex of degree below 2 cannot sit
on a cycle.  Found cycles are deduplicated by structural equality, which
is quadratic in the number of cycles found.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from netsgraph._cycle import Cycle

if TYPE_CHECKING:
    from netsgraph._network import Network
    from netsgraph.ids import VertexId
    from netsgraph.types import Edge

logger = logging.getLogger(__name__)


def _append_unique(found: list[Cycle], cycle: Cycle) -> bool:
    if any(c.is_same_as(cycle) for c in found):
        return False
    found.append(cycle)
    return True


def triplets(network: Network) -> list[Cycle]:
    """All structurally distinct triangles of *network*."""
    found: list[Cycle] = []
    k2 = network.core(2)
    is_directed = network.is_directed

    for initial_edge in k2.edges.values():
        neighbors_source = k2.neighbors(initial_edge.source)
        neighbors_target = k2.neighbors(initial_edge.target)
        candidates = neighbors_source
        if len(neighbors_target) < len(candidates):
            candidates = neighbors_target

        for vertex_id in candidates:
            if initial_edge.has_vertex(vertex_id):
                continue
            triplet = Cycle(initial_edge, is_directed=is_directed)
            if not triplet.add_edge(k2.edge_between(triplet.tip, vertex_id)):
                continue
            if not triplet.close(k2.edge_between(triplet.tip, triplet.loop)):
                continue
            if triplet.is_complete:
                _append_unique(found, triplet)

    logger.debug("Found %d triplets among %d 2-core edges", len(found), k2.edge_count)
    return found


def quadruplets(network: Network) -> list[Cycle]:
    """All structurally distinct 4-cycles, grown from each edge's neighbourhood."""
    found: list[Cycle] = []
    k2 = network.core(2)
    is_directed = k2.is_directed

    for first_edge in k2.edges.values():
        loop_vertex: VertexId = first_edge.source
        pair_vertex: VertexId = first_edge.target
        pair_neighbors = k2.neighbors(pair_vertex)

        if not is_directed:
            loop_neighbors = k2.neighbors(loop_vertex)
            if len(pair_neighbors) > len(loop_neighbors):
                loop_vertex, pair_vertex = pair_vertex, loop_vertex
                pair_neighbors = loop_neighbors

        for vertex_id in pair_neighbors:
            parallel_edges = k2.edges_from(vertex_id) if is_directed else k2.edges_with(vertex_id)
            for parallel in parallel_edges:
                cycle = Cycle(first_edge, is_directed=is_directed, loop_vertex=loop_vertex)
                if not cycle.add_edge(k2.edge_between(cycle.tip, vertex_id)):
                    continue
                if not cycle.add_edge(parallel):
                    continue
                if cycle.close(k2.edge_between(cycle.tip, loop_vertex)):
                    _append_unique(found, cycle)

    logger.debug("Found %d quadruplets among %d 2-core edges", len(found), k2.edge_count)
    return found


def quadruplets_edge_pairing(network: Network) -> list[Cycle]:
    """All structurally distinct 4-cycles, from every ordered pair of opposite sides."""
    found: list[Cycle] = []
    k2 = network.core(2)
    is_directed = k2.is_directed
    edges = list(k2.edges.values())

    for edge in edges:
        for parallel in edges:
            square = _square(k2, edge, parallel)
            if square is not None:
                _append_unique(found, square)
            if not is_directed:
                square = _square(k2, edge, parallel, loop_vertex=edge.target)
                if square is not None:
                    _append_unique(found, square)

    logger.debug("Found %d edge-paired quadruplets among %d 2-core edges", len(found), len(edges))
    return found


def _square(
    k2: Network,
    edge: Edge,
    parallel: Edge,
    loop_vertex: VertexId | None = None,
) -> Cycle | None:
    """Try to close *edge* and *parallel* into a 4-cycle as opposite sides."""
    cycle = Cycle(edge, is_directed=k2.is_directed, loop_vertex=loop_vertex)
    if not cycle.add_edge(k2.edge_between(cycle.tip, parallel.source)) and not k2.is_directed:
        cycle.add_edge(k2.edge_between(cycle.tip, parallel.target))
    cycle.add_edge(parallel)
    cycle.close(k2.edge_between(cycle.tip, cycle.loop))
    if cycle.length == 4 and cycle.is_complete:
        return cycle
    return None
