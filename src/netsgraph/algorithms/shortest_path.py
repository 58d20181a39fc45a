"""Single-source shortest paths (Dijkstra) over a Network.

Distance labels live in a dict scoped to one call, so vertex weights are
never touched.  Edges are always relaxed in both directions, even on
directed networks.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from types import MappingProxyType
from typing import TYPE_CHECKING

from netsgraph.exceptions import (
    InconsistentPredecessorsError,
    NegativeWeightError,
    VertexNotFoundError,
)
from netsgraph.ids import format_number
from netsgraph.types import ShortestPathResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from netsgraph._network import Network
    from netsgraph.ids import VertexId

logger = logging.getLogger(__name__)


def dijkstra(network: Network, start: VertexId, end: VertexId) -> ShortestPathResult:
    """Shortest paths from *start*, rendered for every reached vertex and for *end*.

    Raises ``VertexNotFoundError`` naming *start*, *end*, or both when they
    are not in *network*, and ``NegativeWeightError`` naming the first edge
    with a weight below zero.
    """
    missing = [v for v in dict.fromkeys((start, end)) if not network.has_vertex(v)]
    if missing:
        raise VertexNotFoundError(*missing, operation="shortest_paths")
    for edge in network.edges.values():
        if edge.weight < 0:
            msg = (
                f"Negative weight {format_number(edge.weight)} on edge {edge.id!r} "
                f"({edge.source!r} - {edge.target!r}); shortest paths need weights >= 0"
            )
            raise NegativeWeightError(msg)

    distances: dict[VertexId, float] = dict.fromkeys(network.vertices, math.inf)
    distances[start] = 0
    predecessor: dict[VertexId, VertexId | None] = {start: None}

    # The counter breaks ties so mixed int/str ids are never compared.
    counter = itertools.count()
    queue: list[tuple[float, int, VertexId]] = [(0, next(counter), start)]
    pops = 0

    while queue:
        label, _, current = heapq.heappop(queue)
        pops += 1
        if label > distances[current]:
            continue
        for neighbor, weight in network.weighted_neighbors(current, undirected=True):
            candidate = label + weight
            if distances[neighbor] > candidate:
                distances[neighbor] = candidate
                predecessor[neighbor] = current
                heapq.heappush(queue, (candidate, next(counter), neighbor))

    logger.debug(
        "Dijkstra from %r: %d queue pops, %d of %d vertices reached",
        start,
        pops,
        len(predecessor),
        network.vertex_count,
    )

    lines: list[str] = []
    for vertex_id in network.vertices:
        if vertex_id not in predecessor:
            continue
        pred = predecessor[vertex_id]
        if pred is None:
            lines.append(f"{vertex_id} START")
        else:
            lines.append(f"{vertex_id} <- {pred} ({format_number(distances[vertex_id])})")

    reached = {v: d for v, d in distances.items() if v in predecessor}
    return ShortestPathResult(
        predecessors=tuple(lines),
        path=analyse_predecessors(network, predecessor, end),
        distances=MappingProxyType(reached),
        predecessor_map=MappingProxyType(dict(predecessor)),
    )


def analyse_predecessors(
    network: Network,
    predecessors: Mapping[VertexId, VertexId | None],
    target: VertexId,
) -> str:
    """Render the path from the start vertex to *target*.

    Produces ``"a - b (1) - d (3) - g (6)"`` where each number is the
    cumulative weight from the start.  Returns ``""`` if *target* was not
    reached.  Raises ``VertexNotFoundError`` if *target* is not in the
    network and ``InconsistentPredecessorsError`` if the chain loops or
    breaks off.
    """
    if not network.has_vertex(target):
        raise VertexNotFoundError(target, operation="analyse_predecessors")
    if target not in predecessors:
        return ""

    chain: list[VertexId] = [target]
    seen: set[VertexId] = {target}
    current = target
    while (previous := predecessors[current]) is not None:
        if previous in seen:
            msg = f"Predecessor chain for {target!r} loops back to {previous!r}"
            raise InconsistentPredecessorsError(msg)
        if previous not in predecessors:
            msg = f"Predecessor {previous!r} of {current!r} is missing from the map"
            raise InconsistentPredecessorsError(msg)
        chain.append(previous)
        seen.add(previous)
        current = previous
    chain.reverse()

    parts = [str(chain[0])]
    total: float = 0
    for prev_id, vertex_id in itertools.pairwise(chain):
        total += _lightest_weight(network, prev_id, vertex_id)
        parts.append(f"{vertex_id} ({format_number(total)})")
    return " - ".join(parts)


def _lightest_weight(network: Network, source: VertexId, target: VertexId) -> float:
    weights = [
        edge.weight
        for edge in network.edges.values()
        if edge.connects(source, target, is_directed=False)
    ]
    if not weights:
        msg = f"No edge joins {source!r} and {target!r}"
        raise InconsistentPredecessorsError(msg)
    return min(weights)
