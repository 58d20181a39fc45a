"""NeighborCache: lazily built weighted adjacency derived from a network's edges."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from netsgraph.ids import EdgeId, VertexId
    from netsgraph.types import Edge, Vertex

logger = logging.getLogger(__name__)

Neighbor = tuple["VertexId", float]


class NeighborCache:
    """Per-vertex ``(neighbor_id, weight)`` lists, rebuilt on demand.

    The owning network calls :meth:`invalidate` on every mutation.  The
    first lookup afterwards rebuilds the whole index in O(V·E); later
    lookups are O(1) until the next mutation.  The cache remembers whether
    it was built in undirected mode and rebuilds if the other mode is
    requested.
    """

    def __init__(self) -> None:
        self._neighbors: dict[VertexId, list[Neighbor]] = {}
        self._valid = False
        self._undirected = False
        self.builds = 0

    @property
    def is_valid(self) -> bool:
        """True while the cache reflects the current edges."""
        return self._valid

    def invalidate(self) -> None:
        """Mark the cache stale."""
        self._valid = False

    def neighbors(
        self,
        vertex_id: VertexId,
        vertices: Mapping[VertexId, Vertex],
        edges: Mapping[EdgeId, Edge],
        *,
        undirected: bool,
    ) -> list[Neighbor]:
        """Return the cached neighbours of *vertex_id*, rebuilding if stale."""
        if not self._valid or self._undirected != undirected:
            self._build(vertices, edges, undirected=undirected)
        return self._neighbors.get(vertex_id, [])

    def _build(
        self,
        vertices: Mapping[VertexId, Vertex],
        edges: Mapping[EdgeId, Edge],
        *,
        undirected: bool,
    ) -> None:
        neighbors: dict[VertexId, list[Neighbor]] = {}
        for vertex_id in vertices:
            neighborhood: list[Neighbor] = []
            for edge in edges.values():
                if edge.source == vertex_id and edge.target in vertices:
                    neighborhood.append((edge.target, edge.weight))
                if undirected and edge.target == vertex_id and edge.source in vertices:
                    neighborhood.append((edge.source, edge.weight))
            neighbors[vertex_id] = neighborhood
        self._neighbors = neighbors
        self._undirected = undirected
        self._valid = True
        self.builds += 1
        logger.debug(
            "Rebuilt neighbor cache: %d vertices, %d edges (undirected=%s)",
            len(vertices),
            len(edges),
            undirected,
        )
