"""Cycle: scratch accumulator used while enumerating triangles and 4-cycles."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from netsgraph.types import Edge

if TYPE_CHECKING:
    from netsgraph.ids import VertexId


class Cycle:
    """A simple path grown edge by edge from a *loop* vertex, then closed.

    The path starts with a seed edge.  :meth:`add_edge` extends it from the
    current *tip* to an unvisited vertex; :meth:`close` accepts one final
    edge from the tip back to the loop vertex once the path has more than
    two vertices.  After closing, the cycle no longer accepts edges.

    Edges are stored as fresh ``Edge`` values with cycle-local ids, so a
    cycle never shares state with the network it was built from.
    """

    def __init__(
        self,
        initial_edge: Edge,
        *,
        is_directed: bool,
        loop_vertex: VertexId | None = None,
    ) -> None:
        self.is_directed = is_directed
        self._edges: list[Edge] = []
        self._vertices: dict[VertexId, None] = {}
        self._closed = False
        self._product = 1.0

        self._append(initial_edge)
        self._loop: VertexId = initial_edge.source
        self._tip: VertexId = initial_edge.target
        if not is_directed and loop_vertex is not None and initial_edge.has_vertex(loop_vertex):
            self._loop = loop_vertex
            self._tip = initial_edge.pair_vertex(loop_vertex)  # type: ignore[assignment]
        self._update_product(initial_edge)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def tip(self) -> VertexId:
        """Vertex the next edge must start from."""
        return self._tip

    @property
    def loop(self) -> VertexId:
        """Vertex the cycle must close back to."""
        return self._loop

    @property
    def is_complete(self) -> bool:
        return self._closed

    @property
    def product(self) -> float:
        """Running weight product once closed, 0 before."""
        return self._product if self._closed else 0

    @property
    def path(self) -> list[VertexId]:
        """Vertices in the order they joined the cycle."""
        return list(self._vertices)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def length(self) -> int:
        """Number of vertices."""
        return len(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        arrow = "->" if self.is_directed else "-"
        status = "closed" if self._closed else "open"
        return f"Cycle({arrow.join(str(v) for v in self._vertices)}, {status})"

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def add_edge(self, edge: Edge | None) -> bool:
        """Extend the path from the tip; return whether *edge* was accepted."""
        if edge is None or not self._can_add(edge):
            return False
        self._append(edge)
        if not self.is_directed and self._tip == edge.target:
            self._tip = edge.source
        else:
            self._tip = edge.target
        self._update_product(edge)
        return True

    def close(self, edge: Edge | None) -> bool:
        """Close the cycle with *edge*; return whether it was accepted."""
        if edge is None or not self._can_close_with(edge):
            return False
        self._append(edge)
        self._closed = True
        self._tip = self._loop
        self._update_product(edge)
        return True

    def is_same_as(self, other: Cycle) -> bool:
        """Structural equality: same directedness and the same endpoint pairs."""
        if self.is_directed != other.is_directed or len(self._edges) != len(other._edges):
            return False
        return all(
            any(theirs.is_same_as(mine, is_directed=self.is_directed) for theirs in other._edges)
            for mine in self._edges
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _append(self, edge: Edge) -> None:
        copied = Edge(
            id=len(self._edges), source=edge.source, target=edge.target, weight=edge.weight
        )
        self._edges.append(copied)
        self._vertices.setdefault(edge.source)
        self._vertices.setdefault(edge.target)

    def _update_product(self, edge: Edge) -> None:
        # Forward traversal (tip now at target) multiplies, backward divides.
        if self._tip == edge.target:
            self._product *= edge.weight
        elif edge.weight == 0:
            self._product *= math.inf
        else:
            self._product /= edge.weight

    def _can_add(self, edge: Edge) -> bool:
        if self._closed:
            return False
        forward = edge.source == self._tip and edge.target not in self._vertices
        backward = (
            not self.is_directed
            and edge.target == self._tip
            and edge.source not in self._vertices
        )
        return forward or backward

    def _can_close_with(self, edge: Edge) -> bool:
        if self._closed or len(self._vertices) <= 2:
            return False
        if edge.source == self._tip and edge.target == self._loop:
            return True
        return not self.is_directed and edge.target == self._tip and edge.source == self._loop
