"""Graph value types: vertices, edges, and immutable result containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from netsgraph.ids import EdgeId, VertexId, format_number


# ------------------------------------------------------------------
# Vertices and edges
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Vertex:
    """An identified, weighted point.

    Attributes:
        id: Unique identifier within the owning network.
        weight: Domain weight.  Algorithms never overwrite it.
    """

    id: VertexId
    weight: float = 1

    def __str__(self) -> str:
        return f"V({self.id})-w={format_number(self.weight)}"


@dataclass(frozen=True, slots=True)
class Edge:
    """A weighted connection between two vertex ids.

    Directed if the owning network is directed, otherwise symmetric.

    Attributes:
        id: Unique identifier within the owning network.
        source: Id of the ``from`` vertex.
        target: Id of the ``to`` vertex.
        weight: Edge weight, ``1`` when unweighted.
    """

    id: EdgeId
    source: VertexId
    target: VertexId
    weight: float = 1

    @property
    def endpoints(self) -> tuple[VertexId, VertexId]:
        """``(source, target)`` pair."""
        return (self.source, self.target)

    def connects(self, source: VertexId, target: VertexId, *, is_directed: bool) -> bool:
        """Return whether this edge joins *source* and *target*."""
        if self.source == source and self.target == target:
            return True
        return not is_directed and self.source == target and self.target == source

    def is_same_as(self, other: Edge, *, is_directed: bool = False) -> bool:
        """Structural comparison of endpoints; ids and weights are ignored."""
        return self.connects(other.source, other.target, is_directed=is_directed)

    def pair_vertex(self, vertex_id: VertexId) -> VertexId | None:
        """The endpoint opposite *vertex_id*, or ``None`` if it is not on this edge."""
        if vertex_id == self.target:
            return self.source
        if vertex_id == self.source:
            return self.target
        return None

    def has_vertex(self, vertex_id: VertexId) -> bool:
        """Return whether *vertex_id* is one of the endpoints."""
        return vertex_id in (self.source, self.target)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} W:{format_number(self.weight)}"


# ------------------------------------------------------------------
# Results
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ShortestPathResult:
    """Outcome of a single-source shortest-path run.

    Attributes:
        predecessors: One line per reached vertex, ``"<id> START"`` or
            ``"<id> <- <pred> (<cumulative weight>)"``.
        path: Rendered path from start to end, empty if unreachable.
        distances: Final distance label of every reached vertex.
        predecessor_map: Best predecessor of every reached vertex
            (``None`` for the start vertex).
    """

    predecessors: tuple[str, ...]
    path: str
    distances: MappingProxyType[VertexId, float] = field(
        default_factory=lambda: MappingProxyType({})
    )
    predecessor_map: MappingProxyType[VertexId, VertexId | None] = field(
        default_factory=lambda: MappingProxyType({})
    )


@dataclass(frozen=True, slots=True)
class NeighborSet:
    """A vertex id with the ids of its neighbours."""

    id: VertexId
    neighbors: tuple[VertexId, ...]


@dataclass(frozen=True, slots=True)
class EdgeNeighborhood:
    """Neighbourhoods of both endpoints of an edge."""

    source: NeighborSet
    target: NeighborSet


@dataclass(frozen=True, slots=True)
class RankedVertex:
    """Entry of :attr:`Network.ranked_neighborhood`."""

    vertex: VertexId
    neighbors: int
