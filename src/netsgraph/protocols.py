"""Graph protocols: runtime-checkable interfaces for network implementations.

Split into a core protocol and opt-in capability protocols so that an
alternative container can implement just the CRUD surface without being
forced to provide shortest paths, cores, or motif enumeration.

The core protocol is ``@runtime_checkable``; capability protocols are
detected via ``isinstance()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from netsgraph._cycle import Cycle
    from netsgraph.ids import EdgeId, VertexId
    from netsgraph.types import Edge, ShortestPathResult, Vertex


@runtime_checkable
class GraphStore(Protocol):
    """Core network interface: vertex/edge CRUD and basic queries."""

    # ------------------------------------------------------------------
    # Vertex operations
    # ------------------------------------------------------------------

    def add_vertex(self, vertex_id: VertexId | None = None, *, weight: float = 1) -> int: ...
    def remove_vertex(self, vertex_id: VertexId) -> None: ...
    def has_vertex(self, vertex_id: VertexId) -> bool: ...

    # ------------------------------------------------------------------
    # Edge operations
    # ------------------------------------------------------------------

    def add_edge(
        self,
        source: VertexId,
        target: VertexId,
        *,
        edge_id: EdgeId | None = None,
        weight: float = 1,
        force: bool = True,
    ) -> bool: ...
    def remove_edge(
        self, source: VertexId, target: VertexId, edge_id: EdgeId | None = None
    ) -> bool: ...
    def has_edge(
        self, source: VertexId, target: VertexId, is_directed: bool | None = None
    ) -> bool: ...

    # ------------------------------------------------------------------
    # Basic queries
    # ------------------------------------------------------------------

    def degree(self, vertex_id: VertexId) -> int: ...
    def neighbors(self, vertex_id: VertexId) -> list[VertexId]: ...

    @property
    def vertices(self) -> Mapping[VertexId, Vertex]: ...
    @property
    def edges(self) -> Mapping[EdgeId, Edge]: ...


@runtime_checkable
class SupportsMetrics(Protocol):
    """Opt-in: degree, density, and clustering statistics."""

    @property
    def density(self) -> float: ...
    @property
    def genus(self) -> int: ...
    def assortativity(self) -> float: ...
    def clustering(self, vertex_id: VertexId) -> float: ...
    def average_clustering(self) -> float: ...


@runtime_checkable
class SupportsShortestPaths(Protocol):
    """Opt-in: single-source shortest paths."""

    def shortest_paths(self, start: VertexId, end: VertexId) -> ShortestPathResult: ...
    def analyse_predecessors(
        self, predecessors: Mapping[VertexId, VertexId | None], target: VertexId
    ) -> str: ...


@runtime_checkable
class SupportsCoreDecomposition(Protocol):
    """Opt-in: k-core peeling."""

    def core(self, k: int) -> Any: ...
    def core_numbers(self) -> dict[VertexId, int]: ...


@runtime_checkable
class SupportsMotifs(Protocol):
    """Opt-in: triangle and 4-cycle enumeration."""

    def triplets(self) -> list[Cycle]: ...
    def quadruplets(self) -> list[Cycle]: ...
    def quadruplets_edge_pairing(self) -> list[Cycle]: ...
