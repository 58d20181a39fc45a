"""Network: mutable weighted graph with metrics, cores, paths, and motifs."""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from netsgraph._cache import NeighborCache
from netsgraph.algorithms import cores, motifs, shortest_path
from netsgraph.config import (
    DEFAULT_EDGE_LIMIT,
    DEFAULT_MAX_AUTO_ID,
    DEFAULT_VERTEX_LIMIT,
    NetworkConfig,
)
from netsgraph.exceptions import (
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeLimitExceededError,
    IdSpaceExhaustedError,
    NotMultigraphError,
    SelfLoopError,
    VertexLimitExceededError,
    VertexNotFoundError,
)
from netsgraph.ids import check_id, sorted_ids
from netsgraph.types import Edge, EdgeNeighborhood, NeighborSet, RankedVertex, Vertex

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from netsgraph._cache import Neighbor
    from netsgraph._cycle import Cycle
    from netsgraph.ids import EdgeId, VertexId
    from netsgraph.types import ShortestPathResult

logger = logging.getLogger(__name__)


class Network:
    """Weighted graph over ``int``/``str`` vertex ids.

    Undirected and simple by default.  Vertices and edges are kept in
    insertion order.  Every mutation validates its arguments before
    touching state and invalidates the neighbor cache used by
    :meth:`shortest_paths`.

    Implements ``GraphStore`` plus the ``SupportsMetrics``,
    ``SupportsShortestPaths``, ``SupportsCoreDecomposition`` and
    ``SupportsMotifs`` protocols.
    """

    def __init__(
        self,
        *,
        is_directed: bool = False,
        is_multigraph: bool = False,
        vertex_limit: int = DEFAULT_VERTEX_LIMIT,
        edge_limit: int = DEFAULT_EDGE_LIMIT,
        max_auto_id: int = DEFAULT_MAX_AUTO_ID,
    ) -> None:
        self._config = NetworkConfig(
            is_directed=is_directed,
            is_multigraph=is_multigraph,
            vertex_limit=vertex_limit,
            edge_limit=edge_limit,
            max_auto_id=max_auto_id,
        )
        self._vertices: dict[VertexId, Vertex] = {}
        self._edges: dict[EdgeId, Edge] = {}
        self._free_vid = 0
        self._free_eid = 0
        self._cache = NeighborCache()

    @classmethod
    def from_config(cls, config: NetworkConfig) -> Network:
        """Build an empty network from a :class:`NetworkConfig`."""
        return cls(
            is_directed=config.is_directed,
            is_multigraph=config.is_multigraph,
            vertex_limit=config.vertex_limit,
            edge_limit=config.edge_limit,
            max_auto_id=config.max_auto_id,
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> NetworkConfig:
        """Settings this network was built with."""
        return self._config

    @property
    def is_directed(self) -> bool:
        return self._config.is_directed

    @property
    def is_multigraph(self) -> bool:
        return self._config.is_multigraph

    @property
    def vertex_limit(self) -> int:
        return self._config.vertex_limit

    @property
    def edge_limit(self) -> int:
        return self._config.edge_limit

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def vertices(self) -> Mapping[VertexId, Vertex]:
        """Read-only, insertion-ordered view of the vertices."""
        return MappingProxyType(self._vertices)

    @property
    def edges(self) -> Mapping[EdgeId, Edge]:
        """Read-only, insertion-ordered view of the edges."""
        return MappingProxyType(self._edges)

    @property
    def vertex_list(self) -> list[Vertex]:
        return list(self._vertices.values())

    @property
    def edge_list(self) -> list[Edge]:
        return list(self._edges.values())

    @property
    def simple_edge_list(self) -> list[tuple[VertexId, VertexId]]:
        """``(source, target)`` of every edge."""
        return [edge.endpoints for edge in self._edges.values()]

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def summary(self) -> str:
        """One-line description followed by every vertex id."""
        ids = " ".join(str(v) for v in self._vertices)
        return (
            f"{self.vertex_count} vertices - {self.edge_count} edges - "
            f"is_directed = {self.is_directed} {ids}"
        ).rstrip()

    def __repr__(self) -> str:
        return f"Network(vertices={self.vertex_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Vertex operations
    # ------------------------------------------------------------------

    def add_vertex(self, vertex_id: VertexId | None = None, *, weight: float = 1) -> int:
        """Add a vertex and return the new vertex count.

        ``vertex_id=None`` picks a fresh integer id.  Raises
        ``VertexLimitExceededError`` at capacity and ``DuplicateVertexError``
        if the id is taken.
        """
        if len(self._vertices) >= self.vertex_limit:
            msg = f"Can't add new vertex: limit of {self.vertex_limit} vertices reached"
            raise VertexLimitExceededError(msg)
        if vertex_id is None:
            vertex_id = self.new_vertex_id()
        else:
            check_id(vertex_id)
        if vertex_id in self._vertices:
            msg = f"Vertex {vertex_id!r} already exists"
            raise DuplicateVertexError(msg)

        self._vertices[vertex_id] = Vertex(id=vertex_id, weight=weight)
        self._cache.invalidate()
        return len(self._vertices)

    def remove_vertex(self, vertex_id: VertexId) -> None:
        """Remove a vertex and every incident edge."""
        if vertex_id not in self._vertices:
            raise VertexNotFoundError(vertex_id, operation="remove_vertex")
        del self._vertices[vertex_id]
        incident = [eid for eid, edge in self._edges.items() if edge.has_vertex(vertex_id)]
        for eid in incident:
            del self._edges[eid]
        self._cache.invalidate()

    def has_vertex(self, vertex_id: VertexId) -> bool:
        """Return whether *vertex_id* is in the network."""
        return vertex_id in self._vertices

    def has_vertices(self, vertex_ids: Iterable[VertexId]) -> bool:
        """Return whether every id in *vertex_ids* is in the network."""
        return all(v in self._vertices for v in vertex_ids)

    def new_vertex_id(self) -> int:
        """Reserve and return an unused integer vertex id."""
        vertex_id = self._next_free_id(self._free_vid, self._vertices, "vertex")
        self._free_vid = vertex_id + 1
        return vertex_id

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
    ) -> bool:
        """Add an edge between *source* and *target*.

        With ``force=True`` missing endpoints are created; with
        ``force=False`` they raise ``VertexNotFoundError``.  On a simple
        network a second edge for the same pair is refused by returning
        ``False``.  Returns ``True`` when the edge was added.
        """
        check_id(source)
        check_id(target)
        if edge_id is not None:
            check_id(edge_id, kind="edge")

        if source == target:
            msg = f"No self-loops: {source!r} -> {target!r}"
            raise SelfLoopError(msg)
        if len(self._edges) >= self.edge_limit:
            msg = f"Can't add new edge: limit of {self.edge_limit} edges reached"
            raise EdgeLimitExceededError(msg)
        if edge_id is not None and edge_id in self._edges:
            msg = f"Edge {edge_id!r} already exists"
            raise DuplicateEdgeError(msg)

        missing = [v for v in dict.fromkeys((source, target)) if v not in self._vertices]
        if missing and not force:
            raise VertexNotFoundError(*missing, operation="add_edge")
        if not missing and not self.is_multigraph and self.has_edge(source, target):
            return False
        if len(self._vertices) + len(missing) > self.vertex_limit:
            msg = (
                f"Can't add endpoints {missing!r}: limit of "
                f"{self.vertex_limit} vertices reached"
            )
            raise VertexLimitExceededError(msg)

        if edge_id is None:
            edge_id = self._new_edge_id()
        for vertex_id in missing:
            self.add_vertex(vertex_id)
        self._edges[edge_id] = Edge(id=edge_id, source=source, target=target, weight=weight)
        self._cache.invalidate()
        return True

    def add_edge_strict(
        self,
        source: VertexId,
        target: VertexId,
        *,
        edge_id: EdgeId | None = None,
        weight: float = 1,
        force: bool = True,
    ) -> None:
        """Like :meth:`add_edge` but raise ``NotMultigraphError`` instead of returning False."""
        added = self.add_edge(source, target, edge_id=edge_id, weight=weight, force=force)
        if not added:
            msg = (
                f"Edge between {source!r} and {target!r} already exists; "
                "network is not a multigraph"
            )
            raise NotMultigraphError(msg)

    def remove_edge(
        self, source: VertexId, target: VertexId, edge_id: EdgeId | None = None
    ) -> bool:
        """Remove an edge between *source* and *target*.

        Multigraphs need *edge_id* to pick the edge; without it nothing is
        removed.  Simple networks remove the first matching edge.  Returns
        whether an edge was removed.
        """
        if self.is_multigraph:
            if edge_id is None:
                logger.debug("remove_edge(%r, %r) on a multigraph without an id", source, target)
                return False
            edge = self._edges.get(edge_id)
            if edge is None or not edge.connects(source, target, is_directed=self.is_directed):
                return False
        else:
            edge = self.edge_between(source, target)
            if edge is None:
                return False

        del self._edges[edge.id]
        self._cache.invalidate()
        return True

    def has_edge(
        self, source: VertexId, target: VertexId, is_directed: bool | None = None
    ) -> bool:
        """Return whether an edge joins the pair (direction-aware by default)."""
        return self.edge_between(source, target, is_directed) is not None

    def edge_between(
        self, source: VertexId | None, target: VertexId | None, is_directed: bool | None = None
    ) -> Edge | None:
        """First edge joining *source* and *target*, or ``None``."""
        if source is None or target is None:
            return None
        directed = self.is_directed if is_directed is None else is_directed
        for edge in self._edges.values():
            if edge.connects(source, target, is_directed=directed):
                return edge
        return None

    def edges_between(
        self, source: VertexId, target: VertexId, is_directed: bool | None = None
    ) -> list[EdgeId]:
        """Ids of all edges joining *source* and *target*."""
        directed = self.is_directed if is_directed is None else is_directed
        return [
            eid
            for eid, edge in self._edges.items()
            if edge.connects(source, target, is_directed=directed)
        ]

    def edges_from(self, vertex_id: VertexId, exclude: Iterable[VertexId] = ()) -> list[Edge]:
        """Edges whose source is *vertex_id*, skipping targets in *exclude*."""
        excluded = set(exclude)
        return [
            edge
            for edge in self._edges.values()
            if edge.source == vertex_id and edge.target not in excluded
        ]

    def edges_with(self, vertex_id: VertexId) -> list[Edge]:
        """Edges with *vertex_id* at either end."""
        return [edge for edge in self._edges.values() if edge.has_vertex(vertex_id)]

    def edge_neighborhood(self, edge: Edge) -> EdgeNeighborhood:
        """Neighbours of both endpoints of *edge*."""
        return EdgeNeighborhood(
            source=NeighborSet(edge.source, tuple(self.neighbors(edge.source))),
            target=NeighborSet(edge.target, tuple(self.neighbors(edge.target))),
        )

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    def add_vertex_list(self, vertex_list: Iterable[Vertex | Mapping[str, Any] | VertexId]) -> int:
        """Add vertices one by one; return how many were added.

        Items may be ``Vertex`` objects, ``{"id": ..., "weight": ...}``
        mappings, or bare ids.  A failure stops the batch; earlier items
        stay committed.
        """
        added = 0
        for item in vertex_list:
            if isinstance(item, Vertex):
                self.add_vertex(item.id, weight=item.weight)
            elif isinstance(item, (int, str)):
                self.add_vertex(item)
            else:
                self.add_vertex(item["id"], weight=item.get("weight", 1))
            added += 1
        return added

    def add_vertex_map(self, vertex_map: Mapping[VertexId, Vertex]) -> int:
        """Add every vertex of *vertex_map* (keyed by id); return how many were added."""
        added = 0
        for vertex_id, vertex in vertex_map.items():
            self.add_vertex(vertex_id, weight=vertex.weight)
            added += 1
        return added

    def add_edge_list(self, edge_list: Iterable[tuple[Any, ...]]) -> int:
        """Add ``(source, target)`` or ``(source, target, weight)`` tuples."""
        added = 0
        for source, target, *rest in edge_list:
            weight = rest[0] if rest and rest[0] is not None else 1
            if self.add_edge(source, target, weight=weight):
                added += 1
        return added

    def add_edge_map(self, edge_map: Mapping[EdgeId, Edge]) -> int:
        """Add the endpoints and weight of every edge; ids are regenerated."""
        added = 0
        for edge in edge_map.values():
            if self.add_edge(edge.source, edge.target, weight=edge.weight):
                added += 1
        return added

    def add_edge_args_list(self, edge_args: Iterable[Mapping[str, Any]]) -> int:
        """Add edges from keyword mappings accepted by :meth:`add_edge`."""
        added = 0
        for args in edge_args:
            if self.add_edge(**args):
                added += 1
        return added

    # ------------------------------------------------------------------
    # Neighbourhood and degree queries
    # ------------------------------------------------------------------

    def neighbors(self, vertex_id: VertexId) -> list[VertexId]:
        """Vertices sharing an edge with *vertex_id*, in edge order, either direction."""
        result: list[VertexId] = []
        for edge in self._edges.values():
            if edge.source == vertex_id:
                result.append(edge.target)
            elif edge.target == vertex_id:
                result.append(edge.source)
        return result

    def in_neighbors(self, vertex_id: VertexId) -> list[VertexId]:
        """Sources of edges pointing at *vertex_id*.  Empty on undirected networks."""
        if not self.is_directed:
            return []
        return [edge.source for edge in self._edges.values() if edge.target == vertex_id]

    def out_neighbors(self, vertex_id: VertexId) -> list[VertexId]:
        """Targets of edges leaving *vertex_id*.  Empty on undirected networks."""
        if not self.is_directed:
            return []
        return [edge.target for edge in self._edges.values() if edge.source == vertex_id]

    def weighted_neighbors(
        self, vertex_id: VertexId, *, undirected: bool | None = None
    ) -> list[Neighbor]:
        """Cached ``(neighbor_id, weight)`` pairs used by the shortest-path engine."""
        mode = not self.is_directed if undirected is None else undirected
        return self._cache.neighbors(vertex_id, self._vertices, self._edges, undirected=mode)

    def degree(self, vertex_id: VertexId) -> int:
        """Number of edges incident to *vertex_id*."""
        return sum(1 for edge in self._edges.values() if edge.has_vertex(vertex_id))

    def in_degree(self, vertex_id: VertexId) -> int:
        """Number of edges pointing at *vertex_id*.  Zero on undirected networks."""
        if not self.is_directed:
            return 0
        return sum(1 for edge in self._edges.values() if edge.target == vertex_id)

    def out_degree(self, vertex_id: VertexId) -> int:
        """Number of edges leaving *vertex_id*.  Zero on undirected networks."""
        if not self.is_directed:
            return 0
        return sum(1 for edge in self._edges.values() if edge.source == vertex_id)

    def average_degree(self, vertex_id: VertexId) -> float:
        """Mean degree of the neighbours of *vertex_id* (0.0 for isolated vertices)."""
        degree = self.degree(vertex_id)
        if degree == 0:
            return 0.0
        return sum(self.degree(n) for n in self.neighbors(vertex_id)) / degree

    @property
    def ranked_neighborhood(self) -> list[RankedVertex]:
        """Vertices ordered by neighbour count, highest first; ties keep id order."""
        ranked = [RankedVertex(v, len(self.neighbors(v))) for v in sorted_ids(self._vertices)]
        ranked.sort(key=lambda r: -r.neighbors)
        return ranked

    # ------------------------------------------------------------------
    # Weight statistics
    # ------------------------------------------------------------------

    @property
    def vertex_weight(self) -> float:
        """Sum of vertex weights."""
        return sum(v.weight for v in self._vertices.values())

    @property
    def weight(self) -> float:
        """Sum of edge weights."""
        return sum(e.weight for e in self._edges.values())

    @property
    def product(self) -> float:
        """Product of edge weights."""
        return math.prod(e.weight for e in self._edges.values())

    @property
    def negative_vertices(self) -> list[Vertex]:
        return [v for v in self._vertices.values() if v.weight < 0]

    @property
    def positive_vertices(self) -> list[Vertex]:
        return [v for v in self._vertices.values() if v.weight > 0]

    @property
    def zero_vertices(self) -> list[Vertex]:
        return [v for v in self._vertices.values() if v.weight == 0]

    @property
    def negative_edges(self) -> list[Edge]:
        return [e for e in self._edges.values() if e.weight < 0]

    @property
    def positive_edges(self) -> list[Edge]:
        return [e for e in self._edges.values() if e.weight > 0]

    # ------------------------------------------------------------------
    # Structural metrics (SupportsMetrics)
    # ------------------------------------------------------------------

    @property
    def max_edges(self) -> int:
        """Edge count of a clique on this many vertices."""
        n = len(self._vertices)
        return n * (n - 1) // 2

    @property
    def density(self) -> float:
        """``|E| / max_edges``; 0.0 with fewer than two vertices."""
        max_edges = self.max_edges
        if max_edges == 0:
            return 0.0
        return len(self._edges) / max_edges

    @property
    def genus(self) -> int:
        return len(self._edges) - len(self._vertices) + 1

    def edge_average(self, operation: Callable[[Edge], float]) -> float:
        """Average of *operation* over all edges (NaN without edges)."""
        return self.edge_averages([operation])[0]

    def edge_averages(self, operations: list[Callable[[Edge], float]]) -> list[float]:
        """Averages of several per-edge *operations* in one pass."""
        if not self._edges:
            return [math.nan] * len(operations)
        totals = [0.0] * len(operations)
        for edge in self._edges.values():
            for i, operation in enumerate(operations):
                totals[i] += operation(edge)
        return [total / len(self._edges) for total in totals]

    def assortativity(self) -> float:
        """Degree assortativity over edges.

        NaN when there are no edges or every edge joins equal-degree
        vertices (the denominator vanishes).
        """
        degrees = {v: self.degree(v) for v in self._vertices}
        edge_multi, edge_sum, edge_sqr_sum = self.edge_averages(
            [
                lambda e: degrees[e.source] * degrees[e.target],
                lambda e: degrees[e.source] + degrees[e.target],
                lambda e: degrees[e.source] ** 2 + degrees[e.target] ** 2,
            ]
        )
        denominator = 2 * edge_sqr_sum - edge_sum**2
        if math.isnan(denominator) or denominator == 0:
            return math.nan
        return (4 * edge_multi - edge_sum**2) / denominator

    def clustering(self, vertex_id: VertexId) -> float:
        """Clustering coefficient of *vertex_id*, doubled on directed networks."""
        centerless = self.ego(vertex_id)
        if centerless.vertex_count <= 1:
            return 0.0
        centerless.remove_vertex(vertex_id)
        max_edges = centerless.max_edges
        if max_edges == 0:
            return 0.0
        directed_const = 2 if self.is_directed else 1
        return directed_const * (centerless.edge_count / max_edges)

    def average_clustering(self) -> float:
        """Mean clustering coefficient over all vertices."""
        if len(self._vertices) <= 1:
            return 0.0
        total = sum(self.clustering(v) for v in self._vertices)
        return total / len(self._vertices)

    # ------------------------------------------------------------------
    # Derived networks
    # ------------------------------------------------------------------

    def ego(self, vertex_id: VertexId) -> Network:
        """Ego network: edges at *vertex_id* plus edges among its neighbours."""
        if vertex_id not in self._vertices:
            raise VertexNotFoundError(vertex_id, operation="ego")
        ego_network = Network.from_config(self._config)
        ego_network.add_vertex(vertex_id, weight=self._vertices[vertex_id].weight)

        for edge in self._edges.values():
            if edge.has_vertex(vertex_id):
                ego_network._import_edge(edge, self)

        members = ego_network._vertices
        for edge in self._edges.values():
            if edge.id in ego_network._edges:
                continue
            if edge.source in members and edge.target in members:
                ego_network._import_edge(edge, self)
        return ego_network

    def complement(self) -> Network:
        """Network joining every pair that is not adjacent here."""
        n = len(self._vertices)
        pairs = n * (n - 1) if self.is_directed else n * (n - 1) // 2
        complement_network = Network(
            is_directed=self.is_directed,
            vertex_limit=max(self.vertex_limit, n),
            edge_limit=max(self.edge_limit, pairs),
            max_auto_id=self._config.max_auto_id,
        )
        for vertex in self._vertices.values():
            complement_network.add_vertex(vertex.id, weight=vertex.weight)

        for id_a in self._vertices:
            for id_b in self._vertices:
                if id_a == id_b:
                    continue
                if not self.has_edge(id_a, id_b) and not complement_network.has_edge(id_a, id_b):
                    complement_network.add_edge(id_a, id_b)
                if (
                    self.is_directed
                    and not self.has_edge(id_b, id_a)
                    and not complement_network.has_edge(id_b, id_a)
                ):
                    complement_network.add_edge(id_b, id_a)
        return complement_network

    def copy(self) -> Network:
        """Independent duplicate with the same ids, weights, and settings."""
        clone = Network.from_config(self._config)
        clone._vertices.update(self._vertices)
        clone._edges.update(self._edges)
        clone._free_vid = self._free_vid
        clone._free_eid = self._free_eid
        return clone

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def shortest_paths(self, start: VertexId, end: VertexId) -> ShortestPathResult:
        """Dijkstra from *start*; see :func:`netsgraph.algorithms.shortest_path.dijkstra`."""
        return shortest_path.dijkstra(self, start, end)

    def analyse_predecessors(
        self, predecessors: Mapping[VertexId, VertexId | None], target: VertexId
    ) -> str:
        """Render the path to *target* encoded in a predecessor map."""
        return shortest_path.analyse_predecessors(self, predecessors, target)

    def core(self, k: int) -> Network:
        """k-core of this network, as a new network."""
        return cores.k_core(self, k)

    def core_numbers(self) -> dict[VertexId, int]:
        """Core number of every vertex."""
        return cores.core_numbers(self)

    def triplets(self) -> list[Cycle]:
        """All structurally distinct triangles."""
        return motifs.triplets(self)

    def quadruplets(self) -> list[Cycle]:
        """All structurally distinct 4-cycles (neighbour expansion)."""
        return motifs.quadruplets(self)

    def quadruplets_edge_pairing(self) -> list[Cycle]:
        """All structurally distinct 4-cycles (opposite-edge pairing)."""
        return motifs.quadruplets_edge_pairing(self)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _import_edge(self, edge: Edge, origin: Network) -> bool:
        """Copy *edge* from *origin*, bringing its endpoints' weights along."""
        for vertex_id in (edge.source, edge.target):
            if vertex_id not in self._vertices:
                self.add_vertex(vertex_id, weight=origin._vertices[vertex_id].weight)
        return self.add_edge(edge.source, edge.target, edge_id=edge.id, weight=edge.weight)

    def _new_edge_id(self) -> int:
        edge_id = self._next_free_id(self._free_eid, self._edges, "edge")
        self._free_eid = edge_id + 1
        return edge_id

    def _next_free_id(self, start: int, taken: Mapping[Any, Any], kind: str) -> int:
        """Probe forward from *start* for an integer id not in *taken*."""
        candidate = start
        while candidate in taken:
            candidate += 1
        if candidate > self._config.max_auto_id:
            msg = f"No free {kind} id left below max_auto_id={self._config.max_auto_id}"
            raise IdSpaceExhaustedError(msg)
        return candidate
