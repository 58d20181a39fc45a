"""rustworkx interop: export a Network to rustworkx and build one back."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import rustworkx

from netsgraph._network import Network
from netsgraph.config import DEFAULT_EDGE_LIMIT, DEFAULT_VERTEX_LIMIT
from netsgraph.types import Edge, Vertex

if TYPE_CHECKING:
    from netsgraph.ids import EdgeId, VertexId

logger = logging.getLogger(__name__)

RustworkxGraph = rustworkx.PyGraph | rustworkx.PyDiGraph


def to_rustworkx(
    network: Network, *, undirected: bool = False
) -> tuple[RustworkxGraph, dict[VertexId, int]]:
    """Copy *network* into a rustworkx graph.

    Returns the graph and the vertex-id → node-index map.  Node payloads
    are :class:`Vertex` objects and edge payloads are :class:`Edge`
    objects.  ``undirected=True`` always produces a ``PyGraph``, which is
    how the shortest-path engine sees the network.
    """
    graph: RustworkxGraph
    if network.is_directed and not undirected:
        graph = rustworkx.PyDiGraph(multigraph=network.is_multigraph)
    else:
        # Directed a->b and b->a stay as two parallel undirected edges.
        graph = rustworkx.PyGraph(multigraph=network.is_multigraph or network.is_directed)

    index: dict[VertexId, int] = {}
    for vertex in network.vertices.values():
        index[vertex.id] = graph.add_node(vertex)
    for edge in network.edges.values():
        graph.add_edge(index[edge.source], index[edge.target], edge)
    return graph, index


def from_rustworkx(
    graph: RustworkxGraph,
    *,
    is_directed: bool | None = None,
    vertex_limit: int | None = None,
    edge_limit: int | None = None,
) -> Network:
    """Build a :class:`Network` from any rustworkx graph.

    Node payloads may be ``Vertex`` objects, ``{"id": ..., "weight": ...}``
    mappings, bare ``int``/``str`` ids, or anything else (the node index
    becomes the id).  Edge payloads may be ``Edge`` objects, mappings with
    ``weight``/``id`` keys, or plain numbers used as the weight.  Self-loop
    edges are skipped with a warning.
    """
    directed = isinstance(graph, rustworkx.PyDiGraph) if is_directed is None else is_directed
    network = Network(
        is_directed=directed,
        is_multigraph=graph.multigraph,
        vertex_limit=(
            max(DEFAULT_VERTEX_LIMIT, graph.num_nodes()) if vertex_limit is None else vertex_limit
        ),
        edge_limit=max(DEFAULT_EDGE_LIMIT, graph.num_edges()) if edge_limit is None else edge_limit,
    )

    idx_to_id: dict[int, VertexId] = {}
    for idx in graph.node_indices():
        vertex_id, weight = _vertex_from_payload(idx, graph[idx])
        network.add_vertex(vertex_id, weight=weight)
        idx_to_id[idx] = vertex_id

    skipped = 0
    for src_idx, tgt_idx, payload in graph.weighted_edge_list():
        source = idx_to_id[src_idx]
        target = idx_to_id[tgt_idx]
        if source == target:
            skipped += 1
            continue
        edge_id, weight = _edge_from_payload(payload)
        if edge_id is not None and edge_id in network.edges:
            edge_id = None
        network.add_edge(source, target, edge_id=edge_id, weight=weight, force=False)

    if skipped:
        logger.warning("Skipped %d self-loop edges while importing from rustworkx", skipped)
    return network


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _vertex_from_payload(idx: int, payload: Any) -> tuple[VertexId, float]:
    if isinstance(payload, Vertex):
        return payload.id, payload.weight
    if isinstance(payload, Mapping) and "id" in payload:
        return payload["id"], payload.get("weight", 1)
    if isinstance(payload, (int, str)) and not isinstance(payload, bool):
        return payload, 1
    return idx, 1


def _edge_from_payload(payload: Any) -> tuple[EdgeId | None, float]:
    if isinstance(payload, Edge):
        return payload.id, payload.weight
    if isinstance(payload, Mapping):
        return payload.get("id"), payload.get("weight", 1)
    if isinstance(payload, (int, float)) and not isinstance(payload, bool):
        return None, payload
    return None, 1
