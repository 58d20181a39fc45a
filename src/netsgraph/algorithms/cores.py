"""k-core decomposition by iterative degree peeling, and per-vertex core numbers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rustworkx

if TYPE_CHECKING:
    from netsgraph._network import Network
    from netsgraph.ids import VertexId

logger = logging.getLogger(__name__)


def k_core(network: Network, k: int) -> Network:
    """Return the k-core of *network* as a new network.

    Works on a copy.  For each threshold from *k* down to 1, vertices
    with degree below the threshold are removed one at a time, rescanning
    from the first vertex after every removal since each removal lowers
    its neighbours' degrees.
    """
    pruned = network.copy()
    threshold = k
    removed = 0
    while threshold > 0 and pruned.vertex_count > 0:
        while (victim := _first_below(pruned, threshold)) is not None:
            pruned.remove_vertex(victim)
            removed += 1
        threshold -= 1

    logger.debug(
        "%d-core: removed %d of %d vertices",
        k,
        removed,
        network.vertex_count,
    )
    return pruned


def _first_below(network: Network, threshold: int) -> VertexId | None:
    for vertex_id in network.vertices:
        if network.degree(vertex_id) < threshold:
            return vertex_id
    return None


def core_numbers(network: Network) -> dict[VertexId, int]:
    """Largest k for which each vertex survives in the k-core.

    Delegates to ``rustworkx.core_number``.  Directed networks are exported
    as a ``PyDiGraph`` so a vertex's degree is in-degree plus out-degree,
    matching :meth:`Network.degree`.
    """
    from netsgraph._rustworkx import to_rustworkx

    graph, index = to_rustworkx(network)
    numbers = rustworkx.core_number(graph)
    return {vertex_id: numbers[idx] for vertex_id, idx in index.items()}
