"""Adjacency matrices: dense numpy conversion and the CSV matrix layout.

CSV layout: the first row is an empty corner cell followed by every vertex
id; each following row starts with a vertex id followed by one cell per
column.  A non-zero cell is an edge from the row vertex to the column
vertex, weighted by the cell value.
"""

from __future__ import annotations

import csv
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, TYPE_CHECKING

import numpy as np

from netsgraph._network import Network
from netsgraph.ids import format_number, parse_id

if TYPE_CHECKING:
    import os
    from collections.abc import Iterator, Sequence

    from numpy.typing import ArrayLike, NDArray

    from netsgraph.ids import VertexId

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# numpy conversion
# ------------------------------------------------------------------


def to_adjacency_matrix(
    network: Network, *, weighted: bool = False
) -> tuple[list[VertexId], NDArray[np.float64]]:
    """Dense adjacency matrix of *network* in vertex insertion order.

    Undirected edges fill both cells.  With ``weighted=True`` cells hold
    edge weights (summed over parallel edges), otherwise ``1``.
    """
    ids = list(network.vertices)
    index = {vertex_id: i for i, vertex_id in enumerate(ids)}
    matrix = np.zeros((len(ids), len(ids)), dtype=np.float64)

    for edge in network.edges.values():
        i, j = index[edge.source], index[edge.target]
        value = edge.weight if weighted else 1.0
        if weighted:
            matrix[i, j] += value
            if not network.is_directed:
                matrix[j, i] += value
        else:
            matrix[i, j] = value
            if not network.is_directed:
                matrix[j, i] = value
    return ids, matrix


def from_adjacency_matrix(
    ids: Sequence[VertexId],
    matrix: ArrayLike,
    *,
    is_directed: bool = False,
) -> Network:
    """Build a network from a square matrix whose rows/columns follow *ids*.

    Raises ``ValueError`` if the matrix is not square or does not match
    *ids*.  Diagonal entries are ignored.
    """
    array = np.array(matrix, dtype=np.float64)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        msg = f"Adjacency matrix must be square, got shape {array.shape}"
        raise ValueError(msg)
    if array.shape[0] != len(ids):
        msg = f"Adjacency matrix has {array.shape[0]} rows but {len(ids)} ids were given"
        raise ValueError(msg)

    n = len(ids)
    pairs = n * (n - 1) if is_directed else n * (n - 1) // 2
    network = Network(is_directed=is_directed, vertex_limit=n, edge_limit=pairs)
    for vertex_id in ids:
        network.add_vertex(vertex_id)

    if np.any(np.diagonal(array)):
        logger.warning("Ignoring non-zero diagonal entries in adjacency matrix")
    if is_directed:
        np.fill_diagonal(array, 0)
    else:
        # Each pair is read once; the upper cell wins over the lower one.
        upper = np.triu(array, k=1)
        lower = np.tril(array, k=-1).T
        array = np.where(upper != 0, upper, lower)

    rows, cols = np.nonzero(array)
    for i, j in zip(rows.tolist(), cols.tolist(), strict=True):
        network.add_edge(ids[i], ids[j], weight=float(array[i, j]), force=False)
    return network


# ------------------------------------------------------------------
# CSV
# ------------------------------------------------------------------


def read_adjacency_csv(
    source: str | os.PathLike[str] | IO[str], *, is_directed: bool = False
) -> Network:
    """Read an adjacency-matrix CSV from a path or text stream.

    Integer-looking ids become ``int``.  Rows with the wrong number of
    cells, an unknown row id, or a non-numeric cell are skipped with a
    warning.
    """
    with _open(source, "r") as stream:
        rows = [row for row in csv.reader(stream) if any(cell.strip() for cell in row)]
    if not rows:
        return Network(is_directed=is_directed)

    header = rows[0]
    ids = [parse_id(cell) for cell in header[1:]]
    index = {vertex_id: i for i, vertex_id in enumerate(ids)}
    matrix = np.zeros((len(ids), len(ids)), dtype=np.float64)

    for line_number, row in enumerate(rows[1:], start=2):
        if len(row) != len(header):
            logger.warning(
                "Skipping CSV line %d: expected %d cells, got %d",
                line_number,
                len(header),
                len(row),
            )
            continue
        row_id = parse_id(row[0])
        if row_id not in index:
            logger.warning("Skipping CSV line %d: unknown vertex %r", line_number, row_id)
            continue
        try:
            values = [float(cell) if cell.strip() else 0.0 for cell in row[1:]]
        except ValueError:
            logger.warning("Skipping CSV line %d: non-numeric cell", line_number)
            continue
        matrix[index[row_id]] = values

    return from_adjacency_matrix(ids, matrix, is_directed=is_directed)


def write_adjacency_csv(
    network: Network,
    target: str | os.PathLike[str] | IO[str],
    *,
    weighted: bool = False,
) -> None:
    """Write *network* as an adjacency-matrix CSV to a path or text stream.

    Ids are written as plain text, so string ids that look like integers
    (``"1"``, ``"007"``) come back as ``int`` from :func:`read_adjacency_csv`,
    and the leading zeros are lost.
    """
    ids, matrix = to_adjacency_matrix(network, weighted=weighted)
    with _open(target, "w") as stream:
        writer = csv.writer(stream, lineterminator="\n")
        writer.writerow(["", *ids])
        for vertex_id, row in zip(ids, matrix.tolist(), strict=True):
            writer.writerow([vertex_id, *(format_number(value) for value in row)])


@contextmanager
def _open(target: str | os.PathLike[str] | IO[str], mode: str) -> Iterator[IO[str]]:
    """Open a path, or pass an already-open stream through without closing it."""
    if hasattr(target, "read") or hasattr(target, "write"):
        yield target  # type: ignore[misc]
        return
    with Path(target).open(mode, newline="", encoding="utf-8") as stream:  # type: ignore[arg-type]
        yield stream
