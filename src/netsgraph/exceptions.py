"""Custom exception hierarchy for netsgraph."""

from __future__ import annotations

from typing import Any


class NetsGraphError(Exception):
    """Base exception for all netsgraph errors."""


class CapacityError(NetsGraphError):
    """Raised when a network is at its configured vertex or edge limit."""


class VertexLimitExceededError(CapacityError):
    """Raised when adding a vertex would exceed ``vertex_limit``."""


class EdgeLimitExceededError(CapacityError):
    """Raised when adding an edge would exceed ``edge_limit``."""


class DuplicateVertexError(NetsGraphError):
    """Raised when a vertex id is already present in the network."""


class DuplicateEdgeError(NetsGraphError):
    """Raised when an edge id is already present in the network."""


class SelfLoopError(NetsGraphError):
    """Raised when an edge would connect a vertex to itself."""


class NotMultigraphError(NetsGraphError):
    """Raised when a second edge between the same pair is added to a simple network."""


class IdSpaceExhaustedError(NetsGraphError):
    """Raised when no free auto-generated id is left below ``max_auto_id``."""


class InvalidIdentifierError(NetsGraphError, TypeError):
    """Raised when an identifier is not an ``int`` or ``str``."""


class InconsistentPredecessorsError(NetsGraphError):
    """Raised when a predecessor map loops or references unknown vertices."""


class NegativeWeightError(NetsGraphError, ValueError):
    """Raised when shortest paths are requested on a network with a negative edge weight."""


class VertexNotFoundError(NetsGraphError, KeyError):
    """Raised when an operation references a vertex that does not exist.

    Attributes:
        vertex_ids: The missing id(s), in the order they were checked.
        operation: Name of the operation that failed.
    """

    def __init__(self, *vertex_ids: Any, operation: str) -> None:
        self.vertex_ids = vertex_ids
        self.operation = operation
        missing = ", ".join(repr(v) for v in vertex_ids)
        super().__init__(f"Vertex not found in {operation}(): {missing}")

    @property
    def vertex_id(self) -> Any:
        """The first missing id."""
        return self.vertex_ids[0] if self.vertex_ids else None

    def __str__(self) -> str:
        return str(self.args[0])
