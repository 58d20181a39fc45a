"""NetworkConfig: construction settings for a Network."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_VERTEX_LIMIT = 1500
DEFAULT_EDGE_LIMIT = 2500
DEFAULT_MAX_AUTO_ID = 2**31 - 1


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    """Configuration for a single network.

    Attributes:
        is_directed: Edges are ordered pairs when True.
        is_multigraph: Allow several edges between the same pair.
        vertex_limit: Maximum number of vertices.
        edge_limit: Maximum number of edges.
        max_auto_id: Largest integer handed out by automatic id generation.
    """

    is_directed: bool = False
    is_multigraph: bool = False
    vertex_limit: int = DEFAULT_VERTEX_LIMIT
    edge_limit: int = DEFAULT_EDGE_LIMIT
    max_auto_id: int = DEFAULT_MAX_AUTO_ID

    def __post_init__(self) -> None:
        if self.vertex_limit < 0:
            msg = f"vertex_limit must be >= 0, got {self.vertex_limit}"
            raise ValueError(msg)
        if self.edge_limit < 0:
            msg = f"edge_limit must be >= 0, got {self.edge_limit}"
            raise ValueError(msg)
        if self.max_auto_id < 0:
            msg = f"max_auto_id must be >= 0, got {self.max_auto_id}"
            raise ValueError(msg)
