"""netsgraph: in-memory weighted networks.

Vertex/edge bookkeeping, structural metrics, Dijkstra shortest paths,
k-core decomposition, and triangle / 4-cycle enumeration.
"""

__version__ = "0.1.0"

from netsgraph._cycle import Cycle
from netsgraph._network import Network
from netsgraph._rustworkx import from_rustworkx, to_rustworkx
from netsgraph.adjacency import (
    from_adjacency_matrix,
    read_adjacency_csv,
    to_adjacency_matrix,
    write_adjacency_csv,
)
from netsgraph.config import NetworkConfig
from netsgraph.exceptions import (
    CapacityError,
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeLimitExceededError,
    IdSpaceExhaustedError,
    InconsistentPredecessorsError,
    InvalidIdentifierError,
    NegativeWeightError,
    NetsGraphError,
    NotMultigraphError,
    SelfLoopError,
    VertexLimitExceededError,
    VertexNotFoundError,
)
from netsgraph.generators import complete_network, random_network
from netsgraph.ids import EdgeId, VertexId, check_id, id_sort_key
from netsgraph.protocols import (
    GraphStore,
    SupportsCoreDecomposition,
    SupportsMetrics,
    SupportsMotifs,
    SupportsShortestPaths,
)
from netsgraph.types import (
    Edge,
    EdgeNeighborhood,
    NeighborSet,
    RankedVertex,
    ShortestPathResult,
    Vertex,
)

__all__ = [
    "CapacityError",
    "Cycle",
    "DuplicateEdgeError",
    "DuplicateVertexError",
    "Edge",
    "EdgeId",
    "EdgeLimitExceededError",
    "EdgeNeighborhood",
    "GraphStore",
    "IdSpaceExhaustedError",
    "InconsistentPredecessorsError",
    "InvalidIdentifierError",
    "NegativeWeightError",
    "NeighborSet",
    "NetsGraphError",
    "Network",
    "NetworkConfig",
    "NotMultigraphError",
    "RankedVertex",
    "SelfLoopError",
    "ShortestPathResult",
    "SupportsCoreDecomposition",
    "SupportsMetrics",
    "SupportsMotifs",
    "SupportsShortestPaths",
    "Vertex",
    "VertexId",
    "VertexLimitExceededError",
    "VertexNotFoundError",
    "__version__",
    "check_id",
    "complete_network",
    "from_adjacency_matrix",
    "from_rustworkx",
    "id_sort_key",
    "random_network",
    "read_adjacency_csv",
    "to_adjacency_matrix",
    "to_rustworkx",
    "write_adjacency_csv",
]
