"""Read-only algorithms over a Network: shortest paths, cores, and motifs."""

from netsgraph.algorithms.cores import core_numbers, k_core
from netsgraph.algorithms.motifs import quadruplets, quadruplets_edge_pairing, triplets
from netsgraph.algorithms.shortest_path import analyse_predecessors, dijkstra

__all__ = [
    "analyse_predecessors",
    "core_numbers",
    "dijkstra",
    "k_core",
    "quadruplets",
    "quadruplets_edge_pairing",
    "triplets",
]
