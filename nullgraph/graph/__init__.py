"""Graph-side collaborators of the rewiring core: blocks, edge registry, checks."""

from nullgraph.graph.blocks import BlockClassifier, DegreeBlock, PropertyBlock
from nullgraph.graph.conversion import graph_from_adjacency, graph_to_adjacency
from nullgraph.graph.registry import EdgeRegistry
from nullgraph.graph.types import BlockKey, EdgeHandle, OrientedEdge
from nullgraph.graph.validation import (
    block_pair_counts,
    count_parallel_edges,
    count_self_loops,
    degree_pairs,
    validate_rewired_graph,
)

__all__ = [
    "BlockClassifier",
    "BlockKey",
    "DegreeBlock",
    "EdgeHandle",
    "EdgeRegistry",
    "OrientedEdge",
    "PropertyBlock",
    "block_pair_counts",
    "count_parallel_edges",
    "count_self_loops",
    "degree_pairs",
    "graph_from_adjacency",
    "graph_to_adjacency",
    "validate_rewired_graph",
]
