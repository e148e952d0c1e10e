"""Structural checks for rewired graphs.

Validates a graph against the constraints a rewiring call was asked to keep:
1. No self-loops (when forbidden)
2. No parallel edges (when forbidden)
3. Unchanged (in-degree, out-degree) of every vertex (degree-preserving models)

Also provides block-pair edge counts for comparing an ensemble of null
graphs against a block model.
"""

import logging
from collections import Counter
from collections.abc import Hashable

import networkx as nx
import numpy as np

from nullgraph.graph.blocks import BlockClassifier, DegreeBlock
from nullgraph.graph.types import BlockKey

log = logging.getLogger(__name__)


def count_self_loops(g: nx.Graph) -> int:
    return nx.number_of_selfloops(g)


def count_parallel_edges(g: nx.Graph) -> int:
    """Count surplus edges: each extra copy of a vertex pair counts once.

    For undirected graphs ``(u, v)`` and ``(v, u)`` are the same pair.
    """
    pairs: Counter = Counter()
    for u, v in g.edges():
        if g.is_directed():
            pairs[(u, v)] += 1
        else:
            pairs[frozenset((u, v))] += 1
    return sum(c - 1 for c in pairs.values())


def degree_pairs(g: nx.Graph) -> dict[Hashable, tuple[int, int]]:
    """Map every vertex to its DegreeBlock key (in-degree, out-degree)."""
    block = DegreeBlock()
    return {v: block.get_block(v, g) for v in g.nodes}


def block_pair_counts(
    g: nx.Graph, block: BlockClassifier
) -> tuple[list[BlockKey], np.ndarray]:
    """Count edges between every ordered pair of blocks.

    Args:
        g: Graph to classify.
        block: Block classifier applied to both endpoints.

    Returns:
        Tuple of (sorted block keys, count matrix) where ``counts[a, b]`` is
        the number of edges from block ``keys[a]`` to ``keys[b]``. For
        undirected graphs each edge is counted in both directions (once on
        the diagonal).
    """
    vertex_block = {v: block.get_block(v, g) for v in g.nodes}
    keys = sorted(set(vertex_block.values()))
    index = {k: i for i, k in enumerate(keys)}
    counts = np.zeros((len(keys), len(keys)), dtype=np.int64)
    for u, v in g.edges():
        a = index[vertex_block[u]]
        b = index[vertex_block[v]]
        counts[a, b] += 1
        if not g.is_directed() and a != b:
            counts[b, a] += 1
    return keys, counts


def validate_rewired_graph(
    g: nx.Graph,
    *,
    self_loops: bool,
    parallel_edges: bool,
    reference_degrees: dict[Hashable, tuple[int, int]] | None = None,
) -> list[str]:
    """Validate a rewired graph against the requested constraints.

    Checks (cheapest first):
    1. Self-loops, if forbidden
    2. Parallel edges, if forbidden
    3. Per-vertex degree pairs, if reference_degrees is given

    Args:
        g: Rewired graph.
        self_loops: Whether self-loops were allowed.
        parallel_edges: Whether parallel edges were allowed.
        reference_degrees: Output of degree_pairs() taken before rewiring.

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []

    if not self_loops:
        n_loops = count_self_loops(g)
        if n_loops:
            errors.append(f"Self-loops detected: {n_loops}")

    if not parallel_edges:
        n_parallel = count_parallel_edges(g)
        if n_parallel:
            errors.append(f"Parallel edges detected: {n_parallel}")

    if reference_degrees is not None:
        current = degree_pairs(g)
        changed = [
            v for v, deg in reference_degrees.items() if current.get(v) != deg
        ]
        if changed:
            errors.append(
                f"Degree sequence changed at {len(changed)} vertices "
                f"(first: {changed[0]!r})"
            )

    log.debug("Validation found %d problems", len(errors))
    return errors
