"""Erdos-Renyi rewiring: every edge gets two fresh uniformly drawn endpoints."""

import numpy as np

from nullgraph.graph.blocks import BlockClassifier
from nullgraph.graph.registry import EdgeRegistry
from nullgraph.rewiring.weights import CorrProb


class ErdosRewireStrategy:
    """Redraw both endpoints of an edge uniformly from the full vertex set.

    Only the vertex and edge counts of the original graph survive. When
    self-loops are forbidden the pair is redrawn until it is not a loop.
    That retry is unbounded: on a single-vertex graph it never ends, which
    random_rewire rules out before building the strategy.
    """

    def __init__(
        self,
        registry: EdgeRegistry,
        rng: np.random.Generator,
        *,
        corr_prob: CorrProb | None = None,
        block: BlockClassifier | None = None,
        cache: bool = True,
    ) -> None:
        self.registry = registry
        self.rng = rng
        self._vertices = list(registry.g.nodes)

    def attempt(self, slot: int, self_loops: bool, parallel_edges: bool) -> bool:
        n = len(self._vertices)
        while True:
            s = self._vertices[self.rng.integers(n)]
            t = self._vertices[self.rng.integers(n)]
            if s == t and not self_loops:
                continue
            break

        if not parallel_edges and self.registry.is_adjacent(s, t):
            return False

        self.registry.replace(slot, s, t)
        return True
