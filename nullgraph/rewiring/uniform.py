"""Degree-preserving rewiring: the configuration-model double-edge swap."""

import numpy as np

from nullgraph.graph.blocks import BlockClassifier
from nullgraph.graph.registry import EdgeRegistry
from nullgraph.graph.types import OrientedEdge
from nullgraph.rewiring.engine import DoubleSwapEngine
from nullgraph.rewiring.weights import CorrProb


def random_edge(registry: EdgeRegistry, rng: np.random.Generator) -> OrientedEdge:
    """Draw a uniformly random slot, with a random orientation if undirected."""
    slot = int(rng.integers(len(registry)))
    if registry.directed:
        return OrientedEdge(slot)
    return OrientedEdge(slot, bool(rng.random() < 0.5))


class RandomRewireStrategy:
    """Swap the target of an edge with that of a uniformly drawn edge.

    Every vertex keeps its exact (in-degree, out-degree); everything else is
    randomized. For undirected graphs the partner's orientation is a fair
    coin, so either endpoint can act as its target.
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
        self._engine = DoubleSwapEngine(registry, self)

    def attempt(self, slot: int, self_loops: bool, parallel_edges: bool) -> bool:
        return self._engine.attempt(slot, self_loops, parallel_edges)

    def propose_partner(self, slot: int) -> OrientedEdge:
        return random_edge(self.registry, self.rng)

    def update_edge(self, slot: int, insert: bool) -> None:
        pass
