"""Degree-correlation-preserving rewiring.

Edges are bucketed once by the degree pair of their target. A swap partner
is drawn only from the bucket of the edge's own target, so the two targets
being exchanged always share a degree pair. The target degree class of
every slot therefore never changes, and the joint degree-degree matrix of
the graph is preserved exactly.
"""

import logging
from collections import defaultdict

import numpy as np

from nullgraph.graph.blocks import BlockClassifier, DegreeBlock
from nullgraph.graph.registry import EdgeRegistry
from nullgraph.graph.types import OrientedEdge
from nullgraph.rewiring.engine import DoubleSwapEngine
from nullgraph.rewiring.weights import CorrProb

log = logging.getLogger(__name__)


class CorrelatedRewireStrategy:
    """Swap targets only between edges whose targets share a degree pair.

    For undirected graphs every edge sits in two buckets, once with each
    endpoint acting as target.
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
        self._degree = DegreeBlock()
        self._engine = DoubleSwapEngine(registry, self)

        g = registry.g
        self._edges_by_target: dict[tuple[int, int], list[OrientedEdge]] = (
            defaultdict(list)
        )
        for slot in range(len(registry)):
            t = registry.edge_target(slot)
            self._edges_by_target[self._degree.get_block(t, g)].append(
                OrientedEdge(slot)
            )
            if not registry.directed:
                s = registry.edge_source(slot)
                self._edges_by_target[self._degree.get_block(s, g)].append(
                    OrientedEdge(slot, True)
                )
        log.debug(
            "Bucketed %d edges into %d target degree classes",
            len(registry),
            len(self._edges_by_target),
        )

    def attempt(self, slot: int, self_loops: bool, parallel_edges: bool) -> bool:
        return self._engine.attempt(slot, self_loops, parallel_edges)

    def propose_partner(self, slot: int) -> OrientedEdge:
        t = self.registry.edge_target(slot)
        bucket = self._edges_by_target[self._degree.get_block(t, self.registry.g)]
        return bucket[int(self.rng.integers(len(bucket)))]

    def update_edge(self, slot: int, insert: bool) -> None:
        pass
