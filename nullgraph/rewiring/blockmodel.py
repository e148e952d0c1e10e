"""Traditional stochastic block model rewiring (degrees not preserved)."""

import logging
from collections import defaultdict

import numpy as np

from nullgraph.graph.blocks import BlockClassifier, DegreeBlock
from nullgraph.graph.registry import EdgeRegistry
from nullgraph.rewiring.engine import RewireError
from nullgraph.rewiring.weights import CorrProb, sanitize_weight
from nullgraph.sampling.alias import AliasSampler

log = logging.getLogger(__name__)


class TradBlockRewireStrategy:
    """Redraw an edge's endpoints from a block-pair distribution.

    A (source block, target block) pair is drawn from one alias table over
    ``w`` on all block pairs, then a vertex uniformly from each block. The
    block assignment is taken once, at construction. Zero weights are not
    floored here: a block pair with weight 0 never receives an edge.

    Args:
        registry: Edge registry of the graph being rewired.
        rng: Shared random engine.
        corr_prob: Block weight function ``(source_block, target_block) -> float``.
        block: Block classifier (defaults to DegreeBlock).
        cache: Unused; the block-pair table is always built.

    Raises:
        RewireError: If no weight function is given, or every block pair
            has zero weight.
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
        if corr_prob is None:
            raise RewireError("TradBlockRewireStrategy requires a block weight function")
        self.registry = registry
        self.rng = rng
        block = block if block is not None else DegreeBlock()

        g = registry.g
        self._vertices: dict = defaultdict(list)
        for v in g.nodes:
            self._vertices[block.get_block(v, g)].append(v)

        keys = list(self._vertices)
        items = [(s, t) for s in keys for t in keys]
        weights = [sanitize_weight(corr_prob(s, t), floor=False) for s, t in items]
        try:
            self._sampler = AliasSampler(items, weights)
        except ValueError as e:
            raise RewireError(f"Cannot build block-pair sampler: {e}") from e

        log.debug(
            "Block model over %d blocks (%d block pairs)", len(keys), len(items)
        )

    def attempt(self, slot: int, self_loops: bool, parallel_edges: bool) -> bool:
        s_blk, t_blk = self._sampler.sample(self.rng)
        svs = self._vertices[s_blk]
        tvs = self._vertices[t_blk]
        s = svs[int(self.rng.integers(len(svs)))]
        t = tvs[int(self.rng.integers(len(tvs)))]

        if not self_loops and s == t:
            return False

        if not parallel_edges and self.registry.is_adjacent(s, t):
            return False

        self.registry.replace(slot, s, t)
        return True
