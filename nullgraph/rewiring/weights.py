"""Block-pair connection weights ("corr_prob") with sanitization and caching."""

import logging
import math
from collections.abc import Callable, Iterable

import numpy as np

from nullgraph.graph.types import BlockKey

log = logging.getLogger(__name__)

# User-supplied unnormalized weight between a source block and a target block.
CorrProb = Callable[[BlockKey, BlockKey], float]

# Smallest positive normal float64; stands in for zero in acceptance ratios.
WEIGHT_FLOOR: float = float(np.finfo(np.float64).tiny)


def sanitize_weight(p: float, floor: bool = True) -> float:
    """Clamp a raw weight to a usable value.

    NaN, infinite and negative weights become 0. With ``floor``, an exact 0
    becomes WEIGHT_FLOOR so a rejection chain can never get stuck on a
    configuration whose weight is zero.
    """
    p = float(p)
    if math.isnan(p) or math.isinf(p) or p < 0:
        p = 0.0
    if floor and p == 0.0:
        p = WEIGHT_FLOOR
    return p


class BlockWeights:
    """Sanitized lookup of ``corr_prob`` over block pairs.

    Args:
        corr_prob: Weight function ``(source_block, target_block) -> float``.
        blocks: If given, the full pairwise table over these blocks is
            computed up front and every later lookup is served from it,
            trading O(B^2) memory for fewer calls into ``corr_prob``.
        floor: Replace zero weights with WEIGHT_FLOOR.
    """

    def __init__(
        self,
        corr_prob: CorrProb,
        blocks: Iterable[BlockKey] | None = None,
        floor: bool = True,
    ) -> None:
        self._corr_prob = corr_prob
        self._floor = floor
        self._table: dict[tuple[BlockKey, BlockKey], float] = {}
        if blocks is not None:
            keys = list(blocks)
            for s in keys:
                for t in keys:
                    self._table[(s, t)] = sanitize_weight(corr_prob(s, t), floor)
            log.debug("Cached %d block-pair weights", len(self._table))

    @property
    def cached(self) -> bool:
        return bool(self._table)

    def __call__(self, s: BlockKey, t: BlockKey) -> float:
        if self._table:
            p = self._table.get((s, t))
            if p is not None:
                return p
        return sanitize_weight(self._corr_prob(s, t), self._floor)
