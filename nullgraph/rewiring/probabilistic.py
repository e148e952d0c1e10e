"""Block-model rewiring by Metropolis-Hastings target swaps.

Both strategies here sample from the ensemble of graphs with the original
degree sequence, weighted by::

    prod over edges (s, t) of  w(block(s), block(t))

A proposed swap of targets between edges (s, t) and (s', t') moves the
weight from ``pi = w(s, t) * w(s', t')`` to ``pf = w(s, t') * w(s', t)``
and is accepted with probability ``min(1, pf / pi)``.

ProbabilisticRewireStrategy proposes a uniformly random partner edge, which
is cheap but wastes most proposals when block sizes are skewed.
AliasProbabilisticRewireStrategy first draws the partner's target block
from an alias table over ``w(source_block, .)`` and then an edge from an
incrementally maintained partition of edges by target block.
"""

import logging
import math
from collections import defaultdict

import numpy as np

from nullgraph.graph.blocks import BlockClassifier, DegreeBlock
from nullgraph.graph.registry import EdgeRegistry
from nullgraph.graph.types import BlockKey, OrientedEdge
from nullgraph.rewiring.engine import DoubleSwapEngine, RewireError
from nullgraph.rewiring.uniform import random_edge
from nullgraph.rewiring.weights import BlockWeights, CorrProb
from nullgraph.sampling.alias import AliasSampler

log = logging.getLogger(__name__)


def metropolis_accept(pi: float, pf: float, rng: np.random.Generator) -> bool:
    """Accept a move from weight ``pi`` to ``pf`` with probability min(1, pf/pi)."""
    if pf >= pi:
        return True
    if pf == 0:
        return False
    a = math.exp(math.log(pf) - math.log(pi))
    return rng.random() <= a


def endpoint_blocks(
    registry: EdgeRegistry, block: BlockClassifier
) -> list[BlockKey]:
    """Distinct blocks of all edge endpoints, in first-seen order."""
    g = registry.g
    seen: dict[BlockKey, None] = {}
    for slot in range(len(registry)):
        seen.setdefault(block.get_block(registry.edge_source(slot), g))
        seen.setdefault(block.get_block(registry.edge_target(slot), g))
    return list(seen)


class _BlockSwapProposer:
    """Shared state and acceptance test of the two block-model strategies."""

    def __init__(
        self,
        registry: EdgeRegistry,
        rng: np.random.Generator,
        corr_prob: CorrProb | None,
        block: BlockClassifier | None,
    ) -> None:
        if corr_prob is None:
            raise RewireError(
                f"{type(self).__name__} requires a block weight function"
            )
        self.registry = registry
        self.rng = rng
        self.block = block if block is not None else DegreeBlock()
        self._engine = DoubleSwapEngine(registry, self)

    def attempt(self, slot: int, self_loops: bool, parallel_edges: bool) -> bool:
        return self._engine.attempt(slot, self_loops, parallel_edges)

    def get_block(self, v) -> BlockKey:
        return self.block.get_block(v, self.registry.g)

    def _accept_or_reject(
        self, slot: int, s_blk: BlockKey, t_blk: BlockKey, ep: OrientedEdge
    ) -> OrientedEdge:
        """Return ``ep`` if the swap passes the Metropolis test, else ``slot``."""
        ep_s_blk = self.get_block(self.registry.source(ep))
        ep_t_blk = self.get_block(self.registry.target(ep))

        pi = self.weights(s_blk, t_blk) * self.weights(ep_s_blk, ep_t_blk)
        pf = self.weights(s_blk, ep_t_blk) * self.weights(ep_s_blk, t_blk)

        if metropolis_accept(pi, pf, self.rng):
            return ep
        return OrientedEdge(slot)


class ProbabilisticRewireStrategy(_BlockSwapProposer):
    """Rejection-sampled block model with uniformly proposed partners.

    Args:
        registry: Edge registry of the graph being rewired.
        rng: Shared random engine.
        corr_prob: Block weight function ``(source_block, target_block) -> float``.
        block: Block classifier (defaults to DegreeBlock).
        cache: Precompute the weight table over endpoint blocks.

    Raises:
        RewireError: If no weight function is given.
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
        super().__init__(registry, rng, corr_prob, block)
        blocks = endpoint_blocks(registry, self.block) if cache else None
        self.weights = BlockWeights(corr_prob, blocks)

    def propose_partner(self, slot: int) -> OrientedEdge:
        s_blk = self.get_block(self.registry.edge_source(slot))
        t_blk = self.get_block(self.registry.edge_target(slot))
        ep = random_edge(self.registry, self.rng)
        return self._accept_or_reject(slot, s_blk, t_blk, ep)

    def update_edge(self, slot: int, insert: bool) -> None:
        pass


class AliasProbabilisticRewireStrategy(_BlockSwapProposer):
    """Block model with alias-sampled partner blocks.

    Edges are partitioned by the block of their target ("in" partition) and,
    for undirected graphs, also by the block of their source ("out"
    partition). Partitions are updated around every accepted swap by
    swap-with-last removal, so both hooks are O(1).

    The weight table is always precomputed; ``cache`` is accepted for
    interface compatibility.

    Raises:
        RewireError: If no weight function is given.
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
        super().__init__(registry, rng, corr_prob, block)
        items = endpoint_blocks(registry, self.block)
        self.weights = BlockWeights(corr_prob, items)

        self._sampler: dict[BlockKey, AliasSampler] = {
            s: AliasSampler(items, [self.weights(s, t) for t in items])
            for s in items
        }

        m = len(registry)
        self._in_edges: dict[BlockKey, list[int]] = defaultdict(list)
        self._in_pos = [0] * m
        self._in_key: list[BlockKey] = [None] * m
        self._out_edges: dict[BlockKey, list[int]] = defaultdict(list)
        self._out_pos = [0] * m
        self._out_key: list[BlockKey] = [None] * m
        for slot in range(m):
            self._insert(slot)

        log.debug(
            "Built %d alias samplers and partitions over %d edges",
            len(self._sampler),
            m,
        )

    def propose_partner(self, slot: int) -> OrientedEdge:
        s_blk = self.get_block(self.registry.edge_source(slot))
        t_blk = self.get_block(self.registry.edge_target(slot))

        nt = self._sampler[s_blk].sample(self.rng)

        in_edges = self._in_edges.get(nt, [])
        if self.registry.directed:
            candidates, inverted = in_edges, False
        else:
            out_edges = self._out_edges.get(nt, [])
            total = len(in_edges) + len(out_edges)
            if total == 0:
                return OrientedEdge(slot)
            if self.rng.random() < len(in_edges) / total:
                candidates, inverted = in_edges, False
            else:
                candidates, inverted = out_edges, True

        if not candidates:
            # no edge currently ends in the drawn block
            return OrientedEdge(slot)

        ep = OrientedEdge(candidates[int(self.rng.integers(len(candidates)))], inverted)
        return self._accept_or_reject(slot, s_blk, t_blk, ep)

    def update_edge(self, slot: int, insert: bool) -> None:
        if insert:
            self._insert(slot)
        else:
            self._remove(slot)

    def partition_sizes(self) -> dict[BlockKey, tuple[int, int]]:
        """Current (in, out) partition sizes per block; out is 0 when directed."""
        keys = set(self._in_edges) | set(self._out_edges)
        return {
            k: (len(self._in_edges.get(k, [])), len(self._out_edges.get(k, [])))
            for k in keys
        }

    def _insert(self, slot: int) -> None:
        key = self.get_block(self.registry.edge_target(slot))
        _push(self._in_edges[key], self._in_pos, slot)
        self._in_key[slot] = key
        if not self.registry.directed:
            key = self.get_block(self.registry.edge_source(slot))
            _push(self._out_edges[key], self._out_pos, slot)
            self._out_key[slot] = key

    def _remove(self, slot: int) -> None:
        _pop(self._in_edges[self._in_key[slot]], self._in_pos, slot)
        if not self.registry.directed:
            _pop(self._out_edges[self._out_key[slot]], self._out_pos, slot)


def _push(edges: list[int], pos: list[int], slot: int) -> None:
    pos[slot] = len(edges)
    edges.append(slot)


def _pop(edges: list[int], pos: list[int], slot: int) -> None:
    # swap with last, then drop
    j = pos[slot]
    last = edges[-1]
    edges[j] = last
    pos[last] = j
    edges.pop()
