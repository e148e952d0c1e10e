"""Entry point: rewire a graph in place under a chosen null model.

Models, from least to most structure preserved:

- ``erdos``: only vertex and edge counts
- ``blockmodel``: block-pair edge distribution, degrees not kept
- ``random``: every vertex's (in-degree, out-degree)
- ``probabilistic`` / ``alias-probabilistic``: degrees, plus edges biased
  towards block pairs with high weight
- ``correlated``: degrees and the joint degree-degree distribution
"""

import logging
from dataclasses import replace

import networkx as nx
import numpy as np

from nullgraph.config.defaults import DEFAULT_CONFIG
from nullgraph.config.experiment import RewireConfig
from nullgraph.config.hashing import model_config_hash
from nullgraph.graph.blocks import BlockClassifier
from nullgraph.graph.registry import EdgeRegistry
from nullgraph.reproducibility.seed import make_rng
from nullgraph.rewiring.blockmodel import TradBlockRewireStrategy
from nullgraph.rewiring.correlated import CorrelatedRewireStrategy
from nullgraph.rewiring.engine import RewireError
from nullgraph.rewiring.erdos import ErdosRewireStrategy
from nullgraph.rewiring.probabilistic import (
    AliasProbabilisticRewireStrategy,
    ProbabilisticRewireStrategy,
)
from nullgraph.rewiring.progress import LoggingProgress, ProgressCallback
from nullgraph.rewiring.sweep import RewireResult, run_sweeps
from nullgraph.rewiring.uniform import RandomRewireStrategy
from nullgraph.rewiring.weights import CorrProb

log = logging.getLogger(__name__)

MODELS: dict[str, type] = {
    "erdos": ErdosRewireStrategy,
    "random": RandomRewireStrategy,
    "correlated": CorrelatedRewireStrategy,
    "probabilistic": ProbabilisticRewireStrategy,
    "alias-probabilistic": AliasProbabilisticRewireStrategy,
    "blockmodel": TradBlockRewireStrategy,
}

# Models that sample from a block weight function.
WEIGHTED_MODELS: frozenset[str] = frozenset(
    {"probabilistic", "alias-probabilistic", "blockmodel"}
)

# Weighted models that precompute their block table whatever cache_probs says.
PRECOMPUTED_MODELS: frozenset[str] = frozenset({"alias-probabilistic", "blockmodel"})


def check_setup(
    g: nx.Graph, config: RewireConfig, corr_prob: CorrProb | None
) -> list[str]:
    """Collect setup errors that would break the sampling loop.

    Returns:
        List of error strings (empty = ready to rewire).
    """
    errors: list[str] = []
    if config.model in WEIGHTED_MODELS and corr_prob is None:
        errors.append(f"Model {config.model!r} requires a block weight function")
    if config.parallel_edges and not g.is_multigraph():
        errors.append(
            "parallel_edges=True requires a MultiGraph or MultiDiGraph, "
            f"got {type(g).__name__}"
        )
    if (
        config.model == "erdos"
        and not config.self_loops
        and g.number_of_edges() > 0
        and g.number_of_nodes() < 2
    ):
        errors.append(
            "Erdos rewiring without self-loops needs at least 2 vertices, "
            f"got {g.number_of_nodes()}"
        )
    return errors


def random_rewire(
    g: nx.Graph,
    config: RewireConfig = DEFAULT_CONFIG,
    *,
    corr_prob: CorrProb | None = None,
    block: BlockClassifier | None = None,
    rng: np.random.Generator | None = None,
    progress: ProgressCallback | None = None,
) -> RewireResult:
    """Shuffle the edges of ``g`` in place under the configured null model.

    Args:
        g: networkx graph, mutated in place. Must be a multigraph when
            parallel edges are allowed.
        config: Model and sweep parameters.
        corr_prob: Block weight function ``(source_block, target_block) -> float``
            for the weighted models. NaN, infinite or negative values count
            as 0.
        block: Block classifier for the weighted models (defaults to
            DegreeBlock).
        rng: Random engine to draw from; built from ``config.seed`` if None.
        progress: Observer called once per attempted edge. When None and
            ``config.verbose`` is set, progress is logged.

    Returns:
        RewireResult with attempt counts; ``failed`` is the number of
        attempts that were rejected. ``model_hash`` is the
        ``model_config_hash`` of ``config``.

    Raises:
        RewireError: If the inputs cannot support the chosen model.
    """
    errors = check_setup(g, config, corr_prob)
    if errors:
        raise RewireError("; ".join(errors))

    if rng is None:
        rng = make_rng(config.seed)
    if progress is None and config.verbose:
        progress = LoggingProgress()

    model_hash = model_config_hash(config)
    registry = EdgeRegistry(g)
    if len(registry) == 0:
        log.warning("Graph has no edges; nothing to rewire")
        return RewireResult(
            attempts=0, successes=0, failed=0, n_edges=0, model_hash=model_hash
        )

    if not config.cache_probs and config.model in PRECOMPUTED_MODELS:
        log.debug(
            "cache_probs=False has no effect on model %r; "
            "its block table is always built",
            config.model,
        )

    strategy = MODELS[config.model](
        registry,
        rng,
        corr_prob=corr_prob,
        block=block,
        cache=config.cache_probs,
    )

    result = run_sweeps(
        registry,
        strategy,
        self_loops=config.self_loops,
        parallel_edges=config.parallel_edges,
        iterations=config.iterations,
        no_sweep=config.no_sweep,
        persist=config.persist,
        rng=rng,
        progress=progress,
    )

    log.info(
        "Rewired %d edges with model %r: %d/%d attempts accepted (%d failed)",
        result.n_edges,
        config.model,
        result.successes,
        result.attempts,
        result.failed,
    )
    return replace(result, model_hash=model_hash)
