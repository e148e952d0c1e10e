"""Sweep driver: repeated passes of a rewiring strategy over the edge set."""

import logging
from dataclasses import dataclass

import numpy as np

from nullgraph.graph.registry import EdgeRegistry
from nullgraph.rewiring.engine import RewireStrategy
from nullgraph.rewiring.progress import ProgressCallback

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RewireResult:
    """Attempt accounting of one rewiring call.

    ``successes + failed == attempts`` always holds, where
    ``attempts = iterations * (n_edges if sweeping else 1)``.
    """

    attempts: int
    successes: int
    failed: int  # attempts that ended rejected
    n_edges: int
    model_hash: str | None = None  # set by random_rewire

    @property
    def acceptance_rate(self) -> float:
        return self.successes / self.attempts if self.attempts else 0.0


def run_sweeps(
    registry: EdgeRegistry,
    strategy: RewireStrategy,
    *,
    self_loops: bool,
    parallel_edges: bool,
    iterations: int,
    no_sweep: bool,
    persist: bool,
    rng: np.random.Generator,
    progress: ProgressCallback | None = None,
) -> RewireResult:
    """Apply ``strategy`` to edge slots in random order.

    Each iteration visits every slot once in a fresh random permutation, or
    a single random slot when ``no_sweep`` is set. With ``persist``, a slot
    is retried until its rewrite succeeds; that loop has no bound.

    Args:
        registry: Edge registry of the graph being rewired.
        strategy: Rewiring policy applied to each visited slot.
        self_loops: Allow self-loops.
        parallel_edges: Allow parallel edges.
        iterations: Number of sweeps.
        no_sweep: Make a single attempt per iteration.
        persist: Retry each slot until success.
        rng: Shared random engine.
        progress: Observer called once per visited slot with
            (sweep, n_sweeps, attempt, n_attempts_in_sweep).

    Returns:
        RewireResult with attempt counts.
    """
    m = len(registry)
    per_sweep = 1 if no_sweep else m
    attempts = 0
    failed = 0

    if m == 0:
        return RewireResult(attempts=0, successes=0, failed=0, n_edges=0)

    for i in range(iterations):
        if no_sweep:
            order = rng.integers(m, size=1)
        else:
            order = rng.permutation(m)

        for pos, slot in enumerate(order.tolist()):
            if progress is not None:
                progress(i, iterations, pos, per_sweep)

            success = strategy.attempt(slot, self_loops, parallel_edges)
            while persist and not success:
                success = strategy.attempt(slot, self_loops, parallel_edges)

            attempts += 1
            if not success:
                failed += 1

    log.debug(
        "Ran %d sweeps over %d edges: %d attempts, %d failed",
        iterations,
        m,
        attempts,
        failed,
    )
    return RewireResult(
        attempts=attempts,
        successes=attempts - failed,
        failed=failed,
        n_edges=m,
    )
