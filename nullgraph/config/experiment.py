"""Rewiring configuration dataclass, frozen and slotted for immutability."""

from dataclasses import dataclass

# Model names accepted by random_rewire, in order of increasing structure kept.
MODEL_NAMES: tuple[str, ...] = (
    "erdos",
    "random",
    "correlated",
    "probabilistic",
    "alias-probabilistic",
    "blockmodel",
)


@dataclass(frozen=True, slots=True)
class RewireConfig:
    """Parameters of a single rewiring call.

    All fields are frozen and typed. Validation runs in __post_init__ to
    reject invalid configurations before any graph is touched.
    """

    model: str = "random"
    self_loops: bool = False  # allow self-loops in the result
    parallel_edges: bool = False  # allow parallel edges in the result
    iterations: int = 1  # number of sweeps
    no_sweep: bool = False  # one attempt per iteration instead of a full sweep
    persist: bool = False  # retry each edge until its rewrite succeeds
    cache_probs: bool = True  # precompute the block-pair weight table
    verbose: bool = False  # log progress when no observer is given
    seed: int = 42

    def __post_init__(self) -> None:
        if self.model not in MODEL_NAMES:
            raise ValueError(
                f"Unknown rewiring model {self.model!r}; "
                f"expected one of {', '.join(MODEL_NAMES)}"
            )
        if self.iterations < 0:
            raise ValueError(
                f"iterations must be >= 0, got {self.iterations}"
            )
