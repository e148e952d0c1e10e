"""Edge rewiring strategies and the sweep driver that applies them."""

from nullgraph.rewiring.api import MODELS, WEIGHTED_MODELS, check_setup, random_rewire
from nullgraph.rewiring.blockmodel import TradBlockRewireStrategy
from nullgraph.rewiring.correlated import CorrelatedRewireStrategy
from nullgraph.rewiring.engine import (
    DoubleSwapEngine,
    PartnerProposer,
    RewireError,
    RewireStrategy,
)
from nullgraph.rewiring.erdos import ErdosRewireStrategy
from nullgraph.rewiring.probabilistic import (
    AliasProbabilisticRewireStrategy,
    ProbabilisticRewireStrategy,
    metropolis_accept,
)
from nullgraph.rewiring.progress import LoggingProgress, ProgressCallback
from nullgraph.rewiring.sweep import RewireResult, run_sweeps
from nullgraph.rewiring.uniform import RandomRewireStrategy
from nullgraph.rewiring.weights import (
    WEIGHT_FLOOR,
    BlockWeights,
    CorrProb,
    sanitize_weight,
)

__all__ = [
    "AliasProbabilisticRewireStrategy",
    "BlockWeights",
    "CorrProb",
    "CorrelatedRewireStrategy",
    "DoubleSwapEngine",
    "ErdosRewireStrategy",
    "LoggingProgress",
    "MODELS",
    "PartnerProposer",
    "ProbabilisticRewireStrategy",
    "ProgressCallback",
    "RandomRewireStrategy",
    "RewireError",
    "RewireResult",
    "RewireStrategy",
    "TradBlockRewireStrategy",
    "WEIGHTED_MODELS",
    "WEIGHT_FLOOR",
    "check_setup",
    "metropolis_accept",
    "random_rewire",
    "run_sweeps",
]
