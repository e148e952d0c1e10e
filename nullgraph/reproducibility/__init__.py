"""Reproducibility infrastructure: seed management."""

from nullgraph.reproducibility.seed import make_rng, verify_seed_determinism

__all__ = [
    "make_rng",
    "verify_seed_determinism",
]
