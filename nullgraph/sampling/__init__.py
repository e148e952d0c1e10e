"""Weighted discrete sampling."""

from nullgraph.sampling.alias import AliasSampler

__all__ = ["AliasSampler"]
