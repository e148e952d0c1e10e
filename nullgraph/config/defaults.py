"""Default configuration: single source of truth for rewiring parameters."""

from nullgraph.config.experiment import RewireConfig

# Degree-preserving double-edge swaps, one sweep, simple graph kept simple.
DEFAULT_CONFIG = RewireConfig()
