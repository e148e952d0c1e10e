"""Rewiring configuration: frozen, hashable, serializable dataclasses."""

from nullgraph.config.experiment import MODEL_NAMES, RewireConfig
from nullgraph.config.defaults import DEFAULT_CONFIG
from nullgraph.config.hashing import RUN_ONLY_FIELDS, config_hash, model_config_hash
from nullgraph.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "MODEL_NAMES",
    "RewireConfig",
    "DEFAULT_CONFIG",
    "RUN_ONLY_FIELDS",
    "config_hash",
    "model_config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
