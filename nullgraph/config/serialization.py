"""JSON serialization and deserialization for rewiring configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from nullgraph.config.experiment import RewireConfig

_DACITE_CONFIG = DaciteConfig(check_types=True, strict=True)


def config_to_json(config: RewireConfig) -> str:
    """Serialize a RewireConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> RewireConfig:
    """Deserialize a JSON string to a RewireConfig.

    Uses dacite with strict=True to reject unknown keys, so a typo in a
    config file fails loudly instead of silently falling back to a default.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: RewireConfig) -> dict[str, Any]:
    """Convert a RewireConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> RewireConfig:
    """Reconstruct a RewireConfig from a plain dictionary."""
    return from_dict(data_class=RewireConfig, data=d, config=_DACITE_CONFIG)
