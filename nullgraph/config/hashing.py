"""Fingerprints of rewiring configurations.

A fingerprint is the first 16 hex digits of SHA-256 over the config's
fields as compact, key-sorted JSON. ``random_rewire`` stamps every result
with the model fingerprint so runs drawn from the same ensemble can be
grouped regardless of seed.
"""

import hashlib
import json
from collections.abc import Iterable
from dataclasses import asdict, fields

from nullgraph.config.experiment import RewireConfig

# Fields that change neither the sampled ensemble nor the sweep schedule.
RUN_ONLY_FIELDS = frozenset({"seed", "verbose"})


def config_hash(config: RewireConfig, exclude: Iterable[str] = ()) -> str:
    """Fingerprint ``config``, leaving out the ``exclude`` fields.

    Raises:
        ValueError: If ``exclude`` names a field RewireConfig does not have.
    """
    exclude = frozenset(exclude)
    unknown = exclude - {f.name for f in fields(RewireConfig)}
    if unknown:
        raise ValueError(f"Unknown config fields: {sorted(unknown)}")

    kept = {k: v for k, v in asdict(config).items() if k not in exclude}
    payload = json.dumps(kept, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


def model_config_hash(config: RewireConfig) -> str:
    """Fingerprint of the null model and sweep schedule alone."""
    return config_hash(config, RUN_ONLY_FIELDS)
