"""Edge data structures shared by the registry and the rewiring strategies."""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import NamedTuple

# Opaque block key: comparable and hashable (tuple of degrees, int label, ...).
BlockKey = Hashable


class EdgeHandle(NamedTuple):
    """Current graph edge held by a registry slot.

    ``key`` is the multigraph edge key, or None for simple graphs.
    """

    source: Hashable
    target: Hashable
    key: int | None


@dataclass(frozen=True, slots=True)
class OrientedEdge:
    """Reference to a registry slot with an orientation flag.

    For undirected graphs ``inverted`` selects the stored source as the
    logical target of the edge. It is always False for directed graphs.
    """

    slot: int
    inverted: bool = False
