"""Block classifiers mapping a vertex to an opaque block key.

Two classifiers are provided:
1. DegreeBlock: the vertex's live (in-degree, out-degree) pair
2. PropertyBlock: a fixed, externally supplied per-vertex value
"""

from collections.abc import Hashable, Mapping
from typing import Any, Protocol

import networkx as nx
import numpy as np

from nullgraph.graph.types import BlockKey


class BlockClassifier(Protocol):
    """Anything that maps a vertex of ``g`` to a block key."""

    def get_block(self, v: Hashable, g: nx.Graph) -> BlockKey: ...


class DegreeBlock:
    """Classify vertices by their current (in-degree, out-degree).

    For undirected graphs the in-degree component is 0 and the out-degree
    component is the total degree, so every vertex lands in ``(0, k)``.
    """

    def get_block(self, v: Hashable, g: nx.Graph) -> tuple[int, int]:
        if g.is_directed():
            return (g.in_degree(v), g.out_degree(v))
        return (0, g.degree(v))

    def __repr__(self) -> str:
        return "DegreeBlock()"


class PropertyBlock:
    """Classify vertices by a static external assignment.

    Args:
        values: Mapping or array indexed by vertex (e.g. the int
            ``block_assignments`` array of a planted partition).
    """

    def __init__(self, values: Mapping[Any, Any] | np.ndarray) -> None:
        self._values = values

    @classmethod
    def from_attribute(cls, g: nx.Graph, name: str) -> "PropertyBlock":
        """Snapshot node attribute ``name`` of every vertex of ``g``.

        Raises:
            KeyError: If any vertex lacks the attribute.
        """
        values = {}
        for v, data in g.nodes(data=True):
            if name not in data:
                raise KeyError(f"Vertex {v!r} has no attribute {name!r}")
            values[v] = data[name]
        return cls(values)

    def get_block(self, v: Hashable, g: nx.Graph) -> BlockKey:
        value = self._values[v]
        # numpy scalars are hashable, but unwrap so keys compare across types
        if isinstance(value, np.generic):
            return value.item()
        return value

    def __repr__(self) -> str:
        return f"PropertyBlock(<{len(self._values)} values>)"
