"""Edge registry: stable integer slots over a graph's mutable edge handles.

Slots ``0..m-1`` are assigned once by enumerating the graph's edges and stay
valid for the lifetime of the registry. The handle a slot holds is replaced
whenever its edge is rewired, so strategies never keep raw handles around.

The target swap exchanges the targets of two edges::

    (s)    -e--> (t)          (s)    -e--> (nt)
    (te_s) -te-> (nt)   =>    (te_s) -te-> (t)

leaving every vertex's in- and out-degree unchanged.
"""

import logging
from collections.abc import Hashable

import networkx as nx

from nullgraph.graph.types import EdgeHandle, OrientedEdge

log = logging.getLogger(__name__)


class EdgeRegistry:
    """Fixed-size table of the current edges of ``g``.

    Args:
        g: networkx graph, mutated in place by swaps and replacements.
    """

    def __init__(self, g: nx.Graph) -> None:
        self.g = g
        self.directed: bool = g.is_directed()
        self._multigraph: bool = g.is_multigraph()
        if self._multigraph:
            self._edges = [EdgeHandle(u, v, k) for u, v, k in g.edges(keys=True)]
        else:
            self._edges = [EdgeHandle(u, v, None) for u, v in g.edges()]
        log.debug(
            "Registered %d edges (directed=%s, multigraph=%s)",
            len(self._edges),
            self.directed,
            self._multigraph,
        )

    def __len__(self) -> int:
        return len(self._edges)

    def __getitem__(self, slot: int) -> EdgeHandle:
        return self._edges[slot]

    @property
    def is_multigraph(self) -> bool:
        return self._multigraph

    def edge_source(self, slot: int) -> Hashable:
        return self._edges[slot].source

    def edge_target(self, slot: int) -> Hashable:
        return self._edges[slot].target

    def source(self, ref: OrientedEdge) -> Hashable:
        """Logical source of an oriented reference."""
        e = self._edges[ref.slot]
        return e.target if ref.inverted else e.source

    def target(self, ref: OrientedEdge) -> Hashable:
        """Logical target of an oriented reference."""
        e = self._edges[ref.slot]
        return e.source if ref.inverted else e.target

    def is_adjacent(self, u: Hashable, v: Hashable) -> bool:
        return self.g.has_edge(u, v)

    def would_clash(self, slot: int, ref: OrientedEdge) -> bool:
        """Check whether swapping targets of ``slot`` and ``ref`` adds a parallel edge.

        True if either replacement edge already exists in the graph, or if
        the two replacement edges would coincide with each other.
        """
        s = self.edge_source(slot)
        t = self.edge_target(slot)
        nt = self.target(ref)
        te_s = self.source(ref)

        if self.is_adjacent(s, nt):
            return True
        if self.is_adjacent(te_s, t):
            return True
        if self.directed:
            return s == te_s and nt == t
        return {s, nt} == {te_s, t}

    def swap_targets(self, slot: int, ref: OrientedEdge) -> None:
        """Swap the target of ``slot`` with the logical target of ``ref``.

        No-op when both refer to the same slot. Validity of the result is the
        caller's concern; the mutation itself is unconditional.
        """
        if slot == ref.slot:
            return

        s_e = self.edge_source(slot)
        t_e = self.edge_target(slot)
        s_te = self.source(ref)
        t_te = self.target(ref)

        self._remove(self._edges[slot])
        self._remove(self._edges[ref.slot])

        self._edges[slot] = self._add(s_e, t_te)
        if ref.inverted:
            # keep the stored orientation of the partner (undirected only)
            self._edges[ref.slot] = self._add(t_e, s_te)
        else:
            self._edges[ref.slot] = self._add(s_te, t_e)

    def replace(self, slot: int, s: Hashable, t: Hashable) -> None:
        """Replace the edge held by ``slot`` with a fresh edge ``(s, t)``."""
        self._remove(self._edges[slot])
        self._edges[slot] = self._add(s, t)

    def _remove(self, e: EdgeHandle) -> None:
        if self._multigraph:
            self.g.remove_edge(e.source, e.target, e.key)
        else:
            self.g.remove_edge(e.source, e.target)

    def _add(self, u: Hashable, v: Hashable) -> EdgeHandle:
        if self._multigraph:
            return EdgeHandle(u, v, self.g.add_edge(u, v))
        self.g.add_edge(u, v)
        return EdgeHandle(u, v, None)
