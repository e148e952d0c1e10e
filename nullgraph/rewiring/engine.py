"""Strategy contract and the shared double-edge-swap engine.

A rewiring strategy answers one question per edge slot: can this edge be
rewritten, and if so, how. Endpoint-redraw strategies implement
``RewireStrategy.attempt`` directly. Swap-based strategies only propose a
partner edge (``PartnerProposer``) and let ``DoubleSwapEngine`` check and
apply the target swap, so every accepted move preserves all degrees.
"""

from typing import Protocol

from nullgraph.graph.registry import EdgeRegistry
from nullgraph.graph.types import OrientedEdge


class RewireError(Exception):
    """Raised when a rewiring call cannot be set up from its inputs."""


class RewireStrategy(Protocol):
    """Policy for rewriting one edge slot.

    ``attempt`` returns True after mutating the graph and registry with all
    invariants intact, or False having mutated nothing.
    """

    def attempt(self, slot: int, self_loops: bool, parallel_edges: bool) -> bool: ...


class PartnerProposer(Protocol):
    """Source of swap partners for the double-edge-swap engine."""

    def propose_partner(self, slot: int) -> OrientedEdge:
        """Return the partner for ``slot``; returning ``slot`` itself rejects."""
        ...

    def update_edge(self, slot: int, insert: bool) -> None:
        """Bookkeeping hook around a swap (False before removal, True after insertion)."""
        ...


class DoubleSwapEngine:
    """Check and perform target swaps proposed by a PartnerProposer.

    Args:
        registry: Edge registry of the graph being rewired.
        proposer: Strategy proposing swap partners.
    """

    def __init__(self, registry: EdgeRegistry, proposer: PartnerProposer) -> None:
        self.registry = registry
        self.proposer = proposer

    def attempt(self, slot: int, self_loops: bool, parallel_edges: bool) -> bool:
        registry = self.registry
        partner = self.proposer.propose_partner(slot)

        if not self_loops:
            if (
                registry.edge_source(slot) == registry.target(partner)
                or registry.edge_target(slot) == registry.source(partner)
            ):
                return False

        if not parallel_edges and partner.slot != slot:
            if registry.would_clash(slot, partner):
                return False

        if partner.slot == slot:
            return False

        self.proposer.update_edge(slot, False)
        self.proposer.update_edge(partner.slot, False)

        registry.swap_targets(slot, partner)

        self.proposer.update_edge(slot, True)
        self.proposer.update_edge(partner.slot, True)
        return True
