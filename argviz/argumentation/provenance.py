"""
Provenance Resolver — why an argument got its verdict

For each argument a dispute tree is built:

    root a                          PROPONENT
    ├── every attacker of a         OPPONENT
    │   └── attackers of that       PROPONENT   (only winning-set members)
    │       └── ...

The winning set is every argument belonging to some extension of the
semantics; under grounded semantics that is the grounded extension
itself. An OPPONENT node left without PROPONENT children is an
unanswered attack. Recursion stops at a node whose argument already
appears on its path from the root (marked circular), so cyclic
frameworks terminate without relying on depth limits. Depth and node
limits keep dense frameworks from producing enormous trees; nodes cut
by them are marked truncated.

Provenance is computed for every argument in one batch so the inspection
layer never has to re-run the solver.
"""

from __future__ import annotations

from .index import AttackIndex
from .models import DisputeNode, Label, ProvenanceInfo, Role

DEFAULT_MAX_DEPTH = 64
DEFAULT_MAX_NODES = 5_000


class ProvenanceResolver:

    def __init__(
        self,
        index: AttackIndex,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_nodes: int = DEFAULT_MAX_NODES,
    ):
        self.index = index
        self.max_depth = max_depth
        self.max_nodes = max_nodes
        self._nodes_left = 0

    def resolve_all(
        self,
        accepted: frozenset[str],
        rejected: frozenset[str],
        winning: frozenset[str] | None = None,
    ) -> dict[str, ProvenanceInfo]:
        return {
            arg_id: self.resolve(arg_id, accepted, rejected, winning)
            for arg_id in self.index.arg_ids
        }

    def resolve(
        self,
        arg_id: str,
        accepted: frozenset[str],
        rejected: frozenset[str],
        winning: frozenset[str] | None = None,
    ) -> ProvenanceInfo:
        if arg_id in accepted:
            status = Label.ACCEPTED
        elif arg_id in rejected:
            status = Label.REJECTED
        else:
            status = Label.UNDECIDED

        attackers = tuple(sorted(self.index.attackers_of(arg_id)))
        defenders = tuple(sorted(self.index.defenders_of(arg_id)))

        self._nodes_left = self.max_nodes
        tree = self.dispute_tree(arg_id, accepted if winning is None else winning)
        actual = sorted({i for child in tree.children for i in child.iter_ids()})

        return ProvenanceInfo(
            status=status,
            reason=self._reason(arg_id, status, accepted),
            attackers=attackers,
            defenders=defenders,
            dispute_tree=tree,
            potential_provenance=attackers,
            primary_provenance=defenders,
            actual_provenance=tuple(actual),
        )

    def dispute_tree(self, arg_id: str, winning: frozenset[str]) -> DisputeNode:
        return self._build(arg_id, Role.PROPONENT, frozenset(), 0, winning)

    def _build(
        self,
        arg_id: str,
        role: Role,
        path: frozenset[str],
        depth: int,
        winning: frozenset[str],
    ) -> DisputeNode:
        self._nodes_left -= 1

        if arg_id in path:
            return DisputeNode(argument=arg_id, role=role, circular=True)

        attackers = self.index.attackers_of(arg_id)
        if role == Role.PROPONENT:
            candidates = sorted(attackers)
            child_role = Role.OPPONENT
        else:
            candidates = sorted(a for a in attackers if a in winning)
            child_role = Role.PROPONENT

        if not candidates:
            return DisputeNode(argument=arg_id, role=role)

        if depth >= self.max_depth or self._nodes_left < len(candidates):
            return DisputeNode(argument=arg_id, role=role, truncated=True)

        path = path | {arg_id}
        children = tuple(
            self._build(c, child_role, path, depth + 1, winning)
            for c in candidates
        )
        return DisputeNode(argument=arg_id, role=role, children=children)

    def _reason(self, arg_id: str, status: Label, accepted: frozenset[str]) -> str:
        attackers = self.index.attackers_of(arg_id)

        if status == Label.ACCEPTED:
            if not attackers:
                return "This argument is not attacked by any other argument"
            return "All attackers of this argument are defeated"

        if status == Label.REJECTED:
            if arg_id in self.index.self_attacking:
                return "This argument attacks itself"
            winners = sorted(attackers & accepted)
            if winners:
                return f"This argument is attacked by accepted argument(s): {', '.join(winners)}"
            return (
                "This argument is in no extension and is attacked by: "
                f"{', '.join(sorted(attackers))}"
            )

        return "This argument is involved in a cycle or attacked by undecided arguments"
