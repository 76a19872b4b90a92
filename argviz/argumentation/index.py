"""
Attack Index — O(1) attacker/attackee lookup

Built once per solve from a validated framework and shared by the
solver, the classifier and the provenance resolver.
"""

from __future__ import annotations

from typing import Iterable

from .models import Framework

_EMPTY: frozenset[str] = frozenset()


class AttackIndex:
    """Attacker and attackee tables for every argument of a framework."""

    def __init__(self, framework: Framework):
        self.arg_ids: tuple[str, ...] = framework.arg_ids
        attackers: dict[str, set[str]] = {}
        attackees: dict[str, set[str]] = {}
        pairs: set[tuple[str, str]] = set()

        for attack in framework.unique_attacks():
            attackers.setdefault(attack.target, set()).add(attack.source)
            attackees.setdefault(attack.source, set()).add(attack.target)
            pairs.add(attack.pair)

        self._attackers = {k: frozenset(v) for k, v in attackers.items()}
        self._attackees = {k: frozenset(v) for k, v in attackees.items()}
        self._pairs = frozenset(pairs)
        self.self_attacking: frozenset[str] = frozenset(
            s for s, t in pairs if s == t
        )

    def attackers_of(self, arg_id: str) -> frozenset[str]:
        return self._attackers.get(arg_id, _EMPTY)

    def attackees_of(self, arg_id: str) -> frozenset[str]:
        return self._attackees.get(arg_id, _EMPTY)

    def attacks(self, source: str, target: str) -> bool:
        return (source, target) in self._pairs

    def attacked_by(self, candidate: Iterable[str]) -> set[str]:
        """Every argument attacked by some member of candidate."""
        out: set[str] = set()
        for arg_id in candidate:
            out |= self.attackees_of(arg_id)
        return out

    def defenders_of(self, arg_id: str) -> frozenset[str]:
        """Arguments that attack at least one attacker of arg_id."""
        out: set[str] = set()
        for attacker in self.attackers_of(arg_id):
            out |= self.attackers_of(attacker)
        return frozenset(out)

    @property
    def num_attacks(self) -> int:
        return len(self._pairs)
