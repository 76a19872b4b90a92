"""
Extension Solver — Dung's Extension Computation

Implements the core algorithms from Dung (1995) for computing:
- Grounded extension (unique, most skeptical)
- Complete extensions (admissible + contain everything they defend)
- Preferred extensions (maximal complete)
- Stable extensions (complete + attacks all outsiders)

Computational complexity:
- Grounded: O(|Args| · |Attacks|) per iteration, at most |Args| iterations
- Complete/Preferred/Stable: O(2^|open|) worst case, where "open" are the
  arguments the grounded extension neither contains nor attacks

Every complete extension contains the grounded extension and excludes
whatever it attacks, so the search only decides the open arguments. The
number of candidate sets visited is bounded by an explicit budget;
running past it raises SearchBudgetExceeded instead of hanging.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .errors import SearchBudgetExceeded
from .index import AttackIndex
from .models import Extension, SemanticsKind

logger = logging.getLogger("argviz.argumentation.solver")

DEFAULT_SEARCH_BUDGET = 100_000


class ExtensionSolver:
    """
    Computes extensions over one AttackIndex.

    Follows Dung's characteristic function F:
        F(S) = { a ∈ Args | S defends a }

    The grounded extension is the least fixpoint of F. A solver holds the
    candidate counter of a single solve; build a new one per solve.
    """

    def __init__(self, index: AttackIndex, search_budget: int = DEFAULT_SEARCH_BUDGET):
        if search_budget is None or search_budget < 1:
            raise ValueError("search_budget must be a positive integer")
        self.index = index
        self.search_budget = search_budget
        self.candidates_explored = 0

    # ── Set Properties ──────────────────────────────────────────

    def is_conflict_free(self, candidate: Iterable[str]) -> bool:
        """Check if no argument in candidate attacks another in candidate."""
        members = set(candidate)
        return not any(self.index.attackees_of(a) & members for a in members)

    def defends(self, candidate: Iterable[str], arg_id: str) -> bool:
        """
        candidate defends arg_id if for every attacker of arg_id,
        there exists a member of candidate that attacks the attacker.
        """
        members = candidate if isinstance(candidate, (set, frozenset)) else set(candidate)
        return all(
            self.index.attackers_of(attacker) & members
            for attacker in self.index.attackers_of(arg_id)
        )

    def characteristic(self, candidate: Iterable[str]) -> frozenset[str]:
        """F(S): every argument that S defends."""
        members = frozenset(candidate)
        return frozenset(a for a in self.index.arg_ids if self.defends(members, a))

    def is_admissible(self, candidate: Iterable[str]) -> bool:
        """
        S is admissible iff:
        1. S is conflict-free
        2. S defends all its members
        """
        members = frozenset(candidate)
        if not self.is_conflict_free(members):
            return False
        return all(self.defends(members, a) for a in members)

    def is_complete(self, candidate: Iterable[str]) -> bool:
        """
        S is complete iff S is admissible and contains every
        argument it defends.
        """
        members = frozenset(candidate)
        return self.is_admissible(members) and self.characteristic(members) <= members

    def is_stable(self, candidate: Iterable[str]) -> bool:
        """S is stable iff S is conflict-free and attacks every argument outside it."""
        members = frozenset(candidate)
        if not self.is_conflict_free(members):
            return False
        outsiders = set(self.index.arg_ids) - members
        return outsiders <= self.index.attacked_by(members)

    # ── Grounded Extension ──────────────────────────────────────

    def grounded_set(self) -> frozenset[str]:
        """
        Compute the grounded extension via iterative fixpoint.

        Algorithm:
            S₀ = ∅
            Sₙ₊₁ = F(Sₙ)
            Stop when Sₙ₊₁ = Sₙ

        F is monotonic and the chain grows by at least one argument per
        step, so the loop settles within |Args| + 1 rounds.
        """
        current: frozenset[str] = frozenset()
        for iteration in range(len(self.index.arg_ids) + 1):
            next_set = self.characteristic(current)
            if next_set == current:
                logger.debug(f"Grounded fixpoint reached after {iteration} iterations")
                return current
            current = next_set
        raise RuntimeError("grounded fixpoint did not converge")  # unreachable for monotonic F

    def grounded_extension(self) -> Extension:
        return Extension(arguments=self.grounded_set(), semantics=SemanticsKind.GROUNDED)

    # ── Complete Extensions ─────────────────────────────────────

    def complete_extensions(self) -> list[Extension]:
        return self._wrap(self._complete_sets(SemanticsKind.COMPLETE), SemanticsKind.COMPLETE)

    # ── Preferred Extensions ────────────────────────────────────

    def preferred_extensions(self) -> list[Extension]:
        """Preferred extensions are exactly the ⊆-maximal complete extensions."""
        complete = self._complete_sets(SemanticsKind.PREFERRED)
        preferred = [
            s for s in complete
            if not any(s < other for other in complete)
        ]
        return self._wrap(preferred, SemanticsKind.PREFERRED)

    # ── Stable Extensions ───────────────────────────────────────

    def stable_extensions(self) -> list[Extension]:
        """
        Every stable extension is complete, so the complete search space
        is filtered for sets attacking every outsider. May be empty.
        """
        complete = self._complete_sets(SemanticsKind.STABLE)
        stable = [s for s in complete if self.is_stable(s)]
        return self._wrap(stable, SemanticsKind.STABLE)

    def extensions(self, semantics: SemanticsKind) -> list[Extension]:
        semantics = SemanticsKind(semantics)
        if semantics == SemanticsKind.GROUNDED:
            return [self.grounded_extension()]
        if semantics == SemanticsKind.COMPLETE:
            return self.complete_extensions()
        if semantics == SemanticsKind.PREFERRED:
            return self.preferred_extensions()
        return self.stable_extensions()

    # ── Search ──────────────────────────────────────────────────

    def _complete_sets(self, semantics: SemanticsKind) -> list[frozenset[str]]:
        """
        Enumerate every complete extension.

        Open arguments are decided in sorted order, include before
        exclude, so each candidate set is visited exactly once and the
        enumeration order is reproducible.
        """
        grounded = self.grounded_set()
        fixed_out = self.index.attacked_by(grounded) | self.index.self_attacking
        open_args = tuple(
            a for a in self.index.arg_ids
            if a not in grounded and a not in fixed_out
        )
        logger.debug(
            f"{semantics.value} search: grounded={len(grounded)} "
            f"fixed_out={len(fixed_out)} open={len(open_args)}"
        )

        found: list[frozenset[str]] = []
        stack: list[tuple[int, frozenset[str]]] = [(0, frozenset())]

        while stack:
            position, included = stack.pop()
            self._tick(semantics)

            if not self._can_still_defend(grounded, included, open_args, position):
                continue

            if position == len(open_args):
                candidate = grounded | included
                if self.is_complete(candidate):
                    found.append(candidate)
                continue

            arg_id = open_args[position]
            stack.append((position + 1, included))
            if self._compatible(arg_id, included):
                stack.append((position + 1, included | {arg_id}))

        return sorted(found, key=lambda s: sorted(s))

    def _compatible(self, arg_id: str, included: frozenset[str]) -> bool:
        """arg_id can join included without creating a conflict."""
        if self.index.attackees_of(arg_id) & included:
            return False
        return not (self.index.attackers_of(arg_id) & included)

    def _can_still_defend(
        self,
        grounded: frozenset[str],
        included: frozenset[str],
        open_args: tuple[str, ...],
        position: int,
    ) -> bool:
        """
        Every attacker of an included argument must still have a possible
        counter-attacker: a grounded member, an included argument, or an
        open argument not yet decided.
        """
        pool = grounded | included | frozenset(open_args[position:])
        for arg_id in included:
            for attacker in self.index.attackers_of(arg_id):
                if not (self.index.attackers_of(attacker) & pool):
                    return False
        return True

    def _tick(self, semantics: SemanticsKind) -> None:
        self.candidates_explored += 1
        if self.candidates_explored > self.search_budget:
            logger.warning(
                f"{semantics.value} search exhausted budget of "
                f"{self.search_budget} candidates ({len(self.index.arg_ids)} args)"
            )
            raise SearchBudgetExceeded(self.search_budget, semantics.value)

    @staticmethod
    def _wrap(sets: list[frozenset[str]], semantics: SemanticsKind) -> list[Extension]:
        return [Extension(arguments=s, semantics=semantics) for s in sets]
