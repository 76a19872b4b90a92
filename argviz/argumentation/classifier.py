"""
Verdict Classifier — skeptical acceptance over a set of extensions.

    accepted  = arguments in every extension
    rejected  = arguments in no extension that are attacked by a member
                of some extension, or that attack themselves
    undecided = everything else

A self-attacking argument can never be in a conflict-free set, so it is
attacked out of every extension by itself and counts as rejected.
"""

from __future__ import annotations

from dataclasses import dataclass

from .index import AttackIndex
from .models import Extension


@dataclass(frozen=True)
class Labelling:
    accepted: frozenset[str]
    rejected: frozenset[str]
    undecided: frozenset[str]


class VerdictClassifier:

    def __init__(self, index: AttackIndex):
        self.index = index

    def classify(self, extensions: list[Extension]) -> Labelling | None:
        """Label every argument, or None when there is no extension to label against."""
        if not extensions:
            return None

        all_ids = frozenset(self.index.arg_ids)
        sets = [e.arguments for e in extensions]

        accepted = frozenset.intersection(*sets)
        in_some = frozenset.union(*sets)
        attacked = self.index.attacked_by(in_some) | self.index.self_attacking
        rejected = frozenset(a for a in all_ids - in_some if a in attacked)
        undecided = all_ids - accepted - rejected

        return Labelling(accepted=accepted, rejected=rejected, undecided=undecided)
