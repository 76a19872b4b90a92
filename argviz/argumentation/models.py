"""
Argumentation Framework Models — Dung's Abstract Argumentation

Implements the formal structures from:
- Dung (1995): On the acceptability of arguments
- Modgil & Caminada (2009): Proof theories and algorithms for
  abstract argumentation frameworks (dispute trees)

A Framework is immutable for the duration of a solve. Everything the
engine produces (extensions, labels, provenance) is a fresh value that
the rendering and export layers read but never hand back.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from .errors import InvalidFramework, NoStableExtension


class SemanticsKind(str, Enum):
    """Argumentation semantics for extension computation."""
    GROUNDED = "grounded"
    COMPLETE = "complete"
    PREFERRED = "preferred"
    STABLE = "stable"


class Label(str, Enum):
    """Three-way verdict for a single argument."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    UNDECIDED = "undecided"


class ManualValue(str, Enum):
    """Label set by a human in the editor, independent of computed status."""
    ACCEPTED = "accepted"
    DEFEATED = "defeated"
    UNDECIDED = "undecided"


class Role(str, Enum):
    """Side a dispute tree node argues for."""
    PROPONENT = "proponent"
    OPPONENT = "opponent"


class ProvenanceMode(str, Enum):
    """Which slice of a provenance record the inspection layer highlights."""
    POTENTIAL = "potential"
    PRIMARY = "primary"
    ACTUAL = "actual"


class ResultStatus(str, Enum):
    OK = "ok"
    NO_STABLE_EXTENSION = "no_stable_extension"


@dataclass(frozen=True)
class Argument:
    """An atomic claim node in the framework."""
    id: str
    annotation: str | None = None
    url: str | None = None
    manual_value: ManualValue | None = None


@dataclass(frozen=True)
class Attack:
    """
    An attack relation between two arguments.

    If (a, b) is an attack, argument 'a' undermines argument 'b'.
    Two attacks with the same endpoints are the same attack; the
    annotation is carried for display only.
    """
    source: str
    target: str
    annotation: str | None = field(default=None, compare=False)

    @property
    def pair(self) -> tuple[str, str]:
        return (self.source, self.target)

    @property
    def is_self_attack(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True)
class Framework:
    """
    Dung's Abstract Argumentation Framework (AAF).

    AF = (Args, Attacks) where:
    - Args is a finite set of arguments
    - Attacks ⊆ Args × Args is a binary attack relation

    Arguments and attacks are kept as tuples in input order so that
    duplicate ids survive construction and can be reported by validate().
    """
    arguments: tuple[Argument, ...] = ()
    attacks: tuple[Attack, ...] = ()
    name: str = ""

    @classmethod
    def build(
        cls,
        arguments: Iterable[Argument | str],
        attacks: Iterable[Attack | tuple[str, str]] = (),
        name: str = "",
    ) -> Framework:
        """Build a framework from ids or Arguments and pairs or Attacks."""
        args = tuple(
            a if isinstance(a, Argument) else Argument(id=a) for a in arguments
        )
        atts = tuple(
            a if isinstance(a, Attack) else Attack(source=a[0], target=a[1])
            for a in attacks
        )
        return cls(arguments=args, attacks=atts, name=name)

    def validate(self) -> Framework:
        """
        Check that argument ids are unique and every attack endpoint
        names an argument of this framework. Returns self so calls chain.
        """
        seen: set[str] = set()
        duplicates: list[str] = []
        for arg in self.arguments:
            if arg.id in seen:
                duplicates.append(arg.id)
            seen.add(arg.id)

        unknown = [
            endpoint
            for attack in self.attacks
            for endpoint in attack.pair
            if endpoint not in seen
        ]

        if duplicates or unknown:
            raise InvalidFramework(unknown_ids=unknown, duplicate_ids=duplicates)
        return self

    @property
    def arg_ids(self) -> tuple[str, ...]:
        return tuple(sorted({a.id for a in self.arguments}))

    def get_argument(self, arg_id: str) -> Argument | None:
        for arg in self.arguments:
            if arg.id == arg_id:
                return arg
        return None

    def unique_attacks(self) -> tuple[Attack, ...]:
        """Attacks with redundant (source, target) repeats removed, first one wins."""
        return tuple(dict.fromkeys(self.attacks))

    @property
    def fingerprint(self) -> str:
        """Content hash over ids and attack pairs; annotations do not affect semantics."""
        raw = json.dumps(
            [list(self.arg_ids), sorted(list(p) for p in {a.pair for a in self.attacks})]
        )
        return hashlib.sha256(raw.encode()).hexdigest()[:32]

    def __repr__(self):
        return (
            f"Framework({self.name!r}, {len(self.arguments)} arguments, "
            f"{len(self.attacks)} attacks)"
        )


@dataclass(frozen=True)
class Extension:
    """
    A set of arguments that are collectively acceptable under
    a given semantics.
    """
    arguments: frozenset[str] = frozenset()
    semantics: SemanticsKind = SemanticsKind.GROUNDED

    @property
    def is_empty(self) -> bool:
        return not self.arguments

    def sorted_ids(self) -> tuple[str, ...]:
        return tuple(sorted(self.arguments))

    def __contains__(self, arg_id: str) -> bool:
        return arg_id in self.arguments


@dataclass(frozen=True)
class DisputeNode:
    """
    A node of a dispute tree.

    PROPONENT nodes argue for the root, OPPONENT nodes against it. A node
    whose argument already occurs on its path from the root is marked
    circular and has no children.
    """
    argument: str
    role: Role
    children: tuple[DisputeNode, ...] = ()
    circular: bool = False
    truncated: bool = False

    def iter_ids(self) -> Iterator[str]:
        yield self.argument
        for child in self.children:
            yield from child.iter_ids()

    @property
    def depth(self) -> int:
        if not self.children:
            return 0
        return 1 + max(c.depth for c in self.children)

    def to_dict(self) -> dict:
        data: dict = {
            "argument": self.argument,
            "role": self.role.value,
            "children": [c.to_dict() for c in self.children],
        }
        if self.circular:
            data["circular"] = True
        if self.truncated:
            data["truncated"] = True
        return data


@dataclass(frozen=True)
class ProvenanceInfo:
    """Justification of one argument's verdict."""
    status: Label
    reason: str
    attackers: tuple[str, ...]
    defenders: tuple[str, ...]
    dispute_tree: DisputeNode
    potential_provenance: tuple[str, ...]
    primary_provenance: tuple[str, ...]
    actual_provenance: tuple[str, ...]

    def for_mode(self, mode: ProvenanceMode) -> tuple[str, ...]:
        if mode == ProvenanceMode.POTENTIAL:
            return self.potential_provenance
        if mode == ProvenanceMode.PRIMARY:
            return self.primary_provenance
        return self.actual_provenance

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "reason": self.reason,
            "attackers": list(self.attackers),
            "defenders": list(self.defenders),
            "potential_provenance": list(self.potential_provenance),
            "primary_provenance": list(self.primary_provenance),
            "actual_provenance": list(self.actual_provenance),
            "dispute_tree": self.dispute_tree.to_dict(),
        }


@dataclass(frozen=True)
class SemanticsResult:
    """
    The output of one solve: a partition of all argument ids into
    accepted/rejected/undecided plus per-argument provenance.

    With status NO_STABLE_EXTENSION the label sets and provenance are
    empty; no argument is labelled because no extension exists.
    """
    semantics: SemanticsKind
    status: ResultStatus = ResultStatus.OK
    accepted: frozenset[str] = frozenset()
    rejected: frozenset[str] = frozenset()
    undecided: frozenset[str] = frozenset()
    extensions: tuple[Extension, ...] = ()
    provenance: dict[str, ProvenanceInfo] = field(default_factory=dict)
    candidates_explored: int = 0
    framework_name: str = ""

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.OK

    def label_of(self, arg_id: str) -> Label | None:
        if arg_id in self.accepted:
            return Label.ACCEPTED
        if arg_id in self.rejected:
            return Label.REJECTED
        if arg_id in self.undecided:
            return Label.UNDECIDED
        return None

    def raise_for_status(self) -> SemanticsResult:
        if self.status == ResultStatus.NO_STABLE_EXTENSION:
            raise NoStableExtension(self.framework_name)
        return self

    def to_dict(self) -> dict:
        return {
            "semantics": self.semantics.value,
            "status": self.status.value,
            "accepted": sorted(self.accepted),
            "rejected": sorted(self.rejected),
            "undecided": sorted(self.undecided),
            "extensions": [list(e.sorted_ids()) for e in self.extensions],
            "provenance": {
                arg_id: info.to_dict()
                for arg_id, info in sorted(self.provenance.items())
            },
            "candidates_explored": self.candidates_explored,
        }
