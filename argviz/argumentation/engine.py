"""
Semantics Engine — one entry point for a (Framework, SemanticsKind) solve

Pipeline:
  1. Validate the framework (InvalidFramework before any search)
  2. Build one AttackIndex, shared by every later stage
  3. ExtensionSolver computes the extensions for the semantics
  4. VerdictClassifier labels arguments by skeptical acceptance
  5. ProvenanceResolver explains every verdict

The engine keeps no state between calls. The same framework and
semantics always produce the same result; memoization belongs to the
caller (see argviz.utils.cache).
"""

from __future__ import annotations

import logging
import time

from .classifier import VerdictClassifier
from .index import AttackIndex
from .models import (
    Extension,
    Framework,
    ResultStatus,
    SemanticsKind,
    SemanticsResult,
)
from .provenance import DEFAULT_MAX_DEPTH, DEFAULT_MAX_NODES, ProvenanceResolver
from .solver import DEFAULT_SEARCH_BUDGET, ExtensionSolver

logger = logging.getLogger("argviz.argumentation")


class SemanticsEngine:
    """
    Computes extensions, labels and provenance for a framework.

    search_budget bounds the number of candidate sets the complete,
    preferred and stable searches may visit. max_tree_depth and
    max_tree_nodes bound each dispute tree.
    """

    def __init__(
        self,
        search_budget: int = DEFAULT_SEARCH_BUDGET,
        max_tree_depth: int = DEFAULT_MAX_DEPTH,
        max_tree_nodes: int = DEFAULT_MAX_NODES,
    ):
        if search_budget is None or search_budget < 1:
            raise ValueError("search_budget must be a positive integer")
        self.search_budget = search_budget
        self.max_tree_depth = max_tree_depth
        self.max_tree_nodes = max_tree_nodes

    def extensions(
        self,
        framework: Framework,
        semantics: SemanticsKind = SemanticsKind.GROUNDED,
    ) -> list[Extension]:
        framework.validate()
        solver = ExtensionSolver(AttackIndex(framework), self.search_budget)
        return solver.extensions(SemanticsKind(semantics))

    def solve(
        self,
        framework: Framework,
        semantics: SemanticsKind = SemanticsKind.GROUNDED,
    ) -> SemanticsResult:
        semantics = SemanticsKind(semantics)
        framework.validate()
        start = time.perf_counter()

        index = AttackIndex(framework)
        solver = ExtensionSolver(index, self.search_budget)
        extensions = solver.extensions(semantics)

        labelling = VerdictClassifier(index).classify(extensions)
        if labelling is None:
            logger.info(
                f"No {semantics.value} extension for {framework!r} "
                f"({solver.candidates_explored} candidates explored)"
            )
            return SemanticsResult(
                semantics=semantics,
                status=ResultStatus.NO_STABLE_EXTENSION,
                candidates_explored=solver.candidates_explored,
                framework_name=framework.name,
            )

        resolver = ProvenanceResolver(index, self.max_tree_depth, self.max_tree_nodes)
        winning = frozenset().union(*(e.arguments for e in extensions))
        provenance = resolver.resolve_all(labelling.accepted, labelling.rejected, winning)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            f"Solved {framework!r} under {semantics.value}: "
            f"{len(extensions)} extension(s), accepted={len(labelling.accepted)} "
            f"rejected={len(labelling.rejected)} undecided={len(labelling.undecided)} "
            f"candidates={solver.candidates_explored} in {elapsed:.2f}ms"
        )

        return SemanticsResult(
            semantics=semantics,
            status=ResultStatus.OK,
            accepted=labelling.accepted,
            rejected=labelling.rejected,
            undecided=labelling.undecided,
            extensions=tuple(extensions),
            provenance=provenance,
            candidates_explored=solver.candidates_explored,
            framework_name=framework.name,
        )
