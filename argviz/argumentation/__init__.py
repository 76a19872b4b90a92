"""Argumentation engine — Dung's AAF semantics with verdict provenance."""
from .engine import SemanticsEngine
from .errors import (
    ArgumentationError,
    FrameworkParseError,
    InvalidFramework,
    NoStableExtension,
    SearchBudgetExceeded,
)
from .index import AttackIndex
from .classifier import VerdictClassifier
from .provenance import ProvenanceResolver
from .solver import DEFAULT_SEARCH_BUDGET, ExtensionSolver
from .models import (
    Argument,
    Attack,
    DisputeNode,
    Extension,
    Framework,
    Label,
    ManualValue,
    ProvenanceInfo,
    ProvenanceMode,
    ResultStatus,
    Role,
    SemanticsKind,
    SemanticsResult,
)

__all__ = [
    "SemanticsEngine",
    "ExtensionSolver",
    "VerdictClassifier",
    "ProvenanceResolver",
    "AttackIndex",
    "DEFAULT_SEARCH_BUDGET",
    "ArgumentationError",
    "FrameworkParseError",
    "InvalidFramework",
    "NoStableExtension",
    "SearchBudgetExceeded",
    "Argument",
    "Attack",
    "DisputeNode",
    "Extension",
    "Framework",
    "Label",
    "ManualValue",
    "ProvenanceInfo",
    "ProvenanceMode",
    "ResultStatus",
    "Role",
    "SemanticsKind",
    "SemanticsResult",
]
