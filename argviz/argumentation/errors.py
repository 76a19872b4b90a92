"""
Argumentation Errors

The engine is a pure function of its input, so only two things can go
wrong: the framework handed to it is malformed, or the extension search
runs past its configured budget. A framework with no stable extension is
not an error of the engine; it is a result state that callers may turn
into an exception via SemanticsResult.raise_for_status().
"""

from __future__ import annotations


class ArgumentationError(Exception):
    """Base class for every error raised by argviz."""


class InvalidFramework(ArgumentationError, ValueError):
    """
    An attack names an argument that does not exist, or two arguments
    share an id. Raised before any extension search begins.
    """

    def __init__(
        self,
        unknown_ids: list[str] | None = None,
        duplicate_ids: list[str] | None = None,
    ):
        self.unknown_ids = sorted(set(unknown_ids or []))
        self.duplicate_ids = sorted(set(duplicate_ids or []))

        parts = []
        if self.duplicate_ids:
            parts.append(f"duplicate argument ids: {', '.join(self.duplicate_ids)}")
        if self.unknown_ids:
            parts.append(f"attacks reference unknown arguments: {', '.join(self.unknown_ids)}")
        super().__init__("; ".join(parts) or "invalid framework")


class NoStableExtension(ArgumentationError):
    """Stable semantics was requested but the framework has no stable extension."""

    def __init__(self, framework_name: str = ""):
        self.framework_name = framework_name
        label = f" '{framework_name}'" if framework_name else ""
        super().__init__(f"framework{label} has no stable extension")


class SearchBudgetExceeded(ArgumentationError):
    """The extension search explored more candidate sets than allowed."""

    def __init__(self, budget: int, semantics: str):
        self.budget = budget
        self.semantics = semantics
        super().__init__(
            f"{semantics} search exceeded budget of {budget} candidate sets"
        )


class FrameworkParseError(ArgumentationError, ValueError):
    """Framework text could not be parsed in any supported notation."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
