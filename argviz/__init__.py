"""argviz — abstract argumentation semantics with verdict provenance."""

__version__ = "1.0.0"
