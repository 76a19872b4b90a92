"""Helpers that live outside the engine."""
from .cache import ResultCache

__all__ = ["ResultCache"]
