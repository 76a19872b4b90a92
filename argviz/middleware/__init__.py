"""argviz middleware — request timing."""
from .timing import RequestTimer

__all__ = ["RequestTimer"]
