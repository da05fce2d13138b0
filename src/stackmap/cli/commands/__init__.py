"""
CLI Commands Package.

Each command is implemented in its own module for maintainability.
"""

from . import explore
from . import path
from . import prompt
from . import recommend
from . import search
from . import show
from . import stats
from .initialize import init

__all__ = [
    "explore",
    "init",
    "path",
    "prompt",
    "recommend",
    "search",
    "show",
    "stats",
]
