"""Core abstractions for DazzleQuery.

This module contains the adapter interface and the depth-first search
engine every front-end is built on.
"""

from .adapter import NodeAdapter
from .search import DepthFirstSearch, RevisitGuard, SearchFrame, SearchStats

__all__ = [
    "NodeAdapter",
    "DepthFirstSearch",
    "RevisitGuard",
    "SearchFrame",
    "SearchStats",
]
