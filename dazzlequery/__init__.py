"""DazzleQuery - Depth-first search and query engine for document trees.

DazzleQuery searches any rooted tree of heterogeneous nodes (elements,
text, comments, ...) through a small NodeAdapter interface: "is this a tag
node?" and "what are this node's children?".

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dazzlequery import filter_nodes, find_one, find_all
    from dazzlequery.adapters.dom import Document, Element, Text

    links = find_all(lambda e: e.name == 'a', doc)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Other tree models plug in by passing ``adapter=`` (see
dazzlequery.adapters.etree for xml.etree.ElementTree).
"""

__version__ = "0.1.0"

from .core.adapter import NodeAdapter
from .core.search import (
    DepthFirstSearch,
    RevisitGuard,
    SearchFrame,
    SearchStats,
)
from .config import SearchConfig, SearchConfigError, UNLIMITED
from .adapters.dom import DomAdapter
from .adapters.etree import ElementTreeAdapter

# High-level API
from .api import (
    filter_nodes,
    iter_filter,
    find,
    find_one,
    find_one_child,
    exists_one,
    find_all,
)

__all__ = [
    "__version__",
    # Core
    'NodeAdapter',
    'DepthFirstSearch',
    'RevisitGuard',
    'SearchFrame',
    'SearchStats',
    # Config
    'SearchConfig',
    'SearchConfigError',
    'UNLIMITED',
    # Adapters
    'DomAdapter',
    'ElementTreeAdapter',
    # API
    'filter_nodes',
    'iter_filter',
    'find',
    'find_one',
    'find_one_child',
    'exists_one',
    'find_all',
]
