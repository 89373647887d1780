"""High-level API for DazzleQuery.

This module provides simple, functional interfaces for searching trees.
These functions wrap DepthFirstSearch for the common case; they search
the document model from dazzlequery.adapters.dom unless another adapter
is passed in.
"""

import warnings
from typing import Any, Callable, Iterator, List, Optional, Sequence, TypeVar
from .config import SearchConfig
from .core.adapter import NodeAdapter
from .core.search import DepthFirstSearch, Predicate, RevisitGuard, SearchStats
from .adapters.dom import DomAdapter

T = TypeVar('T')

# DomAdapter holds no state, so one shared search is safe to reuse
_default_search = DepthFirstSearch(DomAdapter())


def _search_for(adapter: Optional[NodeAdapter]) -> DepthFirstSearch:
    if adapter is None:
        return _default_search
    return DepthFirstSearch(adapter)


def filter_nodes(
    test: Predicate,
    node: Any,
    recurse: bool = True,
    limit: Optional[Any] = None,
    *,
    adapter: Optional[NodeAdapter] = None,
    stats: Optional[SearchStats] = None,
) -> List[Any]:
    """Search a node and its children for nodes passing a test function.

    If ``node`` is not a list or tuple, it is wrapped in one. Recursive
    searches are protected against nodes reachable from themselves: every
    expanded node is remembered for the duration of the call and skipped
    if it turns up again.

    Args:
        test: Function to test nodes on
        node: Node or list of nodes to search; included in the result if it matches
        recurse: Also consider child nodes
        limit: Maximum number of nodes to return (None = unbounded)
        adapter: Tree adapter (defaults to the document model)
        stats: Optional counters updated during the search

    Returns:
        All nodes passing ``test``, in depth-first pre-order

    Raises:
        TypeError: If test is not callable
        SearchConfigError: If recurse or limit are of the wrong type

    Example:
        >>> doc = Document([Element('p', children=[Text('hi')])])
        >>> filter_nodes(lambda n: isinstance(n, Text), doc)
        [Text(data='hi')]
    """
    config = SearchConfig(recurse=recurse, limit=limit)
    return _search_for(adapter).run(test, node, config, stats)


def iter_filter(
    test: Predicate,
    node: Any,
    recurse: bool = True,
    *,
    adapter: Optional[NodeAdapter] = None,
    stats: Optional[SearchStats] = None,
) -> Iterator[Any]:
    """Lazily search a node and its children for nodes passing a test function.

    Same order and revisit protection as filter_nodes(), but nodes are
    produced one at a time; stop iterating to stop the search.

    Example:
        >>> first_two = list(itertools.islice(iter_filter(is_link, doc), 2))
    """
    return _search_for(adapter).iter_filter(test, node, recurse, stats)


def find(
    test: Predicate,
    nodes: Sequence[Any],
    recurse: bool,
    limit: Optional[Any],
    *,
    adapter: Optional[NodeAdapter] = None,
    guard: Optional[RevisitGuard] = None,
    stats: Optional[SearchStats] = None,
) -> List[Any]:
    """Search a list of nodes and their children for nodes passing a test function.

    This is the raw engine behind filter_nodes(). It is only guarded
    against revisits when the caller passes a ``guard``.

    Args:
        test: Function to test nodes on
        nodes: List of nodes to search
        recurse: Also consider child nodes
        limit: Maximum number of nodes to return
        adapter: Tree adapter (defaults to the document model)
        guard: Revisit guard from the caller's context
        stats: Optional counters updated during the search

    Returns:
        All nodes passing ``test``

    Raises:
        TypeError: If test is not callable
        SearchConfigError: If recurse or limit are of the wrong type
    """
    return _search_for(adapter).find(test, nodes, recurse, limit, guard=guard, stats=stats)


def find_one_child(test: Callable[[T], Any], nodes: Sequence[T]) -> Optional[T]:
    """Find the first element of a list that passes a test function.

    Deprecated: use ``next((n for n in nodes if test(n)), None)`` directly.

    Args:
        test: Function to test nodes on
        nodes: List of nodes to scan (children are not searched)

    Returns:
        The first node in the list that passes ``test``, or None
    """
    warnings.warn(
        "find_one_child is deprecated and will be removed in v2.0.0. "
        "Use next((n for n in nodes if test(n)), None) instead.",
        DeprecationWarning,
        stacklevel=2
    )
    return next((node for node in nodes if test(node)), None)


def find_one(
    test: Predicate,
    nodes: Any,
    recurse: bool = True,
    *,
    adapter: Optional[NodeAdapter] = None,
) -> Optional[Any]:
    """Find one tag node in a tree that passes a test.

    Args:
        test: Function to test tag nodes on
        nodes: Node or list of nodes to search
        recurse: Also consider child nodes
        adapter: Tree adapter (defaults to the document model)

    Returns:
        The first tag node that passes ``test``, or None
    """
    return _search_for(adapter).find_one(test, nodes, recurse)


def exists_one(
    test: Predicate,
    nodes: Any,
    *,
    adapter: Optional[NodeAdapter] = None,
) -> bool:
    """Check if a tree of nodes contains at least one tag node passing a test.

    Example:
        >>> exists_one(lambda e: e.name == 'h1', doc)
        True
    """
    return _search_for(adapter).exists_one(test, nodes)


def find_all(
    test: Predicate,
    nodes: Any,
    *,
    adapter: Optional[NodeAdapter] = None,
) -> List[Any]:
    """Search a tree for every tag node passing a test function.

    Same as filter_nodes(), but limited to tag nodes and with fewer
    options: always recursive, no limit, no revisit protection.

    Args:
        test: Function to test tag nodes on
        nodes: Node or list of nodes to search
        adapter: Tree adapter (defaults to the document model)

    Returns:
        All tag nodes passing ``test``
    """
    return _search_for(adapter).find_all(test, nodes)
