"""Depth-first search engine for DazzleQuery.

DepthFirstSearch implements every query front-end on top of a TreeAdapter-
style NodeAdapter. The guarded walk and the collect-all walk use an
explicit stack of SearchFrames instead of recursion, so their depth is
bounded by the tree and not by the interpreter's recursion limit.

Revisit protection is threaded through the calls as an explicit
RevisitGuard argument. Nothing here is stored in module or instance state,
which keeps nested searches (a predicate that itself searches) and
searches from separate threads independent of each other.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence
from .adapter import NodeAdapter
from ..config import SearchConfig


Predicate = Callable[[Any], Any]


class SearchFrame:
    """A sibling sequence and a cursor into it.

    One frame is pushed per expanded node. The sequence is read by index
    as the cursor advances, never copied.
    """

    __slots__ = ("nodes", "index")

    def __init__(self, nodes: Sequence[Any], index: int = 0):
        self.nodes = nodes
        self.index = index

    def exhausted(self) -> bool:
        return self.index >= len(self.nodes)

    def __repr__(self) -> str:
        return f"SearchFrame(index={self.index}, size={len(self.nodes)})"


class RevisitGuard:
    """Identity-keyed record of nodes whose children were already expanded.

    Membership is by id(), so nodes never need to be hashable and
    value-equal nodes are still told apart. Each recorded node is held
    alongside its id: adapters that hand out short-lived proxy objects
    would otherwise see a freed id reused by an unrelated node. A guard
    is meant to live for exactly one top-level search, so nodes are only
    pinned for that long.
    """

    __slots__ = ("_expanded",)

    def __init__(self):
        self._expanded: Dict[int, Any] = {}

    def add(self, node: Any) -> None:
        """Record a node as expanded."""
        self._expanded[id(node)] = node

    def __contains__(self, node: Any) -> bool:
        return self._expanded.get(id(node)) is node

    def __len__(self) -> int:
        return len(self._expanded)

    def clear(self) -> None:
        self._expanded.clear()


@dataclass
class SearchStats:
    """Counters describing the work done by a guarded search.

    Pass an instance as ``stats=`` to filter_nodes/find/iter_filter; the
    engine updates it in place. The same instance can be reused across
    searches to accumulate totals.
    """

    nodes_tested: int = 0       # Predicate evaluations
    nodes_expanded: int = 0     # Frames pushed for child sequences
    revisits_skipped: int = 0   # Nodes skipped by the revisit guard
    matches: int = 0            # Nodes that passed the predicate

    def reset(self) -> None:
        self.nodes_tested = 0
        self.nodes_expanded = 0
        self.revisits_skipped = 0
        self.matches = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            'nodes_tested': self.nodes_tested,
            'nodes_expanded': self.nodes_expanded,
            'revisits_skipped': self.revisits_skipped,
            'matches': self.matches,
        }


def as_sequence(node: Any) -> Sequence[Any]:
    """Normalise a node or a list/tuple of nodes into a sequence.

    Only lists and tuples count as "many nodes". Tree nodes that happen to
    be sequences themselves (an ElementTree Element, for instance) are
    wrapped like any other single node.
    """
    if isinstance(node, (list, tuple)):
        return node
    return [node]


def check_predicate(test: Any) -> None:
    if not callable(test):
        raise TypeError(f"test must be callable, got {type(test).__name__}")


class DepthFirstSearch:
    """Depth-first, pre-order search over any tree a NodeAdapter describes.

    Nodes are tested before their children are enumerated, siblings keep
    their order, and an earlier sibling's whole subtree is finished before
    the next sibling is looked at.

    Only filter_nodes/find/iter_filter can protect themselves against
    trees where a node is reachable from itself. find_one, exists_one and
    find_all assume a well-formed forest; on cyclic input they do
    unbounded work.
    """

    def __init__(self, adapter: NodeAdapter):
        """Initialize search with an adapter.

        Args:
            adapter: NodeAdapter describing the tree model
        """
        self.adapter = adapter

    # Guarded engine

    def iter_find(self,
                  test: Predicate,
                  nodes: Sequence[Any],
                  recurse: bool,
                  guard: Optional[RevisitGuard] = None,
                  stats: Optional[SearchStats] = None) -> Iterator[Any]:
        """Lazily walk ``nodes`` and yield every node passing ``test``.

        This is the core traversal loop. Each step reads the node under
        the top frame's cursor, skips it if the guard has already seen it
        expanded, tests it, then pushes its children (if any) so they are
        the next frame examined.

        Args:
            test: Predicate applied to each visited node
            nodes: Starting sequence of nodes
            recurse: Whether to descend into children
            guard: Revisit guard to consult and update (None = unguarded)
            stats: Optional counters to update

        Yields:
            Matching nodes in depth-first pre-order
        """
        adapter = self.adapter
        stack: List[SearchFrame] = [SearchFrame(nodes)]

        while True:
            frame = stack[-1]

            if frame.exhausted():
                # Done with the starting sequence means done with the search
                if len(stack) == 1:
                    return
                stack.pop()
                continue

            node = frame.nodes[frame.index]
            frame.index += 1

            if guard is not None and node in guard:
                if stats is not None:
                    stats.revisits_skipped += 1
                continue

            if stats is not None:
                stats.nodes_tested += 1
            if test(node):
                if stats is not None:
                    stats.matches += 1
                yield node

            if recurse:
                children = adapter.get_children(node)
                if children is not None and len(children) > 0:
                    if guard is not None:
                        guard.add(node)
                    if stats is not None:
                        stats.nodes_expanded += 1
                    stack.append(SearchFrame(children))

    def find(self,
             test: Predicate,
             nodes: Sequence[Any],
             recurse: bool,
             limit: Optional[Any],
             guard: Optional[RevisitGuard] = None,
             stats: Optional[SearchStats] = None) -> List[Any]:
        """Search a sequence of nodes and their children for nodes passing ``test``.

        The limit is a hard cut-off on the traversal order: once it is
        reached the search stops, even if later nodes would also match.

        Args:
            test: Predicate applied to each visited node
            nodes: Sequence of nodes to search
            recurse: Whether to descend into children
            limit: Maximum number of results (None or math.inf = unbounded)
            guard: Revisit guard supplied by the caller's context
            stats: Optional counters to update

        Returns:
            Matching nodes in depth-first pre-order

        Raises:
            TypeError: If test is not callable
            SearchConfigError: If recurse or limit are of the wrong type
        """
        check_predicate(test)
        config = SearchConfig(recurse=recurse, limit=limit)
        config.raise_if_invalid()

        results: List[Any] = []
        if config.exhausted() or len(nodes) == 0:
            return results

        for node in self.iter_find(test, nodes, recurse, guard, stats):
            results.append(node)
            if not config.is_unbounded() and len(results) >= config.limit:
                break
        return results

    def run(self,
            test: Predicate,
            node: Any,
            config: SearchConfig,
            stats: Optional[SearchStats] = None) -> List[Any]:
        """Execute a validated guarded search described by ``config``.

        A fresh RevisitGuard is created for the duration of the call when
        the search recurses into a non-empty input. Flat, non-recursive
        passes never need one.

        Raises:
            TypeError: If test is not callable
            SearchConfigError: If config is invalid
        """
        check_predicate(test)
        config.raise_if_invalid()

        nodes = as_sequence(node)
        guard = self._guard_for(nodes, config)
        return self.find(test, nodes, config.recurse, config.limit, guard=guard, stats=stats)

    def filter(self,
               test: Predicate,
               node: Any,
               recurse: bool = True,
               limit: Optional[Any] = None,
               stats: Optional[SearchStats] = None) -> List[Any]:
        """Search a node (or list of nodes) and its descendants for nodes passing ``test``.

        ``node`` itself is included in the result if it matches.
        """
        return self.run(test, node, SearchConfig(recurse=recurse, limit=limit), stats)

    def iter_filter(self,
                    test: Predicate,
                    node: Any,
                    recurse: bool = True,
                    stats: Optional[SearchStats] = None) -> Iterator[Any]:
        """Lazy form of filter(); the revisit guard lives as long as the iterator.

        Arguments are checked immediately, not on first iteration.
        """
        check_predicate(test)
        config = SearchConfig(recurse=recurse)
        config.raise_if_invalid()

        nodes = as_sequence(node)
        if len(nodes) == 0:
            return iter(())
        return self.iter_find(test, nodes, recurse, self._guard_for(nodes, config), stats)

    def _guard_for(self, nodes: Sequence[Any], config: SearchConfig) -> Optional[RevisitGuard]:
        if config.recurse and config.guard_revisits and len(nodes) > 0:
            return RevisitGuard()
        return None

    # Tag-restricted front-ends (unguarded)

    def find_one(self, test: Predicate, nodes: Any, recurse: bool = True) -> Optional[Any]:
        """Find the first tag node in a tree that passes ``test``.

        Untagged nodes are never returned but are still searched through.

        Args:
            test: Predicate applied to tag nodes
            nodes: Node or list of nodes to search
            recurse: Also consider child nodes

        Returns:
            The first matching tag node, or None
        """
        check_predicate(test)
        return self._find_one(test, as_sequence(nodes), recurse)

    def _find_one(self, test: Predicate, nodes: Sequence[Any], recurse: bool) -> Optional[Any]:
        adapter = self.adapter
        for node in nodes:
            if adapter.is_tag(node) and test(node):
                return node
            if recurse:
                children = adapter.get_children(node)
                if children is not None and len(children) > 0:
                    found = self._find_one(test, children, True)
                    if found is not None:
                        return found
        return None

    def exists_one(self, test: Predicate, nodes: Any) -> bool:
        """Check if a tree contains at least one tag node passing ``test``."""
        check_predicate(test)
        return self._exists_one(test, as_sequence(nodes))

    def _exists_one(self, test: Predicate, nodes: Sequence[Any]) -> bool:
        adapter = self.adapter

        def matches(node: Any) -> bool:
            if adapter.is_tag(node) and test(node):
                return True
            children = adapter.get_children(node)
            return children is not None and self._exists_one(test, children)

        return any(matches(node) for node in nodes)

    def find_all(self, test: Predicate, nodes: Any) -> List[Any]:
        """Collect every tag node passing ``test`` in the whole tree.

        Same walk as find(), but limited to tag nodes and always fully
        recursive: no limit, no recurse flag, no revisit guard.

        Args:
            test: Predicate applied to tag nodes
            nodes: Node or list of nodes to search

        Returns:
            All matching tag nodes in depth-first pre-order
        """
        check_predicate(test)
        adapter = self.adapter
        results: List[Any] = []
        stack: List[SearchFrame] = [SearchFrame(as_sequence(nodes))]

        while True:
            frame = stack[-1]

            if frame.exhausted():
                if len(stack) == 1:
                    return results
                stack.pop()
                continue

            node = frame.nodes[frame.index]
            frame.index += 1

            if adapter.is_tag(node) and test(node):
                results.append(node)

            children = adapter.get_children(node)
            if children is not None and len(children) > 0:
                stack.append(SearchFrame(children))
