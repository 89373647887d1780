"""Test fixtures for DazzleQuery consumers.

These helpers build small document trees from a compact nested-tuple
notation and record which nodes a search actually looked at, so tests can
assert on traversal order and short-circuiting without writing their own
bookkeeping.
"""

from typing import Any, Callable, List, Optional
from ..adapters.dom import Comment, Document, Element, Node, NodeWithChildren, Text


def build_tree(description: Any) -> Node:
    """Build a document node from a nested-tuple description.

    Notation:
    - a Node instance is used as-is
    - a str becomes a Text node
    - ``(name,)``, ``(name, [children])`` or ``(name, {attribs}, [children])``
      becomes an Element

    Example:
        tree = build_tree(('div', {'id': 'main'}, [
            ('p', ['hello']),
            Comment('note'),
        ]))

    Args:
        description: Node description

    Returns:
        The root node of the built subtree

    Raises:
        ValueError: If the description is not understood
    """
    if isinstance(description, Node):
        return description
    if isinstance(description, str):
        return Text(description)
    if isinstance(description, tuple) and description and isinstance(description[0], str):
        name = description[0]
        attribs = None
        children: List[Any] = []
        rest = list(description[1:])
        if rest and isinstance(rest[0], dict):
            attribs = rest.pop(0)
        if rest:
            children = rest.pop(0)
        if rest:
            raise ValueError(f"Too many parts in element description: {description!r}")
        return Element(name, attribs, [build_tree(child) for child in children])
    raise ValueError(f"Cannot build a node from {description!r}")


def build_document(*descriptions: Any) -> Document:
    """Build a Document whose top-level children are described by ``descriptions``."""
    return Document([build_tree(description) for description in descriptions])


def by_name(name: str) -> Callable[[Any], bool]:
    """Predicate matching elements with the given name."""
    return lambda node: getattr(node, 'name', None) == name


def make_cycle(parent: NodeWithChildren, ancestor: Node) -> None:
    """Break the forest invariant by appending ``ancestor`` under ``parent``.

    Only the child list is touched; parent/sibling links are left as they
    were, which is exactly the kind of malformed tree the revisit guard
    exists for.
    """
    parent.children.append(ancestor)


class RecordingPredicate:
    """Predicate wrapper that records every node it is called with.

    Example:
        spy = RecordingPredicate(by_name('p'))
        filter_nodes(spy, doc, limit=1)
        assert len(spy.calls) == 3
    """

    def __init__(self, test: Optional[Callable[[Any], Any]] = None):
        """Initialize with the predicate to wrap.

        Args:
            test: Wrapped predicate (default: always False)
        """
        self.test = test or (lambda node: False)
        self.calls: List[Any] = []

    def __call__(self, node: Any) -> Any:
        self.calls.append(node)
        return self.test(node)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def names(self) -> List[Optional[str]]:
        """Element names (or text data) of recorded calls, in call order."""
        return [getattr(node, 'name', getattr(node, 'data', None)) for node in self.calls]

    def reset(self) -> None:
        self.calls.clear()


def sample_document() -> Document:
    """Build the small page used throughout the test suite and examples.

    Structure (pre-order):
    Document
    └── html
        ├── head
        │   └── title
        │       └── "Page"
        └── body.main
            ├── h1
            │   └── "Heading"
            ├── <!-- nav -->
            ├── div#a
            │   ├── p
            │   │   └── "one"
            │   └── p
            │       └── a[href=/x]
            │           └── "link"
            └── p
                └── "two"
    """
    return build_document(
        ('html', [
            ('head', [('title', ['Page'])]),
            ('body', {'class': 'main'}, [
                ('h1', ['Heading']),
                Comment('nav'),
                ('div', {'id': 'a'}, [
                    ('p', ['one']),
                    ('p', [('a', {'href': '/x'}, ['link'])]),
                ]),
                ('p', ['two']),
            ]),
        ]),
    )
