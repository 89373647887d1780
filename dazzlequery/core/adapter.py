"""NodeAdapter abstraction for DazzleQuery.

The NodeAdapter is the only place DazzleQuery learns anything about the
tree it searches. Nodes themselves are opaque: the search engine never
inspects them directly, it asks the adapter two questions instead.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class NodeAdapter(ABC):
    """Abstract adapter exposing the capabilities a search needs.

    A tree model plugs into DazzleQuery by answering:

    - Does this node carry a tag identity? (elements do, text and
      comments usually don't)
    - Can this node own children, and if so, what are they?

    Everything else (how children are stored, what a tag looks like,
    parent links) stays private to the tree model. This separation allows
    the same search engine to run over DOM trees, ElementTree documents,
    or any custom node type.
    """

    @abstractmethod
    def is_tag(self, node: Any) -> bool:
        """Check if a node carries a tag identity.

        Tag nodes are the only candidates in the tag-restricted searches
        (find_one, exists_one, find_all). Untagged nodes are still
        descended through.

        Args:
            node: The node to check

        Returns:
            True if the node is a tag node
        """
        pass

    @abstractmethod
    def get_children(self, node: Any) -> Optional[Sequence[Any]]:
        """Get the ordered child sequence of a node.

        Must return the live sequence held by the tree model, not a copy.
        The engine reads it by index as it walks.

        Args:
            node: The parent node

        Returns:
            The (possibly empty) child sequence, or None if this kind of
            node cannot own children
        """
        pass

    def has_children(self, node: Any) -> bool:
        """Check if a node is able to own children.

        Note that this is a capability check: a parent-capable node with
        zero children still returns True.

        Args:
            node: The node to check

        Returns:
            True if get_children() returns a sequence for this node
        """
        return self.get_children(node) is not None
