"""ElementTree adapter for DazzleQuery.

Lets the search engine run directly over xml.etree.ElementTree trees.
Pass the root element (``tree.getroot()``), not the ElementTree wrapper.
"""

from typing import Any, Optional, Sequence
from ..core.adapter import NodeAdapter


class ElementTreeAdapter(NodeAdapter):
    """Adapter for xml.etree.ElementTree.Element nodes.

    ElementTree stores text as attributes rather than nodes, so every
    node the engine sees is an Element. Comments and processing
    instructions are Elements too, but their ``tag`` is the factory
    function that created them, which is how they are told apart from
    real tags.
    """

    def is_tag(self, node: Any) -> bool:
        return isinstance(getattr(node, 'tag', None), str)

    def get_children(self, node: Any) -> Optional[Sequence[Any]]:
        # Elements are themselves sequences of their children
        if not self.is_tag(node):
            return None
        return node
