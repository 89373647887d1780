"""Tree adapters for specific tree structures.

Adapters implement the NodeAdapter interface for different tree types,
enabling DazzleQuery to search any tree structure.
"""

from .dom import (
    ElementType,
    Node,
    DataNode,
    Text,
    Comment,
    ProcessingInstruction,
    NodeWithChildren,
    Document,
    CDATA,
    Element,
    DomAdapter,
)
from .etree import ElementTreeAdapter

__all__ = [
    "ElementType",
    "Node",
    "DataNode",
    "Text",
    "Comment",
    "ProcessingInstruction",
    "NodeWithChildren",
    "Document",
    "CDATA",
    "Element",
    "DomAdapter",
    "ElementTreeAdapter",
]
