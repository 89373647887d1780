"""Document tree adapter for DazzleQuery.

This adapter lets DazzleQuery search a lightweight document tree made of
elements, text, comments, directives and CDATA sections. The node classes
here are deliberately minimal: they hold structure and data, but they do
not parse, serialize, or offer a mutation API.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence
from ..core.adapter import NodeAdapter


class ElementType(Enum):
    """Kind of a document node."""
    ROOT = "root"             # Document root
    TEXT = "text"             # Character data
    DIRECTIVE = "directive"   # <? ... ?>
    COMMENT = "comment"       # <!-- ... -->
    SCRIPT = "script"         # <script> element
    STYLE = "style"           # <style> element
    TAG = "tag"               # Any other element
    CDATA = "cdata"           # <![CDATA[ ... ]]>
    DOCTYPE = "doctype"       # <!DOCTYPE ...>


# Node kinds that carry a tag identity
TAG_TYPES = frozenset({ElementType.TAG, ElementType.SCRIPT, ElementType.STYLE})


def is_tag_type(element_type: ElementType) -> bool:
    """Check if nodes of this type carry a tag identity."""
    return element_type in TAG_TYPES


class Node:
    """Base class for every document node.

    Sibling and parent links are filled in when a node is handed to a
    NodeWithChildren constructor.
    """

    def __init__(self, type: ElementType):
        self.type = type
        self.parent: Optional['NodeWithChildren'] = None
        self.prev: Optional['Node'] = None
        self.next: Optional['Node'] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.type.value!r})"


class DataNode(Node):
    """A node holding a string of data and no children."""

    def __init__(self, type: ElementType, data: str):
        super().__init__(type)
        self.data = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(data={self.data!r})"


class Text(DataNode):
    def __init__(self, data: str):
        super().__init__(ElementType.TEXT, data)


class Comment(DataNode):
    def __init__(self, data: str):
        super().__init__(ElementType.COMMENT, data)


class ProcessingInstruction(DataNode):
    """A directive such as ``<?xml ...?>`` or ``<!DOCTYPE html>``."""

    def __init__(self, name: str, data: str):
        super().__init__(ElementType.DIRECTIVE, data)
        self.name = name

    def __repr__(self) -> str:
        return f"ProcessingInstruction(name={self.name!r})"


class NodeWithChildren(Node):
    """A node that owns an ordered, possibly empty list of children."""

    def __init__(self, type: ElementType, children: Optional[Iterable[Node]] = None):
        super().__init__(type)
        self.children: List[Node] = list(children) if children is not None else []
        self._link_children()

    def _link_children(self) -> None:
        previous = None
        for child in self.children:
            child.parent = self
            child.prev = previous
            if previous is not None:
                previous.next = child
            previous = child
        if previous is not None:
            previous.next = None

    @property
    def first_child(self) -> Optional[Node]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional[Node]:
        return self.children[-1] if self.children else None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(children={len(self.children)})"


class Document(NodeWithChildren):
    """Root of a document tree."""

    def __init__(self, children: Optional[Iterable[Node]] = None):
        super().__init__(ElementType.ROOT, children)


class CDATA(NodeWithChildren):
    def __init__(self, children: Optional[Iterable[Node]] = None):
        super().__init__(ElementType.CDATA, children)


class Element(NodeWithChildren):
    """An element with a name and attributes.

    ``type`` is TAG for ordinary elements; SCRIPT and STYLE mark the
    raw-text elements as the HTML parser world does.
    """

    def __init__(self,
                 name: str,
                 attribs: Optional[Dict[str, str]] = None,
                 children: Optional[Iterable[Node]] = None,
                 type: Optional[ElementType] = None):
        if type is None:
            type = {
                'script': ElementType.SCRIPT,
                'style': ElementType.STYLE,
            }.get(name.lower(), ElementType.TAG)
        super().__init__(type, children)
        self.name = name
        self.attribs: Dict[str, str] = dict(attribs) if attribs else {}

    @property
    def tag_name(self) -> str:
        return self.name

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attribs.get(name, default)

    def __repr__(self) -> str:
        return f"Element(name={self.name!r})"


class DomAdapter(NodeAdapter):
    """Adapter for the document node model above.

    Works with any object exposing the same shape: a ``type`` attribute
    holding an ElementType, and a ``children`` list on NodeWithChildren
    instances.
    """

    def is_tag(self, node: Any) -> bool:
        """Elements, scripts and styles carry a tag identity."""
        return is_tag_type(getattr(node, 'type', None))

    def get_children(self, node: Any) -> Optional[Sequence[Any]]:
        """Return the live child list of parent-capable nodes."""
        if isinstance(node, NodeWithChildren):
            return node.children
        return None
