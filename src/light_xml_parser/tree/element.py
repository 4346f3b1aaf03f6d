"""Element node, the storage unit of a parsed document.

An ``ElementNode`` has a tag, trimmed text data and an ordered list of child
nodes. Tag and data are fixed at construction; the child list is handed out
as a live, mutable handle rather than a copy, so anything holding a node
reference can change the subtree underneath it.

Rendering, comparison and iteration walk the subtree with an explicit stack,
so trees deeper than the interpreter's recursion limit are still usable.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from light_xml_parser.shared.exceptions import InvalidArgumentError


class ElementNode:
    """Single tagged element with text data and ordered children."""

    __slots__ = ("_tag", "_data", "_children")

    def __init__(
        self,
        tag: str,
        data: Optional[str] = "",
        children: Optional[Iterable["ElementNode"]] = None
    ) -> None:
        """Initialize element node.

        Args:
            tag: Element name, must be a non-empty string
            data: Text content, stored with surrounding whitespace trimmed
            children: Initial children; a list is adopted as-is, not copied
        """
        if tag is None:
            raise InvalidArgumentError("Tag cannot be None", argument="tag")
        if not isinstance(tag, str):
            raise TypeError("Tag must be a string")
        if not tag:
            raise InvalidArgumentError("Tag cannot be empty", argument="tag")
        if data is None:
            data = ""
        elif not isinstance(data, str):
            raise TypeError("Data must be a string")

        if children is None:
            children = []
        elif not isinstance(children, list):
            children = list(children)
        for child in children:
            _check_node(child, "child")

        self._tag = tag
        self._data = data.strip()
        self._children: List[ElementNode] = children

    @property
    def tag(self) -> str:
        """Element name."""
        return self._tag

    @property
    def data(self) -> str:
        """Trimmed text content directly inside this element."""
        return self._data

    @property
    def children(self) -> List["ElementNode"]:
        """Mutable ordered list of child nodes (not a copy)."""
        return self._children

    def add_child(self, child: "ElementNode") -> "ElementNode":
        """Append a child node and return it."""
        _check_node(child, "child")
        self._children.append(child)
        return child

    def add_children(self, children: Iterable["ElementNode"]) -> List["ElementNode"]:
        """Append several child nodes in order and return them."""
        if children is None:
            raise InvalidArgumentError("Children cannot be None", argument="children")
        new_children = list(children)
        for child in new_children:
            _check_node(child, "child")
        self._children.extend(new_children)
        return new_children

    def iter(self) -> Iterator["ElementNode"]:
        """Iterate over this node and all descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def to_string(self) -> str:
        """Render the canonical ``<tag>data<child>...</child></tag>`` form."""
        parts: List[str] = []
        stack: List[Union[ElementNode, str]] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            parts.append(f"<{item._tag}>{item._data}")
            stack.append(f"</{item._tag}>")
            stack.extend(reversed(item._children))
        return "".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert element and its subtree to dictionary representation."""
        result: Dict[str, Any] = {}
        pending = [(self, result)]
        while pending:
            node, target = pending.pop()
            child_dicts: List[Dict[str, Any]] = [{} for _ in node._children]
            target["tag"] = node._tag
            target["data"] = node._data
            target["children"] = child_dicts
            pending.extend(zip(node._children, child_dicts))
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ElementNode):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if (
                left._tag != right._tag
                or left._data != right._data
                or len(left._children) != len(right._children)
            ):
                return False
            pending.extend(zip(left._children, right._children))
        return True

    # Unhashable: children are mutable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"ElementNode(tag={self._tag!r}, data={self._data!r}, "
            f"children={len(self._children)})"
        )


def _check_node(value: Any, argument: str) -> None:
    if value is None:
        raise InvalidArgumentError(
            f"{argument.capitalize()} cannot be None", argument=argument
        )
    if not isinstance(value, ElementNode):
        raise TypeError(f"{argument.capitalize()} must be an ElementNode instance")
