"""Element tree wrapping the root node of a parsed document."""

from collections import deque
from typing import Any, Deque, Dict, List, Tuple

from light_xml_parser.shared.exceptions import InvalidArgumentError
from light_xml_parser.tree.element import ElementNode


class XMLElementTree:
    """Whole-document wrapper exposing search and mutation over a root node.

    The tree is the entry point for traversal, but child lists stay directly
    mutable through any node reference. A node attached under several parents
    (or several trees) is shared, not copied.
    """

    def __init__(self, root: ElementNode) -> None:
        """Initialize element tree.

        Args:
            root: Root node of the document, required
        """
        if root is None:
            raise InvalidArgumentError("Root cannot be None", argument="root")
        if not isinstance(root, ElementNode):
            raise TypeError("Root must be an ElementNode instance")
        self._root = root

    @property
    def root(self) -> ElementNode:
        """Root node of this tree."""
        return self._root

    def find_by_tag(self, tag: str) -> List[ElementNode]:
        """Breadth-first search for the top-most nodes carrying ``tag``.

        If the root matches, only the root is returned. Otherwise children are
        inspected level by level: a matching child is collected and its own
        subtree is not searched, a non-matching child is queued for descent.

        Args:
            tag: Tag name to search for

        Returns:
            Matching nodes in level order, left to right; empty if none match
        """
        if tag is None:
            raise InvalidArgumentError("Tag cannot be None", argument="tag")

        if self._root.tag == tag:
            return [self._root]

        matching_nodes: List[ElementNode] = []
        queue: Deque[ElementNode] = deque([self._root])
        while queue:
            current = queue.popleft()
            for child in current.children:
                if child.tag == tag:
                    matching_nodes.append(child)
                else:
                    queue.append(child)
        return matching_nodes

    def append_child(self, parent: ElementNode, child: ElementNode) -> ElementNode:
        """Append ``child`` to the end of ``parent``'s children.

        Args:
            parent: Node receiving the child
            child: Node to append

        Returns:
            The appended child
        """
        if parent is None:
            raise InvalidArgumentError("Parent cannot be None", argument="parent")
        if child is None:
            raise InvalidArgumentError("Child cannot be None", argument="child")
        if not isinstance(parent, ElementNode):
            raise TypeError("Parent must be an ElementNode instance")
        return parent.add_child(child)

    def iter_elements(self) -> List[ElementNode]:
        """Return every node of the tree in document order, root first."""
        return list(self._root.iter())

    @property
    def element_count(self) -> int:
        """Total number of nodes reachable from the root."""
        return sum(1 for _ in self._root.iter())

    @property
    def max_depth(self) -> int:
        """Depth of the deepest node (root = 0)."""
        deepest = 0
        stack: List[Tuple[ElementNode, int]] = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in node.children)
        return deepest

    def to_dict(self) -> Dict[str, Any]:
        """Convert the tree to dictionary representation."""
        return {"root": self._root.to_dict()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XMLElementTree):
            return NotImplemented
        return self._root == other._root

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self._root.to_string()

    def __repr__(self) -> str:
        return f"XMLElementTree(root={self._root!r})"
