"""Tree data model for the light XML parser.

Key Components:
    ElementNode: Single element with tag, trimmed text data and ordered children
    XMLElementTree: Root wrapper with breadth-first tag search and child append
"""

from .element import ElementNode
from .element_tree import XMLElementTree

__all__ = [
    "ElementNode",
    "XMLElementTree",
]
