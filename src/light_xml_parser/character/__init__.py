"""Character input layer for the light XML parser.

Reads files and raw bytes into the text buffer consumed by the parser.
"""

from .reader import (
    BOMDetector,
    XMLFileReader,
    strip_line_terminators,
)

__all__ = [
    "BOMDetector",
    "XMLFileReader",
    "strip_line_terminators",
]
