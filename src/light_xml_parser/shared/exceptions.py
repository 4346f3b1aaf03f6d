"""Exception types raised by the light XML parser.

Two failure kinds are observable by callers: structural parse failures and
invalid arguments passed to tree construction or mutation.
"""

from typing import Optional


class LightXMLParserError(Exception):
    """Base exception for all light XML parser errors."""


class XMLParseError(LightXMLParserError):
    """Raised when the input text is not a well-formed document.

    Parsing is fail-fast: no partial tree is ever returned alongside this error.
    """

    def __init__(self, reason: str, position: Optional[int] = None) -> None:
        """Initialize parse error.

        Args:
            reason: Human-readable description of the structural problem
            position: Character offset in the trimmed input, when known
        """
        message = reason
        if position is not None:
            message = f"{reason} (at offset {position})"
        super().__init__(message)
        self.reason = reason
        self.position = position


class InvalidArgumentError(LightXMLParserError, ValueError):
    """Raised when a required argument to a tree operation is missing."""

    def __init__(self, message: str, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument
