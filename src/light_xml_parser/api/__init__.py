"""Parsing API for the light XML parser.

Provides the ``XMLParser`` class and the module-level ``parse()``,
``parse_string()`` and ``parse_file()`` shortcuts.
"""

from .parser import XMLParser, parse, parse_file, parse_string

__all__ = [
    "XMLParser",
    "parse",
    "parse_file",
    "parse_string",
]
