"""Light XML Parser.

A small, fail-fast parser that turns XML-like text into a tree of tagged
elements. Attributes are dropped, processing instructions are skipped and free
text becomes trimmed element data.

Progressive API Disclosure:
- Level 1: Simple functions - parse(), parse_string(), parse_file()
- Level 2: Configured parser - XMLParser class with ParserConfig
"""

__version__ = "0.1.0"
__author__ = "Light XML Parser Team"

# Progressive API disclosure - Level 1: Simple functions
# Progressive API disclosure - Level 2: Configured parser
from .api import XMLParser, parse, parse_file, parse_string

# Configuration and error types
from .shared import (
    ConfigValidationError,
    InvalidArgumentError,
    ParserConfig,
    ReaderConfig,
    XMLParseError,
)

# Tree data model
from .tree import ElementNode, XMLElementTree

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "parse_string",
    "parse_file",

    # Level 2: Parser class
    "XMLParser",

    # Tree data model
    "ElementNode",
    "XMLElementTree",

    # Configuration
    "ParserConfig",
    "ReaderConfig",

    # Errors
    "XMLParseError",
    "InvalidArgumentError",
    "ConfigValidationError",
]
