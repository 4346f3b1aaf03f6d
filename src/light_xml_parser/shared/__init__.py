"""Shared utilities for the light XML parser.

This module provides the exception types, configuration objects and logging
helpers used by the reader, parser and tree layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    GlobalConfig,
    ParserConfig,
    ReaderConfig,
)
from .exceptions import (
    InvalidArgumentError,
    LightXMLParserError,
    XMLParseError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "GlobalConfig",
    "ParserConfig",
    "ReaderConfig",
    "InvalidArgumentError",
    "LightXMLParserError",
    "XMLParseError",
    "CorrelationLogger",
    "get_logger",
]
