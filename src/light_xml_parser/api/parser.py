"""Core parser API for the light XML parser.

Level 1 is the module-level functions ``parse()``, ``parse_string()`` and
``parse_file()``; level 2 is the ``XMLParser`` class, which takes an explicit
configuration and can be inspected before parsing.

The parser makes a single forward pass over the trimmed input with an explicit
stack of open elements, so nesting depth is bounded by memory rather than by
the interpreter's recursion limit. It fails fast: the first structural problem
raises ``XMLParseError`` and no tree is returned.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, List, Optional, Union

from light_xml_parser.character import XMLFileReader, strip_line_terminators
from light_xml_parser.shared import (
    InvalidArgumentError,
    ParserConfig,
    XMLParseError,
    get_logger,
)
from light_xml_parser.tree import ElementNode, XMLElementTree

# Type definitions for input data
InputType = Union[str, bytes, Path, IO[str], IO[bytes]]

MS_PER_SECOND = 1000
PROCESSING_INSTRUCTION_MARKER = "?"


@dataclass
class _OpenElement:
    """Element whose closing tag has not been seen yet."""

    tag: str
    position: int
    text_parts: List[str] = field(default_factory=list)
    children: List[ElementNode] = field(default_factory=list)

    def close(self) -> ElementNode:
        return ElementNode(self.tag, "".join(self.text_parts), self.children)


class XMLParser:
    """Fail-fast parser producing an ``XMLElementTree`` from XML-like text.

    Attributes are recognised only so they can be dropped, processing
    instructions (``<?...?>``) are skipped, and free text inside an element is
    accumulated as that element's trimmed data.

    Examples:
        >>> tree = XMLParser("<a><b>letters</b></a>").parse_xml()
        >>> str(tree)
        '<a><b>letters</b></a>'
        >>> XMLParser.from_file("document.xml").parse_xml().root.tag
        'document'
    """

    def __init__(
        self,
        source: Union[str, Path],
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize parser.

        Args:
            source: XML text, or a Path to a file holding it
            config: Parser configuration, defaults to ParserConfig()
            correlation_id: Optional correlation ID for request tracking
        """
        if source is None:
            raise InvalidArgumentError("Source cannot be None", argument="source")

        self.config = config or ParserConfig()
        tracking = self.config.global_.enable_correlation_tracking
        self.correlation_id = correlation_id if tracking else None
        self.logger = get_logger(__name__, self.correlation_id, "xml_parser")

        if isinstance(source, Path):
            content = XMLFileReader(self.config.reader, self.correlation_id).read(source)
        elif isinstance(source, str):
            content = source
        else:
            raise TypeError("Source must be a str or pathlib.Path")

        self._content = content.strip()

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, Path],
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> "XMLParser":
        """Create a parser over the content of ``file_path``."""
        if file_path is None:
            raise InvalidArgumentError("File path cannot be None", argument="file_path")
        return cls(Path(file_path), config=config, correlation_id=correlation_id)

    @property
    def content(self) -> str:
        """Trimmed text buffer this parser scans."""
        return self._content

    def parse_xml(self) -> XMLElementTree:
        """Parse the content into a searchable tree.

        Returns:
            XMLElementTree rooted at the document's top-level element

        Raises:
            XMLParseError: If the content is empty or structurally malformed
        """
        start_time = time.time()
        preview_length = self.config.global_.log_preview_length
        self.logger.debug(
            "Starting XML parse",
            extra={
                "content_length": len(self._content),
                "preview": (
                    self._content[:preview_length] + "..."
                    if len(self._content) > preview_length else self._content
                ),
            }
        )

        try:
            root = self._parse_root()
        except XMLParseError as e:
            self.logger.warning(
                "XML parse failed",
                extra={"reason": e.reason, "position": e.position}
            )
            raise

        tree = XMLElementTree(root)
        if self.logger.is_enabled_for(logging.INFO):
            self.logger.info(
                "XML parse completed",
                extra={
                    "root_tag": root.tag,
                    "element_count": tree.element_count,
                    "max_depth": tree.max_depth,
                    "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
                }
            )
        return tree

    def _parse_root(self) -> ElementNode:
        content = self._content
        if not content:
            raise XMLParseError("Cannot parse empty XML content")

        max_length = self.config.global_.max_input_length
        if max_length is not None and len(content) > max_length:
            raise XMLParseError(
                f"Input length {len(content)} exceeds maximum of {max_length} characters"
            )

        # Frame for the document itself; it never matches a closing tag
        document = _OpenElement(tag="", position=0)
        stack: List[_OpenElement] = [document]
        root: Optional[ElementNode] = None

        position = 0
        length = len(content)
        while position < length:
            tag_start = content.find("<", position)
            if tag_start == -1:
                stack[-1].text_parts.append(content[position:])
                break
            if tag_start > position:
                stack[-1].text_parts.append(content[position:tag_start])

            tag_end = content.find(">", tag_start + 1)
            if tag_end == -1:
                raise XMLParseError("Unterminated tag, missing '>'", tag_start)
            raw_tag = content[tag_start + 1:tag_end]
            position = tag_end + 1

            if raw_tag.startswith(PROCESSING_INSTRUCTION_MARKER):
                self.logger.debug(
                    "Skipping processing instruction", extra={"position": tag_start}
                )
                continue

            # Attributes go away unless the tag is self-closing; the slash has
            # to be stripped first in that case
            tag = raw_tag.strip()
            space_index = tag.find(" ")
            if not tag.endswith("/") and space_index > -1:
                tag = tag[:space_index]

            current = stack[-1]
            if current is not document and tag == "/" + current.tag:
                stack.pop()
                completed = current.close()
            elif tag.endswith("/"):
                name = tag[:-1]
                if space_index > -1:
                    name = name[:space_index]
                if not name:
                    raise XMLParseError("Self-closing tag has no name", tag_start)
                completed = ElementNode(name)
            elif tag.startswith("/"):
                if current is document:
                    raise XMLParseError(
                        f"Closing tag <{tag}> has no matching open tag", tag_start
                    )
                raise XMLParseError(
                    f"Mismatched closing tag <{tag}>, expected </{current.tag}>",
                    tag_start
                )
            elif not tag:
                raise XMLParseError("Empty tag", tag_start)
            else:
                stack.append(_OpenElement(tag=tag, position=tag_start))
                continue

            if stack[-1] is document:
                root = self._replace_root(root, completed)
            else:
                stack[-1].children.append(completed)

        if len(stack) > 1:
            unclosed = stack[-1]
            raise XMLParseError(f"Unclosed tag <{unclosed.tag}>", unclosed.position)
        if root is None:
            raise XMLParseError("No root element found")
        return root

    def _replace_root(
        self, previous: Optional[ElementNode], root: ElementNode
    ) -> ElementNode:
        if previous is not None:
            self.logger.warning(
                "Multiple top-level elements, keeping the last one",
                extra={"replaced_tag": previous.tag, "root_tag": root.tag}
            )
        return root


def parse(
    input_data: InputType,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> XMLElementTree:
    """Parse XML from a string, bytes, Path or readable file-like object.

    Strings are parsed as XML text. Paths are read as files. Bytes and the
    content of file-like objects go through the file reader's decoding and
    line-terminator rules.

    Args:
        input_data: XML content or a source of it
        config: Parser configuration, defaults to ParserConfig()
        correlation_id: Optional correlation ID for request tracking

    Returns:
        XMLElementTree for the parsed document

    Examples:
        >>> parse('<root><item>value</item></root>').find_by_tag('item')[0].data
        'value'
        >>> parse(b'<?xml version="1.0"?><root/>').root.tag
        'root'
    """
    if input_data is None:
        raise InvalidArgumentError("Input cannot be None", argument="input_data")

    config = config or ParserConfig()
    if isinstance(input_data, str):
        return parse_string(input_data, config, correlation_id)
    if isinstance(input_data, Path):
        return parse_file(input_data, config, correlation_id)

    tracking = config.global_.enable_correlation_tracking
    reader = XMLFileReader(config.reader, correlation_id if tracking else None)
    if isinstance(input_data, (bytes, bytearray)):
        return parse_string(reader.decode_bytes(bytes(input_data)), config, correlation_id)
    if hasattr(input_data, "read"):
        data = input_data.read()
        if isinstance(data, (bytes, bytearray)):
            text = reader.decode_bytes(bytes(data))
        elif config.reader.strip_line_terminators:
            text = strip_line_terminators(data)
        else:
            text = data
        return parse_string(text, config, correlation_id)

    raise TypeError(f"Unsupported input type: {type(input_data).__name__}")


def parse_string(
    xml_string: str,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> XMLElementTree:
    """Parse XML from a string.

    Examples:
        >>> str(parse_string('<a id="1"><b> content </b></a>'))
        '<a><b>content</b></a>'
    """
    return XMLParser(xml_string, config=config, correlation_id=correlation_id).parse_xml()


def parse_file(
    file_path: Union[str, Path],
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None
) -> XMLElementTree:
    """Parse XML from a file.

    Raises:
        FileNotFoundError: If the file does not exist
        XMLParseError: If the file content is malformed
    """
    return XMLParser.from_file(
        file_path, config=config, correlation_id=correlation_id
    ).parse_xml()
