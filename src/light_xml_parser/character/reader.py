"""File input for the light XML parser.

Turns a file (or raw bytes) into the single text buffer the parser scans:
picks an encoding from an explicit override, a byte order mark or the
configured fallback, decodes, and by default removes line terminators the way
a line-by-line reader would.
"""

from pathlib import Path
from typing import ClassVar, Dict, Optional, Tuple, Union

from light_xml_parser.shared.config import ReaderConfig
from light_xml_parser.shared.logging import get_logger

_LINE_TERMINATORS = ("\r", "\n")


class BOMDetector:
    """Byte Order Mark (BOM) detection for the common Unicode encodings."""

    BOM_PATTERNS: ClassVar[Dict[bytes, str]] = {
        b"\xef\xbb\xbf": "utf-8",
        b"\xff\xfe": "utf-16-le",
        b"\xfe\xff": "utf-16-be",
        b"\xff\xfe\x00\x00": "utf-32-le",
        b"\x00\x00\xfe\xff": "utf-32-be",
    }

    def detect(self, data: bytes) -> Optional[Tuple[str, int]]:
        """Detect encoding based on BOM.

        Args:
            data: Byte data to analyze

        Returns:
            (encoding, BOM length) if a BOM is present, None otherwise
        """
        if not data:
            return None

        # UTF-32 LE shares its first two bytes with UTF-16 LE
        for bom_bytes, encoding in sorted(
            self.BOM_PATTERNS.items(), key=lambda x: len(x[0]), reverse=True
        ):
            if data.startswith(bom_bytes):
                return encoding, len(bom_bytes)

        return None


class XMLFileReader:
    """Reads XML files into a single text buffer for parsing."""

    def __init__(
        self,
        config: Optional[ReaderConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize file reader.

        Args:
            config: Reader configuration, defaults to ReaderConfig()
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ReaderConfig()
        self.logger = get_logger(__name__, correlation_id, "xml_file_reader")
        self._bom_detector = BOMDetector()

    def read(self, file_path: Union[str, Path]) -> str:
        """Read a file into the parser's text buffer.

        Args:
            file_path: Path to the XML file

        Returns:
            Decoded file content

        Raises:
            FileNotFoundError: If the file does not exist
            UnicodeDecodeError: If decoding fails with ``decode_errors="strict"``
        """
        path_obj = Path(file_path)
        self.logger.debug("Reading XML file", extra={"file_path": str(path_obj)})

        with path_obj.open("rb") as file:
            raw_data = file.read()

        content = self.decode_bytes(raw_data)
        self.logger.debug(
            "XML file read",
            extra={
                "file_path": str(path_obj),
                "byte_length": len(raw_data),
                "content_length": len(content),
            }
        )
        return content

    def decode_bytes(self, data: bytes) -> str:
        """Decode raw bytes using the configured encoding rules."""
        encoding, offset = self.detect_encoding(data)
        content = data[offset:].decode(encoding, errors=self.config.decode_errors)
        if self.config.strip_line_terminators:
            content = strip_line_terminators(content)
        return content

    def detect_encoding(self, data: bytes) -> Tuple[str, int]:
        """Choose the encoding for ``data``.

        Returns:
            (encoding, number of leading BOM bytes to skip)
        """
        if self.config.encoding:
            return self.config.encoding, 0

        if self.config.detect_bom:
            detected = self._bom_detector.detect(data)
            if detected is not None:
                self.logger.debug(
                    "Encoding detected from BOM", extra={"encoding": detected[0]}
                )
                return detected

        return self.config.fallback_encoding, 0


def strip_line_terminators(content: str) -> str:
    """Remove carriage returns and line feeds from ``content``."""
    for terminator in _LINE_TERMINATORS:
        content = content.replace(terminator, "")
    return content
