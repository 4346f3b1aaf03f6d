"""Configuration classes for the light XML parser.

Component configurations validate themselves in ``__post_init__``; the
top-level ``ParserConfig`` is frozen and can be copied with overrides or
round-tripped through JSON.
"""

import json
from dataclasses import dataclass, field, fields, is_dataclass, replace
from typing import Any, Dict, List, Optional

_VALID_DECODE_ERRORS = ("strict", "replace", "ignore")
_COMPONENT_FIELDS = ("reader", "global_")


@dataclass
class ReaderConfig:
    """Configuration for turning a file into the parser's text buffer."""

    encoding: Optional[str] = None  # Explicit override, skips detection
    fallback_encoding: str = "utf-8"
    detect_bom: bool = True
    strip_line_terminators: bool = True
    decode_errors: str = "strict"

    def __post_init__(self) -> None:
        """Validate reader configuration."""
        if self.encoding is not None and not self.encoding:
            raise ValueError("encoding must be a non-empty string or None")
        if not self.fallback_encoding:
            raise ValueError("fallback_encoding cannot be empty")
        if self.decode_errors not in _VALID_DECODE_ERRORS:
            raise ValueError(
                f"decode_errors must be one of {list(_VALID_DECODE_ERRORS)}"
            )


@dataclass
class GlobalConfig:
    """Settings that apply to every parse call."""

    max_input_length: Optional[int] = None
    enable_correlation_tracking: bool = True
    log_preview_length: int = 100

    def __post_init__(self) -> None:
        """Validate global configuration."""
        if self.max_input_length is not None and self.max_input_length <= 0:
            raise ValueError("max_input_length must be > 0 or None")
        if self.log_preview_length < 0:
            raise ValueError("log_preview_length must be >= 0")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ParserConfig:
    """Immutable configuration shared by the reader and the parser.

    Thread-safe to share between parse calls since it is frozen.
    """

    reader: ReaderConfig = field(default_factory=ReaderConfig)
    global_: GlobalConfig = field(default_factory=GlobalConfig)

    version: str = "1.0.0"
    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete parser configuration."""
        if not isinstance(self.reader, ReaderConfig):
            raise ConfigValidationError(
                "reader must be a ReaderConfig instance", field_name="reader"
            )
        if not isinstance(self.global_, GlobalConfig):
            raise ConfigValidationError(
                "global_ must be a GlobalConfig instance", field_name="global_"
            )
        try:
            self.reader.__post_init__()
            self.global_.__post_init__()
        except ValueError as e:
            raise ConfigValidationError(str(e)) from e

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Fields to override; component fields use double
                underscore notation, e.g. ``reader__encoding="latin-1"``

        Returns:
            New ParserConfig instance with overrides applied

        Example:
            >>> config = ParserConfig().override(
            ...     reader__strip_line_terminators=False,
            ...     global___max_input_length=4096,
            ... )
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            component, sep, field_name = key.partition("__")
            # "global___x" partitions into ("global", "__", "_x")
            if component == "global" and field_name.startswith("_"):
                component, field_name = "global_", field_name[1:]
            if sep and component in _COMPONENT_FIELDS:
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        try:
            new_fields: Dict[str, Any] = dict(top_level)
            for component, overrides in nested_overrides.items():
                new_fields[component] = replace(getattr(self, component), **overrides)
            return replace(self, **new_fields)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(f"Invalid override: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if is_dataclass(obj):
                return {f.name: _dataclass_to_dict(getattr(obj, f.name)) for f in fields(obj)}
            return obj

        return _dataclass_to_dict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected so typos do not silently fall back to
        defaults.

        Args:
            data: Dictionary as produced by ``to_dict``

        Returns:
            ParserConfig instance created from dictionary
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration data must be a dictionary")

        component_classes = {"reader": ReaderConfig, "global_": GlobalConfig}
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}",
                suggestions=[f"Valid fields: {sorted(known)}"],
            )

        values: Dict[str, Any] = {}
        for key, value in data.items():
            component_class = component_classes.get(key)
            if component_class is not None and isinstance(value, dict):
                try:
                    values[key] = component_class(**value)
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=key) from e
            else:
                values[key] = value
        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def default(cls) -> "ParserConfig":
        """Create the default configuration."""
        return cls(name="default")

    @classmethod
    def preserve_line_breaks(cls) -> "ParserConfig":
        """Create preset that keeps line terminators when reading files."""
        return cls(
            reader=ReaderConfig(strip_line_terminators=False),
            name="preserve_line_breaks",
            description="Keep line terminators of file input as node data",
        )
