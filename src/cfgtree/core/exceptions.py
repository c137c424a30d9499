from __future__ import annotations

from typing import Any, Dict, Mapping


class CfgtreeError(Exception):
    """Base exception for cfgtree."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class InvalidArgumentError(CfgtreeError, ValueError):
    """Raised when a caller passes an unusable argument (e.g. a relative config path)."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        CfgtreeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class SourceNotFoundError(CfgtreeError, FileNotFoundError):
    """Raised when a configuration source file does not exist."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        CfgtreeError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


class SourceLoadError(CfgtreeError):
    """Raised when a configuration source exists but cannot be read or parsed."""


class FileReadError(CfgtreeError, OSError):
    """Raised when a file referenced by a config key cannot be read."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        CfgtreeError.__init__(self, message, context=context)
        OSError.__init__(self, message)


class JSONParseError(CfgtreeError, ValueError):
    """Raised when a ``@JSON:`` tagged value is not valid JSON."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        CfgtreeError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "CfgtreeError",
    "InvalidArgumentError",
    "SourceNotFoundError",
    "SourceLoadError",
    "FileReadError",
    "JSONParseError",
]
