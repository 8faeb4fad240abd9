"""Exception hierarchy for layered client configuration.

Configuration files are hand-edited, so most irregularities (unknown keys,
odd quoting, unrecognised option text) degrade to documented defaults instead
of raising. The few failures that cannot be papered over are grouped here so
callers can react to the category while still catching the familiar builtin
base classes (``OSError`` for I/O, ``ValueError`` for malformed numbers).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

__all__ = [
    "ConfigurationError",
    "IOFailure",
    "FormatError",
]


class ConfigurationError(RuntimeError):
    """Base exception for configuration loading, saving, or typed access failures."""


class IOFailure(ConfigurationError, OSError):
    """Raised when reading or writing a backing properties file fails.

    A missing or unreadable file at load time is not an ``IOFailure``; the
    store simply starts empty.
    """

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class FormatError(ConfigurationError, ValueError):
    """Raised when a required numeric setting is absent or not a number."""

    def __init__(
        self, message: str, *, key: Optional[str] = None, value: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.key = key
        self.value = value


# === NAVMAP v1 ===
# {
#   "module": "OpenShiftClient.Configuration.errors",
#   "purpose": "Define the exception hierarchy used by layered client configuration",
#   "sections": [
#     {"id": "base", "name": "Base Exceptions", "anchor": "BAS", "kind": "api"},
#     {"id": "io", "name": "I/O Failures", "anchor": "IOF", "kind": "api"},
#     {"id": "format", "name": "Format Errors", "anchor": "FMT", "kind": "api"}
#   ]
# }
# === /NAVMAP ===
