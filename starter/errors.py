"""Exceptions raised by the project starter.

Every failure aborts the whole generation; nothing partial is ever returned
to the caller.  Template engine errors are not wrapped here -- they propagate
as Jinja2's own exceptions.
"""

from __future__ import annotations

from pathlib import Path


class StarterError(Exception):
    """Base class for all starter failures."""


class ConfigurationUnavailable(StarterError):
    """Raised when the version catalog cannot be read.

    Covers a ``versions.json`` that is still missing after the single refresh
    attempt, as well as files that exist but are unreadable or malformed.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Version catalog unavailable at {self.path}: {reason}")


class UnrecognizedSelection(StarterError):
    """Raised when a request names a module, database, version or file we do not know."""

    def __init__(self, kind: str, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Unrecognized {kind}: {value!r}")
