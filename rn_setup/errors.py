"""Failures that abort a setup run.

Only these propagate to the orchestrator.  Anchor misses are not errors and
the optional dependency install downgrades its own failures to warnings.
"""

from __future__ import annotations


class SetupError(Exception):
    """Raised when a setup step fails irrecoverably."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"{step}: {message}")


class CollectionError(SetupError):
    """The operator's input stream closed before every answer was read."""

    def __init__(self, message: str = "input stream closed before setup finished") -> None:
        super().__init__("collect", message)


class NotFoundError(SetupError):
    """A required project file is missing."""

    def __init__(self, step: str, path: object) -> None:
        self.path = path
        super().__init__(step, f"file not found: {path}")


class ParseError(SetupError):
    """A JSON file is malformed or does not have the expected shape."""


class WriteError(SetupError):
    """A target file could not be written."""
