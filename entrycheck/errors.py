"""Shared exception types for entrycheck."""

from __future__ import annotations


class EntrycheckError(RuntimeError):
    """Base error for entrycheck operations."""


class ProjectError(EntrycheckError):
    """Raised when a project layout or manifest cannot be read."""


class SourceNotFoundError(EntrycheckError):
    """Raised when an entrypoint source cannot be resolved to a file."""

    def __init__(self, config_source: str, directory: str) -> None:
        """Record the unresolved source and the directory it was resolved from."""
        self.config_source = config_source
        self.directory = directory
        super().__init__(f"Cannot resolve {config_source!r} from {directory}.")


class ValidationError(EntrycheckError):
    """A validation failure attributed to a package or entrypoint."""

    def __init__(self, code: str, message: str, subject: object) -> None:
        """Store the symbolic code and the offending subject."""
        self.code = code
        self.subject = subject
        name = getattr(subject, "name", None)
        super().__init__(f"{name} {message}" if name else message)


class FatalError(ValidationError):
    """A violation that cannot be repaired by rewriting a manifest field."""


class FixableError(ValidationError):
    """A manifest field holds a wrong value that can be rewritten."""
