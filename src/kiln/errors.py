"""Custom exception types used by kiln."""

from __future__ import annotations

from pathlib import Path


class KilnError(RuntimeError):
    """Base class for every error raised by kiln."""


class TemplateError(KilnError):
    """Raised when a template cannot be compiled or rendered."""

    def __init__(self, message: str, *, name: str = "<string>") -> None:
        super().__init__(message)
        self.name = name


class TemplateCompileError(TemplateError):
    """Raised when template syntax is malformed."""


class TemplateRenderingError(TemplateError):
    """Raised when the renderer cannot evaluate an expression."""


class WalkError(KilnError):
    """Raised when the rendering walk fails on a specific file."""

    def __init__(self, message: str, path: str | Path, *, action: str) -> None:
        super().__init__(f"{message} `{path}`")
        self.path = Path(path)
        self.action = action


class ConfigError(KilnError):
    """Raised when a template configuration file cannot be loaded."""


class AuthorsError(KilnError):
    """Raised when no author identity can be determined."""


class ProjectNameError(KilnError, ValueError):
    """Raised when a project name cannot be turned into identifiers."""
