"""Decide which files get their contents rendered."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path, PurePath, PurePosixPath
from typing import Iterable, Optional, Sequence

from .config import TemplateConfig

__all__ = ["Matcher"]


def _normalize(patterns: Iterable[str]) -> tuple[str, ...]:
    cleaned = (pattern.strip().strip("/") for pattern in patterns)
    return tuple(pattern for pattern in cleaned if pattern)


def _matches(relative: PurePosixPath, pattern: str) -> bool:
    for candidate in (relative, *relative.parents[:-1]):
        if fnmatchcase(candidate.as_posix(), pattern) or candidate.match(pattern):
            return True
    return False


class Matcher:
    """Answer whether a path relative to the project root is substituted.

    An include list takes precedence over an exclude list. Without either,
    every file is included.
    """

    def __init__(self, config: Optional[TemplateConfig] = None, project_dir: str | Path | None = None) -> None:
        self.project_dir = Path(project_dir).absolute() if project_dir is not None else None
        self.include: Optional[tuple[str, ...]] = None
        self.exclude: Optional[tuple[str, ...]] = None
        if config is not None:
            if config.include is not None:
                self.include = _normalize(config.include)
            elif config.exclude is not None:
                self.exclude = _normalize(config.exclude)

    @classmethod
    def default(cls) -> "Matcher":
        return cls()

    @classmethod
    def from_patterns(
        cls,
        *,
        include: Sequence[str] | None = None,
        exclude: Sequence[str] | None = None,
    ) -> "Matcher":
        matcher = cls()
        if include is not None:
            matcher.include = _normalize(include)
        elif exclude is not None:
            matcher.exclude = _normalize(exclude)
        return matcher

    def should_include(self, relative_path: str | PurePath) -> bool:
        """Return ``True`` when the contents of ``relative_path`` are rendered.

        Absolute paths inside the project directory are made relative to it
        before matching.
        """

        path = PurePath(relative_path)
        if self.project_dir is not None and path.is_absolute():
            path = path.relative_to(self.project_dir)
        relative = PurePosixPath(path.as_posix())
        if self.include is not None:
            return any(_matches(relative, pattern) for pattern in self.include)
        if self.exclude is not None:
            return not any(_matches(relative, pattern) for pattern in self.exclude)
        return True

    def __repr__(self) -> str:
        return f"Matcher(include={self.include!r}, exclude={self.exclude!r})"
