"""Render a copied template tree in place."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Optional

from .config import TemplateConfig
from .errors import TemplateError, WalkError
from .include_exclude import Matcher
from .progress import NullProgress, ProgressReporter
from .template import TemplateEngine, engine

__all__ = ["GIT_METADATA_MARKER", "FileTask", "is_git_metadata", "walk_dir"]


LOGGER = logging.getLogger(__name__)

GIT_METADATA_MARKER = ".git"


@dataclass(frozen=True, slots=True)
class FileTask:
    """A file discovered by the walk."""

    path: Path
    relative_path: Path
    substitute_contents: bool


def is_git_metadata(path: str | Path) -> bool:
    """Return ``True`` when ``path`` contains the git metadata marker anywhere."""

    return GIT_METADATA_MARKER in str(path)


def _entries(project_dir: Path) -> Iterator[Path]:
    for root, dirnames, filenames in os.walk(project_dir):
        dirnames.sort()
        for filename in sorted(filenames):
            yield Path(root) / filename


def _render_contents(task: FileTask, template_engine: TemplateEngine, variables: Mapping[str, str]) -> None:
    try:
        text = task.path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WalkError("Error reading", task.path, action="read") from exc

    try:
        document = template_engine.compile(text, name=str(task.path))
        rendered = template_engine.render(document, variables)
    except TemplateError as exc:
        raise WalkError("Error replacing placeholders", task.path, action="render") from exc

    try:
        task.path.write_bytes(rendered.encode("utf-8"))
    except OSError as exc:
        raise WalkError("Error writing", task.path, action="write") from exc


def _rename(
    task: FileTask,
    project_dir: Path,
    template_engine: TemplateEngine,
    variables: Mapping[str, str],
) -> Path:
    try:
        document = template_engine.compile(task.relative_path.as_posix(), name=str(task.path))
        destination = project_dir / template_engine.render(document, variables)
    except TemplateError as exc:
        raise WalkError("Error replacing placeholders in the name of", task.path, action="render") from exc

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        task.path.replace(destination)
    except OSError as exc:
        raise WalkError(f"Error renaming to '{destination}'", task.path, action="rename") from exc

    return destination


def _prune_empty_dirs(directories: set[Path], project_dir: Path) -> None:
    for directory in sorted(directories, key=lambda path: len(path.parts), reverse=True):
        current = directory
        while current != project_dir and current.is_dir() and not any(current.iterdir()):
            try:
                current.rmdir()
            except OSError as exc:
                raise WalkError("Error removing directory", current, action="prune") from exc
            LOGGER.debug("removed empty directory %s", current)
            current = current.parent


def walk_dir(
    project_dir: str | Path,
    variables: Mapping[str, str],
    template_config: Optional[TemplateConfig] = None,
    progress: Optional[ProgressReporter] = None,
    *,
    template_engine: Optional[TemplateEngine] = None,
) -> list[Path]:
    """Substitute placeholders in every file below ``project_dir``.

    Each regular file has its contents rendered when the matcher built from
    ``template_config`` includes it, and is then renamed to its rendered path.
    Paths containing ``.git`` are left untouched. The first failure aborts the
    walk with a :class:`~kiln.errors.WalkError` naming the file; files that
    were already processed stay modified.

    Returns the final path of every processed file.
    """

    project_dir = Path(project_dir)
    progress = progress or NullProgress()
    template_engine = template_engine or engine()

    matcher = Matcher(template_config, project_dir) if template_config is not None else Matcher.default()

    # Snapshot first so files moved into not-yet-visited directories are not walked twice.
    entries = list(_entries(project_dir))

    rendered: list[Path] = []
    vacated: set[Path] = set()
    for path in entries:
        if path.is_dir() or is_git_metadata(path):
            continue

        progress.set_message(str(path))

        try:
            relative_path = path.relative_to(project_dir)
        except ValueError as exc:
            raise WalkError("Error resolving relative path of", path, action="relative") from exc

        task = FileTask(path, relative_path, matcher.should_include(relative_path))
        if task.substitute_contents:
            _render_contents(task, template_engine, variables)
            LOGGER.debug("rendered contents of %s", task.relative_path)

        destination = _rename(task, project_dir, template_engine, variables)
        if destination != task.path:
            LOGGER.debug("renamed %s to %s", task.path, destination)
            if destination.parent != task.path.parent:
                vacated.add(task.path.parent)
        rendered.append(destination)

    _prune_empty_dirs(vacated, project_dir)
    progress.finish_and_clear()
    LOGGER.info("rendered %d files in %s", len(rendered), project_dir)
    return rendered
