"""Build the variables exposed to project templates."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from .authors import get_authors
from .project import ProjectName

__all__ = ["substitute"]


def substitute(
    name: ProjectName,
    force: bool,
    *,
    authors: Callable[[], tuple[str, str]] = get_authors,
) -> Mapping[str, str]:
    """Return the read-only variable set for ``name``.

    ``project-name`` is the raw name when ``force`` is set and its kebab case
    form otherwise. ``crate_name`` is always the snake case form.
    """

    project_name = name.raw() if force else name.kebab_case()
    username, author_line = authors()

    return MappingProxyType(
        {
            "project-name": project_name,
            "crate_name": name.snake_case(),
            "authors": author_line,
            "username": username,
        }
    )
