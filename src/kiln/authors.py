"""Discover the author identity used to fill ``authors`` and ``username``."""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Callable, Mapping, Optional, Sequence

from .errors import AuthorsError

__all__ = ["get_authors", "read_git_config"]


LOGGER = logging.getLogger(__name__)

_NAME_VARIABLES = ("KILN_NAME", "GIT_AUTHOR_NAME", "GIT_COMMITTER_NAME")
_NAME_FALLBACKS = ("USER", "USERNAME", "NAME")
_EMAIL_VARIABLES = ("KILN_EMAIL", "GIT_AUTHOR_EMAIL", "GIT_COMMITTER_EMAIL")
_EMAIL_FALLBACKS = ("EMAIL",)
_USERNAME_VARIABLES = ("USER", "USERNAME")

GitConfigReader = Callable[[str], Optional[str]]


def read_git_config(key: str) -> str | None:
    """Return the value of ``git config --get key`` or ``None``."""

    try:
        result = subprocess.run(
            ["git", "config", "--get", key],
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError:
        LOGGER.debug("git executable not found while reading %s", key)
        return None
    except subprocess.CalledProcessError:
        return None
    value = result.stdout.strip()
    return value or None


def _first(environ: Mapping[str, str], names: Sequence[str]) -> str | None:
    for name in names:
        value = environ.get(name, "").strip()
        if value:
            return value
    return None


def get_authors(
    environ: Mapping[str, str] | None = None,
    git_config: GitConfigReader | None = None,
) -> tuple[str, str]:
    """Return ``(username, authors)`` for the current user.

    Explicit environment variables win over git configuration, which in turn
    wins over the login name. ``authors`` is ``"Name <email>"`` when an email
    address is known and just ``"Name"`` otherwise.
    """

    environ = os.environ if environ is None else environ
    git_config = read_git_config if git_config is None else git_config

    name = (
        _first(environ, _NAME_VARIABLES)
        or git_config("user.name")
        or _first(environ, _NAME_FALLBACKS)
    )
    if not name:
        raise AuthorsError(
            "could not determine the author name; set KILN_NAME or git's user.name"
        )

    email = (
        _first(environ, _EMAIL_VARIABLES)
        or git_config("user.email")
        or _first(environ, _EMAIL_FALLBACKS)
    )
    authors = f"{name} <{email}>" if email else name
    username = _first(environ, _USERNAME_VARIABLES) or name

    LOGGER.debug("resolved author %r (username %r)", authors, username)
    return username, authors
