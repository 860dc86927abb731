from __future__ import annotations

import subprocess

import pytest

from kiln import authors as authors_module
from kiln.authors import get_authors, read_git_config
from kiln.errors import AuthorsError


def _git_config(values):
    return lambda key: values.get(key)


def test_environment_overrides_git_config():
    environ = {"KILN_NAME": "Jane Doe", "KILN_EMAIL": "jane@example.com", "USER": "jdoe"}
    git = _git_config({"user.name": "Someone Else", "user.email": "else@example.com"})
    assert get_authors(environ, git) == ("jdoe", "Jane Doe <jane@example.com>")


def test_git_config_is_used_when_environment_is_silent():
    git = _git_config({"user.name": "Git User", "user.email": "git@example.com"})
    assert get_authors({"USER": "gu"}, git) == ("gu", "Git User <git@example.com>")


def test_authors_without_email():
    assert get_authors({"USER": "jdoe"}, _git_config({})) == ("jdoe", "jdoe")


def test_username_falls_back_to_name():
    environ = {"GIT_AUTHOR_NAME": "Jane Doe"}
    assert get_authors(environ, _git_config({})) == ("Jane Doe", "Jane Doe")


def test_missing_identity_raises():
    with pytest.raises(AuthorsError):
        get_authors({}, _git_config({}))


def test_read_git_config_without_git(monkeypatch: pytest.MonkeyPatch):
    def missing_git(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(authors_module.subprocess, "run", missing_git)
    assert read_git_config("user.name") is None


def test_read_git_config_unset_key(monkeypatch: pytest.MonkeyPatch):
    def unset(*args, **kwargs):
        raise subprocess.CalledProcessError(1, args[0])

    monkeypatch.setattr(authors_module.subprocess, "run", unset)
    assert read_git_config("user.email") is None


def test_read_git_config_value(monkeypatch: pytest.MonkeyPatch):
    def configured(*args, **kwargs):
        return subprocess.CompletedProcess(args[0], 0, stdout="Jane Doe\n", stderr="")

    monkeypatch.setattr(authors_module.subprocess, "run", configured)
    assert read_git_config("user.name") == "Jane Doe"
