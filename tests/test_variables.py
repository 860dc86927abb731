from __future__ import annotations

import pytest

from kiln.errors import AuthorsError
from kiln.project import ProjectName
from kiln.variables import substitute


def _authors():
    return "jdoe", "Jane Doe <jane@example.com>"


def test_substitute_normalizes_project_name():
    variables = substitute(ProjectName.parse("MyProject"), False, authors=_authors)
    assert dict(variables) == {
        "project-name": "my-project",
        "crate_name": "my_project",
        "authors": "Jane Doe <jane@example.com>",
        "username": "jdoe",
    }


def test_force_keeps_raw_project_name():
    variables = substitute(ProjectName.parse("MyProject"), True, authors=_authors)
    assert variables["project-name"] == "MyProject"
    assert variables["crate_name"] == "my_project"


def test_variables_are_read_only():
    variables = substitute(ProjectName.parse("demo"), False, authors=_authors)
    with pytest.raises(TypeError):
        variables["crate_name"] = "other"  # type: ignore[index]


def test_authors_failure_propagates():
    def broken():
        raise AuthorsError("no identity")

    with pytest.raises(AuthorsError):
        substitute(ProjectName.parse("demo"), False, authors=broken)
