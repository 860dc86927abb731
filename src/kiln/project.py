"""Project name handling shared by the variable builder and CLI."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ProjectNameError
from .naming import kebab_case, pascal_case, snake_case

__all__ = ["ProjectName"]


@dataclass(frozen=True, slots=True)
class ProjectName:
    """A validated project name and its derived identifiers.

    Attributes
    ----------
    value:
        The name exactly as supplied by the user, minus surrounding
        whitespace. Used verbatim when normalization is bypassed.
    """

    value: str

    @classmethod
    def parse(cls, value: str) -> "ProjectName":
        """Validate ``value`` and return a :class:`ProjectName`.

        The name must produce non-empty kebab and snake case forms, and the
        snake case form must not start with a digit so that it remains usable
        as an identifier.
        """

        name = value.strip()
        if not name:
            raise ProjectNameError("project name must not be empty")

        identifier = snake_case(name)
        if not identifier:
            raise ProjectNameError(f"project name {value!r} contains no letters or digits")
        if identifier[0].isdigit():
            raise ProjectNameError(f"project name {value!r} must not start with a digit")

        return cls(name)

    def raw(self) -> str:
        return self.value

    def kebab_case(self) -> str:
        return kebab_case(self.value)

    def snake_case(self) -> str:
        return snake_case(self.value)

    def pascal_case(self) -> str:
        return pascal_case(self.value)

    def __str__(self) -> str:
        return self.value
