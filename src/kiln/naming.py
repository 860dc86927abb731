"""Case conversion utilities used by the template filters."""

from __future__ import annotations

import re
import unicodedata
from typing import Any, Callable

__all__ = ["split_words", "kebab_case", "pascal_case", "snake_case", "CASE_CONVERSIONS"]


_SEPARATORS = re.compile(r"[\W_]+")


def _is_boundary(previous: str, current: str, following: str) -> bool:
    if not current.isupper():
        return False
    if previous.islower() or previous.isdigit():
        return True
    # end of an acronym: the "S" in HTTPServer
    return previous.isupper() and following.islower()


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    for index in range(1, len(chunk)):
        following = chunk[index + 1] if index + 1 < len(chunk) else ""
        if _is_boundary(chunk[index - 1], chunk[index], following):
            words.append(chunk[start:index])
            start = index
    words.append(chunk[start:])
    return words


def split_words(value: Any) -> list[str]:
    """Split ``value`` into words.

    Boundaries are runs of non-alphanumeric characters, lower to upper case
    transitions (``fooBar``) and the end of an acronym (``HTTPServer``).
    Letters of every script are kept; scripts without case (``日本語``) only
    split on separators. Trailing digits stay attached to the word they
    follow. Non-string input is coerced with :func:`str` first.
    """

    text = unicodedata.normalize("NFC", str(value))
    words: list[str] = []
    for chunk in _SEPARATORS.split(text):
        if chunk:
            words.extend(_split_chunk(chunk))
    return words


def kebab_case(value: Any) -> str:
    """Return ``value`` as lower-case words joined by hyphens."""

    return "-".join(word.lower() for word in split_words(value))


def pascal_case(value: Any) -> str:
    """Return ``value`` as capitalized words joined without a separator."""

    return "".join(word.capitalize() for word in split_words(value))


def snake_case(value: Any) -> str:
    """Return ``value`` as lower-case words joined by underscores."""

    return "_".join(word.lower() for word in split_words(value))


CASE_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "kebab_case": kebab_case,
    "pascal_case": pascal_case,
    "snake_case": snake_case,
}
