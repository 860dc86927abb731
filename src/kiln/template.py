"""Liquid template engine extended with case conversion filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from liquid import BoundTemplate, Environment, StrictUndefined, Undefined
from liquid.exceptions import Error as LiquidError
from liquid.stringify import to_liquid_string

from .errors import TemplateCompileError, TemplateRenderingError
from .naming import CASE_CONVERSIONS

__all__ = [
    "BUILTIN_FILTERS",
    "CaseFilter",
    "TemplateDocument",
    "TemplateEngine",
    "engine",
]


BUILTIN_FILTERS = ("date", "capitalize")

_UNDEFINED_POLICIES: dict[str, type[Undefined]] = {
    "error": StrictUndefined,
    "empty": Undefined,
}


class CaseFilter:
    """Liquid filter applying one case conversion to its input."""

    def __init__(self, name: str, transform: Callable[[Any], str]) -> None:
        self.name = name
        self.transform = transform

    def __call__(self, value: Any) -> str:
        return self.transform(to_liquid_string(value, autoescape=False))

    def __repr__(self) -> str:
        return f"CaseFilter({self.name!r})"


@dataclass(frozen=True, slots=True)
class TemplateDocument:
    """A parsed template ready to be rendered."""

    name: str
    template: BoundTemplate


@dataclass(frozen=True, slots=True)
class TemplateEngine:
    """Compile and render ``{{ placeholder | filter }}`` templates."""

    environment: Environment

    def compile(self, text: str, *, name: str = "<string>") -> TemplateDocument:
        """Parse ``text`` into a :class:`TemplateDocument`."""

        try:
            template = self.environment.from_string(text, name=name)
        except LiquidError as exc:
            raise TemplateCompileError(f"invalid template syntax in {name}: {exc}", name=name) from exc
        return TemplateDocument(name=name, template=template)

    def render(self, document: TemplateDocument, variables: Mapping[str, Any]) -> str:
        """Render ``document`` against ``variables``."""

        try:
            return document.template.render(**variables)
        except (LiquidError, TypeError, ValueError) as exc:
            raise TemplateRenderingError(
                f"cannot render {document.name}: {exc}", name=document.name
            ) from exc

    def render_string(self, text: str, variables: Mapping[str, Any]) -> str:
        """Compile and render ``text`` in one step."""

        return self.render(self.compile(text), variables)

    @property
    def filter_names(self) -> list[str]:
        return sorted(self.environment.filters)


def engine(*, missing: str = "error") -> TemplateEngine:
    """Return a new engine with the case conversion and builtin filters.

    Parameters
    ----------
    missing:
        Controls what happens when a template references a variable that is
        not defined. ``"error"`` raises :class:`TemplateRenderingError` and
        ``"empty"`` renders an empty string.
    """

    try:
        undefined = _UNDEFINED_POLICIES[missing]
    except KeyError:
        raise ValueError("missing must be 'error' or 'empty'") from None

    environment = Environment(undefined=undefined)
    standard_filters = environment.filters
    environment.filters = {name: standard_filters[name] for name in BUILTIN_FILTERS}
    for name, transform in CASE_CONVERSIONS.items():
        environment.add_filter(name, CaseFilter(name, transform))

    return TemplateEngine(environment=environment)
