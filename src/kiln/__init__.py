"""Fill placeholders in project templates.

The package renders a template tree that has already been copied into place:
file contents and file names are passed through a Liquid engine extended with
case conversion filters, using variables derived from the project name and the
author's identity.
"""

from __future__ import annotations

from .config import TemplateConfig
from .errors import (
    AuthorsError,
    ConfigError,
    KilnError,
    ProjectNameError,
    TemplateCompileError,
    TemplateError,
    TemplateRenderingError,
    WalkError,
)
from .include_exclude import Matcher
from .naming import kebab_case, pascal_case, snake_case
from .project import ProjectName
from .template import TemplateEngine, engine
from .variables import substitute
from .walker import walk_dir

__all__ = [
    "AuthorsError",
    "ConfigError",
    "KilnError",
    "Matcher",
    "ProjectName",
    "ProjectNameError",
    "TemplateCompileError",
    "TemplateConfig",
    "TemplateEngine",
    "TemplateError",
    "TemplateRenderingError",
    "WalkError",
    "engine",
    "kebab_case",
    "pascal_case",
    "snake_case",
    "substitute",
    "walk_dir",
]

__version__ = "0.1.0"
