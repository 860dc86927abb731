"""Template configuration read from ``kiln.toml``."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

__all__ = ["CONFIG_FILE_NAME", "TemplateConfig", "TemplateValues"]


LOGGER = logging.getLogger(__name__)

CONFIG_FILE_NAME = "kiln.toml"


class TemplateValues(BaseModel):
    """Include and exclude globs controlling content substitution."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    include: Optional[List[str]] = Field(None, description="Only files matching these globs have their contents rendered.")
    exclude: Optional[List[str]] = Field(None, description="Files matching these globs keep their contents verbatim.")


class TemplateConfig(BaseModel):
    """Top level structure of a ``kiln.toml`` file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    template: Optional[TemplateValues] = Field(None, description="Content substitution policy.")

    @property
    def include(self) -> Optional[List[str]]:
        if self.template is None:
            return None
        if self.template.include is not None and self.template.exclude is not None:
            LOGGER.warning(
                "%s contains both an include and an exclude list; only the include list is used",
                CONFIG_FILE_NAME,
            )
        return self.template.include

    @property
    def exclude(self) -> Optional[List[str]]:
        if self.template is None or self.template.include is not None:
            return None
        return self.template.exclude

    @classmethod
    def from_path(cls, path: str | Path) -> "TemplateConfig":
        """Parse the configuration stored at ``path``."""

        path = Path(path)
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"cannot read {path}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigError(f"invalid template configuration in {path}: {exc}") from exc

    @classmethod
    def load(cls, project_dir: str | Path) -> Optional["TemplateConfig"]:
        """Return the configuration inside ``project_dir`` or ``None``."""

        path = Path(project_dir) / CONFIG_FILE_NAME
        if not path.is_file():
            return None
        LOGGER.debug("loading template configuration from %s", path)
        return cls.from_path(path)
