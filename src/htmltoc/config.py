"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Constructor arguments
  2. Environment variables   (HTMLTOC__DOCUMENT__INPUT_PATH=notes.html)
  3. htmltoc.yaml            (searched in cwd, then platform config dir)
  4. Hardcoded defaults

The config file is optional. With nothing configured the tool reads
vknotes.html from the working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from htmltoc.parser import TOC_MARKER
from htmltoc.toc import TITLE_MARKER

_CONFIG_FILENAME = "htmltoc.yaml"


def _find_config_file() -> str | None:
    """Return the path of the first htmltoc.yaml found, or None."""
    candidates = [
        Path(_CONFIG_FILENAME),
        Path(platformdirs.user_config_dir("htmltoc")) / _CONFIG_FILENAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class DocumentSettings(BaseModel):
    input_path: Path = Path("vknotes.html")
    encoding: str = "utf-8"
    title_marker: str = TITLE_MARKER
    toc_marker: str = TOC_MARKER


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: HTMLTOC__LOGGING__LEVEL=DEBUG
        env_prefix="HTMLTOC__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    document: DocumentSettings = DocumentSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
        )
