"""ZenkakuSettings: global CLI flags, ``ZENKAKU_*`` env vars and ``zenkaku.toml``.

Sources, strongest first: values passed by the CLI, environment variables
(``ZENKAKU_CONVERT__DEFAULT_SCHEME=thai``), the TOML file, then the model
defaults. The TOML file is the one named by ``--config``, else the one named
by ``$ZENKAKU_CONFIG``, else the nearest ``zenkaku.toml`` walking up from
the working directory.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from zenkaku.config.models import ConvertConfig, PluginsConfig, SchemeConfig

CONFIG_FILENAME = "zenkaku.toml"
CONFIG_ENV_VAR = "ZENKAKU_CONFIG"

# File picked by from_cli() for the settings object being built.
_toml_file: ContextVar[Path | None] = ContextVar("zenkaku_toml_file", default=None)


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file, or None when there is none.

    ``$ZENKAKU_CONFIG`` wins outright, even when it names a missing file.
    """
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class ZenkakuSettings(BaseSettings):
    """Everything a command needs to know about how it was invoked."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="ZENKAKU_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    convert: ConvertConfig = Field(default_factory=ConvertConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    schemes: list[SchemeConfig] = Field(default_factory=list)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> ZenkakuSettings:
        """Build settings for one CLI invocation.

        Raises:
            click.ClickException: The ``--config`` file does not exist or
                the TOML file does not parse.
            pydantic.ValidationError: The merged values are invalid.
        """
        if config_path:
            toml_file: Path | None = Path(config_path)
            if not toml_file.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_file = find_config(start_dir)

        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_file}: {exc}") from exc
        finally:
            _toml_file.reset(token)
