"""SocialGraphSettings — global CLI flags merged with env vars and socialgraph.toml.

Highest priority first: CLI flags, ``SOCIALGRAPH_*`` environment variables
(``SOCIALGRAPH_NETWORK__MEMBER_TYPE=int``), the TOML file, then defaults.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from socialgraph.config.discovery import find_config
from socialgraph.config.models import NetworkConfig


class SocialGraphSettings(BaseSettings):
    """Everything a command needs to know about how it was invoked.

    ``config_path`` is the TOML file that was read, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SOCIALGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    network: NetworkConfig = Field(default_factory=NetworkConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The file to read travels in as the config_path init value.
        toml_file = None
        if isinstance(init_settings, InitSettingsSource):
            toml_file = init_settings.init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: Path | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> SocialGraphSettings:
        """Build settings for one CLI invocation.

        Without an explicit *config_path* the file is discovered from *start*
        (default: cwd).  Unparseable TOML and out-of-range values surface as
        :class:`click.ClickException` naming the file.
        """
        toml_path = config_path or find_config(start)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        except ValidationError as exc:
            where = toml_path or "environment"
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise click.ClickException(f"Invalid configuration in {where}: {problems}") from exc
