"""Unified settings — init kwargs, env vars, and TOML rules in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — flags passed by the host tool
  2. Env vars     — ``OAMRULES_*`` prefix
  3. TOML file    — ``oamrules.toml`` found next to or above the start dir
  4. Code defaults — baked into the models

The rules file carries ``[options]`` and ``[transformations."From->To"]``
tables. Any other top-level table belongs to the host tool and is ignored.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from oamrules.config.logging import configure_logging
from oamrules.config.models import OptionsConfig, TransformsConfig
from oamrules.domain.rules import TransformationSpec

RULES_FILENAME = "oamrules.toml"
RULES_ENV_VAR = "OAMRULES_CONFIG"


def find_rules_file(start: Path | None = None) -> Path | None:
    """Locate the rules file for a session.

    ``OAMRULES_CONFIG`` wins when set (None if it names no file);
    otherwise the nearest ``oamrules.toml`` in *start* or its parents.
    """
    override = os.environ.get(RULES_ENV_VAR)
    if override:
        return Path(override) if Path(override).is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / RULES_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the rule tables of a TOML file into :class:`OamSettings`."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                parsed = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ValueError(msg) from exc
            self._data = {k: v for k, v in parsed.items() if k in settings_cls.model_fields}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Rules-file path handed to settings_customise_sources during construction.
_tls = threading.local()


class OamSettings(BaseSettings):
    """Settings for one enumeration session.

    Attributes:
        config_path: The rules file the settings were read from, if any.
        log_queries: Also log every match resolution (very chatty under
            many workers).
        options: Global options; ``options.confidence`` is the default
            confidence for rules that declare none.
        transformations: Declarative ``From->To`` rules.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "OAMRULES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    verbose: bool = False
    log_json: bool = False
    log_queries: bool = False

    options: OptionsConfig = Field(default_factory=OptionsConfig)
    transformations: dict[str, TransformationSpec | None] = Field(default_factory=dict)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: Any,
    ) -> OamSettings:
        """Construct settings, reading rules from *config_path* or the
        nearest ``oamrules.toml`` above *start*.

        An explicit *config_path* that does not exist is ignored.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_rules_file(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

    def to_transforms_config(self) -> TransformsConfig:
        return TransformsConfig(options=self.options, transformations=self.transformations)


def bootstrap(
    *,
    config_path: str | None = None,
    start: Path | None = None,
    **flags: Any,
) -> OamSettings:
    """Build settings and route logging for a host process.

    Call once at startup, before creating a session.
    """
    settings = OamSettings.from_cli(config_path=config_path, start=start, **flags)
    configure_logging(
        verbose=settings.verbose,
        log_json=settings.log_json,
        log_queries=settings.log_queries,
    )
    return settings
