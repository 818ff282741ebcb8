"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``MDCONV_*`` prefix, ``__`` between section and key
  3. TOML file: ``mdconv.toml`` found by :func:`find_config`
  4. Code defaults: baked into the section models

The directory holding ``mdconv.toml`` is the project root, which relative
``content_dir`` and ``public_dir`` values are resolved against.
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from mdconv.config.models import FrontMatterConfig, MarkdownConfig, PathsConfig

CONFIG_FILENAME = "mdconv.toml"
CONFIG_ENV_VAR = "MDCONV_CONFIG"


def find_config(start: Path | None = None, explicit: str | None = None) -> Path | None:
    """Locate the ``mdconv.toml`` governing *start* (default: cwd).

    ``--config`` wins, then ``MDCONV_CONFIG``, then the nearest
    ``mdconv.toml`` in *start* or one of its parents.

    Raises:
        click.ClickException: A config file named by ``--config`` or
            ``MDCONV_CONFIG`` does not exist.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise click.ClickException(msg)
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings sections from a ``mdconv.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class MdconvSettings(BaseSettings):
    """Unified settings for the mdconv CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on the
    :class:`~mdconv.commands._context.AppContext` at the CLI root level.

    Attributes:
        project_root: Base for relative ``content_dir`` / ``public_dir``
            (parent of ``mdconv.toml``, or CWD if no config found).
        config_path: The config file actually loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MDCONV_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved path (not in TOML; derived from config location) ---
    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    paths: PathsConfig = Field(default_factory=PathsConfig)
    front_matter: FrontMatterConfig = Field(default_factory=FrontMatterConfig)
    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
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
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> MdconvSettings:
        """Construct settings from CLI invocation.

        Finds ``mdconv.toml`` (explicit *config_path*, env var, or walk-up),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.
        """
        toml_path = find_config(project_root, config_path)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

    def with_overrides(self, **sections: dict[str, Any]) -> MdconvSettings:
        """Return a copy with per-command section overrides applied.

        ``None`` values are skipped so unset command options keep the
        configured value::

            settings.with_overrides(paths={"public_dir": "site", "output": None})
        """
        update: dict[str, Any] = {}
        for name, values in sections.items():
            current = getattr(self, name)
            changes = {k: v for k, v in values.items() if v is not None}
            if changes:
                update[name] = current.model_copy(update=changes)
        if not update:
            return self
        return self.model_copy(update=update)
