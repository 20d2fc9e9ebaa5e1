"""MokaSettings: CLI flags, environment, and mokareads.toml merged once.

Sources, first one wins per field:

1. keyword arguments (the CLI flags Click parsed);
2. ``MOKAREADS_*`` environment variables, ``__`` between section and key
   (``MOKAREADS_REMOTE__TIMEOUT=3``);
3. ``mokareads.toml``, found by :func:`find_config` or given with ``-c``;
4. defaults in :mod:`mokareads.config.models`.

Relative paths in ``[library]`` resolve against ``project_root``, the
directory holding the config file.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from mokareads.config.discovery import find_config
from mokareads.config.models import FeedConfig, LibraryConfig, RemoteConfig

# Config file for the MokaSettings instance under construction.
_pending_toml: ContextVar[Path | None] = ContextVar("_pending_toml", default=None)


def _load_toml(path: Path | None) -> dict[str, Any]:
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one parsed ``mokareads.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = _load_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class MokaSettings(BaseSettings):
    """Frozen settings for one CLI invocation.

    Attributes:
        project_root: Directory holding ``mokareads.toml``, or the CWD.
        config_path: The TOML file in effect, if any.
        content_dir: ``--content-dir`` override for ``[library].content_dir``.
        snapshot: ``--snapshot`` override for ``[library].snapshot_path``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MOKAREADS_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    content_dir: Path | None = None
    snapshot: Path | None = None

    library: LibraryConfig = Field(default_factory=LibraryConfig)
    remote: RemoteConfig = Field(default_factory=RemoteConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No .env or secrets directory support.
        return init_settings, env_settings, TomlSettingsSource(settings_cls, _pending_toml.get())

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> MokaSettings:
        """Build settings for one invocation.

        An explicit *config_path* that does not exist means "no config",
        not a fallback to discovery. Flags passed as ``None`` are dropped
        so they do not hide environment or TOML values.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        flags = {name: value for name, value in cli_flags.items() if value is not None}
        token = _pending_toml.set(toml_path)
        try:
            return cls(project_root=project_root, config_path=toml_path, **flags)
        finally:
            _pending_toml.reset(token)

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.project_root / path

    @property
    def content_root(self) -> Path:
        """Effective content directory."""
        return self._resolve(self.content_dir or self.library.content_dir)

    @property
    def snapshot_path(self) -> Path:
        """Effective snapshot file."""
        return self._resolve(self.snapshot or self.library.snapshot_path)
