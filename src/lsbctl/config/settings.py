"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``LSBCTL_*`` prefix
  3. TOML file    — see :func:`lsbctl.config.discovery.find_config`
  4. Code defaults

Init scripts run with a minimal environment, so everything has a usable
default and the TOML file is optional.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import IO, Any, Literal

import click
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from lsbctl.config.discovery import find_config
from lsbctl.domain.bootstrap import DEFAULT_INIT_DIR


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a flat ``lsbctl.toml`` file."""

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


class LsbSettings(BaseSettings):
    """Settings shared by the ``lsbctl`` CLI and ``lsbctl-init`` scripts.

    Attributes:
        config_path: TOML file the settings were read from, if any.
        init_dir: Directory init-script symlinks live in.
        color: Status coloring; ``auto`` colors only on a terminal.
        backend: Name of the backend plugin to use; None asks every plugin.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "LSBCTL_",
    }

    config_path: Path | None = None
    init_dir: Path = DEFAULT_INIT_DIR
    color: Literal["auto", "always", "never"] = "auto"
    backend: str | None = None

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False

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
        **cli_flags: Any,
    ) -> LsbSettings:
        """Construct settings for a CLI or init-script invocation.

        Uses the explicit *config_path* when given, otherwise
        :func:`find_config`.  *cli_flags* are highest-priority overrides.

        Raises:
            click.ClickException: a setting from the environment or the
                TOML file has an invalid value.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config()

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise click.ClickException(f"Invalid settings: {errors}") from exc
        finally:
            _tls.toml_path = None

    def use_color(self, stream: IO[str]) -> bool:
        """Resolve the color policy for output written to *stream*."""
        if self.color == "always":
            return True
        if self.color == "never":
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())
