"""Application settings for arscript and the files they are read from."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, BinaryIO, cast

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from arscript.exceptions import ConfigurationError, check_config_keys

# Values of llm_model that mean "use the client's default model"
MODEL_PLACEHOLDERS = frozenset({"", "default", "auto", "none"})

_CONFIG_READERS: dict[str, Callable[[BinaryIO], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".toml": tomllib.load,
    ".json": json.load,
}


def read_config_file(config_path: Path | str) -> dict[str, Any]:
    """Read the raw key/value pairs of a YAML, TOML or JSON config file.

    Args:
        config_path: Configuration file to read

    Returns:
        Mapping of setting names to values; empty for an empty YAML file

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the format is unsupported, the content is not
            a mapping, or a key is a known misspelling
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    reader = _CONFIG_READERS.get(suffix)
    if reader is None:
        supported = sorted(_CONFIG_READERS)
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {suffix or '(none)'}",
            hint=f"Use one of: {', '.join(supported)}",
            details={"file": str(config_path), "supported_formats": supported},
        )

    with config_path.open("rb") as f:
        data = reader(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            message=f"Configuration file must contain a mapping: {config_path}",
            hint="Write settings as top-level key/value pairs",
            details={"file": str(config_path), "found": type(data).__name__},
        )

    check_config_keys(data)
    return data


class ArScriptSettings(BaseSettings):
    """Every tunable of arscript.

    Values come from, in falling priority: command line flags, config files
    (a later file beats an earlier one), ``ARSCRIPT_*`` environment variables,
    a ``.env`` file, and the defaults below. ``arscript config show`` prints
    the merged result.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARSCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Also write logs to this file, rotated by size",
    )

    character_cue_max_words: int = Field(
        default=1,
        description=(
            "Maximum word count for a colon-less line of bare letters to be "
            "taken as a character cue (0 = only lines ending with a colon)"
        ),
        ge=0,
    )
    words_per_page: int = Field(
        default=250,
        description="Words on one page for the estimated page count",
        gt=0,
    )
    history_limit: int = Field(
        default=20,
        description="Number of text snapshots kept for undo/redo",
        ge=1,
    )
    watch_debounce_seconds: float = Field(
        default=0.5,
        description="Quiet period before a watched file is re-rendered",
        ge=0.0,
    )

    llm_endpoint: str | None = Field(
        default=None,
        description="Base URL of an OpenAI-compatible API for remote classification",
    )
    llm_api_key: str | None = Field(
        default=None,
        description="Bearer token for the remote classification API",
    )
    llm_model: str | None = Field(
        default=None,
        description=(
            "Model used by the remote classifier; "
            "'default', 'auto', 'none' or '' select the built-in default"
        ),
    )
    llm_timeout: float = Field(
        default=60.0,
        description="HTTP timeout in seconds for the remote classifier",
        gt=0.0,
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_log_file(cls, v: Any) -> Path | None:
        """Expand ``~`` and environment variables and make the path absolute."""
        if v is None:
            return None
        if isinstance(v, Path):
            return v.resolve()
        if not isinstance(v, str):
            raise ValueError(f"log_file must be a path, got {type(v).__name__}")
        return Path(os.path.expandvars(v)).expanduser().resolve()

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_choice(cls, v: Any, info: Any) -> str:
        """Accept log level and format in any letter case."""
        if not isinstance(v, str):
            raise ValueError(
                f"{info.field_name} must be a string, got {type(v).__name__}"
            )
        v = v.strip()
        return v.upper() if info.field_name == "log_level" else v.lower()

    @field_validator("llm_model", mode="before")
    @classmethod
    def drop_model_placeholder(cls, v: Any) -> Any:
        """Map placeholder model names to None."""
        if isinstance(v, str) and v.strip().lower() in MODEL_PLACEHOLDERS:
            return None
        return v

    @classmethod
    def from_env(cls) -> ArScriptSettings:
        """Create settings from the environment, ``.env`` and defaults."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> ArScriptSettings:
        """Create settings from one config file on top of the environment.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file cannot be used
        """
        return cls(**read_config_file(config_path))

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> ArScriptSettings:
        """Merge every configuration source in priority order.

        Args:
            config_files: Config files in increasing priority; missing ones
                are skipped with a warning
            env_file: ``.env`` file to read instead of ``./.env``
            cli_args: Command line overrides; None values are ignored

        Returns:
            Settings built from all sources
        """
        data: dict[str, Any] = {}
        for config_file in config_files or []:
            try:
                data.update(read_config_file(config_file))
            except FileNotFoundError:
                # Imported here: the logging module depends on this one
                from arscript.config.logging import get_logger

                get_logger(__name__).warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )

        data.update({k: v for k, v in (cli_args or {}).items() if v is not None})

        if env_file:
            return cast("ArScriptSettings", cast(Any, cls)(_env_file=env_file, **data))
        return cls(**data)


def _standard_config_paths() -> list[Path]:
    """Config files that exist in the standard locations, lowest priority first."""
    directories = (
        Path.home() / ".config" / "arscript",
        Path.cwd() / ".arscript",
    )
    candidates = [
        directory / f"config.{ext}"
        for directory in directories
        for ext in ("yaml", "json", "toml")
    ]
    candidates += [Path.cwd() / f"arscript.{ext}" for ext in ("yaml", "json", "toml")]

    found = []
    for path in candidates:
        try:
            if path.is_file():
                found.append(path)
        except OSError:
            continue
    return found


_settings: ArScriptSettings | None = None


def get_settings() -> ArScriptSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        config_paths = _standard_config_paths()
        if config_paths:
            _settings = ArScriptSettings.from_multiple_sources(
                config_files=list(config_paths)
            )
        else:
            _settings = ArScriptSettings.from_env()
    return _settings


def set_settings(settings: ArScriptSettings) -> None:
    """Replace the process-wide settings."""
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Forget the loaded settings; the next ``get_settings`` reads them again."""
    global _settings
    _settings = None


def reset_settings() -> None:
    """Reset the process-wide settings."""
    clear_settings_cache()


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ArScriptSettings:
    """Resolve the settings a CLI invocation runs with.

    Args:
        config_file: Config file given with ``--config``; when absent the
            standard locations apply
        cli_overrides: Values set by global flags; None values are ignored

    Returns:
        Settings with the overrides applied

    Raises:
        FileNotFoundError: If ``config_file`` is given but does not exist
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return ArScriptSettings.from_multiple_sources(
            config_files=[config_file], cli_args=cli_overrides
        )

    settings = get_settings()
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    if not overrides:
        return settings
    return ArScriptSettings(**{**settings.model_dump(), **overrides})
