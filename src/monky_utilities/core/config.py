"""Configuration management.

Loads from an optional TOML file + environment variables.
Uses pydantic-settings for validation and env var overriding; every
variable is prefixed with ``MONKY_CORE_`` (e.g. ``MONKY_CORE_NAMESPACE``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .enums import TypeTagging
from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class MapperSettings(BaseModel):
    type_tagging: TypeTagging = TypeTagging.NONE
    omit_null_values: bool = True
    ignore_type_names: list[str] = Field(default_factory=list)


class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class NamespaceSettings(BaseSettings):
    """Just ``MONKY_CORE_NAMESPACE``; no other ``MONKY_CORE_*`` variable is read."""

    # Prefix for every topic name; empty means no prefix
    namespace: str = ""

    model_config = {"env_prefix": "MONKY_CORE_"}


class Settings(NamespaceSettings):
    """Top-level library settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    mapper: MapperSettings = Field(default_factory=MapperSettings)

    # Decoders are lenient by default
    strict_magic_byte: bool = False
    strict_type_tags: bool = False

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    model_config = {"env_prefix": "MONKY_CORE_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional, skipped if missing).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: The TOML file cannot be parsed or values fail validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    if overrides:
        data.update(overrides)

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc
