"""
Application configuration management.

Load order (each layer overrides the previous):
  1. Built-in defaults            — the fixed layout every run uses
  2. ``--config <file>.toml``     — optional explicit TOML file
  3. ``local.toml``               — optional overrides beside that file (gitignored)

Entry point: ``load_config(config_path=None) -> AppConfig``

With no ``config_path`` nothing is read from disk or the environment: the
defaults reproduce the standard layout (``stores/`` in, ``salesTotalDir/``
out).  All pipeline stages and CLI commands receive an ``AppConfig`` instance.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class PathsConfig(BaseModel):
    """Input and output locations, relative to the working directory."""

    model_config = ConfigDict(frozen=True)

    stores_dir: str = "stores"
    output_dir: str = "salesTotalDir"
    summary_file: str = "salesSummary.txt"
    file_pattern: str = "*.json"

    @field_validator("summary_file")
    @classmethod
    def validate_summary_file(cls, v: str) -> str:
        if not v or Path(v).name != v:
            raise ValueError(f"summary_file must be a bare file name, got '{v}'.")
        return v


class ReportConfig(BaseModel):
    """Report rendering settings."""

    model_config = ConfigDict(frozen=True)

    currency_symbol: str = "$"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "WARNING"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()``; ``AppConfig()`` on its own yields the
    standard layout.
    """

    model_config = ConfigDict(frozen=True)

    paths: PathsConfig = PathsConfig()
    report: ReportConfig = ReportConfig()
    logging: LoggingConfig = LoggingConfig()


# ── Loader ────────────────────────────────────────────────────────────────────


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file.  ``None`` returns
            the built-in defaults without touching the filesystem.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    if config_path is None:
        return AppConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "See config/example.toml for the available keys."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists() and local_config_path != config_path:
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        paths=PathsConfig(**raw.get("paths", {})),
        report=ReportConfig(**raw.get("report", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
    )
