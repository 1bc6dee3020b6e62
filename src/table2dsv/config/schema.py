"""Typed configuration schema and loader for the table2dsv package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, constr

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SourceSettings(BaseModel):
    """How local file arguments are resolved."""

    file_base: Literal["cwd", "package"]
    base_dir: Path | None = None
    base_dir_env: str

    model_config = ConfigDict(extra="forbid")


class RenderSettings(BaseModel):
    """Headless browser settings."""

    browser: Literal["chromium", "firefox", "webkit"]
    headless: bool
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"]
    timeout_ms: conint(ge=0) | None = None
    row_selector: constr(min_length=1)

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Formatting of the converted text."""

    delimiter: str | None = None
    encoding: str

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Diagnostic logging threshold."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    source: SourceSettings
    render: RenderSettings
    output: OutputSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``source.base_dir_env``.
    """

    with (
        importlib_resources.files("table2dsv.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    base_dir = environ.get(cfg.source.base_dir_env)
    if base_dir:
        cfg.source.base_dir = Path(base_dir)

    return cfg


__all__ = [
    "ConfigModel",
    "SourceSettings",
    "RenderSettings",
    "OutputSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
