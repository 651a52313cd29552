"""Configuration loading.

Lookup order:
  1. explicit path (--config)
  2. $LUMEN_CONFIG
  3. ./lumen.yml, if present
  4. built-in defaults

Unknown keys are ignored. Bad values raise ConfigError.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from lumen.core.errors import ConfigError
from lumen.core.history import DEFAULT_CAPACITY

CONFIG_ENV = "LUMEN_CONFIG"
CONFIG_FILENAME = "lumen.yml"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class LumenConfig:
    history_capacity: int = DEFAULT_CAPACITY
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    initially_on: bool = False
    source: Optional[Path] = None


def find_config(explicit: Path | None = None, cwd: Path | None = None) -> Path | None:
    if explicit is not None:
        if not explicit.exists():
            raise ConfigError(f"Config file not found: {explicit}")
        return explicit

    env = os.environ.get(CONFIG_ENV)
    if env:
        path = Path(env)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path} (from ${CONFIG_ENV})")
        return path

    candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
    if candidate.exists():
        return candidate
    return None


def load_config(explicit: Path | None = None, cwd: Path | None = None) -> LumenConfig:
    path = find_config(explicit, cwd)
    if path is None:
        return LumenConfig()

    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    return parse_config(raw or {}, source=path)


def parse_config(raw: dict, source: Path | None = None) -> LumenConfig:
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")

    history = _section(raw, "history")
    logging_cfg = _section(raw, "logging")
    bulb = _section(raw, "bulb")

    capacity = history.get("capacity", DEFAULT_CAPACITY)
    # bool is an int subclass; reject it explicitly
    if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
        raise ConfigError(f"history.capacity must be an integer >= 1, got {capacity!r}")

    level = str(logging_cfg.get("level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"logging.level is not a known level: {level}")

    log_file = logging_cfg.get("file")
    if log_file is not None:
        log_file = Path(log_file)
        if source is not None and not log_file.is_absolute():
            log_file = source.parent / log_file

    initially_on = bulb.get("initially_on", False)
    if not isinstance(initially_on, bool):
        raise ConfigError(f"bulb.initially_on must be true or false, got {initially_on!r}")

    return LumenConfig(
        history_capacity=capacity,
        log_level=level,
        log_file=log_file,
        initially_on=initially_on,
        source=source,
    )


def _section(raw: dict, name: str) -> dict:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return value


def configure_logging(cfg: LumenConfig) -> None:
    kwargs = {
        "level": logging.getLevelName(cfg.log_level),
        "format": LOG_FORMAT,
    }
    if cfg.log_file is not None:
        kwargs["filename"] = cfg.log_file
    logging.basicConfig(**kwargs)
