from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from stroke_dashboard.config.model import DashboardConfig
from stroke_dashboard.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "STROKE_DASHBOARD_CONFIG"
DATA_ROOT_ENV = "STROKE_DASHBOARD_DATA_ROOT"
DEFAULT_CONFIG_PATH = Path("config") / "dashboard.json"


def _resolve_data_path(raw_path: str, config_path: Path) -> Path:
    """
    Absolute paths are used as-is. Relative ones resolve against
    STROKE_DASHBOARD_DATA_ROOT if set, otherwise against the directory that
    contains the config/ folder.
    """
    path = Path(raw_path)
    if path.is_absolute():
        return path

    data_root = os.environ.get(DATA_ROOT_ENV)
    if data_root:
        root_path = Path(data_root)
        resolved = root_path / path

        # Fallback for redundant 'data/' prefix
        if not resolved.is_file() and path.parts and path.parts[0] == "data":
            alt_path = root_path / Path(*path.parts[1:])
            if alt_path.is_file():
                resolved = alt_path
        return resolved

    return (config_path.parent.parent / path).resolve()


def load_config(path: Optional[str | Path] = None) -> DashboardConfig:
    """
    Load dashboard.json.

    Selection Order:
        1) the path argument if provided
        2) env var STROKE_DASHBOARD_CONFIG
        3) config/dashboard.json relative to the working directory

    Raises:
        ConfigError: if the file is missing, is not valid JSON, or has no data_path
    """
    if path is None:
        path = os.getenv(CONFIG_ENV) or DEFAULT_CONFIG_PATH
    config_path = Path(path)

    logger.info("Loading dashboard config", extra={"config_path": str(config_path)})

    if not config_path.is_file():
        raise ConfigError(f"Config file not found at {config_path}")

    try:
        with config_path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    raw_data_path = raw.get("data_path")
    if not raw_data_path:
        raise ConfigError(f"'data_path' missing from {config_path}")

    data_path = _resolve_data_path(str(raw_data_path), config_path)

    try:
        config = DashboardConfig.from_raw(raw, data_path=data_path, source_path=config_path)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in {config_path}: {e}") from e

    if config.page_size < 1:
        raise ConfigError(f"page_size must be positive, got {config.page_size}")

    logger.info(
        "Dashboard config loaded",
        extra={"config_path": str(config_path), "data_path": str(data_path)},
    )
    return config
