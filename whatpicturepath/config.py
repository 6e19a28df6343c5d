from __future__ import annotations

import copy
import logging
import os
import platform
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger(__name__)

APP_DIR_NAME = "WhatPicturePath"

DEFAULT_CONFIG: dict[str, Any] = {
    "lang": "auto",
    "log_level": "warning",
    "dialog_start_dir": "",
    "separator_width": 50,
}


def get_user_data_dir() -> Path:
    """返回用户可写的配置目录。"""
    system_name = platform.system().lower()
    if system_name == "windows":
        base = (
            os.environ.get("APPDATA")
            or os.environ.get("LOCALAPPDATA")
            or str(Path.home() / "AppData" / "Roaming")
        )
        return Path(base) / APP_DIR_NAME
    if system_name == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_config_path() -> Path:
    return get_user_data_dir() / "config.yaml"


def _deep_merge(base: dict[str, Any], incoming: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in incoming.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path | None = None) -> dict[str, Any]:
    cfg_path = path or get_config_path()
    if not cfg_path.exists():
        LOGGER.debug("no config at %s, using defaults", cfg_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    text = cfg_path.read_text(encoding="utf-8")
    loaded = yaml.safe_load(text) or {}
    if not isinstance(loaded, dict):
        LOGGER.warning("config %s is not a mapping, ignoring it", cfg_path)
        loaded = {}
    LOGGER.debug("loaded config from %s", cfg_path)
    return _deep_merge(DEFAULT_CONFIG, loaded)


def write_default_config(path: Path | None = None, force: bool = False) -> Path:
    cfg_path = path or get_config_path()
    cfg_path.parent.mkdir(parents=True, exist_ok=True)
    if cfg_path.exists() and not force:
        return cfg_path
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg_path.write_text(yaml.safe_dump(cfg, sort_keys=False, allow_unicode=True), encoding="utf-8")
    return cfg_path
