from pathlib import Path

from whatpicturepath.config import DEFAULT_CONFIG, get_config_path, load_config, write_default_config


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.yaml")

    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_load_config_merges_user_values(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("lang: zh-CN\nseparator_width: 20\n", encoding="utf-8")

    cfg = load_config(cfg_path)

    assert cfg["lang"] == "zh-CN"
    assert cfg["separator_width"] == 20
    assert cfg["log_level"] == DEFAULT_CONFIG["log_level"]


def test_load_config_ignores_non_mapping_yaml(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("- just\n- a list\n", encoding="utf-8")

    assert load_config(cfg_path) == DEFAULT_CONFIG


def test_write_default_config_respects_force(tmp_path: Path) -> None:
    cfg_path = tmp_path / "nested" / "config.yaml"

    assert write_default_config(cfg_path) == cfg_path
    assert load_config(cfg_path) == DEFAULT_CONFIG

    cfg_path.write_text("lang: en-US\n", encoding="utf-8")
    write_default_config(cfg_path)
    assert load_config(cfg_path)["lang"] == "en-US"

    write_default_config(cfg_path, force=True)
    assert load_config(cfg_path)["lang"] == "auto"


def test_get_config_path_honours_xdg_on_linux(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("whatpicturepath.config.platform.system", lambda: "Linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert get_config_path() == tmp_path / "WhatPicturePath" / "config.yaml"
