import json
import os

import pytest

from pwdg.config import DEFAULTS, config_path, load_config, resolve_configuration, save_config


def test_defaults_when_missing(isolated_config):
    assert not isolated_config.exists()
    assert load_config() == DEFAULTS


def test_save_and_load(isolated_config):
    cfg = dict(DEFAULTS, length=16, min_digit=2, exclude="0O")
    path = save_config(cfg)
    assert path == str(isolated_config)
    loaded = load_config()
    assert loaded["length"] == 16
    assert loaded["min_digit"] == 2
    assert loaded["exclude"] == "0O"


def test_partial_file_is_merged_with_defaults(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text(json.dumps({"min_upper": 3, "unknown": 1}), encoding="utf-8")
    loaded = load_config()
    assert loaded["min_upper"] == 3
    assert loaded["length"] == DEFAULTS["length"]
    assert "unknown" not in loaded


def test_corrupt_file_falls_back(isolated_config):
    isolated_config.parent.mkdir(parents=True)
    isolated_config.write_text("{not json", encoding="utf-8")
    assert load_config() == DEFAULTS


def test_appdata_location(monkeypatch, tmp_path):
    monkeypatch.delenv("PWDG_CONFIG")
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert config_path() == os.path.join(str(tmp_path), "pwdg", "config.json")


def test_resolve_precedence():
    settings = dict(DEFAULTS, length=20, min_upper=4, exclude="l1")
    cfg = resolve_configuration(settings, {"length": None, "min_lower": 2})
    assert cfg.length == 20
    assert cfg.min_upper == 4
    assert cfg.min_lower == 2
    assert cfg.excluded == frozenset("l1")


def test_resolve_strong_beats_overrides():
    cfg = resolve_configuration({}, {"min_upper": 6, "min_special": 0}, strong=True)
    assert (cfg.min_upper, cfg.min_lower, cfg.min_digit, cfg.min_special) == (1, 1, 1, 1)
    assert cfg.length == DEFAULTS["length"]


def test_resolve_bad_saved_value():
    with pytest.raises(TypeError):
        resolve_configuration({"length": "long"})
