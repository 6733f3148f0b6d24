#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fog.aliyun_gtw.lib import load_config as load_config_mod
from fog.aliyun_gtw.lib.load_config import GatewayConfig, load_gateway_config, resolve_config_path


def test_load_config_from_file(tmp_path: Path):
    p = tmp_path / "gtw.conf"
    p.write_text(json.dumps({"host": "0.0.0.0", "port": 9000, "log_level": "DEBUG"}), encoding="utf-8")

    cfg = load_gateway_config(p)
    assert cfg == GatewayConfig(host="0.0.0.0", port=9000, log_level="DEBUG")


def test_partial_config_uses_defaults(tmp_path: Path):
    p = tmp_path / "gtw.conf"
    p.write_text('{"port": 8111}', encoding="utf-8")

    cfg = load_gateway_config(str(p))
    assert cfg.port == 8111
    assert cfg.host == "127.0.0.1"
    assert cfg.log_level == "INFO"


def test_env_path_is_used(tmp_path: Path, monkeypatch):
    p = tmp_path / "env.conf"
    p.write_text('{"port": 7000}', encoding="utf-8")
    monkeypatch.setenv("FOG_ALIYUN_GTW_CONFIG", str(p))

    assert resolve_config_path() == p
    assert load_gateway_config().port == 7000


def test_missing_default_file_gives_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("FOG_ALIYUN_GTW_CONFIG", raising=False)
    monkeypatch.setattr(load_config_mod, "CONFIG_PATH", str(tmp_path / "absent.conf"))

    assert load_gateway_config() == GatewayConfig()


def test_missing_explicit_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_gateway_config(tmp_path / "absent.conf")


def test_invalid_config_raises(tmp_path: Path):
    p = tmp_path / "gtw.conf"
    p.write_text('{"port": "not-a-port"}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_gateway_config(p)
