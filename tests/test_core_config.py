"""Tests for soulhash.core.config.HasherConfig."""

from __future__ import annotations

import json

import pytest

from soulhash.core.config import HasherConfig
from soulhash.core.defaults import AUTO_DETECT_MARKERS, CODE_EXTENSIONS


def test_defaults_match_constants():
    cfg = HasherConfig()
    assert cfg.code_extensions == CODE_EXTENSIONS
    assert cfg.auto_detect_markers == AUTO_DETECT_MARKERS


def test_missing_file_uses_defaults(tmp_path):
    assert HasherConfig.load(tmp_path / "absent.json") == HasherConfig()


def test_overrides_loaded(tmp_path):
    path = tmp_path / "soulhash.json"
    path.write_text(json.dumps({"code_extensions": [".kt", "py"], "auto_detect_markers": ["def "]}), "utf-8")

    cfg = HasherConfig.load(path)
    assert cfg.code_extensions == frozenset({"kt", "py"})
    assert cfg.auto_detect_markers == ("def ",)


def test_partial_override_keeps_other_default(tmp_path):
    path = tmp_path / "soulhash.json"
    path.write_text(json.dumps({"code_extensions": ["kt"]}), "utf-8")
    assert HasherConfig.load(path).auto_detect_markers == AUTO_DETECT_MARKERS


def test_corrupt_json_rejected(tmp_path):
    path = tmp_path / "soulhash.json"
    path.write_text("{not json", "utf-8")
    with pytest.raises(ValueError, match="Invalid config"):
        HasherConfig.load(path)


def test_empty_marker_list_rejected(tmp_path):
    path = tmp_path / "soulhash.json"
    path.write_text(json.dumps({"auto_detect_markers": []}), "utf-8")
    with pytest.raises(ValueError, match="Invalid config"):
        HasherConfig.load(path)


def test_as_dict_is_json_ready():
    data = HasherConfig(code_extensions={"ts", "go"}).as_dict()
    assert data["code_extensions"] == ["go", "ts"]
    assert json.loads(json.dumps(data)) == data


def test_unreadable_path_rejected(tmp_path):
    with pytest.raises(ValueError, match="Invalid config"):
        HasherConfig.load(tmp_path)


def test_non_utf8_file_rejected(tmp_path):
    path = tmp_path / "soulhash.json"
    path.write_bytes(b'{"code_extensions": ["\xff"]}')
    with pytest.raises(ValueError, match="Invalid config"):
        HasherConfig.load(path)
