"""Tests for JSON config load/save."""
import json
import pytest
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))
from suffixtext.boundaries import InvalidArgumentError
from suffixtext.config import DEFAULT_CONFIG, load_config, save_config


def test_load_config_missing_file(tmp_path):
    assert load_config(tmp_path / "nope.json") == DEFAULT_CONFIG


def test_save_then_load_merges_defaults(tmp_path):
    path = tmp_path / "sub" / "cfg.json"
    save_config({"normalize_input": True}, path)
    cfg = load_config(path)
    assert cfg["normalize_input"] is True
    assert cfg["max_oracle_length"] == DEFAULT_CONFIG["max_oracle_length"]


def test_load_config_malformed_uses_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(path) == DEFAULT_CONFIG


@pytest.mark.parametrize("limit", [-1, "10", 2.5, True])
def test_load_config_rejects_bad_limit(tmp_path, limit):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"max_oracle_length": limit}), encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_config(path)


def test_load_config_invalid_utf8_uses_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_bytes(b'{"log_level": "\xff"}')
    assert load_config(path) == DEFAULT_CONFIG
