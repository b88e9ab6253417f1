"""Tests for YAML configuration loading and WrapConfig construction."""

import dataclasses

import pytest
import yaml

from config import (
    DEFAULT_CONFIG_PATH,
    build_wrap_config,
    get_config_value,
    load_config,
    load_wrap_config,
)
from wrapping.wrap_config import InvalidConfigurationError, WrapConfig


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "wrap.yaml"
    path.write_text(
        "wrap:\n"
        "  width: 40\n"
        "  subsequent_indent: '  '\n"
        "  placeholder: ' ...'\n",
        encoding="utf-8",
    )
    return path


def test_default_config_matches_wrap_config_defaults():
    config = load_config()
    assert DEFAULT_CONFIG_PATH.exists()
    assert WrapConfig.from_dict(config["wrap"]) == WrapConfig()
    assert get_config_value(config, "logging.level") == "WARNING"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("wrap: [unclosed\n", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(str(path))


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == {}
    assert load_wrap_config(str(path)) == WrapConfig()


def test_load_wrap_config(config_file):
    wrap_config = load_wrap_config(str(config_file))
    assert wrap_config.width == 40
    assert wrap_config.subsequent_indent == "  "
    assert wrap_config.placeholder == " ..."
    assert wrap_config.tab_size == 8


def test_overrides_win_unless_none(config_file):
    wrap_config = load_wrap_config(str(config_file), width=None, max_lines=2)
    assert wrap_config.width == 40
    assert wrap_config.max_lines == 2


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "typo.yaml"
    path.write_text("wrap:\n  widht: 40\n", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError):
        load_wrap_config(str(path))


def test_invalid_value_rejected(tmp_path):
    path = tmp_path / "zero.yaml"
    path.write_text("wrap:\n  width: 0\n", encoding="utf-8")
    with pytest.raises(InvalidConfigurationError):
        load_wrap_config(str(path))


def test_build_wrap_config_from_loaded_dict():
    config = {"wrap": {"width": 30, "placeholder": "..."}}
    wrap_config = build_wrap_config(config, width=None, max_lines=2)
    assert wrap_config.width == 30
    assert wrap_config.placeholder == "..."
    assert wrap_config.max_lines == 2
    assert build_wrap_config({}) == WrapConfig()


@pytest.mark.parametrize("section", [
    "  max_lines: 0\n",
    "  tab_size: -1\n",
])
def test_out_of_range_values_rejected(tmp_path, section):
    path = tmp_path / "range.yaml"
    path.write_text("wrap:\n" + section, encoding="utf-8")
    with pytest.raises(InvalidConfigurationError):
        load_wrap_config(str(path))


def test_get_config_value():
    config = {"wrap": {"width": 50}}
    assert get_config_value(config, "wrap.width") == 50
    assert get_config_value(config, "wrap.missing", 7) == 7
    assert get_config_value(config, "wrap.width.deeper", "x") == "x"


def test_from_dict_none_is_default():
    assert WrapConfig.from_dict(None) == WrapConfig()
    assert WrapConfig.from_dict({"max_lines": None}).max_lines is None


def test_with_options_copies():
    base = WrapConfig()
    changed = base.with_options(width=30)
    assert changed.width == 30
    assert base.width == 70
    with pytest.raises(dataclasses.FrozenInstanceError):
        base.width = 30


def test_indent_for():
    config = WrapConfig(initial_indent="* ", subsequent_indent="  ")
    assert config.indent_for(0) == "* "
    assert config.indent_for(1) == "  "
    assert config.indent_for(5) == "  "
