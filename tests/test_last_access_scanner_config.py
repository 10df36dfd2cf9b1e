"""Tests for last_access_scanner/config.py module."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from last_access_scanner.config import (
    ConfigurationError,
    ScanConfig,
    config_defaults,
    load_env_defaults,
    parse_bool_flag,
    parse_max_depth,
    resolve_env_path,
)
from tests.assertions import assert_equal


def test_scan_config_defaults():
    """Depth defaults to 1 and hidden entries are skipped by default."""
    config = ScanConfig(root=Path("/tmp"))
    assert_equal(config.max_depth, 1)
    assert config.skip_hidden is True


def test_scan_config_is_immutable():
    """ScanConfig cannot be modified once built."""
    config = ScanConfig(root=Path("/tmp"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_depth = 5  # type: ignore[misc]


@pytest.mark.parametrize("depth", [-1, 1.5, "2", True])
def test_scan_config_rejects_invalid_depth(depth):
    """max_depth must be a non-negative int."""
    with pytest.raises(ConfigurationError):
        ScanConfig(root=Path("/tmp"), max_depth=depth)


def test_scan_config_accepts_zero_depth():
    """Depth 0 means the root entry only."""
    assert_equal(ScanConfig(root=Path("/tmp"), max_depth=0).max_depth, 0)


def test_config_defaults_match_constructor():
    """config_defaults exposes the dataclass defaults, excluding the required root."""
    assert_equal(config_defaults(), {"max_depth": 1, "skip_hidden": True})


@pytest.mark.parametrize(
    ("value", "expected"),
    [("0", False), ("f", False), ("false", False), ("1", True), ("t", True), ("true", True)],
)
def test_parse_bool_flag_accepted_values(value, expected):
    """The six accepted literals map to booleans."""
    assert parse_bool_flag(value) is expected


@pytest.mark.parametrize("value", ["yes", "", "2", "TRUE "])
def test_parse_bool_flag_rejects_other_values(value):
    """Anything else is a configuration error."""
    with pytest.raises(ConfigurationError):
        parse_bool_flag(value)


def test_parse_max_depth():
    """Depths parse from text and must be non-negative integers."""
    assert_equal(parse_max_depth(" 3 "), 3)
    with pytest.raises(ConfigurationError, match="unsigned int"):
        parse_max_depth("three")
    with pytest.raises(ConfigurationError, match="non-negative"):
        parse_max_depth("-2")


def test_resolve_env_path_priority(tmp_path, monkeypatch):
    """Explicit path wins over LAS_ENV_FILE, which wins over ~/.env."""
    explicit = tmp_path / "explicit.env"
    from_var = tmp_path / "var.env"
    monkeypatch.setenv("LAS_ENV_FILE", str(from_var))
    assert_equal(resolve_env_path(str(explicit)), explicit)
    assert_equal(resolve_env_path(), from_var)

    monkeypatch.delenv("LAS_ENV_FILE")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert_equal(resolve_env_path(), tmp_path / ".env")


def test_load_env_defaults_without_settings():
    """With no LAS_* values the constructor defaults are returned."""
    assert_equal(load_env_defaults(environ={}), {"max_depth": 1, "skip_hidden": True})


def test_load_env_defaults_from_mapping():
    """LAS_* values override the defaults."""
    defaults = load_env_defaults(environ={"LAS_MAX_DEPTH": "4", "LAS_SKIP_HIDDEN": "f"})
    assert_equal(defaults, {"max_depth": 4, "skip_hidden": False})


def test_load_env_defaults_from_env_file(tmp_path):
    """Values are read from a .env file."""
    env_file = tmp_path / "settings.env"
    env_file.write_text("LAS_MAX_DEPTH=7\nLAS_SKIP_HIDDEN=false\n")
    assert_equal(load_env_defaults(str(env_file)), {"max_depth": 7, "skip_hidden": False})


def test_load_env_defaults_environment_beats_env_file(tmp_path, monkeypatch):
    """The process environment wins over the .env file."""
    env_file = tmp_path / "settings.env"
    env_file.write_text("LAS_MAX_DEPTH=7\n")
    monkeypatch.setenv("LAS_MAX_DEPTH", "2")
    assert_equal(load_env_defaults(str(env_file))["max_depth"], 2)


def test_load_env_defaults_missing_env_file(tmp_path):
    """A missing .env file contributes nothing."""
    assert_equal(load_env_defaults(str(tmp_path / "absent.env")), {"max_depth": 1, "skip_hidden": True})


@pytest.mark.parametrize(
    ("settings", "variable"),
    [({"LAS_MAX_DEPTH": "deep"}, "LAS_MAX_DEPTH"), ({"LAS_SKIP_HIDDEN": "maybe"}, "LAS_SKIP_HIDDEN")],
)
def test_load_env_defaults_invalid_values(settings, variable):
    """Invalid settings raise ConfigurationError naming the variable."""
    with pytest.raises(ConfigurationError, match=variable):
        load_env_defaults(environ=settings)
