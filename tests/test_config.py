"""Tests for configuration module."""

import json
from pathlib import Path

import pytest

from conmenu.utils.config import Config
from conmenu.utils.exceptions import ConfigurationError


def test_config_default_values(mock_conmenu_dir):
    """Config should have sensible defaults."""
    config = Config(mock_conmenu_dir)

    assert config.attempts == 3
    assert config.default_prompt == "Please select a menu option..."
    assert config.debug is False
    assert config.error_log is True


def test_config_loads_from_file(mock_conmenu_dir):
    """Config should load values from config.json."""
    config_file = mock_conmenu_dir / "config.json"
    config_file.write_text(
        json.dumps(
            {
                "attempts": 5,
                "default_prompt": "Main menu",
                "debug": True,
            }
        )
    )

    config = Config(mock_conmenu_dir)

    assert config.attempts == 5
    assert config.default_prompt == "Main menu"
    assert config.debug is True


def test_config_invalid_json_uses_defaults(mock_conmenu_dir):
    """A corrupt config file should not break loading."""
    (mock_conmenu_dir / "config.json").write_text("{not json")

    config = Config(mock_conmenu_dir)

    assert config.attempts == 3


@pytest.mark.parametrize("stored", [0, -4, "many", None])
def test_config_bad_attempts_fall_back(mock_conmenu_dir, stored):
    """Attempt counts below one or of the wrong type reset to 3."""
    (mock_conmenu_dir / "config.json").write_text(json.dumps({"attempts": stored}))

    assert Config(mock_conmenu_dir).attempts == 3


def test_config_save(mock_conmenu_dir):
    """Config should save changes to file."""
    config = Config(mock_conmenu_dir)
    config.default_prompt = "Choose wisely"
    config.save()

    data = json.loads((mock_conmenu_dir / "config.json").read_text())
    assert data["default_prompt"] == "Choose wisely"


def test_set_attempts_persists(mock_conmenu_dir):
    config = Config(mock_conmenu_dir)
    config.set_attempts(4)

    assert Config(mock_conmenu_dir).attempts == 4


def test_set_attempts_resets_non_positive(mock_conmenu_dir):
    config = Config(mock_conmenu_dir)
    config.set_attempts(0)

    assert config.attempts == 3


def test_set_default_prompt_rejects_blank(mock_conmenu_dir):
    config = Config(mock_conmenu_dir)

    with pytest.raises(ConfigurationError):
        config.set_default_prompt("   ")


def test_config_get_conmenu_dir_from_env(temp_dir, monkeypatch):
    """Config should use CONMENU_DIR env var if set."""
    custom_dir = temp_dir / "custom"
    custom_dir.mkdir()
    monkeypatch.setenv("CONMENU_DIR", str(custom_dir))

    from conmenu.utils.config import get_conmenu_dir

    assert get_conmenu_dir() == custom_dir


def test_config_default_conmenu_dir(monkeypatch):
    """Config should default to ~/.config/conmenu (XDG-compliant)."""
    monkeypatch.delenv("CONMENU_DIR", raising=False)

    from conmenu.utils.config import get_conmenu_dir

    assert get_conmenu_dir() == Path.home() / ".config" / "conmenu"


def test_env_overrides_attempts(mock_conmenu_dir, monkeypatch):
    """CONMENU_ATTEMPTS should override the file value."""
    (mock_conmenu_dir / "config.json").write_text(json.dumps({"attempts": 5}))
    monkeypatch.setenv("CONMENU_ATTEMPTS", "7")

    assert Config(mock_conmenu_dir).attempts == 7


def test_env_overrides_prompt_and_debug(mock_conmenu_dir, monkeypatch):
    monkeypatch.setenv("CONMENU_DEFAULT_PROMPT", "From env")
    monkeypatch.setenv("CONMENU_DEBUG", "1")

    config = Config(mock_conmenu_dir)

    assert config.default_prompt == "From env"
    assert config.debug is True


def test_env_override_bad_int_ignored(mock_conmenu_dir, monkeypatch):
    monkeypatch.setenv("CONMENU_ATTEMPTS", "lots")

    assert Config(mock_conmenu_dir).attempts == 3


def test_unknown_env_vars_ignored(mock_conmenu_dir, monkeypatch):
    monkeypatch.setenv("CONMENU_CONMENU_DIR", "/elsewhere")

    config = Config(mock_conmenu_dir)

    assert config.conmenu_dir == mock_conmenu_dir


def test_persisted_env_section(mock_conmenu_dir):
    """Overrides stored in the config env section apply on load."""
    config = Config(mock_conmenu_dir)
    config.set_env("CONMENU_ATTEMPTS", "6")

    assert config.attempts == 6
    assert Config(mock_conmenu_dir).attempts == 6

    assert config.unset_env("CONMENU_ATTEMPTS") is True
    assert config.unset_env("CONMENU_ATTEMPTS") is False
    assert Config(mock_conmenu_dir).attempts == 3


def test_list_env_returns_copy(mock_conmenu_dir):
    config = Config(mock_conmenu_dir)
    config.set_env("CONMENU_DEBUG", "true")

    listed = config.list_env()
    listed["CONMENU_ATTEMPTS"] = "9"

    assert config.list_env() == {"CONMENU_DEBUG": "true"}


@pytest.mark.parametrize("content", ["[1, 2]", '"text"', "42", "null"])
def test_config_non_object_json_uses_defaults(mock_conmenu_dir, content):
    """A config file holding a list or scalar loads as defaults."""
    (mock_conmenu_dir / "config.json").write_text(content)

    config = Config(mock_conmenu_dir)

    assert config.attempts == 3
    assert config.default_prompt == "Please select a menu option..."
    assert config.env == {}


def test_config_non_object_env_section_ignored(mock_conmenu_dir):
    (mock_conmenu_dir / "config.json").write_text(json.dumps({"attempts": 4, "env": ["x"]}))

    config = Config(mock_conmenu_dir)

    assert config.attempts == 4
    assert config.env == {}


@pytest.mark.parametrize(
    "key, setting",
    [
        ("CONMENU_ATTEMPTS", "attempts"),
        ("default_prompt", "default_prompt"),
        ("CONMENU_DIR", None),
        ("colour", None),
    ],
)
def test_setting_for(key, setting):
    assert Config.setting_for(key) == setting


def test_set_env_normalizes_attempts(mock_conmenu_dir):
    config = Config(mock_conmenu_dir)
    config.set_env("CONMENU_ATTEMPTS", "0")

    assert config.attempts == 3
