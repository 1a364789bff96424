"""Tests for configuration loading."""

import yaml

from release_picker import config
from release_picker.themes import Theme


def test_config_dir_honors_xdg(isolated_config):
    assert config.get_config_dir() == isolated_config
    assert config.get_config_path() == isolated_config / "config.yaml"


def test_missing_file_gives_defaults():
    assert config.load_config() == config.DEFAULT_CONFIG


def test_partial_file_is_merged_over_defaults():
    config.save_config({"verbosity": 2, "theme": {"cursor_icon": ">"}})
    cfg = config.load_config()
    assert cfg["verbosity"] == 2
    assert cfg["theme"]["cursor_icon"] == ">"
    assert cfg["theme"]["checked_icon"] == "◉"


def test_invalid_yaml_falls_back_with_warning(isolated_config, caplog):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.yaml").write_text("verbosity: [1")
    assert config.load_config() == config.DEFAULT_CONFIG
    assert "Ignoring unreadable config" in caplog.text


def test_non_mapping_falls_back(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.yaml").write_text(yaml.dump(["a", "b"]))
    assert config.load_config() == config.DEFAULT_CONFIG


def test_load_does_not_mutate_defaults():
    cfg = config.load_config()
    cfg["theme"]["cursor_icon"] = "!"
    assert config.DEFAULT_CONFIG["theme"]["cursor_icon"] == "⇒"


class TestVerbosity:
    def test_from_config(self):
        assert config.get_verbosity({"verbosity": 1}) == 1

    def test_clamped(self):
        assert config.get_verbosity({"verbosity": 7}) == 2
        assert config.get_verbosity({"verbosity": -3}) == 0

    def test_env_overrides_config(self, monkeypatch):
        monkeypatch.setenv("RELEASE_PICKER_VERBOSITY", "2")
        assert config.get_verbosity({"verbosity": 0}) == 2

    def test_invalid_env_falls_back_to_config(self, monkeypatch):
        monkeypatch.setenv("RELEASE_PICKER_VERBOSITY", "loud")
        assert config.get_verbosity({"verbosity": 1}) == 1

    def test_invalid_config_value(self):
        assert config.get_verbosity({"verbosity": "lots"}) == 0


class TestThemeFromConfig:
    def test_defaults(self):
        assert config.theme_from_config(config.DEFAULT_CONFIG) == Theme()

    def test_overrides_and_unknown_keys(self, caplog):
        theme = config.theme_from_config({"theme": {"checked_icon": "x", "sparkle": True}})
        assert theme.checked_icon == "x"
        assert theme.unchecked_icon == "◯"
        assert "sparkle" in caplog.text

    def test_non_mapping_section(self):
        assert config.theme_from_config({"theme": "dark"}) == Theme()


def test_default_theme_section_matches_theme_dataclass():
    from dataclasses import asdict

    assert config.DEFAULT_CONFIG["theme"] == asdict(Theme())


def test_invalid_env_warning_names_variable(monkeypatch, caplog):
    monkeypatch.setenv("RELEASE_PICKER_VERBOSITY", "loud")
    config.get_verbosity({"verbosity": 0})
    assert "Ignoring invalid RELEASE_PICKER_VERBOSITY='loud'" in caplog.text
