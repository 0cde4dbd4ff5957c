"""Tests for LoclinkConfig loading and saving."""

import json

import pytest

from loclink.api.config.LoclinkConfig import LoclinkConfig
from loclink.api.root.DEFAULT_ROOT_MARKERS import DEFAULT_ROOT_MARKERS


def test_home_dir_from_environment(loclink_home):
    assert LoclinkConfig.get_home_dir() == loclink_home.resolve()
    assert LoclinkConfig.get_config_path() == loclink_home.resolve() / "config.json"


def test_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("LOCLINK_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert LoclinkConfig.get_home_dir() == tmp_path / ".loclink"


def test_load_defaults_when_missing():
    config = LoclinkConfig.load()
    assert config.activation.categories == []
    assert config.root.markers == list(DEFAULT_ROOT_MARKERS)
    assert config.root.metalink_policy == "ask"
    assert config.log.level == "INFO"


def test_load_from_file(write_config):
    write_config(
        {
            "activation": {"categories": [" .TXT ", "md", ""]},
            "root": {"markers": ["WORKSPACE"], "metalink_policy": "always"},
            "log": {"level": "DEBUG"},
        }
    )
    config = LoclinkConfig.load()
    assert config.activation.categories == ["txt", "md"]
    assert config.root.markers == ["WORKSPACE"]
    assert config.root.metalink_policy == "always"
    assert config.log.level == "DEBUG"


def test_load_partial_file_fills_defaults(write_config):
    write_config({"log": {"level": "WARN"}})
    config = LoclinkConfig.load()
    assert config.log.level == "WARN"
    assert config.root.metalink_policy == "ask"


def test_load_invalid_json(loclink_home):
    loclink_home.mkdir(parents=True)
    (loclink_home / "config.json").write_text("{broken")
    with pytest.raises(ValueError, match="Invalid JSON in config file"):
        LoclinkConfig.load()


def test_load_non_object(write_config):
    write_config([1, 2])  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="must contain a JSON object"):
        LoclinkConfig.load()


@pytest.mark.parametrize(
    ("config", "field"),
    [
        ({"unknown": {}}, "unknown"),
        ({"root": {"metalink_policy": "sometimes"}}, "root.metalink_policy"),
        ({"root": {"markers": []}}, "root.markers"),
        ({"log": {"level": "LOUD"}}, "log.level"),
    ],
)
def test_load_validation_errors(write_config, config, field):
    write_config(config)
    with pytest.raises(ValueError, match=f"Configuration validation error: {field}"):
        LoclinkConfig.load()


def test_save_round_trip(loclink_home):
    config = LoclinkConfig.load()
    config.root.metalink_policy = "never"
    config.save()

    path = loclink_home / "config.json"
    assert json.loads(path.read_text())["root"]["metalink_policy"] == "never"
    assert not path.with_suffix(".json.tmp").exists()
    assert LoclinkConfig.load().root.metalink_policy == "never"


def test_to_dict_sections():
    assert list(LoclinkConfig().to_dict()) == ["activation", "root", "log"]
