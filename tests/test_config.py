"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from cli.config import find_config, get_paths, load_config, load_config_model
from cli.config_models import MoodlogConfig


def test_defaults():
    config = MoodlogConfig()
    assert config.report.max_blocks == 35
    assert config.auth.max_login_attempts == 3
    assert config.logging.level == "WARNING"


def test_load_from_env_path(config_file, tmp_path):
    assert find_config() == config_file
    config = load_config_model()
    assert config.paths.data_dir == tmp_path / "data"


def test_load_explicit_path(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(yaml.dump({"report": {"max_blocks": 20}, "logging": {"level": "debug"}}))
    config = load_config_model(path)
    assert config.report.max_blocks == 20
    assert config.logging.level == "DEBUG"


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("paths: [unclosed")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_config_model(path)


@pytest.mark.parametrize(
    "data",
    [
        {"report": {"max_blocks": 0}},
        {"auth": {"max_login_attempts": 0}},
        {"logging": {"level": "LOUD"}},
    ],
)
def test_validation_errors(tmp_path, data):
    path = tmp_path / "invalid.yaml"
    path.write_text(yaml.dump(data))
    with pytest.raises(ValueError, match="Config validation failed"):
        load_config_model(path)


def test_get_paths_expands_user(tmp_path):
    path = tmp_path / "c.yaml"
    path.write_text(yaml.dump({"paths": {"data_dir": "~/journals"}}))
    paths = get_paths(load_config(path))
    assert paths["data_dir"] == Path("~/journals").expanduser()
