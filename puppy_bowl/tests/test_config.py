"""Tests for configuration loading."""

import json
import pytest

from puppy_bowl.config import DEFAULT_COHORT, Config, ConfigManager


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ConfigManager.ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


class TestConfig:
    """Test Config model."""

    def test_default_base_url(self):
        assert Config().base_url == f"https://fsa-puppy-bowl.herokuapp.com/api/{DEFAULT_COHORT}"

    def test_base_url_strips_trailing_slash(self):
        config = Config(api_root="http://localhost:3000/api/", cohort_name="demo")

        assert config.base_url == "http://localhost:3000/api/demo"


class TestConfigManager:
    """Test ConfigManager persistence and overrides."""

    def test_missing_file_uses_defaults(self, tmp_path):
        config = ConfigManager(tmp_path / "cfg").load_config()

        assert config == Config()

    def test_save_then_load(self, tmp_path):
        manager = ConfigManager(tmp_path / "cfg")
        manager.save_config(Config(cohort_name="2501-demo", retry_attempts=2))

        config = manager.load_config()

        assert config.cohort_name == "2501-demo"
        assert config.retry_attempts == 2

    def test_invalid_file_falls_back(self, tmp_path):
        manager = ConfigManager(tmp_path)
        manager.config_file.write_text("{not json")

        assert manager.load_config() == Config()

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        manager = ConfigManager(tmp_path)
        manager.config_file.write_text(json.dumps({"cohort_name": "from-file"}))
        monkeypatch.setenv("PUPPY_BOWL_COHORT", "from-env")
        monkeypatch.setenv("PUPPY_BOWL_TIMEOUT", "2.5")

        config = manager.load_config()

        assert config.cohort_name == "from-env"
        assert config.timeout_seconds == 2.5

    def test_invalid_env_override_is_skipped(self, tmp_path, monkeypatch):
        """A bad override is ignored; file values and other overrides survive."""
        manager = ConfigManager(tmp_path)
        manager.config_file.write_text(json.dumps({"cohort_name": "from-file", "retry_attempts": 2}))
        monkeypatch.setenv("PUPPY_BOWL_RETRY_ATTEMPTS", "lots")
        monkeypatch.setenv("PUPPY_BOWL_TIMEOUT", "4")

        config = manager.load_config()

        assert config.cohort_name == "from-file"
        assert config.retry_attempts == 2
        assert config.timeout_seconds == 4.0

    def test_load_file_config_ignores_env(self, tmp_path, monkeypatch):
        manager = ConfigManager(tmp_path)
        manager.config_file.write_text(json.dumps({"cohort_name": "from-file"}))
        monkeypatch.setenv("PUPPY_BOWL_API_ROOT", "http://localhost:9999/api")

        config = manager.load_file_config()

        assert config.cohort_name == "from-file"
        assert config.api_root == Config().api_root
