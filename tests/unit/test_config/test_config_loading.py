"""
Unit tests for configuration loading, validation and override precedence.
"""

import tomllib

import pytest

from mesostasks.config import load_config, validate_agent_config, validate_app_config
from mesostasks.models import AgentConfig, AppConfig
from mesostasks.validation import ValidationError


@pytest.mark.unit
class TestLoadConfig:
    """Test cases for load_config."""

    def test_defaults(self):
        config = load_config()

        assert config == AppConfig()
        assert config.agent.url == "http://localhost:5051"
        assert config.agent.timeout == 10.0
        assert config.log_level == "INFO"

    def test_from_file(self, temp_dir):
        config_file = temp_dir / "config.toml"
        config_file.write_text(
            '[agent]\nurl = "http://agent-7:5051/"\ntimeout = 3\n\n[logging]\nlevel = "debug"\n'
        )

        config = load_config(config_file)

        assert config.agent == AgentConfig(url="http://agent-7:5051", timeout=3.0)
        assert config.log_level == "DEBUG"

    def test_overrides_take_precedence(self, temp_dir):
        config_file = temp_dir / "config.toml"
        config_file.write_text('[agent]\nurl = "http://agent-7:5051"\ntimeout = 3\n')

        config = load_config(config_file, url="https://other:5052", timeout=1.5, log_level="WARNING")

        assert config.agent.url == "https://other:5052"
        assert config.agent.timeout == 1.5
        assert config.log_level == "WARNING"

    def test_partial_override_keeps_file_values(self, temp_dir):
        config_file = temp_dir / "config.toml"
        config_file.write_text('[agent]\nurl = "http://agent-7:5051"\ntimeout = 3\n')

        config = load_config(config_file, timeout=7)

        assert config.agent.url == "http://agent-7:5051"
        assert config.agent.timeout == 7.0

    def test_missing_file(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_config(temp_dir / "missing.toml")

    def test_malformed_file(self, temp_dir):
        config_file = temp_dir / "config.toml"
        config_file.write_text("[agent\nurl = ")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(config_file)

    def test_invalid_override(self):
        with pytest.raises(ValidationError) as exc_info:
            load_config(timeout=0)
        assert exc_info.value.field_name == "agent.timeout"

    def test_config_is_immutable(self):
        config = load_config()
        with pytest.raises(AttributeError):
            config.agent.url = "http://elsewhere"


@pytest.mark.unit
class TestConfigValidators:
    """Test cases for individual setting validation."""

    @pytest.mark.parametrize(
        "url",
        ["localhost:5051", "ftp://localhost:5051", "http://", "", 5051],
    )
    def test_invalid_url(self, url):
        with pytest.raises(ValidationError) as exc_info:
            validate_agent_config({"url": url})
        assert exc_info.value.field_name == "agent.url"

    @pytest.mark.parametrize("timeout", [-1, 0, 301, "soon", True])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ValidationError):
            validate_agent_config({"timeout": timeout})

    def test_unknown_agent_setting_warns(self, caplog):
        config = validate_agent_config({"retries": 3})
        assert config == AgentConfig()
        assert "retries" in caplog.text

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_app_config({"logging": {"level": "LOUD"}})
        assert exc_info.value.field_name == "logging.level"

    def test_section_must_be_table(self):
        with pytest.raises(ValidationError):
            validate_app_config({"agent": "http://localhost:5051"})
