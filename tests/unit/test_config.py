"""
Unit tests for truthy configuration and logging setup.
"""

import logging

import pytest
from truthy import (
    TruthyConfig,
    get_config,
    get_logger,
    load_config,
    reset_config,
    set_config,
    setup_logging,
)
from truthy.config import DEFAULT_ADAPTERS


def test_config_defaults():
    """Test TruthyConfig enables every built-in adapter by default."""
    config = TruthyConfig()

    assert config.adapters == ["bool", "optional-bool", "as-str", "str"]
    assert config.log_level == "WARNING"


def test_config_normalizes_names():
    """Test adapter names and log level are normalized."""
    config = TruthyConfig(adapters=[" Bool ", "STR"], log_level="debug")

    assert config.adapters == ["bool", "str"]
    assert config.log_level == "DEBUG"


def test_config_single_adapter_string():
    """Test a single adapter name is accepted as a string."""
    config = TruthyConfig(adapters="str")

    assert config.adapters == ["str"]


def test_config_rejects_unknown_adapter():
    """Test TruthyConfig rejects unregistered adapters."""
    with pytest.raises(ValueError, match="Unknown adapters"):
        TruthyConfig(adapters=["bool", "decimal"])


def test_config_rejects_invalid_log_level():
    """Test TruthyConfig rejects unknown log levels."""
    with pytest.raises(ValueError, match="Invalid log_level"):
        TruthyConfig(log_level="LOUD")


def test_config_skip_validation():
    """Test validation can be skipped."""
    config = TruthyConfig(adapters=["decimal"], validate=False)

    assert config.adapters == ["decimal"]


def test_from_env(monkeypatch):
    """Test environment variable overrides."""
    monkeypatch.setenv("TRUTHY_ADAPTERS", "str,as-str")
    monkeypatch.setenv("TRUTHY_LOG_LEVEL", "info")

    config = TruthyConfig.from_env()

    assert config.adapters == ["str", "as-str"]
    assert config.log_level == "INFO"


def test_from_env_empty_disables_adapters(monkeypatch):
    """Test an empty TRUTHY_ADAPTERS enables no adapters."""
    monkeypatch.setenv("TRUTHY_ADAPTERS", "")

    assert TruthyConfig.from_env().adapters == []


def test_from_env_defaults():
    """Test from_env without overrides matches the defaults."""
    assert TruthyConfig.from_env().adapters == DEFAULT_ADAPTERS


def test_global_config_lifecycle():
    """Test get/set/reset of the global configuration."""
    default = get_config()
    assert get_config() is default

    custom = TruthyConfig(adapters=["bool"])
    set_config(custom)
    assert get_config() is custom

    reset_config()
    assert get_config() is not custom
    assert get_config().adapters == DEFAULT_ADAPTERS


def test_load_config(tmp_path):
    """Test loading configuration from YAML."""
    path = tmp_path / "truthy.yaml"
    path.write_text("adapters:\n  - str\n  - optional-bool\nlog_level: debug\n")

    config = load_config(path)

    assert config.adapters == ["str", "optional-bool"]
    assert config.log_level == "DEBUG"


def test_load_config_defaults(tmp_path):
    """Test missing keys fall back to defaults."""
    path = tmp_path / "truthy.yaml"
    path.write_text("log_level: ERROR\n")

    config = load_config(str(path))

    assert config.adapters == DEFAULT_ADAPTERS
    assert config.log_level == "ERROR"


def test_load_config_unknown_adapter(tmp_path):
    """Test invalid YAML configuration is rejected."""
    path = tmp_path / "truthy.yaml"
    path.write_text("adapters: [bool, decimal]\n")

    with pytest.raises(ValueError, match="Unknown adapters"):
        load_config(path)


def test_load_config_unquoted_yaml_boolean(tmp_path):
    """Test an adapter name YAML reads as a boolean is rejected."""
    path = tmp_path / "truthy.yaml"
    path.write_text("adapters: [yes]\n")

    with pytest.raises(ValueError, match="Adapter names must be strings"):
        load_config(path)


def test_load_config_empty_adapters(tmp_path):
    """Test an adapters key with no value is rejected."""
    path = tmp_path / "truthy.yaml"
    path.write_text("adapters:\n")

    with pytest.raises(ValueError, match="adapters must be a list"):
        load_config(path)


def test_load_config_empty_log_level(tmp_path):
    """Test a log_level key with no value is rejected."""
    path = tmp_path / "truthy.yaml"
    path.write_text("log_level:\n")

    with pytest.raises(ValueError, match="log_level must be a string"):
        load_config(path)


def test_config_rejects_non_string_values():
    """Test type errors in values surface as ValueError, even unvalidated."""
    with pytest.raises(ValueError, match="adapters must be a list"):
        TruthyConfig(adapters={"bool": True})

    with pytest.raises(ValueError, match="Adapter names must be strings"):
        TruthyConfig(adapters=["bool", 1], validate=False)

    with pytest.raises(ValueError, match="log_level must be a string"):
        TruthyConfig(log_level=10)


def test_load_config_missing_file(tmp_path):
    """Test a missing config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "absent.yaml")


def test_setup_logging_uses_config_level(monkeypatch):
    """Test setup_logging falls back to the configured log level."""
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    set_config(TruthyConfig(log_level="DEBUG"))

    setup_logging()

    assert calls["level"] == logging.DEBUG


def test_setup_logging_explicit_level(monkeypatch):
    """Test setup_logging honours an explicit level and format."""
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    setup_logging("error", format_string="%(message)s")

    assert calls["level"] == logging.ERROR
    assert calls["format"] == "%(message)s"


def test_get_logger():
    """Test get_logger returns a named logger."""
    assert get_logger("truthy.test").name == "truthy.test"
