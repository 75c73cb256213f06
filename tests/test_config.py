"""Tests for simulator configuration."""

import pytest

from foodchain.config import SimulatorConfig
from foodchain.errors import ConfigError, FoodchainError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("FOODCHAIN_BASE_ID", "FOODCHAIN_SPOILAGE_RATE", "FOODCHAIN_CURRENCY"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env, tmp_path):
    (tmp_path / "pyproject.toml").touch()

    config = SimulatorConfig.from_env(start_dir=tmp_path)

    assert config.base_transaction_id == 1001
    assert config.default_spoilage_rate == 0.15
    assert config.currency_symbol == "₦"


def test_repo_config_file(clean_env, tmp_path):
    (tmp_path / "pyproject.toml").touch()
    config_dir = tmp_path / ".foodchain"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(
        "[simulation]\nbase_transaction_id = 5000\n\n"
        "[pricing]\ndefault_spoilage_rate = 0.2\ncurrency_symbol = \"$\"\n",
        encoding="utf-8",
    )

    config = SimulatorConfig.from_env(start_dir=tmp_path / ".foodchain")

    assert config.base_transaction_id == 5000
    assert config.default_spoilage_rate == 0.2
    assert config.currency_symbol == "$"


def test_env_overrides_repo_config(clean_env, tmp_path):
    (tmp_path / "pyproject.toml").touch()
    config_dir = tmp_path / ".foodchain"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text(
        "[simulation]\nbase_transaction_id = 5000\n", encoding="utf-8"
    )
    clean_env.setenv("FOODCHAIN_BASE_ID", "42")
    clean_env.setenv("FOODCHAIN_SPOILAGE_RATE", "0.3")

    config = SimulatorConfig.from_env(start_dir=tmp_path)

    assert config.base_transaction_id == 42
    assert config.default_spoilage_rate == 0.3


def test_malformed_repo_config_ignored(clean_env, tmp_path):
    (tmp_path / "pyproject.toml").touch()
    config_dir = tmp_path / ".foodchain"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text("not = [valid toml", encoding="utf-8")

    config = SimulatorConfig.from_env(start_dir=tmp_path)

    assert config.base_transaction_id == 1001


@pytest.mark.parametrize(
    "name,value,field",
    [
        ("FOODCHAIN_BASE_ID", "abc", "base_transaction_id"),
        ("FOODCHAIN_SPOILAGE_RATE", "fifteen percent", "default_spoilage_rate"),
    ],
)
def test_malformed_env_value_raises_config_error(clean_env, tmp_path, name, value, field):
    """Test that an unparsable env value surfaces as a simulator error naming the setting."""
    (tmp_path / "pyproject.toml").touch()
    clean_env.setenv(name, value)

    with pytest.raises(ConfigError) as exc_info:
        SimulatorConfig.from_env(start_dir=tmp_path)

    assert isinstance(exc_info.value, FoodchainError)
    assert field in str(exc_info.value)
