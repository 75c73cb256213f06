"""Configuration management for the supply chain simulator."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Python < 3.11

DEFAULT_BASE_TRANSACTION_ID = 1001
DEFAULT_SPOILAGE_RATE = 0.15
DEFAULT_CURRENCY_SYMBOL = "₦"


def _find_repo_root(start_dir: Path) -> Path:
    """Find repository root by walking upward looking for .git or pyproject.toml."""
    current_dir = start_dir

    while True:
        if (current_dir / ".git").exists() or (current_dir / "pyproject.toml").exists():
            return current_dir

        parent_dir = current_dir.parent

        # Stop if we reach filesystem root
        if parent_dir == current_dir:
            return start_dir

        current_dir = parent_dir


def _load_repo_config_data(repo_root: Path) -> Optional[dict]:
    """Load repo config data from .foodchain/config.toml if it exists."""
    config_file = repo_root / ".foodchain" / "config.toml"

    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        # If config file is malformed, ignore it
        return None


def _get_repo_config_value(data: Optional[dict], keys: list[str]):
    """Safely get a nested repo config value."""
    if not data:
        return None
    current = data
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


class SimulatorConfig(BaseModel):
    """Configuration for a simulation run."""

    base_transaction_id: int = Field(
        default=DEFAULT_BASE_TRANSACTION_ID,
        description="Id assigned to the first appended transaction",
    )
    default_spoilage_rate: float = Field(
        default=DEFAULT_SPOILAGE_RATE,
        description="Spoilage fraction used when a payment request does not set one",
    )
    currency_symbol: str = Field(default=DEFAULT_CURRENCY_SYMBOL)

    model_config = {"frozen": False}

    @classmethod
    def from_env(cls, start_dir: Optional[Path] = None) -> "SimulatorConfig":
        """Load configuration with the following precedence:

        1. FOODCHAIN_* environment variables
        2. repo-local .foodchain/config.toml (walk upward from start_dir)
        3. Defaults

        Args:
            start_dir: Directory to start the repo search from (default: cwd)

        Raises:
            ConfigError: If a value cannot be read as the setting's type
        """
        repo_config = _load_repo_config_data(_find_repo_root(start_dir or Path.cwd()))

        base_id = _get_repo_config_value(repo_config, ["simulation", "base_transaction_id"])
        spoilage_rate = _get_repo_config_value(repo_config, ["pricing", "default_spoilage_rate"])
        currency = _get_repo_config_value(repo_config, ["pricing", "currency_symbol"])

        try:
            return cls(
                base_transaction_id=os.environ.get(
                    "FOODCHAIN_BASE_ID", base_id if base_id is not None else DEFAULT_BASE_TRANSACTION_ID
                ),
                default_spoilage_rate=os.environ.get(
                    "FOODCHAIN_SPOILAGE_RATE",
                    spoilage_rate if spoilage_rate is not None else DEFAULT_SPOILAGE_RATE,
                ),
                currency_symbol=os.environ.get("FOODCHAIN_CURRENCY", currency or DEFAULT_CURRENCY_SYMBOL),
            )
        except ValidationError as e:
            field = ".".join(str(part) for part in e.errors()[0]["loc"])
            raise ConfigError(f"Invalid configuration value for '{field}': {e.errors()[0]['msg']}") from e
