# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load all configuration from environment variables / .env file.
#   Provides a typed config object to the CLI and the persistence layer.
#
# CLASSES:
# --------
# - AppConfig (dataclass)
#     store_path: str | None   (default: Element's LevelDB dir for this OS)
#     snapshot_dir: str        (default "leveldb")
#     output_dir: str          (default "metadata/")
#     json_indent: int         (default 2)
#     log_level: str           (default "WARNING")
#
# FUNCTIONS:
# ----------
# - load_config(env_path=None) -> AppConfig
#     Read .env (if present) with python-dotenv and build a fresh AppConfig.
#
# - get_config() -> AppConfig
#     Same as load_config() but returns the same singleton on repeated calls.
#
# ENVIRONMENT:
# ------------
#   ELEMENT_LEVELDB_PATH, ELEMENT_SNAPSHOT_DIR, ELEMENT_OUTPUT_DIR,
#   ELEMENT_JSON_INDENT, ELEMENT_LOG_LEVEL
#
# USAGE:
# ------
#   from element_ldb.config import get_config
#   config = get_config()
#   print(config.store_path)
#
# ==============================================

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from element_ldb.errors import ConfigurationError, OpenFailure
from element_ldb.store.locator import default_store_path


@dataclass
class AppConfig:
    """Main application configuration."""
    store_path: Optional[str] = None
    snapshot_dir: str = "leveldb"
    output_dir: str = "metadata/"
    json_indent: int = 2
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _default_store_path() -> Optional[str]:
    try:
        return str(default_store_path())
    except OpenFailure:
        # Unsupported platform: the caller has to pass a path explicitly
        return None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def load_config(env_path: Optional[Path] = None) -> AppConfig:
    """
    Build a fresh configuration from the environment.

    Args:
        env_path: .env file to load. Defaults to ".env" in the project root.

    Returns:
        AppConfig: Application configuration

    Raises:
        ConfigurationError: If a numeric setting is malformed
    """
    if env_path is None:
        env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    return AppConfig(
        store_path=os.getenv("ELEMENT_LEVELDB_PATH") or _default_store_path(),
        snapshot_dir=os.getenv("ELEMENT_SNAPSHOT_DIR", "leveldb"),
        output_dir=os.getenv("ELEMENT_OUTPUT_DIR", "metadata/"),
        json_indent=_env_int("ELEMENT_JSON_INDENT", 2),
        log_level=os.getenv("ELEMENT_LOG_LEVEL", "WARNING").upper(),
    )


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    _config_instance = load_config()
    return _config_instance
