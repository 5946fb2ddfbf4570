"""
Configuration utilities for pomocli.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_FILE_NAME = ".pomocli.env"
DEFAULT_HOME = Path.home() / ".pomocli"
DATA_FILE_NAME = "tasks.json"


def load_env_vars() -> None:
    """
    Load environment variables from .env files in the following order:
    1. .pomocli.env in the current directory
    2. .pomocli.env in the user's home directory

    Values already present in the environment are never overridden.
    """
    # Load from current directory
    if os.path.exists(ENV_FILE_NAME):
        load_dotenv(ENV_FILE_NAME)

    # Load from home directory
    home_env = Path.home() / ENV_FILE_NAME
    if home_env.exists():
        load_dotenv(home_env)


def get_config(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get configuration value from environment variables."""
    return os.getenv(key, default)


def get_home() -> Path:
    return Path(get_config("POMOCLI_HOME") or DEFAULT_HOME).expanduser()


def get_data_file() -> Path:
    """Path of the JSON task file (POMOCLI_DATA_FILE, else under POMOCLI_HOME)."""
    value = get_config("POMOCLI_DATA_FILE")
    return Path(value).expanduser() if value else get_home() / DATA_FILE_NAME


def get_report_file() -> Optional[Path]:
    """POMOCLI_REPORT_FILE, or None to keep the report next to the data file."""
    value = get_config("POMOCLI_REPORT_FILE")
    return Path(value).expanduser() if value else None


def get_log_level() -> int:
    """Resolve POMOCLI_LOG_LEVEL (a level name such as DEBUG) to a logging level."""
    name = (get_config("POMOCLI_LOG_LEVEL") or "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
