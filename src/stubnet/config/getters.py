"""Configuration getter functions."""

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from .env_loader import load_global_config, load_project_config

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    """Effective switches for one process."""

    enabled: bool = True
    substitution: bool = True
    hosts: bool = True
    allowlist: bool = True
    verbose: bool = False

    def as_dict(self) -> dict[str, bool]:
        return asdict(self)


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        project_dir: Optional project directory
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check project .env file
    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def get_bool(key: str, project_dir: Path | None = None, default: bool = False) -> bool:
    """Read a boolean switch; unrecognised values fall back to *default*."""
    value = get_config(key, project_dir, default=default)
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    return default


def load_settings(project_dir: Path | None = None) -> Settings:
    """Resolve all switches for the current process."""
    return Settings(
        enabled=get_bool("STUBNET_ENABLED", project_dir, default=True),
        substitution=get_bool("STUBNET_SUBSTITUTION", project_dir, default=True),
        hosts=get_bool("STUBNET_HOSTS", project_dir, default=True),
        allowlist=get_bool("STUBNET_ALLOWLIST", project_dir, default=True),
        verbose=get_bool("STUBNET_VERBOSE", project_dir, default=False),
    )
