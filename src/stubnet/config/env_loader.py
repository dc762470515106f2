"""Environment variable and configuration file loading."""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.stubnet/config.yml."""
    config_path = Path.home() / ".stubnet" / "config.yml"
    if not config_path.exists():
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a mapping", config_path)
        return {}
    return data


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from .env file."""
    from stubnet.config.project_setup import find_project_dir, get_project_env_path

    if project_dir is None:
        project_dir = find_project_dir()

    if project_dir:
        return load_env_file(get_project_env_path(project_dir))

    return {}
