"""
Configuration management for stubnet.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.stubnet/.env)
3. Global config file (~/.stubnet/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import load_env_file, load_global_config, load_project_config
from .getters import Settings, get_bool, get_config, load_settings
from .project_setup import (
    PROJECT_MARKER,
    create_project_config_template,
    find_project_dir,
    get_project_env_path,
)

__all__ = [
    # env_loader
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "Settings",
    "get_bool",
    "get_config",
    "load_settings",
    # project_setup
    "PROJECT_MARKER",
    "create_project_config_template",
    "find_project_dir",
    "get_project_env_path",
]
