"""Project directory discovery and config templates."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_MARKER = ".stubnet"

PROJECT_ENV_TEMPLATE = """# stubnet project configuration
# Values here override ~/.stubnet/config.yml; environment variables override both.

# STUBNET_ENABLED=true
# STUBNET_SUBSTITUTION=true
# STUBNET_HOSTS=true
# STUBNET_ALLOWLIST=true
# STUBNET_VERBOSE=false
"""


def find_project_dir(start: Path | None = None) -> Path | None:
    """Find the project directory by looking for a .stubnet marker."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / PROJECT_MARKER).is_dir():
            return candidate
    return None


def get_project_env_path(project_dir: Path) -> Path:
    """Return the project's .env path."""
    return project_dir / PROJECT_MARKER / ".env"


def create_project_config_template(project_dir: Path) -> Path:
    """Create .stubnet/.env with commented defaults, keeping an existing file."""
    env_path = get_project_env_path(project_dir)
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if env_path.exists():
        logger.debug("Project config already present at %s", env_path)
        return env_path
    env_path.write_text(PROJECT_ENV_TEMPLATE)
    return env_path
