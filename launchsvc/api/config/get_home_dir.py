"""Get launchsvc home directory path or path under it."""

import os
from pathlib import Path

from ...constants import LAUNCHSVC_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get launchsvc home directory path or path under it.

    If no parts are provided, returns the base launchsvc home directory.
    If parts are provided, returns a path under the launchsvc home directory.

    Checks LAUNCHSVC_HOME environment variable first, defaults to ~/.launchsvc if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to launchsvc home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.launchsvc")
        >>> get_home_dir("config.json")
        Path("/Users/user/.launchsvc/config.json")
    """
    home_env = os.environ.get("LAUNCHSVC_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        if user_home:
            home = Path(user_home) / LAUNCHSVC_HOME_EXT
        else:
            home = Path.home() / LAUNCHSVC_HOME_EXT

    return home / Path(*parts) if parts else home
