"""Get docshim home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DOCSHIM_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get docshim home directory path or path under it.

    Checks DOCSHIM_HOME environment variable first, then HOME, and falls back
    to the user's home directory.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.docshim")
        >>> get_home_dir("config.json")
        Path("/Users/user/.docshim/config.json")
    """
    home_env = os.environ.get("DOCSHIM_HOME")
    if home_env:
        docshim_home = Path(home_env).expanduser().resolve()
    else:
        user_home = os.environ.get("HOME")
        docshim_home = (Path(user_home) if user_home else Path.home()) / DOCSHIM_HOME_EXT

    return docshim_home / Path(*parts) if parts else docshim_home
