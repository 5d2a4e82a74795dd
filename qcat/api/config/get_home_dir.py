"""Get qcat home directory path or path under it."""

import os
from pathlib import Path

from ...constants import QCAT_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get qcat home directory path or path under it.

    Checks the QCAT_HOME environment variable first, defaults to ~/.qcat.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.qcat")
        >>> get_home_dir("config.json")
        Path("/Users/user/.qcat/config.json")
    """
    qcat_home_env = os.environ.get("QCAT_HOME")
    if qcat_home_env:
        qcat_home = Path(qcat_home_env).expanduser().resolve()
    else:
        qcat_home = Path.home() / QCAT_HOME_EXT

    return qcat_home / Path(*parts) if parts else qcat_home
