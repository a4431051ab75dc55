"""Get dddocs home directory path or path under it."""

import os
from pathlib import Path

from ...constants import DDDOCS_HOME_ENV, DDDOCS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get dddocs home directory path or path under it.

    Checks DDDOCS_HOME environment variable first, defaults to ~/.dddocs if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.dddocs")
        >>> get_home_dir("dddocs.log")
        Path("/Users/user/.dddocs/dddocs.log")
    """
    home_env = os.environ.get(DDDOCS_HOME_ENV)
    home = Path(home_env).expanduser().resolve() if home_env else Path.home() / DDDOCS_HOME_EXT
    return home / Path(*parts) if parts else home
