"""Get path to the dddocs config file."""

import os
from pathlib import Path

from ...constants import DDDOCS_CONFIG_ENV, DEFAULT_CONFIG_NAME


def get_config_path() -> Path:
    """Get path to the config file.

    Checks the DDDOCS_CONFIG environment variable first, defaults to
    ./dddocs.json in the current working directory.
    """
    config_env = os.environ.get(DDDOCS_CONFIG_ENV)
    if config_env:
        return Path(config_env).expanduser().resolve()
    return Path.cwd() / DEFAULT_CONFIG_NAME
