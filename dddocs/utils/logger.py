import logging
from logging.handlers import RotatingFileHandler

from ..constants import LOG_FILE_NAME

# Prevent multiple configurations
_CONFIGURED = False

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: str | None = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure unified dddocs logging.

    The rotating file handler is attached once; later calls only adjust the level.

    Args:
        level: Logging level name. None keeps the current level (INFO on first call).
        max_bytes: Rotate the log file after this many bytes
        backup_count: Number of rotated files to keep
    """
    global _CONFIGURED
    root_logger = logging.getLogger("dddocs")

    if not _CONFIGURED:
        from ..api.config.get_home_dir import get_home_dir

        home = get_home_dir()
        home.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            home / LOG_FILE_NAME,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        root_logger.addHandler(file_handler)
        root_logger.setLevel(logging.INFO)
        _CONFIGURED = True

    if level is not None:
        root_logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"dddocs.{name}")
