import logging
import os
from logging.handlers import RotatingFileHandler

LOGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs")
DEFAULT_LOG_FILE = "motorecs_app.log"


def _level_from_settings() -> int:
    """Read [env].log_level from settings.toml, INFO if unavailable."""
    try:
        from settings_service import SettingsService

        name = SettingsService().log_level.upper()
    except Exception:
        return logging.INFO
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(name="motorecs", log_file=DEFAULT_LOG_FILE, level=None, max_bytes=5*1024*1024, backup_count=3):
    """Set up a logger with a rotating file handler and a stream handler.

    Log files land in the project's ./logs/ directory unless an absolute
    path is given (tests pass tmpdir paths).

    Args:
        name: The name of the logger.
        log_file: The name of the log file.
        level: The level of the logger. Defaults to [env].log_level in settings.toml.
        max_bytes: The maximum size of the log file.
        backup_count: The number of backup log files.

    Returns:
        logger: The logger object.

    Example usage:
    from logging_config import setup_logging
    logger = setup_logging(__name__, log_file="build_repo.log")
    """
    logger = logging.getLogger(name)
    # Clear existing handlers to avoid duplicate logs
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s %(levelname)-8s "
                                    "[%(filename)s:%(lineno)d %(funcName)s()] "
                                    "%(message)s")

    os.makedirs(LOGS_DIR, exist_ok=True)
    if os.path.isabs(log_file):
        log_path = log_file
    else:
        log_file = os.path.basename(log_file)
        log_path = os.path.join(LOGS_DIR, log_file)

    file_handler = RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8')
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.setLevel(level if level is not None else _level_from_settings())
    return logger
