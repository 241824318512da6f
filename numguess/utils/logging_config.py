"""
Logging configuration for the game.
"""

import os
import logging
import logging.handlers
import time
from typing import Dict, Optional, Union

# Global configuration
DEFAULT_LEVEL = logging.INFO
LOGGERS: Dict[str, logging.Logger] = {}
LOGGER_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_DIRECTORY = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), 'logs')


def resolve_level(level: Union[int, str, None]) -> int:
    """
    Turn a level name such as "debug" or "INFO" into a logging level.

    Unknown names fall back to DEFAULT_LEVEL.
    """
    if level is None:
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def setup_logging(level: Union[int, str] = DEFAULT_LEVEL,
                  log_dir: Optional[str] = None,
                  log_to_file: bool = True) -> None:
    """
    Set up the logging system for the application.

    Args:
        level: The log level to use (int or level name).
        log_dir: Directory for the log files. Defaults to LOG_DIRECTORY.
        log_to_file: Whether to attach the rotating file handlers.
    """
    return configure_logging(resolve_level(level), log_dir, log_to_file)


def configure_logging(level: int = DEFAULT_LEVEL,
                      log_dir: Optional[str] = None,
                      log_to_file: bool = True) -> None:
    """
    Configure the logging system.

    Args:
        level: The log level to use.
        log_dir: Directory for the log files.
        log_to_file: Whether to write game and error log files.
    """
    log_dir = log_dir or LOG_DIRECTORY

    # Configure the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Console (stderr): warnings and up, unless running at DEBUG
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level if level <= logging.DEBUG else max(level, logging.WARNING))

    formatter = logging.Formatter(LOGGER_FORMAT, DATE_FORMAT)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        # Create log directory if it doesn't exist
        os.makedirs(log_dir, exist_ok=True)

        # Create a file handler for all logs
        log_file = os.path.join(log_dir, f'game_{time.strftime("%Y%m%d_%H%M%S")}.log')
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5*1024*1024,  # 5 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        # Create a file handler for errors only
        error_log_file = os.path.join(log_dir, f'error_{time.strftime("%Y%m%d_%H%M%S")}.log')
        error_file_handler = logging.handlers.RotatingFileHandler(
            error_log_file,
            maxBytes=1*1024*1024,  # 1 MB
            backupCount=3,
            encoding='utf-8'
        )
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(formatter)
        root_logger.addHandler(error_file_handler)

    root_logger.info("Logging configured")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: The name of the logger.

    Returns:
        The logger.
    """
    # Check if the logger is already cached
    if name in LOGGERS:
        return LOGGERS[name]

    logger = logging.getLogger(name)
    LOGGERS[name] = logger

    return logger
