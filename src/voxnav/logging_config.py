"""
Logging Configuration
Sets up file-based logging with separate log files for the HTTP layer and the interpreter
"""

import os
import logging
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

from voxnav import config

# Log file names (created under config.LOG_DIR)
API_LOG_NAME = "api.log"
INTERPRETER_LOG_NAME = "interpreter.log"

# Log format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Max log file size (10MB)
MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5


def setup_file_logger(name: str, log_file: Path, level: int = logging.INFO) -> logging.Logger:
    """
    Set up a file-based logger with rotation

    Args:
        name: Logger name
        log_file: Path to log file
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    # Console handler, warnings and errors only
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def setup_logging(log_dir: Optional[Path] = None):
    """
    Set up all loggers for the voice-command service
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, log_level, logging.INFO)

    target_dir = Path(log_dir) if log_dir is not None else config.LOG_DIR
    target_dir.mkdir(parents=True, exist_ok=True)

    setup_file_logger("voxnav.api", target_dir / API_LOG_NAME, level)
    setup_file_logger("voxnav.interpreter", target_dir / INTERPRETER_LOG_NAME, level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    logging.info("Logging configured. Log files in: %s", target_dir)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance (creates if doesn't exist)
    """
    return logging.getLogger(name)
