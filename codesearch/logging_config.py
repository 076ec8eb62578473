"""Logging configuration with console and optional rotating file handlers"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(console_level: int = logging.WARNING, log_file: str | None = None, file_level: int = logging.DEBUG):
    """
    Configure the root logger.

    - Console: brief logs on stderr, so they do not mix with search results
    - File (optional): detailed logs, rotated at 10MB, 5 backups kept

    Args:
        console_level: Console logging level
        log_file: Path to log file, or None for console only
        file_level: File logging level
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            mode='a',
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)

    logging.debug(f"Logging configured: console={logging.getLevelName(console_level)}, file={log_file}")
