"""
Logging configuration for the newt-lxc provisioning tool
Provides a centralized logger with labeled console output and optional file output
"""
import logging
import sys
from pathlib import Path

CONSOLE_FORMAT = '[%(levelname)s] %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level=logging.INFO, log_file=None, format_string=None):
    """
    Setup logging configuration

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file (default: None, console only)
        format_string: Custom console format string (default: labeled single line)
    """
    if format_string is None:
        format_string = CONSOLE_FORMAT

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # Console handler (always)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)
        root_logger.setLevel(min(level, logging.DEBUG))

    return root_logger


def get_logger(name=None):
    """
    Get a logger instance for a module

    Args:
        name: Logger name (default: None, uses 'newt_lxc')

    Returns:
        Logger instance
    """
    return logging.getLogger(name or 'newt_lxc')


def init_logger(level=logging.INFO, log_file=None):
    """
    Initialize the default logger (called once at startup)

    Args:
        level: Logging level
        log_file: Optional log file path
    """
    setup_logging(level=level, log_file=log_file)
    return get_logger('newt_lxc')
