"""
Logging utilities for the hash brute-force search.
"""

import logging
import os
import sys
from typing import Optional


class Logger:
    """Logger wrapper shared by the searcher, harness and CLI"""

    # Log levels
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    def __init__(self, name: str = "hash_bruteforce", log_file: Optional[str] = None,
                 level: int = logging.INFO, console: bool = True):
        """Initialize the logger

        Args:
            name: Logger name
            log_file: Optional file to log to
            level: Logging level
            console: Whether to log to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        # Replace handlers left over from an earlier Logger with the same name
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self):
        """Get the logger instance"""
        return self.logger



_default_logger = None


def get_default_logger():
    """Shared package logger, created on first use"""
    global _default_logger
    if _default_logger is None:
        _default_logger = Logger(name="hash_bruteforce.default").get_logger()
    return _default_logger


def debug(msg: str, *args, **kwargs):
    """Log a debug message"""
    get_default_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs):
    """Log an info message"""
    get_default_logger().info(msg, *args, **kwargs)


def warning(msg: str, *args, **kwargs):
    """Log a warning message"""
    get_default_logger().warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs):
    """Log an error message"""
    get_default_logger().error(msg, *args, **kwargs)


def critical(msg: str, *args, **kwargs):
    """Log a critical message"""
    get_default_logger().critical(msg, *args, **kwargs)
