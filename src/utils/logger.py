"""
Logging
- Leveled console output (colored on a TTY)
- Optional rotating file output, with errors mirrored to their own file
- Per-name logger cache with a process-wide debug switch

Environment:
    DEBUG=true         enable debug level for every logger
    LOG_DIR=logs       write rotating log files into this directory
"""

import os
import sys
import copy
import logging
from pathlib import Path
from typing import Optional, Dict
from logging.handlers import RotatingFileHandler


CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] %(filename)s:%(funcName)s:%(lineno)d - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(funcName)s:%(lineno)d - %(message)s'


class ColoredFormatter(logging.Formatter):
    """Colors the level name and message when writing to a terminal"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None or not sys.stdout.isatty():
            return super().format(record)

        # copy so file handlers sharing the record see plain text
        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        colored.msg = f"{color}{record.msg}{self.RESET}"
        return super().format(colored)


class Logger:
    """Thin wrapper around a stdlib logger that reports the caller's location"""

    def __init__(
        self,
        name: str = "Portfolio",
        log_dir: Optional[str] = None,
        debug: bool = False,
        console: bool = True,
    ):
        """
        Args:
            name: logger name
            log_dir: directory for rotating log files, None disables file output
            debug: start at DEBUG level
            console: write to stdout
        """
        self.name = name
        self.debug_mode = debug

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if debug else logging.INFO)
        self.logger.handlers.clear()
        self.logger.propagate = False

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
            self.logger.addHandler(console_handler)

        if log_dir:
            self._add_file_handlers(Path(log_dir))

    def _add_file_handlers(self, log_dir: Path) -> None:
        log_dir.mkdir(parents=True, exist_ok=True)
        formatter = logging.Formatter(FILE_FORMAT)

        file_handler = RotatingFileHandler(
            log_dir / f"{self.name.lower()}.log",
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            log_dir / f"{self.name.lower()}_error.log",
            maxBytes=5*1024*1024,  # 5MB
            backupCount=3,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        self.logger.addHandler(error_handler)

    def set_debug(self, enabled: bool):
        self.debug_mode = enabled
        self.logger.setLevel(logging.DEBUG if enabled else logging.INFO)

    def _log(self, level: int, msg: str, *args, **kwargs):
        # skip _log and the public method so records point at the caller
        kwargs['stacklevel'] = kwargs.get('stacklevel', 1) + 2
        self.logger.log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._log(logging.ERROR, msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        """Log at ERROR with the current traceback attached"""
        kwargs.setdefault('exc_info', True)
        self._log(logging.ERROR, msg, *args, **kwargs)


_logger_cache: Dict[str, Logger] = {}
_global_debug = False


def _debug_from_env() -> bool:
    return _global_debug or os.getenv('DEBUG', 'false').lower() == 'true'


def get_logger(name: str = "Portfolio", **kwargs) -> Logger:
    """
    Get a cached logger, creating it on first use

    Args:
        name: logger name
        **kwargs: passed to Logger on creation

    Returns:
        Logger
    """
    if name not in _logger_cache:
        kwargs.setdefault('log_dir', os.getenv('LOG_DIR') or None)
        _logger_cache[name] = Logger(name=name, debug=_debug_from_env(), **kwargs)
    return _logger_cache[name]


def set_global_debug(enabled: bool):
    """Toggle debug level on every logger, including ones created later"""
    global _global_debug
    _global_debug = enabled

    for logger in _logger_cache.values():
        logger.set_debug(enabled)
