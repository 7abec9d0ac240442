"""Defines the :class:`.Logger` class and the module-level logging helpers.

Every record the library itself emits goes through the ``"simcore"`` logger, configured from
:class:`.BehavioralConfig` the first time it's used. Applications can attach their own handlers to
that logger, or change ``BehavioralConfig.getConfig().logging`` before the first record.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Local Imports
from .behavioral_config import BehavioralConfig

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format shared by every handler a :class:`.Logger` attaches."""

LIBRARY_LOGGER_NAME: str = "simcore"
"""``str``: name of the logger that library errors are recorded to."""


def _logFileName(name: str) -> str:
    """Return a file name unique to `name` and the current time, safe on every platform."""
    stamp = datetime.now().isoformat().replace(":", "-").replace(".", "")
    return f"{name}_{stamp}.log"


class Logger:
    """Wraps a standard :class:`logging.Logger` with a configured handler.

    The logging level is (re)applied on every construction. A stdout or rotating file handler is
    only attached the first time, unless multiple handlers are allowed.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``): Name of the the logger instance
            level (``int``, optional): minimum level of published records. Defaults to the config.
            path (``str``, optional): directory for log files, or ``"stdout"``. Defaults to the
                config.
            allow_multiple_handlers (``bool``, optional): whether another handler may be attached
                to a logger that already has one. Defaults to the config.
        """
        settings = BehavioralConfig.getConfig().logging
        self.logger = logging.getLogger(name)
        self.logger.setLevel(settings.Level if level is None else level)

        self.filename = None
        if allow_multiple_handlers is None:
            allow_multiple_handlers = settings.AllowMultipleHandlers
        if self.logger.handlers and not allow_multiple_handlers:
            return

        handler = self._buildHandler(name, settings.OutputLocation if path is None else path)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(handler)

    def _buildHandler(self, name: str, path: str) -> logging.Handler:
        """Create a stdout handler, or a rotating file handler inside the `path` directory."""
        if path == "stdout":
            self.filename = "stdout"
            return logging.StreamHandler(sys.stdout)

        directory = Path(path)
        if not directory.exists():
            self.logger.info(f"Path did not exist: {path!r}. Creating path...")
            directory.mkdir(parents=True)

        self.filename = str(directory / _logFileName(name))
        settings = BehavioralConfig.getConfig().logging
        return RotatingFileHandler(
            self.filename,
            maxBytes=settings.MaxFileSize,
            backupCount=settings.MaxFileCount,
        )

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _simcoreLog(message: str, level: int):
    """Record `message` on the library logger at `level`.

    The logger is built through :class:`.Logger` so the configured level and handler apply.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    Logger(LIBRARY_LOGGER_NAME).log(msg=message, level=level)


def simcoreLogCritical(message: str):
    """Log a CRITICAL message to the library logger."""
    _simcoreLog(message, level=logging.CRITICAL)


def simcoreLogError(message: str):
    """Log an ERROR message to the library logger.

    See Also:
        :func:`._simcoreLog`
    """
    _simcoreLog(message, level=logging.ERROR)


def simcoreLogWarning(message: str):
    """Log a WARNING message to the library logger."""
    _simcoreLog(message, level=logging.WARNING)


def simcoreLogInfo(message: str):
    """Log an INFO message to the library logger."""
    _simcoreLog(message, level=logging.INFO)


def simcoreLogDebug(message: str):
    """Log a DEBUG message to the library logger."""
    _simcoreLog(message, level=logging.DEBUG)
