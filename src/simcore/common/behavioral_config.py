"""Defines the global settings that control how the library logs.

Settings are read once from an INI-style file, either the packaged ``default_behavior.config`` or
the file named by the ``SIMCORE_BEHAVIOR_CONFIG`` environment variable, and exposed as
``BehavioralConfig.getConfig().<section>.<Option>``.
"""

from __future__ import annotations

# Standard Library Imports
import os
from configparser import ConfigParser
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any, Final


CONFIG_ENV_VARIABLE: str = "SIMCORE_BEHAVIOR_CONFIG"
"""``str``: environment variable that points to a user-provided config file."""


class SubConfig:
    """Attribute-style view of a single config section.

    Options may be assigned after loading to override the file, e.g.
    ``BehavioralConfig.getConfig().logging.Level = logging.INFO``.
    """

    def __init__(self, section: str, options: dict[str, Any]):
        """Instantiate a `SubConfig` object.

        Args:
            section (``str``): name of the section this object represents
            options (``dict``): parsed option values, keyed by option name
        """
        if not isinstance(section, str):
            raise TypeError("Config section must be a string")
        self.section = section
        for name, value in options.items():
            setattr(self, name, value)

    def __repr__(self):
        """Return a string representation of this :class:`.SubConfig`."""
        options = {key: value for key, value in vars(self).items() if key != "section"}
        return f"SubConfig({self.section!r}, {options!r})"


class LevelConfigParser(ConfigParser):
    """:class:`.ConfigParser` that understands logging level names."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str, *, fallback: int = NOTSET) -> int:
        """Return the numeric logging level named by `option`, or `fallback` if it's missing."""
        name = self.get(section, option, fallback=None)
        if name is None:
            return fallback
        return self.LOGGING_LEVELS.get(name.strip().upper(), fallback)


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    OPTIONS: Final[dict[str, dict[str, tuple[str, Any]]]] = {
        "logging": {
            "OutputLocation": ("get", "stdout"),
            "Level": ("getlogginglevel", DEBUG),
            "MaxFileSize": ("getint", 1048576),
            "MaxFileCount": ("getint", 50),
            "AllowMultipleHandlers": ("getboolean", False),
        },
    }
    """``dict``: parser getter name and default value for every option, grouped by section."""

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Load the settings and make this object the shared config.

        Args:
            config_file_path (``str``, optional): path to a custom config file. Defaults to
                ``None``, which reads the packaged default config file. A path that doesn't exist
                leaves every option at its default.
        """
        parser = LevelConfigParser()
        if config_file_path is None:
            res = resources.files("simcore.common").joinpath(self.DEFAULT_CONFIG_FILE)
            parser.read_string(res.read_text(encoding="utf-8"))
        elif Path(config_file_path).exists():
            parser.read(config_file_path, encoding="utf-8")

        for section, options in self.OPTIONS.items():
            values = {
                option: getattr(parser, getter)(section, option, fallback=default)
                for option, (getter, default) in options.items()
            }
            setattr(self, section, SubConfig(section, values))

        BehavioralConfig.__shared_inst = self

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config.

        The first call builds the config from `config_file_path`, falling back to the file named
        by the ``SIMCORE_BEHAVIOR_CONFIG`` environment variable, then to the packaged defaults.
        """
        if cls.__shared_inst is None:
            config_file_path = config_file_path or os.environ.get(CONFIG_ENV_VARIABLE) or None
            cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path)

        return cls.__shared_inst
