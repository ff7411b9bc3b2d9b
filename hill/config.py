"""Configuration module."""

import dataclasses
import logging
import os
from configparser import ConfigParser

from hill.consts import CONF_NAME, ENV_CONF, SECTION_PREFERENCES

OPTION_LOG_LEVEL = 'LogLevel'
OPTION_WORKERS = 'Workers'
OPTION_UPPERCASE = 'Uppercase'

config = {
    SECTION_PREFERENCES: {
        OPTION_LOG_LEVEL: 'WARNING',
        OPTION_WORKERS: '1',
        OPTION_UPPERCASE: 'no',
    },
}


@dataclasses.dataclass(frozen=True)
class Preferences:
    """Values read from the preferences file."""

    log_level: str
    workers: int
    uppercase: bool


def default_path() -> str:
    return os.environ.get(ENV_CONF) or os.path.join(os.path.dirname(__file__), CONF_NAME)


def read(path: str) -> Preferences:
    """Read `path`, falling back to defaults for missing or invalid options."""
    parser = ConfigParser(allow_no_value=True, strict=False, interpolation=None)

    parser.read(path)

    for section, option_default in config.items():
        if not parser.has_section(section):
            parser[section] = option_default
            continue
        for option, default in option_default.items():
            if parser.has_option(section, option) and parser[section][option]:
                if default not in ('yes', 'no'):
                    continue
                if parser[section][option].lower() in parser.BOOLEAN_STATES:
                    continue
            parser[section][option] = default

    preferences = parser[SECTION_PREFERENCES]

    log_level = preferences[OPTION_LOG_LEVEL].upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = config[SECTION_PREFERENCES][OPTION_LOG_LEVEL]

    try:
        workers = max(1, preferences.getint(OPTION_WORKERS))
    except ValueError:
        workers = 1

    return Preferences(
        log_level=log_level,
        workers=workers,
        uppercase=preferences.getboolean(OPTION_UPPERCASE),
    )


_preferences = read(default_path())

LOG_LEVEL = _preferences.log_level
WORKERS = _preferences.workers
UPPERCASE = _preferences.uppercase
