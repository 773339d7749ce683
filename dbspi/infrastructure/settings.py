'''
Runtime settings for processes embedding dbspi.

Settings are read from the environment, with an optional .env file
in the working directory loaded first. Existing environment variables
take precedence over .env entries. Loading settings never logs;
configure_logging() applies them once they are loaded.
'''

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from dbspi.core import InvalidArgument, require_non_empty, require_non_null

__all__ = ['LOG_LEVEL_ENV', 'Settings', 'load_settings']

LOG_LEVEL_ENV = 'DBSPI_LOG_LEVEL'

_DEFAULT_LOG_LEVEL = 'INFO'
_LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


@dataclass(frozen=True)
class Settings:

    '''
    Process-wide dbspi settings.

    Args:
        log_level (str): Minimum log level, upper-cased on construction.
    '''

    log_level: str = _DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:

        '''Validate invariants at construction time.'''

        level = require_non_null(self.log_level, 'Settings.log_level must not be None')
        level = require_non_empty(level.strip(), 'Settings.log_level must be a non-empty string')
        level = level.upper()

        if level not in _LOG_LEVELS:
            msg = f"Settings.log_level must be one of {sorted(_LOG_LEVELS)}, got '{self.log_level}'"
            raise InvalidArgument(msg)

        object.__setattr__(self, 'log_level', level)


def load_settings(env: Mapping[str, str] | None = None) -> Settings:

    '''
    Build Settings from environment variables.

    Args:
        env (Mapping[str, str] | None): Variables to read, os.environ when None.
            A .env file is only loaded when reading os.environ.

    Returns:
        Settings: Validated settings

    Raises:
        InvalidArgument: If a variable is set to an empty or unknown value
    '''

    if env is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        env = os.environ

    return Settings(log_level=env.get(LOG_LEVEL_ENV, _DEFAULT_LOG_LEVEL))
