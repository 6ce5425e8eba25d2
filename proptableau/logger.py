import logging
import os
import sys

LOG_ENV = 'LOG'
DEFAULT_LEVEL = 'INFO'


def setup(debug_mode: bool = False) -> str:
    """
    Configure the root logger for command-line use and return the level name.

    The level comes from the LOG environment variable, INFO if unset.
    debug_mode forces DEBUG.
    """
    level = 'DEBUG' if debug_mode else os.environ.get(LOG_ENV, DEFAULT_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        level = DEFAULT_LEVEL

    logging.basicConfig(level=level, stream=sys.stderr, format='%(message)s', force=True)
    logging.getLogger(__name__).debug('logging level is %s', level)
    return level
