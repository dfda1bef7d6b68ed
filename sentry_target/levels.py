"""
sentry_target.levels
~~~~~~~~~~~~~~~~~~~~

Severity codes understood by the targets, and their Sentry names.

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging

ERROR = logging.ERROR
WARNING = logging.WARNING
INFO = logging.INFO
TRACE = logging.DEBUG
PROFILE_BEGIN = 11
PROFILE_END = 12

logging.addLevelName(PROFILE_BEGIN, 'PROFILE_BEGIN')
logging.addLevelName(PROFILE_END, 'PROFILE_END')

LEVEL_NAMES = {
    ERROR: 'error',
    WARNING: 'warning',
    INFO: 'info',
    TRACE: 'debug',
    PROFILE_BEGIN: 'debug',
    PROFILE_END: 'debug',
}

# logbook level name -> host code
LOGBOOK_LEVELS = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': ERROR,
    'WARNING': WARNING,
    'NOTICE': INFO,
    'INFO': INFO,
    'DEBUG': TRACE,
    'TRACE': TRACE,
}


def get_level_name(level):
    """
    Returns the Sentry name of a host level. Unknown levels are reported
    as errors.
    """
    try:
        return LEVEL_NAMES.get(level, 'error')
    except TypeError:
        # unhashable
        return 'error'


def from_logbook(level):
    import logbook

    try:
        name = logbook.get_level_name(level)
    except LookupError:
        return level
    return LOGBOOK_LEVELS.get(name, level)
