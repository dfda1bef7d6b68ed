"""
sentry_target.utils
~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from contextlib import contextmanager

from sentry_target.levels import PROFILE_BEGIN, PROFILE_END


@contextmanager
def profile(logger, token):
    """
    Marks the beginning and end of a block of code for profiling.

    >>> with profile(logger, 'render.index'):
    >>>     render()
    """
    logger.log(PROFILE_BEGIN, token)
    try:
        yield
    finally:
        logger.log(PROFILE_END, token)
