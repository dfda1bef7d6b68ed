"""
sentry_target.client.logging
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging

from sentry_target.client.base import SentryClient


class LoggingSentryClient(SentryClient):
    """
    Writes events to a local logger instead of sending them to Sentry.
    """
    logger_name = 'sentry_target.events'
    default_level = logging.ERROR

    def __init__(self, *args, **kwargs):
        super(LoggingSentryClient, self).__init__(*args, **kwargs)
        self.logger = logging.getLogger(self.logger_name)

    def get_remote(self):
        return None

    def capture_exception(self, error, data):
        event = self.build_event(data)
        exc_info = (type(error), error, error.__traceback__)
        return self.send(event, hint={'exc_info': exc_info})

    def send(self, event, hint=None):
        level = logging.getLevelName(event['level'].upper())
        if not isinstance(level, int):
            level = self.default_level

        exc_info = (hint or {}).get('exc_info')

        self.logger.log(level, event['message'], exc_info=exc_info,
                        extra={'event': event})
