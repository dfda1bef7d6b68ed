"""
sentry_target.client.base
~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import datetime
import logging

import sentry_sdk
from sentry_sdk.utils import event_from_exception

from sentry_target.utils.encoding import force_text


class SentryClient(object):
    """
    Sends exported events to Sentry using ``sentry_sdk``.

    :param dsn: the project's client key
    :param options: keyword options for ``sentry_sdk.Client``
    """
    def __init__(self, dsn=None, options=None):
        self.dsn = dsn
        self.options = dict(options or {})
        self.logger = logging.getLogger('sentry_target.client')
        self.remote = self.get_remote()

    def get_remote(self):
        self.logger.debug('Configuring Sentry client for %s', self.dsn)
        return sentry_sdk.Client(self.dsn, **self.options)

    def build_event(self, data):
        """
        Converts an exported event into a Sentry event.
        """
        event = {
            'level': data.get('level') or 'error',
            'message': force_text(data.get('message')),
            'extra': data.get('extra') or {},
            'user': data.get('user') or {},
            'tags': dict(data.get('tags') or {}),
        }

        timestamp = data.get('timestamp')
        if timestamp is not None:
            event['timestamp'] = datetime.datetime.fromtimestamp(
                timestamp, datetime.timezone.utc)

        category = event['tags'].get('category')
        if category:
            event['logger'] = force_text(category)

        return event

    def get_frames(self, stack):
        # traces are most recent first, Sentry wants the oldest frame first
        return [{
            'filename': frame.get('file'),
            'abs_path': frame.get('file'),
            'lineno': frame.get('line'),
            'function': frame.get('function'),
        } for frame in reversed(stack)]

    def capture(self, data, stack=None):
        """
        Captures a message event.

        >>> capture({'level': 'info', 'message': 'foo', 'tags': {'category': 'app'}})

        :param data: the exported event
        :param stack: a list of trace frames, most recent call first
        :return: the event id, if the event was sent
        """
        event = self.build_event(data)
        if stack:
            event['stacktrace'] = {'frames': self.get_frames(stack)}
        return self.send(event)

    def capture_exception(self, error, data):
        """
        Captures an exception event. The stack trace is taken from the
        exception itself.
        """
        event, hint = event_from_exception(error, client_options=self.remote.options)
        event.update(self.build_event(data))
        return self.send(event, hint=hint)

    def send(self, event, hint=None):
        "Sends the event to the server."
        return self.remote.capture_event(event, hint=hint)

    def flush(self, timeout=None):
        if self.remote is not None:
            self.remote.flush(timeout=timeout)


class DummyClient(SentryClient):
    "Sends events into an empty void"
    def get_remote(self):
        return None

    def capture_exception(self, error, data):
        return self.send(self.build_event(data))

    def send(self, event, hint=None):
        return None
