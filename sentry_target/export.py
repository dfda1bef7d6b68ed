"""
sentry_target.export
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from werkzeug.utils import import_string

from sentry_target.levels import get_level_name
from sentry_target.messages import ErrorValue, classify


def resolve_callback(value):
    """
    Returns the callable configured by ``value`` or ``None`` if there is
    none. Strings are treated as import paths.
    """
    if isinstance(value, str):
        value = import_string(value)
    if callable(value):
        return value
    return None


class Exporter(object):
    """
    Turns collected messages into Sentry events and hands them to a client.

    :param context: add the host context snapshot as ``extra['context']``
    :param extra_callback: ``callback(context, extra)`` returning the extra
                           data to send in place of ``extra``
    :param user_callback: ``callback(context, user)`` returning the user
                          data to send in place of ``user``
    :param get_context_message: returns the host context snapshot
    """
    def __init__(self, context=True, extra_callback=None, user_callback=None,
                 get_context_message=None):
        self.context = context
        self.extra_callback = resolve_callback(extra_callback)
        self.user_callback = resolve_callback(user_callback)
        self.get_context_message = get_context_message

    def get_context(self):
        if self.get_context_message is None:
            return ''
        return self.get_context_message()

    def format(self, message):
        """
        Returns ``(event, error)`` for a single message, where ``error`` is
        the exception to capture or ``None``.
        """
        context = message.context
        payload = classify(context)

        extra = payload.get_extra()
        user = {}

        if self.context:
            extra['context'] = self.get_context()

        if self.extra_callback is not None:
            extra = self.extra_callback(context, extra)

        if self.user_callback is not None:
            user = self.user_callback(context, user)

        event = {
            'level': get_level_name(message.level),
            'timestamp': message.timestamp,
            'message': payload.get_description(),
            'extra': extra,
            'user': user,
            'tags': {
                'category': message.category,
            },
        }

        if isinstance(payload, ErrorValue):
            return event, payload.error
        return event, None

    def export(self, messages, client):
        for message in messages:
            event, error = self.format(message)
            if error is not None:
                client.capture_exception(error, event)
            else:
                client.capture(event, message.traces)
