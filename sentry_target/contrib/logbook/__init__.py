"""
sentry_target.contrib.logbook
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import sys

import logbook

from sentry_target.client import DEFAULT_CLIENT, ClientProxy
from sentry_target.export import Exporter
from sentry_target.handlers import is_internal
from sentry_target.messages import from_logbook_record


class SentryHandler(logbook.Handler):
    """
    Exports logbook records to Sentry. Batches, e.g. from a
    ``logbook.GroupHandler``, are exported in order.
    """
    def __init__(self, dsn=None, client_options=None, context=True,
                 extra_callback=None, user_callback=None, client=None,
                 client_class=DEFAULT_CLIENT, trace_level=0,
                 get_context_message=None, level=logbook.NOTSET, filter=None,
                 bubble=False):
        super(SentryHandler, self).__init__(level, filter, bubble)

        if client is None:
            client = ClientProxy(client_class, dsn, client_options)
        self.client = client
        self.trace_level = trace_level

        self.exporter = Exporter(
            context=context,
            extra_callback=extra_callback,
            user_callback=user_callback,
            get_context_message=get_context_message,
        )

    def collect(self, records):
        messages = []
        for record in records:
            if is_internal(record.channel):
                print("Recursive log message sent to SentryHandler", file=sys.stderr)
                print(record.message, file=sys.stderr)
                continue
            messages.append(from_logbook_record(record, self.trace_level))

        if messages and isinstance(self.client, ClientProxy):
            self.client.get_client()
        return messages

    def emit(self, record):
        self.emit_batch([record], 'emit')

    def emit_batch(self, records, reason):
        messages = self.collect(records)
        if messages:
            self.exporter.export(messages, self.client)
