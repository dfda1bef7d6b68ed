"""
sentry_target.handlers
~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging
import sys
from fnmatch import fnmatchcase
from logging.handlers import BufferingHandler

from sentry_target import context as request_context
from sentry_target.client import DEFAULT_CLIENT, ClientProxy
from sentry_target.export import Exporter
from sentry_target.messages import from_record


def is_internal(name):
    return name == 'sentry_target' or name.startswith('sentry_target.')


class CategoryFilter(logging.Filter):
    """
    Lets through records whose logger name matches one of ``categories``
    (all of them when empty) and none of ``except_categories``. Patterns
    may use wildcards, e.g. ``app.db.*``.
    """
    def __init__(self, categories=(), except_categories=()):
        super(CategoryFilter, self).__init__()
        self.categories = list(categories)
        self.except_categories = list(except_categories)

    def matches(self, name, patterns):
        return any(fnmatchcase(name, pattern) for pattern in patterns)

    def filter(self, record):
        if self.categories and not self.matches(record.name, self.categories):
            return False
        return not self.matches(record.name, self.except_categories)


class SentryHandler(BufferingHandler):
    """
    Collects records and exports them to Sentry whenever ``capacity``
    records are buffered, and when the handler is flushed or closed.
    """
    def __init__(self, dsn=None, client_options=None, context=True,
                 extra_callback=None, user_callback=None, client=None,
                 client_class=DEFAULT_CLIENT, capacity=1000, trace_level=0,
                 log_vars=request_context.LOG_VARS,
                 mask_vars=request_context.MASK_VARS, categories=(),
                 except_categories=(), enabled=True, level=logging.NOTSET):
        super(SentryHandler, self).__init__(capacity)
        self.setLevel(level)

        if client is None:
            client = ClientProxy(client_class, dsn, client_options)
        self.client = client
        self.trace_level = trace_level
        self.enabled = enabled
        self.log_vars = log_vars
        self.mask_vars = mask_vars

        self.exporter = Exporter(
            context=context,
            extra_callback=extra_callback,
            user_callback=user_callback,
            get_context_message=self.get_context_message,
        )

        if categories or except_categories:
            self.addFilter(CategoryFilter(categories, except_categories))

    @classmethod
    def from_config(cls, config, **kwargs):
        options = dict(
            dsn=config.get('DSN'),
            client_options=config.get('CLIENT_OPTIONS'),
            context=config.get('CONTEXT', True),
            extra_callback=config.get('EXTRA_CALLBACK'),
            user_callback=config.get('USER_CALLBACK'),
            client_class=config.get('CLIENT', DEFAULT_CLIENT),
            capacity=config.get('EXPORT_INTERVAL', 1000),
            trace_level=config.get('TRACE_LEVEL', 0),
            log_vars=config.get('LOG_VARS', request_context.LOG_VARS),
            mask_vars=config.get('MASK_VARS', request_context.MASK_VARS),
            categories=config.get('CATEGORIES', ()),
            except_categories=config.get('EXCEPT', ()),
            enabled=config.get('ENABLED', True),
            level=config.get('LEVEL', logging.NOTSET),
        )
        options.update(kwargs)
        return cls(**options)

    def get_context_message(self):
        return request_context.get_context_message(self.log_vars, self.mask_vars)

    def emit(self, record):
        # Avoid typical config issues by overriding loggers behavior
        if is_internal(record.name):
            print("Recursive log message sent to SentryHandler", file=sys.stderr)
            print(record.getMessage(), file=sys.stderr)
            return

        if not self.enabled:
            return

        if isinstance(self.client, ClientProxy):
            self.client.get_client()

        self.buffer.append(from_record(record, self.trace_level))
        if self.shouldFlush(record):
            self.flush()

    def flush(self):
        self.acquire()
        try:
            messages, self.buffer = self.buffer, []
            if messages:
                self.exporter.export(messages, self.client)
        finally:
            self.release()

    def close(self):
        self.acquire()
        try:
            self.flush()
            if not isinstance(self.client, ClientProxy) or self.client.is_configured:
                self.client.flush()
        finally:
            self.release()
        super(SentryHandler, self).close()
