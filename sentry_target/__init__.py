"""
sentry_target
~~~~~~~~~~~~~

Forwards application log records to Sentry.

A target sits behind a host logging subsystem (the standard library's
``logging``, logbook, or a Flask application's logger). The host collects
and buffers records; when it flushes, each record is turned into a Sentry
event and handed to a remote client:

- records carrying an exception are sent with ``capture_exception`` so the
  client can extract the native stack trace
- records whose payload is a mapping with a ``msg`` key use ``msg`` as the
  message, and every other key becomes extra data
- anything else is sent as a plain message

Delivery, retries and queuing are left to the client library.

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

try:
    VERSION = __import__('importlib.metadata', fromlist=['version']) \
        .version('sentry-target')
except Exception:
    VERSION = 'unknown'
