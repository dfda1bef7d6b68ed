"""
sentry_target.messages
~~~~~~~~~~~~~~~~~~~~~~

Messages are the records a target collects. Each one is converted from the
host's own record type as soon as it is collected, and its payload is
classified into one of three shapes:

- ``ErrorValue``: an exception instance
- ``StructuredPayload``: a mapping with a ``msg`` key
- ``PlainMessage``: anything else

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import calendar
import logging
import os.path
import traceback
from collections import namedtuple
from collections.abc import Mapping

from sentry_target import levels
from sentry_target.utils.encoding import force_text

__all__ = ('Message', 'ErrorValue', 'StructuredPayload', 'PlainMessage',
           'classify', 'from_record', 'from_logbook_record', 'get_traces')

Message = namedtuple('Message', 'context level category timestamp traces')


class ErrorValue(namedtuple('ErrorValue', 'error')):
    __slots__ = ()

    def get_description(self):
        return force_text(self.error)

    def get_extra(self):
        return {}


class StructuredPayload(namedtuple('StructuredPayload', 'payload')):
    __slots__ = ()

    def get_description(self):
        return self.payload['msg']

    def get_extra(self):
        return dict((k, v) for k, v in self.payload.items() if k != 'msg')


class PlainMessage(namedtuple('PlainMessage', 'message')):
    __slots__ = ()

    def get_description(self):
        return self.message

    def get_extra(self):
        return {}


def classify(context):
    if isinstance(context, BaseException):
        return ErrorValue(context)
    if isinstance(context, Mapping) and 'msg' in context:
        return StructuredPayload(context)
    return PlainMessage(context)


_skip_paths = (
    os.path.dirname(logging.__file__),
    os.path.dirname(os.path.abspath(__file__)),
)


def get_traces(trace_level, skip=()):
    """
    Returns up to ``trace_level`` frames of the current call stack, most
    recent call first. Frames from the logging machinery are left out.
    """
    if trace_level <= 0:
        return []

    skip = _skip_paths + tuple(skip)
    traces = []
    for frame in reversed(traceback.extract_stack()[:-1]):
        if os.path.abspath(frame.filename).startswith(skip):
            continue
        traces.append({
            'file': frame.filename,
            'line': frame.lineno,
            'function': frame.name,
        })
        if len(traces) >= trace_level:
            break
    return traces


def _get_context(msg, args, exc_info, formatted):
    if exc_info and exc_info[1] is not None:
        return exc_info[1]
    if isinstance(msg, (BaseException, Mapping)):
        return msg
    if args:
        return formatted()
    return msg


def from_record(record, trace_level=0):
    """
    Converts a ``logging.LogRecord``.
    """
    context = _get_context(record.msg, record.args, record.exc_info,
                           record.getMessage)

    return Message(
        context=context,
        level=record.levelno,
        category=record.name,
        timestamp=record.created,
        traces=get_traces(trace_level),
    )


def from_logbook_record(record, trace_level=0):
    """
    Converts a ``logbook.LogRecord``.
    """
    import logbook

    context = _get_context(record.msg, record.args or record.kwargs,
                           record.exc_info, lambda: record.message)

    timestamp = calendar.timegm(record.time.utctimetuple()) \
        + record.time.microsecond / 1e6

    return Message(
        context=context,
        level=levels.from_logbook(record.level),
        category=record.channel,
        timestamp=timestamp,
        traces=get_traces(trace_level, skip=(os.path.dirname(logbook.__file__),)),
    )
