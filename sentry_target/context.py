"""
sentry_target.context
~~~~~~~~~~~~~~~~~~~~~

Renders the variables of the current request so they can be attached to
events as ``extra['context']``.

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from fnmatch import fnmatchcase

import simplejson
from flask import has_request_context, request, session

LOG_VARS = ('args', 'form', 'files', 'cookies', 'session', 'environ')

MASK_VARS = (
    'environ.HTTP_AUTHORIZATION',
    'environ.HTTP_COOKIE',
    'form.password',
    'cookies.session',
)

MASK = '***'


def _get_var(name):
    if name == 'args':
        return request.args.to_dict()
    if name == 'form':
        return request.form.to_dict()
    if name == 'files':
        return dict((k, v.filename) for k, v in request.files.items())
    if name == 'cookies':
        return dict(request.cookies)
    if name == 'session':
        return dict(session)
    if name == 'environ':
        return dict(request.environ)
    return {}


def mask(name, values, mask_vars):
    for key in values:
        path = '%s.%s' % (name, key)
        if any(fnmatchcase(path, pattern) for pattern in mask_vars):
            values[key] = MASK
    return values


def get_context_message(log_vars=LOG_VARS, mask_vars=MASK_VARS):
    """
    Returns the request variables in ``log_vars`` as text, one block per
    variable. Values matching a ``mask_vars`` pattern (``environ.HTTP_*``)
    are hidden. Returns an empty string outside of a request.
    """
    if not has_request_context():
        return ''

    result = []
    for name in log_vars:
        values = mask(name, _get_var(name), mask_vars)
        if not values:
            continue
        result.append('%s = %s' % (name, simplejson.dumps(
            values, indent=4, sort_keys=True, default=repr)))

    return '\n\n'.join(result)
