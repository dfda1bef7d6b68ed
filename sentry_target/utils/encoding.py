"""
sentry_target.utils.encoding
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

# Adopted from Django
import datetime
from decimal import Decimal


def is_protected_type(obj):
    """Determine if the object instance is of a protected type.

    Objects of protected types are preserved as-is when passed to
    force_text(strings_only=True).
    """
    return obj is None or isinstance(obj, (
        int,
        datetime.datetime, datetime.date, datetime.time,
        float, Decimal)
    )


def force_text(s, encoding='utf-8', strings_only=False, errors='strict'):
    """
    Returns a text representation of ``s``.

    If strings_only is True, don't convert (some) non-string-like objects.
    """
    # Handle the common case first
    if isinstance(s, str):
        return s
    if strings_only and is_protected_type(s):
        return s
    if isinstance(s, bytes):
        return s.decode(encoding, errors)
    try:
        return str(s)
    except UnicodeDecodeError:
        if not isinstance(s, BaseException):
            raise
        # If we get to here, the caller has passed in an Exception
        # subclass populated with undecodable bytestring data. Try to
        # handle this without raising a further exception by individually
        # forcing the exception args to text.
        return ' '.join([force_text(arg, encoding, strings_only, 'replace')
                         for arg in s.args])
