"""
sentry_target.client
~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import threading

from werkzeug.utils import import_string

DEFAULT_CLIENT = 'sentry_target.client.base.SentryClient'


class ClientProxy(object):
    """
    Builds the client on first use and forwards to it afterwards. The
    client is built at most once.
    """
    def __init__(self, path=DEFAULT_CLIENT, dsn=None, options=None):
        self.__path = path
        self.__dsn = dsn
        self.__options = options
        self.__client = None
        self.__lock = threading.Lock()

    def __getattr__(self, attr):
        return getattr(self.get_client(), attr)

    def __eq__(self, other):
        return self.get_client() == other

    __hash__ = object.__hash__

    @property
    def is_configured(self):
        return self.__client is not None

    def get_client(self):
        if self.__client is None:
            with self.__lock:
                if self.__client is None:
                    self.__client = get_client(self.__path, self.__dsn, self.__options)
        return self.__client

    def capture(self, *args, **kwargs):
        return self.get_client().capture(*args, **kwargs)

    def capture_exception(self, *args, **kwargs):
        return self.get_client().capture_exception(*args, **kwargs)


def get_client(path=DEFAULT_CLIENT, dsn=None, options=None):
    if isinstance(path, str):
        path = import_string(path)
    return path(dsn, options)
