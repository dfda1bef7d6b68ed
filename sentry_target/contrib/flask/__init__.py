"""
sentry_target.contrib.flask
~~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

from sentry_target.conf import get_config
from sentry_target.handlers import SentryHandler


class SentryTarget(object):
    """
    Exports the records of ``app.logger`` to Sentry. Records are flushed
    at the end of each request.

    >>> app = Flask(__name__)
    >>> app.config['SENTRY_TARGET_DSN'] = 'https://key@sentry.example.com/1'
    >>> SentryTarget(app)

    Settings may also be passed as keyword arguments (``CONTEXT=False``),
    and an existing client as ``client``.
    """
    def __init__(self, app=None, client=None, **overrides):
        self.client = client
        self.overrides = overrides
        self.handler = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        config = get_config(app, **self.overrides)

        self.handler = SentryHandler.from_config(config, client=self.client)
        app.logger.addHandler(self.handler)
        app.teardown_request(self.flush)

        app.extensions['sentry_target'] = self

    def flush(self, exc=None):
        self.handler.flush()
