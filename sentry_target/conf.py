"""
sentry_target.conf
~~~~~~~~~~~~~~~~~~

Represents the default values for all target settings.

:copyright: (c) 2010 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""

import logging
import os
import os.path

from flask import Config

from sentry_target import context


class TargetConfig(object):
    ROOT = os.path.normpath(os.path.join(os.path.dirname(__file__), os.pardir))

    ENABLED = True

    # The client key of the Sentry project
    DSN = None

    CLIENT = 'sentry_target.client.base.SentryClient'

    # Keyword arguments for sentry_sdk.Client
    CLIENT_OPTIONS = {}

    # Attach the request variables to each event as extra['context']
    CONTEXT = True

    # Callables (or import paths) of the form callback(context, data) -> data
    EXTRA_CALLBACK = None
    USER_CALLBACK = None

    # Number of records buffered before they are exported
    EXPORT_INTERVAL = 1000

    # Number of caller frames recorded with each record
    TRACE_LEVEL = 0

    LEVEL = logging.NOTSET

    # Logger names to export (all when empty) and to leave out. Wildcards
    # are allowed, e.g. 'myapp.db.*'
    CATEGORIES = []
    EXCEPT = []

    LOG_VARS = list(context.LOG_VARS)
    MASK_VARS = list(context.MASK_VARS)


def get_config(app=None, **overrides):
    """
    Loads the settings, in order: the defaults, the file named by
    ``SENTRY_TARGET_SETTINGS``, the ``SENTRY_TARGET_*`` keys of the Flask
    application, and ``overrides``.
    """
    config = Config(TargetConfig.ROOT)
    config.from_object(TargetConfig)
    config.from_envvar('SENTRY_TARGET_SETTINGS', silent=True)
    if app is not None:
        config.update(app.config.get_namespace('SENTRY_TARGET_', lowercase=False))
    config.update(overrides)
    return config
