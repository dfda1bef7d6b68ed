import functools
import unittest

from sentry_target.client.base import DummyClient
from sentry_target.conf import TargetConfig


def with_settings(**settings):
    def wrapped(func):
        @functools.wraps(func)
        def _wrapped(*args, **kwargs):
            defaults = {}
            for k, v in settings.items():
                defaults[k] = getattr(TargetConfig, k)
                setattr(TargetConfig, k, v)
            try:
                return func(*args, **kwargs)
            finally:
                for k, v in defaults.items():
                    setattr(TargetConfig, k, v)
        return _wrapped
    return wrapped


class RecordingClient(DummyClient):
    "Remembers every call instead of sending it"
    def __init__(self, *args, **kwargs):
        super(RecordingClient, self).__init__(*args, **kwargs)
        self.calls = []

    def capture(self, data, stack=None):
        self.calls.append(('capture', data, stack))

    def capture_exception(self, error, data):
        self.calls.append(('capture_exception', error, data))


class BaseTest(unittest.TestCase):
    def setUp(self):
        self.client = RecordingClient()
