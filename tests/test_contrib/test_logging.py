from .. import BaseTest, RecordingClient

import logging
import sys
from unittest import mock

from sentry_target import levels
from sentry_target.client import ClientProxy
from sentry_target.handlers import CategoryFilter, SentryHandler


class LoggingTest(BaseTest):
    def setUp(self):
        super(LoggingTest, self).setUp()
        self.logger = logging.getLogger('tests.test_contrib.test_logging')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self.handlers = []

    def tearDown(self):
        for handler in self.handlers:
            self.logger.removeHandler(handler)

    def add_handler(self, **kwargs):
        kwargs.setdefault('client', self.client)
        kwargs.setdefault('context', False)
        handler = SentryHandler(**kwargs)
        self.logger.addHandler(handler)
        self.handlers.append(handler)
        return handler

    def test_simple(self):
        handler = self.add_handler()

        self.logger.info('foo')
        self.assertEqual(self.client.calls, [])

        handler.flush()

        self.assertEqual(len(self.client.calls), 1)
        method, event, stack = self.client.calls[0]
        self.assertEqual(method, 'capture')
        self.assertEqual(event['message'], 'foo')
        self.assertEqual(event['level'], 'info')
        self.assertEqual(event['tags'], {'category': 'tests.test_contrib.test_logging'})
        self.assertEqual(event['extra'], {})
        self.assertEqual(stack, [])
        self.assertEqual(handler.buffer, [])

    def test_levels(self):
        handler = self.add_handler()

        self.logger.debug('trace')
        self.logger.warning('warning')
        self.logger.error('error')
        self.logger.critical('critical')
        self.logger.log(levels.PROFILE_BEGIN, 'begin')
        handler.flush()

        self.assertEqual([c[1]['level'] for c in self.client.calls],
                         ['debug', 'warning', 'error', 'error', 'debug'])

    def test_exception(self):
        handler = self.add_handler()

        try:
            raise ValueError('foo')
        except ValueError:
            self.logger.exception('foo bar')
        handler.flush()

        method, error, event = self.client.calls[0]
        self.assertEqual(method, 'capture_exception')
        self.assertTrue(isinstance(error, ValueError))
        self.assertEqual(event['message'], 'foo')
        self.assertEqual(event['level'], 'error')

    def test_structured(self):
        handler = self.add_handler()

        self.logger.warning({'msg': 'disk full', 'code': 7})
        handler.flush()

        method, event, stack = self.client.calls[0]
        self.assertEqual(method, 'capture')
        self.assertEqual(event['message'], 'disk full')
        self.assertEqual(event['extra'], {'code': 7})

    def test_flushes_at_capacity(self):
        self.add_handler(capacity=2)

        self.logger.info('foo')
        self.assertEqual(len(self.client.calls), 0)
        self.logger.info('bar')
        self.assertEqual([c[1]['message'] for c in self.client.calls], ['foo', 'bar'])

    def test_flushes_on_close(self):
        handler = self.add_handler()
        self.logger.info('foo')
        handler.close()
        self.assertEqual(len(self.client.calls), 1)

    def test_close_flushes_client(self):
        handler = self.add_handler()
        with mock.patch.object(self.client, 'flush') as flush:
            handler.close()
        flush.assert_called_once_with()

    def test_close_skips_unbuilt_client(self):
        handler = SentryHandler(client_class='sentry_target.client.base.DummyClient')
        handler.close()
        self.assertFalse(handler.client.is_configured)

    def test_callbacks(self):
        handler = self.add_handler(
            extra_callback=lambda context, extra: dict(extra, request_id='abc'),
            user_callback=lambda context, user: {'id': 1},
        )
        self.logger.info('foo')
        handler.flush()

        event = self.client.calls[0][1]
        self.assertEqual(event['extra'], {'request_id': 'abc'})
        self.assertEqual(event['user'], {'id': 1})

    def test_context_outside_request(self):
        handler = self.add_handler(context=True)
        self.logger.info('foo')
        handler.flush()
        self.assertEqual(self.client.calls[0][1]['extra'], {'context': ''})

    def test_trace_level(self):
        handler = self.add_handler(trace_level=1)
        self.logger.info('foo')
        handler.flush()

        stack = self.client.calls[0][2]
        self.assertEqual(len(stack), 1)
        self.assertEqual(stack[0]['function'], 'test_trace_level')

    def test_disabled(self):
        handler = self.add_handler(enabled=False)
        self.logger.error('foo')
        handler.flush()
        self.assertEqual(self.client.calls, [])

    def test_categories(self):
        handler = self.add_handler(categories=['tests.*'],
                                   except_categories=['tests.test_contrib.test_logging.db'])
        self.logger.info('foo')
        db = logging.getLogger('tests.test_contrib.test_logging.db')
        db.setLevel(logging.DEBUG)
        db.error('bar')
        handler.flush()
        self.assertEqual([c[1]['message'] for c in self.client.calls], ['foo'])

    def test_internal_records_are_ignored(self):
        handler = self.add_handler()
        record = logging.LogRecord('sentry_target.client', logging.ERROR, __file__, 1,
                                   'unable to reach server', None, None)
        with mock.patch.object(sys, 'stderr'):
            handler.handle(record)
        self.assertEqual(handler.buffer, [])

    def test_client_errors_propagate(self):
        handler = self.add_handler()
        self.logger.info('foo')
        with mock.patch.object(RecordingClient, 'capture', side_effect=IOError):
            self.assertRaises(IOError, handler.flush)
        # the failed batch is not sent again
        handler.flush()
        self.assertEqual(self.client.calls, [])


class LazyClientTest(BaseTest):
    def test_client_built_on_first_record(self):
        handler = SentryHandler(client_class='sentry_target.client.base.DummyClient',
                                dsn='https://key@sentry.example.com/1',
                                client_options={'release': '1.0'})
        self.assertTrue(isinstance(handler.client, ClientProxy))
        self.assertFalse(handler.client.is_configured)

        record = logging.LogRecord('app', logging.INFO, __file__, 1, 'foo', None, None)
        handler.handle(record)
        self.assertTrue(handler.client.is_configured)

        client = handler.client.get_client()
        self.assertEqual(client.dsn, 'https://key@sentry.example.com/1')
        self.assertEqual(client.options, {'release': '1.0'})

        handler.handle(record)
        self.assertTrue(handler.client.get_client() is client)

    def test_from_config(self):
        handler = SentryHandler.from_config({
            'DSN': 'https://key@sentry.example.com/1',
            'CLIENT': 'sentry_target.client.base.DummyClient',
            'EXPORT_INTERVAL': 10,
            'CONTEXT': False,
            'EXTRA_CALLBACK': 'tests.test_export.replace_extra',
            'LEVEL': logging.WARNING,
        })
        self.assertEqual(handler.capacity, 10)
        self.assertEqual(handler.level, logging.WARNING)
        self.assertFalse(handler.exporter.context)
        self.assertTrue(handler.exporter.extra_callback is not None)
        self.assertTrue(handler.exporter.user_callback is None)


class CategoryFilterTest(BaseTest):
    def make_record(self, name):
        return logging.LogRecord(name, logging.INFO, __file__, 1, 'foo', None, None)

    def test_all(self):
        self.assertTrue(CategoryFilter().filter(self.make_record('app')))

    def test_categories(self):
        filter_ = CategoryFilter(['app.*', 'worker'])
        self.assertTrue(filter_.filter(self.make_record('app.views')))
        self.assertTrue(filter_.filter(self.make_record('worker')))
        self.assertFalse(filter_.filter(self.make_record('worker.tasks')))
        self.assertFalse(filter_.filter(self.make_record('db')))

    def test_except(self):
        filter_ = CategoryFilter(except_categories=['app.db.*'])
        self.assertTrue(filter_.filter(self.make_record('app.views')))
        self.assertFalse(filter_.filter(self.make_record('app.db.query')))
