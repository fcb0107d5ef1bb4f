import unittest
import logging
import time
from pdrt import log, Properties
from ..pdrs import PDRS, PCond, PNeg, PRef, PDRSRef, projection_graph


class TestHandler(logging.Handler):
    def __init__(self, *args, **kwargs):
        super(TestHandler, self).__init__(*args, **kwargs)
        self.buffer = []
    def emit(self, record):
        self.buffer.append(record.msg)


class LogTest(unittest.TestCase):

    def test1_std_logging(self):
        actual_logger = logging.getLogger('test1')
        actual_logger.setLevel(logging.DEBUG)
        handler = TestHandler()
        actual_logger.addHandler(handler)
        logger = log.ExceptionRateLimitedLogAdaptor(actual_logger)
        self.assertEqual(Properties.exception_rlimit, logger.rlimit)
        logger.debug('debug')
        logger.info('info')
        logger.warning('warning')
        logger.error('error')
        logger.exception('exception')
        expected = [
            'debug',
            'info',
            'warning',
            'error',
            'exception'
        ]
        self.assertListEqual(expected, handler.buffer)
        actual_logger.removeHandler(handler)

    def test2_rate_limited_logging(self):
        actual_logger = logging.getLogger('test2')
        actual_logger.setLevel(logging.DEBUG)
        handler = TestHandler()
        actual_logger.addHandler(handler)
        logger = log.ExceptionRateLimitedLogAdaptor(actual_logger, 0.5)
        logger.debug('debug')
        for i in range(3):
            logger.exception('exception%d' % (1+i))
            if i == 1:
                time.sleep(1.0)
        expected = [
            'debug',
            'exception1',
            'exception3'
        ]
        self.assertListEqual(expected, handler.buffer)
        actual_logger.removeHandler(handler)

    def test3_rate_limited_by_source(self):
        actual_logger = logging.getLogger('test3')
        actual_logger.setLevel(logging.DEBUG)
        handler = TestHandler()
        actual_logger.addHandler(handler)
        logger = log.ExceptionRateLimitedLogAdaptor(actual_logger, 0.5)
        for i in range(3):
            try:
                raise TypeError('x%d' % i)
            except TypeError as e:
                logger.exception('exception%d' % (1+i), exc_info=e)
            if i == 1:
                time.sleep(1.0)
        self.assertListEqual(['exception1', 'exception3'], handler.buffer)
        handler.buffer = []
        for i in range(3):
            try:
                raise TypeError('x%d' % i)
            except TypeError as e:
                logger.exception('exception%d' % (1+i), exc_info=e, rlimitby='x%d' % i)
        self.assertListEqual(['exception1', 'exception2', 'exception3'], handler.buffer)
        actual_logger.removeHandler(handler)

    def test4_rate_limit_disabled(self):
        actual_logger = logging.getLogger('test4')
        actual_logger.setLevel(logging.DEBUG)
        handler = TestHandler()
        actual_logger.addHandler(handler)
        logger = log.ExceptionRateLimitedLogAdaptor(actual_logger, 0)
        for i in range(3):
            logger.exception('exception%d' % (1+i))
        self.assertListEqual(['exception1', 'exception2', 'exception3'], handler.buffer)
        actual_logger.removeHandler(handler)

    def test5_log_format(self):
        handler = TestHandler()
        log.set_log_format(handler)
        record = logging.LogRecord('pdrt.x', logging.INFO, __file__, 1, 'hello', None, None)
        s = handler.format(record)
        self.assertTrue(s.startswith('INFO '))
        self.assertTrue(s.endswith(' pdrt.x %d - hello' % record.process))

    def test6_setup_debug_logging(self):
        root_logger = log.setup_debug_logging()
        try:
            self.assertEqual('pdrt', root_logger.name)
            self.assertEqual(logging.INFO, root_logger.level)
            self.assertIsInstance(root_logger.handlers[-1], logging.StreamHandler)
        finally:
            root_logger.removeHandler(root_logger.handlers[-1])
            root_logger.setLevel(logging.NOTSET)

    def test7_projection_graph_logging(self):
        actual_logger = logging.getLogger('pdrt.pdrs')
        actual_logger.setLevel(logging.DEBUG)
        handler = TestHandler()
        actual_logger.addHandler(handler)
        try:
            d = PDRS(1, [], [PRef(1, PDRSRef('x'))], [PCond(1, PNeg(PDRS(2, [], [], [])))])
            projection_graph(d)
            self.assertListEqual(['projection graph has %d nodes and %d edges'], handler.buffer)
        finally:
            actual_logger.removeHandler(handler)
            actual_logger.setLevel(logging.NOTSET)


if __name__ == '__main__':
    unittest.main()
