import logging
import inspect
import time
import sys
from pdrt import Properties, isdebugging


class ExceptionRateLimitedLogAdaptor(logging.LoggerAdapter):
    '''Rate limit exception log adaptor.'''

    def __init__(self, logger, rlimit=None):
        """Constructor.

        Args:
            logger: A logger instance.
            rlimit: The rate limit value. Zero disables. If None then the default of pdrt.Properties.exception_rlimit
                is used.
        """
        super(ExceptionRateLimitedLogAdaptor, self).__init__(logger, {})
        self.error_cache = {}
        self.logger = logger
        self.rlimit = Properties.exception_rlimit if rlimit is None else rlimit
        self.last_update_time = time.time()

    def find_caller(self):
        if sys.exc_info()[2]:
            return sys.exc_info()[2].tb_frame.f_code.co_filename, sys.exc_info()[2].tb_lineno
        frmrec = inspect.stack()[2]
        return frmrec[1:4]

    def exception(self, msg, *args, **kwargs):
        """Logs an exception with rate limiting when from the same exception source. Arguments are the same as for
        logger function of the same name except one extra keyword argument allows extra information to be used to
        determine the exception source.

        Args:
            msg: The error message
            rlimitby: Extra keyword argument to uniquely define the exception source. The default is file name, line
                number, and exception type.
        """
        extra = kwargs.pop('rlimitby', '')
        if self.rlimit > 0:
            exc_info = kwargs.get('exc_info')
            caller = self.find_caller()
            if not isinstance(exc_info, Exception):
                callerid = "%s:%s:%s" % (caller[0], caller[1], extra)
            else:
                callerid = "%s:%s:%d:%s" % (type(exc_info).__name__, caller[0], caller[1], extra)
            del caller  # prevent GC issues - see traceback source

            tmnew = time.time()

            # Regularly clear cache to recover memory
            if (tmnew - self.last_update_time) > (2*self.rlimit):
                self.error_cache = {}
            self.last_update_time = tmnew

            if callerid in self.error_cache:
                tmold = self.error_cache[callerid]
                self.error_cache[callerid] = tmnew
                tmdiff = tmnew - tmold
                # If tmdiff < 0 then the system clock has changed
                if tmdiff < self.rlimit and tmdiff >= 0:
                    return
            else:
                self.error_cache[callerid] = tmnew
        super(ExceptionRateLimitedLogAdaptor, self).exception(msg, *args, **kwargs)


def set_log_format(log_handler):
    """Make some attempt to comply with RFC5424 and java."""
    formatter = logging.Formatter(fmt='%(levelname)s %(asctime)s %(name)s %(process)d - %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S%z')
    log_handler.setFormatter(formatter)


def setup_debug_logging():
    """Setup logging for scripts and debugging"""
    root_logger = logging.getLogger('pdrt')
    log_level = logging.DEBUG if isdebugging() else logging.INFO
    root_logger.setLevel(log_level)
    console_handler = logging.StreamHandler()
    set_log_format(console_handler)
    root_logger.addHandler(console_handler)
    return root_logger
