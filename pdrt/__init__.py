import inspect


class Properties(object):
    """Global properties used by sub-modules"""
    # Exception rate limit. Exceptions of the same type, from same caller and line number are
    # are rate limited to 1 every `exception_rlimit` seconds.
    exception_rlimit = 2.0


def isdebugging():
    """Test if we are running under the PyDev debugger."""
    for frame in inspect.stack():
        if frame[1].endswith("pydevd.py"):
            return True
    return False
