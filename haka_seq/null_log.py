import logging


class NullLogger(object):
    """Logger-like object that discards every record."""

    def debug(self, msg, *args, **kwargs):
        pass

    def info(self, msg, *args, **kwargs):
        pass

    def warning(self, msg, *args, **kwargs):
        pass

    def error(self, msg, *args, **kwargs):
        pass

    def critical(self, msg, *args, **kwargs):
        pass

    def log(self, lvl, msg, *args, **kwargs):
        pass

    def exception(self, msg, *args, **kwargs):
        pass


def resolve_log(log):
    """Turns a `log` argument into a logger-like object.

    Parameters
    ----------
    log: str or logging.Logger or None
        If `str` then the result of logging.getLogger(log) is returned;
        if `None` then a `NullLogger` is returned; otherwise `log` is
        asserted to have `debug`, `info`, `warning`, `error`, and
        `critical` methods and is returned as-is.

    Returns
    -------
    logging.Logger or NullLogger
    """
    if log is None:
        rv = NullLogger()
    elif isinstance(log, str):
        rv = logging.getLogger(log)
    else:
        assert hasattr(log, 'debug')
        assert hasattr(log, 'info')
        assert hasattr(log, 'warning')
        assert hasattr(log, 'error')
        assert hasattr(log, 'critical')
        rv = log

    return rv
