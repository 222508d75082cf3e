"""
Log wrapper records the calls of chosen methods of one tree instance (method name,
arguments, raised exception and time) into a local file or a log socket.
"""
import datetime
import functools
import logging
import os
from logging import handlers as log_handlers

from avlmerge.constants import LOG_FILE_NAME, LOG_MODES

# if in debug mode
if __debug__:

    def _log_wrapper(func, logger: logging.Logger):
        logger.setLevel(logging.DEBUG)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            # !r means call __repr__ only / !s means call __str__ only
            log = 'Called: {name}({params}'.format(
                name=func.__name__,
                params=','.join(['{0!r}'.format(a) for a in args] +
                                ['{0!s}={1!r}'.format(k, v) for k, v in kwargs.items()]))
            try:
                result = func(*args, **kwargs)
                log += ')'
                return result
            except Exception as error:
                log += ') {0}: {1}'.format(type(error).__name__, error)
                raise
            finally:
                log += ' at {time}'.format(time=datetime.datetime.now().isoformat())
                logger.debug(log)

        return wrapper

else:
    def _log_wrapper(func, logger: logging.Logger):
        logger.setLevel(logging.INFO)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            log = 'Called: {name}({params}) at {time}'.format(
                name=func.__name__,
                params=','.join(['{0}'.format(a) for a in args] +
                                ['{0}={1}'.format(k, v) for k, v in kwargs.items()]),
                time=datetime.datetime.now().isoformat())
            logger.info(log)
            return func(*args, **kwargs)

        return wrapper


# one logger per log target: (mode, absolute file path) or (mode, host, port)
# -> (logger, number of wrapped instances using it)
_loggers = dict()


def _target_logger(log_mode, host, port) -> logging.Logger:
    """
    Loggers live outside the logging registry, one per target with a single handler.
    """
    if log_mode == 'local':
        key = (log_mode, os.path.abspath(LOG_FILE_NAME))
    else:
        key = (log_mode, host, port)
    if key in _loggers:
        logger, users = _loggers[key]
        _loggers[key] = (logger, users + 1)
        return logger

    if log_mode == 'tcp':
        handler = log_handlers.SocketHandler(host=host, port=port)
    elif log_mode == 'udp':
        handler = log_handlers.DatagramHandler(host=host, port=port)
    else:
        handler = logging.FileHandler(key[1], mode='a', delay=True)
    logger = logging.Logger('{module}.{mode}'.format(module=__name__, mode=log_mode))
    logger.addHandler(handler)
    _loggers[key] = (logger, 1)
    return logger


def log_wrapper(instance, methods_to_log: tuple, log_mode='local', host=None, port=None):
    """
    :param instance: instance to be logged, only this instance is patched, never its class
    :param methods_to_log: names of the methods to be logged
    :param log_mode: 'local': log in local file (avlmerge.log)
                     'tcp' or 'udp': log to concrete host & port
    :param host: target host if log mode is 'tcp' or 'udp'
    :param port: port of target host if log mode is 'tcp' or 'udp'
    :return: wrapped instance
    """
    if log_mode not in LOG_MODES:
        raise ValueError('Unknown log mode {mode!r}'.format(mode=log_mode))
    logger = _target_logger(log_mode, host, port)

    for name in methods_to_log:
        method = getattr(instance, name, None)
        if callable(method):
            setattr(instance, name, _log_wrapper(method, logger))

    # bind logger with instance, so its handler can be released later
    instance._logger = logger
    return instance


def close_log(instance):
    """Release the logger bound by log_wrapper(), its handler closes with the last user."""
    logger = getattr(instance, '_logger', None)
    if logger is None:
        return
    del instance._logger
    for key, (shared, users) in list(_loggers.items()):
        if shared is not logger:
            continue
        if users > 1:
            _loggers[key] = (shared, users - 1)
        else:
            del _loggers[key]
            for handler in list(shared.handlers):
                shared.removeHandler(handler)
                handler.close()
