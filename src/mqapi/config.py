""" Configuration for launching a :class:`mqapi.Responder`. The settings
    are normally read from the environment of the worker process:

    ================  ==================================================
    MQAPI_QUEUE       ZeroMQ address of the request queue
    MQAPI_BIND        bind to the address instead of connecting (1/true)
    MQAPI_NID         node identifier included in every response
    MQAPI_NAME        name of the api, used for the log file name
    MQAPI_LOG_LEVEL   logging level name, INFO by default
    MQAPI_LOG_DIR     write the log to a file in this directory
    ================  ==================================================
"""

import logging
import os


prefix = 'MQAPI_'
true_strings = set(('1', 'true', 'yes', 'on'))

_handler = None


class Config:
    """ The settings the responder needs from the process that launches
        it. A *log_file* of None means log to stderr.
    """

    def __init__(self, queue='', bind=False, nid='', name='noname', log_level='INFO', log_file=None):

        self.queue = queue
        self.bind = bind
        self.nid = nid
        self.name = name
        self.log_level = log_level
        self.log_file = log_file


    def __repr__(self):
        return 'Config(queue=%r, bind=%r, nid=%r, name=%r)' % (self.queue, self.bind, self.nid, self.name)


    @classmethod
    def from_environment(cls, environ=None):

        if environ is None:
            environ = os.environ

        def get(name, default=''):
            return environ.get(prefix + name, default)

        name = get('NAME', 'noname')
        nid = get('NID')
        bind = get('BIND').strip().lower() in true_strings

        log_file = None
        log_dir = get('LOG_DIR')

        if log_dir:
            log_file = os.path.join(log_dir, 'apisrvr_%s_%s.log' % (name, nid))

        return cls(get('QUEUE'), bind, nid, name, get('LOG_LEVEL', 'INFO'), log_file)


# end of class Config



def setup_logging(config):
    """ Attach a single handler to the 'mqapi' logger according to the
        *config*. Calling this again replaces the handler attached by the
        previous call rather than adding another one.
    """

    global _handler

    logger = logging.getLogger('mqapi')

    level = config.log_level
    if isinstance(level, str):
        level = level.upper()

    logger.setLevel(level)

    if config.log_file is None:
        handler = logging.StreamHandler()
    else:
        handler = logging.FileHandler(config.log_file)

    format = '%(asctime)s %(levelname)s %(name)s: %(message)s'
    handler.setFormatter(logging.Formatter(format))

    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()

    logger.addHandler(handler)
    _handler = handler

    return logger


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
