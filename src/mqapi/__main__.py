""" Command line entry point: serve a list of endpoint specs from an
    importable module.

    mqapi --queue tcp://127.0.0.1:9999 --bind mypackage.api:ENDPOINTS

    The named attribute is a list of (name, handler[, json[, headers]])
    tuples, as accepted by :func:`mqapi.create_responder`. Settings not
    given on the command line are read from the environment; see
    :mod:`mqapi.config`.
"""

import argparse
import importlib
import os
import sys

from . import config
from . import responder


def parse_arguments(argv=None, environ=None):

    defaults = config.Config.from_environment(environ)

    description = 'Serve Python functions as mqapi endpoints.'
    parser = argparse.ArgumentParser(prog='mqapi', description=description)

    parser.add_argument('specs', help='module:attribute naming the list of endpoint specs')
    parser.add_argument('--queue', default=defaults.queue, help='ZeroMQ address of the request queue')
    parser.add_argument('--bind', dest='bind', action='store_true', default=defaults.bind, help='bind to the queue address')
    parser.add_argument('--connect', dest='bind', action='store_false', help='connect to the queue address, overriding MQAPI_BIND')
    parser.add_argument('--nid', default=defaults.nid, help='node identifier included in every response')
    parser.add_argument('--name', default=defaults.name, help='api name, used for the log file name')
    parser.add_argument('--log-level', default=defaults.log_level, help='logging level, for example DEBUG')
    parser.set_defaults(bind=defaults.bind)

    arguments = parser.parse_args(argv)

    if ':' not in arguments.specs:
        parser.error('specs must be given as module:attribute')

    if not arguments.queue:
        parser.error('a queue address is required, via --queue or MQAPI_QUEUE')

    settings = config.Config(arguments.queue, arguments.bind, arguments.nid, arguments.name, arguments.log_level, defaults.log_file)
    return arguments, settings


def load_specs(target):
    """ Import 'module:attribute' and return the attribute. The current
        directory is searched too, as it would be for 'python -m'.
    """

    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module_name, attribute = target.split(':', 1)
    module = importlib.import_module(module_name)
    return getattr(module, attribute)


def main(argv=None, environ=None):

    arguments, settings = parse_arguments(argv, environ)
    specs = load_specs(arguments.specs)
    responder.process(specs, settings)
    return 0


if __name__ == '__main__':
    sys.exit(main())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
