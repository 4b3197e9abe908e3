""" Python implementation of mqapi: expose plain Python functions as named
    endpoints on a ZeroMQ request/reply queue. A worker registers its
    functions with a :class:`Responder`, which decodes each request, calls
    the matching function and sends back a JSON response with a status code.
"""

# Utility components.

from . import json
from . import config

# Submodules used by multiple other components.

from . import protocol
from . import transport

# Primary public-facing interfaces.

from .registry import Endpoint, Registry
from .responder import Responder, create_responder, process, process_async
from .transport.zmq.request import Client

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
