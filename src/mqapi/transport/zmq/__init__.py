"""ZeroMQ transport."""

from . import request
