"""
mqapi Protocol Layer
====================

This package defines the transport-agnostic request/response protocol used
by a :class:`mqapi.Responder`. It MUST NOT depend on any transport
implementation.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Responder (responder.py)
    Dispatch loop: receive, decode, route, invoke, respond

    │
    ▼
Wire Codec (wire.py)
    Request/Response <-> JSON bytes
    - DecodeError carries the endpoint name when recoverable

    │
    ▼
Envelopes (message.py)
    - Request:  cmd, args, vargs
    - Response: nid, hdrs, code, data

    │
    ▼
Status Table (status.py)
    Fixed mapping of outcome -> (wire code, numeric code, description)

    │
    ▼
Field Vocabulary (fields.py)
    Canonical names for envelope keys and the control sentinel

---------------------------------------------------------------------
"""

from . import fields
from . import status
from . import message
from . import wire

from .message import Request, Response
from .wire import DecodeError, EncodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
