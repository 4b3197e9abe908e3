"""ZeroMQ request/reply transport.

The responder side is a ROUTER socket rather than a REP socket. The routing
prefix of each inbound request is held until the reply is sent, which gives
REQ clients the usual strict request/reply exchange while still allowing the
responder to leave a request unanswered (an unsupported control command)
without wedging the socket state machine.

Request (REQ -> ROUTER, after the ROUTER adds the identity frame)
    identity, b'', body

Response (ROUTER -> REQ)
    identity, b'', body
"""

from __future__ import annotations

import atexit
from typing import Any, List, Optional

import zmq

from ...protocol import fields, wire
from ..base import (
    Transport,
    TransportConnectionError,
    TransportError,
    TransportPortError,
    TransportTimeout,
)


zmq_context = zmq.Context()


def _split(parts: List[bytes]):
    """Split ROUTER frames into (routing prefix, body).

    REQ peers put an empty delimiter frame after the routing identities;
    DEALER peers may not, in which case only the identity is the prefix.
    """

    try:
        delimiter = parts.index(b"")
    except ValueError:
        return parts[:1], b"".join(parts[1:])

    return parts[:delimiter + 1], b"".join(parts[delimiter + 1:])


class Server(Transport):
    """Receive requests via a ZeroMQ ROUTER socket, reply to them in order.

    The socket either binds to or connects to *address*, according to
    *bind*. The server owns its socket and releases it in :meth:`close`;
    the context is shared unless one is supplied.
    """

    # Milliseconds to keep trying to deliver pending replies on close, so
    # that the final reply to a terminate request is not dropped.
    linger = 1000

    def __init__(self, address: str, bind: bool = True, context: Optional[zmq.Context] = None):
        self.address = address
        self.bind = bind
        self.context = context if context is not None else zmq_context
        self.socket: Optional[zmq.Socket] = None
        self._prefix: Optional[List[bytes]] = None

        self.open()

    def __repr__(self) -> str:
        mode = "bind" if self.bind else "connect"
        return f"Server({self.address!r}, {mode})"

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self) -> None:
        if self.socket is not None:
            return

        socket = self.context.socket(zmq.ROUTER)
        socket.setsockopt(zmq.LINGER, self.linger)

        try:
            if self.bind:
                socket.bind(self.address)
            else:
                socket.connect(self.address)
        except zmq.ZMQError as exc:
            socket.close(linger=0)
            raise TransportPortError(
                f"cannot {'bind' if self.bind else 'connect'} {self.address}: {exc}"
            ) from exc

        self.socket = socket
        self._prefix = None

    def close(self) -> None:
        if self.socket is None:
            return

        self.socket.close()
        self.socket = None
        self._prefix = None

    def recv(self) -> bytes:
        if self.socket is None:
            raise TransportConnectionError(f"{self!r} is closed")

        try:
            parts = self.socket.recv_multipart()
        except zmq.ZMQError as exc:
            raise TransportConnectionError(f"receive failed on {self.address}: {exc}") from exc

        # A request that was never answered is simply forgotten here.
        self._prefix, body = _split(parts)
        return body

    def send(self, data: bytes) -> None:
        if self.socket is None:
            raise TransportConnectionError(f"{self!r} is closed")

        if self._prefix is None:
            raise TransportError("no pending request to reply to")

        prefix = self._prefix
        self._prefix = None

        try:
            self.socket.send_multipart(prefix + [data])
        except zmq.ZMQError as exc:
            raise TransportConnectionError(f"send failed on {self.address}: {exc}") from exc


class Client:
    """Issue requests via a ZeroMQ REQ socket and wait for the responses.

    If no response arrives within *timeout* seconds :class:`TransportTimeout`
    is raised and the socket is replaced, since a REQ socket cannot send
    again until it has received. A responder does not answer unsupported
    control commands, so a timeout is the expected outcome for those.
    """

    timeout = 5.0

    def __init__(self, address: str, timeout: Optional[float] = None, context: Optional[zmq.Context] = None):
        self.address = address
        self.context = context if context is not None else zmq_context
        if timeout is not None:
            self.timeout = timeout

        self.socket: Optional[zmq.Socket] = None
        self._connect()

    def __repr__(self) -> str:
        return f"Client({self.address!r})"

    def _connect(self) -> None:
        self.socket = self.context.socket(zmq.REQ)
        self.socket.setsockopt(zmq.LINGER, 0)
        self.socket.connect(self.address)

    def close(self) -> None:
        if self.socket is None:
            return

        self.socket.close()
        self.socket = None

    def send(self, data: bytes) -> bytes:
        """Send one encoded request and return the encoded response."""

        if self.socket is None:
            raise TransportConnectionError(f"{self!r} is closed")

        self.socket.send(data)

        if self.socket.poll(int(self.timeout * 1000), zmq.POLLIN) == 0:
            self.close()
            self._connect()
            raise TransportTimeout(
                f"{self.address}: no response in {self.timeout:.2f} sec"
            )

        return self.socket.recv()

    def call(self, cmd: str, *args: Any, **vargs: Any) -> dict:
        """Invoke the endpoint *cmd* and return the decoded response."""

        raw = self.send(wire.request(cmd, *args, **vargs))
        return wire.decode_response(raw)

    def terminate(self) -> dict:
        """Ask the responder to stop after acknowledging this request."""

        return self.call(fields.CONTROL + fields.TERMINATE)


def _cleanup() -> None:
    # Sockets still open at exit are abandoned rather than waited on.
    zmq_context.destroy(linger=0)


atexit.register(_cleanup)
