"""What a :class:`mqapi.Responder` expects from the thing that carries its
messages.

Transports deal in encoded bytes only. Decoding, routing and the status
table all live in :mod:`mqapi.protocol`, so that a different queue can be
substituted without touching the dispatch loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TransportError(Exception):
    """Raised when moving a message fails; fatal to the responder loop."""


class TransportTimeout(TransportError):
    """No reply arrived before the client gave up waiting."""


class TransportConnectionError(TransportError):
    """The socket is closed, or a send/receive on it failed."""


class TransportPortError(TransportError):
    """Binding or connecting to the queue address was refused."""


class Transport(ABC):
    """Reply side of a request/reply queue.

    :meth:`recv` hands over one inbound request; :meth:`send` answers the
    request most recently received. A request may be left unanswered, in
    which case the next :meth:`recv` simply moves on.
    """

    @abstractmethod
    def open(self) -> None:
        """Acquire the socket; a no-op if it is already held."""

    @abstractmethod
    def close(self) -> None:
        """Release the socket; a no-op if it is already released."""

    @abstractmethod
    def send(self, data: bytes) -> None:
        """Deliver *data* as the reply to the current request."""

    @abstractmethod
    def recv(self) -> bytes:
        """Wait for a request and return its body."""

    @property
    def is_open(self) -> bool:
        return False
