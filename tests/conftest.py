import itertools
import logging
import pytest

import mqapi
from mqapi.transport import Transport, TransportConnectionError


class MemoryTransport(Transport):
    """ Stand-in for a socket: requests are queued in advance, responses are
        collected for inspection. Running out of requests is reported as a
        broken connection, which ends the responder's loop.
    """

    def __init__(self):
        self.inbound = list()
        self.outbound = list()
        self.opened = True
        self.recv_count = 0

    @property
    def is_open(self):
        return self.opened

    def open(self):
        self.opened = True

    def close(self):
        self.opened = False

    def recv(self):
        if not self.opened:
            raise TransportConnectionError('transport is closed')
        if len(self.inbound) == 0:
            raise TransportConnectionError('no more messages')

        self.recv_count += 1
        return self.inbound.pop(0)

    def send(self, data):
        if not self.opened:
            raise TransportConnectionError('transport is closed')
        self.outbound.append(data)

    def queue(self, *messages):
        for message in messages:
            if not isinstance(message, bytes):
                message = mqapi.json.dumps(message)
            self.inbound.append(message)

    def responses(self):
        return [mqapi.json.loads(raw) for raw in self.outbound]


@pytest.fixture
def transport():
    return MemoryTransport()


@pytest.fixture
def responder(transport):
    return mqapi.Responder(transport)


@pytest.fixture
def serve(transport, responder):
    """ Queue the given requests followed by a terminate request, run the
        responder to completion, and return the decoded responses.
    """

    def serve(*messages):
        transport.queue(*messages)
        transport.queue({'cmd': ':terminate'})
        responder.run()
        return transport.responses()

    return serve


_counter = itertools.count()

@pytest.fixture
def address():
    return 'inproc://mqapi-test-%d' % (next(_counter))


@pytest.fixture
def clean_logging():

    yield

    logger = logging.getLogger('mqapi')
    handler = mqapi.config._handler

    if handler is not None:
        logger.removeHandler(handler)
        handler.close()
        mqapi.config._handler = None

    logger.setLevel(logging.NOTSET)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
