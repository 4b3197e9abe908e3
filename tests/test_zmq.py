""" Exercise the responder over real ZeroMQ sockets, using inproc addresses
    on the shared module context.
"""

import mqapi
import pytest
import threading
import zmq

from mqapi.transport import TransportError, TransportPortError, TransportTimeout
from mqapi.transport.zmq import request


def add(a, b):
    return a + b


def fail():
    raise RuntimeError('boom')


specs = [
    ('add', add),
    ('add_json', add, True),
    ('add_headers', add, False, {'Content-Type': 'application/json'}),
    ('fail', fail),
]


def test_round_trip(address, clean_logging):

    config = mqapi.config.Config(queue=address, bind=True, nid='node-1', log_level='DEBUG')
    responder = mqapi.process_async(specs, config)
    client = mqapi.Client(address, timeout=5)

    try:
        assert client.call('add', 1, 2) == {'nid': 'node-1', 'code': 200, 'data': 3}
        assert client.call('add', a=1, b=4)['data'] == 5
        assert client.call('add_json', 2, 2)['data'] == {'code': 0, 'data': 4}
        assert client.call('add_headers', 1, 1)['hdrs'] == {'Content-Type': 'application/json'}
        assert client.call('fail') == {'nid': 'node-1', 'code': 500, 'data': 'api exception : 3'}
        assert client.call('missing')['code'] == 404

        raw = client.send(b'not json')
        assert mqapi.json.loads(raw) == {'nid': 'node-1', 'code': 500, 'data': 'invalid data : 2'}

        assert client.terminate() == {'nid': 'node-1', 'code': 200, 'data': ''}
    finally:
        client.close()

    responder.thread.join(5)
    assert not responder.thread.is_alive()
    assert responder.transport.is_open == False


def test_unsupported_control_times_out(address):

    responder = mqapi.create_responder([('add', add)], address, bind=True)

    thread = threading.Thread(target=responder.run, daemon=True)
    thread.start()

    client = mqapi.Client(address, timeout=0.2)

    try:
        with pytest.raises(TransportTimeout):
            client.call(':restart')

        # The client replaced its socket; the responder is still serving.

        client.timeout = 5
        assert client.call('add', 2, 3)['data'] == 5
        assert client.terminate()['code'] == 200
    finally:
        client.close()

    thread.join(5)
    assert not thread.is_alive()


def test_connect_mode(address):

    # The caller binds and the responder dials in.

    socket = request.zmq_context.socket(zmq.REQ)
    socket.setsockopt(zmq.LINGER, 0)
    socket.bind(address)

    responder = mqapi.create_responder([('add', add)], address, bind=False)

    thread = threading.Thread(target=responder.run, daemon=True)
    thread.start()

    try:
        socket.send(mqapi.protocol.wire.request('add', 10, 5))
        assert socket.poll(5000) != 0
        assert mqapi.json.loads(socket.recv()) == {'code': 200, 'data': 15}

        socket.send(b'{"cmd": ":terminate"}')
        assert socket.poll(5000) != 0
        assert mqapi.json.loads(socket.recv()) == {'code': 200, 'data': ''}
    finally:
        socket.close()

    thread.join(5)
    assert not thread.is_alive()


def test_server_errors(address):

    server = request.Server(address, bind=True)

    try:
        assert server.is_open

        # Only one socket can bind an address.

        with pytest.raises(TransportPortError):
            request.Server(address, bind=True)

        # Nothing has been received, so there is nothing to reply to.

        with pytest.raises(TransportError):
            server.send(b'{}')
    finally:
        server.close()

    assert server.is_open == False
    server.close()

    with pytest.raises(TransportError):
        server.recv()


def test_split():

    prefix, body = request._split([b'id', b'', b'{"cmd": "x"}'])
    assert prefix == [b'id', b'']
    assert body == b'{"cmd": "x"}'

    prefix, body = request._split([b'id', b'{"cmd": "x"}'])
    assert prefix == [b'id']
    assert body == b'{"cmd": "x"}'

    prefix, body = request._split([b'id', b''])
    assert prefix == [b'id', b'']
    assert body == b''


def test_create_responder_specs(address):

    with pytest.raises(ValueError):
        mqapi.create_responder(specs, '')

    with pytest.raises(TypeError):
        mqapi.create_responder([add], address)

    responder = mqapi.create_responder(specs, address, bind=True, nid='n')

    try:
        assert len(responder.registry) == 4
        assert responder.nid == 'n'
        assert responder.registry.lookup('add_json').json == True
        assert dict(responder.registry.lookup('add_headers').headers) == {'Content-Type': 'application/json'}
    finally:
        responder.transport.close()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
