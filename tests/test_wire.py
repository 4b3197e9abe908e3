import mqapi
import pytest

from mqapi.protocol import wire
from mqapi.protocol.message import Request, Response


def test_decode():

    request = wire.decode(b'{"cmd": "echo", "args": [42, "x"], "vargs": {"scale": 2}}')

    assert request.cmd == 'echo'
    assert request.args == [42, 'x']
    assert request.vargs == {'scale': 2}
    assert request.is_control == False
    assert request.control is None


def test_decode_defaults():

    request = wire.decode(b'{"cmd": "echo"}')
    assert request.args == []
    assert request.vargs == {}

    request = wire.decode(b'{"cmd": "echo", "args": null, "vargs": null}')
    assert request.args == []
    assert request.vargs == {}


def test_decode_control():

    request = wire.decode(b'{"cmd": ":terminate"}')
    assert request.is_control == True
    assert request.control == 'terminate'


def test_decode_errors():

    # Nothing about the endpoint can be recovered from these.

    for raw in (b'', b'not json', b'{"cmd": ', b'[1, 2, 3]', b'"echo"', b'{}', b'{"cmd": 5}', b'\xff\xfe'):
        with pytest.raises(wire.DecodeError) as caught:
            wire.decode(raw)
        assert caught.value.cmd is None

    # These name an endpoint but carry bad arguments.

    for raw in (b'{"cmd": "echo", "args": 5}', b'{"cmd": "echo", "args": {}}', b'{"cmd": "echo", "vargs": []}'):
        with pytest.raises(wire.DecodeError) as caught:
            wire.decode(raw)
        assert caught.value.cmd == 'echo'


def test_decode_error_is_value_error():

    with pytest.raises(ValueError):
        wire.decode(b'not json')


def test_encode_minimal():

    encoded = wire.encode(Response(200, 42))
    assert mqapi.json.loads(encoded) == {'code': 200, 'data': 42}


def test_encode_optional_fields():

    response = Response(404, 'invalid api : 1', nid='node-7', hdrs={'Content-Type': 'text/plain'})
    decoded = mqapi.json.loads(wire.encode(response))

    assert decoded == {
        'nid': 'node-7',
        'hdrs': {'Content-Type': 'text/plain'},
        'code': 404,
        'data': 'invalid api : 1',
    }

    # Empty values are left off entirely.

    decoded = mqapi.json.loads(wire.encode(Response(200, None, nid='', hdrs={})))
    assert decoded == {'code': 200, 'data': None}


def test_encode_unserializable():

    with pytest.raises(wire.EncodeError):
        wire.encode(Response(200, object()))


def test_client_side():

    raw = wire.request('scale', 3, factor=2)
    request = wire.decode(raw)

    assert request.cmd == 'scale'
    assert request.args == [3]
    assert request.vargs == {'factor': 2}

    response = wire.decode_response(b'{"code": 200, "data": 6}')
    assert response['data'] == 6

    with pytest.raises(wire.DecodeError):
        wire.decode_response(b'{"data": 6}')


def test_request_repr():

    request = Request('echo', [1])
    assert 'echo' in repr(request)
    assert request.to_dict() == {'cmd': 'echo', 'args': [1], 'vargs': {}}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
