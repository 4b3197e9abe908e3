"""JSON encoding of request and response envelopes.

Request:
    {"cmd": "<endpoint or :control>", "args": [...], "vargs": {...}}

Response:
    {"nid": "<node id>", "hdrs": {...}, "code": <int>, "data": <payload>}

``args``/``vargs`` are optional on the way in; ``nid``/``hdrs`` are only
present on the way out when they are non-empty.
"""

from __future__ import annotations

from typing import Any, Optional

from .. import json
from . import fields
from .message import Request, Response


class DecodeError(ValueError):
    """The request payload could not be turned into a :class:`Request`.

    ``cmd`` is the endpoint name if one could be recovered before the
    failure, otherwise None.
    """

    def __init__(self, text: str, cmd: Optional[str] = None):
        ValueError.__init__(self, text)
        self.cmd = cmd


class EncodeError(ValueError):
    """A response could not be serialized."""


def decode(raw: bytes) -> Request:
    """Deserialize bytes -> Request"""

    try:
        msg = json.loads(raw)
    except json.DecodeError as exc:
        raise DecodeError(f"malformed request: {exc}") from exc

    if not isinstance(msg, dict):
        raise DecodeError(f"request must be a JSON object, not {type(msg).__name__}")

    cmd = msg.get(fields.CMD)
    if not isinstance(cmd, str):
        raise DecodeError(f"request is missing a string {fields.CMD!r} field")

    args = msg.get(fields.ARGS)
    if args is None:
        args = []
    elif not isinstance(args, list):
        raise DecodeError(f"{fields.ARGS!r} must be a list", cmd)

    vargs = msg.get(fields.VARGS)
    if vargs is None:
        vargs = {}
    elif not isinstance(vargs, dict):
        raise DecodeError(f"{fields.VARGS!r} must be an object", cmd)

    return Request(cmd, args, vargs)


def encode(response: Response) -> bytes:
    """Serialize Response -> bytes"""

    try:
        return json.dumps(response.to_dict())
    except (TypeError, json.EncodeError) as exc:
        raise EncodeError(f"cannot encode response: {exc}") from exc


def request(cmd: str, *args: Any, **vargs: Any) -> bytes:
    """Client side: serialize a call to *cmd*."""

    return json.dumps(Request(cmd, list(args), vargs).to_dict())


def decode_response(raw: bytes) -> dict:
    """Client side: deserialize a response envelope."""

    try:
        msg = json.loads(raw)
    except json.DecodeError as exc:
        raise DecodeError(f"malformed response: {exc}") from exc

    if not isinstance(msg, dict) or fields.CODE not in msg:
        raise DecodeError(f"response is missing the {fields.CODE!r} field")

    return msg
