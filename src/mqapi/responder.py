""" The :class:`Responder` is the server side of mqapi: it owns a
    :class:`mqapi.transport.Transport` and a :class:`mqapi.Registry`, and
    answers requests one at a time until it is told to terminate.

    Each request is handled to completion before the next one is received.
    There is no per-request timeout; a handler that never returns will stop
    the responder from serving anything else, so handlers are expected to
    be bounded. Run several responders to serve requests in parallel.
"""

import logging
import threading

from . import config as _config
from .protocol import fields
from .protocol import status
from .protocol import wire
from .protocol.message import Response
from .registry import Registry
from .transport.zmq import request


logger = logging.getLogger(__name__)


class Responder:
    """ Serve the endpoints in *registry* over *transport*. If *nid* is
        not empty it is included in every response, so that a caller can
        tell which of several responders on the same queue answered.

        :ivar running: True while :func:`run` is processing requests.
        :ivar thread: The background thread, if started via
                      :func:`process_async`.
    """

    def __init__(self, transport, nid='', registry=None):

        if registry is None:
            registry = Registry()

        self.transport = transport
        self.nid = nid
        self.registry = registry
        self.running = False
        self.thread = None


    def __repr__(self):
        return 'mqapi.Responder with endpoints: ' + ', '.join(sorted(self.registry))


    def register(self, name, handler, json=False, headers=None):
        """ Register *handler* as the endpoint *name*; see
            :func:`mqapi.Registry.register`. Returns this responder so that
            calls can be chained.
        """

        self.registry.register(name, handler, json, headers)
        return self


    def shape(self, endpoint, symbol, data=None):
        """ Build the :class:`Response` for the outcome *symbol*. A failing
            status with no *data* gets the default message for that status;
            an *endpoint* that asked for JSON responses gets its data wrapped
            with the numeric code. Without an endpoint there are no headers
            and no wrapping.
        """

        st = status.lookup(symbol)

        if st.numeric_code != 0 and data is None:
            data = status.default_message(st)

        if endpoint is None:
            headers = None
        else:
            headers = endpoint.headers
            if endpoint.json:
                data = {fields.CODE: st.numeric_code, fields.DATA: data}

        return Response(st.wire_code, data, self.nid, headers)


    def respond(self, endpoint, symbol, data=None):

        response = self.shape(endpoint, symbol, data)
        self._send(wire.encode(response))


    def _send(self, raw):
        logger.debug("sending response [%s]", raw)
        self.transport.send(raw)


    def call(self, endpoint, req):
        """ Invoke *endpoint* with the arguments in *req* and send the
            response. Nothing the handler raises escapes this method; the
            caller only ever sees the fixed api_exception message, the
            details go to the log.
        """

        try:
            result = endpoint.invoke(req.args, req.vargs)
            raw = wire.encode(self.shape(endpoint, status.SUCCESS, result))
        except Exception:
            logger.exception("api_exception in [%s]", endpoint.name)
            raw = wire.encode(self.shape(endpoint, status.API_EXCEPTION))

        self._send(raw)


    def handle(self, raw):
        """ Process one inbound message. Returns False if the responder
            should stop, which only happens for a terminate request.
        """

        try:
            req = wire.decode(raw)
        except wire.DecodeError as exc:
            logger.error("invalid request: %s", exc)

            if exc.cmd is None:
                endpoint = None
            else:
                endpoint = self.registry.lookup(exc.cmd)

            self.respond(endpoint, status.INVALID_DATA)
            return True

        logger.info("received request [%s]", req.cmd)

        if req.is_control:
            if req.control == fields.TERMINATE:
                self.respond(None, status.TERMINATE, '')
                return False

            # Deliberately unanswered; callers detect unsupported commands
            # by the absence of a reply.
            logger.error("invalid control command %s", req.cmd)
            return True

        endpoint = self.registry.lookup(req.cmd)

        if endpoint is None:
            self.respond(None, status.INVALID_API)
            return True

        self.call(endpoint, req)
        return True


    def run(self):
        """ Process requests until a terminate request is received. The
            transport is closed when this method returns, whether that is
            because of a terminate request or a transport failure.
        """

        logger.info("processing...")
        self.running = True

        try:
            while self.running:
                raw = self.transport.recv()
                self.running = self.handle(raw)
        finally:
            self.running = False
            self.transport.close()
            logger.info("stopped processing.")


    process = run


# end of class Responder



def create_responder(specs, address, bind=False, nid=''):
    """ Create a :class:`Responder` on a ZeroMQ socket at *address*, binding
        or connecting according to *bind*, and register each of the *specs*.
        A spec is a tuple of (name, handler), optionally followed by the json
        flag and a dictionary of headers.
    """

    if not address:
        raise ValueError('a queue address is required')

    registry = Registry()

    for spec in specs:
        if callable(spec) or isinstance(spec, str):
            raise TypeError('endpoint spec must be a (name, handler, ...) tuple, not ' + repr(spec))

        registry.register(*spec)

    server = request.Server(address, bind)
    return Responder(server, nid, registry)



def _start(specs, config):

    if config is None:
        config = _config.Config.from_environment()

    _config.setup_logging(config)
    logger.debug("queue is at %s", config.queue)

    return create_responder(specs, config.queue, config.bind, config.nid)



def process(specs, config=None):
    """ Create a responder per :func:`create_responder` and the supplied
        :class:`mqapi.config.Config` (or one read from the environment), and
        process requests until terminated. Returns the stopped responder.
    """

    responder = _start(specs, config)
    responder.run()
    return responder



def process_async(specs, config=None):
    """ Same as :func:`process`, but the processing happens in a background
        thread, and the responder is returned immediately.
    """

    responder = _start(specs, config)

    thread = threading.Thread(target=responder.run, name='mqapi.Responder')
    thread.daemon = True
    responder.thread = thread
    thread.start()

    return responder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
