""" The endpoint registry: a mapping from a caller-chosen name to the
    :class:`Endpoint` that will handle requests for that name. A
    :class:`Registry` is populated before a :class:`mqapi.Responder` starts
    processing, and is only read from after that point; there is no locking.
"""

import logging
import types

from .protocol import fields


logger = logging.getLogger(__name__)


class Endpoint:
    """ Everything the responder needs to know about one endpoint: the
        *handler* to invoke, whether the response payload should be wrapped
        in a ``{"code": ..., "data": ...}`` envelope (*json*), and any extra
        *headers* to include in every response. Instances are not modified
        after they are created.
    """

    __slots__ = ('_name', '_handler', '_json', '_headers')

    def __init__(self, name, handler, json=False, headers=None):

        if headers is None:
            headers = dict()

        for key, value in headers.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValueError('endpoint headers must map str to str: %r: %r' % (key, value))

        self._name = name
        self._handler = handler
        self._json = bool(json)
        self._headers = types.MappingProxyType(dict(headers))


    def __repr__(self):
        return 'Endpoint(%r, %r, json=%r, headers=%r)' % (self._name, self._handler, self._json, dict(self._headers))


    @property
    def name(self):
        return self._name

    @property
    def handler(self):
        return self._handler

    @property
    def json(self):
        return self._json

    @property
    def headers(self):
        return self._headers


    def invoke(self, args, vargs):
        """ Call the handler with the positional *args* and keyword *vargs*.
            Whatever the handler raises, including a TypeError for a
            mismatched signature, is propagated to the caller.
        """

        return self._handler(*args, **vargs)


# end of class Endpoint



class Registry:
    """ A collection of :class:`Endpoint` instances keyed by name. Registering
        a name a second time replaces the earlier endpoint.
    """

    def __init__(self):
        self._endpoints = dict()


    def __contains__(self, name):
        return name in self._endpoints


    def __iter__(self):
        return iter(self._endpoints)


    def __len__(self):
        return len(self._endpoints)


    def __repr__(self):
        return 'Registry(%s)' % (', '.join(sorted(self._endpoints)))


    def register(self, name, handler, json=False, headers=None):
        """ Make *handler* available as the endpoint *name*. The handler is not
            inspected; if it cannot accept the arguments in a request that
            will be reported when the request is handled. The *headers*
            must map strings to strings. Returns this registry so that calls
            can be chained.
        """

        if not isinstance(name, str) or name == '':
            raise ValueError('endpoint name must be a non-empty string')

        if name.startswith(fields.CONTROL):
            raise ValueError('endpoint name cannot start with %r: %s' % (fields.CONTROL, name))

        logger.debug("registering endpoint [%s]", name)
        self._endpoints[name] = Endpoint(name, handler, json, headers)
        return self


    def lookup(self, name):
        """ Return the :class:`Endpoint` registered as *name*, or None.
        """

        return self._endpoints.get(name)


# end of class Registry


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
