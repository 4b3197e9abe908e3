""" A class representation of the request and response envelopes exchanged
    between a caller and a :class:`mqapi.Responder`.
"""

from . import fields


class Request:
    """ A single decoded request. The *cmd* is either the name of a
        registered endpoint, or a control command prefixed with the
        :data:`fields.CONTROL` sentinel; *args* and *vargs* are the positional
        and keyword arguments to hand to the endpoint.

        :ivar cmd: The endpoint name or control command.
        :ivar args: A list of positional arguments.
        :ivar vargs: A dictionary of keyword arguments.
    """

    def __init__(self, cmd, args=None, vargs=None):

        if args is None:
            args = list()
        if vargs is None:
            vargs = dict()

        self.cmd = cmd
        self.args = args
        self.vargs = vargs


    def __repr__(self):
        return 'Request(%r, args=%r, vargs=%r)' % (self.cmd, self.args, self.vargs)


    @property
    def is_control(self):
        return self.cmd.startswith(fields.CONTROL)


    @property
    def control(self):
        """ The control command without its sentinel, or None if this is an
            ordinary endpoint request.
        """

        if self.is_control:
            return self.cmd[len(fields.CONTROL):]


    def to_dict(self):
        request = dict()
        request[fields.CMD] = self.cmd
        request[fields.ARGS] = list(self.args)
        request[fields.VARGS] = dict(self.vargs)
        return request


# end of class Request



class Response:
    """ The response to a single :class:`Request`. The node identifier and
        the headers are only put on the wire when they are non-empty; the
        *code* and *data* are always present.

        :ivar nid: The identifier of the responder, possibly empty.
        :ivar hdrs: Extra headers from the endpoint, possibly empty.
        :ivar code: The wire code of the resolved status.
        :ivar data: The (already shaped) payload.
    """

    def __init__(self, code, data=None, nid='', hdrs=None):

        if hdrs is None:
            hdrs = dict()

        self.nid = nid
        self.hdrs = hdrs
        self.code = code
        self.data = data


    def __repr__(self):
        return 'Response(%r)' % (self.to_dict(),)


    def to_dict(self):

        response = dict()

        if self.nid:
            response[fields.NID] = self.nid

        if self.hdrs:
            response[fields.HDRS] = dict(self.hdrs)

        response[fields.CODE] = self.code
        response[fields.DATA] = self.data

        return response


# end of class Response


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
