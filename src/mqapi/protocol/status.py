""" The fixed table of response statuses. Every outcome of a request is
    resolved through :func:`lookup`, which provides both the code placed in
    the response envelope and the numeric code used to decide whether a
    default message is synthesized.
"""

import collections
import types


Status = collections.namedtuple('Status', ('symbol', 'wire_code', 'numeric_code', 'description'))

SUCCESS = 'success'
TERMINATE = 'terminate'
INVALID_API = 'invalid_api'
INVALID_DATA = 'invalid_data'
API_EXCEPTION = 'api_exception'


def _build(*entries):
    table = dict()
    for entry in entries:
        status = Status(*entry)
        table[status.symbol] = status

    return types.MappingProxyType(table)


table = _build(
    (SUCCESS,       200, 0, ''),
    (TERMINATE,     200, 0, ''),
    (INVALID_API,   404, 1, 'invalid api'),
    (INVALID_DATA,  500, 2, 'invalid data'),
    (API_EXCEPTION, 500, 3, 'api exception'),
)


def lookup(symbol):
    """ Return the :class:`Status` for the requested *symbol*. A KeyError is
        raised for anything outside the table; that is always a bug in the
        caller, not something to be handled at run time.
    """

    try:
        return table[symbol]
    except KeyError:
        raise KeyError('unknown status: ' + repr(symbol))


def default_message(status):
    """ The text sent back as the response data when a failing status has
        no explicit payload, for example 'invalid api : 1'.
    """

    return '%s : %d' % (status.description, status.numeric_code)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
