""" A small set of endpoints, suitable for serving from the command line:

    mqapi --queue tcp://*:9999 --bind calculator:ENDPOINTS

    and calling from another process:

    client = mqapi.Client('tcp://127.0.0.1:9999')
    client.call('add', 1, 2)
    client.call('divide', 1, 0)      # api exception : 3
    client.terminate()
"""

import statistics


def add(a, b):
    return a + b


def divide(numerator, denominator):
    return numerator / denominator


def summary(*values, precision=3):
    """ Return the mean and standard deviation of the values as a
        dictionary, rounded to *precision* digits.
    """

    mean = statistics.mean(values)
    stdev = statistics.stdev(values) if len(values) > 1 else 0.0

    return {'mean': round(mean, precision), 'stdev': round(stdev, precision)}


ENDPOINTS = [
    ('add', add),
    ('divide', divide),
    ('summary', summary, True, {'Content-Type': 'application/json'}),
]


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
