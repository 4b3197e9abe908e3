''' Wrapper module around msgspec to handle the equivalent of
    :func:`json.loads` and :func:`json.dumps`. Both directions work with
    bytes, which is what goes on the wire.
'''

import msgspec


# The msgspec 'encode' operation returns bytes. Reusing a single encoder and
# decoder instance avoids the setup cost on every message.

encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode

DecodeError = msgspec.DecodeError
EncodeError = msgspec.EncodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
