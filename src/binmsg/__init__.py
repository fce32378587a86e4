""" Python implementation of the binmsg wire format: a single message with
    a bounded set of ASCII headers and an opaque binary payload, encoded to
    and decoded from one contiguous byte buffer.
"""

# Building blocks.

from . import ascii
from . import errors
from . import primitive

# Primary public-facing interfaces.

from . import codec
from . import message

from .message import Message
from .codec import MessageCodec, SimpleMessageCodec, encode, decode
from .errors import CodecError, ValidationError, TooManyHeaders, NonAsciiHeader, HeaderTooLarge, PayloadTooLarge, FormatError, Truncated

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
