""" A class representation of a binmsg message: a set of ASCII headers and
    an opaque binary payload.
"""

try:
    import numpy
except ImportError:
    numpy = None


class Message:
    """ The :class:`Message` is a thin container for what goes on the wire.
        The *headers* are a plain dictionary mapping header names to header
        values; there is no ordering to the headers, and a round trip through
        the codec is free to reorder them. The *payload* is always stored as
        immutable bytes, regardless of which bytes-like object the caller
        supplied.

        The limits on header count, header size, and payload size are not
        enforced here; see :mod:`binmsg.codec`.

        :ivar headers: The name to value mapping of header fields.
        :ivar payload: The message body, as bytes.
    """

    def __init__(self, headers=None, payload=None):

        if headers is None:
            headers = dict()

        self.headers = dict(headers)
        self.payload = _as_bytes(payload)


    def __eq__(self, other):

        if not isinstance(other, Message):
            return NotImplemented

        return self.headers == other.headers and self.payload == other.payload


    def __repr__(self):
        return 'Message(headers=%r, payload=<%d bytes>)' % (self.headers, len(self.payload))


    @classmethod
    def from_array(cls, array, headers=None):
        """ Build a :class:`Message` whose payload is the raw contents of
            *array*, typically a numpy array. The dtype and shape are not
            carried in the payload; put them in a header if the receiving
            side needs them.
        """

        return cls(headers, array.tobytes())


    def as_array(self, dtype, shape=None):
        """ Interpret the payload as a numpy array of the given *dtype*,
            optionally reshaped to *shape*. This is the inverse of
            :func:`from_array`.
        """

        if numpy is None:
            raise ImportError('numpy module not available')

        if isinstance(dtype, str):
            dtype = getattr(numpy, dtype)

        array = numpy.frombuffer(self.payload, dtype=dtype)

        if shape is not None:
            array = numpy.reshape(array, shape)

        return array


# end of class Message



def _as_bytes(payload):
    """ Normalize any supported payload object to bytes. Anything exposing
        a tobytes() method (numpy arrays, memoryviews) is converted with it.
    """

    if payload is None:
        return b''

    if isinstance(payload, bytes):
        return payload

    try:
        return payload.tobytes()
    except AttributeError:
        pass

    # memoryview() rejects integers, which bytes() would quietly accept
    # as a request for that many zero bytes.

    return memoryview(payload).tobytes()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
