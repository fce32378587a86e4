"""Length-prefixed byte sequences on a linear buffer.

Layout of a single field:

    [4 bytes - length, unsigned little-endian][length bytes]

This layer never looks at the bytes themselves; charset rules and size
limits belong to the caller.
"""

from __future__ import annotations

import struct

from .errors import FormatError, Truncated


_LENGTH = struct.Struct('<I')

LENGTH_SIZE = _LENGTH.size


class Cursor:
    """ A read position over an immutable input buffer. All reads are
        bounds-checked against what is left in the buffer; a short read
        raises :class:`Truncated` rather than returning fewer bytes.
    """

    def __init__(self, data):

        view = memoryview(data)

        try:
            view = view.cast('B')
        except TypeError as error:
            raise FormatError('input must be a contiguous bytes-like buffer') from error

        self.data = view
        self.position = 0


    @property
    def remaining(self) -> int:
        return len(self.data) - self.position


    @property
    def at_end(self) -> bool:
        return self.position >= len(self.data)


    def read(self, count: int) -> bytes:
        """ Return the next *count* bytes and advance past them.
        """

        if count < 0 or count > self.remaining:
            raise Truncated('expected %d bytes, %d remain' % (count, self.remaining))

        start = self.position
        self.position = start + count
        return self.data[start:self.position].tobytes()


    def read_byte(self) -> int:
        """ Return the next byte as an unsigned integer.
        """

        if self.remaining < 1:
            raise Truncated('expected 1 byte, buffer is exhausted')

        value = self.data[self.position]
        self.position += 1
        return value


# end of class Cursor



def write_length_prefixed(buffer: bytearray, data: bytes) -> None:
    """ Append the length of *data* followed by *data* itself to *buffer*.
        No upper bound is enforced beyond what fits in the length field.
    """

    buffer += _LENGTH.pack(len(data))
    buffer += data


def read_length_prefixed(cursor: Cursor) -> bytes:
    """ Read a length field from *cursor*, then exactly that many bytes.
        The declared length is untrusted: it is checked against the rest
        of the buffer before anything is sliced.
    """

    if cursor.remaining < LENGTH_SIZE:
        raise Truncated('expected a %d byte length field, %d bytes remain' % (LENGTH_SIZE, cursor.remaining))

    (length,) = _LENGTH.unpack(cursor.read(LENGTH_SIZE))

    if length > cursor.remaining:
        raise Truncated('field declares %d bytes, %d remain' % (length, cursor.remaining))

    return cursor.read(length)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
