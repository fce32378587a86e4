""" Encoding and decoding of complete messages. The wire layout is:

        [1 byte - header count]
        [name length][name][value length][value]    (once per header)
        [payload length][payload]

    Every length field is four bytes, unsigned little-endian; see
    :mod:`binmsg.primitive`. Header text is 7-bit ASCII.

    The :class:`SimpleMessageCodec` holds no per-instance state, so a
    single instance can be shared freely between threads; the module-level
    :func:`encode` and :func:`decode` functions use one such instance.
"""

import logging
from abc import ABC, abstractmethod

from . import ascii
from . import primitive
from .errors import CodecError, FormatError, HeaderTooLarge, NonAsciiHeader, PayloadTooLarge, TooManyHeaders
from .message import Message

logger = logging.getLogger(__name__)


class MessageCodec(ABC):
    """Minimal contract for a message codec."""

    @abstractmethod
    def encode(self, message):
        """Serialize a :class:`Message` to bytes."""

    @abstractmethod
    def decode(self, data, strict=False):
        """Reconstruct a :class:`Message` from bytes."""


class SimpleMessageCodec(MessageCodec):
    """ The reference implementation of the binmsg wire format. The limits
        are class attributes; a subclass can tighten or relax them, with the
        caveat that the header count is always a single byte on the wire.

        Encoding enforces every limit. Decoding, by default, only enforces
        the header count and the ASCII restriction, accepting any field
        length the buffer can satisfy; pass ``strict=True`` to :func:`decode`
        to apply the size limits to incoming messages as well.
    """

    max_header_count = 63
    max_header_size = 1023
    max_payload_size = 256 * 1024

    def encode(self, message):
        """ Return the wire representation of *message* as bytes. The
            message is validated as it is written; the first violation
            raises a :class:`binmsg.errors.ValidationError` and no partial
            output is returned.
        """

        headers = message.headers
        payload = message.payload

        if len(headers) > self.max_header_count:
            raise TooManyHeaders(self._too_many_headers())

        buffer = bytearray()
        buffer.append(len(headers))

        for name, value in headers.items():
            if not ascii.is_ascii(name) or not ascii.is_ascii(value):
                raise NonAsciiHeader('Header names and values must be ASCII-encoded strings.')

            name_bytes = name.encode('ascii')
            value_bytes = value.encode('ascii')

            if len(name_bytes) > self.max_header_size or len(value_bytes) > self.max_header_size:
                raise HeaderTooLarge(self._header_too_large())

            primitive.write_length_prefixed(buffer, name_bytes)
            primitive.write_length_prefixed(buffer, value_bytes)

        if len(payload) > self.max_payload_size:
            raise PayloadTooLarge(self._payload_too_large())

        primitive.write_length_prefixed(buffer, payload)

        return bytes(buffer)


    def decode(self, data, strict=False):
        """ Reconstruct a :class:`Message` from *data*, which may be any
            contiguous bytes-like object; a non-contiguous buffer raises
            :class:`binmsg.errors.FormatError`. Raises :class:`binmsg.errors.Truncated` if
            the buffer ends early, or a
            :class:`binmsg.errors.ValidationError` if the content breaks
            the format rules.

            With *strict* set, the header and payload size limits are
            enforced here as they are in :func:`encode`, and any bytes
            remaining after the payload are rejected.
        """

        cursor = primitive.Cursor(data)

        try:
            return self._decode(cursor, strict)
        except CodecError as error:
            logger.debug('rejected %d byte buffer at offset %d: %s: %s', len(cursor.data), cursor.position, type(error).__name__, error)
            raise


    def _decode(self, cursor, strict):

        header_count = cursor.read_byte()

        if header_count > self.max_header_count:
            raise TooManyHeaders(self._too_many_headers())

        headers = dict()

        for index in range(header_count):
            name = self._read_text(cursor, strict)
            if not ascii.is_ascii(name):
                raise NonAsciiHeader('Header names must be ASCII-encoded strings.')

            value = self._read_text(cursor, strict)
            if not ascii.is_ascii(value):
                raise NonAsciiHeader('Header values must be ASCII-encoded strings.')

            # A repeated name silently replaces the earlier value.
            headers[name] = value

        payload = primitive.read_length_prefixed(cursor)

        if strict:
            if len(payload) > self.max_payload_size:
                raise PayloadTooLarge(self._payload_too_large())

            if not cursor.at_end:
                raise FormatError('trailing bytes after payload: %d' % (cursor.remaining))

        return Message(headers, payload)


    def _read_text(self, cursor, strict):
        """ Read one length-prefixed header field and return it as text.
            Invalid UTF-8 sequences become U+FFFD, which the caller's ASCII
            check will then reject.
        """

        raw = primitive.read_length_prefixed(cursor)

        if strict and len(raw) > self.max_header_size:
            raise HeaderTooLarge(self._header_too_large())

        return raw.decode('utf-8', 'replace')


    def _too_many_headers(self):
        return 'A message can have a maximum of %d headers.' % (self.max_header_count)


    def _header_too_large(self):
        return 'Header names and values are limited to %d bytes.' % (self.max_header_size)


    def _payload_too_large(self):
        return 'The message payload is limited to %d bytes.' % (self.max_payload_size)


# end of class SimpleMessageCodec



default = SimpleMessageCodec()


def encode(message):
    """ Encode *message* with the default :class:`SimpleMessageCodec`.
    """

    return default.encode(message)


def decode(data, strict=False):
    """ Decode *data* with the default :class:`SimpleMessageCodec`.
    """

    return default.decode(data, strict)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
