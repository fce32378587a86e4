"""Codec exceptions.

Everything raised by :mod:`binmsg` on bad input derives from
:class:`CodecError`. Both branches also derive from :class:`ValueError`, so
callers that only care whether a message was acceptable can catch that.
"""

from __future__ import annotations


class CodecError(Exception):
    """Base class for all codec errors."""


# Validation errors: the message is well-formed but violates a format limit.

class ValidationError(CodecError, ValueError):
    """A header or payload violates one of the format limits."""


class TooManyHeaders(ValidationError):
    """The header count exceeds the maximum."""


class NonAsciiHeader(ValidationError):
    """A header name or value contains a non-ASCII code point."""


class HeaderTooLarge(ValidationError):
    """An encoded header name or value exceeds the maximum size."""


class PayloadTooLarge(ValidationError):
    """The payload exceeds the maximum size."""


# Format errors: the buffer itself cannot be parsed.

class FormatError(CodecError, ValueError):
    """The byte sequence is not a structurally valid message."""


class Truncated(FormatError):
    """The buffer ends before a declared field is complete."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
