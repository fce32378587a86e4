""" Header names and values are restricted to 7-bit ASCII, one byte per
    character on the wire.
"""


def is_ascii(text):
    """ Return True if every code point in *text* is 127 or less. The empty
        string is ASCII.
    """

    return text.isascii()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
