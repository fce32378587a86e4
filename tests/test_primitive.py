import binmsg
import pytest

from binmsg.primitive import Cursor, read_length_prefixed, write_length_prefixed


def test_write_layout():

    buffer = bytearray()
    write_length_prefixed(buffer, b'abc')
    write_length_prefixed(buffer, b'')

    assert bytes(buffer) == b'\x03\x00\x00\x00abc\x00\x00\x00\x00'


def test_little_endian_length():

    buffer = bytearray()
    write_length_prefixed(buffer, b'x' * 0x0102)

    assert bytes(buffer[:4]) == b'\x02\x01\x00\x00'
    assert len(buffer) == 4 + 0x0102


def test_read_sequence():

    buffer = bytearray()
    write_length_prefixed(buffer, b'first')
    write_length_prefixed(buffer, b'\x00\xff')

    cursor = Cursor(buffer)
    assert read_length_prefixed(cursor) == b'first'
    assert read_length_prefixed(cursor) == b'\x00\xff'
    assert cursor.at_end


def test_short_length_field():

    cursor = Cursor(b'\x01\x00\x00')

    with pytest.raises(binmsg.Truncated):
        read_length_prefixed(cursor)


def test_short_data():

    cursor = Cursor(b'\x05\x00\x00\x00abc')

    with pytest.raises(binmsg.Truncated):
        read_length_prefixed(cursor)


def test_hostile_length():
    """ A length field claiming nearly 4 GiB must be rejected against the
        actual buffer size, not trusted.
    """

    cursor = Cursor(b'\xff\xff\xff\xff' + b'tiny')

    with pytest.raises(binmsg.Truncated):
        read_length_prefixed(cursor)


def test_cursor():

    cursor = Cursor(b'\x2aabc')
    assert cursor.remaining == 4
    assert cursor.read_byte() == 42
    assert cursor.read(2) == b'ab'
    assert cursor.remaining == 1
    assert cursor.at_end == False

    with pytest.raises(binmsg.Truncated):
        cursor.read(2)

    assert cursor.read(1) == b'c'
    assert cursor.at_end

    with pytest.raises(binmsg.Truncated):
        cursor.read_byte()


def test_truncated_is_value_error():

    with pytest.raises(ValueError):
        Cursor(b'').read_byte()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
