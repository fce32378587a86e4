import binmsg


def test_ascii_strings():

    for text in ('', 'header1', 'Content-Type', ' \t\r\n', '\x00', '\x7f'):
        assert binmsg.ascii.is_ascii(text) == True


def test_non_ascii_strings():

    for text in ('\x80', 'välue', 'non-ascii-header-ä', '�', 'emoji \U0001f600'):
        assert binmsg.ascii.is_ascii(text) == False


def test_every_code_point_boundary():

    assert binmsg.ascii.is_ascii(''.join(chr(point) for point in range(128))) == True

    for point in (128, 255, 256, 0xffff, 0x10ffff):
        assert binmsg.ascii.is_ascii('abc' + chr(point)) == False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
