import binmsg
import pytest


@pytest.fixture
def codec():
    return binmsg.SimpleMessageCodec()


@pytest.fixture
def sample():

    headers = dict()
    headers['header1'] = 'value1'
    headers['header2'] = 'value2'

    return binmsg.Message(headers, b'This is the payload')

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
