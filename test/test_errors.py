# Copuright (c) 2011 Jyrki Pulliainen <jyrki@dywypi.org>
# Copyright (c) 2010 Inoi Oy
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation
# files (the "Software"), to deal in the Software without
# restriction, including without limitation the rights to use, copy,
# modify, merge, publish, distribute, sublicense, and/or sell copies
# of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import socket

import pytest
from tornado.httpclient import HTTPClientError
from tornado.simple_httpclient import HTTPTimeoutError
from tornado.iostream import StreamClosedError

from sohva import errors


@pytest.mark.parametrize('failure', [
    ConnectionRefusedError(111, 'Connection refused'),
    socket.gaierror(-2, 'Name or service not known'),
    StreamClosedError(),
    HTTPTimeoutError('Timeout while connecting'),
    HTTPClientError(599, 'Stream closed'),
    ])
def test_connection_failures(failure):
    error = errors.normalize(failure, 'couch.local', 5984)
    assert type(error) is errors.ServerConnectionError
    assert error.msg == 'Failed to connect to couch.local port 5984'
    assert error.errno is None


def test_unauthorized_passes_message():
    failure = HTTPClientError(401, 'Unauthorized')
    error = errors.normalize(failure, 'host', 5984)
    assert type(error) is errors.UnauthorizedError
    assert error.errno == errors.UNAUTHORIZED
    assert str(error) == str(failure)


def test_not_found():
    error = errors.normalize(HTTPClientError(404), 'host', 5984)
    assert type(error) is errors.NotFoundError
    assert isinstance(error, errors.HTTPStatusError)
    assert error.errno == errors.NOT_FOUND


@pytest.mark.parametrize('code', [
    errors.BAD_REQUEST, errors.CONFLICT, errors.PRECONDITION_FAILED,
    errors.SERVER_ERROR, 503])
def test_other_statuses_are_generic(code):
    failure = HTTPClientError(code, 'Server said no')
    error = errors.normalize(failure, 'host', 5984)
    assert type(error) is errors.HTTPStatusError
    assert error.errno == code
    assert error.msg == str(failure)


def test_other_exceptions_are_returned_untouched():
    failure = ValueError('not json')
    assert errors.normalize(failure, 'host', 5984) is failure
