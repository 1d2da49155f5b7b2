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

"""Errors raised by sohva and the mapping from transport failures"""

from tornado.httpclient import HTTPClientError
from tornado.iostream import StreamClosedError

# Collection of possible couchdb errors
BAD_REQUEST = 400
UNAUTHORIZED = 401
NOT_FOUND = 404
CONFLICT = 409
PRECONDITION_FAILED = 412
SERVER_ERROR = 500

# Tornado reports timeouts and dropped connections with this code
CONNECTION_FAILED = 599


class SohvaError(Exception):
    """
    A common error class denoting an error that has happened while
    talking to CouchDB
    """

    def __init__(self, msg, errno=None):
        super(SohvaError, self).__init__(msg)
        self.errno = errno
        self.msg = msg

    def __str__(self):
        return self.msg


class ServerConnectionError(SohvaError):
    """No response was received from the server"""


class HTTPStatusError(SohvaError):
    """The server answered with a non-2xx status"""

    def __init__(self, errno, msg):
        super(HTTPStatusError, self).__init__(msg, errno)


class UnauthorizedError(HTTPStatusError):
    pass


class NotFoundError(HTTPStatusError):
    pass


# Exceptions the HTTP client raises for failed requests
TRANSPORT_ERRORS = (HTTPClientError, OSError, StreamClosedError)

errormap = {
    UNAUTHORIZED: UnauthorizedError,
    NOT_FOUND: NotFoundError,
    }


def normalize(error, host, port):
    """
    Turn a failure raised by the HTTP client into a SohvaError.

    Connection failures get a message built from `host` and `port`,
    since tornado's own message may describe a resolver or socket
    detail instead of the server. HTTP errors keep the message of the
    client error as is. Anything else is not a transport failure and
    is returned untouched.
    """
    if isinstance(error, HTTPClientError):
        if error.code == CONNECTION_FAILED:
            return ServerConnectionError(
                'Failed to connect to %s port %d' % (host, port))
        cls = errormap.get(error.code, HTTPStatusError)
        return cls(error.code, str(error))

    if isinstance(error, (OSError, StreamClosedError)):
        return ServerConnectionError(
            'Failed to connect to %s port %d' % (host, port))

    return error
