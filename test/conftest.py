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

from io import BytesIO

import pytest
from tornado.httpclient import HTTPResponse
from tornado.httputil import HTTPHeaders


class MockHTTPClient(object):
    """
    Stands in for tornado.httpclient.HTTPClient.

    Every queued item answers one request. An exception is raised as
    is, a `(code, headers, body)` tuple becomes an HTTPResponse which
    raises its error for non-2xx codes like the real client does.
    """

    def __init__(self, *queue):
        self.queue = list(queue)
        self.requests = []
        self.closed = False

    def fetch(self, request, raise_error=True):
        self.requests.append(request)
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item

        code, headers, body = item
        response = HTTPResponse(
            request, code,
            headers=HTTPHeaders(headers),
            buffer=BytesIO(body),
            )
        if raise_error and response.error:
            raise response.error
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def mock_http():
    return MockHTTPClient
