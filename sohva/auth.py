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

"""Authentication modes and the base identity of a server connection"""

import collections
import types

from tornado.httputil import HTTPHeaders

from sohva.errors import SohvaError

AUTH_COOKIE = 'cookie'
AUTH_BASIC = 'basic'
AUTH_MODES = (AUTH_COOKIE, AUTH_BASIC)

DEFAULT_CONTENT_TYPE = 'application/json'

SESSION_PATH = '/_session'


_ClientConfig = collections.namedtuple(
    '_ClientConfig',
    ['host', 'port', 'username', 'password', 'auth_mode', 'fetch_args'])


class ClientConfig(_ClientConfig):
    """
    Connection parameters of a server.

    `fetch_args` holds extra transport options, such as `headers` or
    `request_timeout`, which are passed on to every request.
    """
    __slots__ = ()

    @classmethod
    def create(cls, host, port, username, password, auth_mode=AUTH_BASIC,
               fetch_args=None):
        if isinstance(port, bool) or not isinstance(port, int):
            raise ValueError('Invalid port: %r' % (port,))
        if not 1 <= port <= 65535:
            raise ValueError('Invalid port: %d' % port)
        if auth_mode not in AUTH_MODES:
            raise ValueError('Invalid authentication mode: %r' % (auth_mode,))
        fetch_args = dict(fetch_args or {})
        if fetch_args.get('headers') is not None:
            fetch_args['headers'] = types.MappingProxyType(
                dict(fetch_args['headers']))
        return cls(host, port, username, password, auth_mode,
                   types.MappingProxyType(fetch_args))

    @property
    def caller_headers(self):
        return self.fetch_args.get('headers') or {}

    @property
    def transport_args(self):
        args = dict(self.fetch_args)
        args.pop('headers', None)
        return args


# The base url and default headers every request of a server is built on
BaseIdentity = collections.namedtuple('BaseIdentity', ['baseurl', 'headers'])


def merge_headers(caller_headers, content_type=DEFAULT_CONTENT_TYPE,
                  cookie=None):
    headers = HTTPHeaders()
    for name, value in caller_headers.items():
        headers[name] = value
    if content_type is not None and 'Content-Type' not in headers:
        headers['Content-Type'] = content_type
    if cookie is not None:
        headers['Cookie'] = cookie
    return headers


def basic_identity(config, content_type=DEFAULT_CONTENT_TYPE):
    baseurl = 'http://%s:%s@%s:%d' % (
        config.username, config.password, config.host, config.port)
    return BaseIdentity(
        baseurl, merge_headers(config.caller_headers, content_type))


def anonymous_identity(config, content_type=DEFAULT_CONTENT_TYPE):
    # Used for the login request itself, before a session exists
    baseurl = 'http://%s:%d' % (config.host, config.port)
    return BaseIdentity(
        baseurl, merge_headers(config.caller_headers, content_type))


def cookie_identity(config, cookie, content_type=DEFAULT_CONTENT_TYPE):
    baseurl = 'http://%s:%d' % (config.host, config.port)
    return BaseIdentity(
        baseurl, merge_headers(config.caller_headers, content_type, cookie))


def session_cookie(response):
    cookie = response.headers.get('Set-Cookie')
    if not cookie:
        raise SohvaError(
            'CouchDB did not return a session cookie', response.code)
    return cookie
