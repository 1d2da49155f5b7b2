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

"""Blocking CouchDB client"""

import json
import logging

from urllib.parse import urlsplit

from tornado.httpclient import HTTPClient, HTTPRequest

from sohva.auth import (
    AUTH_BASIC, DEFAULT_CONTENT_TYPE, SESSION_PATH, ClientConfig,
    anonymous_identity, basic_identity, cookie_identity,
    session_cookie)
from sohva.errors import TRANSPORT_ERRORS, NotFoundError, normalize

log = logging.getLogger('sohva')

DEFAULT_PORT = 5984


def redact_url(url):
    """
    Hide the password of an url that carries credentials.

    Credentials are not escaped, so the password may hold `/` or `@`.
    Everything up to the last `@` is taken as the user info, the url
    must not have an `@` after the host.
    """
    scheme, sep, rest = url.partition('://')
    if not sep:
        return url
    userinfo, at, hostpart = rest.rpartition('@')
    if not at or ':' not in userinfo:
        return url
    username = userinfo.partition(':')[0]
    return '%s://%s:***@%s' % (scheme, username, hostpart)


def from_uri(uri, auth_mode=AUTH_BASIC, **kwargs):
    p = urlsplit(uri)
    if p.query or p.fragment:
        raise ValueError(
            'Invalid server address: %s (extra query params)'
            % redact_url(uri))
    if p.scheme != 'http':
        raise ValueError(
            'Invalid server address: %s (only http:// is supported)'
            % redact_url(uri))
    if p.path.strip('/'):
        raise ValueError(
            'Invalid server address: %s (database path given)'
            % redact_url(uri))

    return Server(p.hostname, p.port or DEFAULT_PORT, p.username or '',
                  p.password or '', auth_mode, **kwargs)


class Server(object):
    """
    Connection to a CouchDB server.

    The base url and default headers are worked out once, when the
    server is created. With `AUTH_BASIC` the credentials go into the
    base url. With `AUTH_COOKIE` the credentials are posted to
    `/_session` right away and the returned cookie is sent with every
    later request.

    `fetch_args` are extra options for every request. Its `headers` are
    merged into the default headers, everything else is passed on to
    `tornado.httpclient.HTTPRequest`. `http_client` can be any object
    with the `fetch` method of `tornado.httpclient.HTTPClient`.
    """

    def __init__(self, host, port, username, password, auth_mode=AUTH_BASIC,
                 fetch_args=None, http_client=None,
                 content_type=DEFAULT_CONTENT_TYPE):
        self._config = ClientConfig.create(
            host, port, username, password, auth_mode, fetch_args)
        owns_client = http_client is None
        if owns_client:
            http_client = HTTPClient()
        self._client = http_client
        try:
            self._identity = self._authenticate(content_type)
        except Exception:
            if owns_client:
                self._client.close()
            raise

    @property
    def config(self):
        return self._config

    @property
    def identity(self):
        return self._identity

    def _authenticate(self, content_type):
        config = self._config
        if config.auth_mode == AUTH_BASIC:
            return basic_identity(config, content_type)

        response = self._fetch(
            SESSION_PATH,
            method='POST',
            body=json.dumps({
                'name': config.username,
                'password': config.password,
                }),
            identity=anonymous_identity(config, content_type),
            )
        identity = cookie_identity(
            config, session_cookie(response), content_type)
        log.debug('Logged in to %s as %s', identity.baseurl, config.username)
        return identity

    def _fetch(self, path, method='GET', body=None, identity=None):
        if identity is None:
            identity = self._identity
        url = identity.baseurl + path
        request = HTTPRequest(
            url,
            method=method,
            headers=identity.headers.copy(),
            body=body,
            **self._config.transport_args
            )
        log.debug('%s %s%s', method, redact_url(identity.baseurl), path)

        try:
            return self._client.fetch(request)
        except TRANSPORT_ERRORS as e:
            raise normalize(e, self._config.host, self._config.port) from e

    def list_databases(self):
        response = self._fetch('/_all_dbs')
        return list(json.loads(response.body))

    def database_exists(self, name):
        try:
            self._fetch('/%s' % name, method='HEAD')
        except NotFoundError:
            return False
        return True

    def close(self):
        self._client.close()

