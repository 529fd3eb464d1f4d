# Copyright (c) 2009-2010 Six Apart Ltd.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# * Redistributions of source code must retain the above copyright notice,
#   this list of conditions and the following disclaimer.
#
# * Redistributions in binary form must reproduce the above copyright notice,
#   this list of conditions and the following disclaimer in the documentation
#   and/or other materials provided with the distribution.
#
# * Neither the name of Six Apart Ltd. nor the names of its contributors may
#   be used to endorse or promote products derived from this software without
#   specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""

The transport that services use to talk to the API server.

An `Endpoint` knows the server's base URL and how to authenticate to it, and
performs requests with an `httplib2.Http` user agent. Outcomes are reported
through callbacks: ``load(content, response)`` for a successful response, or
``error(exc)`` with an exception describing the failure.

"""

import http.client as httplib
import logging
import socket
from urllib.parse import urlencode

import httplib2

from sbtconnections import constants


log = logging.getLogger('sbtconnections.endpoint')


class Endpoint(object):

    """A server that can be requested over HTTP through a RESTful Atom API."""

    response_has_content = {
        httplib.OK:                True,
        httplib.ACCEPTED:          False,
        httplib.CREATED:           True,
        httplib.NO_CONTENT:        False,
        httplib.MOVED_PERMANENTLY: True,
        httplib.FOUND:             True,
        httplib.NOT_MODIFIED:      True,
    }

    location_headers = {
        httplib.OK:                'Content-Location',
        httplib.CREATED:           'Location',
        httplib.MOVED_PERMANENTLY: 'Location',
        httplib.FOUND:             'Location',
    }

    location_header_required = {
        httplib.CREATED:           True,
        httplib.MOVED_PERMANENTLY: True,
        httplib.FOUND:             True,
    }

    content_types = (constants.ATOM_CONTENT_TYPE, 'application/xml', 'text/xml')

    class NotFound(httplib.HTTPException):
        """An HTTPException thrown when the server reports that the requested
        resource was not found."""
        pass

    class Unauthorized(httplib.HTTPException):
        """An HTTPException thrown when the server reports that the requested
        resource is not available through an unauthenticated request.

        This exception corresponds to the HTTP status code 401. Thus when this
        exception is received, the caller may need to try again using the
        available authentication credentials.

        """
        pass

    class Forbidden(httplib.HTTPException):
        """An HTTPException thrown when the server reports that the client, as
        authenticated, is not authorized to request the requested resource.

        This exception corresponds to the HTTP status code 403.

        """
        pass

    class PreconditionFailed(httplib.HTTPException):
        """An HTTPException thrown when the server reports that some of the
        conditions in a conditional request were not true.

        This exception corresponds to the HTTP status code 412.

        """
        pass

    class RequestError(httplib.HTTPException):
        """An HTTPException thrown when the server reports an error in the
        client's request.

        This exception corresponds to the HTTP status code 400.

        """
        pass

    class ServerError(httplib.HTTPException):
        """An HTTPException thrown when the server reports an unexpected error.

        This exception corresponds to the HTTP status code 500.

        """
        pass

    class BadResponse(httplib.HTTPException):
        """An HTTPException thrown when the client receives some other
        non-success HTTP response."""
        pass

    def __init__(self, base_url, auth_type='basic', username=None,
                 password=None, token=None, http=None, executor=None):
        """Sets up an endpoint for the server at `base_url`.

        Parameter `auth_type` selects how requests are authenticated:
        ``basic`` uses the `username` and `password` credentials, and
        ``oauth`` sends `token` as a bearer token.

        Optional parameter `http` is the user agent object to use for
        requests. `http` should be compatible with `httplib2.Http` instances.

        Optional parameter `executor` is a `concurrent.futures.Executor`. If
        given, requests are submitted to it and the request methods return a
        `Future` right away; otherwise requests are performed before the
        request methods return.

        """
        self.base_url = base_url.rstrip('/')
        self.auth_type = auth_type
        self.token = token
        self.executor = executor
        if http is None:
            http = httplib2.Http()
        self.http = http
        if auth_type == 'basic' and username is not None:
            self.http.add_credentials(username, password)

    def __repr__(self):
        return '<%s %s (%s)>' % (type(self).__name__, self.base_url,
            self.auth_type)

    @property
    def auth_segment(self):
        """The URL path segment for this endpoint's kind of authentication.

        Unrecognized kinds use the same URLs as basic authentication.

        """
        return constants.AUTH_TYPE_SEGMENTS.get(self.auth_type, '')

    def make_url(self, url, query=None):
        if not url.startswith(('http://', 'https://')):
            url = self.base_url + url
        if query:
            url = '%s%s%s' % (url, '&' if '?' in url else '?',
                urlencode(query))
        return url

    def get_request(self, url, method='GET', query=None, headers=None, body=None):
        """Returns the parameters for the given request as a dictionary of
        keyword arguments suitable for passing to `httplib2.Http.request()`.

        """
        headers = dict(headers or {})
        if 'accept' not in headers:
            headers['accept'] = constants.ATOM_CONTENT_TYPE
        if self.auth_type == 'oauth' and self.token is not None:
            headers['authorization'] = 'Bearer %s' % self.token

        # Use 'uri' because httplib2.request does.
        request = dict(uri=self.make_url(url, query), method=method,
            headers=headers)
        if body is not None:
            request['body'] = body
        return request

    @classmethod
    def raise_for_response(cls, url, response, content):
        """Raises exceptions corresponding to HTTP responses that are not
        successful responses from the API.

        Override this method to customize the error handling behavior of the
        endpoint for your server.

        """
        if response.status == httplib.NOT_FOUND:
            raise cls.NotFound('No such resource %s' % (url,))
        if response.status == httplib.UNAUTHORIZED:
            raise cls.Unauthorized('Not authorized to fetch %s' % (url,))
        if response.status == httplib.FORBIDDEN:
            raise cls.Forbidden('Forbidden from fetching %s' % (url,))
        if response.status == httplib.PRECONDITION_FAILED:
            raise cls.PreconditionFailed('Precondition failed for request to %s' % (url,))

        if response.status in (httplib.INTERNAL_SERVER_ERROR, httplib.BAD_REQUEST):
            if response.status == httplib.BAD_REQUEST:
                err_cls = cls.RequestError
            else:
                err_cls = cls.ServerError
            # Pull out an error if we can.
            content_type = response.get('content-type', '').split(';', 1)[0].strip()
            if content_type == 'text/plain':
                if isinstance(content, bytes):
                    content = content.decode('utf-8', 'replace')
                error = content.split('\n', 2)[0]
                exc = err_cls('%d %s requesting %s: %s'
                    % (response.status, response.reason, url, error))
                exc.response_error = error
                raise exc
            raise err_cls('%d %s requesting %s'
                % (response.status, response.reason, url))

        try:
            response_has_content = cls.response_has_content[response.status]
        except KeyError:
            # we only expect the statuses that we know do or don't have content
            raise cls.BadResponse('Unexpected response requesting %s: %d %s'
                % (url, response.status, response.reason))

        location_header = cls.location_headers.get(response.status)
        if (location_header is not None
                and cls.location_header_required.get(response.status)
                and location_header.lower() not in response):
            raise cls.BadResponse(
                "%r header missing from %d %s response requesting %s"
                % (location_header, response.status, response.reason, url))

        if not response_has_content or not content:
            # then there's nothing to check the type of, so we're done
            return

        content_type = response.get('content-type', '').split(';', 1)[0].strip()
        if content_type not in cls.content_types:
            raise cls.BadResponse(
                'Bad response fetching %s: content-type %s is not an expected type'
                % (url, response.get('content-type')))

    def request(self, method, url, query=None, headers=None, body=None,
                load=None, error=None):
        """Requests `url` with the HTTP verb `method`.

        On a successful response, calls `load` with the response body and the
        `httplib2.Response`. On failure, calls `error` with the exception
        describing it: one of the endpoint's `HTTPException` classes for an
        unsuccessful response, or the connection error itself.

        Returns a `Future` if the endpoint has an executor, otherwise `None`.
        Exceptions raised by the callbacks of an executor request are logged.

        """
        request = self.get_request(url, method=method, query=query,
            headers=headers, body=body)

        def perform():
            log.debug('%s %s', request['method'], request['uri'])
            try:
                response, content = self.http.request(**request)
                self.raise_for_response(request['uri'], response, content)
            except (httplib.HTTPException, httplib2.HttpLib2Error, socket.error) as exc:
                log.debug('%s %s failed: %s', request['method'], request['uri'], exc)
                if error is not None:
                    error(exc)
                return
            if load is not None:
                load(content, response)

        if self.executor is not None:
            future = self.executor.submit(perform)
            future.add_done_callback(self._log_callback_failure)
            return future
        perform()

    @staticmethod
    def _log_callback_failure(future):
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            log.error('Callback for request failed', exc_info=exc)

    def get(self, url, **kwargs):
        return self.request('GET', url, **kwargs)

    def post(self, url, **kwargs):
        return self.request('POST', url, **kwargs)

    def put(self, url, **kwargs):
        return self.request('PUT', url, **kwargs)

    def delete(self, url, **kwargs):
        return self.request('DELETE', url, **kwargs)
