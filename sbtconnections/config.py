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

Named endpoints.

Services find the endpoint they talk to by name, ``connections`` unless told
otherwise. Register endpoints one at a time with `register_endpoint()`, or all
at once from a settings mapping with `configure()`:

>>> from sbtconnections import config
>>> config.configure({
...     'connections': {
...         'url': 'https://connections.example.com',
...         'auth_type': 'basic',
...         'username': 'fred',
...         'password': 'secret',
...     },
... })

"""

import logging

from sbtconnections.endpoint import Endpoint


log = logging.getLogger('sbtconnections.config')

DEFAULT_ENDPOINT = 'connections'

endpoints = {}


def register_endpoint(name, endpoint):
    """Makes `endpoint` findable as `name`, replacing any endpoint that
    already had that name."""
    endpoints[name] = endpoint
    log.debug('Registered endpoint %r as %r', endpoint, name)
    return endpoint


def find_endpoint(name=DEFAULT_ENDPOINT):
    """Returns the endpoint registered as `name`.

    If there is no endpoint by that name, raises `KeyError`.

    """
    try:
        return endpoints[name]
    except KeyError:
        raise KeyError('No endpoint is registered as %r' % (name,))


def configure(settings, http=None):
    """Registers an `Endpoint` for each entry of the mapping `settings`.

    Each key is an endpoint name and each value a mapping with a ``url`` and
    optionally ``auth_type``, ``username``, ``password`` and ``token``.
    Optional parameter `http` is the user agent object all the new endpoints
    share.

    """
    for name, options in settings.items():
        options = dict(options)
        try:
            url = options.pop('url')
        except KeyError:
            raise ValueError('Settings for endpoint %r have no url' % (name,))
        register_endpoint(name, Endpoint(url, http=http, **options))
    return endpoints
