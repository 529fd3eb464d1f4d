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

sbtconnections is a Python client for the communities API of a
social-collaboration server.

The API serves communities and their members as Atom documents. This library
gives you real Python objects for them instead:

* `Community` and `Member` entities whose attributes are read out of the Atom
  documents through XPath, with local changes kept until they are saved

* a `CommunityService` that creates, reads, updates and deletes communities,
  lists them, and adds and removes members

* full HTTP support through the `httplib2` library, with basic or OAuth
  authentication


Example
=======

    >>> from sbtconnections import CommunityService, Endpoint
    >>> endpoint = Endpoint('https://connections.example.com',
    ...     username='fred', password='secret')
    >>> service = CommunityService(endpoint)
    >>> def show(feed):
    ...     for community in feed:
    ...         print(community.title, community.tags)
    ...
    >>> service.get_public_communities(parameters={'ps': 5}, load=show)


Callbacks
=========

Every service operation reports its outcome to the optional ``load``,
``error`` and ``handle`` keyword arguments. An endpoint created with an
``executor`` performs its requests there, so operations return right away
and the callbacks run when the response arrives.

"""

__version__ = '1.0'
__author__ = 'Six Apart Ltd.'

from sbtconnections import config, fields
from sbtconnections.callbacks import ServiceError
from sbtconnections.community import Community, Member
from sbtconnections.endpoint import Endpoint
from sbtconnections.listobject import Feed
from sbtconnections.service import CommunityService

__all__ = ('CommunityService', 'Community', 'Member', 'Endpoint', 'Feed',
    'ServiceError', 'config', 'fields')
