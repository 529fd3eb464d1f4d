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

The communities service: reading, creating, updating and deleting
communities and their members.

All operations report their outcome through the ``load``, ``error`` and
``handle`` callbacks described in `sbtconnections.callbacks`. For example:

>>> from sbtconnections import CommunityService, Endpoint
>>> service = CommunityService(Endpoint('https://connections.example.com',
...     username='fred', password='secret'))
>>> def show(community):
...     print(community.title)
...
>>> community = service.get_community(id='b4f12458-3cc2-49d2-9e8f-9b7ae6b1b9ed',
...     load=show)

"""

import logging
from urllib.parse import parse_qs, urlsplit

from lxml import etree

from sbtconnections import atom, config, constants
from sbtconnections.callbacks import Callbacks, ServiceError
from sbtconnections.community import Community, Member
from sbtconnections.dataobject import parse_document
from sbtconnections.endpoint import Endpoint
from sbtconnections.listobject import Feed


log = logging.getLogger('sbtconnections.service')


class CommunityService(object):

    """The communities service of an API server.

    The service holds no state besides its endpoint and message table, so
    one service can be used for any number of operations.

    """

    community_class = Community
    member_class = Member

    # collection type: (service entity, entity class, feed XPath table)
    collections = {
        'public':  ('communities', Community, constants.COMMUNITY_FEED_XPATHS),
        'my':      ('communities', Community, constants.COMMUNITY_FEED_XPATHS),
        'members': ('community', Member, constants.MEMBER_FEED_XPATHS),
    }

    atom_headers = {'content-type': constants.ATOM_CONTENT_TYPE}

    def __init__(self, endpoint=config.DEFAULT_ENDPOINT, messages=None):
        """Sets up a service talking to `endpoint`.

        Parameter `endpoint` is either an `Endpoint` instance or the name of
        one registered with `sbtconnections.config`.

        Optional parameter `messages` is a mapping of error message keys to
        the messages to report failed preconditions with, overriding the
        defaults in `constants.ERROR_MESSAGES`.

        """
        if isinstance(endpoint, str):
            endpoint = config.find_endpoint(endpoint)
        self.endpoint = endpoint
        self.messages = dict(constants.ERROR_MESSAGES)
        if messages:
            self.messages.update(messages)

    def __repr__(self):
        return '<%s at %r>' % (type(self).__name__, self.endpoint)

    # URLs

    def service_url(self, path):
        return constants.SERVICE_BASE_URL + self.endpoint.auth_segment + path

    def community_url(self, method_name):
        return self.service_url(constants.COMMUNITY_URLS[method_name])

    def collection_url(self, entity_name, collection_type):
        return self.service_url(constants.SERVICE_ENTITIES[entity_name]
            + constants.COLLECTION_TYPES[collection_type])

    # Preconditions

    def _fail(self, callbacks, key):
        callbacks.failed(ServiceError(constants.ERROR_CODES['badRequest'],
            self.messages[key]))
        return False

    def _check_community(self, community, callbacks):
        if not isinstance(community, self.community_class):
            return self._fail(callbacks, 'args_community')
        if not community.id:
            return self._fail(callbacks, 'null_community_id')
        return True

    def _check_member(self, member, callbacks):
        if not isinstance(member, self.member_class):
            return self._fail(callbacks, 'args_member')
        if not member.id:
            return self._fail(callbacks, 'null_member_id')
        return True

    def _community_from(self, community):
        if isinstance(community, str):
            return self.community_class(self, community)
        return community

    def _member_from(self, member):
        if isinstance(member, str):
            return self.member_class(self, member)
        return member

    def _community_id(self, community, callbacks):
        """Returns the id of `community`, given either as an id or as a
        `Community`, or `None` after reporting why there is none."""
        if not community:
            self._fail(callbacks, 'null_community')
            return None
        if isinstance(community, str):
            return community
        if not self._check_community(community, callbacks):
            return None
        return community.id

    def _member_query(self, community_id, member):
        query = {'communityUuid': community_id}
        if atom.is_email(member.id):
            query['email'] = member.id
        else:
            query['userid'] = member.id
        return query

    def _entry_body(self, build, entity, callbacks):
        """Returns the serialized entry document `build` makes for `entity`,
        or `None` after reporting why it could not be built."""
        try:
            return atom.tostring(build(entity))
        except (ValueError, TypeError) as exc:
            # lxml rejects control characters and non-string values.
            log.warning('Could not build entry for %r: %s', entity, exc)
            callbacks.failed(exc)
            return None

    def _loader(self, entity, callbacks):
        """Returns an endpoint ``load`` callback that fills `entity` with the
        response document and reports it loaded."""
        def load(content, response):
            try:
                entity.update_from_content(content)
            except etree.XMLSyntaxError as exc:
                log.warning('Could not parse response for %r: %s', entity, exc)
                callbacks.failed(exc)
                return
            callbacks.loaded(entity)
        return load

    # Reading

    def get_community(self, id=None, load_it=True, **callbacks):
        """Returns a `Community` for the community with the given id.

        Unless `load_it` is false, the community's entry document is loaded
        from the server and the `load` callback receives the loaded
        community. If `load_it` is false, no request is made and `load`
        receives the community right away.

        """
        if id is not None and not isinstance(id, str):
            log.error(self.messages['args_object'])
            return None
        callbacks = Callbacks(**callbacks)
        community = self.community_class(self, id)
        if load_it:
            self._load_community(community, callbacks)
        else:
            callbacks.loaded(community)
        return community

    def load_community(self, community, **callbacks):
        """Loads the entry document of `community`, which must have an id,
        replacing any document it already had."""
        return self._load_community(community, Callbacks(**callbacks))

    def _load_community(self, community, callbacks):
        if not self._check_community(community, callbacks):
            return
        return self.endpoint.get(self.community_url('getCommunity'),
            query={'communityUuid': community.id},
            load=self._loader(community, callbacks), error=callbacks.failed)

    def get_member(self, id, community, load_it=True, **callbacks):
        """Returns a `Member` for the member of `community` with the given
        id, which may be a user id or an email address.

        Parameter `community` is either a community id or a `Community`.
        Loading works as for `get_community()`.

        """
        if not isinstance(id, str):
            log.error(self.messages['args_object'])
            return None
        callbacks = Callbacks(**callbacks)
        member = self.member_class(self, id)
        if load_it:
            self._load_member(member, community, callbacks)
        else:
            callbacks.loaded(member)
        return member

    def load_member(self, member, community, **callbacks):
        """Loads the entry document of `member` as a member of
        `community`."""
        return self._load_member(member, community, Callbacks(**callbacks))

    def _load_member(self, member, community, callbacks):
        if not self._check_member(member, callbacks):
            return
        community_id = self._community_id(community, callbacks)
        if community_id is None:
            return
        return self.endpoint.get(self.community_url('getMember'),
            query=self._member_query(community_id, member),
            load=self._loader(member, callbacks), error=callbacks.failed)

    def get_entities(self, type, parameters=None, community=None, **callbacks):
        """Requests a feed of entities and reports it to the `load` callback
        as a `Feed`.

        Parameter `type` selects the feed: ``public`` for all public
        communities, ``my`` for the authenticated user's communities, or
        ``members`` for the members of `community` (a community id or a
        `Community`).

        Optional parameter `parameters` is a mapping of query parameters,
        such as ``ps`` or ``sortBy``, passed to the server as is.

        """
        try:
            entity_name, entity_cls, xpaths = self.collections[type]
        except KeyError:
            raise ValueError('No such collection type %r' % (type,))
        callbacks = Callbacks(**callbacks)

        query = dict(parameters or {})
        if type == 'members':
            community_id = self._community_id(self._community_from(community),
                callbacks)
            if community_id is None:
                return
            query['communityUuid'] = community_id

        def load(content, response):
            try:
                document = parse_document(content)
            except etree.XMLSyntaxError as exc:
                log.warning('Could not parse %s feed: %s', type, exc)
                callbacks.failed(exc)
                return
            callbacks.loaded(Feed.from_document(document, entity_cls, self,
                xpaths))

        return self.endpoint.get(self.collection_url(entity_name, type),
            query=query, load=load, error=callbacks.failed)

    def get_public_communities(self, parameters=None, **callbacks):
        return self.get_entities('public', parameters=parameters, **callbacks)

    def get_my_communities(self, parameters=None, **callbacks):
        return self.get_entities('my', parameters=parameters, **callbacks)

    def get_members(self, community, parameters=None, **callbacks):
        return self.get_entities('members', parameters=parameters,
            community=community, **callbacks)

    # Writing

    @staticmethod
    def community_id_from_location(location):
        """Returns the community id in the URL of a new community."""
        values = parse_qs(urlsplit(location).query).get('communityUuid')
        if values:
            return values[0]
        marker = 'communityUuid='
        if marker in location:
            return location[location.index(marker) + len(marker):]
        return None

    def create_community(self, community, load_it=True, **callbacks):
        """Creates `community` on the server.

        On success the community gets the id the server assigned it and its
        local changes are cleared. Unless `load_it` is false, its new entry
        document is then loaded before the `load` callback is called.

        """
        callbacks = Callbacks(**callbacks)
        if not isinstance(community, self.community_class):
            self._fail(callbacks, 'args_community')
            return
        body = self._entry_body(atom.community_entry, community, callbacks)
        if body is None:
            return

        def load(content, response):
            location = response.get('location', '')
            community_id = self.community_id_from_location(location)
            if not community_id:
                callbacks.failed(Endpoint.BadResponse(
                    'No community id in Location %r' % (location,)))
                return
            community.id = community_id
            community.local_fields = {}
            log.debug('Created community %r at %s', community.id, location)
            if load_it:
                self._load_community(community, callbacks)
            else:
                callbacks.loaded(community)

        return self.endpoint.post(self.community_url('createCommunity'),
            headers=dict(self.atom_headers), body=body, load=load,
            error=callbacks.failed)

    def update_community(self, community, **callbacks):
        """Saves the local changes of `community` to the server.

        On success the local changes are cleared and the community's
        document replaced by the server's.

        """
        callbacks = Callbacks(**callbacks)
        if not self._check_community(community, callbacks):
            return
        body = self._entry_body(atom.community_entry, community, callbacks)
        if body is None:
            return

        def load(content, response):
            community.local_fields = {}
            if content and content.strip():
                self._loader(community, callbacks)(content, response)
            else:
                # Nothing came back to replace the document with.
                self._load_community(community, callbacks)

        return self.endpoint.put(self.community_url('updateCommunity'),
            query={'communityUuid': community.id},
            headers=dict(self.atom_headers), body=body, load=load,
            error=callbacks.failed)

    def delete_community(self, community, **callbacks):
        """Deletes the community given by `community`, either a community id
        or a `Community`. The `load` callback is called with no arguments."""
        callbacks = Callbacks(**callbacks)
        community = self._community_from(community)
        if not self._check_community(community, callbacks):
            return

        def load(content, response):
            log.debug('Deleted community %r', community.id)
            # No more resource, no more id.
            community.id = None
            callbacks.loaded()

        return self.endpoint.delete(self.community_url('deleteCommunity'),
            query={'communityUuid': community.id}, load=load,
            error=callbacks.failed)

    def add_member(self, community, member, **callbacks):
        """Adds `member` to `community`.

        Either may be given as an id or as an entity. A `Member` with a
        local `role` is added in that role. On success the member's entry
        document in the community is loaded and passed to `load`.

        """
        callbacks = Callbacks(**callbacks)
        if community is None:
            self._fail(callbacks, 'null_community')
            return
        community = self._community_from(community)
        member = self._member_from(member)
        if not self._check_community(community, callbacks):
            return
        if not self._check_member(member, callbacks):
            return
        body = self._entry_body(atom.member_entry, member, callbacks)
        if body is None:
            return

        def load(content, response):
            member.local_fields = {}
            self._load_member(member, community, callbacks)

        return self.endpoint.post(self.community_url('addMember'),
            query={'communityUuid': community.id},
            headers=dict(self.atom_headers), body=body, load=load,
            error=callbacks.failed)

    def remove_member(self, community, member, **callbacks):
        """Removes `member` from `community`. Either may be given as an id or
        as an entity. The `load` callback is called with no arguments."""
        callbacks = Callbacks(**callbacks)
        if community is None:
            self._fail(callbacks, 'null_community')
            return
        community = self._community_from(community)
        member = self._member_from(member)
        if not self._check_community(community, callbacks):
            return
        if not self._check_member(member, callbacks):
            return

        def load(content, response):
            callbacks.loaded()

        return self.endpoint.delete(self.community_url('removeMember'),
            query=self._member_query(community.id, member), load=load,
            error=callbacks.failed)
