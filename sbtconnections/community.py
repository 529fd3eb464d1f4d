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

The entities of the communities API: communities and their members.

Entities are usually made by a `CommunityService`, which they keep a
reference to so they can load and save themselves through it.

"""

from sbtconnections import constants, fields
from sbtconnections.callbacks import Callbacks
from sbtconnections.dataobject import XmlObject


class Community(XmlObject):

    """A community.

    Changes to `title` and `content` are kept locally until the community is
    created or updated through its service. Tags are changed by setting
    `added_tags` and `deleted_tags`, which are applied to the community's
    current `tags` when it is saved.

    """

    entry_xpaths = constants.COMMUNITY_ENTRY_XPATHS
    feed_xpaths = constants.COMMUNITY_FEED_XPATHS

    community_uuid = fields.Field('communityUuid')
    title          = fields.Field()
    summary        = fields.Field()
    content        = fields.Field()
    community_url  = fields.Field('communityUrl')
    logo_url       = fields.Field('logoUrl')
    tags           = fields.TagList()
    member_count   = fields.Int('memberCount')
    community_type = fields.Field('communityType')
    published      = fields.Datetime()
    updated        = fields.Datetime()
    author_name    = fields.Field('authorName')
    author_email   = fields.Field('authorEmail')
    author_userid  = fields.Field('authorUserid')
    added_tags     = fields.Field('addedTags')
    deleted_tags   = fields.Field('deletedTags')

    def load(self, **callbacks):
        """Loads the community's entry document from the server.

        Callbacks `load`, `error` and `handle` are as for
        `CommunityService.load_community()`.

        """
        self._service.load_community(self, **callbacks)

    def update(self, **callbacks):
        """Saves the community's local changes to the server."""
        self._service.update_community(self, **callbacks)

    def remove(self, **callbacks):
        """Deletes the community from the server."""
        self._service.delete_community(self, **callbacks)


class Member(XmlObject):

    """A member of a community.

    A member's id is either its user id or its email address.

    """

    entry_xpaths = constants.MEMBER_ENTRY_XPATHS
    feed_xpaths = constants.MEMBER_FEED_XPATHS

    name   = fields.Field()
    email  = fields.Field()
    userid = fields.Field()
    role   = fields.Field()

    def load(self, community, **callbacks):
        """Loads the member's entry document in `community` from the server,
        unless it has been loaded already."""
        if self.data is None:
            self._service.load_member(self, community, **callbacks)
        else:
            Callbacks(**callbacks).loaded(self)
