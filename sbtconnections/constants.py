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

Fixed tables for the communities API: XML namespaces, the XPath expressions
for each entity field, service URL fragments and the error code and message
tables used when reporting failed preconditions.

"""

NAMESPACES = {
    'a':          'http://www.w3.org/2005/Atom',
    'app':        'http://www.w3.org/2007/app',
    'snx':        'http://www.ibm.com/xmlns/prod/sn',
    'opensearch': 'http://a9.com/-/spec/opensearch/1.1/',
}

ATOM_CONTENT_TYPE = 'application/atom+xml'

# Entry maps are read against a document whose root is a single entry. Feed
# maps are read relative to one entry element inside a feed.
COMMUNITY_ENTRY_XPATHS = {
    'entry':         '/a:entry',
    'id':            '/a:entry/snx:communityUuid',
    'communityUuid': '/a:entry/snx:communityUuid',
    'title':         '/a:entry/a:title',
    'summary':       '/a:entry/a:summary[@type="text"]',
    'content':       '/a:entry/a:content[@type="html"]',
    'communityUrl':  '/a:entry/a:link[@rel="alternate"]/@href',
    'logoUrl':       '/a:entry/a:link[@rel="http://www.ibm.com/xmlns/prod/sn/logo"]/@href',
    'tags':          '/a:entry/a:category/@term',
    'memberCount':   '/a:entry/snx:membercount',
    'communityType': '/a:entry/snx:communityType',
    'published':     '/a:entry/a:published',
    'updated':       '/a:entry/a:updated',
    'authorName':    '/a:entry/a:author/a:name',
    'authorEmail':   '/a:entry/a:author/a:email',
    'authorUserid':  '/a:entry/a:author/snx:userid',
}

COMMUNITY_FEED_XPATHS = {
    'entry':         '/a:feed/a:entry',
    'id':            'snx:communityUuid',
    'communityUuid': 'snx:communityUuid',
    'title':         'a:title',
    'summary':       'a:summary[@type="text"]',
    'content':       'a:content[@type="html"]',
    'communityUrl':  'a:link[@rel="alternate"]/@href',
    'logoUrl':       'a:link[@rel="http://www.ibm.com/xmlns/prod/sn/logo"]/@href',
    'tags':          'a:category/@term',
    'memberCount':   'snx:membercount',
    'communityType': 'snx:communityType',
    'published':     'a:published',
    'updated':       'a:updated',
    'authorName':    'a:author/a:name',
    'authorEmail':   'a:author/a:email',
    'authorUserid':  'a:author/snx:userid',
}

MEMBER_ENTRY_XPATHS = {
    'entry':  '/a:entry',
    'id':     '/a:entry/a:contributor/snx:userid',
    'name':   '/a:entry/a:contributor/a:name',
    'email':  '/a:entry/a:contributor/a:email',
    'userid': '/a:entry/a:contributor/snx:userid',
    'role':   '/a:entry/snx:role',
}

MEMBER_FEED_XPATHS = {
    'entry':  '/a:feed/a:entry',
    'id':     'a:contributor/snx:userid',
    'name':   'a:contributor/a:name',
    'email':  'a:contributor/a:email',
    'userid': 'a:contributor/snx:userid',
    'role':   'snx:role',
}

FEED_XPATHS = {
    'totalResults': '/a:feed/opensearch:totalResults',
    'startIndex':   '/a:feed/opensearch:startIndex',
    'itemsPerPage': '/a:feed/opensearch:itemsPerPage',
}

COMMUNITY_TYPE_SCHEME = 'http://www.ibm.com/xmlns/prod/sn/type'
COMMUNITY_ROLE_COMPONENT = 'http://www.ibm.com/xmlns/prod/sn/communities'

SERVICE_BASE_URL = '/communities'

AUTH_TYPE_SEGMENTS = {
    'basic': '',
    'oauth': '/oauth',
}

COMMUNITY_URLS = {
    'getCommunity':    '/service/atom/community/instance',
    'createCommunity': '/service/atom/communities/my',
    'updateCommunity': '/service/atom/community/instance',
    'deleteCommunity': '/service/atom/community/instance',
    'getMember':       '/service/atom/community/members',
    'addMember':       '/service/atom/community/members',
    'removeMember':    '/service/atom/community/members',
}

SERVICE_ENTITIES = {
    'communities': '/service/atom/communities',
    'community':   '/service/atom/community',
}

COLLECTION_TYPES = {
    'public':  '/all',
    'my':      '/my',
    'members': '/members',
}

ERROR_CODES = {
    'badRequest': 400,
}

ERROR_MESSAGES = {
    'args_object':       'Argument was expected to be an object',
    'args_community':    'Argument was expected to be a Community',
    'args_member':       'Argument was expected to be a Member',
    'null_community':    'No community was specified',
    'null_community_id': 'Community has no id',
    'null_member_id':    'Member has no id',
}
