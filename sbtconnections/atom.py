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

Serialization of entities into the Atom entry documents the communities API
accepts as request bodies.

"""

from lxml import etree

from sbtconnections import constants


ATOM = constants.NAMESPACES['a']
SNX = constants.NAMESPACES['snx']

NSMAP = {
    None:  ATOM,
    'app': constants.NAMESPACES['app'],
    'snx': SNX,
}


def unique(values):
    """Returns the items of `values` without duplicates, keeping the first
    occurrence of each in its original order."""
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def is_email(value):
    return bool(value) and '@' in value


def merge_tags(current, added=None, deleted=None):
    """Returns the tag list that results from adding the tags in `added` to
    and removing the tags in `deleted` from the list `current`."""
    tags = list(current)
    for tag in unique(added or ()):
        if tag not in tags:
            tags.append(tag)
    for tag in deleted or ():
        if tag in tags:
            tags.remove(tag)
    return tags


def tostring(entry):
    return etree.tostring(entry, xml_declaration=True, encoding='UTF-8')


def community_entry(community):
    """Returns the Atom entry element describing `community` for a create or
    update request.

    Title and content come from the community's local overrides or else its
    current document. The content element is always present, empty if the
    community has no content. Tags are written only when tags were added or
    deleted locally.

    """
    entry = etree.Element(etree.QName(ATOM, 'entry'), nsmap=NSMAP)

    title = community.get_field('title')
    if title:
        el = etree.SubElement(entry, etree.QName(ATOM, 'title'), type='text')
        el.text = title

    el = etree.SubElement(entry, etree.QName(ATOM, 'content'), type='html')
    content = community.get_field('content')
    if content:
        el.text = content

    local = community.local_fields
    if 'addedTags' in local or 'deletedTags' in local:
        tags = merge_tags(community.get_field_list('tags'),
            added=local.get('addedTags'), deleted=local.get('deletedTags'))
        for tag in tags:
            etree.SubElement(entry, etree.QName(ATOM, 'category'), term=tag)

    etree.SubElement(entry, etree.QName(ATOM, 'category'), term='community',
        scheme=constants.COMMUNITY_TYPE_SCHEME)
    el = etree.SubElement(entry, etree.QName(SNX, 'communityType'))
    el.text = 'public'
    return entry


def member_entry(member):
    """Returns the Atom entry element for adding `member` to a community.

    The member is identified by email address when its id contains an ``@``
    and by user id otherwise.

    """
    entry = etree.Element(etree.QName(ATOM, 'entry'), nsmap=NSMAP)
    contributor = etree.SubElement(entry, etree.QName(ATOM, 'contributor'))
    if member.id:
        if is_email(member.id):
            el = etree.SubElement(contributor, etree.QName(ATOM, 'email'))
        else:
            el = etree.SubElement(contributor, etree.QName(SNX, 'userid'))
        el.text = member.id

    role = member.local_fields.get('role')
    if role:
        el = etree.SubElement(entry, etree.QName(SNX, 'role'),
            component=constants.COMMUNITY_ROLE_COMPONENT)
        el.text = role
    return entry
