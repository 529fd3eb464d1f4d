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

`XmlObject` is the class of object that provides access to the fields of a
parsed Atom document, with a layer of local overrides for values that have not
been sent to the server yet.

Field values are looked up by logical name. An `XmlObject` subclass names two
XPath tables (in `entry_xpaths` and `feed_xpaths`): one for reading a document
that is a single Atom entry, and one for reading an entry element taken out of
a feed. Lookups always consult the local overrides first, then the entry
table, then the feed table.

"""

import logging

from lxml import etree

from sbtconnections import constants
import sbtconnections.fields


log = logging.getLogger('sbtconnections.dataobject')


def parse_document(content):
    """Parses an XML response body and returns its root element.

    Raises `lxml.etree.XMLSyntaxError` if `content` is not well formed.

    """
    if isinstance(content, str):
        content = content.encode('utf-8')
    return etree.fromstring(content)


def node_text(node):
    """Returns the text content of an XPath result node."""
    if isinstance(node, str):
        return str(node)
    return ''.join(node.itertext())


class XmlObjectMetaclass(type):
    """Metaclass for `XmlObject` classes.

    This metaclass installs all `sbtconnections.fields.Field` instances
    declared as attributes of the new class, and collects them into the
    class's `fields` mapping.

    """

    def __new__(cls, name, bases, attrs):
        fields = {}
        new_fields = {}

        # Inherit all the parent XmlObject classes' fields.
        for base in bases:
            if isinstance(base, XmlObjectMetaclass):
                fields.update(base.fields)

        for attrname, field in attrs.items():
            if isinstance(field, sbtconnections.fields.Field):
                new_fields[attrname] = field
            elif attrname in fields:
                # Throw out any parent fields that the subclass defined as
                # something other than a Field.
                del fields[attrname]

        fields.update(new_fields)
        attrs['fields'] = fields
        obj_cls = super(XmlObjectMetaclass, cls).__new__(cls, name, bases, attrs)

        for attrname, field in new_fields.items():
            field.install(attrname, obj_cls)

        return obj_cls


class XmlObject(object, metaclass=XmlObjectMetaclass):

    """An object whose fields are read from a parsed Atom document.

    XmlObject subclasses should be declared with their data attributes
    defined as instances of fields from the `sbtconnections.fields` module,
    and with the XPath tables to read them through. For example:

    >>> from sbtconnections import dataobject, fields
    >>> class Bookmark(dataobject.XmlObject):
    ...     entry_xpaths = {'title': '/a:entry/a:title'}
    ...     feed_xpaths  = {'title': 'a:title'}
    ...     title = fields.Field()
    ...

    """

    entry_xpaths = {}
    feed_xpaths = {}
    namespaces = constants.NAMESPACES
    list_fields = frozenset()

    def __init__(self, service=None, id=None):
        self._service = service
        self.id = id
        self.data = None
        self.local_fields = {}

    def __repr__(self):
        return '<%s id=%r loaded=%s>' % (type(self).__name__, self.id,
            self.data is not None)

    def __iter__(self):
        for key in self.fields.keys():
            yield key

    def field_xpath_for_entry(self, name):
        return self.entry_xpaths.get(name)

    def field_xpath_for_feed(self, name):
        return self.feed_xpaths.get(name)

    def xpath(self, path):
        """Returns the text of the first node the XPath expression `path`
        selects in this object's document, or `None`."""
        nodes = self.xpath_list(path)
        if not nodes:
            return None
        return node_text(nodes[0])

    def xpath_list(self, path):
        """Returns all nodes the XPath expression `path` selects in this
        object's document."""
        if self.data is None or not path:
            return []
        result = self.data.xpath(path, namespaces=self.namespaces)
        if not isinstance(result, list):
            # Scalar XPath results (counts, strings) are a single value.
            return [result]
        return result

    def get_field(self, name):
        """Returns the value of the named field, or `None`.

        A local override always wins. Otherwise the value is read from the
        document through the entry XPath table, then through the feed XPath
        table. An empty string from the document counts as no value.

        """
        if name in self.list_fields:
            return self.get_field_list(name)
        if name in self.local_fields:
            return self.local_fields[name]
        return (self.xpath(self.field_xpath_for_entry(name))
            or self.xpath(self.field_xpath_for_feed(name))
            or None)

    def get_field_list(self, name):
        """Returns the named list field as a list of strings.

        The first node matched in the document is a category marker and is
        always skipped.

        """
        if name in self.local_fields:
            return self.local_fields[name]
        nodes = self.xpath_list(self.field_xpath_for_entry(name))
        if not nodes:
            nodes = self.xpath_list(self.field_xpath_for_feed(name))
        return [node_text(node) for node in nodes[1:]]

    def set_field(self, name, value):
        """Stores a local override for the named field."""
        self.local_fields[name] = value

    def remove_field(self, name):
        """Removes the local override for the named field, if any.

        The document's value for the field, if there is one, is what the
        field reads as afterward.

        """
        self.local_fields.pop(name, None)

    def update_from_document(self, data):
        """Replaces this object's document with the parsed element `data`."""
        if data is not None and not etree.iselement(data):
            raise TypeError("Cannot update %r from non-element data source %r"
                % (self, data))
        self.data = data

    def update_from_content(self, content):
        """Parses an XML response body into this object's document."""
        self.update_from_document(parse_document(content))
        log.debug('Updated %r from response document', self)

    def to_dict(self):
        """Returns the resolved values of all the object's fields."""
        data = {}
        for attrname in self.fields.keys():
            value = getattr(self, attrname)
            if value is not None:
                data[attrname] = value
        return data
