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

Fields are class attributes for `XmlObject` subclasses that expose the values
of an Atom document as plain Python attributes.

Reading a field attribute resolves the value through the owning object's
`get_field()`, so local overrides win over the parsed document. Setting a
field attribute stores a local override with `set_field()`, and deleting one
removes that override with `remove_field()`.

"""

from datetime import datetime, timezone


class Field(object):

    """A property for reading a named value out of an entity's Atom document.

    Declare a `Field` instance for each attribute of an `XmlObject` that
    should be available as an attribute. Use a `Field` instance directly for
    values that are plain strings. If your attribute data does need
    converted, use one of the `Field` subclasses from this module, or
    override the `decode()` method in a new subclass.

    """

    def __init__(self, api_name=None, default=None):
        """Sets the field's logical name and default value.

        Optional parameter `api_name` is the key of this field in the owning
        class's XPath tables. If not given, the attribute name of the field
        when its class was defined is used.

        Optional parameter `default` is returned when neither a local
        override nor the document provide a value.

        """
        self.api_name = api_name
        self.default = default

    def install(self, attrname, cls):
        self.attrname = attrname
        if self.api_name is None:
            self.api_name = attrname
        self.of_cls = cls

    def __get__(self, obj, cls):
        """Returns the field's value on the given object instance, or the
        field's default value if no value for the field is available."""
        if obj is None:
            # Yield the real field instance when gotten through the class.
            return self

        if self.api_name in obj.local_fields:
            return obj.local_fields[self.api_name]

        value = obj.get_field(self.api_name)
        if value is None:
            return self.default
        return self.decode(value)

    def __set__(self, obj, value):
        obj.set_field(self.api_name, value)

    def __delete__(self, obj):
        obj.remove_field(self.api_name)

    def decode(self, value):
        """Decodes a document value into an attribute value.

        This implementation returns the `value` parameter unchanged.

        """
        return value


class Int(Field):

    """A field representing an integer count, such as a member count."""

    def decode(self, value):
        try:
            return int(value)
        except ValueError:
            raise TypeError('Value to decode %r is not an integer' % (value,))


class Datetime(Field):

    """A field representing an Atom timestamp."""

    dateformats = ("%Y-%m-%dT%H:%M:%S.%f%z", "%Y-%m-%dT%H:%M:%S%z")
    utc = timezone.utc

    def decode(self, value):
        """Decodes a timestamp string into a Python `datetime` instance.

        Timestamp strings should be of the format ``YYYY-MM-DDTHH:MM:SSZ``,
        optionally with fractional seconds or a numeric UTC offset. The
        resulting `datetime` will have UTC tzinfo.

        """
        if isinstance(value, datetime):
            return value
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+0000'
        for dateformat in self.dateformats:
            try:
                when = datetime.strptime(text, dateformat)
            except ValueError:
                continue
            return when.astimezone(Datetime.utc)
        raise TypeError('Value to decode %r is not a valid date time stamp' % (value,))


class TagList(Field):

    """A field representing a list of tags.

    The document's first matched node is a category marker naming the kind
    of entity rather than a tag, so it is never part of the value.

    """

    def __init__(self, api_name=None):
        super(TagList, self).__init__(api_name=api_name)

    def install(self, attrname, cls):
        super(TagList, self).install(attrname, cls)
        cls.list_fields = frozenset(cls.list_fields | set([self.api_name]))

    def __get__(self, obj, cls):
        if obj is None:
            return self
        return obj.get_field_list(self.api_name)
