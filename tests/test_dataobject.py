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

from datetime import datetime
import unittest

from lxml import etree

from sbtconnections import dataobject, fields
from tests import utils


class Bookmark(dataobject.XmlObject):

    entry_xpaths = {
        'title':   '/a:entry/a:title',
        'tags':    '/a:entry/a:category/@term',
        'updated': '/a:entry/a:updated',
        'count':   '/a:entry/snx:membercount',
    }
    feed_xpaths = {
        'title':   'a:title',
        'tags':    'a:category/@term',
        'updated': 'a:updated',
        'count':   'snx:membercount',
    }

    title   = fields.Field()
    tags    = fields.TagList()
    updated = fields.Datetime()
    count   = fields.Int()
    note    = fields.Field(default='none')


class TestXmlObjects(unittest.TestCase):

    cls = Bookmark

    def test_basic(self):
        b = self.cls()
        b.update_from_content(utils.COMMUNITY_ENTRY)
        self.assertEqual(b.title, 'Bird Watchers')
        self.assertEqual(b.get_field('title'), 'Bird Watchers')
        self.assertEqual(b.count, 7)
        self.assertEqual(b.tags, ['birds', 'outdoors'])

        self.assertEqual(self.cls.__name__, 'Bookmark',
            "metaclass magic didn't break our class's name")
        self.assertEqual(set(self.cls.fields),
            set(['title', 'tags', 'updated', 'count', 'note']))

    def test_unloaded(self):
        b = self.cls(id='abc')
        self.assertEqual(b.id, 'abc')
        self.assertTrue(b.data is None)
        self.assertTrue(b.title is None)
        self.assertTrue(b.get_field('title') is None)
        self.assertEqual(b.tags, [])
        self.assertEqual(b.note, 'none')

    def test_local_override_wins(self):
        b = self.cls()
        b.update_from_content(utils.COMMUNITY_ENTRY)

        b.title = 'Owl Spotters'
        self.assertEqual(b.title, 'Owl Spotters')
        self.assertEqual(b.get_field('title'), 'Owl Spotters')
        self.assertEqual(b.local_fields, {'title': 'Owl Spotters'})

        # Setting a field never touches the document.
        self.assertEqual(b.xpath('/a:entry/a:title'), 'Bird Watchers')

        b.set_field('title', None)
        self.assertTrue(b.get_field('title') is None)

    def test_remove_field_reveals_document(self):
        b = self.cls()
        b.update_from_content(utils.COMMUNITY_ENTRY)
        b.set_field('title', 'Owl Spotters')

        b.remove_field('title')
        self.assertEqual(b.get_field('title'), 'Bird Watchers')

        b.title = 'Owl Spotters'
        del b.title
        self.assertEqual(b.title, 'Bird Watchers')

        # Removing a field with no override is fine.
        b.remove_field('title')
        b.remove_field('nonesuch')
        self.assertEqual(b.local_fields, {})

    def test_feed_entry(self):
        feed = dataobject.parse_document(utils.COMMUNITIES_FEED)
        entry = feed.xpath('/a:feed/a:entry',
            namespaces=self.cls.namespaces)[1]

        b = self.cls()
        b.update_from_document(entry)
        # The entry table's absolute paths find nothing in a feed, so the
        # feed table's relative paths are used.
        self.assertTrue(b.xpath(b.field_xpath_for_entry('title')) is None)
        self.assertEqual(b.title, 'Fish & Chips')
        self.assertEqual(b.count, 3)

    def test_tags_skip_first(self):
        doc = """<entry xmlns="http://www.w3.org/2005/Atom">
            <category term="community"/>
        </entry>"""
        b = self.cls()
        b.update_from_content(doc)
        self.assertEqual(b.tags, [])

        doc = """<entry xmlns="http://www.w3.org/2005/Atom">
            <category term="first"/>
            <category term="b"/>
            <category term="a"/>
            <category term="b"/>
        </entry>"""
        b.update_from_content(doc)
        self.assertEqual(b.tags, ['b', 'a', 'b'])
        self.assertEqual(b.get_field('tags'), ['b', 'a', 'b'])

        b.set_field('tags', ['local'])
        self.assertEqual(b.tags, ['local'])

    def test_empty_value(self):
        doc = """<entry xmlns="http://www.w3.org/2005/Atom">
            <title></title>
        </entry>"""
        b = self.cls()
        b.update_from_content(doc)
        self.assertTrue(b.get_field('title') is None)

    def test_types(self):
        b = self.cls()
        b.update_from_content(utils.COMMUNITY_ENTRY)
        self.assertEqual(b.updated, datetime(2012, 9, 1, 8, 0, 0,
            tzinfo=fields.Datetime.utc))

        doc = """<entry xmlns="http://www.w3.org/2005/Atom">
            <updated>2012-08-17T14:49:50.250-05:00</updated>
        </entry>"""
        b.update_from_content(doc)
        self.assertEqual(b.updated, datetime(2012, 8, 17, 19, 49, 50, 250000,
            tzinfo=fields.Datetime.utc),
            'Non-UTC timezone was parsed and converted to UTC')

        doc = """<entry xmlns="http://www.w3.org/2005/Atom">
            <updated>last tuesday</updated>
        </entry>"""
        b.update_from_content(doc)
        self.assertRaises(TypeError, lambda: b.updated)

    def test_to_dict(self):
        b = self.cls()
        b.update_from_content(utils.COMMUNITY_ENTRY)
        b.note = 'hi'
        data = b.to_dict()
        self.assertEqual(data['title'], 'Bird Watchers')
        self.assertEqual(data['count'], 7)
        self.assertEqual(data['note'], 'hi')
        self.assertEqual(data['tags'], ['birds', 'outdoors'])

    def test_update_from_bad_data(self):
        b = self.cls()
        self.assertRaises(TypeError, lambda: b.update_from_document({'title': 'x'}))
        self.assertRaises(etree.XMLSyntaxError,
            lambda: b.update_from_content('<entry>'))
        self.assertTrue(b.data is None)
