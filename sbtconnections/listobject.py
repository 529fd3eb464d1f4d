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

Sequences of entities read from Atom feeds.

"""

from sbtconnections import constants
from sbtconnections.dataobject import node_text


class SequenceProxy(object):

    """An abstract class implementing the sequence protocol by proxying it to
    an instance attribute.

    `SequenceProxy` instances act like sequences by forwarding all sequence
    method calls to their `entries` attributes. The `entries` attribute should
    be a list or some other that implements the sequence protocol.

    """

    def make_sequence_method(methodname):
        """Makes a new function that proxies calls to `methodname` to the
        `entries` attribute of the instance on which the function is called as
        an instance method."""
        def seqmethod(self, *args, **kwargs):
            # Proxy these methods to self.entries.
            return getattr(self.entries, methodname)(*args, **kwargs)
        seqmethod.__name__ = methodname
        return seqmethod

    __len__      = make_sequence_method('__len__')
    __getitem__  = make_sequence_method('__getitem__')
    __iter__     = make_sequence_method('__iter__')
    __reversed__ = make_sequence_method('__reversed__')
    __contains__ = make_sequence_method('__contains__')

    del make_sequence_method


class Feed(SequenceProxy):

    """The entities of one Atom feed response, in the order the server
    listed them.

    Besides acting as a sequence of entities, a `Feed` carries the feed's
    OpenSearch paging values as `total_results`, `start_index` and
    `items_per_page` (each `None` if the feed did not say).

    """

    def __init__(self, entries=None, document=None):
        if entries is None:
            entries = []
        self.entries = entries
        self.document = document

    @classmethod
    def from_document(cls, document, entity_cls, service, xpaths):
        """Builds a `Feed` of `entity_cls` instances, one for each entry the
        `entry` path of `xpaths` selects in `document`.

        Each entity is loaded with its own entry element, so no further
        request is needed to read its fields.

        """
        namespaces = constants.NAMESPACES
        entries = []
        for node in document.xpath(xpaths['entry'], namespaces=namespaces):
            ids = node.xpath(xpaths['id'], namespaces=namespaces)
            entity = entity_cls(service, node_text(ids[0]) if ids else None)
            entity.update_from_document(node)
            entries.append(entity)
        return cls(entries, document)

    def _paging_value(self, name):
        if self.document is None:
            return None
        nodes = self.document.xpath(constants.FEED_XPATHS[name],
            namespaces=constants.NAMESPACES)
        if not nodes:
            return None
        try:
            return int(node_text(nodes[0]))
        except ValueError:
            return None

    @property
    def total_results(self):
        return self._paging_value('totalResults')

    @property
    def start_index(self):
        return self._paging_value('startIndex')

    @property
    def items_per_page(self):
        return self._paging_value('itemsPerPage')

    def __repr__(self):
        return '<%s of %d entries>' % (type(self).__name__, len(self.entries))
