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

import unittest

import httplib2
import mock

from sbtconnections import config
from sbtconnections.endpoint import Endpoint
from sbtconnections.service import CommunityService
from tests import utils


class TestConfig(unittest.TestCase):

    def setUp(self):
        self.saved = dict(config.endpoints)
        config.endpoints.clear()

    def tearDown(self):
        config.endpoints.clear()
        config.endpoints.update(self.saved)

    def test_register(self):
        e = Endpoint(utils.BASE_URL,
            http=mock.NonCallableMock(spec_set=httplib2.Http))
        config.register_endpoint('smartcloud', e)
        self.assertTrue(config.find_endpoint('smartcloud') is e)
        self.assertRaises(KeyError, lambda: config.find_endpoint())

    def test_configure(self):
        h = mock.NonCallableMock(spec_set=httplib2.Http)
        config.configure({
            'connections': {
                'url': utils.BASE_URL + '/',
                'username': 'fred',
                'password': 'secret',
            },
            'smartcloud': {
                'url': 'https://smartcloud.example.com',
                'auth_type': 'oauth',
                'token': 'abc123',
            },
        }, http=h)

        e = config.find_endpoint()
        self.assertEqual(e.base_url, utils.BASE_URL)
        self.assertEqual(e.auth_type, 'basic')
        self.assertTrue(e.http is h)
        h.add_credentials.assert_called_once_with('fred', 'secret')

        e = config.find_endpoint('smartcloud')
        self.assertEqual(e.auth_segment, '/oauth')
        self.assertEqual(e.token, 'abc123')

    def test_configure_without_url(self):
        self.assertRaises(ValueError,
            lambda: config.configure({'connections': {'username': 'fred'}}))
        self.assertEqual(config.endpoints, {})

    def test_service_by_name(self):
        request = utils.get_request(utils.BASE_URL
            + '/communities/service/atom/community/instance?communityUuid=1234')
        h = utils.mock_http(request, utils.COMMUNITY_ENTRY)
        config.configure({'connections': {'url': utils.BASE_URL}}, http=h)
        load = mock.Mock()

        service = CommunityService()
        self.assertTrue(service.endpoint is config.find_endpoint())
        service.get_community(id='1234', load=load)
        h.request.assert_called_once_with(**request)
        self.assertEqual(load.call_args[0][0].title, 'Bird Watchers')

    def test_service_unknown_name(self):
        self.assertRaises(KeyError, lambda: CommunityService('nowhere'))
