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

import httplib2
import mock


BASE_URL = 'http://example.com'

COMMUNITY_ENTRY = """<?xml version="1.0" encoding="UTF-8"?>
<entry xmlns="http://www.w3.org/2005/Atom" xmlns:app="http://www.w3.org/2007/app" xmlns:snx="http://www.ibm.com/xmlns/prod/sn">
  <id>http://example.com/communities/service/atom/community/instance?communityUuid=1234</id>
  <title type="text">Bird Watchers</title>
  <summary type="text">People who watch birds</summary>
  <content type="html">&lt;p&gt;All about birds&lt;/p&gt;</content>
  <published>2012-08-29T14:25:46.047Z</published>
  <updated>2012-09-01T08:00:00Z</updated>
  <author>
    <name>Fred Friendly</name>
    <email>fred@example.com</email>
    <snx:userid>u-fred</snx:userid>
  </author>
  <category term="community" scheme="http://www.ibm.com/xmlns/prod/sn/type"/>
  <category term="birds"/>
  <category term="outdoors"/>
  <link rel="alternate" href="http://example.com/communities/service/html/communityview?communityUuid=1234"/>
  <link rel="http://www.ibm.com/xmlns/prod/sn/logo" href="http://example.com/communities/logo?communityUuid=1234"/>
  <snx:communityUuid>1234</snx:communityUuid>
  <snx:membercount>7</snx:membercount>
  <snx:communityType>public</snx:communityType>
</entry>
"""

COMMUNITIES_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:snx="http://www.ibm.com/xmlns/prod/sn" xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">
  <title type="text">Public Communities</title>
  <opensearch:totalResults>42</opensearch:totalResults>
  <opensearch:startIndex>1</opensearch:startIndex>
  <opensearch:itemsPerPage>2</opensearch:itemsPerPage>
  <entry>
    <title type="text">Bird Watchers</title>
    <content type="html">All about birds</content>
    <category term="community" scheme="http://www.ibm.com/xmlns/prod/sn/type"/>
    <category term="birds"/>
    <snx:communityUuid>1234</snx:communityUuid>
    <snx:membercount>7</snx:membercount>
  </entry>
  <entry>
    <title type="text">Fish &amp; Chips</title>
    <category term="community" scheme="http://www.ibm.com/xmlns/prod/sn/type"/>
    <snx:communityUuid>5678</snx:communityUuid>
    <snx:membercount>3</snx:membercount>
  </entry>
</feed>
"""

MEMBER_ENTRY = """<?xml version="1.0" encoding="UTF-8"?>
<entry xmlns="http://www.w3.org/2005/Atom" xmlns:snx="http://www.ibm.com/xmlns/prod/sn">
  <contributor>
    <name>Joe Bloggs</name>
    <email>joe@example.com</email>
    <snx:userid>u-joe</snx:userid>
  </contributor>
  <snx:role component="http://www.ibm.com/xmlns/prod/sn/communities">member</snx:role>
</entry>
"""

MEMBERS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom" xmlns:snx="http://www.ibm.com/xmlns/prod/sn">
  <entry>
    <contributor>
      <name>Fred Friendly</name>
      <email>fred@example.com</email>
      <snx:userid>u-fred</snx:userid>
    </contributor>
    <snx:role component="http://www.ibm.com/xmlns/prod/sn/communities">owner</snx:role>
  </entry>
  <entry>
    <contributor>
      <name>Joe Bloggs</name>
      <snx:userid>u-joe</snx:userid>
    </contributor>
    <snx:role component="http://www.ibm.com/xmlns/prod/sn/communities">member</snx:role>
  </entry>
</feed>
"""


def make_response(response, url):
    default_response = {
        'status':           200,
        'content-type':     'application/atom+xml; charset=UTF-8',
        'content-location': url,
    }

    if isinstance(response, dict):
        response = dict(response)
        content = response.pop('content', '')

        status = response.get('status', 200)
        if 200 <= status < 300:
            response_info = dict(default_response)
            response_info.update(response)
        else:
            # Homg all bets are off!! Use specified headers only.
            response_info = dict(response)
    else:
        response_info = dict(default_response)
        content = response

    return httplib2.Response(response_info), content


def mock_http_requests(exchanges):
    """Returns a mock `httplib2.Http` that answers its requests, in order,
    with the responses in the list of ``(request, response)`` pairs
    `exchanges`."""
    mock_http = mock.NonCallableMock(spec_set=httplib2.Http)
    responses = []
    for req, resp_or_content in exchanges:
        if not isinstance(req, dict):
            req = dict(uri=req)
        responses.append(make_response(resp_or_content, req['uri']))
    mock_http.request.side_effect = responses
    return mock_http


def mock_http(req, resp_or_content):
    return mock_http_requests([(req, resp_or_content)])


def get_request(uri, **headers):
    request_headers = {'accept': 'application/atom+xml'}
    request_headers.update(headers)
    return dict(uri=uri, method='GET', headers=request_headers)

