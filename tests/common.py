#  Licensed to Elasticsearch B.V. under one or more contributor
#  license agreements. See the NOTICE file distributed with
#  this work for additional information regarding copyright
#  ownership. Elasticsearch B.V. licenses this file to you under
#  the Apache License, Version 2.0 (the "License"); you may
#  not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
# 	http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing,
#  software distributed under the License is distributed on an
#  "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
#  KIND, either express or implied.  See the License for the
#  specific language governing permissions and limitations
#  under the License.

from unittest import mock

from elasticsearch import AsyncElasticsearch, Elasticsearch

from esindices import AsyncClient, Client


def api_response(body=None, status=200):
    """Stands in for the ApiResponse returned by perform_request()"""
    response = mock.Mock()
    response.body = body
    response.meta.status = status
    return response


class TestData:
    def es(self, body=None, status=200):
        es = mock.Mock(spec=Elasticsearch)
        # options() returns a copy of the client, keep using the same mock
        es.options.return_value = es
        es.perform_request.return_value = api_response(body, status)
        return es

    def client(self, body=None, status=200):
        return Client(self.es(body, status))

    def async_es(self, body=None, status=200):
        es = mock.Mock(spec=AsyncElasticsearch)
        es.options.return_value = es
        es.perform_request = mock.AsyncMock(return_value=api_response(body, status))
        es.close = mock.AsyncMock()
        return es

    def async_client(self, body=None, status=200):
        return AsyncClient(self.async_es(body, status))
