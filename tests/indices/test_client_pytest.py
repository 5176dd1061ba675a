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

# File called _pytest for PyCharm compatability
import copy
from unittest import mock

import pytest
from elasticsearch import ApiError, ConnectionError

from esindices import RequestOptions
from esindices.indices import (
    AcknowledgedResponse,
    CloseIndexRequest,
    CreateIndexRequest,
    GetAliasesRequest,
    GetIndexRequest,
    IndexTemplatesExistRequest,
    IndicesClient,
    RefreshRequest,
)
from tests.common import TestData
from tests.indices.cases import PARSED_CASE_IDS, PARSED_CASES


class TestIndicesClient(TestData):
    @pytest.mark.parametrize(
        ["method", "request_obj", "http_method", "endpoint", "body", "response_type"],
        PARSED_CASES,
        ids=PARSED_CASE_IDS,
    )
    def test_operation(
        self, method, request_obj, http_method, endpoint, body, response_type
    ):
        original_body = copy.deepcopy(body)
        client = self.client(body)

        response = getattr(client.indices, method)(request_obj)

        assert isinstance(response, response_type)
        assert response == response_type.from_dict(body)
        assert body == original_body
        client.es.perform_request.assert_called_once()
        args, kwargs = client.es.perform_request.call_args
        assert args == (http_method, endpoint)

    def test_close_with_plain_acknowledgement(self):
        client = self.client({"acknowledged": True})

        response = client.indices.close(CloseIndexRequest("flights"))

        assert isinstance(response, AcknowledgedResponse)
        assert response.acknowledged is True
        client.es.perform_request.assert_called_once()
        args, _ = client.es.perform_request.call_args
        assert args == ("POST", "/flights/_close")

    def test_operation_with_options(self):
        client = self.client({"_shards": {"total": 1, "successful": 1, "failed": 0}})

        client.indices.refresh(
            RefreshRequest("flights"), RequestOptions(opaque_id="refresh-1")
        )

        client.es.options.assert_called_once_with(opaque_id="refresh-1")

    @pytest.mark.parametrize(["status", "exists"], [(200, True), (404, False)])
    def test_exists(self, status, exists):
        client = self.client(None, status)
        assert client.indices.exists(GetIndexRequest("flights")) is exists
        client.es.perform_request.assert_called_once_with(
            "HEAD",
            "/flights",
            params=None,
            headers={"accept": "application/json"},
            body=None,
        )

    @pytest.mark.parametrize(["status", "exists"], [(200, True), (404, False)])
    def test_exists_alias(self, status, exists):
        client = self.client(None, status)
        assert client.indices.exists_alias(GetAliasesRequest("f")) is exists
        args, _ = client.es.perform_request.call_args
        assert args == ("HEAD", "/_alias/f")

    @pytest.mark.parametrize(["status", "exists"], [(200, True), (404, False)])
    def test_exists_template(self, status, exists):
        client = self.client(None, status)
        assert client.indices.exists_template(IndexTemplatesExistRequest("t")) is exists
        args, _ = client.es.perform_request.call_args
        assert args == ("HEAD", "/_template/t")

    def test_exists_requires_indices(self):
        client = self.client()
        with pytest.raises(ValueError):
            client.indices.exists(GetIndexRequest([]))
        client.es.perform_request.assert_not_called()

    def test_get_alias_tolerates_not_found(self):
        client = self.client(
            {"error": "alias [missing] missing", "status": 404}, status=404
        )

        response = client.indices.get_alias(GetAliasesRequest("missing"))

        client.es.options.assert_called_once_with(ignore_status=(404,))
        assert response.status == 404
        assert response.error == "alias [missing] missing"
        assert response.aliases == {}

    def test_api_error_propagates(self):
        client = self.client()
        client.es.perform_request.side_effect = ApiError(
            "resource_already_exists_exception", mock.Mock(status=400), {}
        )
        with pytest.raises(ApiError):
            client.indices.create(CreateIndexRequest("flights"))

    def test_connection_error_propagates(self):
        client = self.client()
        client.es.perform_request.side_effect = ConnectionError("refused")
        with pytest.raises(ConnectionError):
            client.indices.refresh(RefreshRequest())

    def test_every_operation_is_tested(self):
        operations = {
            name
            for name in dir(IndicesClient)
            if not name.startswith("_") and callable(getattr(IndicesClient, name))
        }
        tested = set(PARSED_CASE_IDS) | {"exists", "exists_alias", "exists_template"}
        assert operations == tested
