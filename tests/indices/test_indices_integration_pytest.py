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
import pytest
from elasticsearch import ConnectionError, Elasticsearch

from esindices import Client, IndicesOptions
from esindices.indices import (
    AliasAction,
    AnalyzeRequest,
    CreateIndexRequest,
    DeleteIndexRequest,
    DeleteIndexTemplateRequest,
    GetAliasesRequest,
    GetIndexRequest,
    GetIndexTemplatesRequest,
    GetMappingsRequest,
    GetSettingsRequest,
    IndexTemplatesExistRequest,
    IndicesAliasesRequest,
    PutIndexTemplateRequest,
    PutMappingRequest,
    RefreshRequest,
    UpdateSettingsRequest,
)
from tests import (
    ELASTICSEARCH_HOST,
    TEST_INDEX_NAME,
    TEST_MAPPINGS,
    TEST_TEMPLATE_NAME,
)


@pytest.fixture(scope="module")
def client():
    es = Elasticsearch(ELASTICSEARCH_HOST)
    try:
        es.info()
    except ConnectionError:
        pytest.skip(f"No Elasticsearch cluster at {ELASTICSEARCH_HOST}")
    client = Client(es)
    yield client
    client.close()


@pytest.fixture
def index(client):
    client.indices.delete(
        DeleteIndexRequest(
            TEST_INDEX_NAME, indices_options=IndicesOptions(ignore_unavailable=True)
        )
    )
    client.indices.create(
        CreateIndexRequest(
            TEST_INDEX_NAME,
            settings={"number_of_shards": 1, "number_of_replicas": 0},
            mappings=TEST_MAPPINGS,
        )
    )
    yield TEST_INDEX_NAME
    client.indices.delete(
        DeleteIndexRequest(
            TEST_INDEX_NAME, indices_options=IndicesOptions(ignore_unavailable=True)
        )
    )


class TestIndicesIntegration:
    def test_exists(self, client, index):
        assert client.indices.exists(GetIndexRequest(index))
        assert not client.indices.exists(GetIndexRequest(index + "_missing"))

    def test_get_index(self, client, index):
        response = client.indices.get(GetIndexRequest(index))
        assert response.indices == [index]
        assert response.get_setting(index, "index.number_of_shards") == "1"
        assert response.mappings[index] == TEST_MAPPINGS

    def test_mappings(self, client, index):
        client.indices.put_mapping(
            PutMappingRequest(
                index, source={"properties": {"country": {"type": "keyword"}}}
            )
        )
        mappings = client.indices.get_mapping(GetMappingsRequest(index)).mappings
        assert mappings[index]["properties"]["country"] == {"type": "keyword"}

    def test_settings(self, client, index):
        client.indices.put_settings(
            UpdateSettingsRequest(index, settings={"index.refresh_interval": "5s"})
        )
        response = client.indices.get_settings(GetSettingsRequest(index))
        assert response.get_setting_value(index, "index.refresh_interval") == "5s"

    def test_aliases(self, client, index):
        alias = index + "_alias"
        assert not client.indices.exists_alias(GetAliasesRequest(alias))

        client.indices.update_aliases(
            IndicesAliasesRequest([AliasAction.add(index, alias)])
        )

        assert client.indices.exists_alias(GetAliasesRequest(alias))
        response = client.indices.get_alias(GetAliasesRequest(alias))
        assert response.status == 200
        assert [a.alias for a in response.aliases[index]] == [alias]

        missing = client.indices.get_alias(GetAliasesRequest([alias, "missing"]))
        assert missing.status == 404
        assert "missing" in missing.error

    def test_refresh(self, client, index):
        response = client.indices.refresh(RefreshRequest(index))
        assert response.failed_shards == 0

    def test_analyze(self, client):
        response = client.indices.analyze(
            AnalyzeRequest.with_global_analyzer("standard", "Quick Brown Fox")
        )
        assert response.terms == ["quick", "brown", "fox"]

    def test_templates(self, client):
        client.indices.put_template(
            PutIndexTemplateRequest(
                TEST_TEMPLATE_NAME,
                index_patterns="esindices_template_test-*",
                settings={"number_of_shards": 1},
            )
        )
        try:
            assert client.indices.exists_template(
                IndexTemplatesExistRequest(TEST_TEMPLATE_NAME)
            )
            templates = client.indices.get_index_template(
                GetIndexTemplatesRequest(TEST_TEMPLATE_NAME)
            ).index_templates
            assert [t.name for t in templates] == [TEST_TEMPLATE_NAME]
            assert templates[0].settings["index.number_of_shards"] == "1"
        finally:
            client.indices.delete_template(
                DeleteIndexTemplateRequest(TEST_TEMPLATE_NAME)
            )
        assert not client.indices.exists_template(
            IndexTemplatesExistRequest(TEST_TEMPLATE_NAME)
        )
