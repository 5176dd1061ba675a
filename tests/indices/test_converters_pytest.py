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

from esindices.common import IndicesOptions
from esindices.indices import converters
from esindices.indices.requests import (
    Alias,
    AliasAction,
    AnalyzeRequest,
    ClearIndicesCacheRequest,
    CloseIndexRequest,
    CreateIndexRequest,
    DeleteIndexRequest,
    DeleteIndexTemplateRequest,
    FlushRequest,
    ForceMergeRequest,
    FreezeIndexRequest,
    GetAliasesRequest,
    GetFieldMappingsRequest,
    GetIndexRequest,
    GetIndexTemplatesRequest,
    GetMappingsRequest,
    GetSettingsRequest,
    IndexTemplatesExistRequest,
    IndicesAliasesRequest,
    OpenIndexRequest,
    PutIndexTemplateRequest,
    PutMappingRequest,
    RefreshRequest,
    ResizeRequest,
    RolloverRequest,
    SyncedFlushRequest,
    UnfreezeIndexRequest,
    UpdateSettingsRequest,
    ValidateQueryRequest,
)
from esindices.request import Request

LENIENT = IndicesOptions.lenient_expand_open()
LENIENT_PARAMS = {
    "ignore_unavailable": "true",
    "allow_no_indices": "true",
    "expand_wildcards": "open",
}


class TestIndexLifecycleConverters:
    def test_create_index(self):
        request = CreateIndexRequest(
            "flights",
            settings={"number_of_shards": 1},
            mappings={"properties": {"a": {"type": "keyword"}}},
            aliases=[Alias("flights-alias", is_write_index=True)],
            timeout="10s",
            wait_for_active_shards="all",
        )
        assert converters.create_index(request) == Request(
            "PUT",
            "/flights",
            {"timeout": "10s", "wait_for_active_shards": "all"},
            {
                "settings": {"number_of_shards": 1},
                "mappings": {"properties": {"a": {"type": "keyword"}}},
                "aliases": {"flights-alias": {"is_write_index": True}},
            },
        )

    def test_create_index_without_body(self):
        assert converters.create_index(CreateIndexRequest("flights")) == Request(
            "PUT", "/flights"
        )

    def test_delete_index(self):
        request = DeleteIndexRequest(
            ["a", "b"], master_timeout="1m", indices_options=LENIENT
        )
        assert converters.delete_index(request) == Request(
            "DELETE", "/a,b", {"master_timeout": "1m", **LENIENT_PARAMS}
        )

    @pytest.mark.parametrize(
        ["converter", "request_class", "action"],
        [
            (converters.open_index, OpenIndexRequest, "_open"),
            (converters.close_index, CloseIndexRequest, "_close"),
            (converters.freeze_index, FreezeIndexRequest, "_freeze"),
            (converters.unfreeze_index, UnfreezeIndexRequest, "_unfreeze"),
        ],
    )
    def test_index_state_changes(self, converter, request_class, action):
        request = request_class(
            "logs-*", timeout="5s", wait_for_active_shards=1, indices_options=LENIENT
        )
        assert converter(request) == Request(
            "POST",
            f"/logs-*/{action}",
            {"timeout": "5s", "wait_for_active_shards": "1", **LENIENT_PARAMS},
        )

    def test_get_index(self):
        request = GetIndexRequest(
            "flights", include_defaults=True, local=False, human=True
        )
        assert converters.get_index(request) == Request(
            "GET",
            "/flights",
            {"local": "false", "include_defaults": "true", "human": "true"},
        )

    def test_indices_exist(self):
        assert converters.indices_exist(GetIndexRequest(["a", "b"])) == Request(
            "HEAD", "/a,b"
        )

    def test_indices_exist_requires_indices(self):
        with pytest.raises(ValueError, match="indices are mandatory"):
            converters.indices_exist(GetIndexRequest([]))


class TestMappingConverters:
    def test_put_mapping(self):
        source = {"properties": {"year": {"type": "integer"}}}
        request = PutMappingRequest("flights", source=source, timeout="30s")
        assert converters.put_mapping(request) == Request(
            "PUT", "/flights/_mapping", {"timeout": "30s"}, source
        )

    def test_get_mappings(self):
        assert converters.get_mappings(GetMappingsRequest()) == Request(
            "GET", "/_mapping"
        )
        assert converters.get_mappings(
            GetMappingsRequest(["a", "b"], local=True)
        ) == Request("GET", "/a,b/_mapping", {"local": "true"})

    def test_get_field_mapping(self):
        request = GetFieldMappingsRequest(
            ["title", "year"], indices="flights", include_defaults=True
        )
        assert converters.get_field_mapping(request) == Request(
            "GET",
            "/flights/_mapping/field/title,year",
            {"include_defaults": "true"},
        )
        assert converters.get_field_mapping(
            GetFieldMappingsRequest("title")
        ) == Request("GET", "/_mapping/field/title")


class TestAliasConverters:
    def test_update_aliases(self):
        request = IndicesAliasesRequest(
            [
                AliasAction.add("logs-2", "logs", is_write_index=True),
                AliasAction.remove(["logs-1"], ["logs"]),
                AliasAction.remove_index("logs-0"),
            ],
            timeout="10s",
        )
        assert converters.update_aliases(request) == Request(
            "POST",
            "/_aliases",
            {"timeout": "10s"},
            {
                "actions": [
                    {
                        "add": {
                            "indices": ["logs-2"],
                            "aliases": ["logs"],
                            "is_write_index": True,
                        }
                    },
                    {"remove": {"indices": ["logs-1"], "aliases": ["logs"]}},
                    {"remove_index": {"indices": ["logs-0"]}},
                ]
            },
        )

    @pytest.mark.parametrize(
        ["request_obj", "endpoint"],
        [
            (GetAliasesRequest(), "/_alias"),
            (GetAliasesRequest("logs"), "/_alias/logs"),
            (GetAliasesRequest(indices="logs-1"), "/logs-1/_alias"),
            (GetAliasesRequest(["a", "b"], indices=["c", "d"]), "/c,d/_alias/a,b"),
        ],
    )
    def test_get_alias(self, request_obj, endpoint):
        assert converters.get_alias(request_obj) == Request("GET", endpoint)

    def test_exists_alias(self):
        request = GetAliasesRequest("logs", local=True)
        assert converters.exists_alias(request) == Request(
            "HEAD", "/_alias/logs", {"local": "true"}
        )

    def test_exists_alias_requires_alias_or_index(self):
        with pytest.raises(ValueError):
            converters.exists_alias(GetAliasesRequest())


class TestBroadcastConverters:
    def test_refresh(self):
        assert converters.refresh(RefreshRequest()) == Request("POST", "/_refresh")
        assert converters.refresh(
            RefreshRequest("a", indices_options=LENIENT)
        ) == Request("POST", "/a/_refresh", LENIENT_PARAMS)

    def test_flush(self):
        request = FlushRequest(["a", "b"], force=True, wait_if_ongoing=False)
        assert converters.flush(request) == Request(
            "POST", "/a,b/_flush", {"force": "true", "wait_if_ongoing": "false"}
        )

    def test_flush_synced(self):
        assert converters.flush_synced(SyncedFlushRequest("a")) == Request(
            "POST", "/a/_flush/synced"
        )

    def test_force_merge(self):
        request = ForceMergeRequest("a", max_num_segments=1, flush=False)
        assert converters.force_merge(request) == Request(
            "POST", "/a/_forcemerge", {"max_num_segments": "1", "flush": "false"}
        )

    def test_clear_cache(self):
        request = ClearIndicesCacheRequest(
            "a", fielddata=True, fields=["title", "year"]
        )
        assert converters.clear_cache(request) == Request(
            "POST", "/a/_cache/clear", {"fielddata": "true", "fields": "title,year"}
        )
        assert converters.clear_cache(ClearIndicesCacheRequest()) == Request(
            "POST", "/_cache/clear"
        )


class TestSettingsConverters:
    def test_update_settings(self):
        request = UpdateSettingsRequest(
            "a",
            settings={"index.number_of_replicas": 0},
            preserve_existing=True,
        )
        assert converters.update_settings(request) == Request(
            "PUT",
            "/a/_settings",
            {"preserve_existing": "true"},
            {"index.number_of_replicas": 0},
        )

    def test_get_settings(self):
        assert converters.get_settings(GetSettingsRequest()) == Request(
            "GET", "/_settings"
        )
        request = GetSettingsRequest(
            "a", names=["index.number_of_shards"], include_defaults=True
        )
        assert converters.get_settings(request) == Request(
            "GET",
            "/a/_settings/index.number_of_shards",
            {"include_defaults": "true"},
        )


class TestResizeAndRolloverConverters:
    def test_shrink(self):
        request = ResizeRequest(
            "source",
            "target",
            settings={"index.number_of_shards": 1},
            aliases={"target-alias": {}},
            wait_for_active_shards=2,
        )
        assert converters.shrink(request) == Request(
            "PUT",
            "/source/_shrink/target",
            {"wait_for_active_shards": "2"},
            {
                "settings": {"index.number_of_shards": 1},
                "aliases": {"target-alias": {}},
            },
        )

    def test_split(self):
        assert converters.split(ResizeRequest("source", "target")) == Request(
            "PUT", "/source/_split/target"
        )

    def test_rollover(self):
        request = RolloverRequest(
            "logs", "logs-000002", max_age="7d", max_docs=1000, dry_run=True
        )
        assert converters.rollover(request) == Request(
            "POST",
            "/logs/_rollover/logs-000002",
            {"dry_run": "true"},
            {"conditions": {"max_age": "7d", "max_docs": 1000}},
        )

    def test_rollover_without_conditions(self):
        assert converters.rollover(RolloverRequest("logs")) == Request(
            "POST", "/logs/_rollover"
        )


class TestTemplateConverters:
    def test_put_template(self):
        request = PutIndexTemplateRequest(
            "logs-template",
            index_patterns="logs-*",
            order=1,
            settings={"number_of_shards": 1},
            create=True,
            cause="test",
        )
        assert converters.put_template(request) == Request(
            "PUT",
            "/_template/logs-template",
            {"create": "true", "cause": "test"},
            {
                "index_patterns": ["logs-*"],
                "order": 1,
                "settings": {"number_of_shards": 1},
            },
        )

    def test_put_template_create_false_is_not_sent(self):
        request = PutIndexTemplateRequest("t", index_patterns=["a*"])
        assert converters.put_template(request).params == {}

    def test_get_templates(self):
        assert converters.get_templates(GetIndexTemplatesRequest()) == Request(
            "GET", "/_template"
        )
        assert converters.get_templates(
            GetIndexTemplatesRequest(["a", "b"], local=True)
        ) == Request("GET", "/_template/a,b", {"local": "true"})

    def test_templates_exist(self):
        assert converters.templates_exist(IndexTemplatesExistRequest("a")) == Request(
            "HEAD", "/_template/a"
        )
        with pytest.raises(
            ValueError, match="must provide at least one index template name"
        ):
            converters.templates_exist(IndexTemplatesExistRequest([]))

    def test_delete_template(self):
        request = DeleteIndexTemplateRequest("a", master_timeout="1m")
        assert converters.delete_template(request) == Request(
            "DELETE", "/_template/a", {"master_timeout": "1m"}
        )


class TestQueryConverters:
    def test_validate_query(self):
        request = ValidateQueryRequest(
            "a", query={"match_all": {}}, explain=True, all_shards=False
        )
        assert converters.validate_query(request) == Request(
            "POST",
            "/a/_validate/query",
            {"explain": "true", "all_shards": "false"},
            {"query": {"match_all": {}}},
        )

    def test_validate_query_without_query(self):
        assert converters.validate_query(ValidateQueryRequest()) == Request(
            "GET", "/_validate/query"
        )

    def test_analyze_global(self):
        request = AnalyzeRequest.with_global_analyzer("standard", "Quick fox")
        assert converters.analyze(request) == Request(
            "POST", "/_analyze", body={"text": ["Quick fox"], "analyzer": "standard"}
        )

    def test_analyze_index(self):
        request = AnalyzeRequest.build_custom_analyzer(
            "standard",
            "Quick fox",
            index="flights",
            filter=["lowercase", {"type": "stop", "stopwords": ["a"]}],
        )
        request.explain = True
        request.attributes = ["keyword"]
        assert converters.analyze(request) == Request(
            "POST",
            "/flights/_analyze",
            body={
                "text": ["Quick fox"],
                "tokenizer": "standard",
                "filter": ["lowercase", {"type": "stop", "stopwords": ["a"]}],
                "explain": True,
                "attributes": ["keyword"],
            },
        )
