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

from esindices.indices import (
    AcknowledgedResponse,
    AliasAction,
    AnalyzeRequest,
    AnalyzeResponse,
    BroadcastResponse,
    ClearIndicesCacheRequest,
    CloseIndexRequest,
    CreateIndexRequest,
    CreateIndexResponse,
    DeleteIndexRequest,
    DeleteIndexTemplateRequest,
    FlushRequest,
    ForceMergeRequest,
    FreezeIndexRequest,
    GetAliasesRequest,
    GetAliasesResponse,
    GetFieldMappingsRequest,
    GetFieldMappingsResponse,
    GetIndexRequest,
    GetIndexResponse,
    GetIndexTemplatesRequest,
    GetIndexTemplatesResponse,
    GetMappingsRequest,
    GetMappingsResponse,
    GetSettingsRequest,
    GetSettingsResponse,
    IndicesAliasesRequest,
    OpenIndexRequest,
    PutIndexTemplateRequest,
    PutMappingRequest,
    RefreshRequest,
    ResizeRequest,
    ResizeResponse,
    RolloverRequest,
    RolloverResponse,
    ShardsAcknowledgedResponse,
    SyncedFlushRequest,
    SyncedFlushResponse,
    UnfreezeIndexRequest,
    UpdateSettingsRequest,
    ValidateQueryRequest,
    ValidateQueryResponse,
)

ACKNOWLEDGED = {"acknowledged": True}
SHARDS_ACKNOWLEDGED = {"acknowledged": True, "shards_acknowledged": True}
SHARDS = {"_shards": {"total": 2, "successful": 2, "failed": 0}}

# (method, request, expected method, expected endpoint, response body, response type)
PARSED_CASES = [
    (
        "create",
        CreateIndexRequest("flights"),
        "PUT",
        "/flights",
        {**SHARDS_ACKNOWLEDGED, "index": "flights"},
        CreateIndexResponse,
    ),
    (
        "delete",
        DeleteIndexRequest("flights"),
        "DELETE",
        "/flights",
        ACKNOWLEDGED,
        AcknowledgedResponse,
    ),
    (
        "open",
        OpenIndexRequest("flights"),
        "POST",
        "/flights/_open",
        SHARDS_ACKNOWLEDGED,
        ShardsAcknowledgedResponse,
    ),
    (
        "close",
        CloseIndexRequest("flights"),
        "POST",
        "/flights/_close",
        ACKNOWLEDGED,
        AcknowledgedResponse,
    ),
    (
        "get",
        GetIndexRequest("flights"),
        "GET",
        "/flights",
        {"flights": {"aliases": {}, "mappings": {}, "settings": {}}},
        GetIndexResponse,
    ),
    (
        "put_mapping",
        PutMappingRequest("flights", source={"dynamic": "strict"}),
        "PUT",
        "/flights/_mapping",
        ACKNOWLEDGED,
        AcknowledgedResponse,
    ),
    (
        "get_mapping",
        GetMappingsRequest("flights"),
        "GET",
        "/flights/_mapping",
        {"flights": {"mappings": {}}},
        GetMappingsResponse,
    ),
    (
        "get_field_mapping",
        GetFieldMappingsRequest("title", indices="flights"),
        "GET",
        "/flights/_mapping/field/title",
        {"flights": {"mappings": {}}},
        GetFieldMappingsResponse,
    ),
    (
        "update_aliases",
        IndicesAliasesRequest([AliasAction.add("flights", "f")]),
        "POST",
        "/_aliases",
        ACKNOWLEDGED,
        AcknowledgedResponse,
    ),
    (
        "get_alias",
        GetAliasesRequest("f"),
        "GET",
        "/_alias/f",
        {"flights": {"aliases": {"f": {}}}},
        GetAliasesResponse,
    ),
    (
        "refresh",
        RefreshRequest("flights"),
        "POST",
        "/flights/_refresh",
        SHARDS,
        BroadcastResponse,
    ),
    (
        "flush",
        FlushRequest("flights"),
        "POST",
        "/flights/_flush",
        SHARDS,
        BroadcastResponse,
    ),
    (
        "flush_synced",
        SyncedFlushRequest("flights"),
        "POST",
        "/flights/_flush/synced",
        SHARDS,
        SyncedFlushResponse,
    ),
    (
        "force_merge",
        ForceMergeRequest("flights"),
        "POST",
        "/flights/_forcemerge",
        SHARDS,
        BroadcastResponse,
    ),
    (
        "clear_cache",
        ClearIndicesCacheRequest("flights"),
        "POST",
        "/flights/_cache/clear",
        SHARDS,
        BroadcastResponse,
    ),
    (
        "put_settings",
        UpdateSettingsRequest("flights", settings={"index.number_of_replicas": 0}),
        "PUT",
        "/flights/_settings",
        ACKNOWLEDGED,
        AcknowledgedResponse,
    ),
    (
        "get_settings",
        GetSettingsRequest("flights"),
        "GET",
        "/flights/_settings",
        {"flights": {"settings": {}}},
        GetSettingsResponse,
    ),
    (
        "shrink",
        ResizeRequest("flights", "flights-small"),
        "PUT",
        "/flights/_shrink/flights-small",
        {**SHARDS_ACKNOWLEDGED, "index": "flights-small"},
        ResizeResponse,
    ),
    (
        "split",
        ResizeRequest("flights", "flights-big"),
        "PUT",
        "/flights/_split/flights-big",
        {**SHARDS_ACKNOWLEDGED, "index": "flights-big"},
        ResizeResponse,
    ),
    (
        "rollover",
        RolloverRequest("logs", max_docs=10),
        "POST",
        "/logs/_rollover",
        {
            **SHARDS_ACKNOWLEDGED,
            "old_index": "logs-1",
            "new_index": "logs-2",
            "rolled_over": True,
            "dry_run": False,
            "conditions": {"[max_docs: 10]": True},
        },
        RolloverResponse,
    ),
    (
        "put_template",
        PutIndexTemplateRequest("t", index_patterns="logs-*"),
        "PUT",
        "/_template/t",
        ACKNOWLEDGED,
        AcknowledgedResponse,
    ),
    (
        "get_index_template",
        GetIndexTemplatesRequest("t"),
        "GET",
        "/_template/t",
        {"t": {"index_patterns": ["logs-*"]}},
        GetIndexTemplatesResponse,
    ),
    (
        "delete_template",
        DeleteIndexTemplateRequest("t"),
        "DELETE",
        "/_template/t",
        ACKNOWLEDGED,
        AcknowledgedResponse,
    ),
    (
        "validate_query",
        ValidateQueryRequest("flights", query={"match_all": {}}),
        "POST",
        "/flights/_validate/query",
        {**SHARDS, "valid": True},
        ValidateQueryResponse,
    ),
    (
        "analyze",
        AnalyzeRequest.with_global_analyzer("standard", "fox"),
        "POST",
        "/_analyze",
        {"tokens": []},
        AnalyzeResponse,
    ),
    (
        "freeze",
        FreezeIndexRequest("flights"),
        "POST",
        "/flights/_freeze",
        SHARDS_ACKNOWLEDGED,
        ShardsAcknowledgedResponse,
    ),
    (
        "unfreeze",
        UnfreezeIndexRequest("flights"),
        "POST",
        "/flights/_unfreeze",
        SHARDS_ACKNOWLEDGED,
        ShardsAcknowledgedResponse,
    ),
]

PARSED_CASE_IDS = [case[0] for case in PARSED_CASES]
