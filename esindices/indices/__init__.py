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

from esindices.indices.async_client import AsyncIndicesClient
from esindices.indices.client import IndicesClient
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
from esindices.indices.responses import (
    AcknowledgedResponse,
    AliasMetadata,
    AnalyzeResponse,
    AnalyzeToken,
    BroadcastResponse,
    CreateIndexResponse,
    FieldMappingMetadata,
    GetAliasesResponse,
    GetFieldMappingsResponse,
    GetIndexResponse,
    GetIndexTemplatesResponse,
    GetMappingsResponse,
    GetSettingsResponse,
    IndexSyncedFlushResult,
    IndexTemplateMetadata,
    QueryExplanation,
    ResizeResponse,
    RolloverResponse,
    ShardCounts,
    ShardFailure,
    ShardsAcknowledgedResponse,
    SyncedFlushResponse,
    ValidateQueryResponse,
)

__all__ = [
    "IndicesClient",
    "AsyncIndicesClient",
    # requests
    "Alias",
    "AliasAction",
    "AnalyzeRequest",
    "ClearIndicesCacheRequest",
    "CloseIndexRequest",
    "CreateIndexRequest",
    "DeleteIndexRequest",
    "DeleteIndexTemplateRequest",
    "FlushRequest",
    "ForceMergeRequest",
    "FreezeIndexRequest",
    "GetAliasesRequest",
    "GetFieldMappingsRequest",
    "GetIndexRequest",
    "GetIndexTemplatesRequest",
    "GetMappingsRequest",
    "GetSettingsRequest",
    "IndexTemplatesExistRequest",
    "IndicesAliasesRequest",
    "OpenIndexRequest",
    "PutIndexTemplateRequest",
    "PutMappingRequest",
    "RefreshRequest",
    "ResizeRequest",
    "RolloverRequest",
    "SyncedFlushRequest",
    "UnfreezeIndexRequest",
    "UpdateSettingsRequest",
    "ValidateQueryRequest",
    # responses
    "AcknowledgedResponse",
    "AliasMetadata",
    "AnalyzeResponse",
    "AnalyzeToken",
    "BroadcastResponse",
    "CreateIndexResponse",
    "FieldMappingMetadata",
    "GetAliasesResponse",
    "GetFieldMappingsResponse",
    "GetIndexResponse",
    "GetIndexTemplatesResponse",
    "GetMappingsResponse",
    "GetSettingsResponse",
    "IndexSyncedFlushResult",
    "IndexTemplateMetadata",
    "QueryExplanation",
    "ResizeResponse",
    "RolloverResponse",
    "ShardCounts",
    "ShardFailure",
    "ShardsAcknowledgedResponse",
    "SyncedFlushResponse",
    "ValidateQueryResponse",
]
