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

from typing import TYPE_CHECKING

from esindices.common import DEFAULT_OPTIONS, RequestOptions
from esindices.indices import converters
from esindices.indices.requests import (
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
    AnalyzeResponse,
    BroadcastResponse,
    CreateIndexResponse,
    GetAliasesResponse,
    GetFieldMappingsResponse,
    GetIndexResponse,
    GetIndexTemplatesResponse,
    GetMappingsResponse,
    GetSettingsResponse,
    ResizeResponse,
    RolloverResponse,
    ShardsAcknowledgedResponse,
    SyncedFlushResponse,
    ValidateQueryResponse,
)

if TYPE_CHECKING:
    from esindices.client import AsyncClient

NOT_FOUND = (404,)


class AsyncIndicesClient:
    """
    asyncio variant of :class:`esindices.indices.IndicesClient`. Each method
    is a coroutine that resolves to the parsed response or raises the
    transport error; requests and responses are the same types.
    """

    def __init__(self, client: "AsyncClient"):
        self._client = client

    async def create(
        self, request: CreateIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> CreateIndexResponse:
        return await self._client.perform_request_and_parse(
            request, converters.create_index, options, CreateIndexResponse.from_dict
        )

    async def delete(
        self, request: DeleteIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> AcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request, converters.delete_index, options, AcknowledgedResponse.from_dict
        )

    async def open(
        self, request: OpenIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> ShardsAcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.open_index,
            options,
            ShardsAcknowledgedResponse.from_dict,
        )

    async def close(
        self, request: CloseIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> AcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request, converters.close_index, options, AcknowledgedResponse.from_dict
        )

    async def get(
        self, request: GetIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> GetIndexResponse:
        return await self._client.perform_request_and_parse(
            request, converters.get_index, options, GetIndexResponse.from_dict
        )

    async def exists(
        self, request: GetIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> bool:
        return await self._client.perform_request_exists(
            request, converters.indices_exist, options
        )

    async def put_mapping(
        self, request: PutMappingRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> AcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request, converters.put_mapping, options, AcknowledgedResponse.from_dict
        )

    async def get_mapping(
        self, request: GetMappingsRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> GetMappingsResponse:
        return await self._client.perform_request_and_parse(
            request, converters.get_mappings, options, GetMappingsResponse.from_dict
        )

    async def get_field_mapping(
        self,
        request: GetFieldMappingsRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> GetFieldMappingsResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.get_field_mapping,
            options,
            GetFieldMappingsResponse.from_dict,
        )

    async def update_aliases(
        self,
        request: IndicesAliasesRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> AcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.update_aliases,
            options,
            AcknowledgedResponse.from_dict,
        )

    async def get_alias(
        self, request: GetAliasesRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> GetAliasesResponse:
        """404 is reported through the response, see IndicesClient.get_alias"""
        return await self._client.perform_request_and_parse(
            request,
            converters.get_alias,
            options,
            GetAliasesResponse.from_dict,
            ignore_status=NOT_FOUND,
        )

    async def exists_alias(
        self, request: GetAliasesRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> bool:
        return await self._client.perform_request_exists(
            request, converters.exists_alias, options
        )

    async def refresh(
        self, request: RefreshRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> BroadcastResponse:
        return await self._client.perform_request_and_parse(
            request, converters.refresh, options, BroadcastResponse.from_dict
        )

    async def flush(
        self, request: FlushRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> BroadcastResponse:
        return await self._client.perform_request_and_parse(
            request, converters.flush, options, BroadcastResponse.from_dict
        )

    async def flush_synced(
        self, request: SyncedFlushRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> SyncedFlushResponse:
        return await self._client.perform_request_and_parse(
            request, converters.flush_synced, options, SyncedFlushResponse.from_dict
        )

    async def force_merge(
        self, request: ForceMergeRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> BroadcastResponse:
        return await self._client.perform_request_and_parse(
            request, converters.force_merge, options, BroadcastResponse.from_dict
        )

    async def clear_cache(
        self,
        request: ClearIndicesCacheRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> BroadcastResponse:
        return await self._client.perform_request_and_parse(
            request, converters.clear_cache, options, BroadcastResponse.from_dict
        )

    async def put_settings(
        self,
        request: UpdateSettingsRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> AcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.update_settings,
            options,
            AcknowledgedResponse.from_dict,
        )

    async def get_settings(
        self, request: GetSettingsRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> GetSettingsResponse:
        return await self._client.perform_request_and_parse(
            request, converters.get_settings, options, GetSettingsResponse.from_dict
        )

    async def shrink(
        self, request: ResizeRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> ResizeResponse:
        return await self._client.perform_request_and_parse(
            request, converters.shrink, options, ResizeResponse.from_dict
        )

    async def split(
        self, request: ResizeRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> ResizeResponse:
        return await self._client.perform_request_and_parse(
            request, converters.split, options, ResizeResponse.from_dict
        )

    async def rollover(
        self, request: RolloverRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> RolloverResponse:
        return await self._client.perform_request_and_parse(
            request, converters.rollover, options, RolloverResponse.from_dict
        )

    async def put_template(
        self,
        request: PutIndexTemplateRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> AcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request, converters.put_template, options, AcknowledgedResponse.from_dict
        )

    async def get_index_template(
        self,
        request: GetIndexTemplatesRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> GetIndexTemplatesResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.get_templates,
            options,
            GetIndexTemplatesResponse.from_dict,
        )

    async def exists_template(
        self,
        request: IndexTemplatesExistRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> bool:
        return await self._client.perform_request_exists(
            request, converters.templates_exist, options
        )

    async def delete_template(
        self,
        request: DeleteIndexTemplateRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> AcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.delete_template,
            options,
            AcknowledgedResponse.from_dict,
        )

    async def validate_query(
        self,
        request: ValidateQueryRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> ValidateQueryResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.validate_query,
            options,
            ValidateQueryResponse.from_dict,
        )

    async def analyze(
        self, request: AnalyzeRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> AnalyzeResponse:
        return await self._client.perform_request_and_parse(
            request, converters.analyze, options, AnalyzeResponse.from_dict
        )

    async def freeze(
        self, request: FreezeIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> ShardsAcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.freeze_index,
            options,
            ShardsAcknowledgedResponse.from_dict,
        )

    async def unfreeze(
        self,
        request: UnfreezeIndexRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> ShardsAcknowledgedResponse:
        return await self._client.perform_request_and_parse(
            request,
            converters.unfreeze_index,
            options,
            ShardsAcknowledgedResponse.from_dict,
        )
