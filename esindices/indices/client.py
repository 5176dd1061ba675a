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
    from esindices.client import Client

NOT_FOUND = (404,)


class IndicesClient:
    """
    Methods of the Elasticsearch Indices API.

    Every method serializes the request, sends it once through the
    owning :class:`esindices.Client` and returns the parsed response.
    Errors raised by the Elasticsearch transport are not caught.

    Examples
    --------
    >>> from esindices import Client
    >>> from esindices.indices import CreateIndexRequest
    >>> client = Client("http://localhost:9200") # doctest: +SKIP
    >>> client.indices.create(CreateIndexRequest("flights")) # doctest: +SKIP
    CreateIndexResponse(acknowledged=True, shards_acknowledged=True, index='flights')
    """

    def __init__(self, client: "Client"):
        self._client = client

    def create(
        self, request: CreateIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> CreateIndexResponse:
        """
        Creates an index.

        See https://www.elastic.co/guide/en/elasticsearch/reference/current/indices-create-index.html
        """
        return self._client.perform_request_and_parse(
            request, converters.create_index, options, CreateIndexResponse.from_dict
        )

    def delete(
        self, request: DeleteIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> AcknowledgedResponse:
        """Deletes one or more indices"""
        return self._client.perform_request_and_parse(
            request, converters.delete_index, options, AcknowledgedResponse.from_dict
        )

    def open(
        self, request: OpenIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> ShardsAcknowledgedResponse:
        """Opens one or more closed indices"""
        return self._client.perform_request_and_parse(
            request,
            converters.open_index,
            options,
            ShardsAcknowledgedResponse.from_dict,
        )

    def close(
        self, request: CloseIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> AcknowledgedResponse:
        """Closes one or more indices"""
        return self._client.perform_request_and_parse(
            request, converters.close_index, options, AcknowledgedResponse.from_dict
        )

    def get(
        self, request: GetIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> GetIndexResponse:
        """
        Retrieves aliases, mappings and settings of one or more indices.
        Default settings are included when ``include_defaults`` is set.
        """
        return self._client.perform_request_and_parse(
            request, converters.get_index, options, GetIndexResponse.from_dict
        )

    def exists(
        self, request: GetIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> bool:
        """
        Checks whether all of the given indices exist.

        Returns
        -------
        bool
            True if the server answered 2xx, False if it answered 404
        """
        return self._client.perform_request_exists(
            request, converters.indices_exist, options
        )

    def put_mapping(
        self, request: PutMappingRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> AcknowledgedResponse:
        """Adds new fields to the mappings of existing indices"""
        return self._client.perform_request_and_parse(
            request, converters.put_mapping, options, AcknowledgedResponse.from_dict
        )

    def get_mapping(
        self, request: GetMappingsRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> GetMappingsResponse:
        return self._client.perform_request_and_parse(
            request, converters.get_mappings, options, GetMappingsResponse.from_dict
        )

    def get_field_mapping(
        self,
        request: GetFieldMappingsRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> GetFieldMappingsResponse:
        return self._client.perform_request_and_parse(
            request,
            converters.get_field_mapping,
            options,
            GetFieldMappingsResponse.from_dict,
        )

    def update_aliases(
        self,
        request: IndicesAliasesRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> AcknowledgedResponse:
        """Applies the alias actions of the request atomically"""
        return self._client.perform_request_and_parse(
            request,
            converters.update_aliases,
            options,
            AcknowledgedResponse.from_dict,
        )

    def get_alias(
        self, request: GetAliasesRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> GetAliasesResponse:
        """
        Retrieves aliases. A 404 is not raised: Elasticsearch answers 404
        with the aliases it found when some of the requested ones are
        missing, which is reported through ``status`` and ``error`` of
        the response.
        """
        return self._client.perform_request_and_parse(
            request,
            converters.get_alias,
            options,
            GetAliasesResponse.from_dict,
            ignore_status=NOT_FOUND,
        )

    def exists_alias(
        self, request: GetAliasesRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> bool:
        return self._client.perform_request_exists(
            request, converters.exists_alias, options
        )

    def refresh(
        self, request: RefreshRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> BroadcastResponse:
        """Makes recent operations on the indices available to search"""
        return self._client.perform_request_and_parse(
            request, converters.refresh, options, BroadcastResponse.from_dict
        )

    def flush(
        self, request: FlushRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> BroadcastResponse:
        return self._client.perform_request_and_parse(
            request, converters.flush, options, BroadcastResponse.from_dict
        )

    def flush_synced(
        self, request: SyncedFlushRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> SyncedFlushResponse:
        """
        Performs a synced flush. Removed from Elasticsearch 8, where
        a regular :meth:`flush` has the same effect.
        """
        return self._client.perform_request_and_parse(
            request, converters.flush_synced, options, SyncedFlushResponse.from_dict
        )

    def force_merge(
        self, request: ForceMergeRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> BroadcastResponse:
        return self._client.perform_request_and_parse(
            request, converters.force_merge, options, BroadcastResponse.from_dict
        )

    def clear_cache(
        self,
        request: ClearIndicesCacheRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> BroadcastResponse:
        return self._client.perform_request_and_parse(
            request, converters.clear_cache, options, BroadcastResponse.from_dict
        )

    def put_settings(
        self,
        request: UpdateSettingsRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> AcknowledgedResponse:
        """Updates dynamic index settings"""
        return self._client.perform_request_and_parse(
            request,
            converters.update_settings,
            options,
            AcknowledgedResponse.from_dict,
        )

    def get_settings(
        self, request: GetSettingsRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> GetSettingsResponse:
        return self._client.perform_request_and_parse(
            request, converters.get_settings, options, GetSettingsResponse.from_dict
        )

    def shrink(
        self, request: ResizeRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> ResizeResponse:
        """Shrinks an index into a new index with fewer primary shards"""
        return self._client.perform_request_and_parse(
            request, converters.shrink, options, ResizeResponse.from_dict
        )

    def split(
        self, request: ResizeRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> ResizeResponse:
        """Splits an index into a new index with more primary shards"""
        return self._client.perform_request_and_parse(
            request, converters.split, options, ResizeResponse.from_dict
        )

    def rollover(
        self, request: RolloverRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> RolloverResponse:
        """
        Rolls an alias over to a new index when any of the conditions
        of the request is met. With ``dry_run`` the conditions are
        evaluated but nothing is changed.
        """
        return self._client.perform_request_and_parse(
            request, converters.rollover, options, RolloverResponse.from_dict
        )

    def put_template(
        self,
        request: PutIndexTemplateRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> AcknowledgedResponse:
        return self._client.perform_request_and_parse(
            request, converters.put_template, options, AcknowledgedResponse.from_dict
        )

    def get_index_template(
        self,
        request: GetIndexTemplatesRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> GetIndexTemplatesResponse:
        return self._client.perform_request_and_parse(
            request,
            converters.get_templates,
            options,
            GetIndexTemplatesResponse.from_dict,
        )

    def exists_template(
        self,
        request: IndexTemplatesExistRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> bool:
        return self._client.perform_request_exists(
            request, converters.templates_exist, options
        )

    def delete_template(
        self,
        request: DeleteIndexTemplateRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> AcknowledgedResponse:
        return self._client.perform_request_and_parse(
            request,
            converters.delete_template,
            options,
            AcknowledgedResponse.from_dict,
        )

    def validate_query(
        self,
        request: ValidateQueryRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> ValidateQueryResponse:
        """Validates a potentially expensive query without executing it"""
        return self._client.perform_request_and_parse(
            request,
            converters.validate_query,
            options,
            ValidateQueryResponse.from_dict,
        )

    def analyze(
        self, request: AnalyzeRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> AnalyzeResponse:
        """
        Runs text through an analysis chain and returns the tokens.

        Parameters
        ----------
        request: AnalyzeRequest
            Built with one of ``AnalyzeRequest.with_global_analyzer``,
            ``with_index_analyzer``, ``with_field``, ``with_normalizer``
            or ``build_custom_analyzer``
        """
        return self._client.perform_request_and_parse(
            request, converters.analyze, options, AnalyzeResponse.from_dict
        )

    def freeze(
        self, request: FreezeIndexRequest, options: RequestOptions = DEFAULT_OPTIONS
    ) -> ShardsAcknowledgedResponse:
        return self._client.perform_request_and_parse(
            request,
            converters.freeze_index,
            options,
            ShardsAcknowledgedResponse.from_dict,
        )

    def unfreeze(
        self,
        request: UnfreezeIndexRequest,
        options: RequestOptions = DEFAULT_OPTIONS,
    ) -> ShardsAcknowledgedResponse:
        return self._client.perform_request_and_parse(
            request,
            converters.unfreeze_index,
            options,
            ShardsAcknowledgedResponse.from_dict,
        )
