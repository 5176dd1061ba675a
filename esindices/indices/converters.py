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

"""
Converters from Indices API request types to HTTP requests. Every
function takes a request object and returns a :class:`esindices.request.Request`.
"""

from typing import Dict

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
from esindices.request import (
    DELETE,
    GET,
    HEAD,
    POST,
    PUT,
    EndpointBuilder,
    Params,
    Request,
)

RESIZE_SHRINK = "_shrink"
RESIZE_SPLIT = "_split"


def delete_index(request: DeleteIndexRequest) -> Request:
    endpoint = EndpointBuilder().add_comma_separated_path_parts(request.indices).build()
    params = (
        Params()
        .with_timeout(request.timeout)
        .with_master_timeout(request.master_timeout)
        .with_indices_options(request.indices_options)
    )
    return Request(DELETE, endpoint, params.as_dict())


def open_index(request: OpenIndexRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_open")
        .build()
    )
    return Request(POST, endpoint, _index_state_params(request))


def close_index(request: CloseIndexRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_close")
        .build()
    )
    return Request(POST, endpoint, _index_state_params(request))


def freeze_index(request: FreezeIndexRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_freeze")
        .build()
    )
    return Request(POST, endpoint, _index_state_params(request))


def unfreeze_index(request: UnfreezeIndexRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_unfreeze")
        .build()
    )
    return Request(POST, endpoint, _index_state_params(request))


def _index_state_params(request: OpenIndexRequest) -> Dict[str, str]:
    return (
        Params()
        .with_timeout(request.timeout)
        .with_master_timeout(request.master_timeout)
        .with_wait_for_active_shards(request.wait_for_active_shards)
        .with_indices_options(request.indices_options)
        .as_dict()
    )


def create_index(request: CreateIndexRequest) -> Request:
    endpoint = EndpointBuilder().add_path_part(request.index).build()
    params = (
        Params()
        .with_timeout(request.timeout)
        .with_master_timeout(request.master_timeout)
        .with_wait_for_active_shards(request.wait_for_active_shards)
    )
    return Request(PUT, endpoint, params.as_dict(), request.to_dict() or None)


def get_index(request: GetIndexRequest) -> Request:
    endpoint = EndpointBuilder().add_comma_separated_path_parts(request.indices).build()
    params = (
        Params()
        .with_indices_options(request.indices_options)
        .with_local(request.local)
        .with_include_defaults(request.include_defaults)
        .put("human", request.human)
        .with_master_timeout(request.master_timeout)
    )
    return Request(GET, endpoint, params.as_dict())


def indices_exist(request: GetIndexRequest) -> Request:
    # A HEAD on '/' would check the cluster, not an index
    if not request.indices:
        raise ValueError("indices are mandatory")
    endpoint = EndpointBuilder().add_comma_separated_path_parts(request.indices).build()
    params = (
        Params()
        .with_indices_options(request.indices_options)
        .with_local(request.local)
        .with_include_defaults(request.include_defaults)
        .put("human", request.human)
    )
    return Request(HEAD, endpoint, params.as_dict())


def put_mapping(request: PutMappingRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_mapping")
        .build()
    )
    params = (
        Params()
        .with_timeout(request.timeout)
        .with_master_timeout(request.master_timeout)
        .with_indices_options(request.indices_options)
    )
    return Request(PUT, endpoint, params.as_dict(), request.to_dict())


def get_mappings(request: GetMappingsRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_mapping")
        .build()
    )
    params = (
        Params()
        .with_master_timeout(request.master_timeout)
        .with_indices_options(request.indices_options)
        .with_local(request.local)
    )
    return Request(GET, endpoint, params.as_dict())


def get_field_mapping(request: GetFieldMappingsRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_mapping", "field")
        .add_comma_separated_path_parts(request.fields)
        .build()
    )
    params = (
        Params()
        .with_indices_options(request.indices_options)
        .with_include_defaults(request.include_defaults)
        .with_local(request.local)
    )
    return Request(GET, endpoint, params.as_dict())


def update_aliases(request: IndicesAliasesRequest) -> Request:
    params = (
        Params()
        .with_timeout(request.timeout)
        .with_master_timeout(request.master_timeout)
    )
    return Request(POST, "/_aliases", params.as_dict(), request.to_dict())


def get_alias(request: GetAliasesRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_alias")
        .add_comma_separated_path_parts(request.aliases)
        .build()
    )
    params = (
        Params().with_indices_options(request.indices_options).with_local(request.local)
    )
    return Request(GET, endpoint, params.as_dict())


def exists_alias(request: GetAliasesRequest) -> Request:
    if not request.indices and not request.aliases:
        raise ValueError("exists_alias requires at least an alias or an index")
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_alias")
        .add_comma_separated_path_parts(request.aliases)
        .build()
    )
    params = (
        Params().with_indices_options(request.indices_options).with_local(request.local)
    )
    return Request(HEAD, endpoint, params.as_dict())


def refresh(request: RefreshRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_refresh")
        .build()
    )
    params = Params().with_indices_options(request.indices_options)
    return Request(POST, endpoint, params.as_dict())


def flush(request: FlushRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_flush")
        .build()
    )
    params = (
        Params()
        .with_indices_options(request.indices_options)
        .put("wait_if_ongoing", request.wait_if_ongoing)
        .put("force", request.force)
    )
    return Request(POST, endpoint, params.as_dict())


def flush_synced(request: SyncedFlushRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_flush", "synced")
        .build()
    )
    params = Params().with_indices_options(request.indices_options)
    return Request(POST, endpoint, params.as_dict())


def force_merge(request: ForceMergeRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_forcemerge")
        .build()
    )
    params = (
        Params()
        .with_indices_options(request.indices_options)
        .put("max_num_segments", request.max_num_segments)
        .put("only_expunge_deletes", request.only_expunge_deletes)
        .put("flush", request.flush)
    )
    return Request(POST, endpoint, params.as_dict())


def clear_cache(request: ClearIndicesCacheRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_cache", "clear")
        .build()
    )
    params = (
        Params()
        .with_indices_options(request.indices_options)
        .put("query", request.query)
        .put("fielddata", request.fielddata)
        .put("request", request.request)
        .put("fields", request.fields or None)
    )
    return Request(POST, endpoint, params.as_dict())


def update_settings(request: UpdateSettingsRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_settings")
        .build()
    )
    params = (
        Params()
        .with_timeout(request.timeout)
        .with_master_timeout(request.master_timeout)
        .with_indices_options(request.indices_options)
        .put("preserve_existing", request.preserve_existing)
    )
    return Request(PUT, endpoint, params.as_dict(), request.to_dict())


def get_settings(request: GetSettingsRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_settings")
        .add_comma_separated_path_parts(request.names)
        .build()
    )
    params = (
        Params()
        .with_indices_options(request.indices_options)
        .with_local(request.local)
        .with_include_defaults(request.include_defaults)
        .with_master_timeout(request.master_timeout)
    )
    return Request(GET, endpoint, params.as_dict())


def shrink(request: ResizeRequest) -> Request:
    return _resize(request, RESIZE_SHRINK)


def split(request: ResizeRequest) -> Request:
    return _resize(request, RESIZE_SPLIT)


def _resize(request: ResizeRequest, resize_type: str) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_path_part(request.source_index)
        .add_path_part_as_is(resize_type)
        .add_path_part(request.target_index)
        .build()
    )
    params = (
        Params()
        .with_timeout(request.timeout)
        .with_master_timeout(request.master_timeout)
        .with_wait_for_active_shards(request.wait_for_active_shards)
    )
    return Request(PUT, endpoint, params.as_dict(), request.to_dict() or None)


def rollover(request: RolloverRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_path_part(request.alias)
        .add_path_part_as_is("_rollover")
        .add_path_part(request.new_index_name)
        .build()
    )
    params = (
        Params()
        .with_timeout(request.timeout)
        .with_master_timeout(request.master_timeout)
        .with_wait_for_active_shards(request.wait_for_active_shards)
        .put("dry_run", True if request.dry_run else None)
    )
    return Request(POST, endpoint, params.as_dict(), request.to_dict() or None)


def put_template(request: PutIndexTemplateRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_path_part_as_is("_template")
        .add_path_part(request.name)
        .build()
    )
    params = (
        Params()
        .with_master_timeout(request.master_timeout)
        .put("create", True if request.create else None)
        .put("cause", request.cause)
    )
    return Request(PUT, endpoint, params.as_dict(), request.to_dict())


def get_templates(request: GetIndexTemplatesRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_path_part_as_is("_template")
        .add_comma_separated_path_parts(request.names)
        .build()
    )
    params = (
        Params().with_local(request.local).with_master_timeout(request.master_timeout)
    )
    return Request(GET, endpoint, params.as_dict())


def templates_exist(request: IndexTemplatesExistRequest) -> Request:
    if not request.names:
        raise ValueError("must provide at least one index template name")
    endpoint = (
        EndpointBuilder()
        .add_path_part_as_is("_template")
        .add_comma_separated_path_parts(request.names)
        .build()
    )
    params = (
        Params().with_local(request.local).with_master_timeout(request.master_timeout)
    )
    return Request(HEAD, endpoint, params.as_dict())


def delete_template(request: DeleteIndexTemplateRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_path_part_as_is("_template")
        .add_path_part(request.name)
        .build()
    )
    params = Params().with_master_timeout(request.master_timeout)
    return Request(DELETE, endpoint, params.as_dict())


def validate_query(request: ValidateQueryRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_comma_separated_path_parts(request.indices)
        .add_path_part_as_is("_validate", "query")
        .build()
    )
    params = (
        Params()
        .with_indices_options(request.indices_options)
        .put("explain", request.explain)
        .put("all_shards", request.all_shards)
        .put("rewrite", request.rewrite)
    )
    body = request.to_dict()
    return Request(POST if body is not None else GET, endpoint, params.as_dict(), body)


def analyze(request: AnalyzeRequest) -> Request:
    endpoint = (
        EndpointBuilder()
        .add_path_part(request.index)
        .add_path_part_as_is("_analyze")
        .build()
    )
    return Request(POST, endpoint, body=request.to_dict())
