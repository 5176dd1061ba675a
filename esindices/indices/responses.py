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
Response types for the Indices API. Each type has a ``from_dict``
constructor that parses the decoded JSON body returned by Elasticsearch
and raises :class:`esindices.exceptions.ResponseParseError` when the
body doesn't have the expected shape. Unknown fields are ignored.
"""

from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from esindices.exceptions import ResponseParseError
from esindices.utils import flatten_settings

T = TypeVar("T")
ResponseT = TypeVar("ResponseT", bound="Response")

_TYPE_NAMES = {
    bool: "boolean",
    int: "integer",
    str: "string",
    list: "array",
    dict: "object",
}


def _type_name(types: Union[type, Tuple[type, ...]]) -> str:
    if isinstance(types, tuple):
        return " or ".join(_TYPE_NAMES.get(t, t.__name__) for t in types)
    return _TYPE_NAMES.get(types, types.__name__)


def _check_type(value: Any, types: Union[type, Tuple[type, ...]]) -> bool:
    # bool is a subclass of int, don't let 'true' pass as a number
    if isinstance(value, bool) and types is int:
        return False
    if types is dict:
        return isinstance(value, Mapping)
    if types is list:
        return isinstance(value, Sequence) and not isinstance(value, str)
    return isinstance(value, types)


def _as_object(body: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(body, Mapping):
        raise ResponseParseError(
            f"Failed to parse {what}: expected an object, got {type(body).__name__}",
            body,
        )
    return body


def _required(
    body: Mapping[str, Any], key: str, types: Union[type, Tuple[type, ...]], what: str
) -> Any:
    if key not in body:
        raise ResponseParseError(
            f"Failed to parse {what}: required field [{key}] is missing", body
        )
    value = body[key]
    if not _check_type(value, types):
        raise ResponseParseError(
            f"Failed to parse {what}: field [{key}] must be {_type_name(types)}, "
            f"got {type(value).__name__}",
            body,
        )
    return value


def _optional(
    body: Mapping[str, Any],
    key: str,
    types: Union[type, Tuple[type, ...]],
    what: str,
    default: Any = None,
) -> Any:
    if body.get(key) is None:
        return default
    return _required(body, key, types, what)


class Response:
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{type(self).__name__}({fields})"


class AcknowledgedResponse(Response):
    """Response of requests that change the cluster state"""

    def __init__(self, acknowledged: bool):
        self.acknowledged = acknowledged

    @classmethod
    def from_dict(cls: Type[ResponseT], body: Any) -> ResponseT:
        what = cls.__name__
        body = _as_object(body, what)
        return cls(acknowledged=_required(body, "acknowledged", bool, what))


class ShardsAcknowledgedResponse(AcknowledgedResponse):
    """
    Acknowledged response that also reports whether the requisite number
    of shard copies were started before timing out.
    """

    def __init__(self, acknowledged: bool, shards_acknowledged: bool):
        super().__init__(acknowledged)
        self.shards_acknowledged = shards_acknowledged

    @classmethod
    def from_dict(cls: Type[ResponseT], body: Any) -> ResponseT:
        what = cls.__name__
        body = _as_object(body, what)
        return cls(
            acknowledged=_required(body, "acknowledged", bool, what),
            shards_acknowledged=_required(body, "shards_acknowledged", bool, what),
        )


class CreateIndexResponse(ShardsAcknowledgedResponse):
    def __init__(self, acknowledged: bool, shards_acknowledged: bool, index: str):
        super().__init__(acknowledged, shards_acknowledged)
        self.index = index

    @classmethod
    def from_dict(cls: Type[ResponseT], body: Any) -> ResponseT:
        what = cls.__name__
        body = _as_object(body, what)
        return cls(
            acknowledged=_required(body, "acknowledged", bool, what),
            shards_acknowledged=_required(body, "shards_acknowledged", bool, what),
            index=_required(body, "index", str, what),
        )


class ResizeResponse(CreateIndexResponse):
    """Response of a shrink or split, ``index`` is the target index"""


class RolloverResponse(ShardsAcknowledgedResponse):
    def __init__(
        self,
        acknowledged: bool,
        shards_acknowledged: bool,
        old_index: str,
        new_index: str,
        rolled_over: bool,
        dry_run: bool,
        conditions: Dict[str, bool],
    ):
        super().__init__(acknowledged, shards_acknowledged)
        self.old_index = old_index
        self.new_index = new_index
        self.rolled_over = rolled_over
        self.dry_run = dry_run
        self.conditions = conditions

    @classmethod
    def from_dict(cls: Type[ResponseT], body: Any) -> ResponseT:
        what = cls.__name__
        body = _as_object(body, what)
        conditions = _optional(body, "conditions", dict, what, default={})
        return cls(
            acknowledged=_required(body, "acknowledged", bool, what),
            shards_acknowledged=_required(body, "shards_acknowledged", bool, what),
            old_index=_required(body, "old_index", str, what),
            new_index=_required(body, "new_index", str, what),
            rolled_over=_required(body, "rolled_over", bool, what),
            dry_run=_required(body, "dry_run", bool, what),
            conditions={name: bool(met) for name, met in conditions.items()},
        )


class ShardFailure(Response):
    """A failure of an operation on a single shard"""

    def __init__(
        self,
        index: Optional[str],
        shard: int,
        status: Optional[str],
        reason: Any,
    ):
        self.index = index
        self.shard = shard
        self.status = status
        self.reason = reason

    @classmethod
    def from_dict(cls, body: Any) -> "ShardFailure":
        what = "shard failure"
        body = _as_object(body, what)
        return cls(
            index=_optional(body, "index", str, what),
            shard=_optional(body, "shard", int, what, default=-1),
            status=_optional(body, "status", str, what),
            reason=body.get("reason"),
        )


def _parse_shards_header(
    body: Mapping[str, Any], what: str
) -> Tuple[int, int, int, List[ShardFailure]]:
    shards = _as_object(_required(body, "_shards", dict, what), what)
    return (
        _required(shards, "total", int, what),
        _required(shards, "successful", int, what),
        _required(shards, "failed", int, what),
        [
            ShardFailure.from_dict(failure)
            for failure in _optional(shards, "failures", list, what, default=[])
        ],
    )


class BroadcastResponse(Response):
    """
    Per-shard outcome summary of operations broadcast to all shards
    of the targeted indices: refresh, flush, force merge and clear cache.
    """

    def __init__(
        self,
        total_shards: int,
        successful_shards: int,
        failed_shards: int,
        shard_failures: Optional[List[ShardFailure]] = None,
    ):
        self.total_shards = total_shards
        self.successful_shards = successful_shards
        self.failed_shards = failed_shards
        self.shard_failures = shard_failures or []

    @classmethod
    def from_dict(cls: Type[ResponseT], body: Any) -> ResponseT:
        what = cls.__name__
        body = _as_object(body, what)
        total, successful, failed, failures = _parse_shards_header(body, what)
        return cls(
            total_shards=total,
            successful_shards=successful,
            failed_shards=failed,
            shard_failures=failures,
        )


class ShardCounts(Response):
    def __init__(self, total: int, successful: int, failed: int):
        self.total = total
        self.successful = successful
        self.failed = failed

    @classmethod
    def from_dict(cls, body: Any, what: str = "shard counts") -> "ShardCounts":
        body = _as_object(body, what)
        return cls(
            total=_required(body, "total", int, what),
            successful=_required(body, "successful", int, what),
            failed=_required(body, "failed", int, what),
        )


class IndexSyncedFlushResult(ShardCounts):
    def __init__(
        self,
        index: str,
        total: int,
        successful: int,
        failed: int,
        failures: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(total, successful, failed)
        self.index = index
        self.failures = failures or []


class SyncedFlushResponse(Response):
    """
    Synced flush results. ``total_counts`` sums the shard copies over all
    indices, ``index_results`` holds the counts and failures per index.
    """

    def __init__(
        self,
        total_counts: ShardCounts,
        index_results: Dict[str, IndexSyncedFlushResult],
    ):
        self.total_counts = total_counts
        self.index_results = index_results

    @classmethod
    def from_dict(cls, body: Any) -> "SyncedFlushResponse":
        what = cls.__name__
        body = _as_object(body, what)
        total_counts = ShardCounts.from_dict(
            _required(body, "_shards", dict, what), what
        )
        index_results = {}
        for index, result in body.items():
            if index == "_shards":
                continue
            counts = ShardCounts.from_dict(result, what)
            index_results[index] = IndexSyncedFlushResult(
                index=index,
                total=counts.total,
                successful=counts.successful,
                failed=counts.failed,
                failures=list(_optional(result, "failures", list, what, default=[])),
            )
        return cls(total_counts=total_counts, index_results=index_results)


class AliasMetadata(Response):
    def __init__(
        self,
        alias: str,
        filter: Optional[Dict[str, Any]] = None,
        index_routing: Optional[str] = None,
        search_routing: Optional[str] = None,
        is_write_index: Optional[bool] = None,
        is_hidden: Optional[bool] = None,
    ):
        self.alias = alias
        self.filter = filter
        self.index_routing = index_routing
        self.search_routing = search_routing
        self.is_write_index = is_write_index
        self.is_hidden = is_hidden

    @classmethod
    def from_dict(cls, alias: str, body: Any) -> "AliasMetadata":
        what = f"alias [{alias}]"
        body = _as_object(body, what)
        return cls(
            alias=alias,
            filter=_optional(body, "filter", dict, what),
            index_routing=_optional(body, "index_routing", str, what),
            search_routing=_optional(body, "search_routing", str, what),
            is_write_index=_optional(body, "is_write_index", bool, what),
            is_hidden=_optional(body, "is_hidden", bool, what),
        )


def _parse_aliases(body: Any, what: str) -> List[AliasMetadata]:
    return [
        AliasMetadata.from_dict(alias, definition)
        for alias, definition in _as_object(body, what).items()
    ]


class GetIndexResponse(Response):
    """
    Aliases, mappings and settings of the requested indices. Settings
    are flattened into dotted keys, e.g. 'index.number_of_shards'.
    """

    def __init__(
        self,
        indices: List[str],
        mappings: Dict[str, Dict[str, Any]],
        aliases: Dict[str, List[AliasMetadata]],
        settings: Dict[str, Dict[str, Any]],
        default_settings: Dict[str, Dict[str, Any]],
    ):
        self.indices = indices
        self.mappings = mappings
        self.aliases = aliases
        self.settings = settings
        self.default_settings = default_settings

    def get_setting(self, index: str, name: str) -> Optional[Any]:
        """Value of a setting, falling back to the defaults if they were requested"""
        value = self.settings.get(index, {}).get(name)
        if value is None:
            value = self.default_settings.get(index, {}).get(name)
        return value

    @classmethod
    def from_dict(cls, body: Any) -> "GetIndexResponse":
        what = cls.__name__
        body = _as_object(body, what)
        indices = []
        mappings = {}
        aliases = {}
        settings = {}
        default_settings = {}
        for index, index_body in body.items():
            index_body = _as_object(index_body, f"{what} index [{index}]")
            indices.append(index)
            mappings[index] = dict(
                _optional(index_body, "mappings", dict, what, default={})
            )
            aliases[index] = _parse_aliases(
                _optional(index_body, "aliases", dict, what, default={}), what
            )
            settings[index] = flatten_settings(
                _optional(index_body, "settings", dict, what, default={})
            )
            if "defaults" in index_body:
                default_settings[index] = flatten_settings(
                    _required(index_body, "defaults", dict, what)
                )
        return cls(
            indices=indices,
            mappings=mappings,
            aliases=aliases,
            settings=settings,
            default_settings=default_settings,
        )


class GetMappingsResponse(Response):
    def __init__(self, mappings: Dict[str, Dict[str, Any]]):
        self.mappings = mappings

    @classmethod
    def from_dict(cls, body: Any) -> "GetMappingsResponse":
        what = cls.__name__
        body = _as_object(body, what)
        return cls(
            mappings={
                index: dict(
                    _required(
                        _as_object(index_body, what), "mappings", dict, what
                    )
                )
                for index, index_body in body.items()
            }
        )


class FieldMappingMetadata(Response):
    def __init__(self, full_name: str, source: Dict[str, Any]):
        self.full_name = full_name
        self.source = source

    @classmethod
    def from_dict(cls, body: Any) -> "FieldMappingMetadata":
        what = "field mapping"
        body = _as_object(body, what)
        return cls(
            full_name=_required(body, "full_name", str, what),
            source=dict(_optional(body, "mapping", dict, what, default={})),
        )


class GetFieldMappingsResponse(Response):
    """Field mappings per index, then per requested field"""

    def __init__(self, mappings: Dict[str, Dict[str, FieldMappingMetadata]]):
        self.mappings = mappings

    def field_mappings(self, index: str, field: str) -> Optional[FieldMappingMetadata]:
        return self.mappings.get(index, {}).get(field)

    @classmethod
    def from_dict(cls, body: Any) -> "GetFieldMappingsResponse":
        what = cls.__name__
        body = _as_object(body, what)
        mappings = {}
        for index, index_body in body.items():
            fields = _optional(
                _as_object(index_body, what), "mappings", dict, what, default={}
            )
            mappings[index] = {
                field: FieldMappingMetadata.from_dict(field_body)
                for field, field_body in fields.items()
            }
        return cls(mappings=mappings)


class GetSettingsResponse(Response):
    """
    Settings per index as flattened dotted keys. Default settings
    are only present when the request asked for them.
    """

    def __init__(
        self,
        index_to_settings: Dict[str, Dict[str, Any]],
        index_to_default_settings: Dict[str, Dict[str, Any]],
    ):
        self.index_to_settings = index_to_settings
        self.index_to_default_settings = index_to_default_settings

    def get_setting_value(self, index: str, name: str) -> Optional[Any]:
        value = self.index_to_settings.get(index, {}).get(name)
        if value is None:
            value = self.index_to_default_settings.get(index, {}).get(name)
        return value

    @classmethod
    def from_dict(cls, body: Any) -> "GetSettingsResponse":
        what = cls.__name__
        body = _as_object(body, what)
        index_to_settings = {}
        index_to_default_settings = {}
        for index, index_body in body.items():
            index_body = _as_object(index_body, what)
            index_to_settings[index] = flatten_settings(
                _optional(index_body, "settings", dict, what, default={})
            )
            if "defaults" in index_body:
                index_to_default_settings[index] = flatten_settings(
                    _required(index_body, "defaults", dict, what)
                )
        return cls(
            index_to_settings=index_to_settings,
            index_to_default_settings=index_to_default_settings,
        )


class GetAliasesResponse(Response):
    """
    Aliases per index. When some of the requested aliases don't exist
    Elasticsearch answers 404 with the aliases it did find; ``status``
    is then 404 and ``error`` names the missing aliases. A 404 caused by
    a missing index is reported through ``exception`` instead.
    """

    def __init__(
        self,
        status: int,
        aliases: Dict[str, List[AliasMetadata]],
        error: Optional[str] = None,
        exception: Optional[Dict[str, Any]] = None,
    ):
        self.status = status
        self.aliases = aliases
        self.error = error
        self.exception = exception

    @classmethod
    def from_dict(cls, body: Any) -> "GetAliasesResponse":
        what = cls.__name__
        body = _as_object(body, what)
        status = _optional(body, "status", int, what, default=200)
        error = None
        exception = None
        raw_error = body.get("error")
        if isinstance(raw_error, str):
            error = raw_error
        elif isinstance(raw_error, Mapping):
            exception = dict(raw_error)
        elif raw_error is not None:
            raise ResponseParseError(
                f"Failed to parse {what}: field [error] must be string or object",
                body,
            )
        aliases = {}
        for index, index_body in body.items():
            if index in ("status", "error"):
                continue
            aliases[index] = _parse_aliases(
                _optional(
                    _as_object(index_body, what), "aliases", dict, what, default={}
                ),
                what,
            )
        return cls(status=status, aliases=aliases, error=error, exception=exception)


class IndexTemplateMetadata(Response):
    def __init__(
        self,
        name: str,
        index_patterns: List[str],
        order: int,
        version: Optional[int],
        settings: Dict[str, Any],
        mappings: Optional[Dict[str, Any]],
        aliases: List[AliasMetadata],
    ):
        self.name = name
        self.index_patterns = index_patterns
        self.order = order
        self.version = version
        self.settings = settings
        self.mappings = mappings
        self.aliases = aliases

    @classmethod
    def from_dict(cls, name: str, body: Any) -> "IndexTemplateMetadata":
        what = f"index template [{name}]"
        body = _as_object(body, what)
        return cls(
            name=name,
            index_patterns=list(_required(body, "index_patterns", list, what)),
            order=_optional(body, "order", int, what, default=0),
            version=_optional(body, "version", int, what),
            settings=flatten_settings(
                _optional(body, "settings", dict, what, default={})
            ),
            mappings=_optional(body, "mappings", dict, what) or None,
            aliases=_parse_aliases(
                _optional(body, "aliases", dict, what, default={}), what
            ),
        )


class GetIndexTemplatesResponse(Response):
    def __init__(self, index_templates: List[IndexTemplateMetadata]):
        self.index_templates = index_templates

    @classmethod
    def from_dict(cls, body: Any) -> "GetIndexTemplatesResponse":
        body = _as_object(body, cls.__name__)
        return cls(
            index_templates=[
                IndexTemplateMetadata.from_dict(name, template)
                for name, template in body.items()
            ]
        )


class QueryExplanation(Response):
    RANDOM_SHARD = -1

    def __init__(
        self,
        index: Optional[str],
        shard: int,
        valid: bool,
        explanation: Optional[str] = None,
        error: Optional[str] = None,
    ):
        self.index = index
        self.shard = shard
        self.valid = valid
        self.explanation = explanation
        self.error = error

    @classmethod
    def from_dict(cls, body: Any) -> "QueryExplanation":
        what = "query explanation"
        body = _as_object(body, what)
        return cls(
            index=_optional(body, "index", str, what),
            shard=_optional(body, "shard", int, what, default=cls.RANDOM_SHARD),
            valid=_required(body, "valid", bool, what),
            explanation=_optional(body, "explanation", str, what),
            error=_optional(body, "error", str, what),
        )


class ValidateQueryResponse(BroadcastResponse):
    def __init__(
        self,
        valid: bool,
        total_shards: int = 0,
        successful_shards: int = 0,
        failed_shards: int = 0,
        shard_failures: Optional[List[ShardFailure]] = None,
        query_explanations: Optional[List[QueryExplanation]] = None,
    ):
        super().__init__(total_shards, successful_shards, failed_shards, shard_failures)
        self.valid = valid
        self.query_explanations = query_explanations or []

    @classmethod
    def from_dict(cls, body: Any) -> "ValidateQueryResponse":
        what = cls.__name__
        body = _as_object(body, what)
        total, successful, failed, failures = 0, 0, 0, []
        if "_shards" in body:
            total, successful, failed, failures = _parse_shards_header(body, what)
        return cls(
            valid=_required(body, "valid", bool, what),
            total_shards=total,
            successful_shards=successful,
            failed_shards=failed,
            shard_failures=failures,
            query_explanations=[
                QueryExplanation.from_dict(explanation)
                for explanation in _optional(
                    body, "explanations", list, what, default=[]
                )
            ],
        )


class AnalyzeToken(Response):
    _KNOWN_FIELDS = (
        "token",
        "start_offset",
        "end_offset",
        "type",
        "position",
        "positionLength",
    )

    def __init__(
        self,
        term: str,
        position: int,
        start_offset: int,
        end_offset: int,
        type: Optional[str] = None,
        position_length: int = 1,
        attributes: Optional[Dict[str, Any]] = None,
    ):
        self.term = term
        self.position = position
        self.start_offset = start_offset
        self.end_offset = end_offset
        self.type = type
        self.position_length = position_length
        self.attributes = attributes or {}

    @classmethod
    def from_dict(cls, body: Any) -> "AnalyzeToken":
        what = "analyze token"
        body = _as_object(body, what)
        return cls(
            term=_required(body, "token", str, what),
            position=_required(body, "position", int, what),
            start_offset=_required(body, "start_offset", int, what),
            end_offset=_required(body, "end_offset", int, what),
            type=_optional(body, "type", str, what),
            position_length=_optional(body, "positionLength", int, what, default=1),
            attributes={
                k: v for k, v in body.items() if k not in cls._KNOWN_FIELDS
            },
        )


class AnalyzeResponse(Response):
    """
    Tokens produced by the analysis chain. When the request asked
    for an explanation the per-component breakdown is in ``detail``
    and ``tokens`` is empty.
    """

    def __init__(
        self,
        tokens: List[AnalyzeToken],
        detail: Optional[Dict[str, Any]] = None,
    ):
        self.tokens = tokens
        self.detail = detail

    @property
    def terms(self) -> List[str]:
        return [token.term for token in self.tokens]

    @classmethod
    def from_dict(cls, body: Any) -> "AnalyzeResponse":
        what = cls.__name__
        body = _as_object(body, what)
        if "tokens" not in body and "detail" not in body:
            raise ResponseParseError(
                f"Failed to parse {what}: expected [tokens] or [detail]", body
            )
        return cls(
            tokens=[
                AnalyzeToken.from_dict(token)
                for token in _optional(body, "tokens", list, what, default=[])
            ],
            detail=_optional(body, "detail", dict, what),
        )
