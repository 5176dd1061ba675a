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

import re
from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
    cast,
)

from elasticsearch import AsyncElasticsearch, Elasticsearch

ES_CLIENT_TYPE = Union[str, List[str], Tuple[str, ...], Elasticsearch]
ASYNC_ES_CLIENT_TYPE = Union[str, List[str], Tuple[str, ...], AsyncElasticsearch]

# Values accepted by the 'expand_wildcards' parameter
EXPAND_WILDCARDS_VALUES = ("open", "closed", "hidden", "none", "all")

ACTIVE_SHARD_COUNT_ALL = "all"
ACTIVE_SHARD_COUNT_DEFAULT = "index-setting"


class RequestOptions:
    """
    Options applied to a single request, on top of the options
    the underlying Elasticsearch client was created with.

    Parameters
    ----------
    headers: Mapping[str, str]
        Extra HTTP headers sent with the request.
    request_timeout: float
        Client-side timeout in seconds.
    opaque_id: str
        Value of the 'X-Opaque-Id' header, used to trace requests
        in the Elasticsearch tasks and slow logs.
    """

    def __init__(
        self,
        *,
        headers: Optional[Mapping[str, str]] = None,
        request_timeout: Optional[float] = None,
        opaque_id: Optional[str] = None,
    ):
        self.headers = dict(headers) if headers else None
        self.request_timeout = request_timeout
        self.opaque_id = opaque_id

    def to_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``Elasticsearch.options()``"""
        return {k: v for k, v in self.__dict__.items() if v is not None}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestOptions):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        return f"RequestOptions({self.to_kwargs()!r})"


DEFAULT_OPTIONS = RequestOptions()


class IndicesOptions:
    """
    Controls how index expressions are resolved: whether unavailable
    indices are ignored, whether a wildcard that matches nothing is an
    error, and which index states wildcards expand to.

    Any option left as ``None`` isn't sent and the server default applies.
    """

    def __init__(
        self,
        *,
        ignore_unavailable: Optional[bool] = None,
        allow_no_indices: Optional[bool] = None,
        expand_wildcards: Optional[Union[str, Sequence[str]]] = None,
    ):
        self.ignore_unavailable = ignore_unavailable
        self.allow_no_indices = allow_no_indices
        self.expand_wildcards: Optional[str] = None
        if expand_wildcards is not None:
            if isinstance(expand_wildcards, str):
                values = [v.strip() for v in expand_wildcards.split(",")]
            else:
                values = list(expand_wildcards)
            if not values:
                raise ValueError(
                    "Invalid value for 'expand_wildcards': expected at least one of "
                    f"{', '.join(EXPAND_WILDCARDS_VALUES)}"
                )
            for value in values:
                if value not in EXPAND_WILDCARDS_VALUES:
                    raise ValueError(
                        f"Invalid value for 'expand_wildcards': {value!r}. "
                        f"Expected one of {', '.join(EXPAND_WILDCARDS_VALUES)}"
                    )
            self.expand_wildcards = ",".join(values)

    @classmethod
    def strict_expand_open(cls) -> "IndicesOptions":
        return cls(
            ignore_unavailable=False, allow_no_indices=True, expand_wildcards="open"
        )

    @classmethod
    def lenient_expand_open(cls) -> "IndicesOptions":
        return cls(
            ignore_unavailable=True, allow_no_indices=True, expand_wildcards="open"
        )

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.ignore_unavailable is not None:
            params["ignore_unavailable"] = to_param_value(self.ignore_unavailable)
        if self.allow_no_indices is not None:
            params["allow_no_indices"] = to_param_value(self.allow_no_indices)
        if self.expand_wildcards is not None:
            params["expand_wildcards"] = self.expand_wildcards
        return params

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndicesOptions):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        return (
            f"IndicesOptions(ignore_unavailable={self.ignore_unavailable!r}, "
            f"allow_no_indices={self.allow_no_indices!r}, "
            f"expand_wildcards={self.expand_wildcards!r})"
        )


def active_shard_count(value: Union[int, str, None]) -> Optional[str]:
    """
    Normalises a 'wait_for_active_shards' value. Returns ``None`` when
    nothing should be sent, i.e. for the index-setting default.
    """
    if value is None or value == ACTIVE_SHARD_COUNT_DEFAULT:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid active shard count: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(
                f"Active shard count must be a non-negative integer, got {value}"
            )
        return str(value)
    if value == ACTIVE_SHARD_COUNT_ALL:
        return value
    if value.isdigit():
        return value
    raise ValueError(f"Invalid active shard count: {value!r}")


def to_param_value(value: Any) -> str:
    """Renders a value the way Elasticsearch expects it in the query string"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(to_param_value(v) for v in value)
    return str(value)


def ensure_es_client(es_client: ES_CLIENT_TYPE) -> Elasticsearch:
    if not isinstance(es_client, Elasticsearch):
        es_client = Elasticsearch(es_client)
    return es_client


def ensure_async_es_client(es_client: ASYNC_ES_CLIENT_TYPE) -> AsyncElasticsearch:
    if not isinstance(es_client, AsyncElasticsearch):
        es_client = AsyncElasticsearch(es_client)
    return es_client


def parse_es_version(version: str) -> Tuple[int, int, int]:
    """
    Parse a semantic version string, e.g. '8.5.0' or '7.17.10-SNAPSHOT',
    into a (major, minor, patch) tuple.
    """
    match = re.match(r"^(\d+)\.(\d+)\.(\d+)", version)
    if match is None:
        raise ValueError(
            f"Unable to determine Elasticsearch version. Received: {version}"
        )
    return cast(Tuple[int, int, int], tuple(int(x) for x in match.groups()))


def es_version(es_client: Elasticsearch) -> Tuple[int, int, int]:
    """Tags the current ES client with a cached '_esindices_es_version'
    property if one doesn't exist yet for the current Elasticsearch version.
    """
    esindices_es_version: Tuple[int, int, int]
    if not hasattr(es_client, "_esindices_es_version"):
        version_info = es_client.info()["version"]["number"]
        esindices_es_version = parse_es_version(version_info)
        es_client._esindices_es_version = esindices_es_version  # type: ignore
    else:
        esindices_es_version = es_client._esindices_es_version  # type: ignore
    return esindices_es_version
