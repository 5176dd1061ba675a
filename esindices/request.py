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

from typing import Any, Dict, List, Mapping, Optional, Union

from esindices.common import IndicesOptions, active_shard_count, to_param_value
from esindices.utils import encode_path_part, to_list

HEAD = "HEAD"
GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"


class Request:
    """
    An HTTP request ready to be sent through the Elasticsearch transport.

    Parameters
    ----------
    method: str
        HTTP method
    endpoint: str
        Path of the request, already encoded, starting with '/'
    params: Dict[str, str]
        Query string parameters
    body: Any
        JSON serializable request body or None
    """

    def __init__(
        self,
        method: str,
        endpoint: str,
        params: Optional[Mapping[str, str]] = None,
        body: Optional[Any] = None,
    ):
        self.method = method
        self.endpoint = endpoint
        self.params: Dict[str, str] = dict(params) if params else {}
        self.body = body

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Request):
            return NotImplemented
        return (
            self.method == other.method
            and self.endpoint == other.endpoint
            and self.params == other.params
            and self.body == other.body
        )

    def __repr__(self) -> str:
        return (
            f"Request(method={self.method!r}, endpoint={self.endpoint!r}, "
            f"params={self.params!r}, body={self.body!r})"
        )


class EndpointBuilder:
    """
    Builds an encoded endpoint out of path parts. Empty parts are
    skipped so that e.g. a refresh without indices targets '/_refresh'.
    """

    def __init__(self) -> None:
        self._parts: List[str] = []

    def add_path_part(self, *parts: Optional[str]) -> "EndpointBuilder":
        for part in parts:
            if part:
                self._parts.append(encode_path_part(part))
        return self

    def add_comma_separated_path_parts(
        self, parts: Optional[Union[str, List[str]]]
    ) -> "EndpointBuilder":
        names = [name for name in to_list(parts) if name]
        if names:
            self._parts.append(",".join(encode_path_part(name) for name in names))
        return self

    def add_path_part_as_is(self, *parts: str) -> "EndpointBuilder":
        for part in parts:
            if part:
                self._parts.append(part)
        return self

    def build(self) -> str:
        return "/" + "/".join(self._parts)


class Params:
    """Collects query string parameters, dropping unset values"""

    def __init__(self) -> None:
        self._params: Dict[str, str] = {}

    def put(self, name: str, value: Any) -> "Params":
        if value is not None and value != "":
            self._params[name] = to_param_value(value)
        return self

    def with_timeout(self, timeout: Optional[str]) -> "Params":
        return self.put("timeout", timeout)

    def with_master_timeout(self, master_timeout: Optional[str]) -> "Params":
        return self.put("master_timeout", master_timeout)

    def with_wait_for_active_shards(
        self, wait_for_active_shards: Union[int, str, None]
    ) -> "Params":
        return self.put(
            "wait_for_active_shards", active_shard_count(wait_for_active_shards)
        )

    def with_indices_options(
        self, indices_options: Optional[IndicesOptions]
    ) -> "Params":
        if indices_options is not None:
            self._params.update(indices_options.to_params())
        return self

    def with_local(self, local: Optional[bool]) -> "Params":
        return self.put("local", local)

    def with_include_defaults(self, include_defaults: Optional[bool]) -> "Params":
        return self.put("include_defaults", include_defaults)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._params)
