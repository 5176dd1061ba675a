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

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Collection,
    Dict,
    Optional,
    TypeVar,
    Union,
)

from elasticsearch import AsyncElasticsearch, Elasticsearch

from esindices.common import (
    ASYNC_ES_CLIENT_TYPE,
    DEFAULT_OPTIONS,
    ES_CLIENT_TYPE,
    RequestOptions,
    ensure_async_es_client,
    ensure_es_client,
)
from esindices.request import Request

if TYPE_CHECKING:
    from elastic_transport import ApiResponse

    from esindices.indices import AsyncIndicesClient, IndicesClient

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")

CONVERTER_TYPE = Callable[[RequestT], Request]
PARSER_TYPE = Callable[[Any], ResponseT]

NOT_FOUND = 404


def _headers(request: Request) -> Dict[str, str]:
    headers = {"accept": "application/json"}
    if request.body is not None:
        headers["content-type"] = "application/json"
    return headers


def _options_kwargs(
    options: Optional[RequestOptions], ignore_status: Collection[int]
) -> Dict[str, Any]:
    kwargs = (options or DEFAULT_OPTIONS).to_kwargs()
    if ignore_status:
        kwargs["ignore_status"] = tuple(ignore_status)
    return kwargs


def _is_success(response: "ApiResponse[Any]") -> bool:
    return 200 <= response.meta.status < 300


class Client:
    """
    esindices client - implemented as facade over the Elasticsearch
    transport. Every Indices API call goes through ``perform_request``
    so that request dispatch, headers and per-request options are
    handled in one place.

    Parameters
    ----------
    es: Elasticsearch client argument(s)
        - elasticsearch-py parameters or
        - elasticsearch-py instance or
        - esindices.Client instance
    """

    def __init__(self, es: Union[ES_CLIENT_TYPE, "Client"]):
        if isinstance(es, Client):
            self._es: Elasticsearch = es._es
        else:
            self._es = ensure_es_client(es)
        self._indices: Optional["IndicesClient"] = None

    @property
    def es(self) -> Elasticsearch:
        return self._es

    @property
    def indices(self) -> "IndicesClient":
        if self._indices is None:
            from esindices.indices import IndicesClient

            self._indices = IndicesClient(self)
        return self._indices

    def perform_request(
        self,
        request: Request,
        options: Optional[RequestOptions] = None,
        ignore_status: Collection[int] = (),
    ) -> "ApiResponse[Any]":
        kwargs = _options_kwargs(options, ignore_status)
        es = self._es.options(**kwargs) if kwargs else self._es
        logger.debug(
            "%s %s params=%s", request.method, request.endpoint, request.params
        )
        return es.perform_request(  # type: ignore[no-any-return]
            request.method,
            request.endpoint,
            params=request.params or None,
            headers=_headers(request),
            body=request.body,
        )

    def perform_request_and_parse(
        self,
        request: RequestT,
        converter: "CONVERTER_TYPE[RequestT]",
        options: Optional[RequestOptions],
        parser: "PARSER_TYPE[ResponseT]",
        ignore_status: Collection[int] = (),
    ) -> ResponseT:
        response = self.perform_request(converter(request), options, ignore_status)
        return parser(response.body)

    def perform_request_exists(
        self,
        request: RequestT,
        converter: "CONVERTER_TYPE[RequestT]",
        options: Optional[RequestOptions],
    ) -> bool:
        response = self.perform_request(
            converter(request), options, ignore_status=(NOT_FOUND,)
        )
        return _is_success(response)

    def close(self) -> None:
        self._es.close()

    def __repr__(self) -> str:
        return f"<esindices.Client({self._es!r})>"


class AsyncClient:
    """
    asyncio counterpart of :class:`esindices.Client` backed by
    ``AsyncElasticsearch``. Requires the 'async' extra (aiohttp).
    """

    def __init__(self, es: Union[ASYNC_ES_CLIENT_TYPE, "AsyncClient"]):
        if isinstance(es, AsyncClient):
            self._es: AsyncElasticsearch = es._es
        else:
            self._es = ensure_async_es_client(es)
        self._indices: Optional["AsyncIndicesClient"] = None

    @property
    def es(self) -> AsyncElasticsearch:
        return self._es

    @property
    def indices(self) -> "AsyncIndicesClient":
        if self._indices is None:
            from esindices.indices import AsyncIndicesClient

            self._indices = AsyncIndicesClient(self)
        return self._indices

    async def perform_request(
        self,
        request: Request,
        options: Optional[RequestOptions] = None,
        ignore_status: Collection[int] = (),
    ) -> "ApiResponse[Any]":
        kwargs = _options_kwargs(options, ignore_status)
        es = self._es.options(**kwargs) if kwargs else self._es
        logger.debug(
            "%s %s params=%s", request.method, request.endpoint, request.params
        )
        return await es.perform_request(  # type: ignore[no-any-return]
            request.method,
            request.endpoint,
            params=request.params or None,
            headers=_headers(request),
            body=request.body,
        )

    async def perform_request_and_parse(
        self,
        request: RequestT,
        converter: "CONVERTER_TYPE[RequestT]",
        options: Optional[RequestOptions],
        parser: "PARSER_TYPE[ResponseT]",
        ignore_status: Collection[int] = (),
    ) -> ResponseT:
        response = await self.perform_request(
            converter(request), options, ignore_status
        )
        return parser(response.body)

    async def perform_request_exists(
        self,
        request: RequestT,
        converter: "CONVERTER_TYPE[RequestT]",
        options: Optional[RequestOptions],
    ) -> bool:
        response = await self.perform_request(
            converter(request), options, ignore_status=(NOT_FOUND,)
        )
        return _is_success(response)

    async def close(self) -> None:
        await self._es.close()

    def __repr__(self) -> str:
        return f"<esindices.AsyncClient({self._es!r})>"
