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

from esindices._version import (  # noqa: F401
    __title__,
    __description__,
    __url__,
    __version__,
    __author__,
    __author_email__,
    __maintainer__,
    __maintainer_email__,
)
from esindices.common import DEFAULT_OPTIONS, IndicesOptions, RequestOptions
from esindices.client import AsyncClient, Client
from esindices.exceptions import ResponseParseError

__all__ = [
    "Client",
    "AsyncClient",
    "RequestOptions",
    "IndicesOptions",
    "DEFAULT_OPTIONS",
    "ResponseParseError",
]
