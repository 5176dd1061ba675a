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

from collections.abc import Collection as ABCCollection
from typing import Any, Collection, Dict, List, Mapping, Optional, Union
from urllib.parse import quote


def to_list(x: Optional[Union[str, Collection[str]]]) -> List[str]:
    """
    Normalise a name argument that can be a single name, a collection
    of names or None into a list of names.
    """
    if x is None:
        return []
    if isinstance(x, str):
        return [x]
    if isinstance(x, ABCCollection):
        return list(x)
    raise NotImplementedError(f"Could not convert {type(x).__name__} into a list")


def encode_path_part(part: str) -> str:
    # '*' is kept so that wildcard expressions stay readable in the URL,
    # everything else including ',' and '/' is escaped.
    return quote(part, safe="*")


def flatten_settings(
    settings: Mapping[str, Any], prefix: str = ""
) -> Dict[str, Any]:
    """
    Flattens nested settings into dotted keys:

    >>> flatten_settings({"index": {"number_of_shards": "1", "blocks": {"write": "true"}}})
    {'index.number_of_shards': '1', 'index.blocks.write': 'true'}
    """
    flat: Dict[str, Any] = {}
    for key, value in settings.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_settings(value, prefix=f"{name}."))
        else:
            flat[name] = value
    return flat
