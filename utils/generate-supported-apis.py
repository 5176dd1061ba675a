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

"""Script that is used to create the compatibility matrix in the documentation"""

import inspect
from pathlib import Path

from elasticsearch.client import IndicesClient as EsIndicesClient

from esindices.indices import IndicesClient

api_docs_dir = Path(__file__).absolute().parent.parent / "docs/source/reference"

# elasticsearch-py names which are spelled differently here
renamed = {
    "forcemerge": "force_merge",
    "get_template": "get_index_template",
}


def main():
    is_supported = []
    total = 0
    supported = 0
    for attr in sorted(dir(EsIndicesClient)):
        if attr.startswith("_"):
            continue
        val = getattr(EsIndicesClient, attr)
        if not (inspect.ismethod(val) or inspect.isfunction(val)):
            continue

        total += 1
        name = renamed.get(attr, attr)
        has_attr = hasattr(IndicesClient, name)
        supported += has_attr
        is_supported.append((f"es.indices.{attr}()", name, has_attr))

    print("IndicesClient", f"{supported} / {total} ({100.0 * supported / total:.1f}%)")

    column1_width = max([len(attr) + 1 for attr, _, _ in is_supported])
    row_delimiter = f"+{'-' * (column1_width + 5)}+------------+"

    lines = [
        row_delimiter,
        f"| elasticsearch-py method{' ' * (column1_width - 20)} | Supported? |",
        row_delimiter.replace("-", "="),
    ]
    for attr, _, has_attr in is_supported:
        lines.append(
            f"| ``{attr}``{' ' * (column1_width - len(attr))}|{' **Yes**    ' if has_attr else ' No         '}|"
        )
        lines.append(row_delimiter)

    print("\n".join(lines))
    with (api_docs_dir / "supported_apis.rst").open(mode="w") as f:
        f.truncate()
        f.write("Supported APIs\n==============\n\n")
        f.write("\n".join(lines) + "\n")


if __name__ == "__main__":
    main()
