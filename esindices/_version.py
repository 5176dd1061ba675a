# Licensed to Elasticsearch B.V under one or more agreements.
# Elasticsearch B.V licenses this file to you under the Apache 2.0 License.
# See the LICENSE file in the project root for more information

__title__ = "esindices"
__description__ = "Python client for the Elasticsearch Indices API"
__url__ = "https://github.com/elastic/esindices"
__version__ = "7.5.0"
__author__ = "Elastic Client Library Maintainers"
__author_email__ = "client-libs@elastic.co"
__maintainer__ = "Elastic Client Library Maintainers"
__maintainer_email__ = "client-libs@elastic.co"
