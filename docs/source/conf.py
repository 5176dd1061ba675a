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

import datetime
import os
import sys

sys.path.insert(0, os.path.abspath("../.."))

# -- Project information -----------------------------------------------------

project = "esindices"
copyright = f"{datetime.date.today().year}, Elasticsearch BV"

# The full version, including alpha/beta/rc tags
import esindices

version = str(esindices._version.__version__)

release = version

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.extlinks",
    "numpydoc",
    "sphinx.ext.todo",
]

doctest_global_setup = """
try:
    import esindices
except ImportError:
    esindices = None
"""

extlinks = {
    "es_api_docs": (
        "https://www.elastic.co/guide/en/elasticsearch/reference/current/%s.html",
        "",
    ),
}

numpydoc_attributes_as_param_list = False
numpydoc_show_class_members = False

# Add any paths that contain templates here, relative to this directory.
templates_path = ["_templates"]

exclude_patterns = []

# -- Options for HTML output -------------------------------------------------

html_theme = "pydata_sphinx_theme"
html_theme_options = {
    "external_links": [],
    "github_url": "https://github.com/elastic/esindices",
}

master_doc = "index"
