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

import os
import subprocess
from pathlib import Path

import nox

BASE_DIR = Path(__file__).parent
SOURCE_FILES = ("setup.py", "noxfile.py", "esindices/", "docs/", "utils/", "tests/")

# Whenever type-hints are completed on a file it should
# be added here so that this file will continue to be checked
# by mypy. Errors from other files are ignored.
TYPED_FILES = (
    "esindices/client.py",
    "esindices/common.py",
    "esindices/exceptions.py",
    "esindices/request.py",
    "esindices/utils.py",
    "esindices/indices/async_client.py",
    "esindices/indices/client.py",
    "esindices/indices/converters.py",
    "esindices/indices/requests.py",
    "esindices/indices/responses.py",
)


@nox.session(reuse_venv=True)
def format(session):
    session.install("black", "isort")
    session.run("python", "utils/license-headers.py", "fix", *SOURCE_FILES)
    session.run("black", "--target-version=py38", *SOURCE_FILES)
    session.run("isort", "--profile=black", *SOURCE_FILES)
    lint(session)


@nox.session(reuse_venv=True)
def lint(session):
    session.install("black", "flake8", "mypy", "isort")
    session.install("elasticsearch>=8.3,<9", "aiohttp")
    session.run("python", "utils/license-headers.py", "check", *SOURCE_FILES)
    session.run("black", "--check", "--target-version=py38", *SOURCE_FILES)
    session.run("isort", "--check", "--profile=black", *SOURCE_FILES)
    session.run("flake8", "--ignore=E501,W503,E402,E712,E203", *SOURCE_FILES)

    session.log("mypy --strict esindices/")
    for typed_file in TYPED_FILES:
        if not os.path.isfile(typed_file):
            session.error(f"The file {typed_file!r} couldn't be found")
        process = subprocess.run(
            ["mypy", "--strict", typed_file],
            env=session.env,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
        # Ensure that mypy itself ran successfully
        assert process.returncode in (0, 1)

        errors = []
        for line in process.stdout.decode().split("\n"):
            filepath = line.partition(":")[0]
            if filepath in TYPED_FILES:
                errors.append(line)
        if errors:
            session.error("\n" + "\n".join(sorted(set(errors))))


@nox.session(python=["3.8", "3.9", "3.10", "3.11", "3.12"])
def test(session):
    session.install("-r", "requirements-dev.txt")
    session.install(".[async]")
    session.run(
        "python",
        "-m",
        "pytest",
        "--cov-report",
        "term-missing",
        "--cov=esindices/",
        "--doctest-modules",
        *(session.posargs or ("esindices/", "tests/")),
    )


@nox.session(reuse_venv=True)
def docs(session):
    session.install("-r", "docs/requirements-docs.txt")
    session.install(".")

    session.cd("docs")
    session.run("make", "clean", external=True)
    session.run("make", "html", external=True)
