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
Runs common index administration tasks against an Elasticsearch cluster
and prints the responses as JSON, e.g.

    esindices --url http://localhost:9200 create flights --settings '{"number_of_shards": 1}'
    esindices --url http://localhost:9200 get-settings flights --name index.number_of_shards
"""
import argparse
import json
import logging
import os
import sys

from elastic_transport.client_utils import DEFAULT
from elasticsearch import (
    ApiError,
    AuthenticationException,
    Elasticsearch,
    TransportError,
)

from esindices.client import Client
from esindices.common import IndicesOptions, es_version
from esindices.indices import (
    AnalyzeRequest,
    CloseIndexRequest,
    CreateIndexRequest,
    DeleteIndexRequest,
    FlushRequest,
    GetAliasesRequest,
    GetIndexRequest,
    GetMappingsRequest,
    GetSettingsRequest,
    IndicesClient,
    OpenIndexRequest,
    RefreshRequest,
)


def json_object(value):
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise argparse.ArgumentTypeError("expected a JSON object")
    return parsed


def get_arg_parser():
    parser = argparse.ArgumentParser(
        prog="esindices", description="Elasticsearch index administration"
    )
    location_args = parser.add_mutually_exclusive_group()
    location_args.add_argument(
        "--url",
        default=os.environ.get("ES_URL"),
        help="An Elasticsearch connection URL, e.g. http://localhost:9200",
    )
    location_args.add_argument(
        "--cloud-id",
        default=os.environ.get("CLOUD_ID"),
        help="Cloud ID as found in the 'Manage Deployment' page of an Elastic Cloud deployment",
    )
    parser.add_argument(
        "-u",
        "--es-username",
        required=False,
        default=os.environ.get("ES_USERNAME"),
        help="Username for Elasticsearch",
    )
    parser.add_argument(
        "-p",
        "--es-password",
        required=False,
        default=os.environ.get("ES_PASSWORD"),
        help="Password for the Elasticsearch user specified with -u/--username",
    )
    parser.add_argument(
        "--es-api-key",
        required=False,
        default=os.environ.get("ES_API_KEY"),
        help="API key for Elasticsearch",
    )
    parser.add_argument(
        "--insecure",
        action="store_false",
        default=True,
        help="Do not verify SSL certificates",
    )
    parser.add_argument(
        "--ca-certs", required=False, default=DEFAULT, help="Path to CA bundle"
    )
    parser.add_argument(
        "--request-timeout",
        type=float,
        default=30,
        help="Timeout in seconds of each request. Default: 30",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log the requests sent to Elasticsearch",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    exists = commands.add_parser("exists", help="Check whether indices exist")
    exists.add_argument("indices", nargs="+")

    create = commands.add_parser("create", help="Create an index")
    create.add_argument("index")
    create.add_argument("--settings", type=json_object, help="Settings as JSON")
    create.add_argument("--mappings", type=json_object, help="Mappings as JSON")
    create.add_argument(
        "--wait-for-active-shards",
        default=None,
        help="'all' or the number of shard copies to wait for",
    )

    for name, description in (
        ("delete", "Delete indices"),
        ("open", "Open closed indices"),
        ("close", "Close indices"),
    ):
        command = commands.add_parser(name, help=description)
        command.add_argument("indices", nargs="+")
        command.add_argument(
            "--ignore-unavailable",
            action="store_true",
            default=None,
            help="Ignore missing or closed indices",
        )

    refresh = commands.add_parser("refresh", help="Refresh indices")
    refresh.add_argument("indices", nargs="*")

    flush = commands.add_parser("flush", help="Flush indices")
    flush.add_argument("indices", nargs="*")
    flush.add_argument("--force", action="store_true", default=None)
    flush.add_argument("--wait-if-ongoing", action="store_true", default=None)

    get_settings = commands.add_parser("get-settings", help="Get index settings")
    get_settings.add_argument("indices", nargs="*")
    get_settings.add_argument(
        "--name",
        action="append",
        dest="names",
        help="Only return this setting, may be repeated",
    )
    get_settings.add_argument(
        "--include-defaults", action="store_true", default=None
    )

    get_mapping = commands.add_parser("get-mapping", help="Get index mappings")
    get_mapping.add_argument("indices", nargs="*")

    get_alias = commands.add_parser("get-alias", help="Get aliases")
    get_alias.add_argument("aliases", nargs="*")
    get_alias.add_argument(
        "--index",
        action="append",
        dest="indices",
        help="Only look at this index, may be repeated",
    )

    analyze = commands.add_parser("analyze", help="Analyze text")
    analyze.add_argument("text", nargs="+")
    analyze.add_argument("--index", help="Index whose analyzers are used")
    analyze_by = analyze.add_mutually_exclusive_group()
    analyze_by.add_argument("--analyzer", help="Analyzer name, e.g. 'standard'")
    analyze_by.add_argument("--field", help="Analyze as this field of --index")
    analyze.add_argument("--explain", action="store_true", default=None)

    return parser


def parse_args(argv=None):
    parser = get_arg_parser()
    args = parser.parse_args(argv)
    if not args.url and not args.cloud_id:
        parser.error("one of the arguments --url --cloud-id is required")
    if args.command == "analyze" and args.field and not args.index:
        parser.error("--field requires --index")
    return args


def get_es_client(cli_args, logger):
    try:
        es_args = {
            "request_timeout": cli_args.request_timeout,
            "verify_certs": cli_args.insecure,
            "ca_certs": cli_args.ca_certs,
        }

        # Deployment location
        if cli_args.url:
            es_args["hosts"] = cli_args.url

        if cli_args.cloud_id:
            es_args["cloud_id"] = cli_args.cloud_id

        # Authentication
        if cli_args.es_api_key:
            es_args["api_key"] = cli_args.es_api_key
        elif cli_args.es_username:
            if not cli_args.es_password:
                logger.error(
                    f"Password for user {cli_args.es_username} was not specified."
                )
                sys.exit(1)

            es_args["basic_auth"] = (cli_args.es_username, cli_args.es_password)

        return Elasticsearch(**es_args)
    except AuthenticationException as e:
        logger.error(e)
        sys.exit(1)


def check_cluster_version(es_client, logger):
    major, minor, patch = es_version(es_client)
    logger.info(f"Connected to Elasticsearch {major}.{minor}.{patch}")
    if major < 7:
        logger.warning(
            f"Elasticsearch version {major} is not supported, requests may be rejected"
        )
    return major, minor, patch


def _indices_options(args):
    if getattr(args, "ignore_unavailable", None) is None:
        return None
    return IndicesOptions(ignore_unavailable=args.ignore_unavailable)


def run_exists(indices: IndicesClient, args):
    return indices.exists(GetIndexRequest(args.indices))


def run_create(indices: IndicesClient, args):
    return indices.create(
        CreateIndexRequest(
            args.index,
            settings=args.settings,
            mappings=args.mappings,
            wait_for_active_shards=args.wait_for_active_shards,
        )
    )


def run_delete(indices: IndicesClient, args):
    return indices.delete(
        DeleteIndexRequest(args.indices, indices_options=_indices_options(args))
    )


def run_open(indices: IndicesClient, args):
    return indices.open(
        OpenIndexRequest(args.indices, indices_options=_indices_options(args))
    )


def run_close(indices: IndicesClient, args):
    return indices.close(
        CloseIndexRequest(args.indices, indices_options=_indices_options(args))
    )


def run_refresh(indices: IndicesClient, args):
    return indices.refresh(RefreshRequest(args.indices))


def run_flush(indices: IndicesClient, args):
    return indices.flush(
        FlushRequest(
            args.indices, force=args.force, wait_if_ongoing=args.wait_if_ongoing
        )
    )


def run_get_settings(indices: IndicesClient, args):
    return indices.get_settings(
        GetSettingsRequest(
            args.indices,
            names=args.names,
            include_defaults=args.include_defaults,
        )
    )


def run_get_mapping(indices: IndicesClient, args):
    return indices.get_mapping(GetMappingsRequest(args.indices))


def run_get_alias(indices: IndicesClient, args):
    return indices.get_alias(GetAliasesRequest(args.aliases, indices=args.indices))


def run_analyze(indices: IndicesClient, args):
    if args.field:
        request = AnalyzeRequest.with_field(args.index, args.field, *args.text)
    elif args.index:
        # without --analyzer the index default analyzer is used
        request = AnalyzeRequest.with_index_analyzer(
            args.index, args.analyzer, *args.text
        )
    else:
        request = AnalyzeRequest.with_global_analyzer(
            args.analyzer or "standard", *args.text
        )
    request.explain = args.explain
    return indices.analyze(request)


COMMANDS = {
    "exists": run_exists,
    "create": run_create,
    "delete": run_delete,
    "open": run_open,
    "close": run_close,
    "refresh": run_refresh,
    "flush": run_flush,
    "get-settings": run_get_settings,
    "get-mapping": run_get_mapping,
    "get-alias": run_get_alias,
    "analyze": run_analyze,
}


def to_json(result):
    # responses are plain objects, nested ones included
    return json.dumps(result, default=vars, indent=2)


def main(argv=None):
    # Configure logging
    logging.basicConfig(format="%(asctime)s %(levelname)s : %(message)s")
    logger = logging.getLogger(__name__)
    logger.setLevel(logging.INFO)

    # Parse arguments
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger("esindices").setLevel(logging.DEBUG)

    # Connect to ES
    logger.info("Establishing connection to Elasticsearch")
    es = get_es_client(args, logger)
    client = Client(es)

    try:
        check_cluster_version(es, logger)
        result = COMMANDS[args.command](client.indices, args)
    except AuthenticationException as e:
        logger.error(e)
        sys.exit(1)
    except ApiError as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        sys.exit(1)
    except TransportError as e:
        logger.error(f"Unable to reach Elasticsearch: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        sys.exit(1)
    finally:
        client.close()

    print(to_json(result))


if __name__ == "__main__":
    main()
