"""Command line entry point for the metadata definition migrator."""

import argparse
import logging
import os
import sys
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from . import __version__
from .models.migration import (
    DEFAULT_API_VERSION,
    ConfigurationError,
    LogLevel,
    MigrationConfig,
    MigrationStatus,
    parse_owner_types,
)
from .orchestrator import MigrationOrchestrator

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "shopify_metadata_migrator"

DESCRIPTION = (
    "Migrates Shopify Metafield and Metaobject definitions from the Source Shopify "
    "site to the Target Shopify site. NOTE: metaobject definitions that have fields "
    "with metaobject references are skipped. Creating those programmatically via the "
    "API requires the ID of the referenced metaobject definition on the target store."
)

OWNER_TYPES_HELP = (
    "Comma separated list of object types (for copying metafields), eg: "
    "PRODUCT,PRODUCTVARIANT,COLLECTION etc. See: "
    "https://shopify.dev/docs/api/admin-graphql/latest/enums/MetafieldOwnerType "
    "for more types that may or may not work with this tool."
)


def build_parser(environ: Optional[Mapping[str, str]] = None) -> argparse.ArgumentParser:
    """Build the argument parser, using ``environ`` for store/token defaults."""
    environ = os.environ if environ is None else environ

    parser = argparse.ArgumentParser(
        prog="shopify-metadata-migrator",
        description=DESCRIPTION,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "-s", "--sourceStore", metavar="<shopify-store>",
        default=environ.get("SHOPIFY_SOURCE_STORE"),
        help="Source Shopify store domain (required)",
    )
    parser.add_argument(
        "-S", "--sourceToken", metavar="<access-token>",
        default=environ.get("SHOPIFY_SOURCE_TOKEN"),
        help="Source Shopify access token (required)",
    )
    parser.add_argument(
        "-t", "--targetStore", metavar="<shopify-store>",
        default=environ.get("SHOPIFY_TARGET_STORE"),
        help="Target Shopify store domain (required)",
    )
    parser.add_argument(
        "-T", "--targetToken", metavar="<access-token>",
        default=environ.get("SHOPIFY_TARGET_TOKEN"),
        help="Target Shopify access token (required)",
    )

    parser.add_argument(
        "-m", "--metafields", action="store_true",
        help="Flag indicating that metafield definitions should be migrated",
    )
    parser.add_argument(
        "-M", "--metaobjects", action="store_true",
        help="Flag indicating that metaobject definitions should be migrated",
    )
    parser.add_argument("-o", "--shopifyObjectTypes", metavar="<types>", help=OWNER_TYPES_HELP)
    parser.add_argument(
        "-a", "--apiVersion", metavar="<version>",
        default=environ.get("SHOPIFY_API_VERSION") or DEFAULT_API_VERSION,
        help=f"Shopify API version to use (default: {DEFAULT_API_VERSION})",
    )

    parser.add_argument("-q", "--quiet", action="store_true", help="Quiet output; only print final summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output; show fields being updated")
    parser.add_argument("-d", "--debug", action="store_true", help="Debug output; include GraphQL internals")

    parser.add_argument(
        "--dryRun", action="store_true",
        help="Fetch and transform definitions without creating anything on the target",
    )
    parser.add_argument("--report", metavar="<path>", help="Write a JSON run report to this path")

    return parser


def configure_logging(level: LogLevel) -> None:
    """Set up console logging for the selected verbosity."""
    logging.basicConfig(
        level=level.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level.logging_level)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def config_from_args(args: argparse.Namespace, log_level: LogLevel) -> MigrationConfig:
    return MigrationConfig(
        source_store=args.sourceStore or "",
        source_token=args.sourceToken or "",
        target_store=args.targetStore or "",
        target_token=args.targetToken or "",
        migrate_metaobjects=args.metaobjects,
        migrate_metafields=args.metafields,
        owner_types=parse_owner_types(args.shopifyObjectTypes),
        api_version=args.apiVersion or DEFAULT_API_VERSION,
        log_level=log_level,
        dry_run=args.dryRun,
        report_path=args.report,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI. Returns the process exit status."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = LogLevel.resolve(quiet=args.quiet, verbose=args.verbose, debug=args.debug)
    configure_logging(log_level)

    config = config_from_args(args, log_level)
    try:
        config.validate()
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 1

    orchestrator = MigrationOrchestrator(config)
    summary = orchestrator.run_migration()

    # The summary is always printed. In quiet mode it is the only output.
    print(summary.render(include_errors=log_level != LogLevel.QUIET))

    return 1 if summary.status == MigrationStatus.FAILED else 0


if __name__ == "__main__":
    sys.exit(main())
