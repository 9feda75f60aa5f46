# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Command line interface for managing schema-backed DynamoDB tables."""

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from loguru import logger

from schema_table.config import Settings, TableConfig, get_settings
from schema_table.table import Table

COMMANDS = ('create', 'delete', 'describe', 'definition')

# Commands that need field types from the schema
SCHEMA_COMMANDS = ('create', 'definition')


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog='schema-table',
        description='Manage a DynamoDB table defined by an entity schema',
    )
    parser.add_argument('command', choices=COMMANDS)
    parser.add_argument('table_name', help='DynamoDB table name')
    parser.add_argument(
        '--schema', '-s', type=Path, help='Path to a JSON entity schema file'
    )
    parser.add_argument('--sort-key', help='Schema field to use as the sort key')
    parser.add_argument('--read-capacity', type=int, default=1)
    parser.add_argument('--write-capacity', type=int, default=1)
    parser.add_argument('--region', '-r', help='AWS region')
    parser.add_argument(
        '--endpoint-url', help='DynamoDB endpoint, e.g. for local development'
    )
    parser.add_argument(
        '--wait',
        action='store_true',
        help='Wait until the table exists (create) or is gone (delete)',
    )
    parser.add_argument('--log-level', help='Log level (default from LOG_LEVEL)')
    return parser


def load_descriptor(path: Path | None) -> dict[str, Any]:
    """Load a schema descriptor, or an empty one when no file is given."""
    if path is None:
        return {'type': 'object', 'properties': {}}
    with path.open(encoding='utf-8') as f:
        return json.load(f)


def build_table(args: argparse.Namespace, settings: Settings) -> Table:
    """Build a table from parsed arguments."""
    service_options: dict[str, Any] = {}
    if args.region:
        service_options['region_name'] = args.region
    if args.endpoint_url:
        service_options['endpoint_url'] = args.endpoint_url

    config = TableConfig(
        read_capacity=args.read_capacity,
        write_capacity=args.write_capacity,
        sort_key=args.sort_key,
        service_options=service_options,
    )
    return Table.from_descriptor(
        args.table_name, load_descriptor(args.schema), config, settings
    )


async def run(args: argparse.Namespace, settings: Settings) -> Any:
    """Run a command and return what should be printed."""
    table = build_table(args, settings)

    if args.command == 'definition':
        definition = await table.get_table_definition()
        return definition.to_request()

    async with table:
        if args.command == 'create':
            response = await table.create()
            if args.wait:
                await table.wait_until_exists()
        elif args.command == 'delete':
            response = await table.delete()
            if args.wait:
                await table.wait_until_not_exists()
        else:
            response = await table.describe()
    return response


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the schema-table command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command in SCHEMA_COMMANDS and args.schema is None:
        parser.error(f'--schema is required for {args.command}')

    settings = get_settings()
    logger.remove()
    logger.add(sys.stderr, level=(args.log_level or settings.log_level).upper())

    try:
        result = asyncio.run(run(args, settings))
    except Exception as e:
        logger.error(f'{args.command} {args.table_name} failed: {e}')
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == '__main__':
    sys.exit(main())
