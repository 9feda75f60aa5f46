# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Create and delete DynamoDB tables described by an entity schema."""

from schema_table.attribute_types import AttributeType, map_type
from schema_table.config import Settings, TableConfig, get_settings
from schema_table.exceptions import (
    SchemaLookupError,
    SchemaTableError,
    UnsupportedTypeError,
)
from schema_table.models import (
    AttributeDefinition,
    FieldMetadata,
    KeyEntry,
    KeyType,
    ProvisionedThroughput,
    TableDefinition,
)
from schema_table.schema import EntitySchema, SchemaOptions, SchemaProvider
from schema_table.table import Table, TableService
from schema_table.version import get_version

__version__ = get_version()

__all__ = [
    'AttributeDefinition',
    'AttributeType',
    'EntitySchema',
    'FieldMetadata',
    'KeyEntry',
    'KeyType',
    'ProvisionedThroughput',
    'SchemaLookupError',
    'SchemaOptions',
    'SchemaProvider',
    'SchemaTableError',
    'Settings',
    'Table',
    'TableConfig',
    'TableDefinition',
    'TableService',
    'UnsupportedTypeError',
    'get_settings',
    'map_type',
]
