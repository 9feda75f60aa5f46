# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Manage DynamoDB tables based on an entity schema."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from loguru import logger

from schema_table.attribute_types import AttributeType, map_type
from schema_table.clients.dynamodb import DynamoDBClient
from schema_table.config import Settings, TableConfig, get_settings
from schema_table.exceptions import SchemaLookupError
from schema_table.models import (
    ID_FIELD,
    AttributeDefinition,
    FieldMetadata,
    KeyEntry,
    KeyType,
    ProvisionedThroughput,
    TableDefinition,
)
from schema_table.schema import EntitySchema, SchemaProvider


class TableService(Protocol):
    """The DynamoDB operations a table needs."""

    async def create_table(self, request: dict[str, Any]) -> dict[str, Any]: ...

    async def delete_table(self, request: dict[str, Any]) -> dict[str, Any]: ...

    async def describe_table(self, request: dict[str, Any]) -> dict[str, Any]: ...

    async def table_exists(self, table_name: str) -> bool: ...

    async def wait_until_exists(self, table_name: str) -> None: ...

    async def wait_until_not_exists(self, table_name: str) -> None: ...


class Table:
    """A DynamoDB table whose definition is derived from an entity schema.

    The hash key is always the id field, declared as a string. An optional
    sort key is taken from the configuration and typed from the schema.
    """

    def __init__(
        self,
        name: str,
        schema: SchemaProvider,
        client: TableService,
        config: TableConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the table.

        Args:
            name: The DynamoDB table name
            schema: Resolves field names to field metadata
            client: Service client used for the table lifecycle calls
            config: Table configuration, or a mapping to validate into one
        """
        self.name = name
        self.schema = schema
        self.client = client
        self.config = (
            config
            if isinstance(config, TableConfig)
            else TableConfig.model_validate(config or {})
        )

    @classmethod
    def from_descriptor(
        cls,
        name: str,
        descriptor: Mapping[str, Any],
        config: TableConfig | Mapping[str, Any] | None = None,
        settings: Settings | None = None,
    ) -> 'Table':
        """Build a table with an EntitySchema and a DynamoDBClient.

        The client still has to be initialized, either directly or by using
        the table as an async context manager.
        """
        table_config = (
            config
            if isinstance(config, TableConfig)
            else TableConfig.model_validate(config or {})
        )
        schema = EntitySchema(descriptor, table_config.schema_options)
        client = DynamoDBClient(
            settings or get_settings(), **table_config.service_options
        )
        return cls(name, schema, client, table_config)

    async def __aenter__(self) -> 'Table':
        """Initialize the client if it supports it."""
        initialize = getattr(self.client, 'initialize', None)
        if initialize is not None:
            await initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Clean up the client if it supports it."""
        cleanup = getattr(self.client, 'cleanup', None)
        if cleanup is not None:
            await cleanup()

    async def create(self) -> dict[str, Any]:
        """Create the DynamoDB table.

        Returns:
            The CreateTable response, describing the new table
        """
        definition = await self.get_table_definition()
        return await self.client.create_table(definition.to_request())

    async def delete(self) -> dict[str, Any]:
        """Delete the DynamoDB table.

        Returns:
            The DeleteTable response, describing the deleted table
        """
        return await self.client.delete_table({'TableName': self.name})

    async def describe(self) -> dict[str, Any]:
        """Get the DescribeTable response for the table."""
        return await self.client.describe_table({'TableName': self.name})

    async def exists(self) -> bool:
        """Check whether the table exists."""
        return await self.client.table_exists(self.name)

    async def wait_until_exists(self) -> None:
        await self.client.wait_until_exists(self.name)

    async def wait_until_not_exists(self) -> None:
        await self.client.wait_until_not_exists(self.name)

    async def get_table_definition(self) -> TableDefinition:
        """Get the CreateTable request for this table.

        Only attributes used in the key schema need a type declaration, so
        the attribute definitions cover the key fields and nothing else.
        """
        key_schema = await self.get_key_schema()
        field_names = [key.name for key in key_schema if key.name != ID_FIELD]
        definitions = await self.get_attribute_definitions(field_names)

        return TableDefinition(
            table_name=self.name,
            attribute_definitions=definitions,
            key_schema=key_schema,
            provisioned_throughput=ProvisionedThroughput(
                read_capacity_units=self.config.read_capacity,
                write_capacity_units=self.config.write_capacity,
            ),
        )

    async def get_attribute_definitions(
        self, names: Sequence[str] = ()
    ) -> list[AttributeDefinition]:
        """Get the AttributeDefinitions for the given fields.

        The id definition is always first. The schema is only consulted
        when there are other fields to define.

        Args:
            names: Field names to define besides id

        Returns:
            The attribute definitions, id first and then in schema order
        """
        definitions = [
            AttributeDefinition(name=ID_FIELD, attribute_type=AttributeType.STRING)
        ]
        if not names:
            return definitions

        fields = await self.schema.get_fields(list(names))
        for name, field in fields.items():
            # Schemas may answer with plain mappings as well as FieldMetadata
            metadata = FieldMetadata.model_validate(field)
            attribute_type = self.map_type(metadata.type)
            definitions.append(
                AttributeDefinition(name=name, attribute_type=attribute_type)
            )
        logger.debug(f'Attribute definitions for {self.name}: {definitions}')
        return definitions

    async def get_hash_key(self) -> KeyEntry:
        """Get the hash key, which is always id."""
        return KeyEntry(name=ID_FIELD, key_type=KeyType.HASH)

    async def get_sort_key(self) -> KeyEntry | None:
        """Get the configured sort key, named as the schema resolves it."""
        sort_key = self.config.sort_key
        if not sort_key:
            return None

        fields = await self.schema.get_fields(sort_key)
        if not fields:
            raise SchemaLookupError([sort_key])
        return KeyEntry(name=next(iter(fields)), key_type=KeyType.RANGE)

    async def get_key_schema(self) -> list[KeyEntry]:
        """Get the KeySchema, hash key first and sort key second if configured."""
        keys = [await self.get_hash_key(), await self.get_sort_key()]
        return [key for key in keys if key is not None]

    @staticmethod
    def map_type(type_name: str) -> AttributeType:
        """Map a schema field type to a DynamoDB attribute type."""
        return map_type(type_name)
