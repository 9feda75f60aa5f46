# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Request payload models for DynamoDB table definitions."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from schema_table.attribute_types import AttributeType

# The identity field is always the hash key and is always a string.
ID_FIELD = 'id'


class KeyType(str, Enum):
    """Key roles in a DynamoDB key schema."""

    HASH = 'HASH'
    RANGE = 'RANGE'


class FieldMetadata(BaseModel):
    """Metadata for a single schema field."""

    model_config = ConfigDict(extra='allow')

    type: str


class AttributeDefinition(BaseModel):
    """An entry of the AttributeDefinitions list."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias='AttributeName')
    attribute_type: AttributeType = Field(alias='AttributeType')


class KeyEntry(BaseModel):
    """An entry of the KeySchema list."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias='AttributeName')
    key_type: KeyType = Field(alias='KeyType')


class ProvisionedThroughput(BaseModel):
    """Provisioned read and write capacity."""

    model_config = ConfigDict(populate_by_name=True)

    read_capacity_units: int = Field(default=1, ge=1, alias='ReadCapacityUnits')
    write_capacity_units: int = Field(default=1, ge=1, alias='WriteCapacityUnits')


class TableDefinition(BaseModel):
    """The full CreateTable request for a table."""

    model_config = ConfigDict(populate_by_name=True)

    table_name: str = Field(alias='TableName')
    attribute_definitions: list[AttributeDefinition] = Field(
        alias='AttributeDefinitions'
    )
    key_schema: list[KeyEntry] = Field(alias='KeySchema')
    provisioned_throughput: ProvisionedThroughput = Field(
        default_factory=ProvisionedThroughput, alias='ProvisionedThroughput'
    )

    def to_request(self) -> dict[str, Any]:
        """Get the definition as keyword arguments for DynamoDB CreateTable."""
        return self.model_dump(by_alias=True, mode='json')
