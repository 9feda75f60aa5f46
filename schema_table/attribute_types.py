# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Mapping from schema field types to DynamoDB attribute types."""

from enum import Enum

from schema_table.exceptions import UnsupportedTypeError


class AttributeType(str, Enum):
    """DynamoDB attribute type codes."""

    STRING = 'S'
    NUMBER = 'N'
    BOOLEAN = 'BOOL'
    NULL = 'NULL'
    MAP = 'M'
    LIST = 'L'


# Arrays always map to L; string and number sets (SS, NS) would need the
# schema's item types and are not distinguished here.
TYPE_MAP: dict[str, AttributeType] = {
    'string': AttributeType.STRING,
    'boolean': AttributeType.BOOLEAN,
    'number': AttributeType.NUMBER,
    'integer': AttributeType.NUMBER,
    'null': AttributeType.NULL,
    'object': AttributeType.MAP,
    'array': AttributeType.LIST,
}


def map_type(type_name: str) -> AttributeType:
    """Map a schema field type to its DynamoDB attribute type.

    Args:
        type_name: The type of the field according to the schema

    Returns:
        The matching DynamoDB attribute type

    Raises:
        UnsupportedTypeError: If the type has no DynamoDB equivalent
    """
    if not isinstance(type_name, str) or type_name not in TYPE_MAP:
        raise UnsupportedTypeError(type_name)
    return TYPE_MAP[type_name]
