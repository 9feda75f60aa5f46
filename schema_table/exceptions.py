# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Exceptions raised while building or managing tables."""

from collections.abc import Sequence


class SchemaTableError(Exception):
    """Base class for schema-table errors."""


class UnsupportedTypeError(SchemaTableError, ValueError):
    """Raised when a schema field type has no DynamoDB attribute type."""

    def __init__(self, type_name: object) -> None:
        """Initialize with the offending type name."""
        self.type_name = type_name
        super().__init__(f'Unsupported type: {type_name}')


class SchemaLookupError(SchemaTableError, KeyError):
    """Raised by the schema when field names cannot be resolved."""

    def __init__(self, names: Sequence[str], reason: str = 'Unknown field') -> None:
        """Initialize with the names that failed to resolve."""
        self.names = list(names)
        self.reason = reason
        message = f"{reason}: {', '.join(self.names)}" if self.names else reason
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])
