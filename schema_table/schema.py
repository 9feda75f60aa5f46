# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Entity schema access for table generation."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from schema_table.exceptions import SchemaLookupError
from schema_table.models import FieldMetadata


class SchemaProvider(Protocol):
    """Anything that can resolve field names to field metadata."""

    async def get_fields(
        self, names: str | Sequence[str]
    ) -> dict[str, FieldMetadata | Mapping[str, Any]]:
        """Resolve one or more field names."""
        ...


class SchemaOptions(BaseModel):
    """Options for resolving field names against a schema."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    case_sensitive: bool = Field(default=True)
    aliases: dict[str, str] = Field(default_factory=dict)


class EntitySchema:
    """Field lookups over a JSON Schema style entity descriptor.

    The descriptor is a mapping with a properties object, each property
    declaring its type. Lookups return the declared property name, which
    may differ from the requested one when aliases or case-insensitive
    matching are enabled.
    """

    def __init__(
        self,
        descriptor: Mapping[str, Any],
        options: SchemaOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the schema.

        Args:
            descriptor: JSON Schema style mapping with a properties object
            options: Name resolution options

        Raises:
            SchemaLookupError: If the descriptor has no properties mapping
        """
        if isinstance(options, SchemaOptions):
            self.options = options
        else:
            self.options = SchemaOptions.model_validate(options or {})

        properties = (
            descriptor.get('properties') if isinstance(descriptor, Mapping) else None
        )
        if not isinstance(properties, Mapping):
            raise SchemaLookupError([], 'Schema descriptor has no properties')

        self.descriptor = descriptor
        self._properties: Mapping[str, Any] = properties
        self._folded: dict[str, list[str]] = {}
        for name in properties:
            self._folded.setdefault(name.casefold(), []).append(name)

    @property
    def field_names(self) -> list[str]:
        """Get the declared field names."""
        return list(self._properties)

    def resolve_name(self, name: str) -> str | None:
        """Get the declared name for a requested field name, if any.

        An exact match always wins. A case-insensitive match that fits more
        than one declared name raises SchemaLookupError.
        """
        if name in self._properties:
            return name

        target = self.options.aliases.get(name)
        if target is not None and target in self._properties:
            return target

        if not self.options.case_sensitive:
            matches = self._folded.get(name.casefold(), [])
            if len(matches) > 1:
                raise SchemaLookupError(
                    [name], f"Ambiguous field name (matches {', '.join(matches)})"
                )
            return matches[0] if matches else None
        return None

    async def get_fields(
        self, names: str | Sequence[str]
    ) -> dict[str, FieldMetadata]:
        """Get metadata for one or more fields.

        Args:
            names: A field name or a sequence of field names

        Returns:
            Mapping of declared field name to metadata, in request order

        Raises:
            SchemaLookupError: If any name is unknown or has no declared type
        """
        requested = [names] if isinstance(names, str) else list(names)

        resolved = {name: self.resolve_name(name) for name in requested}
        unknown = [name for name, found in resolved.items() if found is None]
        if unknown:
            raise SchemaLookupError(unknown)

        return {
            found: self._field_metadata(found)
            for found in resolved.values()
            if found is not None
        }

    def _field_metadata(self, name: str) -> FieldMetadata:
        """Build metadata for a declared field."""
        prop = self._properties[name]
        declared = prop.get('type') if isinstance(prop, Mapping) else None

        # ['string', 'null'] describes a nullable string
        if isinstance(declared, list):
            non_null = [t for t in declared if t != 'null']
            declared = non_null[0] if non_null else 'null'

        if not isinstance(declared, str):
            raise SchemaLookupError([name], 'Field has no declared type')

        return FieldMetadata.model_validate({**prop, 'type': declared})
