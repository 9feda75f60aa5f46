# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Configuration for tables and the process environment."""

from functools import lru_cache
from typing import Any

from botocore.config import Config
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from schema_table.schema import SchemaOptions


class TableConfig(BaseModel):
    """Per-table configuration."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra='forbid')

    read_capacity: int = Field(
        default=1,
        ge=1,
        validation_alias=AliasChoices('read_capacity', 'readCapacity'),
    )
    write_capacity: int = Field(
        default=1,
        ge=1,
        validation_alias=AliasChoices('write_capacity', 'writeCapacity'),
    )
    sort_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices('sort_key', 'sortKey', 'sortKeyField'),
    )
    # Passed through to the DynamoDB client (region_name, endpoint_url, ...)
    service_options: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices(
            'service_options',
            'serviceOptions',
            'serviceConnectionOptions',
            'awsConfig',
        ),
    )
    schema_options: SchemaOptions = Field(
        default_factory=SchemaOptions,
        validation_alias=AliasChoices(
            'schema_options', 'schemaOptions', 'schemaConfig'
        ),
    )

    @field_validator('sort_key')
    @classmethod
    def empty_sort_key_is_none(cls, v: str | None) -> str | None:
        """Treat an empty sort key as not configured."""
        return v or None


class AWSConfig(BaseModel):
    """AWS configuration."""

    region: str = Field(default='us-east-1')
    endpoint_url: str | None = Field(default=None)
    profile_name: str | None = Field(default=None)

    def get_boto_config(self, service_name: str) -> Config:
        """Get botocore config for a service."""
        return Config(
            region_name=self.region,
            signature_version='v4',
            retries={'max_attempts': 10, 'mode': 'standard'},
            user_agent_extra=f'schema-table/{service_name}',
        )


class DynamoDBConfig(BaseModel):
    """DynamoDB configuration."""

    endpoint_url: str | None = Field(default=None)


class Settings(BaseSettings):
    """Process settings loaded from environment variables and .env."""

    environment: str = Field(default='dev')
    log_level: str = Field(default='INFO')

    # AWS settings
    aws_region: str = Field(default='us-east-1')
    aws_endpoint_url: str | None = Field(default=None)
    aws_profile_name: str | None = Field(default=None)

    # DynamoDB settings
    dynamodb_endpoint_url: str | None = Field(default=None)

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    def get_aws_config(self) -> AWSConfig:
        """Get AWS configuration."""
        return AWSConfig(
            region=self.aws_region,
            endpoint_url=self.aws_endpoint_url,
            profile_name=self.aws_profile_name,
        )

    def get_dynamodb_config(self) -> DynamoDBConfig:
        """Get DynamoDB configuration."""
        return DynamoDBConfig(
            endpoint_url=self.dynamodb_endpoint_url,
        )

    @property
    def aws(self) -> AWSConfig:
        """Get AWS configuration."""
        return self.get_aws_config()

    @property
    def dynamodb(self) -> DynamoDBConfig:
        """Get DynamoDB configuration."""
        return self.get_dynamodb_config()


@lru_cache
def get_settings() -> Settings:
    """Get settings with caching."""
    return Settings()
