# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""DynamoDB client implementation."""

from typing import Any

from aiobotocore.session import AioSession
from botocore.exceptions import ClientError
from loguru import logger

from schema_table.clients.base import BaseClient
from schema_table.config import Settings
from schema_table.utils import get_function_name


class DynamoDBClient(BaseClient):
    """DynamoDB client with async table lifecycle operations.

    Requests are passed to DynamoDB as-is and responses are returned
    unmodified. Failures are logged and re-raised; nothing is retried here
    beyond what the botocore config does.
    """

    _client: Any | None = None

    def __init__(self, settings: Settings, **client_options: Any) -> None:
        """Initialize the client.

        Args:
            settings: Process settings providing region, endpoint and botocore config
            **client_options: Passed to create_client, overriding settings
        """
        super().__init__(settings)
        self.client_options = client_options

    async def initialize(self) -> None:
        """Initialize DynamoDB client."""
        with self.monitor_operation(get_function_name()):
            session = AioSession(profile=self.settings.aws.profile_name)

            # Prefer the DynamoDB endpoint, then the general AWS endpoint
            options: dict[str, Any] = {
                'region_name': self.settings.aws.region,
                'endpoint_url': (
                    self.settings.dynamodb.endpoint_url
                    or self.settings.aws.endpoint_url
                ),
                'config': self.settings.aws.get_boto_config('dynamodb'),
                **self.client_options,
            }
            logger.info(
                f"Initializing DynamoDB in {options['region_name']} "
                f"with endpoint: {options['endpoint_url']}"
            )

            self._client = await session.create_client(
                'dynamodb', **options
            ).__aenter__()
            logger.info('DynamoDB client initialized')

    async def cleanup(self) -> None:
        """Cleanup DynamoDB client."""
        if self._client:
            with self.monitor_operation(get_function_name()):
                await self._client.__aexit__(None, None, None)
                self._client = None
                logger.info('DynamoDB client closed')

    def _require_client(self) -> Any:
        if not self._client:
            raise ValueError('DynamoDB client not initialized')
        return self._client

    async def create_table(self, request: dict[str, Any]) -> dict[str, Any]:
        """Create a table from a CreateTable request."""
        client = self._require_client()

        with self.monitor_operation(get_function_name()):
            logger.info(f"Creating table {request.get('TableName')}")
            return await client.create_table(**request)

    async def delete_table(self, request: dict[str, Any]) -> dict[str, Any]:
        """Delete a table from a DeleteTable request."""
        client = self._require_client()

        with self.monitor_operation(get_function_name()):
            logger.info(f"Deleting table {request.get('TableName')}")
            return await client.delete_table(**request)

    async def describe_table(self, request: dict[str, Any]) -> dict[str, Any]:
        """Describe a table from a DescribeTable request."""
        client = self._require_client()

        with self.monitor_operation(get_function_name()):
            return await client.describe_table(**request)

    async def table_exists(self, table_name: str) -> bool:
        """Check if a table exists."""
        client = self._require_client()

        with self.monitor_operation(get_function_name()):
            try:
                await client.describe_table(TableName=table_name)
                return True
            except ClientError as e:
                if e.response['Error']['Code'] == 'ResourceNotFoundException':
                    return False
                raise

    async def wait_until_exists(self, table_name: str) -> None:
        """Wait until a table exists."""
        client = self._require_client()

        with self.monitor_operation(get_function_name()):
            waiter = client.get_waiter('table_exists')
            await waiter.wait(TableName=table_name)
            logger.info(f'Table {table_name} exists')

    async def wait_until_not_exists(self, table_name: str) -> None:
        """Wait until a table no longer exists."""
        client = self._require_client()

        with self.monitor_operation(get_function_name()):
            waiter = client.get_waiter('table_not_exists')
            await waiter.wait(TableName=table_name)
            logger.info(f'Table {table_name} no longer exists')
