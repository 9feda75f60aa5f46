# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Service clients."""

from schema_table.clients.base import BaseClient, OperationMonitor
from schema_table.clients.dynamodb import DynamoDBClient

__all__ = ['BaseClient', 'DynamoDBClient', 'OperationMonitor']
