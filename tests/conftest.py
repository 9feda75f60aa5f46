# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Shared test fixtures and configuration."""

from unittest.mock import AsyncMock

import boto3
import pytest
from loguru import logger
from moto import mock_aws
from schema_table.config import Settings
from schema_table.schema import EntitySchema


@pytest.fixture
def descriptor():
    """Entity schema descriptor covering every supported type."""
    return {
        'type': 'object',
        'properties': {
            'id': {'type': 'string'},
            'title': {'type': 'string', 'maxLength': 200},
            'ts': {'type': 'number'},
            'count': {'type': 'integer'},
            'published': {'type': 'boolean'},
            'deleted': {'type': 'null'},
            'meta': {'type': 'object'},
            'tags': {'type': 'array', 'items': {'type': 'string'}},
            'subtitle': {'type': ['string', 'null']},
            'untyped': {'description': 'No type declared'},
        },
    }


@pytest.fixture
def schema(descriptor):
    """EntitySchema over the shared descriptor."""
    return EntitySchema(descriptor)


@pytest.fixture
def mock_schema():
    """Schema stand-in with an async get_fields."""
    return AsyncMock()


@pytest.fixture
def mock_client():
    """Service client stand-in with async table operations."""
    return AsyncMock()


@pytest.fixture
def test_settings():
    """Settings with safe defaults, ignoring any .env file."""
    return Settings(
        _env_file=None,
        environment='test',
        log_level='DEBUG',
        aws_region='us-east-1',
        aws_endpoint_url=None,
        aws_profile_name=None,
        dynamodb_endpoint_url='http://localhost:8000',
    )


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(messages.append, level='DEBUG', format='{message}')
    yield messages
    logger.remove(handler_id)


# AWS Mocking Fixtures
@pytest.fixture
def aws_credentials(monkeypatch):
    """Mocked AWS credentials for moto."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')


@pytest.fixture
def dynamodb_client(aws_credentials):
    """Mocked DynamoDB client."""
    with mock_aws():
        yield boto3.client('dynamodb', region_name='us-east-1')
