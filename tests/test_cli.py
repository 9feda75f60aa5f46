# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Tests for the schema-table command line interface."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from botocore.exceptions import ClientError
from schema_table.cli import build_parser, load_descriptor, main


@pytest.fixture
def schema_file(tmp_path, descriptor):
    """Write the shared descriptor to a file."""
    path = tmp_path / 'events.schema.json'
    path.write_text(json.dumps(descriptor), encoding='utf-8')
    return path


@pytest.fixture
def cli_env(test_settings):
    """Patch settings and logging so main leaves global state alone."""
    with (
        patch('schema_table.cli.get_settings', return_value=test_settings),
        patch('schema_table.cli.logger') as mock_logger,
    ):
        yield mock_logger


@pytest.fixture
def service():
    """Patch the DynamoDB client built for each table."""
    instance = AsyncMock()
    with patch(
        'schema_table.table.DynamoDBClient', MagicMock(return_value=instance)
    ) as client_cls:
        yield client_cls


class TestParser:
    """Tests for argument parsing helpers."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default option values."""
        args = build_parser().parse_args(['describe', 'events'])

        assert args.command == 'describe'
        assert args.table_name == 'events'
        assert args.schema is None
        assert args.sort_key is None
        assert args.read_capacity == 1
        assert args.write_capacity == 1
        assert args.wait is False

    @pytest.mark.unit
    def test_unknown_command(self):
        """Test unknown commands are rejected."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(['truncate', 'events'])
        assert exc_info.value.code == 2

    @pytest.mark.unit
    def test_load_descriptor(self, schema_file, descriptor):
        """Test descriptors are read from JSON files."""
        assert load_descriptor(schema_file) == descriptor

    @pytest.mark.unit
    def test_load_descriptor_without_file(self):
        """Test an empty descriptor is used when no file is given."""
        assert load_descriptor(None) == {'type': 'object', 'properties': {}}


class TestMain:
    """Tests for the main entry point."""

    @pytest.mark.unit
    @pytest.mark.parametrize('command', ['create', 'definition'])
    def test_schema_required(self, cli_env, command):
        """Test commands that need field types require a schema."""
        with pytest.raises(SystemExit) as exc_info:
            main([command, 'events'])
        assert exc_info.value.code == 2

    @pytest.mark.unit
    def test_definition(self, cli_env, service, schema_file, capsys):
        """Test the definition command prints the CreateTable request."""
        exit_code = main(
            [
                'definition',
                'events',
                '--schema',
                str(schema_file),
                '--sort-key',
                'ts',
                '--read-capacity',
                '5',
            ]
        )

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {
            'TableName': 'events',
            'AttributeDefinitions': [
                {'AttributeName': 'id', 'AttributeType': 'S'},
                {'AttributeName': 'ts', 'AttributeType': 'N'},
            ],
            'KeySchema': [
                {'AttributeName': 'id', 'KeyType': 'HASH'},
                {'AttributeName': 'ts', 'KeyType': 'RANGE'},
            ],
            'ProvisionedThroughput': {
                'ReadCapacityUnits': 5,
                'WriteCapacityUnits': 1,
            },
        }
        service.return_value.initialize.assert_not_called()
        service.return_value.create_table.assert_not_called()

    @pytest.mark.unit
    def test_create(self, cli_env, service, schema_file, test_settings, capsys):
        """Test create sends the request and prints the response."""
        client = service.return_value
        client.create_table.return_value = {
            'TableDescription': {'TableName': 'events', 'TableStatus': 'CREATING'}
        }

        exit_code = main(
            [
                'create',
                'events',
                '--schema',
                str(schema_file),
                '--region',
                'eu-west-1',
                '--endpoint-url',
                'http://localhost:8000',
                '--wait',
            ]
        )

        assert exit_code == 0
        service.assert_called_once_with(
            test_settings, region_name='eu-west-1', endpoint_url='http://localhost:8000'
        )
        client.initialize.assert_awaited_once()
        client.create_table.assert_awaited_once()
        assert client.create_table.await_args.args[0]['TableName'] == 'events'
        client.wait_until_exists.assert_awaited_once_with('events')
        client.cleanup.assert_awaited_once()
        output = json.loads(capsys.readouterr().out)
        assert output['TableDescription']['TableStatus'] == 'CREATING'

    @pytest.mark.unit
    def test_create_failure(self, cli_env, service, schema_file, capsys):
        """Test failures are logged and give a non-zero exit code."""
        client = service.return_value
        client.create_table.side_effect = ClientError(
            {'Error': {'Code': 'ResourceInUseException', 'Message': 'in use'}},
            'CreateTable',
        )

        exit_code = main(['create', 'events', '--schema', str(schema_file)])

        assert exit_code == 1
        assert capsys.readouterr().out == ''
        cli_env.error.assert_called_once()
        assert 'create events failed' in cli_env.error.call_args.args[0]
        client.cleanup.assert_awaited_once()

    @pytest.mark.unit
    def test_create_unknown_sort_key(self, cli_env, service, schema_file):
        """Test a sort key missing from the schema fails before any request."""
        exit_code = main(
            ['create', 'events', '--schema', str(schema_file), '--sort-key', 'nope']
        )

        assert exit_code == 1
        service.return_value.create_table.assert_not_called()

    @pytest.mark.unit
    def test_delete(self, cli_env, service, capsys):
        """Test delete needs no schema and waits when asked."""
        client = service.return_value
        client.delete_table.return_value = {
            'TableDescription': {'TableName': 'events', 'TableStatus': 'DELETING'}
        }

        exit_code = main(['delete', 'events', '--wait'])

        assert exit_code == 0
        client.delete_table.assert_awaited_once_with({'TableName': 'events'})
        client.wait_until_not_exists.assert_awaited_once_with('events')
        output = json.loads(capsys.readouterr().out)
        assert output['TableDescription']['TableStatus'] == 'DELETING'

    @pytest.mark.unit
    def test_describe(self, cli_env, service, capsys):
        """Test describe prints the DescribeTable response."""
        client = service.return_value
        client.describe_table.return_value = {'Table': {'TableName': 'events'}}

        assert main(['describe', 'events']) == 0
        client.describe_table.assert_awaited_once_with({'TableName': 'events'})
        assert json.loads(capsys.readouterr().out) == {
            'Table': {'TableName': 'events'}
        }
